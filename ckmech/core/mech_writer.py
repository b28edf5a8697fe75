# -*- coding: utf-8 -*-
"""Writes an interpreted mechanism back out in fixed-column Chemkin format.
"""

# Standard libraries
import logging

# Local imports
from .. import utils
from .reaction_types import reaction_type, falloff_form, rate_coeff_type
from .thermo_record import tag_column, coeff_width

__all__ = ['write_mech', 'format_thermo_record', 'format_equation',
           'format_aux_lines']

names_per_line = 6


def _num(val):
    """Shortest string that reads back as the same float."""
    return repr(float(val))


def _tagged(line, tag):
    return line.ljust(tag_column)[:tag_column] + str(tag)


def _element_slot(symbol, number):
    if len(symbol) > 2:
        raise ValueError('element symbol {} does not fit in a thermo '
                         'record.'.format(symbol))
    count = int(number) if utils.is_integer(number) else number
    return '{:<2}{:>3}'.format(symbol, count)[:5]


def format_thermo_record(sp):
    """Returns the 4 lines of the NASA polynomial record of a species.

    Parameters
    ----------
    sp : `Species`
        Species with thermo data.

    Returns
    -------
    list of str
        Record lines, each 80 columns wide with its line number in the
        last column.

    Raises
    ------
    ValueError
        If the species name and id, or its composition, do not fit in the
        fixed columns.

    """
    head = ' '.join([sp.name, sp.id]) if sp.id else sp.name
    if len(head) > 24:
        raise ValueError('name of species {} is too long for a thermo '
                         'record.'.format(sp.name))
    if len(sp.elem) > 5:
        raise ValueError('species {} has more than 5 elements.'
                         ''.format(sp.name))

    slots = [_element_slot(e.name, e.number) for e in sp.elem]
    slots += [' ' * 5] * (5 - len(slots))

    line1 = '{:<24}{}{:1}{:>10.3f}{:>10.3f}{:>8.2f}{}'.format(
        head, ''.join(slots[:4]), sp.phase[:1], sp.Trange[0],
        sp.Trange[2], sp.Trange[1], slots[4])

    coeffs = list(sp.hi) + list(sp.lo)
    lines = [_tagged(line1, 1)]
    for i, start in enumerate(range(0, 14, 5)):
        text = ''.join('{:{}.8E}'.format(c, coeff_width)
                       for c in coeffs[start:start + 5])
        lines.append(_tagged(text, i + 2))
    return lines


def _side(species, marker):
    terms = []
    for sp in species:
        if sp.number == 1.0:
            terms.append(sp.name)
        elif utils.is_integer(sp.number):
            terms.append('{}{}'.format(int(sp.number), sp.name))
        else:
            terms.append('{}{}'.format(_num(sp.number), sp.name))
    text = ' + '.join(terms)
    if marker:
        text += marker
    return text


def format_equation(rxn):
    """Returns the reaction line, equation with markers and Arrhenius data.
    """
    marker = ''
    if rxn.is_falloff:
        marker = ' (+{})'.format(rxn.thd_body)
    elif rxn.is_thd:
        marker = ' + M'
    arrow = ' <=> ' if rxn.rev else ' => '
    equation = _side(rxn.reac, marker) + arrow + _side(rxn.prod, marker)
    return '{:<48} {} {} {}'.format(equation, _num(rxn.kf.A),
                                   _num(rxn.kf.n), _num(rxn.kf.E))


def _slash(name, values):
    return '{} /{}/'.format(name, ' '.join(_num(v) for v in values))


def _group_text(group, element_names):
    return '-'.join('{}{}'.format(name, n) for name, n in
                    zip(element_names, group) if n)


def _group_side(species, element_names):
    return '+'.join(''.join('(' + _group_text(g, element_names) + ')'
                            for g in sp.groups)
                    for sp in species)


def format_aux_lines(rxn, element_names=None):
    """Returns the auxiliary data lines of a reaction.

    Parameters
    ----------
    rxn : `Reaction`
        Reaction to write.
    element_names : list of str, optional
        Declared element names; needed to write group metadata.

    Returns
    -------
    list of str
        Auxiliary lines, and the group metadata line (if any).

    """
    lines = []
    if rxn.kf_aux is not None:
        key = 'HIGH' if rxn.type == reaction_type.chem else 'LOW'
        k = rxn.kf_aux
        lines.append(_slash(key, [k.A, k.n, k.E]))
    if rxn.falloff_type == falloff_form.troe:
        lines.append(_slash('TROE', rxn.falloff_par))
    elif rxn.falloff_type == falloff_form.sri:
        lines.append(_slash('SRI', rxn.falloff_par))

    if rxn.kf.type == rate_coeff_type.landau_teller:
        lines.append(_slash('LT', [rxn.kf.B, rxn.kf.C]))
    if rxn.krev is not None:
        if rxn.rev:
            lines.append(_slash('REV', [rxn.krev.A, rxn.krev.n,
                                        rxn.krev.E]))
        if rxn.krev.type == rate_coeff_type.landau_teller:
            lines.append(_slash('RLT', [rxn.krev.B, rxn.krev.C]))

    if rxn.thd_body_eff:
        lines.append(' '.join('{}/{}/'.format(name, _num(eff)) for name, eff
                              in rxn.thd_body_eff.items()))

    for name, values in rxn.other_aux.items():
        lines.append(_slash(name, values) if values else name)

    if rxn.dup:
        lines.append('DUPLICATE')

    # group metadata can only be written with one group slot per species
    species = rxn.reac + rxn.prod
    if element_names and any(sp.groups for sp in species):
        if all(sp.number == 1.0 for sp in species):
            lines.append('!% ' + _group_side(rxn.reac, element_names) +
                         ' = ' + _group_side(rxn.prod, element_names))
        else:
            logging.getLogger(__name__).warning(
                'groups of reaction %d not written.', rxn.number)
    return lines


def _write_names(stream, keyword, names):
    stream.write(keyword + '\n')
    for i in range(0, len(names), names_per_line):
        stream.write(' '.join(names[i:i + names_per_line]) + '\n')
    stream.write('END\n')


def write_mech(stream, elems, specs, reacs, units=None):
    """Writes a mechanism in Chemkin format.

    Species without thermo data get no THERMO record, and the ALL option
    is only written when every species has one. Atomic weights are written
    only for elements whose weight was given in the input.

    Parameters
    ----------
    stream : file-like
        Text stream to write to.
    elems : list of `Element`
        Elements in mechanism.
    specs : list of `Species`
        Species in mechanism.
    reacs : list of `Reaction`
        Reactions in mechanism.
    units : `ReactionUnits`, optional
        Units of the Arrhenius coefficients.

    """

    _write_names(stream, 'ELEMENTS',
                 [el.name if el.weight_from_db else
                  '{}/{}/'.format(el.name, _num(el.weight)) for el in elems])
    _write_names(stream, 'SPECIES', [sp.name for sp in specs])

    with_thermo = [sp for sp in specs if sp.valid]
    if with_thermo:
        # ALL requires a record for every species
        if len(with_thermo) == len(specs):
            temps = [min(sp.tlow for sp in with_thermo),
                     with_thermo[0].tmid,
                     max(sp.thigh for sp in with_thermo)]
            stream.write('THERMO ALL\n')
            stream.write('{:10.3f}{:10.3f}{:10.3f}\n'.format(*temps))
        else:
            stream.write('THERMO\n')
        for sp in with_thermo:
            for line in format_thermo_record(sp):
                stream.write(line + '\n')
        stream.write('END\n')

    header = 'REACTIONS'
    if units is not None:
        header += ' {} {}'.format(units.act_energy, units.quantity)
    stream.write(header + '\n')
    element_names = [el.name for el in elems]
    for rxn in reacs:
        for comment in rxn.comment:
            # '!%' at the start of a line would make it a metadata line
            stream.write('!' + comment if not comment.startswith('%')
                         else '! ' + comment)
            stream.write('\n')
        stream.write(format_equation(rxn) + '\n')
        for line in format_aux_lines(rxn, element_names):
            if not line.startswith('!'):
                line = '    ' + line
            stream.write(line + '\n')
    stream.write('END\n')
