# -*- coding: utf-8 -*-
"""Auxiliary reaction data and group-additivity metadata.

Auxiliary lines follow a reaction line and hold slash-delimited
``KEYWORD/data/`` blocks, e.g.::

    LOW / 1.04E+26 -2.76 1600.0 /
    TROE / 0.562 91.0 5836.0 8552.0 /
    H2/2.0/ H2O/6.0/ CH4/2.0/

"""

# Local imports
from .. import utils
from . import chem_utilities as chem
from .reaction_types import reaction_type, falloff_form, rate_coeff_type

__all__ = ['parse_aux_line', 'aux_keywords', 'parse_group_string',
           'get_groups']


def _read_numbers(reader, name, data):
    try:
        return utils.read_str_num(data)
    except ValueError:
        raise reader.error('illegal number in {} data: {}'.format(
                           name, data.strip()))


def _read_arrhenius(reader, name, data, desc):
    pars = _read_numbers(reader, name, data)
    if len(pars) != 3:
        raise reader.error('expected 3 {}Arrhenius parameters'.format(desc))
    return chem.RateCoeff(*pars)


def _read_landau_teller(reader, name, data):
    pars = _read_numbers(reader, name, data)
    if len(pars) != 2:
        raise reader.error('expected 2 Landau-Teller parameters '
                           'following ' + name)
    return pars


def _low(reader, rxn, name, data):
    # low-pressure rate coefficient for falloff reaction
    rxn.type = reaction_type.fall
    rxn.kf_aux = _read_arrhenius(reader, name, data, 'low-pressure ')


def _high(reader, rxn, name, data):
    # high-pressure rate coefficient for chemically activated reaction
    rxn.type = reaction_type.chem
    rxn.kf_aux = _read_arrhenius(reader, name, data, 'high-pressure ')


def _falloff(form, other):
    def set_falloff(reader, rxn, name, data):
        if rxn.falloff_type == other:
            raise reader.error('cannot specify both SRI and TROE')
        rxn.falloff_type = form
        rxn.falloff_par = _read_numbers(reader, name, data)
    return set_falloff


def _rev(reader, rxn, name, data):
    if not rxn.rev:
        raise reader.error('reverse rate parameters can only be '
                           'specified for reversible reactions')
    krev = _read_arrhenius(reader, name, data, '')
    if rxn.krev is None:
        rxn.krev = krev
    else:
        # RLT already given
        rxn.krev.A, rxn.krev.n, rxn.krev.E = krev.A, krev.n, krev.E


def _lt(reader, rxn, name, data):
    rxn.kf.B, rxn.kf.C = _read_landau_teller(reader, name, data)
    rxn.kf.type = rate_coeff_type.landau_teller


def _rlt(reader, rxn, name, data):
    pars = _read_landau_teller(reader, name, data)
    if rxn.krev is None:
        rxn.krev = chem.RateCoeff()
    rxn.krev.B, rxn.krev.C = pars
    rxn.krev.type = rate_coeff_type.landau_teller


def _dup(reader, rxn, name, data):
    rxn.dup = True


aux_keywords = {
    'LOW': (_low, True),
    'HIGH': (_high, True),
    'TROE': (_falloff(falloff_form.troe, falloff_form.sri), True),
    'SRI': (_falloff(falloff_form.sri, falloff_form.troe), True),
    'REV': (_rev, True),
    'LT': (_lt, True),
    'RLT': (_rlt, True),
    'DUP': (_dup, False),
    'DUPLICATE': (_dup, False),
}
"""dict: keyword -> (handler, whether slash-delimited data is required)"""


def _efficiency(reader, rxn, name, data):
    eff = _read_numbers(reader, name, data)
    if len(eff) != 1:
        raise reader.error('expected a single third-body efficiency '
                           'for species ' + name)

    if rxn.thd_body == name or rxn.thd_body == 'M':
        rxn.thd_body_eff[name] = eff[0]
    elif rxn.thd_body is None:
        reader.log.error('Error in reaction %d: third-body collision '
                         'efficiencies cannot be specified for this '
                         'reaction type.', rxn.number)
        raise reader.error('third-body efficiency error')
    else:
        reader.log.error('Reaction %d: illegal species in enhanced '
                         'efficiency specification. Species = %s, '
                         'third body = %s', rxn.number, name, rxn.thd_body)
        raise reader.error('third-body efficiency error')


def _apply(reader, rxn, name, has_data, data, species_names, seen):
    """Applies one auxiliary keyword; returns `False` at 'END'."""
    key = name.upper()
    if key == 'END':
        reader.put_line(name, '')
        return False

    # check for duplicate keyword
    tag = key if key in aux_keywords else name
    if tag in seen:
        raise reader.error('duplicate auxiliary data keyword ' + name)
    seen.add(tag)

    if key in aux_keywords:
        handler, needs_data = aux_keywords[key]
    elif name in species_names:
        handler, needs_data = _efficiency, True
    else:
        rxn.other_aux[name] = [utils.atof(tok) for tok in
                               utils.get_tokens(data)]
        return True

    if needs_data and not has_data:
        raise reader.error(name + ' keyword must be followed by '
                           'slash-delimited data.')
    handler(reader, rxn, name, data)
    return True


def parse_aux_line(reader, rxn, line, species_names, seen):
    """Interprets an auxiliary data line of a reaction.

    Parameters
    ----------
    reader : `CKLineReader`
        Line source, used for error reporting and to put back an 'END'.
    rxn : `Reaction`
        Reaction the data applies to; modified in place.
    line : str
        Auxiliary data line (comment removed).
    species_names : set of str
        Declared species names.
    seen : set of str
        Keywords already given for ``rxn``; updated.

    Raises
    ------
    CKSyntaxError
        On a repeated keyword, missing or malformed data, or data not
        allowed for the reaction.

    """

    while line.strip():
        try:
            has_data, name, data, rest = utils.extract_slash_data(line)
        except ValueError as e:
            raise reader.error(str(e))

        if has_data:
            # keywords without data may precede one with data,
            # e.g. 'DUP LOW/1.0 0.0 0.0/'
            toks = utils.get_tokens(line[:line.find('/')])
            if not toks:
                raise reader.error('missing keyword before slash-delimited '
                                   'data')
            items = [(tok, False, '') for tok in toks[:-1]]
            items.append((toks[-1], True, data))
        else:
            items = [(tok, False, '') for tok in utils.get_tokens(line)]

        for name, has_data, data in items:
            if not _apply(reader, rxn, name, has_data, data, species_names,
                          seen):
                return
        line = rest


def parse_group_string(group, element_names):
    """Parses a single group, e.g. 'C-H-3' for a methyl group.

    Parameters
    ----------
    group : str
        Element symbols separated by '-'. A count either follows the symbol
        ('H3') or stands alone after it ('H-3'); a missing count is 1.
    element_names : list of str
        Declared element names.

    Returns
    -------
    list of int or None
        Number of atoms of each element (in ``element_names`` order), or
        ``None`` if the group contains an undeclared element.

    """
    upper_names = [e.upper() for e in element_names]
    result = [0] * len(element_names)
    last = None
    for piece in group.split('-'):
        piece = piece.strip()
        if piece.isdigit():
            # count for the preceding element, as in 'C-H-3'
            if last is None:
                return None
            result[last] = int(piece)
            continue
        sym = ''
        num = ''
        in_symbol = True
        for ch in piece:
            if ch.isdigit():
                in_symbol = False
                num += ch
            elif ch.isalpha() and in_symbol:
                sym += ch
        if sym.upper() not in upper_names:
            return None
        last = upper_names.index(sym.upper())
        result[last] = int(num) if num else 1
    return result


def get_groups(string, element_names):
    """Parses the groups for one side of a metadata line.

    Parameters
    ----------
    string : str
        Groups in parentheses, with '+' between reactants (or products),
        e.g. '(C-H-3)+(H)'.
    element_names : list of str
        Declared element names.

    Returns
    -------
    list of list of list of int or None
        For each '+'-separated slot, the list of groups found; ``None``
        if any group could not be parsed.

    """
    slots = []
    groups = []
    group = ''
    in_group = False
    for ch in string:
        if ch == '(':
            in_group = True
            group = ''
        elif ch == ')':
            in_group = False
            parsed = parse_group_string(group, element_names)
            if parsed is None:
                return None
            groups.append(parsed)
        elif ch == '+':
            slots.append(groups)
            groups = []
        elif in_group and ch != ' ':
            group += ch
    slots.append(groups)
    return slots
