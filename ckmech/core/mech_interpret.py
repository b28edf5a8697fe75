# -*- coding: utf-8 -*-
"""Chemkin-format mechanism interpreter module.
"""

# Standard libraries
import re
import logging
from enum import Enum

# Local imports
from .. import utils
from . import chem_utilities as chem
from .line_reader import CKLineReader, CKSyntaxError
from .thermo_record import read_thermo_record, END_SPECIES
from .aux_data import parse_aux_line, get_groups
from .parse_options import ParseOptions
from .reaction_types import reaction_type, act_energy_units, quantity_units

__all__ = ['CKParser', 'read_mech', 'read_mech_stream']

# leading stoichiometric coefficient of a reactant or product
_coeff_re = re.compile(r'^(\d+\.?\d*|\.\d+)(.+)$')


class section_state(Enum):
    seek_header = 0
    in_block = 1
    done = 2


def _find_unit(token, units):
    for unit in units:
        if utils.match(token, unit.value):
            return unit
    return None


class CKParser(object):
    """Reads the sections of a Chemkin-format file.

    The parser holds the state shared by the section readers: the line
    source (with its line counter and put-back line), the logger and the
    parsing options. Sections must be read in file order.

    Parameters
    ----------
    stream : file-like
        Text stream with the mechanism (or thermo database).
    filename : str, optional
        Name of the file, used in messages.
    log : `logging.Logger`, optional
        Destination for warnings and errors.
    options : `ParseOptions`, optional
        Parsing options.
    elem_wt : dict, optional
        Default atomic weights, keyed by capitalized element symbol;
        defaults to `chem_utilities.get_elem_wt`.

    """

    def __init__(self, stream, filename='', log=None, options=None,
                 elem_wt=None):
        self.log = log if log is not None else logging.getLogger(__name__)
        self.reader = CKLineReader(stream, filename, self.log)
        self.filename = filename
        self.options = options if options is not None else ParseOptions()
        self.elem_wt = elem_wt if elem_wt is not None else chem.get_elem_wt()
        self.nasa_fmt = False
        self.no_database = False
        self.thermo_line = -1

    @property
    def line(self):
        """int: number of the last line read"""
        return self.reader.line

    def _next_tokens(self):
        """Returns the next non-blank line, its comment, and its tokens."""
        while True:
            line, comment = self.reader.get_line()
            toks = utils.get_tokens(line)
            if toks:
                return line, comment, toks

    def _read_blocks(self, keyword, stop, add_entry):
        """Reads all blocks of a section of name tokens.

        A section may appear more than once; each block starts at a line
        beginning with ``keyword`` and ends at 'END' or at the next line
        beginning with a section keyword.

        Parameters
        ----------
        keyword : str
            Section keyword identifier (e.g., 'ELEM').
        stop : tuple of str
            Keyword identifiers of the sections that follow.
        add_entry : callable
            Called with each token and the comment of its line.

        """
        state = section_state.seek_header
        first_tok = 1
        while state is not section_state.done:
            if state is section_state.seek_header:
                if self.reader.advance_to(keyword, stop):
                    state = section_state.in_block
                    # skip the section keyword itself
                    first_tok = 1
                else:
                    state = section_state.done
                continue

            line, comment, toks = self._next_tokens()
            if line == utils.EOF:
                state = section_state.seek_header
                continue

            if first_tok == 0 and utils.is_keyword(toks[0]):
                # a new section starts; look for the header again
                self.reader.put_line(line, comment)
                state = section_state.seek_header
                continue

            for tok in toks[first_tok:]:
                if tok.upper() == 'END':
                    state = section_state.seek_header
                    break
                add_entry(tok, comment)
            first_tok = 0

    def read_element_section(self):
        """Reads the ELEMENTS section(s).

        Returns
        -------
        elements : list of `Element`
            Elements in order of declaration.

        Raises
        ------
        CKSyntaxError
            If no elements are found.

        """
        elements = []

        def add_element(tok, comment):
            try:
                has_wt, name, wt, rest = utils.extract_slash_data(tok)
            except ValueError as e:
                raise self.reader.error(str(e))

            if any(el.name.upper() == name.upper() for el in elements):
                self.reader.warning('duplicate element {} (ignored).'
                                    ''.format(name))
                return

            if has_wt:
                try:
                    weight = float(wt)
                except ValueError:
                    raise self.reader.error('illegal atomic weight for '
                                            'element ' + name)
            else:
                weight = self.elem_wt.get(utils.capitalize(name), 0.0)

            el = chem.Element(name, len(elements), weight,
                              weight_from_db=not has_wt, comment=comment)
            if not el.valid:
                self.reader.warning('no valid atomic weight for element '
                                    '{}.'.format(name))
            elements.append(el)

        self._read_blocks('ELEM', ('SPEC', 'THER', 'REAC'), add_element)

        if not elements:
            self.log.error('no elements found.')
            raise CKSyntaxError('no elements found.', self.line)
        return elements

    def read_species_section(self):
        """Reads the SPECIES section(s).

        Returns
        -------
        species : list of `Species`
            Species in order of declaration, without thermo data. Empty
            if the file has no species section.

        """
        species = []
        names = set()

        def add_species(tok, comment):
            if tok in names:
                self.reader.warning('duplicate species {} (ignored).'
                                    ''.format(tok))
                return
            names.add(tok)
            species.append(chem.Species(tok, len(species)))

        self._read_blocks('SPEC', ('THER', 'REAC'), add_species)

        if not species:
            self.log.warning('no species section found.')
        return species

    def _check_temps(self, tmin, tmid, tmax):
        if tmin == 0.0 or tmid == 0.0 or tmax == 0.0:
            raise self.reader.error('error reading Tmin, Tmid, or Tmax')
        if self.options.check_temp_order and not (tmin <= tmid <= tmax):
            raise self.reader.error('condition Tmin <= Tmid <= Tmax violated')

    def _log_species(self, sp, line):
        self.log.debug('found species %s at line %d of %s', sp.name, line,
                       self.filename)
        self.log.debug('  id: %s  phase: %s  composition: %s', sp.id,
                       sp.phase, ' '.join('{}{:g}'.format(e.name, e.number)
                                          for e in sp.elem))
        self.log.debug('  Tlow, Tmid, Thigh: %.2f  %.2f  %.2f', *sp.Trange)
        self.log.debug('  high-T coefficients: %s',
                       ' '.join('{:.8e}'.format(c) for c in sp.hi))
        self.log.debug('  low-T coefficients: %s',
                       ' '.join('{:.8e}'.format(c) for c in sp.lo))

    def read_thermo_section(self, names=None, elements=None, temps=None,
                            has_temp_range=False):
        """Reads species data from THERMO section records.

        Parameters
        ----------
        names : list of str, optional
            Species to read records for. If ``None``, all records in the
            section are kept.
        elements : list of `Element`, optional
            Declared elements. If given, records of kept species may only
            use these elements.
        temps : list of float, optional
            Default (low, mid, high) temperatures; defaults to
            ``options.default_temps``.
        has_temp_range : bool, optional
            If ``True``, the line after the THERMO keyword holds the
            default temperatures (as in a thermo database file), whether or
            not the ALL option is given.

        Returns
        -------
        species : dict or None
            Species name -> `Species` with the record data, in order of
            appearance, or ``None`` if there is no THERMO section.

        """

        if temps is None:
            temps = self.options.default_temps
        tmin, tmid, tmax = -1.0, -1.0, -1.0
        if temps is not None and len(temps) == 3:
            tmin, tmid, tmax = temps

        # read lines until THERMO section is found. But if EOF reached or
        # start of REACTIONS section, then there is no THERMO section.
        while True:
            line, comment = self.reader.get_line()
            if line == utils.EOF:
                return None
            head = line.lstrip()
            if utils.match(head, 'REAC'):
                self.reader.put_line(line, comment)
                return None
            if utils.match(head, 'THER'):
                self.thermo_line = self.line
                break

        # options on the THERMO line
        self.no_database = False
        self.nasa_fmt = False
        for tok in utils.get_tokens(line)[1:]:
            if utils.match(tok, 'ALL'):
                self.no_database = True
            elif utils.match(tok, 'NO_TMID'):
                self.nasa_fmt = True
                self.log.info("Option 'NO_TMID' specified. Default midpoint "
                              "temperature will be used for all species.")
            else:
                raise self.reader.error('unrecognized THERMO option.')

        # the next line must be the 3 default temperatures
        if self.no_database or has_temp_range:
            line, comment = self.reader.get_line()
            toks = utils.get_tokens(line)
            if len(toks) >= 3:
                tmin, tmid, tmax = [utils.atof(t) for t in toks[:3]]
            else:
                tmin, tmid, tmax = 0.0, 0.0, 0.0
            self.log.info('default Tlow, Tmid, Thigh: %.2f  %.2f  %.2f',
                          tmin, tmid, tmax)
            self._check_temps(tmin, tmid, tmax)

        declared = None
        if elements is not None:
            declared = set(el.name.upper() for el in elements)

        get_all = names is None
        wanted = set(names) if names is not None else set()
        remaining = len(wanted)

        # used to check for duplicate THERMO records
        found = set()
        species = {}

        while get_all or remaining > 0:
            sp = read_thermo_record(self.reader, self.nasa_fmt)
            if sp.name == END_SPECIES:
                break
            start = self.line - 3

            if sp.name in found:
                self.log.warning('more than one THERMO record for species '
                                 '%s; record at line %d of %s ignored.',
                                 sp.name, start, self.filename)
                continue
            found.add(sp.name)

            if not get_all and sp.name not in wanted:
                continue

            if sp.Trange[1] == 0.0:
                sp.Trange[1] = tmid
                self.reader.warning('default Tmid used for species '
                                    + sp.name)
                if tmid < 0.0:
                    if self.options.missing_tmid_fatal:
                        raise self.reader.error('no default Tmid has been '
                                                'entered for species '
                                                + sp.name)
                    self.log.error('no default Tmid has been entered!  '
                                   '(line %d)', self.line)

            if declared is not None:
                for e in sp.elem:
                    if e.name.upper() not in declared:
                        raise CKSyntaxError('undeclared element {} in species '
                                            '{}'.format(e.name, sp.name),
                                            start)

            species[sp.name] = sp
            if self.options.verbose:
                self._log_species(sp, start)

            self._check_temps(*sp.Trange)
            if not get_all:
                remaining -= 1

        return species

    def _read_units(self, line):
        units = chem.ReactionUnits()
        for tok in utils.get_tokens(line)[1:]:
            unit = _find_unit(tok, act_energy_units)
            if unit is not None:
                units.act_energy = unit
                continue
            unit = _find_unit(tok, quantity_units)
            if unit is not None:
                units.quantity = unit
        return units

    def read_reaction_section(self, species_names, element_names=None):
        """Parses the REACTIONS section.

        Parameters
        ----------
        species_names : list of str
            Declared species names.
        element_names : list of str, optional
            Declared element names, needed for group metadata lines.

        Returns
        -------
        reactions : list of `Reaction`
            Reactions in order of appearance; empty if there is no
            REACTIONS section or it holds no reactions.
        units : `ReactionUnits`
            Units given on the REACTIONS line.

        """
        species_names = set(species_names)
        element_names = list(element_names or [])
        reactions = []

        # advance to the beginning of the REACTIONS section
        while True:
            line, comment = self.reader.get_line()
            if line == utils.EOF:
                self.log.warning('no reactions found.')
                return reactions, chem.ReactionUnits()
            if utils.match(line.lstrip(), 'REAC'):
                break

        units = self._read_units(line)

        rxn = None
        seen = set()
        comments = []
        while True:
            # skip blank lines
            while True:
                line, comment = self.reader.get_line()
                if comment:
                    comments.append(comment)
                if line.strip():
                    break

            # end of REACTIONS section or EOF
            if utils.is_keyword(line) or line == utils.EOF:
                if rxn is not None:
                    reactions.append(rxn)
                if line != utils.EOF:
                    self.reader.put_line(line, comment)
                if not reactions:
                    self.log.warning('no reactions found.')
                return reactions, units

            source = line + '!' + comment if comment else line

            if line.startswith('%'):
                # group-additivity metadata for the last reaction
                if '=' in line:
                    if rxn is None:
                        raise self.reader.error('reaction metadata before '
                                                'the first reaction')
                    self._read_groups(rxn, line, element_names)
                if rxn is not None:
                    rxn.lines.append(source)

            elif '=' in line:
                # new reaction
                if rxn is not None:
                    reactions.append(rxn)
                rxn = chem.Reaction(len(reactions) + 1)
                rxn.comment = comments
                comments = []
                seen = set()
                rxn.lines.append(source)
                self._read_equation(rxn, line, species_names)

            elif rxn is None:
                self.reader.warning('auxiliary data before the first '
                                    'reaction (ignored).')

            else:
                rxn.lines.append(source)
                parse_aux_line(self.reader, rxn, line, species_names, seen)

    def _read_marker(self, rxn, side, is_left):
        """Removes a '(+M)', '(+species)' or '+M' marker from ``side``."""
        mloc = side.find('(+')
        if mloc >= 0:
            end = side.find(')', mloc)
            if end < 0:
                raise self.reader.error('missing )')
            mspecies = side[mloc + 2:end]
            thd_body = 'M' if mspecies.upper() == 'M' else mspecies

            if not is_left:
                if rxn.is_thd:
                    raise self.reader.error('mismatched +M or (+M)')
                if rxn.is_falloff and rxn.thd_body != thd_body:
                    raise self.reader.error('mismatched third body')

            rxn.is_falloff = True
            rxn.type = reaction_type.fall
            rxn.thd_body = thd_body
            return side[:mloc] + side[end + 1:]

        if side.endswith('+M') or side.endswith('+m'):
            if not is_left and rxn.is_falloff:
                raise self.reader.error('mismatched +M or (+M)')
            rxn.is_thd = True
            rxn.type = reaction_type.thd
            rxn.thd_body = 'M'
            return side[:-2]

        return side

    def _get_species(self, side, species_names, rxn, desc):
        """Returns the `RxnSpecies` in one side of a reaction equation."""
        terms = side.split('+')

        # empty entries mean a species name ended in '+'
        names = []
        for term in terms:
            if term:
                names.append(term)
            elif names:
                names[-1] += '+'

        species = []
        for term in names:
            name, number = term, 1.0
            if term not in species_names:
                coeff = _coeff_re.match(term)
                if coeff:
                    number = float(coeff.group(1))
                    name = coeff.group(2)
            if name not in species_names:
                raise self.reader.error('undeclared {} species {} in '
                                        'reaction {}'.format(desc, name,
                                                             rxn.number))
            species.append(chem.RxnSpecies(name, number))
        return species

    def _read_equation(self, rxn, line, species_names):
        # depending on the form of the 'equals' symbol, determine whether
        # the reaction is reversible or irreversible, and separate it into
        # strings for each side.
        if '<=>' in line:
            ind = line.index('<=>')
            rxn.rev = True
            left, right = line[:ind], line[ind + 3:]
        elif '=>' in line:
            ind = line.index('=>')
            rxn.rev = False
            left, right = line[:ind], line[ind + 2:]
        else:
            ind = line.index('=')
            rxn.rev = True
            left, right = line[:ind], line[ind + 1:]

        # reactants
        left = self._read_marker(rxn, utils.remove_whitespace(left), True)
        rxn.reac = self._get_species(left, species_names, rxn, 'reactant')

        # Arrhenius coefficients are the last three tokens
        toks = utils.get_tokens(right)
        if len(toks) < 3:
            raise self.reader.error('expected 3 Arrhenius parameters')
        try:
            A, n, E = utils.read_str_num(' '.join(toks[-3:]))
        except ValueError:
            raise self.reader.error('illegal number in Arrhenius '
                                    'parameters: ' + ' '.join(toks[-3:]))
        rxn.kf = chem.RateCoeff(A, n, E)

        # allow negative prefactor but log a warning
        if A < 0.0:
            self.reader.warning('negative prefactor in reaction {}'
                                ''.format(rxn.number))

        right = right.rsplit(None, 3)[0] if len(toks) > 3 else ''

        # products
        right = self._read_marker(rxn, utils.remove_whitespace(right), False)
        rxn.prod = self._get_species(right, species_names, rxn, 'product')

    def _read_groups(self, rxn, line, element_names):
        eqloc = line.index('=')
        sides = [(get_groups(line[:eqloc], element_names), rxn.reac,
                  'reactant'),
                 (get_groups(line[eqloc + 1:], element_names), rxn.prod,
                  'product')]
        for groups, species, desc in sides:
            if groups is None:
                raise self.reader.error('error in {} group '
                                        'specification'.format(desc))
            natoms = sum(int(sp.number) for sp in species)
            if len(groups) != natoms:
                raise self.reader.error('groups not specified for all '
                                        '{}s'.format(desc))
            for sp, grp in zip(species, groups):
                sp.groups = grp


def _attach_thermo(specs, thermo, elems, log):
    weights = dict((el.name.upper(), el.weight) for el in elems)
    for sp in specs:
        if sp.name not in thermo:
            log.warning('missing thermo data for species %s', sp.name)
            continue
        sp.set_thermo(thermo[sp.name])
        # calculate molecular weight
        sp.mw = sum(e.number * weights.get(e.name.upper(), 0.0)
                    for e in sp.elem)


def read_mech_stream(stream, therm_filename=None, filename='',
                     options=None, log=None, elem_wt=None):
    """Read and interpret a mechanism from a text stream.

    See `read_mech`; ``filename`` is only used in messages.
    """
    parser = CKParser(stream, filename, log, options, elem_wt)

    elems = parser.read_element_section()
    specs = parser.read_species_section()
    names = [sp.name for sp in specs]

    thermo = parser.read_thermo_section(names, elems) or {}
    reacs, units = parser.read_reaction_section(
        names, [el.name for el in elems])

    missing = [name for name in names if name not in thermo]
    if missing and parser.no_database:
        # THERMO ALL: every species must be defined in the mechanism file
        raise CKSyntaxError(
            'no THERMO record for species {} (THERMO ALL specified)'.format(
                missing[0]), parser.thermo_line)

    # Read separate thermo file if present and needed
    if missing and therm_filename:
        with open(therm_filename, 'r', newline='') as file:
            therm_parser = CKParser(file, therm_filename, parser.log,
                                    parser.options, parser.elem_wt)
            data = therm_parser.read_thermo_section(missing, elems,
                                                    has_temp_range=True)
        if data is None:
            parser.log.warning('no THERMO section in %s', therm_filename)
        else:
            thermo.update(data)

    _attach_thermo(specs, thermo, elems, parser.log)

    return elems, specs, reacs, units


def read_mech(mech_filename, therm_filename=None, options=None, log=None):
    """Read and interpret mechanism file for elements, species, and reactions.

    Parameters
    ----------
    mech_filename : str
        Reaction mechanism filename (e.g. 'mech.dat')
    therm_filename : str, optional
        Thermodynamic database filename (e.g., 'therm.dat'), read for
        species without a record in the mechanism file.
    options : `ParseOptions`, optional
        Parsing options.
    log : `logging.Logger`, optional
        Destination for warnings and errors.

    Returns
    -------
    elems : list of `Element`
        List of elements in mechanism.
    specs : list of `Species`
        List of species in mechanism.
    reacs : list of `Reaction`
        List of reactions in mechanism.
    units : `ReactionUnits`
        Units of reactions' Arrhenius coefficients

    Raises
    ------
    CKSyntaxError
        If the mechanism (or thermo database) is not valid.

    """

    with open(mech_filename, 'r', newline='') as file:
        return read_mech_stream(file, therm_filename, mech_filename,
                                options, log)
