# -*- coding: utf-8 -*-
"""Reader for the 4-line fixed-column NASA polynomial species record.

The layout is kept in tables of (field name, start column, width) so it
can be checked and reused by the writer.
"""

# Related modules
import numpy as np

# Local imports
from .. import utils
from . import chem_utilities as chem

__all__ = ['record_width', 'tag_column', 'line1_fields', 'coeff_width',
           'coeffs_per_line', 'END_SPECIES', 'read_thermo_record',
           'parse_line1', 'parse_element_slot']

record_width = 80
"""int: width of a record line; the last column holds the line number"""

tag_column = 79
"""int: 0-based column of the '1' through '4' line tags"""

line1_fields = [
    ('name', 0, 24),
    ('elem1', 24, 5),
    ('elem2', 29, 5),
    ('elem3', 34, 5),
    ('elem4', 39, 5),
    ('phase', 44, 1),
    ('tlow', 45, 10),
    ('thigh', 55, 10),
    ('tmid', 65, 8),
    ('elem5', 73, 5),
]
"""list: (field, start column, width) for the first record line"""

elem_slots = ['elem1', 'elem2', 'elem3', 'elem4']
"""list(`str`): element slots always present on the first line"""

coeff_width = 15
"""int: width of a polynomial coefficient field"""

coeffs_per_line = [
    [('hi', 0), ('hi', 1), ('hi', 2), ('hi', 3), ('hi', 4)],
    [('hi', 5), ('hi', 6), ('lo', 0), ('lo', 1), ('lo', 2)],
    [('lo', 3), ('lo', 4), ('lo', 5), ('lo', 6)],
]
"""list: destination (range, index) of each coefficient on lines 2-4"""

END_SPECIES = '<END>'
"""str: name of the sentinel species returned at the end of a section"""


def get_field(line, name):
    """Returns the text of field ``name`` of the first record line."""
    for field, start, width in line1_fields:
        if field == name:
            return line[start:start + width]
    raise KeyError(name)


def parse_element_slot(slot):
    """Reads an element symbol and atom count from a 5-column slot.

    The symbol occupies the first two columns (one or two non-blank
    characters) and the count the last three.

    Returns
    -------
    symbol : str
        Element symbol, '' if blank.
    number : float
        Number of atoms, 0.0 if blank.

    """
    slot = slot.ljust(5)
    symbol = slot[:2].strip()
    if symbol == '0':
        # some databases fill unused slots with zeros
        symbol = ''
    return symbol, utils.atof(slot[2:5])


def parse_line1(line, nasa_fmt=False):
    """Reads name, id, composition, phase and temperatures from line 1.

    Parameters
    ----------
    line : str
        First line of the record.
    nasa_fmt : bool, optional
        If ``True`` (THERMO NO_TMID), the midpoint temperature and
        fifth element columns are not read.

    Returns
    -------
    `Species`
        Species holding the line 1 data; ``Trange[1]`` is 0.0 if the
        midpoint temperature was not given.

    """
    line = line.ljust(record_width)

    toks = utils.get_tokens(get_field(line, 'name'))
    if not toks:
        return None
    sp = chem.Species(toks[0])
    sp.id = ' '.join(toks[1:])

    # elemental composition, first four elements
    for slot in elem_slots:
        symbol, number = parse_element_slot(get_field(line, slot))
        if symbol:
            sp.add_element(symbol, number)

    sp.phase = get_field(line, 'phase').strip()

    tlow = utils.atof(get_field(line, 'tlow'))
    thigh = utils.atof(get_field(line, 'thigh'))
    tmid = 0.0
    if not nasa_fmt:
        tmid = utils.atof(get_field(line, 'tmid'))

        # fifth element, if any
        symbol, number = parse_element_slot(get_field(line, 'elem5'))
        if symbol:
            sp.add_element(symbol, number)

    sp.Trange = [tlow, tmid, thigh]
    return sp


def _check_tag(reader, line, tag):
    ch = line[tag_column] if len(line) > tag_column else ''
    if ch != tag:
        raise reader.error('column 80 must contain {} but contains {!r}'
                           ''.format(tag, ch))


def read_thermo_record(reader, nasa_fmt=False):
    """Reads one 4-line species definition record in NASA format.

    Lines are skipped until one with '1' in column 80 is found.

    Parameters
    ----------
    reader : `CKLineReader`
        Source of lines.
    nasa_fmt : bool, optional
        If ``True``, the record carries no midpoint temperature.

    Returns
    -------
    `Species`
        Species with composition, temperatures and coefficients. If a
        section keyword or the end of the stream is reached before the
        start of a record, the line is put back and a species named
        '<END>' is returned.

    Raises
    ------
    CKSyntaxError
        If lines 2-4 are not tagged '2'-'4' in column 80, or if a
        coefficient is not a legal number.

    """

    # look for line 1, but if a keyword or the end of the file is
    # found first, return the sentinel
    while True:
        line, comment = reader.get_line()
        if utils.is_keyword(line) or line == utils.EOF:
            reader.put_line(line, comment)
            return chem.Species(END_SPECIES)
        if len(line) > tag_column and line[tag_column] == '1':
            break

    sp = parse_line1(line, nasa_fmt)
    if sp is None:
        raise reader.error('missing species name in thermo record')

    # the next 3 lines must be the coefficient lines, without
    # intervening comments
    coeffs = {'hi': [0.0] * 7, 'lo': [0.0] * 7}
    for i, dest in enumerate(coeffs_per_line):
        line, comment = reader.get_line()
        _check_tag(reader, line, str(i + 2))
        for j, (arr, ind) in enumerate(dest):
            numstr = line[j * coeff_width:(j + 1) * coeff_width]
            cf = utils.get_number_from_string(numstr)
            if cf is None:
                raise reader.error('illegal number: ' + numstr)
            coeffs[arr][ind] = cf

    sp.hi = np.array(coeffs['hi'])
    sp.lo = np.array(coeffs['lo'])
    sp.valid = True
    return sp
