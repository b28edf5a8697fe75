# -*- coding: utf-8 -*-
"""Module containing utility functions.
"""

# Standard libraries
import re
from argparse import ArgumentParser

__all__ = ['keywords', 'EOF', 'get_tokens', 'match', 'is_keyword',
           'capitalize', 'remove_whitespace', 'extract_slash_data',
           'atof', 'get_number_from_string', 'read_str_num',
           'is_integer', 'get_parser'
           ]

keywords = ['ELEM', 'SPEC', 'THER', 'REAC', 'END']
"""list(`str`): identifiers of the section keywords"""

EOF = '<EOF>'
"""str: sentinel line returned once the input stream is exhausted"""

exponent_chars = 'EedD'
"""str: characters allowed as exponent markers in fixed-column numbers"""

# leading numeric part of a string, as read by C's atof
_atof_re = re.compile(r'\s*[-+]?(\d+\.?\d*|\.\d+)([eEdD][-+]?\d+)?')


def get_tokens(string):
    """Returns the whitespace-delimited tokens of a string.

    Parameters
    ----------
    string : str
        String to be split.

    Returns
    -------
    list of `str`
        Tokens in ``string``, empty if ``string`` is blank.

    """
    return string.split()


def match(string, keyword):
    """Case-insensitive prefix match.

    Parameters
    ----------
    string : str
        String to be checked, e.g. a token or line.
    keyword : str
        Keyword (or keyword identifier, e.g. 'REAC') to look for.

    Returns
    -------
    bool
        ``True`` if ``string`` begins with ``keyword``, ignoring case.

    """
    n = len(keyword)
    if len(string) < n:
        return False
    return string[:n].upper() == keyword.upper()


def is_keyword(string):
    """Returns `True` if the first token of ``string`` is a section keyword.
    """
    string = string.lstrip()
    return any(match(string, kw) for kw in keywords)


def capitalize(word):
    """Returns ``word`` with first letter uppercase, remaining lowercase.

    Used to look up element symbols, e.g. 'AR' -> 'Ar'.
    """
    return word[:1].upper() + word[1:].lower()


def remove_whitespace(string):
    """Returns ``string`` with all whitespace removed."""
    return ''.join(string.split())


def extract_slash_data(string):
    """Pulls the first ``KEYWORD/data/`` block from a string.

    Parameters
    ----------
    string : str
        String such as 'LOW / 1.0E20 -1.0 0.0 / TROE/0.5 1 2/'.

    Returns
    -------
    has_data : bool
        ``True`` if slash-delimited data was found.
    name : str
        Keyword preceding the data (all whitespace removed). If no slash
        is present, the whole (stripped) string.
    data : str
        Text between the slashes, or '' if none.
    rest : str
        Remaining part of ``string`` following the closing slash.

    Raises
    ------
    ValueError
        If an opening slash has no matching closing slash.

    """
    start = string.find('/')
    if start < 0:
        return False, remove_whitespace(string), '', ''

    end = string.find('/', start + 1)
    if end < 0:
        raise ValueError('missing /')

    name = remove_whitespace(string[:start])
    return True, name, string[start + 1:end], string[end + 1:]


def atof(string):
    """Converts the leading numeric part of a string to float.

    Mirrors the lenient behavior of C's ``atof``: blank fields and
    trailing garbage are allowed, and 0.0 is returned if no number
    is found. Fortran 'd' exponents are understood.

    """
    num = _atof_re.match(string)
    if not num:
        return 0.0
    return float(num.group(0).strip().replace('d', 'e').replace('D', 'e'))


def get_number_from_string(string):
    """Converts a fixed-column number field to float.

    Parameters
    ----------
    string : str
        Number field, e.g. ' 3.33727920E+00' or '-1.0d-3'.

    Returns
    -------
    float or None
        Value of the field (0.0 if blank), or ``None`` if the field does
        not follow the number grammar: digits, at most one decimal point,
        one exponent marker, and signs only at the start or directly
        following the exponent marker.

    """
    num = remove_whitespace(string)
    in_exp = False
    have_point = False
    for i, ch in enumerate(num):
        if ch in exponent_chars and not in_exp:
            in_exp = True
        elif ch in '+-':
            if i > 0 and num[i - 1] not in exponent_chars:
                return None
        elif ch == '.':
            if have_point or in_exp:
                return None
            have_point = True
        elif not ch.isdigit():
            return None

    if not num:
        return 0.0
    try:
        return float(num.replace('d', 'e').replace('D', 'e'))
    except ValueError:
        return None


def read_str_num(string, sep=None):
    """Returns a list of floats pulled from a string.

    Delimiter is optional; if not specified, uses whitespace.

    Parameters
    ----------
    string : str
        String to be parsed.
    sep : str, optional
        Delimiter (default is None, which means consecutive whitespace).

    Returns
    -------
    list of `float`
        Floats separated by ``sep`` in ``string``.

    Raises
    ------
    ValueError
        If any piece of ``string`` is not a number.

    """

    # separate string into space-delimited strings of numbers
    num_str = string.split(sep)
    return [float(n.replace('d', 'e').replace('D', 'e')) for n in num_str]


def is_integer(val):
    """Returns `True` if argument is an integer or whole number.

    Parameters
    ----------
    val : int, float
        Value to be checked.

    Returns
    -------
    bool
        ``True`` if ``val`` is `int` or whole number (if `float`).

    """
    try:
        return val.is_integer()
    except AttributeError:
        if isinstance(val, int):
            return True
        #last ditch effort
        try:
            return int(val) == float(val)
        except (TypeError, ValueError):
            return False


def get_parser(argv=None):
    """

    Parameters
    ----------
    argv : list of `str`, optional
        Arguments to parse; defaults to ``sys.argv[1:]``.

    Returns
    -------
    args : `argparse.Namespace`
        Command line arguments for running ckmech.

    """

    # command line arguments
    parser = ArgumentParser(description='ckmech: Reads and checks '
                                        'Chemkin-format reaction '
                                        'mechanisms.'
                            )
    parser.add_argument('-i', '--input',
                        type=str,
                        required=True,
                        help='Input mechanism filename (e.g., mech.dat).'
                        )
    parser.add_argument('-t', '--thermo',
                        type=str,
                        default=None,
                        help='Thermodynamic database filename (e.g., '
                             'therm.dat), or nothing if in mechanism.'
                        )
    parser.add_argument('-c', '--config',
                        type=str,
                        default=None,
                        help='YAML file with parsing options '
                             '(e.g., options.yaml).'
                        )
    parser.add_argument('-o', '--output',
                        type=str,
                        default=None,
                        help='If specified, the interpreted mechanism is '
                             're-written in fixed-column Chemkin format '
                             'to this file.'
                        )
    parser.add_argument('-v', '--verbose',
                        default=False,
                        action='store_true',
                        help='Log species thermo records as they are read.'
                        )

    args = parser.parse_args(argv)
    return args
