#system
import io
import os
import unittest

#local imports
from ..core.mech_interpret import CKParser, read_mech, read_mech_stream

script_dir = os.path.dirname(os.path.realpath(__file__))
mech_file = os.path.join(script_dir, 'test_mech.dat')
therm_file = os.path.join(script_dir, 'test_therm.dat')

header = """ELEMENTS
O H N AR
END
SPECIES
H2 O2 H O OH H2O HO2 H2O2 AR N2
END
"""


def get_parser(text, options=None, log=None):
    """Returns a `CKParser` reading ``text``."""
    return CKParser(io.StringIO(text, newline=''), 'test.dat', log, options)


def read_text(text, therm_filename=None, options=None, log=None):
    """Reads a complete mechanism from ``text``."""
    return read_mech_stream(io.StringIO(text, newline=''), therm_filename,
                            'test.dat', options, log)


def read_reactions(reactions, units='', head=header):
    """Reads the elements, species and reactions of a thermo-less mechanism.
    """
    text = head + 'REACTIONS ' + units + '\n' + reactions + '\nEND\n'
    return read_text(text)


def thermo_records(*names):
    """Returns the lines of the thermo records of the test species.

    Parameters
    ----------
    names : str
        Species to get; all species if not given.

    Returns
    -------
    list of str
        Record lines, four per species, in the order requested.

    """
    with open(therm_file, 'r') as file:
        lines = file.read().splitlines()[2:-1]
    records = dict((lines[i].split()[0], lines[i:i + 4])
                   for i in range(0, len(lines), 4))
    if not names:
        names = [lines[i].split()[0] for i in range(0, len(lines), 4)]
    return [line for name in names for line in records[name]]


class storage(object):
    def __init__(self, elems, specs, reacs, units):
        self.elems = elems
        self.specs = specs
        self.reacs = reacs
        self.units = units


class TestClass(unittest.TestCase):
    #global setup var
    _is_setup = False
    _store = None

    @property
    def store(self):
        return TestClass._store

    @store.setter
    def store(self, val):
        TestClass._store = val

    @property
    def is_setup(self):
        return TestClass._is_setup

    @is_setup.setter
    def is_setup(self, val):
        TestClass._is_setup = val

    def setUp(self):
        if not self.is_setup:
            #the mechanism
            self.store = storage(*read_mech(mech_file))
            self.is_setup = True
