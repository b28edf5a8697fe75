from ._version import __version__
from .core.mech_interpret import read_mech, read_mech_stream
from .core.line_reader import CKSyntaxError
