from .line_reader import CKSyntaxError, CKLineReader
from .mech_interpret import CKParser, read_mech, read_mech_stream
from .mech_writer import write_mech
from .parse_options import ParseOptions, load_options
