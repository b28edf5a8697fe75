import sys
import logging

from . import utils
from .core.line_reader import CKSyntaxError
from .core.mech_interpret import read_mech
from .core.mech_writer import write_mech
from .core.parse_options import ParseOptions, load_options


def main(argv=None):
    args = utils.get_parser(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose
                        else logging.INFO,
                        format='%(levelname)s: %(message)s')
    log = logging.getLogger('ckmech')

    options = ParseOptions()
    if args.config is not None:
        try:
            options = load_options(args.config)
        except ValueError as e:
            log.error('invalid options file %s: %s', args.config, e)
            return 1
    if args.verbose:
        options.verbose = True

    try:
        elems, specs, reacs, units = read_mech(args.input, args.thermo,
                                               options, log)
    except CKSyntaxError as e:
        log.error('%s: %s', args.input, e)
        return 1

    log.info('%d elements, %d species, %d reactions (%s, %s)',
             len(elems), len(specs), len(reacs), units.act_energy,
             units.quantity)

    if args.output is not None:
        with open(args.output, 'w') as file:
            write_mech(file, elems, specs, reacs, units)
        log.info('mechanism written to %s', args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
