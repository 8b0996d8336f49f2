import argparse
import logging
import sys
import traceback

from escapetime import config
from escapetime.escape import escape_time
from escapetime.pairs import parse_complex

_logger = logging.getLogger(__name__)


def get_sys_info():
    # delay these imports until now as they are only needed in this
    # function which then exits.
    import platform
    import numpy
    import numba
    import llvmlite
    import llvmlite.binding as llvmbind
    from escapetime import __version__

    fmt = "%-30s : %-s"
    print("-" * 60)
    print("__Software Information__")
    print(fmt % ("escapetime version", __version__))
    print(fmt % ("Python version", platform.python_version()))
    print(fmt % ("Python implementation", platform.python_implementation()))
    print(fmt % ("NumPy version", numpy.__version__))
    print(fmt % ("Numba version", numba.__version__))
    print(fmt % ("llvmlite version", llvmlite.__version__))
    print(fmt % ("CPU Name", llvmbind.get_host_cpu_name()))
    print("")
    print("__Configuration__")
    for name, value in sorted(config.current_config().items()):
        print(fmt % ("ESCAPETIME_" + name, value))
    print("-" * 60)


def make_parser():
    parser = argparse.ArgumentParser(
        prog='escapetime',
        description="Decide whether a point appears to belong to the "
                    "Mandelbrot set.  Use '--' before a point with a "
                    "negative real part.")
    parser.add_argument('--limit', '-l', type=int, default=None,
                        help='Maximum number of iterations (default: '
                             'ESCAPETIME_DEFAULT_LIMIT, currently %d)'
                             % config.DEFAULT_LIMIT)
    parser.add_argument('--sysinfo', '-s', action='store_true',
                        help='Output system information for bug reporting')
    parser.add_argument('point', nargs='?',
                        help='Complex coordinate written as "<re>,<im>"')
    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.sysinfo:
        print("System info:")
        get_sys_info()
        return 0

    if args.point is None:
        print("escapetime: error: the following arguments are required: "
              "point", file=sys.stderr)
        return 1

    c = parse_complex(args.point)
    if c is None:
        print("escapetime: error: invalid point %r, expected \"<re>,<im>\""
              % (args.point,), file=sys.stderr)
        return 1

    limit = config.DEFAULT_LIMIT if args.limit is None else args.limit
    _logger.debug("evaluating %r with limit %d", c, limit)
    try:
        result = escape_time(c, limit)
    except ValueError as e:
        if config.DEVELOPER_MODE:
            traceback.print_exc()
        print("escapetime: error: %s" % (e,), file=sys.stderr)
        return 1

    if result is None:
        print("inconclusive")
    else:
        print("escaped at iteration %d" % result)
    return 0
