import sys
from lj_sweep.errors import LJSweepError, MissingArgument
from lj_sweep.sweep import SweepRunner
from lj_sweep.utils import parse_distance_bound


USAGE = 'Usage: lj-sweep [--strict] R\n'


def main(argv=None):
    # arguments are positional on purpose: '-5' is a bound, not an option
    if argv is None:
        argv = sys.argv[1:]

    args = list(argv)
    strict = False
    if args and args[0] == '--strict':
        strict = True
        args = args[1:]

    try:
        if len(args) < 1:
            sys.stderr.write(USAGE)
            raise MissingArgument('Missing distance bound R')

        bound = parse_distance_bound(args[0], strict=strict)
        SweepRunner(bound).run(sys.stdout)

    except LJSweepError as e:
        sys.stderr.write(f'[lj-sweep] {e}\n')
        return 1

    sys.stdout.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
