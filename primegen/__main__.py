import argparse
import logging
import sys

from .errors import SinkWriteError
from .generator import DEFAULT_METHOD, TESTS
from .parallel import generate_primes
from .progress import TqdmProgress
from .sink import FileSink

OUTPUT_FILE = './output.txt'


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        msg = f'{value!r} is not an integer'
        raise argparse.ArgumentTypeError(msg) from None
    if n <= 0:
        msg = f'{value} should be > 0'
        raise argparse.ArgumentTypeError(msg)
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='primegen', description='Generate random probable primes of a given bit length')
    parser.add_argument('bits', type=positive_int, help='amount of bits of every number')
    parser.add_argument('count', type=positive_int, help='amount of numbers to generate')
    parser.add_argument('-o', '--output', default=OUTPUT_FILE, help=f'output file (default: {OUTPUT_FILE})')
    parser.add_argument('--method', choices=sorted(TESTS), default=DEFAULT_METHOD)
    parser.add_argument('--rounds', type=positive_int, default=None, help='rounds per candidate (default: log2 of it)')
    parser.add_argument('--workers', type=positive_int, default=None)
    parser.add_argument('--seed', type=int, default=None, help='seed for a reproducible batch')
    parser.add_argument('--strict', action='store_true', help='abort the batch on the first failed write')
    parser.add_argument('--no-progress', action='store_true')
    parser.add_argument('-v', '--verbose', action='count', default=0)

    args = parser.parse_args(argv)
    if args.bits < 2:  # noqa: PLR2004
        parser.error('there are no 1 bit primes, bits should be >= 2')
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        sink = FileSink(args.output)
    except OSError as e:
        print(f'Cannot create output file {args.output}: {e}', file=sys.stderr)  # noqa: T201
        return 3

    progress = None if args.no_progress else TqdmProgress(args.count)
    try:
        with sink:
            report = generate_primes(
                args.bits,
                args.count,
                sink,
                progress,
                method=args.method,
                rounds=args.rounds,
                workers=args.workers,
                seed=args.seed,
                isolate_failures=not args.strict,
            )
    except SinkWriteError as e:
        print(e, file=sys.stderr)  # noqa: T201
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        if progress is not None:
            progress.close()

    if not report.ok:
        print(f'Failed to write tasks: {report.failed}', file=sys.stderr)  # noqa: T201
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
