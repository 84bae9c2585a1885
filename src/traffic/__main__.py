import logging
import sys

from .runner import get_parser, verify, run


def main():
    parser = get_parser()
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    router = verify(args)
    if not router:
        return 1

    return run(router, args)


if __name__ == '__main__':
    sys.exit(main())
