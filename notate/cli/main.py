"""
CLI entry point for notq: query and reshape JSON documents with notations.
"""
import argparse
import json
import logging
import signal
import sys

import notate
from notate import utils
from notate.errors import NotationError

logger = logging.getLogger('notate')

OPERATIONS = ('get', 'set', 'remove', 'filter', 'flatten', 'expand')
ARITY = {
    'get': (1, 1),
    'set': (2, 2),
    'remove': (1, None),
    'filter': (0, None),
    'flatten': (0, 0),
    'expand': (0, 0),
}


class UsageError(Exception):
    pass


def parse_value(s):
    """
    Parse a string as JSON, falling back to plain string.
    >>> parse_value('[1, 2]'), parse_value('red')
    ([1, 2], 'red')
    """
    try:
        return json.loads(s)
    except json.JSONDecodeError:
        return s


def check_arity(operation, args):
    lo, hi = ARITY[operation]
    if len(args) < lo or (hi is not None and len(args) > hi):
        if hi == 0:
            raise UsageError(f'{operation} takes no arguments')
        if lo == hi:
            raise UsageError(f'{operation} requires {lo} argument(s), got {len(args)}')
        raise UsageError(f'{operation} requires at least {lo} argument(s)')


def run(doc, operation, args, options):
    """
    Apply one operation to a decoded document and return the result.
    """
    if operation in ('flatten', 'expand', 'filter') and not utils.is_collection(doc):
        raise notate.InvalidSourceError()
    if operation == 'get':
        return notate.get(doc, args[0], **options)
    if operation == 'set':
        return notate.set(doc, args[0], parse_value(args[1]), **options)
    if operation == 'remove':
        tree = notate.Tree(doc, options)
        for notation in args:
            tree.remove(notation)
        return tree.value
    if operation == 'filter':
        return notate.filter(doc, args, **options)
    if operation == 'flatten':
        return notate.flatten(doc)
    return notate.expand(doc)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='notq',
        description='Query and transform JSON documents with notations and globs.',
    )
    parser.add_argument(
        '-f', '--file',
        default=None,
        dest='input_file',
        metavar='FILE',
        help='Read input from FILE instead of stdin',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        default=False,
        help='Fail on missing paths instead of returning null',
    )
    parser.add_argument(
        '--preserve-indices',
        action='store_true',
        default=False,
        help='Leave null in place of removed list items',
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=None,
        help='Pretty-print output with this indent',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help='Log debug output to stderr',
    )
    parser.add_argument(
        'operation',
        choices=OPERATIONS,
        help='Operation: ' + ', '.join(OPERATIONS),
    )
    parser.add_argument(
        'args',
        nargs='*',
        help='get PATH | set PATH VALUE | remove PATH... | filter GLOB...',
    )
    return parser


def read_doc(args):
    if args.input_file:
        with open(args.input_file) as f:
            return json.load(f)
    return json.load(sys.stdin)


def main(argv=None):
    """
    CLI entry point.
    """
    try:
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    except AttributeError:
        pass  # Windows

    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(stream=sys.stderr, format='%(name)s: %(message)s')
        logger.setLevel(logging.DEBUG)

    options = {'strict': args.strict, 'preserve_indices': args.preserve_indices}
    try:
        check_arity(args.operation, args.args)
        doc = read_doc(args)
        result = run(doc, args.operation, args.args, options)
    except (NotationError, UsageError, OSError, json.JSONDecodeError) as e:
        print(f'notq: {e}', file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=args.indent))


if __name__ == '__main__':
    main()
