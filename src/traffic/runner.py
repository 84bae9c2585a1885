from argparse import ArgumentParser
from importlib import import_module
import inspect
import logging
import os
import sys

import uvloop

from .router import Router, Request, RouterException


logger = logging.getLogger('traffic.runner')


def get_parser():
    prog = 'python -m traffic' if sys.argv[0].endswith('__main__.py') \
        else 'traffic'
    parser = ArgumentParser(prog=prog)
    parser.add_argument(
        '--debug', dest='debug', action='store_const',
        const=True, default=bool(os.environ.get('TRAFFIC_DEBUG')))
    parser.add_argument('router')

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('routes', help='list registered routes')

    match = commands.add_parser(
        'match', help='show the route and values a request matches')
    match.add_argument('method')
    match.add_argument('path')

    uri = commands.add_parser('uri', help='build the uri of a named route')
    uri.add_argument('name')
    uri.add_argument('args', nargs='*', metavar='key=value')

    dispatch = commands.add_parser(
        'dispatch', help='run the handler of the first matching route')
    dispatch.add_argument('method')
    dispatch.add_argument('path')

    return parser


def verify(args):
    try:
        module, attribute = args.router.rsplit('.', 1)
    except ValueError:
        print(
            "Router specifier must contain at least one '.', " +
            "got '{}'.".format(args.router))
        return False

    try:
        module = import_module(module)
    except ModuleNotFoundError as e:
        print(e.args[0] + ' on Python search path.')
        return False

    try:
        attribute = getattr(module, attribute)
    except AttributeError:
        print(
            "Module '{}' does not have an attribute '{}'."
            .format(module.__name__, attribute))
        return False

    if not isinstance(attribute, Router):
        print("{} is not an instance of 'traffic.Router'.".format(
            args.router))
        return False

    return attribute


def parse_args(pairs):
    result = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise ValueError(
                "Argument '{}' is not in key=value form.".format(pair))
        result[key] = value

    return result


def show_routes(router, args):
    for route in router.routes:
        print(route.describe())

    return 0


def show_match(router, args):
    request = Request(args.method.upper(), args.path)

    found = router.get_matcher().match_request(request)
    if found is None:
        print('Not Found')
        return 1

    route, values = found
    print(route.describe())
    for value in values:
        print(value)

    return 0


def show_uri(router, args):
    try:
        print(router.uri(args.name, parse_args(args.args)))
    except (RouterException, ValueError) as e:
        print(e)
        return 1

    return 0


def run_result(result):
    if not inspect.isawaitable(result):
        return result

    loop = uvloop.new_event_loop()
    try:
        return loop.run_until_complete(result)
    finally:
        loop.close()


def dispatch(router, args):
    found = router.execute(args.method, args.path)
    if found is None:
        print('Not Found')
        return 1

    route, result = found
    logger.debug('Dispatched %s %s to %r', args.method, args.path, route)
    print(run_result(result))

    return 0


COMMANDS = {
    'routes': show_routes,
    'match': show_match,
    'uri': show_uri,
    'dispatch': dispatch,
}


def run(router, args):
    return COMMANDS[args.command](router, args)
