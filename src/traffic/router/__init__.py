import logging
from collections import namedtuple

from .errors import (
    RouterException, RouteNotFoundException, InvalidMethodException,
    InvalidPatternException, UnresolvedPlaceholderException,
    InvalidArgumentException)
from .route import Route, Method, method_name
from .matcher import Matcher


logger = logging.getLogger('traffic.router')


Request = namedtuple('Request', 'method,path')


class Router:
    """Registry of compiled routes.

       Routes are matched in registration order. Registration is not
       guarded against concurrent dispatch, register everything before
       sharing the router or a matcher between threads."""

    def __init__(self, matcher_factory=Matcher):
        self._routes = []
        self._names = {}
        self._current = None
        self.matcher_factory = matcher_factory

    def add_route(self, pattern, handler, method=Method.ANY, name=None):
        method = Method.parse(method)
        route = Route(pattern, handler, method, name)

        if route.name in self._names:
            logger.warning(
                'Route name "%s" already registered, lookup will return %r',
                route.name, route)

        self._routes.append(route)
        self._names[route.name] = route
        logger.debug('Registered %r', route)

        return route

    def get(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.GET, name)

    def head(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.HEAD, name)

    def post(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.POST, name)

    def put(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.PUT, name)

    def patch(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.PATCH, name)

    def delete(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.DELETE, name)

    def options(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.OPTIONS, name)

    def any(self, pattern, handler, name=None):
        return self.add_route(pattern, handler, Method.ANY, name)

    @property
    def routes(self):
        return list(self._routes)

    @property
    def current(self):
        return self._current

    def route(self, name):
        return self._names.get(name)

    def uri(self, name, args=None):
        route = self.route(name)
        if route is None:
            raise RouteNotFoundException(
                'No route named "{}"'.format(name))

        return route.uri(args)

    def get_matcher(self):
        return self.matcher_factory(self._routes)

    def execute(self, method, path):
        """Invoke the handler of the first route matching the request.

           Returns a `(route, result)` pair or None if nothing matched."""
        request = Request(method_name(method), path)
        found = self.get_matcher().match_request(request)
        if found is None:
            logger.debug('No route for %s %s', request.method, path)
            return None

        route, values = found
        self._current = route

        return route, route.handler(values)

    def execute_all(self, method, path):
        """Invoke the handler of every route matching the request.

           Returns a list of `(route, result)` pairs in registration order."""
        request = Request(method_name(method), path)
        results = []
        for route, values in self.get_matcher().match_all(request):
            self._current = route
            results.append((route, route.handler(values)))

        if not results:
            logger.debug('No route for %s %s', request.method, path)

        return results


__all__ = [
    'Router', 'Route', 'Method', 'Matcher', 'Request',
    'RouterException', 'RouteNotFoundException', 'InvalidMethodException',
    'InvalidPatternException', 'UnresolvedPlaceholderException',
    'InvalidArgumentException',
]
