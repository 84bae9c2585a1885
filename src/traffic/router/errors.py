"""Exceptions raised while compiling routes and building URIs.

Failing to match is not an error, matchers return None instead.
"""


class RouterException(Exception):
    pass


class RouteNotFoundException(RouterException):
    pass


class InvalidMethodException(RouterException, ValueError):
    pass


class InvalidPatternException(RouterException, ValueError):
    pass


class UnresolvedPlaceholderException(RouterException, KeyError):
    def __str__(self):
        return self.args[0] if self.args else ''


class InvalidArgumentException(RouterException, ValueError):
    pass
