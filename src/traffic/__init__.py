from .router import (
    Router, Route, Method, RouterException, RouteNotFoundException,
    InvalidMethodException, InvalidPatternException,
    UnresolvedPlaceholderException, InvalidArgumentException)

__version__ = '0.1.0'

__all__ = [
    'Router', 'Route', 'Method', 'RouterException', 'RouteNotFoundException',
    'InvalidMethodException', 'InvalidPatternException',
    'UnresolvedPlaceholderException', 'InvalidArgumentException',
]
