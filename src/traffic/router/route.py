import logging
import re
from collections import namedtuple
from enum import Enum, IntEnum

from .errors import InvalidMethodException, InvalidPatternException
from .matcher import match, build_uri, normalize


logger = logging.getLogger('traffic.router')


class Method(Enum):
    GET = 'GET'
    HEAD = 'HEAD'
    POST = 'POST'
    PUT = 'PUT'
    PATCH = 'PATCH'
    DELETE = 'DELETE'
    OPTIONS = 'OPTIONS'
    ANY = 'ANY'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).upper())
        except ValueError:
            raise InvalidMethodException(
                '{} is not a valid method name.'.format(value)) from None


ALLOWED_METHODS = frozenset(m.value for m in Method)


class SegmentType(IntEnum):
    LITERAL = 0
    PLACEHOLDER = 1


class Segment(namedtuple('Segment', 'kind,value,type,optional')):
    __slots__ = ()

    def __new__(cls, kind, value, type=None, optional=False):
        return super().__new__(cls, kind, value, type, optional)

    @property
    def is_placeholder(self):
        return self.kind == SegmentType.PLACEHOLDER


VALID_URL_CHARS = r"a-zA-Z0-9\-_.~:?#\[\]@!$&'()*+,;="
KNOWN_TYPES = ('int', 'string', 'email', 'ip')

_is_valid_chunk = re.compile('[{}]+'.format(VALID_URL_CHARS)).fullmatch


def method_name(method):
    if isinstance(method, Method):
        return method.value

    return str(method).upper()


def parse_placeholder(chunk):
    body = chunk[1:]
    # lenient: a missing closing brace ends the placeholder at segment end
    if body.endswith('}'):
        body = body[:-1]

    if not body:
        raise InvalidPatternException('Empty placeholder in pattern')
    if not _is_valid_chunk(body):
        raise InvalidPatternException(
            'Invalid characters in placeholder "{}"'.format(chunk))

    name, _, typ = body.partition(':')
    optional = False
    if name.endswith('?'):
        name = name[:-1]
        optional = True
    if typ.endswith('?'):
        typ = typ[:-1]
        optional = True

    if not name:
        raise InvalidPatternException(
            'Placeholder "{}" has no name'.format(chunk))

    typ = typ or None
    if typ is not None and typ not in KNOWN_TYPES:
        logger.warning(
            'Unknown type "%s" for placeholder "%s", values will not be '
            'validated', typ, name)

    return Segment(SegmentType.PLACEHOLDER, name, typ, optional)


def parse(pattern):
    names = set()
    result = []

    rest = normalize(pattern)
    if rest == '/':
        return ()

    for chunk in rest.split('/'):
        if not chunk:
            continue

        if chunk.startswith('{'):
            segment = parse_placeholder(chunk)
            if segment.value in names:
                raise InvalidPatternException(
                    'Duplicate name "{}" in pattern'.format(segment.value))
            names.add(segment.value)
        elif _is_valid_chunk(chunk):
            segment = Segment(SegmentType.LITERAL, chunk)
        else:
            raise InvalidPatternException(
                'Invalid characters in segment "{}"'.format(chunk))

        result.append(segment)

    return tuple(result)


class Route:
    __slots__ = ('_method', '_name', '_pattern', '_handler', '_segments')

    def __init__(self, pattern, handler, method=Method.ANY, name=None):
        self._method = Method.parse(method)
        self._pattern = pattern
        self._name = pattern if name is None else name
        self._handler = handler
        self._segments = parse(pattern)

    @property
    def method(self):
        return self._method

    @property
    def name(self):
        return self._name

    @property
    def pattern(self):
        return self._pattern

    @property
    def handler(self):
        return self._handler

    @property
    def segments(self):
        return self._segments

    @property
    def names(self):
        return [s.value for s in self._segments if s.is_placeholder]

    @property
    def placeholder_cnt(self):
        return sum(1 for s in self._segments if s.is_placeholder)

    def accepts(self, method):
        method = method_name(method)
        if self._method is Method.ANY:
            return method in ALLOWED_METHODS

        return method == self._method.value

    def match(self, path):
        return match(self, path)

    def uri(self, args=None):
        return build_uri(self, args or {})

    def __repr__(self):
        return '<Route {}, {} {}>'.format(
            self._pattern, self._method.value, hex(id(self)))

    def describe(self):
        description = self._method.value + ' ' + self._pattern
        if self._name != self._pattern:
            description += ' (' + self._name + ')'

        return description

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented

        return self._pattern == other._pattern \
            and self._method == other._method and self._name == other._name

    def __hash__(self):
        return hash((self._pattern, self._method, self._name))
