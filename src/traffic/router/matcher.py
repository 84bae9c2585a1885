import logging
import re

from .errors import InvalidArgumentException, UnresolvedPlaceholderException
from .validators import validate


logger = logging.getLogger('traffic.router')


def strip_slashes(value):
    """Collapse repeated slashes and strip one leading and trailing one.

       The root path `/` is returned unchanged."""
    value = re.sub('/+', '/', value)
    if value == '/':
        return value

    if value.startswith('/'):
        value = value[1:]
    if value.endswith('/'):
        value = value[:-1]

    return value


normalize = strip_slashes


def split(path):
    if path in ('', '/'):
        return []

    return path.split('/')


def match(route, path):
    """Match *path* against *route*.

       Returns the list of placeholder values in declaration order or
       None when the path does not match. Optional placeholders that are
       missing or invalid contribute no value, so the list can be shorter
       than the number of placeholders. A missing required placeholder
       only matches when it has no type, its value is then ''."""
    path = normalize(path)

    # raw pattern text matches without validating placeholders
    if path == normalize(route.pattern):
        return []

    bits = split(path)
    segments = route.segments
    if len(bits) > len(segments):
        return None

    values = []
    for pos, segment in enumerate(segments):
        bit = bits[pos] if pos < len(bits) else ''

        if not segment.is_placeholder:
            if bit != segment.value:
                return None
            continue

        if not bit:
            if segment.optional:
                continue
            # untyped placeholders take any value, including an empty one
            if segment.type is not None:
                return None
            values.append(bit)
            continue

        if validate(bit, segment.type):
            values.append(bit)
        elif not segment.optional:
            return None

    return values


def build_uri(route, args):
    if normalize(route.pattern) == '/':
        return '/'

    compiled = []
    skipped = None
    for segment in route.segments:
        if not segment.is_placeholder:
            value = segment.value
        elif segment.value in args:
            value = str(args[segment.value])
            if not value or '/' in value \
               or not validate(value, segment.type):
                raise InvalidArgumentException(
                    'Invalid value {!r} for placeholder "{}" in {}'.format(
                        value, segment.value, route.pattern))
        elif segment.optional:
            skipped = skipped or segment.value
            continue
        else:
            raise UnresolvedPlaceholderException(
                'No value for placeholder "{}" in {}'.format(
                    segment.value, route.pattern))

        if skipped:
            raise UnresolvedPlaceholderException(
                'No value for optional placeholder "{}" followed by other '
                'segments in {}'.format(skipped, route.pattern))

        compiled.append(value)

    return '/' + '/'.join(compiled)


class Matcher:
    def __init__(self, routes):
        self._routes = tuple(routes)

    @property
    def routes(self):
        return self._routes

    def match_all(self, request):
        for route in self._routes:
            if not route.accepts(request.method):
                continue

            values = match(route, request.path)
            if values is None:
                continue

            logger.debug(
                'Matched %s %s to %r with %r',
                request.method, request.path, route, values)

            yield route, values

    def match_request(self, request):
        for route, values in self.match_all(request):
            return route, values

        return None
