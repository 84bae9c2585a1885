import sys
import textwrap

import pytest

from .runner import get_parser, verify, run, parse_args, run_result


ROUTES = '''
from traffic import Router

router = Router()
not_a_router = object()


def show_user(values):
    return 'user ' + ' '.join(values)


async def show_feed(values):
    return 'feed ' + ' '.join(values)


router.get('/', lambda values: 'home', name='home')
router.get('/users/{id:int}/{tab?}', show_user, name='user')
router.post('/feed/{name}', show_feed)
'''


@pytest.fixture(scope='module', autouse=True)
def routes_module(tmp_path_factory):
    path = tmp_path_factory.mktemp('routes')
    (path / 'sample_routes.py').write_text(textwrap.dedent(ROUTES))
    sys.path.insert(0, str(path))

    yield 'sample_routes'

    sys.path.remove(str(path))
    sys.modules.pop('sample_routes', None)


def execute(*argv):
    args = get_parser().parse_args(argv)
    router = verify(args)
    if not router:
        return 1

    return run(router, args)


def test_routes(capsys):
    assert execute('sample_routes.router', 'routes') == 0

    assert capsys.readouterr().out.splitlines() == [
        'GET / (home)',
        'GET /users/{id:int}/{tab?} (user)',
        'POST /feed/{name}',
    ]


def test_match(capsys):
    assert execute('sample_routes.router', 'match', 'get', '/users/42') == 0

    assert capsys.readouterr().out.splitlines() == [
        'GET /users/{id:int}/{tab?} (user)',
        '42',
    ]


def test_match_not_found(capsys):
    assert execute('sample_routes.router', 'match', 'GET', '/nope') == 1

    assert capsys.readouterr().out == 'Not Found\n'


def test_uri(capsys):
    assert execute(
        'sample_routes.router', 'uri', 'user', 'id=7', 'tab=posts') == 0

    assert capsys.readouterr().out == '/users/7/posts\n'


@pytest.mark.parametrize('argv,message', [
    (['user'], 'No value for placeholder "id"'),
    (['user', 'id=x'], 'Invalid value'),
    (['missing'], 'No route named "missing"'),
    (['user', 'id'], 'not in key=value form'),
])
def test_uri_error(capsys, argv, message):
    assert execute('sample_routes.router', 'uri', *argv) == 1

    assert message in capsys.readouterr().out


def test_dispatch(capsys):
    assert execute(
        'sample_routes.router', 'dispatch', 'GET', '/users/1/likes') == 0

    assert capsys.readouterr().out == 'user 1 likes\n'


def test_dispatch_coroutine(capsys):
    assert execute(
        'sample_routes.router', 'dispatch', 'POST', '/feed/news') == 0

    assert capsys.readouterr().out == 'feed news\n'


def test_dispatch_not_found(capsys):
    assert execute('sample_routes.router', 'dispatch', 'GET', '/feed/x') == 1

    assert capsys.readouterr().out == 'Not Found\n'


@pytest.mark.parametrize('specifier,message', [
    ('sample_routes', "must contain at least one '.'"),
    ('missing_module.router', 'on Python search path'),
    ('sample_routes.missing', "does not have an attribute 'missing'"),
    ('sample_routes.not_a_router', "is not an instance of 'traffic.Router'"),
])
def test_verify_error(capsys, specifier, message):
    assert execute(specifier, 'routes') == 1

    assert message in capsys.readouterr().out


def test_debug_from_environment(monkeypatch):
    monkeypatch.setenv('TRAFFIC_DEBUG', '1')

    assert get_parser().parse_args(['x.router', 'routes']).debug


def test_parse_args():
    assert parse_args(['a=1', 'b=x=y', 'c=']) == \
        {'a': '1', 'b': 'x=y', 'c': ''}


def test_run_result():
    async def coro():
        return 42

    assert run_result(41) == 41
    assert run_result(coro()) == 42
