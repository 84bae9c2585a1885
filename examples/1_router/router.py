from traffic import Router


r = Router()


# Requests with the path set exactly to `/` and whatever method
# will be directed here.
def home(values):
    return 'Hello /!'


r.any('/', home, name='home')


# `{id:int}` only matches digits, `{tab?}` may be left out. A request to
# `/users/42` calls the handler with `['42']`, `/users/42/posts` with
# `['42', 'posts']`.
def user(values):
    return 'User {}'.format(' '.join(values))


r.get('/users/{id:int}/{tab?}', user, name='user')


# Typed placeholders for e-mail and ip addresses.
def contact(values):
    address, = values
    return 'Mail to {}'.format(address)


r.post('/contact/{to:email}', contact, name='contact')


# Handlers may be coroutines, `traffic dispatch` runs them on uvloop.
async def host(values):
    address, = values
    return 'Host {}'.format(address)


r.get('/hosts/{addr:ip}', host)


# Try:
#
#   traffic router.r routes
#   traffic router.r match GET /users/42/posts
#   traffic router.r uri user id=42
#   traffic router.r dispatch GET /hosts/127.0.0.1
