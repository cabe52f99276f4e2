# gdkit

A set of small, independent building blocks for Python services. It provides
retries, RFC 3339 validation, a compiled-regex cache, sort-expression parsing,
cursor pagination, role-based access control, bcrypt password hashing, an
in-process cache and a Redis cache client.

## Installation

```
pip install gdkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "gdkit[test]"
pytest
```

## Modules at a glance

| Module | Purpose |
| --- | --- |
| `gdkit.tags` | Standard field names (`REQUEST_ID`, `ACTOR_ID`, `DETAIL`, ...) for structured logs and metadata |
| `gdkit.syncx` | `Once`: runs a callable a single time, until `reset()` is called |
| `gdkit.ternary` | `pick(condition, yes, no)` |
| `gdkit.retry` | `do(fn, max_retries)`, `is_max_retries(err)` and `MaxRetriesReachedError` |
| `gdkit.validator` | `rfc3339(value)`, raising `InvalidRFC3339Error` or `UnsupportedInputTypeError` |
| `gdkit.regexcache` | Compiled-pattern cache: `register`, `match_string`, `replace_all_string` |
| `gdkit.stack` | `trim` and `to_list` for shortening stack traces |
| `gdkit.sortx` | Parses `key1:asc,key2:desc` into `Sorts` |
| `gdkit.timex` | `jakarta_location()`, the Asia/Jakarta zone or a fixed +07:00 "WIB" zone |
| `gdkit.netx` | `get_ipv4()` and `get_ipv16()` |
| `gdkit.password` | `hash_password` and `is_match`, backed by bcrypt |
| `gdkit.pagination` | Cursor-based `Request`, `Response` and `Sort` |
| `gdkit.rbac` | `Manager`, `Role` and `key_match2` for role-based access control |
| `gdkit.localcache` | `LocalCache`, an in-process cache with a capacity bound and per-item TTLs |
| `gdkit.rediscache` | `RedisCache`, a client built on `redis`, and TTL constants |

## Examples

### Retrying

`fn(attempt)` returns a `(retry, error)` pair. The loop stops when `retry` is
false or `error` is `None`; a final error is raised, and
`MaxRetriesReachedError` is raised when more than `max_retries` attempts would
be needed.

```python
from gdkit.retry import do, is_max_retries

def attempt(n):
    ok = n >= 3
    return (not ok, None if ok else RuntimeError("not yet"))

do(attempt, max_retries=10)
```

### Validation

```python
from gdkit.validator import rfc3339

rfc3339("2019-10-12T14:20:50.52+07:00")   # a timezone-aware datetime
rfc3339("")                               # None
rfc3339("2019-10-12 14:20:50")            # raises InvalidRFC3339Error
rfc3339(1)                                # raises UnsupportedInputTypeError
```

### Regular expressions

```python
from gdkit.regexcache import match_string, replace_all_string

match_string(r"(\d){6}(\*)+(\d){4}", "123456*1234")        # True
replace_all_string("[0-9]+", "/orders/123456789", "{id}")  # "/orders/{id}"
```

In the replacement, `$1` or `${1}` stands for a group, `${name}` for a named
group and `$$` for a literal dollar sign.

### Sorting

```python
from gdkit.sortx import new_sorts

sorts = new_sorts("id:desc,created_at")
sorts.order_by()          # "id DESC, created_at ASC"
sorts.order_by(True)      # "id ASC, created_at DESC"
sorts.as_dict()           # {"id": "DESC", "created_at": "ASC"}
sorts.desc()              # True
```

### Pagination

```python
from gdkit.pagination import Response

page = Response(order="desc", limit=25, next_uri="/items?page=2", cursor_range=["a1", "z9"])
page.has_next_page()                      # True
page.next_page_request().query_params()   # {"order": "desc", "limit": "25", "starting_after": "z9"}
```

### Passwords

```python
from gdkit.password import hash_password, is_match

password = "password"
hashed = hash_password(password)
assert is_match(password, hashed)
```

`hash_password` raises `ValueError` for an empty password.

### Access control

```python
from gdkit.rbac import Manager, Role

manager = Manager(True, "policy.csv")
manager.add_policy("admin", "/api/v1/*", "*")
manager.assign_user_role(1, Role.ADMIN)
manager.enforce("1", "/api/v1/orders", "GET")   # True
```

A request is allowed when some policy's subject is the user or a role it
inherits, the object matches under `key_match2` (`/*` matches the rest of a
path, `:name` one segment), and the action is equal or the policy's action is
`*`. A `Manager` created with `enable=False` allows everything.

The policy file is created if missing and read once when the `Manager` is
created; it holds `p, sub, obj, act` and `g, user, role` lines. Policies and
roles added afterwards are kept in memory only and are not written back.

### Local cache

```python
from gdkit.localcache import LocalCache, LocalCacheConfiguration

config = LocalCacheConfiguration(num_counters=1000, max_cost=100, buffer_items=64)
with LocalCache(config) as cache:
    cache.set("a", 1)
    cache.set_ex("b", 2, 30)     # expires after 30 seconds
    cache.get("a")               # 1
```

Each item costs 1; beyond `max_cost` items the least recently used are
evicted. A zero TTL never expires and a negative TTL discards the value.

### Redis cache

```python
from gdkit.rediscache import RedisCache, RedisConfiguration, TTL_REDIS_ONE_HOUR

cache = RedisCache.from_configuration(RedisConfiguration(addresses=["localhost:6379"]))
cache.set_ex("greeting", TTL_REDIS_ONE_HOUR, "hello")
cache.get("greeting")   # b"hello"
cache.close()
```

`from_configuration` connects to the first address and pings it. Missing
addresses raise `CacheError` with code `ErrorCode.CONFIG`; failed commands
raise `CacheError` with code `ErrorCode.GATEWAY`.

## What the package does not do

- It has no logger of its own and no request-context object; `gdkit.tags` only
  supplies field names for whatever logger you use.
- It has no message-queue consumers, publishers or middleware.
- It has no Redis cluster client and no helper for moving data between two
  Redis instances.
- It provides no command-line tool or server.