"""Redis-backed cache client with gateway errors raised as :class:`CacheError`."""

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import List

import redis

TTL_REDIS_ONE_SECOND = 1
TTL_REDIS_ONE_MINUTE = 60 * TTL_REDIS_ONE_SECOND
TTL_REDIS_FIVE_MINUTES = 5 * TTL_REDIS_ONE_MINUTE
TTL_REDIS_TEN_MINUTES = 10 * TTL_REDIS_ONE_MINUTE
TTL_REDIS_FIFTEEN_MINUTES = 15 * TTL_REDIS_ONE_MINUTE
TTL_REDIS_THIRTY_MINUTES = 30 * TTL_REDIS_ONE_MINUTE
TTL_REDIS_SEVENTY_FIVE_MINUTES = 75 * TTL_REDIS_ONE_MINUTE
TTL_REDIS_ONE_HOUR = 60 * TTL_REDIS_ONE_MINUTE
TTL_REDIS_HALF_DAY = 12 * TTL_REDIS_ONE_HOUR
TTL_REDIS_ONE_DAY = 24 * TTL_REDIS_ONE_HOUR
TTL_REDIS_THREE_DAYS = 3 * TTL_REDIS_ONE_DAY
TTL_REDIS_ONE_WEEK = 7 * TTL_REDIS_ONE_DAY
TTL_REDIS_ONE_MONTH = 30 * TTL_REDIS_ONE_DAY

DEFAULT_PORT = 6379
DEFAULT_OPEN_CONNECTION_LIMIT = 5
_BLOCKING_POOL_LIMIT = 50
_UNSUCCESSFUL = "redis operation ended unsuccessfully"

_INCR_BY_EX_SCRIPT = """
local result = redis.call("INCRBY", KEYS[1], ARGV[1])
if result then
    redis.call("EXPIRE", KEYS[1], ARGV[2])
    return result
end
return result
"""


class ErrorCode(str, Enum):
    """Kind of cache failure."""

    CONFIG = "config"
    GATEWAY = "gateway"

    def __str__(self):
        return self.value


class CacheError(Exception):
    """Raised when the cache is misconfigured or a command fails."""

    def __init__(self, message, code=ErrorCode.GATEWAY):
        super().__init__(message)
        self.code = code


@dataclass
class RedisConfiguration:
    """Connection settings; timeouts and ages are in seconds."""

    idle_connection_limit: int = 0
    open_connection_limit: int = 0
    wait_open_connection: bool = False
    addresses: List[str] = field(default_factory=list)
    read_only: bool = False
    route_by_latency: bool = False
    route_randomly: bool = False
    max_retries: int = 0
    dial_timeout: int = 0
    max_conn_age: int = 0
    idle_timeout: int = 0
    min_idle_connection: int = 0


def _split_address(address):
    host, sep, port = address.rpartition(":")
    if not sep:
        return address, DEFAULT_PORT
    return host or "localhost", int(port)


def _text(value):
    return value.decode("utf-8") if isinstance(value, (bytes, bytearray)) else value


@contextmanager
def _gateway():
    try:
        yield
    except redis.RedisError as exc:
        raise CacheError(str(exc), ErrorCode.GATEWAY) from exc


class RedisCache:
    """Cache operations over a redis client returning raw bytes."""

    def __init__(self, client):
        self._client = client

    @classmethod
    def from_configuration(cls, config):
        """Connect to the first address of ``config`` and check the connection.

        When neither a connection limit nor waiting is set, the limit becomes 5
        and waiting is turned on; ``config`` is updated accordingly.
        """
        if config.open_connection_limit == 0 and not config.wait_open_connection:
            config.open_connection_limit = DEFAULT_OPEN_CONNECTION_LIMIT
            config.wait_open_connection = True
        if not config.addresses:
            raise CacheError("missing address", ErrorCode.CONFIG)

        host, port = _split_address(config.addresses[0])
        connection = {
            "host": host,
            "port": port,
            "socket_connect_timeout": config.dial_timeout or None,
        }
        if config.wait_open_connection:
            pool = redis.BlockingConnectionPool(
                max_connections=config.open_connection_limit or _BLOCKING_POOL_LIMIT,
                timeout=None,
                **connection,
            )
        else:
            pool = redis.ConnectionPool(
                max_connections=config.open_connection_limit or None, **connection
            )
        client = redis.Redis(connection_pool=pool)
        try:
            client.ping()
        except redis.RedisError as exc:
            pool.disconnect()
            raise CacheError(str(exc), ErrorCode.GATEWAY) from exc
        return cls(client)

    def get(self, key):
        """Return the value of ``key`` as bytes, or None when missing."""
        with _gateway():
            return self._client.get(key)

    def simple_set(self, key, value):
        """Set ``key`` to ``value`` without expiry."""
        with _gateway():
            ok = self._client.set(key, value)
        if not ok:
            raise CacheError(_UNSUCCESSFUL)

    def set_ex(self, key, seconds, value):
        """Set ``key`` to ``value`` expiring after ``seconds``."""
        with _gateway():
            ok = self._client.set(key, value, ex=seconds)
        if not ok:
            raise CacheError(_UNSUCCESSFUL)

    def set_nx(self, key, seconds, value):
        """Set ``key`` only if absent; return False when it already exists."""
        with _gateway():
            return bool(self._client.set(key, value, ex=seconds, nx=True))

    def hmget(self, key, *args):
        """Return the values of the hash fields ``args``; missing ones are None."""
        with _gateway():
            return list(self._client.hmget(key, list(args)))

    def exists(self, key):
        """Return True if ``key`` exists."""
        with _gateway():
            return int(self._client.exists(key)) == 1

    def expire(self, key, seconds):
        """Set the time to live of ``key``; return False when it does not exist."""
        with _gateway():
            return bool(self._client.expire(key, seconds))

    def expire_at(self, key, timestamp):
        """Make ``key`` expire at a Unix ``timestamp``."""
        with _gateway():
            return bool(self._client.expireat(key, timestamp))

    def incr(self, key):
        """Increment ``key`` by one and return the new value."""
        with _gateway():
            return int(self._client.incr(key))

    def decr(self, key):
        """Decrement ``key`` by one and return the new value."""
        with _gateway():
            return int(self._client.decr(key))

    def ttl(self, key):
        """Return the remaining time to live of ``key`` in seconds."""
        with _gateway():
            return int(self._client.ttl(key))

    def hget(self, key, field):
        """Return the value of a hash field as bytes, or None."""
        with _gateway():
            return self._client.hget(key, field)

    def hexists(self, key, field):
        """Return True if the hash field exists."""
        with _gateway():
            return bool(self._client.hexists(key, field))

    def hgetall(self, key):
        """Return every field and value of a hash as text."""
        with _gateway():
            data = self._client.hgetall(key)
        return {_text(k): _text(v) for k, v in (data or {}).items()}

    def hset(self, key, field, value):
        """Set a hash field; return True when it was created or updated."""
        with _gateway():
            result = int(self._client.hset(key, field, value))
        return result in (0, 1)

    def hkeys(self, key):
        """Return the field names of a hash as text."""
        with _gateway():
            return [_text(name) for name in self._client.hkeys(key)]

    def hdel(self, key, *args):
        """Delete hash fields and return how many were removed."""
        with _gateway():
            return int(self._client.hdel(key, *args))

    def delete(self, *args):
        """Delete keys and return how many were removed."""
        with _gateway():
            return int(self._client.delete(*args))

    def incr_by_ex(self, key, by, expires):
        """Increment ``key`` by ``by``, set its expiry, and return the new value."""
        with _gateway():
            return int(self._client.eval(_INCR_BY_EX_SCRIPT, 1, key, by, expires))

    def lrange(self, key, start, stop):
        """Return list items between ``start`` and ``stop`` inclusive."""
        with _gateway():
            data = self._client.lrange(key, start, stop)
        if data is None:
            raise CacheError(_UNSUCCESSFUL)
        return list(data)

    def ltrim(self, key, start, stop):
        """Trim a list to the items between ``start`` and ``stop``."""
        with _gateway():
            ok = self._client.ltrim(key, start, stop)
        if not ok:
            raise CacheError(_UNSUCCESSFUL)

    def sadd(self, key, *args):
        """Add members to a set; return True when at least one was new."""
        with _gateway():
            return int(self._client.sadd(key, *args)) > 0

    def publish(self, topic, message):
        """Send ``message`` to ``topic`` and return the number of receivers."""
        with _gateway():
            return int(self._client.publish(topic, message))

    def close(self):
        """Release the client's connections."""
        try:
            self._client.close()
        except redis.RedisError:
            pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False