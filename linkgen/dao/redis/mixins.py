"""Redis client setup shared by the Redis-backed redirect DAOs.

A DAO built on RedisClientMixin refuses to start unless:
    - Redis answers PING;
    - the link counter is either absent or an integer string, i.e. the next
      INCR issued by LinkService can succeed.

A counter overwritten by hand (or holding another data type) would otherwise
surface only on the first generate request, as a bare redis ResponseError.

Example:
    >>> class RedirectRedisDAO(RedisClientMixin, RedirectBaseDAO):
    ...     pass
    ...
    >>> dao = RedirectRedisDAO(redis_host='redis', prefix='linkgen:prod')
    >>> dao._healthcheck()
    True
"""

import redis

from linkgen.dao.redis.redis_key_schema import RedisKeySchema
from linkgen.dao.redis.helpers import handle_redis_connection_error, redis_location
from linkgen.dao.exceptions import DataStoreError


def connect(
    redis_host: str | None = 'localhost',
    redis_port: int | str | None = 6379,
    redis_db: int | str | None = 0,
    redis_decode_responses: bool | None = True,
    redis_username: str | None = None,
    redis_password: str | None = None,
) -> redis.Redis:
    """Create a Redis client from the 'redis' section of the app config.

    Port and database index may arrive as strings from AppConfig.
    """
    return redis.Redis(
        host=redis_host,
        port=int(redis_port),
        db=int(redis_db),
        decode_responses=redis_decode_responses,
        username=redis_username,
        password=redis_password,
    )


class RedisClientMixin:
    """Redis client, key schema and startup checks for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Redis client used by subclasses.

        keys (RedisKeySchema):
            Namespaced key names (redirect targets, link counter).

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Ping Redis and verify the link counter can be incremented.
    """

    def __init__(self, redis_client: redis.Redis | None = None, prefix: str | None = None, **connection):
        """Initialize a Redis-backed DAO

        Args:
            redis_client (redis.Redis | None):
                Pre-initialized Redis client. If None, one is created from connection.

            prefix (str | None):
                Namespace prefix for all Redis keys, e.g. 'linkgen:prod'.

            **connection:
                redis_host, redis_port, redis_db, redis_decode_responses,
                redis_username and redis_password, see connect().

        Raises:
            DataStoreError:
                If Redis is unreachable or the link counter is unusable.
        """
        self.redis = redis_client if redis_client is not None else connect(**connection)
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """Check that Redis is reachable and the link counter can be INCR-ed

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if both checks pass, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If a check fails and raise_error=True.
        """
        try:
            self.redis.ping()
        except redis.exceptions.ConnectionError as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {redis_location(self.redis)}. Check the provided configuration parameters."
                ) from e
            return False

        problem = self._counter_problem()
        if problem is not None:
            if raise_error:
                raise DataStoreError(problem)
            return False
        return True

    @handle_redis_connection_error
    def _counter_problem(self) -> str | None:
        """Describe why the link counter can't be INCR-ed, None if it can"""
        key = self.keys.counter_key()

        kind = self.redis.type(key)
        if isinstance(kind, bytes):
            kind = kind.decode('utf-8')
        if kind == 'none':
            return None
        if kind != 'string':
            return f"Link counter '{key}' holds a Redis {kind}, expected an integer string."

        value = self.redis.get(key)
        try:
            int(value)
        except (TypeError, ValueError):
            return f"Link counter '{key}' holds {value!r}, expected an integer string."
        return None
