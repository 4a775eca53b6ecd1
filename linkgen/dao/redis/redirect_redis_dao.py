"""Data Access Object (DAO) implementation for managing redirects in Redis

This module provides a Redis-based implementation of RedirectBaseDAO.

Responsibilities:
    - Insert and retrieve key -> target mappings from Redis;
    - Increment the global link counter;
    - Raise appropriate DAO exceptions on conflicts, misses and connectivity issues.

Redis layout (with prefix 'linkgen:prod'):
    linkgen:prod:redirects:<key>:target  -> STRING target URL
    linkgen:prod:redirects:counter       -> STRING integer, INCR-ed once per generated link

Classes:
    RedirectRedisDAO:
        DAO for storing and retrieving RedirectModel in a Redis datastore.

Example:
    >>> from linkgen.models import RedirectModel
    >>> from linkgen.dao.redis import RedirectRedisDAO

    >>> dao = RedirectRedisDAO(prefix="linkgen:dev")
    >>> dao.insert(RedirectModel(key='vq5ejng0p6', target='https://example.com/page'))
    <RedirectRedisDAO>
    >>> dao.get('vq5ejng0p6').target
    'https://example.com/page'
    >>> dao.count(increment=True)
    1
"""

from beartype import beartype

from linkgen.models import RedirectModel
from linkgen.dao.base import RedirectBaseDAO
from linkgen.dao.redis.mixins import RedisClientMixin
from linkgen.dao.redis.helpers import handle_redis_connection_error
from linkgen.dao.exceptions import RedirectAlreadyExistsError, RedirectNotFoundError


class RedirectRedisDAO(RedisClientMixin, RedirectBaseDAO):
    """Redis-based Data Access Object (DAO) for managing key -> target mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(redirect: RedirectModel, **kwargs) -> RedirectRedisDAO:
            Insert a mapping unless its key already exists (SET NX).
            Raises RedirectAlreadyExistsError when the key exists.
            Raises DataStoreError on connectivity issues with Redis.

        get(key: str, **kwargs) -> RedirectModel:
            Retrieve a mapping by key.
            Raises RedirectNotFoundError when the key doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.

        count(increment: bool = False, **kwargs) -> int:
            Retrieve (and optionally increment) the global link counter.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, redirect: RedirectModel, **kwargs) -> 'RedirectRedisDAO':
        """Insert a key -> target mapping into Redis

        The existence check and the write are a single SET NX command, so two
        concurrent inserts of the same key can't both succeed.

        Args:
            redirect (RedirectModel):
                Mapping to be inserted.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            RedirectRedisDAO: self (for method chaining)

        Raises:
            RedirectAlreadyExistsError:
                If a mapping with the same key already exists.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        target_key = self.keys.redirect_target_key(redirect.key)
        if not self.redis.set(target_key, redirect.target, nx=True):
            raise RedirectAlreadyExistsError(f"Redirect with key '{redirect.key}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, key: str, **kwargs) -> RedirectModel:
        """Retrieve a stored mapping by key

        Args:
            key (str):
                The generated key of the mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            RedirectModel: The retrieved mapping.

        Raises:
            RedirectNotFoundError:
                If the key does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        target = self.redis.get(self.keys.redirect_target_key(key))
        if target is None:
            raise RedirectNotFoundError(f"Redirect with key '{key}' not found.")

        if isinstance(target, bytes):
            target = target.decode('utf-8')
        return RedirectModel(key=key, target=target)

    @handle_redis_connection_error
    def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve global link counter

        Args:
            increment (bool):
                If True, atomically increments the counter (INCR). Otherwise, retrieves its value.
            **kwargs:
                Optional keyword arguments.

        Returns:
            int:
                The updated or current global counter value. 0 if never incremented.

        Example:
            >>> dao.count(increment=False)
            123
            >>> dao.count(increment=True)
            124
        """
        if increment:
            return int(self.redis.incr(self.keys.counter_key()))
        return int(self.redis.get(self.keys.counter_key()) or 0)
