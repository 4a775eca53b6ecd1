from linkgen.dao.redis.redis_key_schema import RedisKeySchema
from linkgen.dao.redis.mixins import RedisClientMixin
from linkgen.dao.redis.redirect_redis_dao import RedirectRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RedirectRedisDAO',
]
