"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

This test suite verifies the correctness, consistency, and safety of
Redis key generation supplied by RedisKeySchema.

Test coverage includes:

1. Redirect target key generation
   - Ensures redirect_target_key() generates correct Redis keys for a given key.

2. Counter key generation
   - Ensures counter_key() generates the global counter key.

3. Default prefix behavior
   - Confirms keys are not prefixed when no prefix is provided.

4. Custom prefix behavior
   - Confirms keys are correctly prefixed when a valid prefix is provided.

5. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from linkgen.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Redirect target key generation
# -------------------------------


@pytest.mark.parametrize(
    'key, expected',
    [
        ('vq5ejng0p6', 'redirects:vq5ejng0p6:target'),
        ('9x5eo4n7ow', 'redirects:9x5eo4n7ow:target'),
    ],
)
def test_redirect_target_key(key, expected):
    """Ensure redirect_target_key() generates valid Redis keys."""
    keys = RedisKeySchema()
    assert keys.redirect_target_key(key) == expected


# -------------------------------
# 2. Counter key generation
# -------------------------------


def test_counter_key():
    keys = RedisKeySchema()
    assert keys.counter_key() == 'redirects:counter'


# -------------------------------
# 3. Default prefix behavior
# -------------------------------


def test_no_key_prefix_by_default():
    """Ensure keys are not prefixed when no prefix is provided."""
    keys = RedisKeySchema()
    assert keys.prefix is None
    assert keys.redirect_target_key('vq5ejng0p6') == 'redirects:vq5ejng0p6:target'


# -------------------------------
# 4. Custom prefix behavior
# -------------------------------


@pytest.mark.parametrize(
    'prefix, key, expected_target_key, expected_counter_key',
    [
        ('linkgen:prod', 'vq5ejng0p6', 'linkgen:prod:redirects:vq5ejng0p6:target', 'linkgen:prod:redirects:counter'),
        ('secret', 'vq5ejng0p6', 'secret:redirects:vq5ejng0p6:target', 'secret:redirects:counter'),
        (None, 'vq5ejng0p6', 'redirects:vq5ejng0p6:target', 'redirects:counter'),
    ],
)
def test_key_prefixing(prefix, key, expected_target_key, expected_counter_key):
    """Ensure keys are correctly prefixed when a prefix is provided."""
    keys = RedisKeySchema(prefix=prefix)
    assert keys.redirect_target_key(key) == expected_target_key
    assert keys.counter_key() == expected_counter_key


# -------------------------------
# 5. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, -1, 45.6, [], {}])
def test_invalid_prefix_type_raises_error(prefix):
    """Ensure invalid prefix types raise a TypeError."""
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
