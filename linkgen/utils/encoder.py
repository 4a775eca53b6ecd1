"""Key encoding utility

This module provides the ID encoder: a deterministic, salted, reversible
mapping between an unsigned 64-bit counter and a short key drawn from a
restricted alphabet.

Classes:
    Encoder(config):
        Encode counters into keys and decode keys back into counters.

Example:
    >>> from linkgen.models import EncoderConfig
    >>> from linkgen.utils import Encoder
    >>> encoder = Encoder(EncoderConfig(min_length=10))
    >>> encoder.encode(0)
    'vq5ejng0p6'
    >>> encoder.decode('vq5ejng0p6')
    0
"""

from hashids import Hashids

from linkgen.constants import U64_MODULUS
from linkgen.exceptions import InvalidKeyError
from linkgen.models import EncoderConfig


class Encoder:
    """Salted, reversible counter-to-key encoder.

    The encoder is built on the Hashids algorithm: the counter is written in
    the base of a salt-shuffled alphabet, framed with guard characters and
    padded with further shuffles of the alphabet until the minimum length is
    reached. Therefore:
    - the mapping is 1:1 over the whole u64 domain (no wrap-around inside the encoder)
    - output is deterministic for a given config
    - sequential counters produce unrelated-looking keys
    - every key is at least `config.min_length` characters long

    NOTE:
        The salt obfuscates, it does not encrypt. Anyone holding the config
        can decode every key.

    Attributes:
        config (EncoderConfig):
            Immutable alphabet, salt and minimum length.

    Example:
        >>> encoder = Encoder(EncoderConfig(salt='salt', min_length=10))
        >>> encoder.encode(0)
        '9x5eo4n7ow'
    """

    def __init__(self, config: EncoderConfig):
        if not isinstance(config, EncoderConfig):
            raise TypeError(f'Config must be of type EncoderConfig (given type: {type(config)}).')

        self._config = config
        self._hashids = Hashids(salt=config.salt, min_length=config.min_length, alphabet=config.alphabet)

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def encode(self, value: int) -> str:
        """Encode a counter value into a key.

        Args:
            value (int):
                Unsigned 64-bit counter value.

        Returns:
            str: Key of at least `config.min_length` alphabet characters.

        Raises:
            TypeError:
                If value is not an integer.
            ValueError:
                If value is outside [0, 2^64).

        Example:
            >>> encoder.encode(0)
            'vq5ejng0p6'
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'Value must be of type integer (given type: {type(value)}).')
        if not 0 <= value < U64_MODULUS:
            raise ValueError(f'Value must be an unsigned 64-bit integer (given value: {value}).')

        return self._hashids.encode(value)

    def decode(self, key: str) -> int:
        """Decode a key back into its counter value.

        Only canonical keys are accepted: the decoded value must re-encode to
        exactly the given key under this config.

        Args:
            key (str):
                Key previously produced by `encode()` with the same config.

        Returns:
            int: The originating counter value.

        Raises:
            TypeError:
                If key is not a string.
            InvalidKeyError:
                If key is not the canonical encoding of a single u64 value.

        Example:
            >>> encoder.decode(encoder.encode(12345))
            12345
        """
        if not isinstance(key, str):
            raise TypeError(f'Key must be of type string (given type: {type(key)}).')

        values = self._hashids.decode(key)
        if len(values) != 1:
            raise InvalidKeyError(f"Key '{key}' does not encode a single value.")

        value = values[0]
        if not 0 <= value < U64_MODULUS or self._hashids.encode(value) != key:
            raise InvalidKeyError(f"Key '{key}' is not a canonical key for this encoder.")
        return value
