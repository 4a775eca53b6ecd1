from dataclasses import dataclass

from linkgen.constants import DEFAULT_ALPHABET, DEFAULT_KEY_LENGTH, DEFAULT_SALT, MIN_ALPHABET_LENGTH
from linkgen.exceptions import ConfigError


@dataclass(frozen=True)
class EncoderConfig:
    """Immutable configuration of an ID encoder.

    Attributes:
        alphabet (str):
            Ordered characters the encoder is permitted to emit. Must hold at
            least 16 unique, non-whitespace characters.
        salt (str):
            Arbitrary string permuting the encoder output. May be empty.
        min_length (int):
            Minimum length of every encoded key. Must be positive.

    Raises:
        ConfigError:
            If any attribute violates the constraints above.

    Example:
        >>> config = EncoderConfig(salt='salt', min_length=10)
        >>> config.alphabet
        'abcdefghijklmnopqrstuvwxyz0123456789'
        >>> EncoderConfig(alphabet='')
        Traceback (most recent call last):
            ...
        linkgen.exceptions.ConfigError: Alphabet must be a non-empty string.
    """

    alphabet: str = DEFAULT_ALPHABET
    salt: str = DEFAULT_SALT
    min_length: int = DEFAULT_KEY_LENGTH

    def __post_init__(self):
        if not isinstance(self.alphabet, str) or not self.alphabet:
            raise ConfigError('Alphabet must be a non-empty string.')
        if len(set(self.alphabet)) != len(self.alphabet):
            duplicates = sorted({ch for ch in self.alphabet if self.alphabet.count(ch) > 1})
            raise ConfigError(f'Alphabet must not contain duplicate characters (duplicates: {"".join(duplicates)!r}).')
        if any(ch.isspace() for ch in self.alphabet):
            raise ConfigError('Alphabet must not contain whitespace characters.')
        if len(self.alphabet) < MIN_ALPHABET_LENGTH:
            raise ConfigError(
                f'Alphabet must contain at least {MIN_ALPHABET_LENGTH} unique characters (given: {len(self.alphabet)}).'
            )
        if not isinstance(self.salt, str):
            raise ConfigError(f'Salt must be of type string (given type: {type(self.salt)}).')
        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int):
            raise ConfigError(f'Minimum length must be of type integer (given type: {type(self.min_length)}).')
        if self.min_length < 1:
            raise ConfigError(f'Minimum length must be a positive integer (given value: {self.min_length}).')
