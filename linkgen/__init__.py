"""linkgen: short, reversible, URL-safe keys and redirect links

Basic example:
    >>> from linkgen import LinkGenerator
    >>> generator = LinkGenerator('/some/redirect', 10)
    >>> generator.generate_url()
    Link(key='vq5ejng0p6', url='/some/redirect/vq5ejng0p6')
"""

from linkgen.exceptions import ConfigError, EncodingError, InvalidKeyError, LinkGenError
from linkgen.models import EncoderConfig, Link, RedirectModel
from linkgen.utils.encoder import Encoder
from linkgen.utils.generator import LinkGenerator


__all__ = [
    'Encoder',
    'EncoderConfig',
    'Link',
    'LinkGenerator',
    'RedirectModel',
    'LinkGenError',
    'ConfigError',
    'EncodingError',
    'InvalidKeyError',
]
