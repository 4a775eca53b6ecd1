"""Link generation utility

This module provides the LinkGenerator: a wrapping u64 counter bound to an
Encoder and a base redirect path. Each call produces a new key and the full
redirect URL built from it, optionally paired with a barcode image.

Classes:
    LinkGenerator(redirect_url, length, salt='', *, alphabet=DEFAULT_ALPHABET, renderer=None):
        Generate sequential, non-obvious redirect links.

Example:
    >>> from linkgen.utils import LinkGenerator
    >>> generator = LinkGenerator('/some/redirect', 10)
    >>> generator.generate_url()
    Link(key='vq5ejng0p6', url='/some/redirect/vq5ejng0p6')

NOTE:
    The generator is not safe for concurrent use: `generate_url()` is a
    read-modify-write of the counter. Share it through LinkService (or any
    other mutex) when requests are handled concurrently.
"""

import logging
from typing import TYPE_CHECKING

from linkgen.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_BARCODE_MIN_HEIGHT,
    DEFAULT_BARCODE_MIN_WIDTH,
    DEFAULT_SALT,
    U64_MODULUS,
)
from linkgen.exceptions import ConfigError
from linkgen.models import EncoderConfig, Link
from linkgen.utils.encoder import Encoder

if TYPE_CHECKING:
    from linkgen.barcode.base import BarcodeRenderer


logger = logging.getLogger(__name__)


def normalize_base_path(redirect_url: str) -> str:
    """Return redirect_url ending in exactly one '/'

    Example:
        >>> normalize_base_path('/redirect')
        '/redirect/'
        >>> normalize_base_path('https://example.com/r//')
        'https://example.com/r/'
    """
    if not isinstance(redirect_url, str):
        raise ConfigError(f'Redirect URL must be of type string (given type: {type(redirect_url)}).')
    return f'{redirect_url.rstrip("/")}/'


class LinkGenerator:
    """Generate redirect links from a monotonically increasing counter.

    Attributes:
        redirect_url (str):
            Base redirect path, normalized to end in exactly one '/'.

        encoder (Encoder):
            Encoder turning counter values into keys.

        renderer (BarcodeRenderer | None):
            Optional barcode capability used by `generate_with_barcode()`.

    Methods:
        generate_url() -> Link:
            Encode the current counter, advance it by one and return the link.

        generate_with_barcode(min_width=200, min_height=200) -> tuple[bytes, Link]:
            Generate a link and render its URL as a barcode image.

        get_internal_id() -> int / set_internal_id(id: int) -> None:
            Read or restore the counter (e.g. across process restarts).
    """

    def __init__(
        self,
        redirect_url: str,
        length: int,
        salt: str = DEFAULT_SALT,
        *,
        alphabet: str = DEFAULT_ALPHABET,
        renderer: 'BarcodeRenderer | None' = None,
    ):
        """Create a new LinkGenerator with its counter at 0

        Args:
            redirect_url (str):
                Base redirect path, e.g. '/redirect' or 'https://example.com/r'.

            length (int):
                Minimum key length.

            salt (str):
                Salt producing a non-standard generation pattern. Defaults to ''.

            alphabet (str):
                Characters keys are drawn from. Defaults to [a-z0-9].

            renderer (BarcodeRenderer | None):
                Barcode capability for `generate_with_barcode()`.

        Raises:
            ConfigError:
                If the alphabet, salt, length or redirect URL are invalid.
        """
        config = EncoderConfig(alphabet=alphabet, salt=salt, min_length=length)

        self._id = 0
        self.encoder = Encoder(config)
        self.redirect_url = normalize_base_path(redirect_url)
        self.renderer = renderer

    @classmethod
    def from_config(
        cls,
        redirect_url: str,
        config: EncoderConfig,
        renderer: 'BarcodeRenderer | None' = None,
    ) -> 'LinkGenerator':
        """Create a LinkGenerator from an existing EncoderConfig"""
        return cls(redirect_url, config.min_length, config.salt, alphabet=config.alphabet, renderer=renderer)

    def get_internal_id(self) -> int:
        """Return the counter value the next `generate_url()` call will encode"""
        return self._id

    def set_internal_id(self, id: int) -> None:
        """Restore the counter value

        Args:
            id (int):
                Unsigned 64-bit counter value to encode next.

        Raises:
            TypeError:
                If id is not an integer.
            ValueError:
                If id is outside [0, 2^64).
        """
        if isinstance(id, bool) or not isinstance(id, int):
            raise TypeError(f'Internal id must be of type integer (given type: {type(id)}).')
        if not 0 <= id < U64_MODULUS:
            raise ValueError(f'Internal id must be an unsigned 64-bit integer (given value: {id}).')

        self._id = id

    def generate_url(self) -> Link:
        """Generate a new link

        Encodes the current counter value, then advances the counter by one.
        After 2^64 - 1 the counter wraps to 0 without raising, so keys are
        reused after 2^64 generations.

        Returns:
            Link: the new key and its full redirect URL.

        Example:
            >>> generator = LinkGenerator('/redirect', 10, 'salt')
            >>> generator.generate_url()
            Link(key='9x5eo4n7ow', url='/redirect/9x5eo4n7ow')
        """
        key = self.encoder.encode(self._id)
        self._id = (self._id + 1) % U64_MODULUS
        return Link(key=key, url=f'{self.redirect_url}{key}')

    def generate_with_barcode(
        self,
        min_width: int = DEFAULT_BARCODE_MIN_WIDTH,
        min_height: int = DEFAULT_BARCODE_MIN_HEIGHT,
    ) -> tuple[bytes, Link]:
        """Generate a new link and render its URL as a barcode

        NOTE: the counter advances before rendering. If rendering fails the
              generated key is consumed and never handed out.

        Args:
            min_width (int):
                Minimum image width. Defaults to 200.
            min_height (int):
                Minimum image height. Defaults to 200.

        Returns:
            tuple[bytes, Link]: barcode image and the generated link.

        Raises:
            ConfigError:
                If no renderer was injected (the counter doesn't advance).
            EncodingError:
                If the renderer can't represent the URL (the counter has advanced).
        """
        if self.renderer is None:
            raise ConfigError('LinkGenerator has no barcode renderer configured.')

        link = self.generate_url()
        image = self.renderer.render(link.url, min_width, min_height)
        logger.debug('Rendered barcode for generated link.', extra={'key': link.key, 'imageSize': len(image)})
        return image, link
