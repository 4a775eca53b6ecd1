"""Lock-guarded handle around a LinkGenerator and a redirect DAO.

The generator's counter and the key -> target mapping are mutated together:
reserve the next counter value, encode it, store the mapping. LinkService runs
that sequence under a single mutex and exposes only generation and lookup, so
neither the raw counter nor the mapping can be mutated from outside.

Counter reservation:
    Before every generation the service INCRs the DAO counter and restores the
    generator's internal id from it. The data store therefore owns the durable
    counter, and several processes sharing one store (e.g. Lambda containers
    sharing Redis) never hand out the same key.

Example:
    >>> from linkgen.dao import RedirectMemoryDAO
    >>> from linkgen.utils import LinkGenerator
    >>> service = LinkService(LinkGenerator('/redirect', 10), RedirectMemoryDAO())
    >>> link = service.generate('https://example.com')
    >>> link
    Link(key='vq5ejng0p6', url='/redirect/vq5ejng0p6')
    >>> service.lookup('vq5ejng0p6')
    'https://example.com'
    >>> service.lookup('missing') is None
    True
"""

import logging
import threading

from linkgen.constants import DEFAULT_BARCODE_MIN_HEIGHT, DEFAULT_BARCODE_MIN_WIDTH, U64_MODULUS
from linkgen.dao.base import RedirectBaseDAO
from linkgen.dao.exceptions import RedirectNotFoundError
from linkgen.exceptions import ConfigError
from linkgen.models import Link, RedirectModel
from linkgen.utils.generator import LinkGenerator


logger = logging.getLogger(__name__)


class LinkService:
    """Serialize link generation and resolve redirects

    Methods:
        generate(target_url: str) -> Link:
            Generate a link and store key -> target_url.

        generate_with_barcode(target_url: str, min_width=200, min_height=200) -> tuple[bytes, Link]:
            Generate a link with a barcode image and store key -> target_url.
            Raises ConfigError before reserving a counter value if the
            generator has no renderer. EncodingError from the renderer
            propagates; the reserved counter value is consumed and no mapping
            is stored.

        lookup(key: str) -> str | None:
            Return the target URL for key, None when unknown.
    """

    def __init__(self, generator: LinkGenerator, dao: RedirectBaseDAO):
        self._generator = generator
        self._dao = dao
        self._lock = threading.Lock()

    def generate(self, target_url: str) -> Link:
        with self._lock:
            self._reserve()
            link = self._generator.generate_url()
            self._store(link, target_url)
        return link

    def generate_with_barcode(
        self,
        target_url: str,
        min_width: int = DEFAULT_BARCODE_MIN_WIDTH,
        min_height: int = DEFAULT_BARCODE_MIN_HEIGHT,
    ) -> tuple[bytes, Link]:
        if self._generator.renderer is None:
            raise ConfigError('LinkGenerator has no barcode renderer configured.')

        with self._lock:
            self._reserve()
            image, link = self._generator.generate_with_barcode(min_width, min_height)
            self._store(link, target_url)
        return image, link

    def lookup(self, key: str) -> str | None:
        try:
            return self._dao.get(key).target
        except RedirectNotFoundError:
            logger.debug('Redirect key not found.', extra={'key': key})
            return None

    def _reserve(self) -> None:
        # INCR returns the post-increment value; the reserved id is the one before it
        reserved = (self._dao.count(increment=True) - 1) % U64_MODULUS
        self._generator.set_internal_id(reserved)

    def _store(self, link: Link, target_url: str) -> None:
        self._dao.insert(RedirectModel(key=link.key, target=target_url))
        logger.info('Generated new redirect.', extra={'key': link.key, 'url': link.url})
