"""In-process implementation of RedirectBaseDAO.

Keeps key -> target mappings and the link counter in a plain dict. Useful
for tests, local development and single-process deployments where losing
the mappings on restart is acceptable.

NOTE: the DAO itself is not synchronized. Share it through LinkService,
      which serializes generation behind a single lock.
"""

from beartype import beartype

from linkgen.models import RedirectModel
from linkgen.dao.base import RedirectBaseDAO
from linkgen.dao.exceptions import RedirectAlreadyExistsError, RedirectNotFoundError


class RedirectMemoryDAO(RedirectBaseDAO):
    """Dict-backed DAO for key -> target mappings

    Example:
        >>> dao = RedirectMemoryDAO()
        >>> dao.insert(RedirectModel(key='vq5ejng0p6', target='https://example.com'))
        <RedirectMemoryDAO>
        >>> dao.get('vq5ejng0p6').target
        'https://example.com'
        >>> dao.count(increment=True)
        1
    """

    def __init__(self):
        self._targets: dict[str, str] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._targets)

    @beartype
    def insert(self, redirect: RedirectModel, **kwargs) -> 'RedirectMemoryDAO':
        if redirect.key in self._targets:
            raise RedirectAlreadyExistsError(f"Redirect with key '{redirect.key}' already exists.")

        self._targets[redirect.key] = redirect.target
        return self

    @beartype
    def get(self, key: str, **kwargs) -> RedirectModel:
        try:
            target = self._targets[key]
        except KeyError:
            raise RedirectNotFoundError(f"Redirect with key '{key}' not found.") from None

        return RedirectModel(key=key, target=target)

    def count(self, increment: bool = False, **kwargs) -> int:
        if increment:
            self._counter += 1
        return self._counter
