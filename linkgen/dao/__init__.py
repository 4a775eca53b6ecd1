from linkgen.dao.base import RedirectBaseDAO
from linkgen.dao.memory import RedirectMemoryDAO


__all__ = [
    'RedirectBaseDAO',
    'RedirectMemoryDAO',
]
