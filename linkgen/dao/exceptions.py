"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    RedirectNotFoundError:
        Raised when a RedirectModel is not found in the data store.

    RedirectAlreadyExistsError:
        Raised when attempting to insert a RedirectModel whose key already exists.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from linkgen.dao.exceptions import RedirectNotFoundError
    >>> raise RedirectNotFoundError("Redirect with key 'vq5ejng0p6' not found.")
    Traceback (most recent call last):
        ...
    linkgen.dao.exceptions.RedirectNotFoundError: Redirect with key 'vq5ejng0p6' not found.
"""

from linkgen.exceptions import LinkGenError


class DAOError(LinkGenError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class RedirectNotFoundError(DAOError):
    """Exception raised when a RedirectModel is not found in the data store."""

    error_code = 'dao:redirect_not_found_error'


class RedirectAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a RedirectModel that already exists in the data store."""

    error_code = 'dao:redirect_already_exists_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    error_code = 'dao:data_store_error'
