"""Abstract base class for redirect data access objects (DAOs).

This class establishes a consistent contract for all redirect DAO implementations,
regardless of the underlying storage mechanism (e.g., in-process dict, Redis).

Responsibilities:
    - Provide an interface for inserting and retrieving RedirectModel objects.
    - Provide the durable link counter generators restore their internal id from.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkgen.models import RedirectModel
        >>> from linkgen.dao.redis import RedirectRedisDAO

        >>> dao = RedirectRedisDAO(...)

        >>> dao.insert(RedirectModel(key='vq5ejng0p6', target='https://example.com/blog/article-123'))

        >>> dao.get('vq5ejng0p6').target
        'https://example.com/blog/article-123'
"""

from abc import ABC, abstractmethod

from linkgen.models import RedirectModel


class RedirectBaseDAO(ABC):
    """Interface for redirect data access objects (DAOs).

    Methods:
        insert(redirect: RedirectModel, **kwargs) -> RedirectBaseDAO:
            Insert a new key -> target mapping into the data store.
            Raises RedirectAlreadyExistsError if the key already exists.
            Raises DataStoreError on connection or write failure.

        get(key: str, **kwargs) -> RedirectModel:
            Retrieve a mapping from the data store by key.
            Raises RedirectNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        count(increment: bool, **kwargs) -> int:
            Return the link counter from the data store.
            Optionally increment the counter before retrieving.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., RedirectMemoryDAO or
        RedirectRedisDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Mappings never expire. Expiry and eviction are the data store's concern.
    """

    @abstractmethod
    def insert(self, redirect: RedirectModel, **kwargs) -> 'RedirectBaseDAO':
        """Insert a new RedirectModel into the data store.

        Args:
            redirect (RedirectModel):
                The key -> target mapping to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            RedirectBaseDAO: self (for method chaining)

        Raises:
            RedirectAlreadyExistsError:
                If a mapping with the same key already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, key: str, **kwargs) -> RedirectModel:
        """Retrieve a RedirectModel from the data store by its key.

        Args:
            key (str):
                The generated key of the mapping.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            RedirectModel: The stored mapping.

        Raises:
            RedirectNotFoundError:
                If no mapping with the given key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve the current link counter value from the data store.

        Args:
            increment (bool):
                If True, increment the counter by 1 before returning the value.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The current counter value (0 if it was never incremented).

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
