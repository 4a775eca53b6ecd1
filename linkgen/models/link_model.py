from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """Represent a freshly generated link.

    Attributes:
        key (str):
            Short alphabet-restricted identifier produced by the encoder.
        url (str):
            Full redirect URL, i.e. the generator's base path followed by the key.

    Example:
        >>> link = Link(key='vq5ejng0p6', url='/redirect/vq5ejng0p6')
        >>> link.url
        '/redirect/vq5ejng0p6'
    """

    key: str
    url: str
