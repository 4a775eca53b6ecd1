"""Abstract base class for barcode renderers.

A barcode renderer is an optional capability of the LinkGenerator: it is
injected at construction and only used by `generate_with_barcode()`. The
encoder and the plain `generate_url()` path never depend on it.

Example:
    >>> from linkgen.barcode import QRCodeRenderer
    >>> renderer = QRCodeRenderer()
    >>> image = renderer.render('/redirect/vq5ejng0p6', min_width=200, min_height=200)
    >>> image[:5]
    b'<?xml'
"""

from abc import ABC, abstractmethod


class BarcodeRenderer(ABC):
    """Interface for barcode renderers.

    Methods:
        render(text: str, min_width: int, min_height: int) -> bytes:
            Render text as a scannable 2-D barcode image.
            Raises EncodingError if the text cannot be represented.

    Subclassing:
        Renderer implementations (e.g. QRCodeRenderer) must extend this class
        and implement `render()`.
    """

    @abstractmethod
    def render(self, text: str, min_width: int, min_height: int) -> bytes:
        """Render text as a barcode image.

        Args:
            text (str):
                Text to encode, typically a redirect URL.

            min_width (int):
                Minimum image width in pixel units.

            min_height (int):
                Minimum image height in pixel units.

        Returns:
            bytes: Encoded image document.

        Raises:
            EncodingError:
                If the text exceeds the barcode's capacity.
        """
        pass
