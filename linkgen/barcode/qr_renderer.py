"""QR code renderer backed by the `qrcode` library

Renders redirect URLs as SVG QR codes. The QR version is chosen
automatically (smallest version that fits the text) and the module size is
scaled so that the image is at least as large as requested.

qrcode's SVG factories measure images in millimetres (a box size of 10 is
1mm). SvgPixelPathImage keeps the single-path output of SvgPathImage but
emits unitless user units, i.e. pixels, so `width`, `height`, `viewBox` and
the path coordinates all match the box size in pixels.

Classes:
    QRCodeRenderer:
        BarcodeRenderer producing SVG documents.

Example:
    >>> renderer = QRCodeRenderer(error_correction='M')
    >>> svg = renderer.render('/redirect/vq5ejng0p6', min_width=200, min_height=200)
    >>> svg.decode('utf-8').startswith('<?xml')
    True
"""

import io
import math
import logging
from decimal import Decimal

import qrcode
import qrcode.image.svg
from qrcode.exceptions import DataOverflowError

from linkgen.barcode.base import BarcodeRenderer
from linkgen.exceptions import EncodingError


logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    'L': qrcode.constants.ERROR_CORRECT_L,
    'M': qrcode.constants.ERROR_CORRECT_M,
    'Q': qrcode.constants.ERROR_CORRECT_Q,
    'H': qrcode.constants.ERROR_CORRECT_H,
}


class SvgPixelPathImage(qrcode.image.svg.SvgPathImage):
    """SvgPathImage measured in pixels instead of millimetres"""

    def units(self, pixels, text=True):
        units = Decimal(pixels)
        return str(units) if text else units


class QRCodeRenderer(BarcodeRenderer):
    """Render text as an SVG QR code.

    Attributes:
        error_correction (str):
            QR error correction level, one of 'L', 'M', 'Q', 'H'. Defaults to 'M'.

        border (int):
            Quiet zone width in modules. Defaults to 4 (the QR specification minimum).
    """

    def __init__(self, error_correction: str = 'M', border: int = 4):
        if error_correction not in ERROR_CORRECTION_LEVELS:
            raise ValueError(f'Error correction must be one of {sorted(ERROR_CORRECTION_LEVELS)} (given value: {error_correction!r}).')
        if not isinstance(border, int) or border < 0:
            raise ValueError(f'Border must be a non-negative integer (given value: {border!r}).')

        self.error_correction = error_correction
        self.border = border

    def render(self, text: str, min_width: int, min_height: int) -> bytes:
        """Render text as an SVG QR code of at least min_width x min_height.

        Args:
            text (str):
                Text to encode.
            min_width (int):
                Minimum image width in pixel units.
            min_height (int):
                Minimum image height in pixel units.

        Returns:
            bytes: UTF-8 encoded SVG document whose `width` and `height` (and
            `viewBox`) are at least min_width x min_height pixels.

        Raises:
            ValueError:
                If a requested dimension is not a positive integer.
            EncodingError:
                If the text doesn't fit in the largest QR version (40).
        """
        for name, value in (('min_width', min_width), ('min_height', min_height)):
            if not isinstance(value, int) or value < 1:
                raise ValueError(f'{name} must be a positive integer (given value: {value!r}).')

        qr = qrcode.QRCode(
            error_correction=ERROR_CORRECTION_LEVELS[self.error_correction],
            border=self.border,
            image_factory=SvgPixelPathImage,
        )
        qr.add_data(text)

        try:
            qr.make(fit=True)
        except DataOverflowError as e:
            logger.warning('Text exceeds QR code capacity.', extra={'textLength': len(text)})
            raise EncodingError(f'Text of length {len(text)} exceeds QR code capacity.') from e

        # QR codes are square: scale the module size to cover the larger dimension
        side = qr.modules_count + 2 * self.border
        qr.box_size = max(1, math.ceil(max(min_width, min_height) / side))

        buffer = io.BytesIO()
        qr.make_image().save(buffer)
        return buffer.getvalue()
