from linkgen.barcode.base import BarcodeRenderer
from linkgen.barcode.qr_renderer import QRCodeRenderer


__all__ = [
    'BarcodeRenderer',
    'QRCodeRenderer',
]
