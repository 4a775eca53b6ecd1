"""Unit tests for the QRCodeRenderer

Test coverage includes:

1. Rendering
   - Produces an SVG document for short URLs.
   - Emitted width, height and viewBox are at least the requested pixel size.
   - Path coordinates stay inside the viewBox.

2. Capacity errors
   - Text beyond QR version 40 capacity raises EncodingError.
   - Unrelated ValueErrors are not reported as capacity errors.

3. Argument validation
   - Invalid dimensions and renderer options raise ValueError.
"""

import re
from unittest.mock import patch

import pytest
import qrcode

from linkgen.barcode import BarcodeRenderer, QRCodeRenderer
from linkgen.exceptions import EncodingError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def renderer():
    return QRCodeRenderer()


def svg_size(svg: bytes) -> tuple[float, float, list[float]]:
    """Return (width, height, viewBox) of the root <svg> element"""
    root = re.search(rb'<svg [^>]*>', svg).group(0)
    width = re.search(rb' width="([\d.]+)"', root).group(1)
    height = re.search(rb' height="([\d.]+)"', root).group(1)
    view_box = re.search(rb' viewBox="([^"]+)"', root).group(1)
    return float(width), float(height), [float(v) for v in view_box.split()]


# -------------------------------
# 1. Rendering
# -------------------------------


def test_renderer_is_barcode_renderer(renderer):
    assert isinstance(renderer, BarcodeRenderer)


def test_render_svg(renderer):
    svg = renderer.render('/redirect/vq5ejng0p6', 200, 200)

    assert isinstance(svg, bytes)
    assert svg.startswith(b'<?xml')
    assert b'<svg' in svg
    assert b'path' in svg


def test_render_is_deterministic(renderer):
    assert renderer.render('/redirect/vq5ejng0p6', 200, 200) == renderer.render('/redirect/vq5ejng0p6', 200, 200)


@pytest.mark.parametrize('min_width, min_height', [(200, 200), (800, 400), (150, 600), (1, 1)])
def test_render_meets_requested_size(renderer, min_width, min_height):
    """Width, height and viewBox are pixel sizes of at least the requested dimensions."""
    svg = renderer.render('/redirect/vq5ejng0p6', min_width, min_height)
    width, height, view_box = svg_size(svg)

    assert b'mm"' not in svg
    assert width >= min_width
    assert height >= min_height
    assert width == height
    assert view_box == [0, 0, width, height]


def test_render_size_is_a_whole_number_of_modules(renderer):
    """The image is the smallest multiple of the module grid covering the request."""
    svg = renderer.render('/redirect/vq5ejng0p6', 200, 200)
    width, _, _ = svg_size(svg)

    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, border=4)
    qr.add_data('/redirect/vq5ejng0p6')
    qr.make(fit=True)
    side = qr.modules_count + 2 * 4

    assert width == side * -(-200 // side)


def test_render_path_stays_inside_view_box(renderer):
    svg = renderer.render('/redirect/vq5ejng0p6', 300, 300)
    width, height, _ = svg_size(svg)
    path = re.search(rb' d="([^"]+)"', svg).group(1)
    coordinates = [float(v) for v in re.findall(rb'[\d.]+', path)]

    assert coordinates
    assert max(coordinates) <= max(width, height)
    assert min(coordinates) >= 0


@pytest.mark.parametrize('level', ['L', 'M', 'Q', 'H'])
def test_render_with_error_correction_levels(level):
    svg = QRCodeRenderer(error_correction=level).render('https://example.com/redirect/9x5eo4n7ow', 100, 100)
    assert b'<svg' in svg


# -------------------------------
# 2. Capacity errors
# -------------------------------


def test_render_text_beyond_capacity(renderer):
    with pytest.raises(EncodingError, match='exceeds QR code capacity'):
        renderer.render('x' * 5000, 200, 200)


def test_render_does_not_mask_unrelated_value_errors(renderer):
    """Only capacity overflow is reported as EncodingError."""
    with patch.object(qrcode.QRCode, 'make', side_effect=ValueError('Invalid mask pattern')):
        with pytest.raises(ValueError, match='Invalid mask pattern') as exc_info:
            renderer.render('/redirect/vq5ejng0p6', 200, 200)

    assert not isinstance(exc_info.value, EncodingError)


# -------------------------------
# 3. Argument validation
# -------------------------------


@pytest.mark.parametrize('min_width, min_height', [(0, 200), (200, 0), (-1, 200), (200.5, 200), ('200', 200)])
def test_render_invalid_dimensions(renderer, min_width, min_height):
    with pytest.raises(ValueError):
        renderer.render('/redirect/vq5ejng0p6', min_width, min_height)


@pytest.mark.parametrize('kwargs', [{'error_correction': 'X'}, {'border': -1}, {'border': 1.5}])
def test_renderer_invalid_options(kwargs):
    with pytest.raises(ValueError):
        QRCodeRenderer(**kwargs)
