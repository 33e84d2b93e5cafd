import io

import matplotlib.image as mpimg
import pytest

from services.charts import COLORS, RenderOptions
from utils.img import desaturate, render_chart_png

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _pixels(png: bytes):
    return mpimg.imread(io.BytesIO(png), format="png")


def test_desaturate_is_gray():
    c = desaturate(COLORS[2])
    assert c[1:3] == c[3:5] == c[5:7]


def test_png_canvas_size():
    img = _pixels(render_chart_png([10, 50], RenderOptions(), scale=4))
    assert img.shape[:2] == (80, 360)


def test_png_empty_chart():
    png = render_chart_png([], RenderOptions(line=True, fill=True), scale=2)
    assert png.startswith(PNG_MAGIC)


def test_png_overflow_bar_color():
    img = _pixels(render_chart_png([200], RenderOptions(), scale=4))
    r, g, b = img[40, 6][:3]
    assert r == pytest.approx(0x19 / 255, abs=0.02)
    assert g == pytest.approx(0x61 / 255, abs=0.02)
    assert b == pytest.approx(0x27 / 255, abs=0.02)


def test_png_gray_bar():
    img = _pixels(render_chart_png([200], RenderOptions(gray=True), scale=4))
    r, g, b = img[40, 6][:3]
    assert r == pytest.approx(g, abs=0.01)
    assert g == pytest.approx(b, abs=0.01)
