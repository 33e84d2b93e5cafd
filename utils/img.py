from typing import Sequence
import io
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex, to_rgb
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon, Rectangle

from services import config
from services.charts import (
    HEIGHT, WIDTH, Line, Polyline, Rect, RenderOptions, Shape, build_shapes,
)

# same weights as feColorMatrix type="saturate" values="0"
_LUMA = (0.2126, 0.7152, 0.0722)


def desaturate(color: str) -> str:
    r, g, b = to_rgb(color)
    y = _LUMA[0] * r + _LUMA[1] * g + _LUMA[2] * b
    return to_hex((y, y, y))


def _draw(ax, shape: Shape, gray: bool, scale: float):
    def c(col):
        return desaturate(col) if gray else col

    if isinstance(shape, Rect):
        if shape.height <= 0:
            return
        ax.add_patch(Rectangle((shape.x, shape.y), shape.width, shape.height,
                               facecolor=c(shape.fill), edgecolor="none", linewidth=0))
    elif isinstance(shape, Line):
        # the svg filter only targets rect/polyline
        ax.add_line(Line2D([shape.x1, shape.x2], [shape.y1, shape.y2], color=shape.color,
                           linewidth=shape.stroke_width * scale * 0.72, solid_capstyle="projecting"))
    elif isinstance(shape, Polyline):
        xs = [p[0] for p in shape.points]
        ys = [p[1] for p in shape.points]
        lw = shape.stroke_width * scale * 0.72  # canvas units -> points
        if shape.fill:
            ax.add_patch(Polygon(list(shape.points), closed=True, facecolor=c(shape.fill),
                                 edgecolor=c(shape.stroke), linewidth=lw, joinstyle="round"))
        else:
            ax.add_line(Line2D(xs, ys, color=c(shape.stroke), linewidth=lw,
                               solid_joinstyle="round", solid_capstyle="round"))


def render_chart_png(values: Sequence[float], options: RenderOptions, scale: float = None) -> bytes:
    scale = scale or config.PNG_SCALE
    shapes = build_shapes(values, options)
    dpi = 100
    fig = plt.figure(figsize=(WIDTH * scale / dpi, HEIGHT * scale / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, WIDTH)
    ax.set_ylim(HEIGHT, 0)  # svg y grows downward
    ax.set_axis_off()
    for shape in shapes.all():
        _draw(ax, shape, shapes.options.gray, scale)
    buf = io.BytesIO()
    fig.savefig(buf, format="png", transparent=True, dpi=dpi)
    plt.close(fig)
    return buf.getvalue()
