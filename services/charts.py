from __future__ import annotations
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple, Union

MAX_VALUES_SIZE = 100

# canvas
WIDTH = 90
HEIGHT = 20
MAX_HEIGHT = 15
COLUMN_WIDTH = 3
LINE_WIDTH = 2
DEFAULT_MAX_VALUE = 100

COLORS = (
    "#C6E48B",  # light
    "#7BC96F",
    "#239A3B",
    "#196127",  # dark, only when the value hits max_value
)
POLYLINE_COLORS = ("#196127",)
FILL_GRAY = "#d9d9d9"

SVG_OPEN = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
    ' version="1.1"'
    f' viewBox="0 0 {WIDTH} {HEIGHT}"'
    f' width="{WIDTH}"'
    f' height="{HEIGHT}">'
)
SVG_CLOSE = "</svg>"

GRAYSCALE_SETTINGS = (
    "<defs>"
    '<filter id="gray">'
    '<feColorMatrix type="saturate" values="0" />'
    "</filter>"
    "</defs>"
    '<style type="text/css">'
    "<![CDATA["
    "rect, polyline { filter: url(#gray); }"
    "]]>"
    "</style>"
)


def fmt_num(v: float) -> str:
    """Print a number the way a browser would: 16 not 16.0, 8.5 stays 8.5."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == int(v) and abs(v) < 1e21:
        return str(int(v))
    return repr(float(v))


@dataclass(frozen=True)
class RenderOptions:
    max_value: float = 0
    gray: bool = False
    line: bool = False
    fill: bool = False
    bar: bool = False


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str

    def to_svg(self) -> str:
        return (
            f'<rect x="{fmt_num(self.x)}" y="{fmt_num(self.y)}" width="{fmt_num(self.width)}"'
            f' height="{fmt_num(self.height)}" fill="{self.fill}" />'
        )


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    stroke_width: float = LINE_WIDTH

    def to_svg(self) -> str:
        return (
            f'<line x1="{fmt_num(self.x1)}" y1="{fmt_num(self.y1)}"'
            f' x2="{fmt_num(self.x2)}" y2="{fmt_num(self.y2)}"'
            f' fill="{self.color}" stroke="{self.color}" stroke-width="{fmt_num(self.stroke_width)}"'
            ' stroke-linecap="square" stroke-linejoin="square" />'
        )


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Tuple[float, float], ...]
    stroke: str
    stroke_width: float = LINE_WIDTH
    fill: Optional[str] = None  # None -> stroke only

    def points_value(self) -> str:
        return " ".join(f"{fmt_num(x)},{fmt_num(y)}" for x, y in self.points)

    def to_svg(self) -> str:
        return (
            f'<polyline fill="{self.fill or "none"}" stroke-linejoin="round" stroke-linecap="round"'
            f' stroke="{self.stroke}" stroke-width="{fmt_num(self.stroke_width)}"'
            f' points="{self.points_value()}" />'
        )


Shape = Union[Rect, Line, Polyline]


@dataclass
class ChartShapes:
    """Primitives in paint order, plus the normalized options that produced them."""
    options: RenderOptions
    fill: List[Shape] = field(default_factory=list)
    rects: List[Shape] = field(default_factory=list)
    lines: List[Shape] = field(default_factory=list)

    def all(self) -> List[Shape]:
        return [*self.fill, *self.rects, *self.lines]


def parse_options(options: RenderOptions) -> RenderOptions:
    # NaN is falsy for this purpose too
    max_value = options.max_value
    if not max_value or max_value != max_value:
        max_value = DEFAULT_MAX_VALUE
    out = RenderOptions(max_value=max_value, gray=bool(options.gray), fill=bool(options.fill))
    if not options.bar and not options.line:
        out = replace(out, bar=True)
    if options.bar:
        out = replace(out, bar=True, fill=False)
    # bar and line together both render; kept as is
    if options.line:
        out = replace(out, line=True)
    return out


def compute_heights(values: Sequence[float], max_value: float) -> List[float]:
    heights = []
    for v in values[:MAX_VALUES_SIZE]:
        v = math.floor(v) if math.isfinite(v) else v
        heights.append(v / max_value * MAX_HEIGHT)
    return heights


def render_rects(heights: Sequence[float], width: float = COLUMN_WIDTH,
                 max_height: float = MAX_HEIGHT) -> List[Rect]:
    rects = []
    for idx, height in enumerate(heights):
        fill = COLORS[0]
        if height >= max_height:  # overflow
            height = max_height
            fill = COLORS[3]
        elif height >= 0.8 * max_height:
            fill = COLORS[2]
        elif height >= 0.5 * max_height:
            fill = COLORS[1]
        rects.append(Rect(x=idx * width, y=max_height + 1 - height, width=width, height=height, fill=fill))
    return rects


def render_polyline(heights: Sequence[float], color: str, fill: bool = False, fill_gray: bool = False,
                    width: float = COLUMN_WIDTH, max_height: float = MAX_HEIGHT,
                    line_width: float = LINE_WIDTH) -> List[Shape]:
    if not heights:
        return []
    r = line_width / 2
    points = []
    for idx, height in enumerate(heights):
        # keep the stroke inside the canvas
        if height >= max_height - r:
            height = max_height - r
        points.append((r + width * idx, max_height + r - height))
    first_x, first_y = points[0]
    last_x = points[-1][0]

    if not fill:
        return [Polyline(points=tuple(points), stroke=color, stroke_width=line_width)]

    # close the area down to the baseline and back up to the first point
    points += [(last_x, max_height), (first_x, max_height), (first_x, first_y)]
    fill_color = FILL_GRAY if fill_gray else color
    return [
        # the round caps leave the bottom corners open, square them off
        Line(first_x, max_height, last_x, max_height, color=fill_color, stroke_width=line_width),
        Polyline(points=tuple(points), stroke=fill_color, stroke_width=line_width, fill=fill_color),
    ]


def build_shapes(values: Sequence[float], options: RenderOptions) -> ChartShapes:
    opts = parse_options(options)
    heights = compute_heights(values, opts.max_value)
    shapes = ChartShapes(options=opts)
    if opts.fill:
        shapes.fill = render_polyline(heights, COLORS[0], fill=True, fill_gray=opts.gray)
    if opts.bar:
        shapes.rects = render_rects(heights)
    if opts.line:
        shapes.lines = render_polyline(heights, POLYLINE_COLORS[0])
    return shapes


def create_svg_text(values: Sequence[float] = (), options: RenderOptions = RenderOptions()) -> str:
    shapes = build_shapes(values, options)
    parts = [SVG_OPEN]
    if shapes.options.gray:
        parts.append(GRAYSCALE_SETTINGS)
    parts.extend(s.to_svg() for s in shapes.all())
    parts.append(SVG_CLOSE)
    return "".join(parts)
