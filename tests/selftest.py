from __future__ import annotations
import os
from loguru import logger
from services import config
from services.charts import RenderOptions, create_svg_text
from utils.img import render_chart_png

def run() -> dict:
    out = {"env": {}, "svg": None, "png": None}
    # Env check
    out["env"] = {k: bool(os.getenv(k)) for k in ("LOG_LEVEL", "PNG_SCALE", "ENABLE_PNG")}
    # SVG
    try:
        svg = create_svg_text([1, 2, 1, 3, 2, 4, 3, 5], RenderOptions(line=True, fill=True))
        out["svg"] = "ok" if svg.startswith("<svg") and svg.endswith("</svg>") else "malformed"
    except Exception as e:
        logger.exception("svg selftest")
        out["svg"] = f"fail: {e}"
    # PNG
    if not config.ENABLE_PNG:
        out["png"] = "skipped"
        return out
    try:
        img = render_chart_png([10, 40, 60, 90, 120], RenderOptions())
        out["png"] = "ok" if img[:8] == b"\x89PNG\r\n\x1a\n" else "bad header"
    except Exception as e:
        logger.exception("png selftest")
        out["png"] = f"fail: {e}"
    return out

if __name__ == "__main__":
    print(run())
