# sparksvg — app.py
# Inline sparkline charts for <img src=".../chart?values=1,2,3">.

import sys, time
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from loguru import logger

from services import config
from services.charts import create_svg_text
from services.params import options_from_query, parse_values
from utils.img import render_chart_png

logger.remove()
logger.add(sys.stderr, level=config.LOG_LEVEL)

START_TS = time.time()

NO_STORE = {"Cache-Control": "no-store"}

app = FastAPI(title="sparksvg")

# --- Health & status ---
@app.get("/")
async def root():
    return PlainTextResponse("sparksvg up")

@app.get("/status")
async def status():
    return JSONResponse({
        "ok": True,
        "version": config.VERSION,
        "uptime_s": round(time.time() - START_TS, 1),
        "png_enabled": config.ENABLE_PNG,
    })

# --- Charts ---
def _read_query(request: Request):
    params = request.query_params
    values = parse_values(params.get("values"))
    options = options_from_query(params)
    logger.debug("chart n={} opts={}", len(values), options)
    return values, options

@app.get("/chart")
def chart(request: Request):
    values, options = _read_query(request)
    try:
        data = create_svg_text(values, options)
    except Exception as e:
        logger.exception("svg render error: {}", e)
        return PlainTextResponse("render failed", status_code=500)
    return Response(content=data, media_type="image/svg+xml", headers=NO_STORE)

@app.get("/chart.png")
def chart_png(request: Request):
    if not config.ENABLE_PNG:
        return PlainTextResponse("png disabled", status_code=404)
    values, options = _read_query(request)
    try:
        data = render_chart_png(values, options)
    except Exception as e:
        logger.exception("png render error: {}", e)
        return PlainTextResponse("render failed", status_code=500)
    return Response(content=data, media_type="image/png", headers=NO_STORE)

# --- graceful shutdown logging ---
@app.on_event("shutdown")
async def on_shutdown():
    logger.info("shutdown complete")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host=config.HOST, port=config.PORT)
