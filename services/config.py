from __future__ import annotations
import os

VERSION = "1.2.0"

def env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name, default)
    if v is not None and isinstance(v, str):
        v = v.strip()
    return v

def env_float(name: str, default: float) -> float:
    try:
        return float(env(name) or default)
    except ValueError:
        return default

LOG_LEVEL = (env("LOG_LEVEL", "INFO") or "INFO").upper()
HOST = env("HOST", "0.0.0.0")
PORT = int(env_float("PORT", 8000))

# PNG output is rendered at canvas size times this
PNG_SCALE = env_float("PNG_SCALE", 4.0)

# Feature flags
ENABLE_PNG = env("ENABLE_PNG", "1") == "1"
