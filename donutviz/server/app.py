# donutviz/server/app.py — FastAPI app factory

import logging
import os

from fastapi import FastAPI

# Routers
from donutviz.server.pie_routes import router as pie_router

logging.basicConfig(level=os.environ.get("DONUTVIZ_LOG_LEVEL", "INFO"))

app = FastAPI(title="donutviz")

# ===== Routers =====
app.include_router(pie_router)             # /pie/render, /pie/frames, /pie/png, /pie/hover

# Optional health root
@app.get("/")
def root():
    return {"ok": True, "msg": "donutviz running"}
