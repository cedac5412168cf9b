# cryptocompare_hist/main.py
from __future__ import annotations

from fastapi import FastAPI

from cryptocompare_hist.api.health import router as health_router
from cryptocompare_hist.api.histo import router as histo_router


app = FastAPI(title="CryptoCompare History API")

# Routers
app.include_router(health_router)
app.include_router(histo_router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "CryptoCompare minute history"}
