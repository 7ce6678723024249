"""
Solar estimator: FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solarcalc.api.router import router
from solarcalc.config import CORS_ORIGINS

app = FastAPI(
    title="Solar Estimator API",
    description="Synthetic photovoltaic energy estimation for hourly, daily and yearly views",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "solar-estimator"}
