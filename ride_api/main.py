# path: ride-tracker-api/ride_api/main.py

import logging

from fastapi import FastAPI

from ride_api.api.routes.locations import router as locations_router
from ride_api.api.routes.rides import router as rides_router
from ride_api.config import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="ride-tracker-api")

app.include_router(locations_router)
app.include_router(rides_router)


@app.get("/health")
def health():
    return {"status": "ok"}
