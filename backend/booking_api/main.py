import logging

from fastapi import FastAPI

from .config import settings
from .routers import booking

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Booking Availability API")

app.include_router(booking.router)


@app.get("/health")
def health():
    return {"status": "ok", "time_zone": settings.time_zone}
