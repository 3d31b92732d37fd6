import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.widgets import router as widgets_router
from app.core.config import settings
from app.wiring.dependencies import get_widget_store

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("widget_id", "doctor", "field", "outcome", "path", "reason", "delay_ms"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Unmounting every widget releases its pending navigation timers.
    get_widget_store().clear()


app = FastAPI(title="Doctor Detail Booking Widget", version="1.0.0", lifespan=lifespan)

app.include_router(widgets_router, tags=["widgets"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
