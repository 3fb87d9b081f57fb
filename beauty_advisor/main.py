import logging

from fastapi import FastAPI

from beauty_advisor.api.v1.advisor import router as advisor_router
from beauty_advisor.core.config import settings

LOG_CONTEXT_KEYS = (
    "product_id",
    "product_count",
    "selected_count",
    "history_len",
    "used_web_search",
    "status_code",
    "reason",
    "error",
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in LOG_CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


configure_logging()

app = FastAPI(title="L'Oréal Beauty Advisor", version="1.0.0")

app.include_router(advisor_router, prefix="/api/v1", tags=["advisor"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
