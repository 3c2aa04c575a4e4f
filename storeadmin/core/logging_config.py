"""Structured JSON logging with per-request correlation ids."""

import contextvars
import logging
import uuid

from pythonjsonlogger.json import JsonFormatter

request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")

# Libraries that are chatty at INFO and add nothing to request logs.
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


class RequestIdFilter(logging.Filter):
    """Attach the current request id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("")  # type: ignore[attr-defined]
        return True


def setup_logging(*, debug: bool = False, service: str = "storeadmin") -> None:
    """Route all logging through one JSON handler on the root logger."""
    handler = logging.StreamHandler()
    formatter = JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s",
        rename_fields={"asctime": "timestamp", "levelname": "level"},
        static_fields={"service": service},
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def generate_request_id() -> str:
    """Return a short random id for a request that arrived without one."""
    return uuid.uuid4().hex[:16]
