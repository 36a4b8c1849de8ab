"""Per-request layout diagnostics for the API, written through the standard logger."""

import logging
import uuid
from dataclasses import dataclass, field

logger = logging.getLogger("api.requests")


@dataclass
class RequestLog:
    """What one timeline request asked for, what was laid out and what was rejected."""

    endpoint: str
    client_ip: str | None = None
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    number_of_days: int | None = None
    events_received: int | None = None
    events_laid_out: int | None = None
    rejected: list[str] = field(default_factory=list)
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0

    def summary(self) -> str:
        parts = [f"[{self.request_id}] {self.endpoint} {self.status_code} in {self.processing_time_ms}ms"]
        if self.number_of_days is not None:
            parts.append(f"days={self.number_of_days}")
        if self.events_received is not None:
            parts.append(f"events={self.events_received}")
        if self.events_laid_out is not None:
            parts.append(f"laid_out={self.events_laid_out}")
        if self.rejected:
            parts.append(f"rejected={len(self.rejected)}")
        if self.error_code:
            parts.append(f"error={self.error_code}: {self.error_message}")
        if self.client_ip:
            parts.append(f"client={self.client_ip}")
        return " ".join(parts)


def log_request(entry: RequestLog) -> None:
    """Log one summary line per request, then each rejected event."""
    if entry.status_code >= 500:
        level = logging.ERROR
    elif entry.status_code >= 400:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger.log(level, entry.summary())
    for reason in entry.rejected:
        logger.warning("[%s] rejected: %s", entry.request_id, reason)
