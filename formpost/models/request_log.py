"""Request logging data model."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class RequestLog:
    """Log entry for a submitted request."""

    timestamp: str
    url: str
    method: str
    status_code: int
    response_time_ms: float
    success: bool
    error_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RequestLog":
        return cls(
            timestamp=data["timestamp"],
            url=data["url"],
            method=data["method"],
            status_code=data.get("status_code", 0),
            response_time_ms=data.get("response_time_ms", 0.0),
            success=data.get("success", False),
            error_message=data.get("error_message"),
        )
