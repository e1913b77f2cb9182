"""Submission outcome model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SubmitResult:
    """Parsed JSON on success, or the error that ended the submission."""

    ok: bool
    data: Any = None
    status_code: Optional[int] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, data: Any) -> "SubmitResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: BaseException) -> "SubmitResult":
        # HTTP errors carry the response status; transport and parse errors do not
        status_code = getattr(error, "status_code", None)
        if status_code is None:
            status_code = getattr(getattr(error, "response", None), "status_code", None)
        return cls(ok=False, status_code=status_code, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "data": self.data,
            "status_code": self.status_code,
            "error": str(self.error) if self.error is not None else None,
        }
