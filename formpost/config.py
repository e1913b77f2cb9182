"""Configuration for the form submission client."""

import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_SUBMIT_URL = "https://reqres.in/api/users"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"FORMPOST_TIMEOUT must be a number of seconds: '{raw}'")


@dataclass(frozen=True)
class Config:
    """Settings read from environment variables (and ``.env`` via python-dotenv)."""

    submit_url: str
    error_label: Optional[str] = None
    timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Load config. Raises ValueError if FORMPOST_TIMEOUT is not a number."""
        return cls(
            submit_url=(os.environ.get("FORMPOST_URL") or DEFAULT_SUBMIT_URL).strip(),
            error_label=os.environ.get("FORMPOST_ERROR_LABEL") or None,
            timeout=_parse_timeout(os.environ.get("FORMPOST_TIMEOUT")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> Tuple[bool, Optional[str]]:
        if not self.submit_url:
            return False, "FORMPOST_URL must not be empty"
        if not self.submit_url.startswith(("http://", "https://")):
            return False, f"FORMPOST_URL must be an http(s) URL: {self.submit_url}"
        if self.timeout is not None and not (math.isfinite(self.timeout) and self.timeout > 0):
            return False, "FORMPOST_TIMEOUT must be a positive finite number"
        return True, None
