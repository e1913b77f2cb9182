"""Data models for the form submission client."""

from .form_payload import FormPayload, MissingFieldError
from .request_config import RequestConfig, build_request_config
from .request_log import RequestLog
from .submit_result import SubmitResult

__all__ = [
    "RequestConfig",
    "build_request_config",
    "FormPayload",
    "MissingFieldError",
    "SubmitResult",
    "RequestLog",
]
