"""Submit form fields as JSON and report the response."""

from .models import RequestConfig, build_request_config
from .pipeline import SubmitPipeline, submit

__all__ = ["RequestConfig", "build_request_config", "SubmitPipeline", "submit"]
