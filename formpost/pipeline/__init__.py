"""Form submission pipeline."""

from .events import Form, FormEvent
from .single_flight import SingleFlight
from .submit import (SubmitPipeline, log_failure, log_success,
                     make_failure_reporter, submit)

__all__ = [
    "Form",
    "FormEvent",
    "SingleFlight",
    "SubmitPipeline",
    "submit",
    "log_success",
    "log_failure",
    "make_failure_reporter",
]
