"""Submit pipeline: form event -> JSON POST -> success or failure reporter."""

import json
import logging
from typing import Any, Callable, Hashable, Optional, Sequence

from requests import Response

from ..api import FormSubmitClient, ResponseStatusError
from ..models import FormPayload, RequestConfig, SubmitResult
from .events import FormEvent
from .single_flight import SingleFlight

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = ("#username", "#password")

Transport = Callable[[str, RequestConfig], Response]
SuccessReporter = Callable[[Any], None]
FailureReporter = Callable[[BaseException], None]


def log_success(data: Any) -> None:
    logger.info(f"Response: {json.dumps(data)}")


def make_failure_reporter(label: Optional[str] = None) -> FailureReporter:
    """Build a reporter that logs errors, prefixed with ``label`` if given."""

    def report(error: BaseException) -> None:
        logger.error(f"{label or ''}{error}")

    return report


log_failure = make_failure_reporter()


def submit(payload: Any, url: str, transport: Transport) -> Any:
    """
    POST ``payload`` as JSON to ``url`` and return the parsed response body.

    Args:
        payload: Value to send (normally a flat field mapping)
        url: Target URL
        transport: Callable issuing the request for a RequestConfig

    Returns:
        The response body parsed as JSON

    Raises:
        ResponseStatusError: If the response status is not 2xx
        requests.RequestException: If the transport gets no response
        ValueError: If the body is not valid JSON
    """
    config = RequestConfig.from_payload(payload)
    response = transport(url, config)
    if not response.ok:
        raise ResponseStatusError(
            response.status_code, response.reason, response=response
        )
    return response.json()


class SubmitPipeline:
    """Wires a form event to ``submit`` and its two reporters."""

    def __init__(
        self,
        url: Optional[str] = None,
        transport: Optional[Transport] = None,
        on_success: Optional[SuccessReporter] = None,
        on_failure: Optional[FailureReporter] = None,
        fields: Sequence[str] = DEFAULT_FIELDS,
        payload: Any = None,
        url_field: Optional[str] = None,
        single_flight: Optional[SingleFlight] = None,
    ):
        if not url and not url_field:
            raise ValueError("Either url or url_field is required")
        self.url = url
        self.transport = transport or FormSubmitClient()
        self.on_success = on_success or log_success
        self.on_failure = on_failure or log_failure
        self.fields = tuple(fields)
        self.payload = payload
        self.url_field = url_field
        self.single_flight = single_flight

    def run(
        self, payload: Any, url: Optional[str] = None, key: Optional[Hashable] = None
    ) -> SubmitResult:
        """Submit ``payload`` and report the outcome. Never raises for HTTP,
        transport or parse failures; those go to the failure reporter."""
        url = url or self.url
        if self.single_flight is None:
            return self._run(payload, url)
        return self.single_flight.do(
            key if key is not None else url, lambda: self._run(payload, url)
        )

    def handle_event(self, event: FormEvent) -> SubmitResult:
        """Event handler: suppress the default action, read the form, submit."""
        event.prevent_default()

        form = event.form
        if self.payload is not None:
            payload = self.payload
        else:
            payload = FormPayload.from_form(form.values, self.fields).to_dict()
        url = self.url or form.value(self.url_field)

        return self.run(payload, url, key=form.form_id)

    def _run(self, payload: Any, url: str) -> SubmitResult:
        try:
            data = submit(payload, url, self.transport)
            self.on_success(data)
        except Exception as err:
            self.on_failure(err)
            return SubmitResult.failure(err)
        return SubmitResult.success(data)
