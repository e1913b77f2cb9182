"""HTTP transport for JSON form submissions."""

import json
import logging
from datetime import datetime
from typing import List, Optional

import requests
from requests import Response

from ..models import RequestConfig, RequestLog

logger = logging.getLogger(__name__)


class ResponseStatusError(requests.HTTPError):
    """A response arrived but its status is not 2xx."""

    def __init__(
        self,
        status_code: Optional[int],
        reason: Optional[str] = None,
        response: Optional[Response] = None,
    ):
        # Numeric status when there is one, the status text otherwise
        message = str(status_code) if status_code else (reason or "Request failed")
        super().__init__(message, response=response)
        self.status_code = status_code
        self.reason = reason


class FormSubmitClient:
    """Sends RequestConfigs with ``requests`` and keeps a request log."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self.request_log: List[RequestLog] = []

    def __call__(self, url: str, config: RequestConfig) -> Response:
        return self.send(url, config)

    def send(self, url: str, config: RequestConfig) -> Response:
        """
        Issue the request described by ``config`` and log it.

        Non-2xx responses are returned, not raised; the caller decides what
        a failed status means.

        Args:
            url: Target URL
            config: Method, JSON body and headers for the request

        Returns:
            The ``requests.Response``

        Raises:
            requests.RequestException: If no response was received
        """
        start_time = datetime.now()

        try:
            logger.info(f"Making {config.method} request to {url}")

            response = requests.request(
                config.method,
                url,
                data=config.body.encode("utf-8"),
                headers=dict(config.headers),
                timeout=self.timeout,
            )

            response_time = (datetime.now() - start_time).total_seconds() * 1000

            log_entry = RequestLog(
                timestamp=start_time.isoformat(),
                url=url,
                method=config.method,
                status_code=response.status_code,
                response_time_ms=response_time,
                success=response.ok,
            )

            if not response.ok:
                log_entry.error_message = response.text
                logger.error(
                    f"Request failed: {response.status_code} - {response.text}"
                )
            else:
                logger.info(
                    f"Request successful: {response.status_code} (took {response_time:.2f}ms)"
                )

            self.request_log.append(log_entry)
            return response

        except requests.RequestException as err:
            response_time = (datetime.now() - start_time).total_seconds() * 1000

            self.request_log.append(
                RequestLog(
                    timestamp=start_time.isoformat(),
                    url=url,
                    method=config.method,
                    status_code=0,
                    response_time_ms=response_time,
                    success=False,
                    error_message=str(err),
                )
            )
            logger.error(f"Request failed: {err}")
            raise

    def save_request_log(self, filename: str = "request_log.json"):
        """Save the request log to a JSON file."""
        log_data = [log.to_dict() for log in self.request_log]
        with open(filename, "w") as f:
            json.dump(log_data, f, indent=2)
        logger.info(f"Request log saved to {filename}")
