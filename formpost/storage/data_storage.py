"""Data storage implementation for JSON persistence."""

import json
import logging
from typing import List, Optional

from ..models import RequestLog, SubmitResult

logger = logging.getLogger(__name__)


class DataStorage:
    """Handles storing and loading submission data."""

    @staticmethod
    def save_result(result: SubmitResult, filename: str = "response.json"):
        """Save a submission result to JSON file."""
        with open(filename, "w") as f:
            json.dump(result.to_dict(), f, indent=2)
        logger.info(f"Submission result saved to {filename} (ok: {result.ok})")

    @staticmethod
    def load_request_log(
        filename: str = "request_log.json",
    ) -> Optional[List[RequestLog]]:
        """Load a request log written by ``FormSubmitClient.save_request_log``."""
        try:
            with open(filename, "r") as f:
                data = json.load(f)
            return [RequestLog.from_dict(entry) for entry in data]
        except FileNotFoundError:
            logger.warning(f"File {filename} not found")
            return None
