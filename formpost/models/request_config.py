"""Request configuration model for JSON form submissions."""

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class RequestConfig:
    """Method, body and headers describing one outgoing request."""

    method: str
    body: str
    headers: Mapping[str, str]

    @classmethod
    def from_payload(cls, data: Any) -> "RequestConfig":
        """
        Build a POST configuration carrying ``data`` as JSON text.

        Args:
            data: Any JSON-serializable value (normally a flat field mapping)

        Returns:
            RequestConfig with a JSON body and a JSON content-type header

        Raises:
            ValueError: If ``data`` contains a circular reference
            TypeError: If ``data`` holds a value JSON cannot encode
        """
        return cls(
            method="POST",
            body=json.dumps(data, separators=(",", ":")),
            headers=MappingProxyType({"content-type": JSON_CONTENT_TYPE}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "body": self.body,
            "headers": dict(self.headers),
        }


def build_request_config(data: Any) -> RequestConfig:
    """Shorthand for ``RequestConfig.from_payload``."""
    return RequestConfig.from_payload(data)
