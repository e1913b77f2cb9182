"""HTTP transport for the form submission client."""

from .client import FormSubmitClient, ResponseStatusError

__all__ = ["FormSubmitClient", "ResponseStatusError"]
