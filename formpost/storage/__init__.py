"""JSON persistence for submission results and request logs."""

from .data_storage import DataStorage

__all__ = ["DataStorage"]
