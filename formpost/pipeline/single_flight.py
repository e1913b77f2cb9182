"""Single-flight guard: one in-flight call per key, shared by all callers."""

import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)


class _Call:
    def __init__(self):
        self.done = threading.Event()
        self.result: Any = None
        self.error: Optional[BaseException] = None
        self.waiters = 0


class SingleFlight:
    """Collapse concurrent calls with the same key into one execution."""

    def __init__(self):
        self._lock = threading.Lock()
        self._calls: Dict[Hashable, _Call] = {}

    def in_flight(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._calls

    def waiting(self, key: Hashable) -> int:
        """Number of callers blocked on the in-flight call for ``key``."""
        with self._lock:
            call = self._calls.get(key)
            return call.waiters if call is not None else 0

    def do(self, key: Hashable, fn: Callable[[], Any]) -> Any:
        """
        Run ``fn`` unless a call for ``key`` is already running.

        Callers arriving while a call is running wait for it and get its
        result (or its exception) instead of running ``fn`` themselves.
        """
        with self._lock:
            call = self._calls.get(key)
            leader = call is None
            if leader:
                call = _Call()
                self._calls[key] = call
            else:
                call.waiters += 1

        if not leader:
            logger.debug(f"Joining in-flight submission for {key!r}")
            call.done.wait()
            if call.error is not None:
                raise call.error
            return call.result

        try:
            call.result = fn()
        except BaseException as err:
            call.error = err
            raise
        finally:
            with self._lock:
                del self._calls[key]
            call.done.set()

        return call.result
