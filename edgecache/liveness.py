"""Liveness probe: asks watched services whether they are alive."""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass, field
from datetime import timedelta
from http import HTTPStatus
from typing import List, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

log = logging.getLogger(__name__)

MIN_TIMEOUT = 0.001
FALLBACK_TIMEOUT = 0.01
PROBE_PATH = "/k8s/probe"

SUCCESS_BODY = b'{\n\t  "status": 200,\n      "message": "I\'m fine :D\'"\n\t}'
FAILED_BODY = b'{\n\t  "status": 503,\n      "message": "I\'m tired :(\'"\n\t}'


class TimeoutIsTooShortError(ValueError):
    """The configured probe timeout is below the minimum."""

    def __init__(self, message: str = "liveness probe timeout is too short") -> None:
        super().__init__(message)


@runtime_checkable
class Service(Protocol):
    """Anything that can report its own health."""

    def is_alive(self, deadline: float) -> bool:
        """Return whether the service is healthy; answer before ``deadline`` (a time.monotonic() instant)."""


@dataclass
class _Question:
    deadline: float
    answered: threading.Event = field(default_factory=threading.Event)
    answer: bool = False


class Probe:
    """Answers liveness questions by polling watched services in a background thread."""

    def __init__(self, timeout: Union[float, timedelta]) -> None:
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        if seconds < MIN_TIMEOUT:
            log.error(
                "%s: min timeout duration is 1ms (timeout raised to 10ms as a more "
                "reasonable value, if you need it shorter, configure it properly)",
                TimeoutIsTooShortError(),
            )
            seconds = FALLBACK_TIMEOUT
        self.timeout = seconds
        self._questions: "queue.Queue[Optional[_Question]]" = queue.Queue()
        self._watchers: List[threading.Thread] = []
        self._lock = threading.Lock()

    def watch(self, *services: Service) -> None:
        """Start answering liveness questions from the given services."""
        worker = threading.Thread(
            target=self._serve, args=(services,), name="liveness-watch", daemon=True
        )
        with self._lock:
            self._watchers.append(worker)
        worker.start()

    def _serve(self, services: Sequence[Service]) -> None:
        while True:
            question = self._questions.get()
            if question is None:
                return
            if time.monotonic() >= question.deadline:
                continue
            try:
                alive = all(service.is_alive(question.deadline) for service in services)
            except Exception:
                log.exception("liveness check raised")
                alive = False
            question.answer = alive
            question.answered.set()

    def is_alive(self) -> bool:
        """Ask the watched services; False if no answer arrives within the timeout."""
        question = _Question(deadline=time.monotonic() + self.timeout)
        self._questions.put(question)
        if not question.answered.wait(self.timeout):
            log.error(
                "liveness probe deadline exceeded (check that services answer in time "
                "and that watch() was called)"
            )
            return False
        return question.answer

    def close(self) -> None:
        """Stop all watcher threads."""
        with self._lock:
            watchers, self._watchers = self._watchers, []
        for _ in watchers:
            self._questions.put(None)
        for worker in watchers:
            worker.join()

    def __enter__(self) -> "Probe":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class LivenessController:
    """HTTP handler that reports the probe's verdict."""

    route = ("GET", PROBE_PATH)

    def __init__(self, probe: Probe) -> None:
        self.probe = probe

    def handle(self) -> Tuple[HTTPStatus, bytes]:
        """Return the status code and body for a probe request."""
        if self.probe.is_alive():
            return HTTPStatus.OK, SUCCESS_BODY
        return HTTPStatus.SERVICE_UNAVAILABLE, FAILED_BODY