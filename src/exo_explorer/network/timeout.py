"""Wall-clock deadline for the archive request.

The socket timeout handed to `requests` resets on every received chunk, so a
TAP server streaming the catalog slowly can exceed any fixed budget without
ever tripping it. `request_deadline` arms an interval timer (SIGALRM) around
the whole call so the budget covers connect, transfer and decode together.
"""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# Seconds. The full pscomppars download is several MB.
ARCHIVE_QUERY_TIMEOUT = 30.0
ARCHIVE_CONNECT_TIMEOUT = 10.0


class DeadlineExceeded(Exception):
    """The guarded block ran past its wall-clock budget."""

    def __init__(self, label: str, seconds: float) -> None:
        self.label = label
        self.seconds = seconds
        super().__init__(f"{label} exceeded its {seconds:g}s deadline")


def deadlines_available() -> bool:
    # SIGALRM is POSIX-only and handlers can only be set from the main thread
    return hasattr(signal, "setitimer") and threading.current_thread() is threading.main_thread()


@contextmanager
def request_deadline(seconds: float, label: str = "archive request") -> Iterator[None]:
    """Raise `DeadlineExceeded` inside the block once `seconds` have elapsed.

    Where an alarm cannot be installed (Windows, worker threads) the block
    runs unguarded and only the socket timeout applies.
    """
    if seconds <= 0:
        raise ValueError(f"Deadline must be positive, got {seconds}")
    if not deadlines_available():
        logger.debug(f"No alarm deadline for {label} in thread {threading.current_thread().name}")
        yield
        return

    def on_alarm(signum: int, frame: object) -> None:
        raise DeadlineExceeded(label, seconds)

    previous = signal.signal(signal.SIGALRM, on_alarm)
    signal.setitimer(signal.ITIMER_REAL, seconds)
    try:
        yield
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0)
        signal.signal(signal.SIGALRM, previous)
