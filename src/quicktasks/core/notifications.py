# src/quicktasks/core/notifications.py

from __future__ import annotations

import logging
from collections import deque

logger = logging.getLogger(__name__)


class SnackbarHost:
    """
    In-memory host for transient status messages.

    `show` only enqueues; the connector decides when to display a message
    (the console prints it once, on the next render) and then dismisses it.
    """

    def __init__(self, max_pending: int = 8) -> None:
        self._pending: deque[str] = deque(maxlen=max(1, int(max_pending)))

    def show(self, message: str) -> None:
        text = (message or "").strip()
        if not text:
            return
        self._pending.append(text)
        logger.debug("Snackbar queued: %s", text)

    def current(self) -> str | None:
        return self._pending[0] if self._pending else None

    def dismiss(self) -> None:
        if self._pending:
            self._pending.popleft()

    def drain(self) -> list[str]:
        """Pop every pending message, oldest first."""
        out = list(self._pending)
        self._pending.clear()
        return out

    def __len__(self) -> int:
        return len(self._pending)
