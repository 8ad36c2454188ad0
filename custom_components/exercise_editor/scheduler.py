"""Deferred delete with a single undo window.

States:
- idle: nothing pending, no timer armed
- pending: exactly one exercise id marked for deletion, one timer armed

A second delete request while one is pending commits the first immediately
(its timer is cancelled first), then arms a fresh window for the new id. The
timer handle is only ever armed, cancelled or fired; the old handle is always
cancelled before a new one is armed, so two timers never coexist.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from homeassistant.core import callback

from .const import DELETE_UNDO_SECONDS
from .exceptions import SchedulerClosedError

_LOGGER = logging.getLogger(__name__)

CancelCallback = Callable[[], None]
ScheduleLater = Callable[[float, Callable[[Any], None]], CancelCallback]


class DeleteScheduler:
    """Owns the pending delete id and its timer handle."""

    def __init__(
        self,
        *,
        schedule_later: ScheduleLater,
        on_commit: Callable[[int], None],
        delay: float = DELETE_UNDO_SECONDS,
    ) -> None:
        self._schedule_later = schedule_later
        self._on_commit = on_commit
        self._delay = float(delay)
        self._pending_id: int | None = None
        self._cancel_timer: CancelCallback | None = None
        self._closed = False

    @property
    def pending_id(self) -> int | None:
        return self._pending_id

    @property
    def closed(self) -> bool:
        return self._closed

    def _disarm(self) -> None:
        if self._cancel_timer is not None:
            cancel = self._cancel_timer
            self._cancel_timer = None
            cancel()

    def request_delete(self, exercise_id: int) -> None:
        if self._closed:
            raise SchedulerClosedError("Delete scheduler is shut down")
        exercise_id = int(exercise_id)

        self._disarm()
        previous = self._pending_id
        self._pending_id = None
        if previous is not None and previous != exercise_id:
            _LOGGER.debug("Committing pending delete of id=%s before scheduling id=%s", previous, exercise_id)
            self._on_commit(previous)

        self._pending_id = exercise_id
        self._cancel_timer = self._schedule_later(self._delay, self._async_handle_expired)
        _LOGGER.debug("Delete of id=%s scheduled in %ss", exercise_id, self._delay)

    def undo(self) -> int | None:
        """Cancel the pending delete; return the restored id (None when idle)."""
        self._disarm()
        restored = self._pending_id
        self._pending_id = None
        if restored is not None:
            _LOGGER.debug("Delete of id=%s undone", restored)
        return restored

    def shutdown(self) -> None:
        """Cancel any armed timer without committing."""
        self._disarm()
        self._pending_id = None
        self._closed = True

    @callback
    def _async_handle_expired(self, _now: Any = None) -> None:
        self._cancel_timer = None
        if self._closed or self._pending_id is None:
            return
        exercise_id = self._pending_id
        self._pending_id = None
        try:
            self._on_commit(exercise_id)
        except Exception:  # noqa: BLE001
            _LOGGER.exception("Committing delete of id=%s failed", exercise_id)
