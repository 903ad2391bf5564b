"""Transient toast notifications shown above the dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

NotificationKind = Literal["loading", "success", "error"]


@dataclass(frozen=True, slots=True)
class Notification:
    kind: NotificationKind
    message: str
    toast_id: str | None = None
    auto_close_ms: int | None = None


@dataclass(slots=True)
class ToastCenter:
    """Holds the toasts currently on screen plus everything ever shown."""

    active: list[Notification] = field(default_factory=list)
    history: list[Notification] = field(default_factory=list)

    def _show(self, notification: Notification) -> Notification:
        self.active.append(notification)
        self.history.append(notification)
        return notification

    def loading(self, message: str, *, toast_id: str) -> Notification:
        return self._show(Notification("loading", message, toast_id=toast_id))

    def success(self, message: str, *, auto_close_ms: int = 3000) -> Notification:
        return self._show(Notification("success", message, auto_close_ms=auto_close_ms))

    def error(self, message: str, *, auto_close_ms: int = 5000) -> Notification:
        return self._show(Notification("error", message, auto_close_ms=auto_close_ms))

    def dismiss(self, toast_id: str) -> None:
        self.active = [item for item in self.active if item.toast_id != toast_id]

    def expire(self) -> None:
        """Drop every toast that closes on its own; sticky (loading) toasts stay."""
        self.active = [item for item in self.active if item.auto_close_ms is None]
