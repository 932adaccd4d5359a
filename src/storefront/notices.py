"""User-visible notifications (toasts)."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class NoticeLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    text: str


class NoticeBoard:
    """Collects notices in the order they were raised and forwards them to listeners."""

    def __init__(self):
        self.notices: list[Notice] = []
        self._listeners: list[Callable[[Notice], None]] = []

    def subscribe(self, listener: Callable[[Notice], None]) -> None:
        self._listeners.append(listener)

    def _post(self, level: NoticeLevel, text: str) -> Notice:
        notice = Notice(level=level, text=text)
        self.notices.append(notice)
        for listener in self._listeners:
            listener(notice)
        return notice

    def success(self, text: str) -> Notice:
        return self._post(NoticeLevel.SUCCESS, text)

    def error(self, text: str) -> Notice:
        return self._post(NoticeLevel.ERROR, text)

    def info(self, text: str) -> Notice:
        return self._post(NoticeLevel.INFO, text)

    @property
    def last(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    def errors(self) -> list[str]:
        return [n.text for n in self.notices if n.level is NoticeLevel.ERROR]
