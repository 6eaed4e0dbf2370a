"""
이벤트 인프라

실행 엔진 이벤트 발행/구독과 로깅 옵저버
"""

from .event_notifier import EventNotifier, EventHandler, DispatchLog
from .logging_observer import LoggingEventObserver

__all__ = [
    "EventNotifier",
    "EventHandler",
    "DispatchLog",
    "LoggingEventObserver",
]
