"""
Event Notifier - 실행 엔진 이벤트 발행/구독

Agent 생성, Order/Task 시작·종료 등 실행 엔진의 상태 전이를 구독자에게 알립니다.
프레젠테이션 계층(TUI/CLI)과 로깅은 구독을 통해서만 엔진 상태에 반응합니다.
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Dict, Any, List, Union

from ...domain.errors import ErrorCode
from ...domain.models.events import Event, EventType
from ..logging import ErrorTracker, get_logger

logger = get_logger(__name__, component="EventNotifier")

EventHandler = Callable[[Event], Any]


@dataclass
class DispatchLog:
    """핸들러 호출 로그"""
    event_type: str
    handler: str
    timestamp: datetime
    success: bool
    error: Optional[str] = None


def _handler_name(handler: Callable) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class EventNotifier:
    """
    이벤트 발행/구독 레지스트리

    하나의 실행 엔진 인스턴스에 귀속됩니다 (프로세스 전역이 아님).
    핸들러는 등록 순서대로 동기 호출되며, 한 핸들러의 예외는 기록만 하고
    다음 핸들러 호출이나 엔진 로직에 영향을 주지 않습니다.

    Attributes:
        enable_history: 핸들러 호출 히스토리 기록 여부
        max_history_size: 최대 히스토리 크기
        error_tracker: 이 notifier에서 발생한 핸들러 장애 집계

    Example:
        >>> notifier = EventNotifier()
        >>> notifier.subscribe(
        ...     EventType.TASK_COMPLETED,
        ...     lambda event: print(f"{event.task.name}: {event.task.status.value}")
        ... )
        >>> notifier.publish(TaskCompletedEvent(agent=agent, task=task))
    """

    def __init__(self, enable_history: bool = True, max_history_size: int = 1000):
        """
        EventNotifier 초기화

        Args:
            enable_history: 히스토리 기록 활성화 여부
            max_history_size: 최대 히스토리 크기
        """
        self._handlers: Dict[EventType, List[EventHandler]] = {}
        self._lock = threading.Lock()
        self.dispatch_history: List[DispatchLog] = []
        self.enable_history = enable_history
        self.max_history_size = max_history_size
        self.error_tracker = ErrorTracker()

    def subscribe(
        self,
        event_type: Union[EventType, str],
        handler: EventHandler
    ) -> None:
        """
        이벤트 핸들러 등록

        Args:
            event_type: 이벤트 종류 (EventType 또는 "taskStarted" 같은 이름)
            handler: 핸들러 함수
                     시그니처: handler(event) -> None

        Raises:
            ValueError: 알 수 없는 이벤트 이름
            TypeError: handler가 callable이 아닌 경우
        """
        key = EventType(event_type)
        if not callable(handler):
            raise TypeError(f"이벤트 핸들러는 callable이어야 합니다: {handler!r}")

        with self._lock:
            self._handlers.setdefault(key, []).append(handler)

        logger.debug(
            "Event handler subscribed",
            event_type=key.value,
            handler=_handler_name(handler),
        )

    def publish(self, event: Event) -> None:
        """
        이벤트 발행 (동기, 등록 순서대로 호출)

        Args:
            event: 이벤트 payload (공유 참조로 전달)
        """
        key = event.event_type

        # 발행 중 구독이 추가되어도 이번 발행에는 영향이 없도록 복사
        with self._lock:
            handlers = list(self._handlers.get(key, []))

        if not handlers:
            return

        for handler in handlers:
            try:
                handler(event)
                self._record_dispatch(key, handler, success=True)

            except Exception as e:
                self.error_tracker.track(
                    e,
                    "event_handler",
                    error_code=ErrorCode.EVENT_HANDLER_FAILED.name,
                    event_type=key.value,
                    handler=_handler_name(handler),
                )
                self._record_dispatch(key, handler, success=False, error=str(e))

    def handler_count(self, event_type: Union[EventType, str]) -> int:
        """등록된 핸들러 수"""
        key = EventType(event_type)
        with self._lock:
            return len(self._handlers.get(key, []))

    def _record_dispatch(
        self,
        event_type: EventType,
        handler: EventHandler,
        success: bool,
        error: Optional[str] = None
    ) -> None:
        """핸들러 호출 로그 기록"""
        if not self.enable_history:
            return

        log_entry = DispatchLog(
            event_type=event_type.value,
            handler=_handler_name(handler),
            timestamp=datetime.now(),
            success=success,
            error=error
        )

        with self._lock:
            self.dispatch_history.append(log_entry)

            # 히스토리 크기 제한
            if len(self.dispatch_history) > self.max_history_size:
                self.dispatch_history = self.dispatch_history[-self.max_history_size:]

    def get_dispatch_history(
        self,
        event_type: Optional[Union[EventType, str]] = None,
        limit: Optional[int] = None
    ) -> List[DispatchLog]:
        """
        핸들러 호출 히스토리 조회

        Args:
            event_type: 특정 이벤트 종류만 필터링 (None이면 전체)
            limit: 반환할 최대 개수 (None이면 전체)

        Returns:
            DispatchLog 목록
        """
        with self._lock:
            history = list(self.dispatch_history)

        if event_type is not None:
            key = EventType(event_type).value
            history = [log for log in history if log.event_type == key]

        if limit is not None:
            history = history[-limit:] if limit > 0 else []

        return history

    def clear_history(self) -> None:
        """히스토리 초기화"""
        with self._lock:
            self.dispatch_history.clear()

    def get_statistics(self) -> Dict[str, Dict[str, Any]]:
        """
        핸들러 호출 통계 조회

        Returns:
            이벤트 종류별 {"total", "success", "failed"} 통계
        """
        stats: Dict[str, Dict[str, Any]] = {}

        for log in self.get_dispatch_history():
            entry = stats.setdefault(
                log.event_type,
                {"total": 0, "success": 0, "failed": 0}
            )
            entry["total"] += 1
            if log.success:
                entry["success"] += 1
            else:
                entry["failed"] += 1

        return stats

    def get_error_stats(self) -> Dict[str, Any]:
        """이 notifier의 핸들러 장애 통계 (ErrorTracker.get_stats)"""
        return self.error_tracker.get_stats()
