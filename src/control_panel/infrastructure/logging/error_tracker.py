"""
핸들러 장애 추적

이벤트 핸들러처럼 엔진 밖으로 전파되지 않는 에러를 모아 둡니다.
ErrorTracker는 인스턴스 단위로 상태를 가지며, EventNotifier 하나가 하나씩 소유합니다.
"""

import threading
from collections import Counter, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Deque, Dict, List, Optional

from .structured_logger import get_logger

logger = get_logger(__name__, component="ErrorTracker")


@dataclass(frozen=True)
class TrackedError:
    """추적된 에러 한 건"""
    error_type: str
    message: str
    context: str
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.error_type,
            "error_message": self.message,
            "context": self.context,
            **self.metadata,
        }


class ErrorTracker:
    """
    삼켜진 에러의 집계기

    에러 타입별/컨텍스트별 횟수와 최근 에러를 보관합니다.
    모든 갱신은 내부 Lock으로 직렬화됩니다.

    Attributes:
        max_recent: 보관할 최근 에러 최대 개수

    Example:
        >>> tracker = ErrorTracker()
        >>> try:
        ...     handler(event)
        ... except Exception as e:
        ...     tracker.track(e, "event_handler", event_type="taskStarted")
        >>> tracker.total
        1
    """

    def __init__(self, max_recent: int = 100):
        if max_recent <= 0:
            raise ValueError(f"max_recent는 1 이상이어야 합니다: {max_recent}")

        self.max_recent = max_recent
        self._by_type: Counter = Counter()
        self._by_context: Counter = Counter()
        self._recent: Deque[TrackedError] = deque(maxlen=max_recent)
        self._lock = threading.Lock()

    def track(self, error: BaseException, context: str, **metadata: Any) -> TrackedError:
        """
        에러를 기록하고 로그를 남깁니다.

        Args:
            error: 발생한 예외
            context: 발생 위치 (예: "event_handler")
            **metadata: 추가 정보 (event_type, handler 등)

        Returns:
            기록된 TrackedError
        """
        entry = TrackedError(
            error_type=type(error).__name__,
            message=str(error),
            context=context,
            metadata=dict(metadata),
        )

        with self._lock:
            self._by_type[entry.error_type] += 1
            self._by_context[context] += 1
            self._recent.append(entry)

        logger.error(
            "Error tracked",
            error_type=entry.error_type,
            error_message=entry.message,
            context=context,
            **metadata,
            exc_info=(type(error), error, error.__traceback__)
        )
        return entry

    @property
    def total(self) -> int:
        with self._lock:
            return sum(self._by_type.values())

    def recent(self, limit: Optional[int] = None) -> List[TrackedError]:
        """최근 에러 (오래된 것부터, limit이 None이면 보관 중인 전체)"""
        with self._lock:
            entries = list(self._recent)
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []
        return entries

    def get_stats(self, recent_limit: int = 10) -> Dict[str, Any]:
        """
        에러 통계 스냅샷

        Returns:
            - total_errors: 총 에러 수
            - error_counts: 에러 타입별 횟수
            - context_counts: 컨텍스트별 횟수
            - recent_errors: 최근 recent_limit개 에러 (dict)
        """
        with self._lock:
            by_type = dict(self._by_type)
            by_context = dict(self._by_context)

        return {
            "total_errors": sum(by_type.values()),
            "error_counts": by_type,
            "context_counts": by_context,
            "recent_errors": [e.to_dict() for e in self.recent(recent_limit)],
        }

    def reset(self) -> None:
        with self._lock:
            self._by_type.clear()
            self._by_context.clear()
            self._recent.clear()
        logger.debug("Error statistics reset")

    def summary(self, limit: int = 5) -> str:
        """
        사람이 읽을 요약

        Example:
            >>> print(tracker.summary())
            Total errors: 3
            Top errors:
              - RuntimeError: 2
              - ValueError: 1
        """
        with self._lock:
            top = self._by_type.most_common(limit)
            total = sum(self._by_type.values())

        if total == 0:
            return "No errors recorded"

        lines = [f"Total errors: {total}", "Top errors:"]
        lines.extend(f"  - {error_type}: {count}" for error_type, count in top)
        return "\n".join(lines)
