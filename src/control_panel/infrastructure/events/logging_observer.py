"""
로깅 옵저버

모든 실행 엔진 이벤트를 구독하여 이벤트마다 구조화된 로그 한 줄을 남깁니다.
"""

from typing import Any, Dict

from ...domain.models.events import (
    Event,
    EventType,
    AgentCreatedEvent,
    OrderStartedEvent,
    TaskStartedEvent,
    TaskCompletedEvent,
    OrderCompletedEvent,
    OrderFailedEvent,
)
from ...domain.models.task import TaskStatus
from ..logging import get_logger
from .event_notifier import EventNotifier


class LoggingEventObserver:
    """
    이벤트 → 로그 변환기

    Example:
        >>> observer = LoggingEventObserver()
        >>> observer.attach(manager.notifier)
    """

    def __init__(self, logger_name: str = __name__):
        self.logger = get_logger(logger_name, component="EventLog")

    def attach(self, notifier: EventNotifier) -> None:
        """모든 이벤트 종류에 구독"""
        for event_type in EventType:
            notifier.subscribe(event_type, self.on_event)

    def on_event(self, event: Event) -> None:
        fields = self._describe(event)

        if isinstance(event, OrderFailedEvent):
            self.logger.error(event.event_type.value, **fields)
        elif isinstance(event, TaskCompletedEvent) and event.task.status == TaskStatus.FAILED:
            self.logger.warning(event.event_type.value, **fields)
        else:
            self.logger.info(event.event_type.value, **fields)

    @staticmethod
    def _describe(event: Event) -> Dict[str, Any]:
        """이벤트 payload를 JSON 직렬화 가능한 필드로 변환"""
        fields: Dict[str, Any] = {
            "agent_id": event.agent.id,
            "agent_name": event.agent.name,
            "agent_status": event.agent.status.value,
        }

        if isinstance(event, AgentCreatedEvent):
            return fields

        if isinstance(event, (TaskStartedEvent, TaskCompletedEvent)):
            fields["task_id"] = event.task.id
            fields["task_name"] = event.task.name
            fields["task_status"] = event.task.status.value
            if event.task.error:
                fields["task_error"] = event.task.error
            duration = event.task.duration_seconds()
            if duration is not None:
                fields["duration_seconds"] = round(duration, 3)
            return fields

        if isinstance(event, (OrderStartedEvent, OrderCompletedEvent, OrderFailedEvent)):
            fields["order_id"] = event.order.id
            fields["order_name"] = event.order.name
            fields["order_status"] = event.order.status.value
            fields["task_count"] = len(event.order.tasks)

        if isinstance(event, OrderFailedEvent):
            fields["error"] = str(event.error)

        return fields
