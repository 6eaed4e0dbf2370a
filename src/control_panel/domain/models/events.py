"""
실행 엔진 이벤트 모델

EventType: 이벤트 종류 (닫힌 집합)
각 이벤트 종류마다 고유한 payload dataclass가 대응됩니다.

이벤트 payload는 Agent/Order/Task 객체를 공유 참조로 전달합니다.
구독자는 이 객체들을 읽기만 해야 합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Type, Union

from .agent import Agent
from .order import Order
from .task import Task


class EventType(str, Enum):
    """실행 엔진 이벤트 종류"""
    AGENT_CREATED = "agentCreated"
    ORDER_STARTED = "orderStarted"
    TASK_STARTED = "taskStarted"
    TASK_COMPLETED = "taskCompleted"
    ORDER_COMPLETED = "orderCompleted"
    ORDER_FAILED = "orderFailed"


@dataclass(frozen=True)
class AgentCreatedEvent:
    """Agent 생성"""
    event_type: ClassVar[EventType] = EventType.AGENT_CREATED
    agent: Agent


@dataclass(frozen=True)
class OrderStartedEvent:
    """Order 실행 시작"""
    event_type: ClassVar[EventType] = EventType.ORDER_STARTED
    agent: Agent
    order: Order


@dataclass(frozen=True)
class TaskStartedEvent:
    """Task 실행 시작"""
    event_type: ClassVar[EventType] = EventType.TASK_STARTED
    agent: Agent
    task: Task


@dataclass(frozen=True)
class TaskCompletedEvent:
    """
    Task 실행 종료

    성공/실패 모두 발행됩니다. 결과는 task.status로 구분합니다.
    """
    event_type: ClassVar[EventType] = EventType.TASK_COMPLETED
    agent: Agent
    task: Task


@dataclass(frozen=True)
class OrderCompletedEvent:
    """Order의 모든 Task 성공"""
    event_type: ClassVar[EventType] = EventType.ORDER_COMPLETED
    agent: Agent
    order: Order


@dataclass(frozen=True)
class OrderFailedEvent:
    """Order 실패 (error: Order 실패를 유발한 예외)"""
    event_type: ClassVar[EventType] = EventType.ORDER_FAILED
    agent: Agent
    order: Order
    error: BaseException


Event = Union[
    AgentCreatedEvent,
    OrderStartedEvent,
    TaskStartedEvent,
    TaskCompletedEvent,
    OrderCompletedEvent,
    OrderFailedEvent,
]

EVENT_CLASS_MAPPING: Dict[EventType, Type] = {
    EventType.AGENT_CREATED: AgentCreatedEvent,
    EventType.ORDER_STARTED: OrderStartedEvent,
    EventType.TASK_STARTED: TaskStartedEvent,
    EventType.TASK_COMPLETED: TaskCompletedEvent,
    EventType.ORDER_COMPLETED: OrderCompletedEvent,
    EventType.ORDER_FAILED: OrderFailedEvent,
}
