"""
Domain Models

Core business entities and value objects
"""

from .task import Task, TaskSpec, TaskStatus, TASK_SUCCESS_RESULT
from .order import Order, OrderStatus
from .agent import Agent, AgentStatus, AgentStats
from .events import (
    EventType,
    Event,
    AgentCreatedEvent,
    OrderStartedEvent,
    TaskStartedEvent,
    TaskCompletedEvent,
    OrderCompletedEvent,
    OrderFailedEvent,
    EVENT_CLASS_MAPPING,
)

__all__ = [
    "Task",
    "TaskSpec",
    "TaskStatus",
    "TASK_SUCCESS_RESULT",
    "Order",
    "OrderStatus",
    "Agent",
    "AgentStatus",
    "AgentStats",
    "EventType",
    "Event",
    "AgentCreatedEvent",
    "OrderStartedEvent",
    "TaskStartedEvent",
    "TaskCompletedEvent",
    "OrderCompletedEvent",
    "OrderFailedEvent",
    "EVENT_CLASS_MAPPING",
]
