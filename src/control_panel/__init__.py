"""
Control Panel - Agent/Order/Task 실행 엔진

Agent에 Order를 배정하고, Order의 Task들을 순서대로 실행하며,
상태 전이를 이벤트로 알립니다.

아키텍처:
- domain: 모델, 에러, Task 액션 인터페이스, 레지스트리/팩토리/실행 엔진
- application: AgentManager 파사드
- infrastructure: 로깅(structlog), 설정, 이벤트 발행
"""

__version__ = "1.0.0"

from .application import AgentManager
from .domain.models import (
    Agent,
    AgentStatus,
    AgentStats,
    Order,
    OrderStatus,
    Task,
    TaskSpec,
    TaskStatus,
    EventType,
)
from .domain.interfaces import ActionResult, ITaskAction, CallableTaskAction

__all__ = [
    "AgentManager",
    "Agent",
    "AgentStatus",
    "AgentStats",
    "Order",
    "OrderStatus",
    "Task",
    "TaskSpec",
    "TaskStatus",
    "EventType",
    "ActionResult",
    "ITaskAction",
    "CallableTaskAction",
]
