"""
Domain Services

Agent 레지스트리, Order 팩토리, Order 실행 엔진
"""

from .agent_registry import AgentRegistry
from .order_factory import build_order
from .order_executor import OrderExecutor

__all__ = [
    "AgentRegistry",
    "build_order",
    "OrderExecutor",
]
