"""
에이전트 도메인 모델

Agent: Order를 실행하는 논리적 실행 주체
AgentStatus: 에이전트 상태 (Enum)
AgentStats: 에이전트 실행 통계
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from enum import Enum

from .order import Order, OrderStatus


class AgentStatus(str, Enum):
    """에이전트 상태"""
    IDLE = "idle"
    BUSY = "busy"
    ERROR = "error"


@dataclass(eq=False)
class Agent:
    """
    에이전트 도메인 모델

    status가 busy이면 current_order가 설정되어 있고, 그 역도 성립합니다.
    상태와 히스토리는 실행 엔진(AgentRegistry의 변경 메서드)만 수정합니다.

    Attributes:
        id: Agent 고유 식별자 (생성 후 불변)
        name: 표시 이름
        status: 에이전트 상태
        current_order: 실행 중인 Order
        order_history: 실행했던 모든 Order (추가만 가능)
    """
    id: str
    name: str
    status: AgentStatus = AgentStatus.IDLE
    current_order: Optional[Order] = None
    order_history: List[Order] = field(default_factory=list)

    @property
    def is_busy(self) -> bool:
        """Order 실행 중인지 여부"""
        return self.status == AgentStatus.BUSY

    def to_dict(self) -> Dict[str, Any]:
        """프레젠테이션 계층용 요약 딕셔너리"""
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "current_order": self.current_order.name if self.current_order else None,
            "order_count": len(self.order_history),
        }


@dataclass(frozen=True)
class AgentStats:
    """
    에이전트 실행 통계

    Attributes:
        total_orders: 실행한 Order 수
        completed_orders: 성공한 Order 수
        failed_orders: 실패한 Order 수
        total_tasks: 모든 Order의 Task 수 합계
    """
    total_orders: int = 0
    completed_orders: int = 0
    failed_orders: int = 0
    total_tasks: int = 0

    @classmethod
    def from_history(cls, history: List[Order]) -> "AgentStats":
        """
        Order 히스토리를 스캔하여 통계 생성

        Args:
            history: Agent의 Order 히스토리

        Returns:
            AgentStats 인스턴스
        """
        return cls(
            total_orders=len(history),
            completed_orders=sum(
                1 for order in history if order.status == OrderStatus.COMPLETED
            ),
            failed_orders=sum(
                1 for order in history if order.status == OrderStatus.FAILED
            ),
            total_tasks=sum(len(order.tasks) for order in history),
        )

    @property
    def success_rate(self) -> float:
        """
        성공률 계산 (0.0 ~ 1.0)

        Returns:
            성공한 Order 비율
        """
        if self.total_orders == 0:
            return 0.0
        return self.completed_orders / self.total_orders

    def to_dict(self) -> Dict[str, int]:
        return {
            "total_orders": self.total_orders,
            "completed_orders": self.completed_orders,
            "failed_orders": self.failed_orders,
            "total_tasks": self.total_tasks,
        }
