"""
주문(Order) 도메인 모델

Order: Agent가 한 번에 실행하는 Task 묶음
OrderStatus: 주문 상태 (Enum)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum

from .task import Task, TaskStatus


class OrderStatus(str, Enum):
    """주문 상태 (pending → in_progress → completed | failed)"""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(eq=False)
class Order:
    """
    주문 도메인 모델

    tasks의 순서가 곧 실행 순서입니다. completed/failed가 된 Order는
    정확히 하나의 Agent 히스토리에 속하며 더 이상 변경되지 않습니다.

    Attributes:
        id: Order 고유 식별자
        name: 주문 이름
        description: 주문 설명
        tasks: Task 리스트 (실행 순서)
        created_at: 생성 시각
        status: 주문 상태
        started_at: 실행 시작 시각
        finished_at: 실행 종료 시각
    """
    id: str
    name: str
    description: str
    tasks: List[Task] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    status: OrderStatus = OrderStatus.PENDING
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def is_finished(self) -> bool:
        """completed 또는 failed 상태인지 여부"""
        return self.status in (OrderStatus.COMPLETED, OrderStatus.FAILED)

    def get_task(self, task_id: str) -> Optional[Task]:
        """
        Task ID로 Task 조회

        Args:
            task_id: 조회할 Task ID

        Returns:
            해당 Task 객체, 없으면 None
        """
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def tasks_with_status(self, status: TaskStatus) -> List[Task]:
        """특정 상태의 Task 목록"""
        return [task for task in self.tasks if task.status == status]

    def duration_seconds(self) -> Optional[float]:
        """
        실행 시간 계산 (초)

        Returns:
            실행 시간 (초), 아직 실행되지 않았거나 끝나지 않았으면 None
        """
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return None

    def to_dict(self) -> Dict[str, Any]:
        """프레젠테이션 계층용 딕셔너리 변환"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "task_count": len(self.tasks),
            "tasks": [task.to_dict() for task in self.tasks],
        }
