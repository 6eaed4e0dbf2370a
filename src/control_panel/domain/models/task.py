"""
작업 도메인 모델

Task: Order를 구성하는 최소 실행 단위
TaskSpec: Order 생성 시 전달하는 Task 명세
TaskStatus: 작업 상태 (Enum)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum

from ..interfaces.task_action import ITaskAction


class TaskStatus(str, Enum):
    """작업 상태"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


# 성공한 Task의 result에 기록되는 고정 값
TASK_SUCCESS_RESULT = "Success"


@dataclass
class TaskSpec:
    """
    Task 명세 (Order 생성 입력)

    Attributes:
        name: 작업 이름
        description: 작업 설명
        action: 실행할 액션 (ITaskAction 또는 인자 없는 async 함수)
    """
    name: str
    description: str
    action: Any


@dataclass(eq=False)
class Task:
    """
    작업 도메인 모델

    실행 엔진만이 상태를 변경합니다. result는 completed일 때만,
    error는 failed일 때만 설정됩니다.

    Attributes:
        id: Task 고유 식별자
        name: 작업 이름
        description: 작업 설명
        action: 실행할 액션
        status: 작업 상태
        result: 실행 결과 (성공 시)
        error: 에러 메시지 (실패 시)
        start_time: 시작 시각
        end_time: 종료 시각
    """
    id: str
    name: str
    description: str
    action: ITaskAction
    status: TaskStatus = TaskStatus.PENDING
    result: Optional[str] = None
    error: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def is_terminal(self) -> bool:
        """completed 또는 failed 상태인지 여부"""
        return self.status in (TaskStatus.COMPLETED, TaskStatus.FAILED)

    def duration_seconds(self) -> Optional[float]:
        """
        실행 시간 계산 (초)

        Returns:
            실행 시간 (초), start_time 또는 end_time이 없으면 None
        """
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def to_dict(self) -> Dict[str, Any]:
        """프레젠테이션 계층용 딕셔너리 변환 (action 제외)"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "result": self.result,
            "error": self.error,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
        }
