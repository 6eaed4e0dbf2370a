"""
Domain 인터페이스 패키지

Task 액션 인터페이스를 포함합니다.
"""

from .task_action import ActionResult, ITaskAction, CallableTaskAction, as_task_action

__all__ = [
    "ActionResult",
    "ITaskAction",
    "CallableTaskAction",
    "as_task_action",
]
