"""
Order 생성 팩토리

build_order: Task 명세 목록으로 pending 상태의 Order 생성
"""

import uuid
from collections.abc import Mapping
from typing import Any, Iterable, Union

from ..exceptions import InvalidTaskSpecError
from ..interfaces.task_action import as_task_action
from ..models.order import Order
from ..models.task import Task, TaskSpec

TaskSpecLike = Union[TaskSpec, Mapping]


def build_order(
    name: str,
    description: str,
    task_specs: Iterable[TaskSpecLike]
) -> Order:
    """
    Order 생성

    Registry나 Agent 상태는 건드리지 않습니다. 구조만 검증하며
    빈 이름도 허용합니다.

    Args:
        name: 주문 이름
        description: 주문 설명
        task_specs: TaskSpec 또는 {"name", "description", "action"} 매핑의 순서 있는 목록
                    action은 ITaskAction 또는 인자 없는 async 함수

    Returns:
        Order와 모든 Task가 pending 상태인 새 Order

    Raises:
        InvalidTaskSpecError: name/action 누락 또는 action 타입 오류

    Example:
        ```python
        order = build_order(
            "GitHub Search Demo",
            "Search for a repository",
            [
                TaskSpec("Open GitHub", "Navigate to github.com", open_github),
                {"name": "Search", "description": "Type query", "action": search},
            ],
        )
        ```
    """
    tasks = [
        _build_task(index, spec)
        for index, spec in enumerate(task_specs, start=1)
    ]

    return Order(
        id=str(uuid.uuid4()),
        name=name,
        description=description,
        tasks=tasks,
    )


def _build_task(index: int, spec: Any) -> Task:
    """Task 명세 하나를 pending 상태의 Task로 변환"""
    if isinstance(spec, TaskSpec):
        name, description, action = spec.name, spec.description, spec.action
    elif isinstance(spec, Mapping):
        if "name" not in spec:
            raise InvalidTaskSpecError(index, "'name' 필드가 없습니다")
        if "action" not in spec:
            raise InvalidTaskSpecError(index, "'action' 필드가 없습니다")
        name = spec["name"]
        description = spec.get("description", "")
        action = spec["action"]
    else:
        raise InvalidTaskSpecError(
            index, f"TaskSpec 또는 매핑이어야 합니다: {type(spec).__name__}"
        )

    try:
        task_action = as_task_action(action)
    except TypeError as e:
        raise InvalidTaskSpecError(index, str(e)) from e

    return Task(
        id=str(uuid.uuid4()),
        name=name,
        description=description,
        action=task_action,
    )
