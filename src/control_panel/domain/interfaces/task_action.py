"""
Task Action 인터페이스

Task가 실행하는 작업(브라우저 자동화 등)의 인터페이스를 정의합니다.
실행 엔진은 이 인터페이스의 run()만 호출하며, 실제로 어떤 일을 하는지는 알지 못합니다.
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional


@dataclass(frozen=True)
class ActionResult:
    """
    Task 액션 실행 결과

    Attributes:
        success: 성공 여부
        error: 실패 시 에러 설명
    """
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ActionResult":
        """성공 결과 생성"""
        return cls(success=True)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        """
        실패 결과 생성

        Args:
            error: 실패 원인 설명
        """
        return cls(success=False, error=error)


class ITaskAction(ABC):
    """
    Task 액션 인터페이스

    자동화 드라이버(Playwright 등) 쪽에서 구현합니다.
    인자 없이 호출되며, 성공/실패를 ActionResult로 반환하거나 예외를 던집니다.
    """

    @abstractmethod
    async def run(self) -> ActionResult:
        """
        액션 실행

        Returns:
            실행 결과 (성공 또는 설명이 포함된 실패)

        Raises:
            Exception: 실행 중 예외 발생 시 (실패로 기록됨)
        """
        pass


class CallableTaskAction(ITaskAction):
    """
    async 함수를 ITaskAction으로 감싸는 어댑터

    함수가 정상 반환하면 성공, 예외를 던지면 실패로 처리됩니다.
    함수가 ActionResult를 반환하면 그 결과를 그대로 사용합니다.

    Example:
        ```python
        async def open_page():
            await page.goto("https://github.com")

        action = CallableTaskAction(open_page)
        result = await action.run()
        ```
    """

    def __init__(self, func: Callable[[], Awaitable[Any]]):
        """
        Args:
            func: 인자 없는 async 함수
        """
        if not callable(func):
            raise TypeError(f"callable이 필요합니다: {func!r}")
        self.func = func

    async def run(self) -> ActionResult:
        outcome = self.func()
        if inspect.isawaitable(outcome):
            outcome = await outcome

        if isinstance(outcome, ActionResult):
            return outcome
        return ActionResult.ok()

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"CallableTaskAction({name})"


def as_task_action(action: Any) -> ITaskAction:
    """
    ITaskAction 또는 callable을 ITaskAction으로 변환

    Args:
        action: ITaskAction 인스턴스 또는 인자 없는 (async) callable

    Returns:
        ITaskAction 인스턴스

    Raises:
        TypeError: 변환할 수 없는 타입인 경우
    """
    if isinstance(action, ITaskAction):
        return action
    if callable(action):
        return CallableTaskAction(action)
    raise TypeError(
        f"Task 액션은 ITaskAction 또는 callable이어야 합니다: {type(action).__name__}"
    )
