"""
Task 액션 인터페이스 테스트
"""

import pytest

from control_panel.domain.interfaces import (
    ActionResult,
    CallableTaskAction,
    ITaskAction,
    as_task_action,
)


class TestActionResult:
    """ActionResult 팩토리"""

    def test_ok(self):
        result = ActionResult.ok()
        assert result.success is True
        assert result.error is None

    def test_fail(self):
        result = ActionResult.fail("timeout")
        assert result.success is False
        assert result.error == "timeout"


class TestCallableTaskAction:
    """async 함수 어댑터"""

    @pytest.mark.asyncio
    async def test_normal_return_is_success(self):
        async def step():
            return "ignored"

        result = await CallableTaskAction(step).run()
        assert result == ActionResult.ok()

    @pytest.mark.asyncio
    async def test_action_result_passed_through(self):
        async def step():
            return ActionResult.fail("not found")

        result = await CallableTaskAction(step).run()
        assert result.error == "not found"

    @pytest.mark.asyncio
    async def test_sync_callable(self):
        """동기 함수도 지원"""
        result = await CallableTaskAction(lambda: None).run()
        assert result.success is True

    @pytest.mark.asyncio
    async def test_exception_propagates(self):
        async def step():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await CallableTaskAction(step).run()

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            CallableTaskAction(42)

    def test_repr(self):
        async def open_page():
            pass

        assert "open_page" in repr(CallableTaskAction(open_page))


class TestAsTaskAction:
    def test_task_action_returned_as_is(self):
        class Action(ITaskAction):
            async def run(self) -> ActionResult:
                return ActionResult.ok()

        action = Action()
        assert as_task_action(action) is action

    def test_callable_wrapped(self):
        async def step():
            pass

        assert isinstance(as_task_action(step), CallableTaskAction)

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            as_task_action(None)
