"""
Tests for domain models

control_panel/domain/models 테스트
"""
from datetime import datetime, timedelta

import pytest

from control_panel.domain.interfaces import CallableTaskAction
from control_panel.domain.models import (
    Agent,
    AgentStats,
    AgentStatus,
    Order,
    OrderStatus,
    Task,
    TaskStatus,
)


async def noop():
    return None


def make_task(name: str = "t", status: TaskStatus = TaskStatus.PENDING) -> Task:
    return Task(
        id=f"task-{name}",
        name=name,
        description="",
        action=CallableTaskAction(noop),
        status=status,
    )


def make_order(status: OrderStatus, task_count: int = 1) -> Order:
    return Order(
        id=f"order-{status.value}",
        name="O",
        description="",
        tasks=[make_task(f"t{i}") for i in range(task_count)],
        status=status,
    )


@pytest.mark.unit
class TestTask:
    """Task 모델 테스트"""

    def test_defaults(self):
        task = make_task()

        assert task.status == TaskStatus.PENDING
        assert task.result is None
        assert task.error is None
        assert task.is_terminal is False
        assert task.duration_seconds() is None

    def test_duration(self):
        task = make_task()
        task.start_time = datetime(2025, 1, 1, 12, 0, 0)
        task.end_time = task.start_time + timedelta(seconds=2.5)

        assert task.duration_seconds() == 2.5

    def test_is_terminal(self):
        assert make_task(status=TaskStatus.COMPLETED).is_terminal
        assert make_task(status=TaskStatus.FAILED).is_terminal
        assert not make_task(status=TaskStatus.RUNNING).is_terminal

    def test_to_dict_excludes_action(self):
        data = make_task("open").to_dict()

        assert data["name"] == "open"
        assert data["status"] == "pending"
        assert data["start_time"] is None
        assert "action" not in data

    def test_status_values(self):
        assert [s.value for s in TaskStatus] == ["pending", "running", "completed", "failed"]


@pytest.mark.unit
class TestOrder:
    """Order 모델 테스트"""

    def test_defaults(self):
        order = Order(id="o1", name="O", description="d")

        assert order.tasks == []
        assert order.status == OrderStatus.PENDING
        assert isinstance(order.created_at, datetime)
        assert order.is_finished is False
        assert order.duration_seconds() is None

    def test_get_task(self):
        order = make_order(OrderStatus.PENDING, task_count=2)

        assert order.get_task("task-t1") is order.tasks[1]
        assert order.get_task("missing") is None

    def test_tasks_with_status(self):
        order = make_order(OrderStatus.PENDING, task_count=3)
        order.tasks[0].status = TaskStatus.COMPLETED

        assert order.tasks_with_status(TaskStatus.PENDING) == order.tasks[1:]

    def test_to_dict(self):
        data = make_order(OrderStatus.COMPLETED, task_count=2).to_dict()

        assert data["status"] == "completed"
        assert data["task_count"] == 2
        assert len(data["tasks"]) == 2

    def test_identity_equality(self):
        """같은 필드 값이어도 서로 다른 Order"""
        a = Order(id="same", name="O", description="")
        b = Order(id="same", name="O", description="")
        assert a != b


@pytest.mark.unit
class TestAgent:
    """Agent 모델 테스트"""

    def test_defaults(self):
        agent = Agent(id="a1", name="A")

        assert agent.status == AgentStatus.IDLE
        assert agent.current_order is None
        assert agent.order_history == []
        assert agent.is_busy is False

    def test_to_dict(self):
        agent = Agent(id="a1", name="A")
        agent.order_history.append(make_order(OrderStatus.COMPLETED))

        data = agent.to_dict()

        assert data == {
            "id": "a1",
            "name": "A",
            "status": "idle",
            "current_order": None,
            "order_count": 1,
        }


@pytest.mark.unit
class TestAgentStats:
    """AgentStats 테스트"""

    def test_empty_history(self):
        stats = AgentStats.from_history([])

        assert stats == AgentStats()
        assert stats.success_rate == 0.0

    def test_from_history(self):
        history = [
            make_order(OrderStatus.COMPLETED, task_count=3),
            make_order(OrderStatus.FAILED, task_count=2),
            make_order(OrderStatus.COMPLETED, task_count=1),
        ]

        stats = AgentStats.from_history(history)

        assert stats.total_orders == 3
        assert stats.completed_orders == 2
        assert stats.failed_orders == 1
        assert stats.total_tasks == 6
        assert stats.success_rate == pytest.approx(2 / 3)
        assert stats.to_dict() == {
            "total_orders": 3,
            "completed_orders": 2,
            "failed_orders": 1,
            "total_tasks": 6,
        }
