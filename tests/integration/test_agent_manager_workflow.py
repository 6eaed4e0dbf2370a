"""
AgentManager 통합 테스트

Agent 생성 → Order 생성 → 실행 → 통계 조회까지 전체 흐름
"""

import asyncio

import pytest

from control_panel import AgentManager, TaskSpec
from control_panel.domain.exceptions import (
    AgentBusyError,
    AgentNotFoundError,
    TaskFailureError,
)
from control_panel.domain.models import AgentStatus, OrderStatus, TaskStatus
from control_panel.infrastructure.config import SystemConfig
from control_panel.infrastructure.events import LoggingEventObserver


@pytest.mark.integration
class TestAgentManagerWorkflow:
    """파사드 전체 흐름"""

    @pytest.mark.asyncio
    async def test_failing_order_scenario(self, manager, ok_action, failing_action):
        """Task 3개 중 두 번째가 'boom'으로 실패하는 Order"""
        events = []
        for name in ["agentCreated", "orderStarted", "taskStarted",
                     "taskCompleted", "orderCompleted", "orderFailed"]:
            manager.subscribe(name, lambda e, n=name: events.append(n))

        agent = manager.create_agent("A")
        order = manager.build_order("O", "three steps", [
            TaskSpec("t1", "", ok_action()),
            {"name": "t2", "action": failing_action("boom")},
            TaskSpec("t3", "", ok_action()),
        ])

        with pytest.raises(TaskFailureError, match="boom"):
            await manager.execute_order(agent.id, order)

        assert [t.status for t in order.tasks] == [
            TaskStatus.COMPLETED,
            TaskStatus.FAILED,
            TaskStatus.PENDING,
        ]
        assert order.tasks[0].result == "Success"
        assert order.tasks[1].error == "boom"
        assert order.status == OrderStatus.FAILED
        assert manager.get_agent(agent.id).status == AgentStatus.ERROR
        assert events == [
            "agentCreated",
            "orderStarted",
            "taskStarted",
            "taskCompleted",
            "taskStarted",
            "taskCompleted",
            "orderFailed",
        ]

        stats = manager.get_stats(agent.id)
        assert stats.total_orders == 1
        assert stats.failed_orders == 1
        assert stats.total_tasks == 3

    @pytest.mark.asyncio
    async def test_many_agents_in_parallel(self, manager, ok_action):
        """여러 Agent가 동시에 Order를 실행"""
        agents = [manager.create_agent(f"agent-{i}") for i in range(5)]
        orders = [
            manager.build_order(f"order-{i}", "", [
                TaskSpec("step-1", "", ok_action(delay=0.01)),
                TaskSpec("step-2", "", ok_action(delay=0.01)),
            ])
            for i in range(5)
        ]

        await asyncio.gather(*[
            manager.execute_order(agent.id, order)
            for agent, order in zip(agents, orders)
        ])

        assert manager.list_agents() == agents
        for agent, order in zip(agents, orders):
            assert agent.status == AgentStatus.IDLE
            assert manager.recent_orders(agent.id) == [order]
            assert manager.get_stats(agent.id).completed_orders == 1

    @pytest.mark.asyncio
    async def test_same_agent_twice_in_parallel(self, manager, ok_action):
        """같은 Agent에 동시에 두 Order를 배정하면 하나만 실행"""
        agent = manager.create_agent("A")
        first = manager.build_order("first", "", [TaskSpec("t", "", ok_action(delay=0.01))])
        second = manager.build_order("second", "", [TaskSpec("t", "", ok_action(delay=0.01))])

        results = await asyncio.gather(
            manager.execute_order(agent.id, first),
            manager.execute_order(agent.id, second),
            return_exceptions=True,
        )

        assert results[0] is first
        assert isinstance(results[1], AgentBusyError)
        assert second.status == OrderStatus.PENDING
        assert manager.get_stats(agent.id).total_orders == 1

    @pytest.mark.asyncio
    async def test_unknown_agent(self, manager, ok_action):
        order = manager.build_order("O", "", [TaskSpec("t", "", ok_action())])

        with pytest.raises(AgentNotFoundError):
            await manager.execute_order("missing", order)
        with pytest.raises(AgentNotFoundError):
            manager.get_stats("missing")

    @pytest.mark.asyncio
    async def test_logging_observer_does_not_change_behaviour(self, manager, ok_action):
        """로깅 옵저버를 붙여도 실행 결과 동일"""
        LoggingEventObserver().attach(manager.notifier)
        agent = manager.create_agent("A")
        order = manager.build_order("O", "", [TaskSpec("t", "", ok_action())])

        await manager.execute_order(agent.id, order)

        assert order.status == OrderStatus.COMPLETED
        stats = manager.notifier.get_statistics()
        assert stats["orderCompleted"] == {"total": 1, "success": 1, "failed": 0}

    def test_handler_errors_are_per_manager(self):
        """한 매니저의 핸들러 장애가 다른 매니저 통계에 섞이지 않음"""
        first = AgentManager()
        first.subscribe("agentCreated", lambda e: 1 / 0)
        first.create_agent("x")

        second = AgentManager()

        assert first.get_handler_error_stats()["error_counts"] == {"ZeroDivisionError": 1}
        assert second.get_handler_error_stats()["total_errors"] == 0


@pytest.mark.integration
class TestAgentManagerFromConfig:
    """설정 기반 생성"""

    def test_from_explicit_config(self):
        config = SystemConfig(
            event_history_enabled=False,
            event_history_size=5,
            recent_orders_limit=2,
        )

        manager = AgentManager.from_config(config)

        assert manager.notifier.enable_history is False
        assert manager.notifier.max_history_size == 5
        assert manager.executor.recent_orders_limit == 2

    def test_from_config_file(self, tmp_path, monkeypatch):
        """config/system_config.json을 읽어서 생성"""
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "system_config.json").write_text(
            '{"events": {"max_history_size": 7}, "stats": {"recent_orders_limit": 3}}',
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CONTROL_PANEL_ROOT", raising=False)
        monkeypatch.delenv("CONTROL_PANEL_EVENT_HISTORY_SIZE", raising=False)

        manager = AgentManager.from_config()

        assert manager.notifier.max_history_size == 7
        assert manager.executor.recent_orders_limit == 3

    @pytest.mark.asyncio
    async def test_recent_orders_limit_applied(self, ok_action):
        manager = AgentManager.from_config(SystemConfig(recent_orders_limit=2))
        agent = manager.create_agent("A")
        orders = [
            manager.build_order(f"o{i}", "", [TaskSpec("t", "", ok_action())])
            for i in range(4)
        ]
        for order in orders:
            await manager.execute_order(agent.id, order)

        assert manager.recent_orders(agent.id) == orders[-2:]
        assert manager.get_stats(agent.id).total_orders == 4
