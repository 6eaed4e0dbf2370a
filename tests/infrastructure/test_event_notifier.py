"""
EventNotifier 테스트
"""

import pytest

from control_panel.domain.models import Agent, EventType
from control_panel.domain.models.events import (
    AgentCreatedEvent,
    EVENT_CLASS_MAPPING,
)
from control_panel.infrastructure.events import DispatchLog, EventNotifier


@pytest.fixture
def agent() -> Agent:
    return Agent(id="agent-1", name="A")


class TestEventNotifierInitialization:
    """EventNotifier 초기화 테스트"""

    def test_initialization_default(self):
        notifier = EventNotifier()

        assert notifier.dispatch_history == []
        assert notifier.enable_history is True
        assert notifier.max_history_size == 1000

    def test_initialization_custom(self):
        notifier = EventNotifier(enable_history=False, max_history_size=10)

        assert notifier.enable_history is False
        assert notifier.max_history_size == 10


class TestSubscribe:
    """구독 테스트"""

    def test_subscribe_by_enum_and_name(self, notifier):
        """EventType과 이벤트 이름 모두 허용"""
        notifier.subscribe(EventType.TASK_STARTED, lambda e: None)
        notifier.subscribe("taskStarted", lambda e: None)

        assert notifier.handler_count(EventType.TASK_STARTED) == 2
        assert notifier.handler_count("taskCompleted") == 0

    def test_unknown_event_name(self, notifier):
        with pytest.raises(ValueError):
            notifier.subscribe("taskExploded", lambda e: None)

    def test_non_callable_handler(self, notifier):
        with pytest.raises(TypeError):
            notifier.subscribe(EventType.TASK_STARTED, "not a handler")

    def test_same_handler_twice_called_twice(self, notifier, agent):
        """같은 핸들러를 두 번 등록하면 두 번 호출"""
        received = []
        notifier.subscribe(EventType.AGENT_CREATED, received.append)
        notifier.subscribe(EventType.AGENT_CREATED, received.append)

        notifier.publish(AgentCreatedEvent(agent=agent))

        assert len(received) == 2


class TestPublish:
    """발행 테스트"""

    def test_handlers_called_in_registration_order(self, notifier, agent):
        calls = []
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: calls.append("first"))
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: calls.append("second"))
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: calls.append("third"))

        notifier.publish(AgentCreatedEvent(agent=agent))

        assert calls == ["first", "second", "third"]

    def test_only_matching_event_type(self, notifier, agent):
        received = []
        notifier.subscribe(EventType.ORDER_FAILED, received.append)

        notifier.publish(AgentCreatedEvent(agent=agent))

        assert received == []

    def test_publish_without_subscribers(self, notifier, agent):
        """구독자가 없어도 예외 없음"""
        notifier.publish(AgentCreatedEvent(agent=agent))
        assert notifier.dispatch_history == []

    def test_payload_shared_by_reference(self, notifier, agent):
        received = []
        notifier.subscribe(EventType.AGENT_CREATED, received.append)

        event = AgentCreatedEvent(agent=agent)
        notifier.publish(event)

        assert received[0] is event
        assert received[0].agent is agent

    def test_failing_handler_isolated(self, notifier, agent):
        """한 핸들러의 예외가 다른 핸들러 호출을 막지 않음"""
        calls = []

        def broken(event):
            raise RuntimeError("handler bug")

        notifier.subscribe(EventType.AGENT_CREATED, broken)
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: calls.append("after"))

        notifier.publish(AgentCreatedEvent(agent=agent))

        assert calls == ["after"]

        stats = notifier.get_error_stats()
        assert stats["error_counts"]["RuntimeError"] == 1
        recent = stats["recent_errors"][-1]
        assert recent["context"] == "event_handler"
        assert recent["event_type"] == "agentCreated"

    def test_handler_errors_scoped_to_notifier(self, agent):
        """핸들러 장애 통계는 notifier마다 따로 집계"""
        noisy = EventNotifier()
        quiet = EventNotifier()
        noisy.subscribe(EventType.AGENT_CREATED, lambda e: 1 / 0)

        noisy.publish(AgentCreatedEvent(agent=agent))

        assert noisy.get_error_stats()["total_errors"] == 1
        assert noisy.error_tracker.recent()[-1].error_type == "ZeroDivisionError"
        assert quiet.get_error_stats()["total_errors"] == 0

    def test_subscribe_during_publish(self, notifier, agent):
        """발행 중 추가된 구독은 다음 발행부터 적용"""
        late_calls = []

        def subscribe_more(event):
            notifier.subscribe(EventType.AGENT_CREATED, late_calls.append)

        notifier.subscribe(EventType.AGENT_CREATED, subscribe_more)

        notifier.publish(AgentCreatedEvent(agent=agent))
        assert late_calls == []

        notifier.publish(AgentCreatedEvent(agent=agent))
        assert len(late_calls) == 1


class TestDispatchHistory:
    """핸들러 호출 히스토리"""

    def test_history_records_success_and_failure(self, notifier, agent):
        def broken(event):
            raise ValueError("bad")

        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)
        notifier.subscribe(EventType.AGENT_CREATED, broken)

        notifier.publish(AgentCreatedEvent(agent=agent))

        history = notifier.get_dispatch_history()
        assert len(history) == 2
        assert all(isinstance(log, DispatchLog) for log in history)
        assert history[0].success is True
        assert history[1].success is False
        assert history[1].error == "bad"
        assert history[1].handler.endswith("broken")

    def test_history_disabled(self, agent):
        notifier = EventNotifier(enable_history=False)
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)

        notifier.publish(AgentCreatedEvent(agent=agent))

        assert notifier.get_dispatch_history() == []

    def test_history_size_limit(self, agent):
        notifier = EventNotifier(max_history_size=3)
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)

        for _ in range(5):
            notifier.publish(AgentCreatedEvent(agent=agent))

        assert len(notifier.dispatch_history) == 3

    def test_history_filter_and_limit(self, notifier, agent):
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)
        for _ in range(4):
            notifier.publish(AgentCreatedEvent(agent=agent))

        assert len(notifier.get_dispatch_history(EventType.AGENT_CREATED)) == 4
        assert len(notifier.get_dispatch_history("agentCreated", limit=2)) == 2
        assert notifier.get_dispatch_history(EventType.ORDER_FAILED) == []

    def test_history_limit_zero(self, notifier, agent):
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)
        notifier.publish(AgentCreatedEvent(agent=agent))

        assert notifier.get_dispatch_history(limit=0) == []
        assert len(notifier.get_dispatch_history(limit=None)) == 1

    def test_clear_history(self, notifier, agent):
        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)
        notifier.publish(AgentCreatedEvent(agent=agent))

        notifier.clear_history()

        assert notifier.dispatch_history == []

    def test_statistics(self, notifier, agent):
        def broken(event):
            raise ValueError("bad")

        notifier.subscribe(EventType.AGENT_CREATED, lambda e: None)
        notifier.subscribe(EventType.AGENT_CREATED, broken)
        notifier.publish(AgentCreatedEvent(agent=agent))
        notifier.publish(AgentCreatedEvent(agent=agent))

        stats = notifier.get_statistics()

        assert stats == {"agentCreated": {"total": 4, "success": 2, "failed": 2}}


class TestEventModel:
    """이벤트 payload 모델"""

    def test_every_event_type_has_payload_class(self):
        assert set(EVENT_CLASS_MAPPING) == set(EventType)
        for event_type, event_class in EVENT_CLASS_MAPPING.items():
            assert event_class.event_type == event_type

    def test_event_names(self):
        assert [e.value for e in EventType] == [
            "agentCreated",
            "orderStarted",
            "taskStarted",
            "taskCompleted",
            "orderCompleted",
            "orderFailed",
        ]

    def test_payload_is_frozen(self, agent):
        event = AgentCreatedEvent(agent=agent)
        with pytest.raises(AttributeError):
            event.agent = Agent(id="other", name="B")
