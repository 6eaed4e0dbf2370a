"""Pytest configuration and fixtures."""

import asyncio
import os
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# Environment setup
os.environ.setdefault("CONTROL_PANEL_LOG_LEVEL", "DEBUG")

from control_panel.application import AgentManager  # noqa: E402
from control_panel.domain.interfaces import ActionResult  # noqa: E402
from control_panel.domain.models import EventType  # noqa: E402
from control_panel.domain.services import AgentRegistry, OrderExecutor  # noqa: E402
from control_panel.infrastructure.events import EventNotifier  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 단위 테스트")
    config.addinivalue_line("markers", "integration: 통합 테스트")


@pytest.fixture
def project_root_path() -> Path:
    """Get project root path."""
    return project_root


@pytest.fixture
def notifier() -> EventNotifier:
    return EventNotifier()


@pytest.fixture
def registry(notifier: EventNotifier) -> AgentRegistry:
    return AgentRegistry(notifier)


@pytest.fixture
def executor(registry: AgentRegistry, notifier: EventNotifier) -> OrderExecutor:
    return OrderExecutor(registry, notifier)


@pytest.fixture
def manager() -> AgentManager:
    return AgentManager()


@pytest.fixture
def recorded_events(notifier: EventNotifier) -> List:
    """notifier에 발행되는 모든 이벤트를 순서대로 기록"""
    events: List = []
    for event_type in EventType:
        notifier.subscribe(event_type, events.append)
    return events


@pytest.fixture
def ok_action() -> Callable:
    """호출 이름을 기록하며 성공하는 async 액션 팩토리"""
    def factory(calls: List[str] = None, label: str = "ok", delay: float = 0):
        async def action():
            if delay:
                await asyncio.sleep(delay)
            if calls is not None:
                calls.append(label)
            return ActionResult.ok()
        return action
    return factory


@pytest.fixture
def failing_action() -> Callable:
    """예외를 던지는 async 액션 팩토리"""
    def factory(message: str = "boom", calls: List[str] = None, label: str = "fail"):
        async def action():
            if calls is not None:
                calls.append(label)
            raise RuntimeError(message)
        return action
    return factory
