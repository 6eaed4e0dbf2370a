#!/usr/bin/env python3
"""
샘플 Order 데모 스크립트.

Agent 두 개를 만들어 성공하는 Order와 실패하는 Order를 실행하고,
이벤트 스트림과 Agent 통계를 Rich로 출력합니다.
"""

import asyncio
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# src 디렉토리를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from control_panel import AgentManager, ActionResult, EventType, TaskSpec
from control_panel.domain.exceptions import TaskFailureError
from control_panel.domain.models.events import (
    OrderFailedEvent,
    TaskCompletedEvent,
    TaskStartedEvent,
)

COLORS = {
    "primary": "#58a6ff",
    "success": "#3fb950",
    "warning": "#d29922",
    "error": "#f85149",
    "info": "#79c0ff",
    "muted": "#8b949e",
}

console = Console(highlight=False)


def print_event(event) -> None:
    """이벤트 한 줄 출력."""
    name = event.event_type.value

    if isinstance(event, (TaskStartedEvent, TaskCompletedEvent)):
        detail = f"{event.task.name} → {event.task.status.value}"
        if event.task.error:
            detail += f" ({event.task.error})"
    elif isinstance(event, OrderFailedEvent):
        detail = f"{event.order.name}: {event.error}"
    elif hasattr(event, "order"):
        detail = f"{event.order.name} → {event.order.status.value}"
    else:
        detail = event.agent.name

    color = COLORS["error"] if isinstance(event, OrderFailedEvent) else COLORS["info"]
    console.print(f"[{COLORS['muted']}]{event.agent.name:>8}[/] [{color}]{name:<15}[/] {detail}")


def make_step(label: str, delay: float = 0.1):
    """지정한 시간만큼 대기 후 성공하는 액션."""
    async def step():
        await asyncio.sleep(delay)
        return ActionResult.ok()

    step.__name__ = label
    return step


async def fail_step():
    await asyncio.sleep(0.05)
    raise RuntimeError("Element not found: #search-input")


def print_stats(manager: AgentManager) -> None:
    """Agent별 통계 테이블 출력."""
    table = Table(
        title="Agent 통계",
        box=box.ROUNDED,
        title_style=f"bold {COLORS['primary']}"
    )
    table.add_column("Agent", style=COLORS["info"], no_wrap=True)
    table.add_column("상태", style=COLORS["primary"])
    table.add_column("전체", justify="right")
    table.add_column("성공", justify="right", style=COLORS["success"])
    table.add_column("실패", justify="right", style=COLORS["error"])
    table.add_column("Task 수", justify="right", style=COLORS["warning"])
    table.add_column("성공률", justify="right")

    for agent in manager.list_agents():
        stats = manager.get_stats(agent.id)
        table.add_row(
            agent.name,
            agent.status.value,
            str(stats.total_orders),
            str(stats.completed_orders),
            str(stats.failed_orders),
            str(stats.total_tasks),
            f"{stats.success_rate:.0%}",
        )

    console.print()
    console.print(table)
    console.print()


async def main() -> None:
    manager = AgentManager.from_config(configure_logging=True)
    for event_type in EventType:
        manager.subscribe(event_type, print_event)

    console.print(Panel(
        f"[bold {COLORS['primary']}]Control Panel Demo[/]",
        border_style=COLORS["primary"],
        box=box.DOUBLE
    ))

    searcher = manager.create_agent("searcher")
    broken = manager.create_agent("broken")

    search_order = manager.build_order(
        "GitHub Search Demo",
        "Search GitHub for a repository",
        [
            TaskSpec("Open GitHub", "Navigate to github.com", make_step("open")),
            TaskSpec("Search", "Type the query", make_step("search")),
            TaskSpec("Open result", "Click the first result", make_step("open_result")),
        ],
    )
    failing_order = manager.build_order(
        "Broken Search",
        "Second task cannot find its element",
        [
            {"name": "Open GitHub", "action": make_step("open")},
            {"name": "Search", "description": "Type the query", "action": fail_step},
            {"name": "Open result", "action": make_step("open_result")},
        ],
    )

    results = await asyncio.gather(
        manager.execute_order(searcher.id, search_order),
        manager.execute_order(broken.id, failing_order),
        return_exceptions=True,
    )

    for result in results:
        if isinstance(result, TaskFailureError):
            console.print(f"[{COLORS['error']}]❌ {result.message}[/]")

    print_stats(manager)


if __name__ == "__main__":
    asyncio.run(main())
