"""
Order 실행 엔진

OrderExecutor: Agent 하나에 Order 하나를 배정하여 Task를 순차 실행 (fail-fast)
"""

import threading
from datetime import datetime
from typing import List, Optional

from ..exceptions import AgentBusyError, OrderStateError, TaskFailureError
from ..interfaces.task_action import ActionResult
from ..models.agent import Agent, AgentStats
from ..models.events import (
    OrderStartedEvent,
    TaskStartedEvent,
    TaskCompletedEvent,
    OrderCompletedEvent,
    OrderFailedEvent,
)
from ..models.order import Order, OrderStatus
from ..models.task import Task, TaskStatus, TASK_SUCCESS_RESULT
from .agent_registry import AgentRegistry
from ...infrastructure.events import EventNotifier
from ...infrastructure.logging import get_logger

logger = get_logger(__name__, component="OrderExecutor")


def _describe_error(error: BaseException) -> str:
    """예외를 Task error 필드에 기록할 메시지로 변환"""
    return str(error) or type(error).__name__


class OrderExecutor:
    """
    Order 실행 엔진

    Order의 Task들을 정의된 순서대로 하나씩 실행합니다.
    Task 하나가 실패하면 남은 Task는 실행하지 않고(pending 유지) Order를 실패 처리합니다.

    Algorithm:
        1. Agent busy 확인 후 busy로 표시, Order를 in_progress로 변경 (orderStarted)
        2. Task마다 running → 액션 실행 → completed/failed (taskStarted, taskCompleted)
        3. 모두 성공하면 completed (orderCompleted),
           실패하면 Order failed + Agent error (orderFailed)
        4. 어떤 경우든 Order를 히스토리에 추가하고 current_order 해제
        5. 실패 원인을 호출자에게 다시 던짐

    Example:
        ```python
        executor = OrderExecutor(registry, notifier)
        try:
            await executor.execute_order(agent.id, order)
        except TaskFailureError as e:
            print(f"Order failed: {e.task_name} - {e.task_error}")
        ```
    """

    def __init__(
        self,
        registry: AgentRegistry,
        notifier: EventNotifier,
        recent_orders_limit: int = 10
    ):
        """
        초기화

        Args:
            registry: Agent 조회/변경에 사용할 AgentRegistry
            notifier: 이벤트를 발행할 EventNotifier
            recent_orders_limit: recent_orders()의 기본 개수
        """
        self._registry = registry
        self._notifier = notifier
        self.recent_orders_limit = recent_orders_limit
        # busy 확인과 busy 설정 사이에 다른 호출이 끼어들지 않도록 보호
        self._claim_lock = threading.Lock()

    async def execute_order(self, agent_id: str, order: Order) -> Order:
        """
        Agent에 Order를 배정하고 실행

        Args:
            agent_id: 실행할 Agent ID
            order: pending 상태의 Order

        Returns:
            completed 상태의 Order

        Raises:
            AgentNotFoundError: 존재하지 않는 Agent
            AgentBusyError: Agent가 다른 Order를 실행 중
            OrderStateError: Order가 pending 상태가 아님
            TaskFailureError: Task 실패 (정리 작업 후 전파)
        """
        agent = self._claim(agent_id, order)

        logger.info(
            "Order started",
            agent_id=agent.id,
            agent_name=agent.name,
            order_id=order.id,
            order_name=order.name,
            task_count=len(order.tasks),
        )

        try:
            self._notifier.publish(OrderStartedEvent(agent=agent, order=order))
            failure = await self._run_tasks(agent, order)

            if failure is None:
                order.status = OrderStatus.COMPLETED
                order.finished_at = datetime.now()
                logger.info(
                    "Order completed",
                    agent_id=agent.id,
                    order_id=order.id,
                    duration_seconds=order.duration_seconds(),
                )
                self._notifier.publish(OrderCompletedEvent(agent=agent, order=order))
            else:
                self._fail_order(agent, order, failure)
                raise failure

        except TaskFailureError:
            raise
        except BaseException as e:
            # 액션 밖으로 빠져나온 예외 (CancelledError 등)
            if not order.is_finished:
                self._fail_order(agent, order, e)
            raise
        finally:
            self._registry.release(agent, order)

        return order

    def _claim(self, agent_id: str, order: Order) -> Agent:
        """
        busy 확인 및 설정 (원자적)

        Raises:
            AgentNotFoundError, AgentBusyError, OrderStateError
        """
        with self._claim_lock:
            agent = self._registry.require_agent(agent_id)
            if agent.is_busy:
                logger.warning(
                    "Agent is busy, order rejected",
                    agent_id=agent.id,
                    order_id=order.id,
                )
                raise AgentBusyError(agent.id, agent.name)

            if order.status != OrderStatus.PENDING:
                raise OrderStateError(order.id, order.status.value)

            agent = self._registry.reserve(agent_id, order)
            order.status = OrderStatus.IN_PROGRESS
            order.started_at = datetime.now()
            return agent

    async def _run_tasks(self, agent: Agent, order: Order) -> Optional[TaskFailureError]:
        """
        Task 순차 실행 (첫 실패에서 중단)

        Returns:
            실패한 경우 TaskFailureError, 모두 성공하면 None
        """
        for index, task in enumerate(order.tasks, start=1):
            raised = await self._execute_task(agent, task)

            if task.status == TaskStatus.FAILED:
                skipped = len(order.tasks) - index
                logger.error(
                    "Task failed, aborting order",
                    agent_id=agent.id,
                    order_id=order.id,
                    task_id=task.id,
                    task_name=task.name,
                    error=task.error,
                    skipped_tasks=skipped,
                )
                failure = TaskFailureError(
                    order_name=order.name,
                    task_name=task.name,
                    task_error=task.error or "",
                    original_error=raised,
                )
                if raised is not None:
                    failure.__cause__ = raised
                return failure

        return None

    async def _execute_task(self, agent: Agent, task: Task) -> Optional[Exception]:
        """
        단일 Task 실행

        Returns:
            액션이 예외를 던졌다면 그 예외, 아니면 None
        """
        task.start_time = datetime.now()
        task.status = TaskStatus.RUNNING

        raised: Optional[Exception] = None
        # running으로 바뀐 뒤에는 무슨 일이 있어도 finally에서 end_time 설정
        try:
            self._notifier.publish(TaskStartedEvent(agent=agent, task=task))
            logger.debug(f"Task {task.id} 실행 시작: {task.name}", agent_id=agent.id)

            outcome = await task.action.run()

        except Exception as e:
            raised = e
            self._mark_task_failed(task, _describe_error(e))

        except BaseException as e:
            self._mark_task_failed(task, _describe_error(e))
            raise

        else:
            if isinstance(outcome, ActionResult) and not outcome.success:
                self._mark_task_failed(
                    task, outcome.error or "Task 액션이 실패를 반환했습니다"
                )
            else:
                task.status = TaskStatus.COMPLETED
                task.result = TASK_SUCCESS_RESULT

        finally:
            task.end_time = datetime.now()
            self._notifier.publish(TaskCompletedEvent(agent=agent, task=task))

        if task.status == TaskStatus.COMPLETED:
            logger.info(
                "Task completed",
                agent_id=agent.id,
                task_id=task.id,
                task_name=task.name,
                duration_seconds=task.duration_seconds(),
            )

        return raised

    @staticmethod
    def _mark_task_failed(task: Task, error: str) -> None:
        task.status = TaskStatus.FAILED
        task.result = None
        task.error = error

    def _fail_order(self, agent: Agent, order: Order, error: BaseException) -> None:
        """Order 실패 처리 (Order failed, Agent error, orderFailed 발행)"""
        order.status = OrderStatus.FAILED
        order.finished_at = datetime.now()
        self._registry.mark_error(agent)
        logger.error(
            "Order failed",
            agent_id=agent.id,
            order_id=order.id,
            order_name=order.name,
            error=str(error),
        )
        self._notifier.publish(
            OrderFailedEvent(agent=agent, order=order, error=error)
        )

    def get_stats(self, agent_id: str) -> AgentStats:
        """
        Agent 실행 통계

        Raises:
            AgentNotFoundError: 존재하지 않는 Agent
        """
        agent = self._registry.require_agent(agent_id)
        return AgentStats.from_history(list(agent.order_history))

    def recent_orders(self, agent_id: str, limit: Optional[int] = None) -> List[Order]:
        """
        최근 실행한 Order 목록 (오래된 것부터)

        Args:
            agent_id: Agent ID
            limit: 최대 개수 (None이면 recent_orders_limit)

        Raises:
            AgentNotFoundError: 존재하지 않는 Agent
        """
        agent = self._registry.require_agent(agent_id)
        if limit is None:
            limit = self.recent_orders_limit
        if limit <= 0:
            return []
        return list(agent.order_history[-limit:])
