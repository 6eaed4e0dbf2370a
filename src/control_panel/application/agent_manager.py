"""
Agent Manager

EventNotifier, AgentRegistry, OrderExecutor를 하나로 묶은 파사드
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from ..domain.models import Agent, AgentStats, EventType, Order
from ..domain.services import AgentRegistry, OrderExecutor, build_order
from ..domain.services.order_factory import TaskSpecLike
from ..infrastructure.config import SystemConfig, load_system_config
from ..infrastructure.events import EventHandler, EventNotifier
from ..infrastructure.logging import configure_structlog, get_logger

logger = get_logger(__name__, component="AgentManager")


class AgentManager:
    """
    Agent 관리 파사드

    인스턴스마다 자신만의 EventNotifier를 가지므로 프로세스 전역 상태가 없습니다.

    Example:
        ```python
        manager = AgentManager()
        manager.subscribe("orderCompleted", lambda e: print(e.order.name))

        agent = manager.create_agent("A")
        order = manager.build_order("demo", "", [TaskSpec("t1", "", step)])
        await manager.execute_order(agent.id, order)
        print(manager.get_stats(agent.id).success_rate)
        ```
    """

    def __init__(
        self,
        notifier: Optional[EventNotifier] = None,
        recent_orders_limit: int = 10
    ):
        """
        Args:
            notifier: 사용할 EventNotifier (None이면 새로 생성)
            recent_orders_limit: recent_orders()의 기본 개수
        """
        self.notifier = notifier if notifier is not None else EventNotifier()
        self.registry = AgentRegistry(self.notifier)
        self.executor = OrderExecutor(
            self.registry,
            self.notifier,
            recent_orders_limit=recent_orders_limit,
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[SystemConfig] = None,
        configure_logging: bool = False
    ) -> "AgentManager":
        """
        설정으로부터 AgentManager 생성

        Args:
            config: 시스템 설정 (None이면 config/system_config.json + 환경변수에서 로드)
            configure_logging: True면 설정값으로 structlog도 초기화

        Returns:
            설정된 히스토리 크기/조회 개수를 사용하는 AgentManager
        """
        if config is None:
            config = load_system_config()

        if configure_logging:
            configure_structlog(
                log_dir=config.log_dir,
                log_level=config.log_level,
                enable_json=config.enable_json_logs,
            )

        notifier = EventNotifier(
            enable_history=config.event_history_enabled,
            max_history_size=config.event_history_size,
        )
        logger.debug(
            "AgentManager created from config",
            event_history_size=config.event_history_size,
            recent_orders_limit=config.recent_orders_limit,
        )
        return cls(notifier=notifier, recent_orders_limit=config.recent_orders_limit)

    # ==================== Agent ====================

    def create_agent(self, name: str) -> Agent:
        return self.registry.create_agent(name)

    def get_agent(self, agent_id: str) -> Optional[Agent]:
        return self.registry.get_agent(agent_id)

    def list_agents(self) -> List[Agent]:
        return self.registry.list_agents()

    # ==================== Order ====================

    def build_order(
        self,
        name: str,
        description: str,
        task_specs: Iterable[TaskSpecLike]
    ) -> Order:
        return build_order(name, description, task_specs)

    async def execute_order(self, agent_id: str, order: Order) -> Order:
        """
        Order 실행 (OrderExecutor.execute_order 참고)

        Raises:
            AgentNotFoundError, AgentBusyError, OrderStateError, TaskFailureError
        """
        return await self.executor.execute_order(agent_id, order)

    # ==================== Stats ====================

    def get_stats(self, agent_id: str) -> AgentStats:
        return self.executor.get_stats(agent_id)

    def recent_orders(self, agent_id: str, limit: Optional[int] = None) -> List[Order]:
        return self.executor.recent_orders(agent_id, limit)

    # ==================== Events ====================

    def subscribe(self, event_type: Union[EventType, str], handler: EventHandler) -> None:
        """
        이벤트 구독

        Raises:
            ValueError: 알 수 없는 이벤트 이름
            TypeError: 호출 불가능한 handler
        """
        self.notifier.subscribe(event_type, handler)

    def get_handler_error_stats(self) -> Dict[str, Any]:
        """이 매니저의 이벤트 핸들러 장애 통계"""
        return self.notifier.get_error_stats()
