"""
Agent 레지스트리

AgentRegistry: Agent 생성/조회 및 실행 엔진 전용 상태 변경
"""

import threading
import uuid
from typing import Dict, List, Optional

from ..exceptions import AgentBusyError, AgentNotFoundError
from ..models.agent import Agent, AgentStatus
from ..models.events import AgentCreatedEvent
from ..models.order import Order
from ...infrastructure.events import EventNotifier
from ...infrastructure.logging import get_logger

logger = get_logger(__name__, component="AgentRegistry")


class AgentRegistry:
    """
    Agent 레지스트리

    모든 Agent를 생성 순서대로 보관합니다. Agent의 상태/히스토리 변경은
    reserve(), mark_error(), release()를 통해서만 이루어지며,
    이 메서드들은 실행 엔진(OrderExecutor)만 호출합니다.

    맵 조회와 모든 Agent 변경은 하나의 RLock으로 직렬화됩니다.
    """

    def __init__(self, notifier: EventNotifier):
        """
        Args:
            notifier: agentCreated 이벤트를 발행할 EventNotifier
        """
        self._notifier = notifier
        self._agents: Dict[str, Agent] = {}
        self._lock = threading.RLock()

    def create_agent(self, name: str) -> Agent:
        """
        새 Agent 생성

        Args:
            name: 표시 이름

        Returns:
            idle 상태의 새 Agent
        """
        agent = Agent(id=str(uuid.uuid4()), name=name)

        with self._lock:
            self._agents[agent.id] = agent

        logger.info("Agent created", agent_id=agent.id, agent_name=name)
        self._notifier.publish(AgentCreatedEvent(agent=agent))
        return agent

    def get_agent(self, agent_id: str) -> Optional[Agent]:
        """Agent 조회 (없으면 None)"""
        with self._lock:
            return self._agents.get(agent_id)

    def require_agent(self, agent_id: str) -> Agent:
        """
        Agent 조회

        Raises:
            AgentNotFoundError: 존재하지 않는 ID
        """
        agent = self.get_agent(agent_id)
        if agent is None:
            raise AgentNotFoundError(agent_id)
        return agent

    def list_agents(self) -> List[Agent]:
        """
        전체 Agent 목록 (생성 순서)

        Returns:
            호출 시점의 스냅샷 (이후 추가되는 Agent는 반영되지 않음)
        """
        with self._lock:
            return list(self._agents.values())

    def reserve(self, agent_id: str, order: Order) -> Agent:
        """
        Agent를 busy로 만들고 Order를 연결 (원자적 확인 후 설정)

        Args:
            agent_id: Agent ID
            order: 실행할 Order

        Returns:
            busy 상태가 된 Agent

        Raises:
            AgentNotFoundError: 존재하지 않는 ID
            AgentBusyError: 이미 Order를 실행 중인 Agent (상태는 변경되지 않음)
        """
        with self._lock:
            agent = self.require_agent(agent_id)
            if agent.status == AgentStatus.BUSY:
                raise AgentBusyError(agent.id, agent.name)

            agent.status = AgentStatus.BUSY
            agent.current_order = order
            return agent

    def mark_error(self, agent: Agent) -> None:
        """Agent를 error 상태로 표시"""
        with self._lock:
            agent.status = AgentStatus.ERROR

    def release(self, agent: Agent, order: Order) -> None:
        """
        Order 실행 종료 처리

        히스토리에 Order를 추가하고 current_order를 해제합니다.
        error 상태가 아니면 idle로 되돌립니다.
        """
        with self._lock:
            agent.order_history.append(order)
            agent.current_order = None
            if agent.status != AgentStatus.ERROR:
                agent.status = AgentStatus.IDLE

    def __len__(self) -> int:
        with self._lock:
            return len(self._agents)

    def __contains__(self, agent_id: object) -> bool:
        with self._lock:
            return agent_id in self._agents
