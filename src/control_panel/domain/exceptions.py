"""
Domain 계층 예외 정의.

Agent/Order/Task 실행 엔진의 비즈니스 규칙 위반을 나타내는 예외들입니다.
모든 예외는 DomainException과 해당 카테고리 예외(AgentError, OrderError, TaskError)를
함께 상속하므로 error_code, context, to_dict()를 그대로 사용할 수 있습니다.

Examples:
    >>> from control_panel.domain.exceptions import AgentBusyError, TaskFailureError
    >>> from control_panel.domain.exceptions import ControlPanelError, ErrorCode
"""

from typing import Optional

from .errors.error_handler import (
    ControlPanelError,
    AgentError,
    OrderError,
    TaskError,
    EventError,
    ConfigError,
    LoggingError,
    handle_error,
    ERROR_CLASS_MAPPING,
)
from .errors.error_codes import ErrorCode
from .errors.error_messages import (
    get_error_message,
    format_error_message,
    ERROR_MESSAGES,
)


class DomainException(ControlPanelError):
    """Domain 계층 기본 예외"""
    pass


class AgentNotFoundError(DomainException, AgentError):
    """Agent를 찾을 수 없음"""

    def __init__(self, agent_id: str):
        """
        Args:
            agent_id: 조회한 Agent ID
        """
        self.agent_id = agent_id
        super().__init__(ErrorCode.AGENT_NOT_FOUND, agent_id=agent_id)


class AgentBusyError(DomainException, AgentError):
    """Agent가 이미 다른 Order를 실행 중"""

    def __init__(self, agent_id: str, agent_name: str):
        """
        Args:
            agent_id: Agent ID
            agent_name: Agent 이름
        """
        self.agent_id = agent_id
        self.agent_name = agent_name
        super().__init__(
            ErrorCode.AGENT_BUSY,
            agent_id=agent_id,
            agent_name=agent_name,
        )


class OrderStateError(DomainException, OrderError):
    """pending 상태가 아닌 Order를 실행하려고 함"""

    def __init__(self, order_id: str, status: str):
        self.order_id = order_id
        self.status = status
        super().__init__(
            ErrorCode.ORDER_INVALID_STATE,
            order_id=order_id,
            status=status,
        )


class InvalidTaskSpecError(DomainException, OrderError):
    """Order 생성 시 잘못된 Task 명세"""

    def __init__(self, index: int, reason: str):
        """
        Args:
            index: 문제가 된 Task 명세의 위치 (1부터 시작)
            reason: 실패 사유
        """
        self.index = index
        self.reason = reason
        super().__init__(
            ErrorCode.ORDER_INVALID_TASK_SPEC,
            index=index,
            reason=reason,
        )


class TaskFailureError(DomainException, TaskError):
    """Task 실행 실패 (Order 전체 실패를 유발)"""

    def __init__(
        self,
        order_name: str,
        task_name: str,
        task_error: str,
        original_error: Optional[BaseException] = None
    ):
        """
        Args:
            order_name: 실패한 Order 이름
            task_name: 실패한 Task 이름
            task_error: Task에 기록된 에러 메시지
            original_error: Task 액션이 던진 원본 예외 (선택)
        """
        self.order_name = order_name
        self.task_name = task_name
        self.task_error = task_error
        super().__init__(
            ErrorCode.TASK_FAILED,
            original_error=original_error,
            order_name=order_name,
            task_name=task_name,
            task_error=task_error,
        )


# Export all exception classes
__all__ = [
    # Domain 계층 예외
    "DomainException",
    "AgentNotFoundError",
    "AgentBusyError",
    "OrderStateError",
    "InvalidTaskSpecError",
    "TaskFailureError",
    # Control Panel 시스템 예외
    "ControlPanelError",
    "AgentError",
    "OrderError",
    "TaskError",
    "EventError",
    "ConfigError",
    "LoggingError",
    # 에러 핸들러 및 유틸리티
    "handle_error",
    "ERROR_CLASS_MAPPING",
    "ErrorCode",
    "get_error_message",
    "format_error_message",
    "ERROR_MESSAGES",
]
