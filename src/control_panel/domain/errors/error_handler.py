"""에러 핸들러

Control Panel의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class ControlPanelError(Exception):
    """Control Panel의 기본 예외 클래스

    모든 Control Panel 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise ControlPanelError(
        ...     ErrorCode.AGENT_NOT_FOUND,
        ...     agent_id="3f2a..."
        ... )
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[BaseException] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error is not None and "error" not in self.context:
            self.context["error"] = str(original_error)

        # 에러 메시지 생성
        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅/프레젠테이션 계층용)

        Returns:
            에러 정보를 담은 딕셔너리

        Examples:
            >>> error.to_dict()
            {
                "error_code": "AGENT_BUSY",
                "error_number": 1002,
                "category": "Agent",
                "message": "Agent 'A'는 이미 다른 Order를 실행 중입니다...",
                "context": {"agent_id": "...", "agent_name": "A"}
            }
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        """에러를 문자열로 반환"""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """에러의 상세 표현 반환"""
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


# 카테고리별 예외 클래스
class AgentError(ControlPanelError):
    """Agent 관련 에러"""
    pass


class OrderError(ControlPanelError):
    """Order 관련 에러"""
    pass


class TaskError(ControlPanelError):
    """Task 관련 에러"""
    pass


class EventError(ControlPanelError):
    """Event 관련 에러"""
    pass


class ConfigError(ControlPanelError):
    """Config 관련 에러"""
    pass


class LoggingError(ControlPanelError):
    """Logging 관련 에러"""
    pass


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    # Agent 에러
    ErrorCode.AGENT_NOT_FOUND: AgentError,
    ErrorCode.AGENT_BUSY: AgentError,
    # Order 에러
    ErrorCode.ORDER_INVALID_STATE: OrderError,
    ErrorCode.ORDER_INVALID_TASK_SPEC: OrderError,
    # Task 에러
    ErrorCode.TASK_FAILED: TaskError,
    # Event 에러
    ErrorCode.EVENT_HANDLER_FAILED: EventError,
    # Config 에러
    ErrorCode.CONFIG_LOAD_FAILED: ConfigError,
    ErrorCode.CONFIG_INVALID: ConfigError,
    # Logging 에러
    ErrorCode.LOGGING_SETUP_FAILED: LoggingError,
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[BaseException] = None,
    log: bool = True,
    **context: Any
) -> ControlPanelError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 ControlPanelError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     data = json.load(f)
        ... except json.JSONDecodeError as e:
        ...     raise handle_error(
        ...         ErrorCode.CONFIG_INVALID,
        ...         original_error=e,
        ...         file_path=str(path)
        ...     )
    """
    # 에러 코드에 맞는 예외 클래스 선택
    error_class = ERROR_CLASS_MAPPING.get(error_code, ControlPanelError)

    # 예외 인스턴스 생성
    exception = error_class(
        error_code=error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from ...infrastructure.logging import get_logger
        logger = get_logger(__name__)

        # 에러 레벨에 따라 다르게 로깅
        if error_code.value >= 9000:
            logger.critical(
                exception.message,
                error_code=error_code.name,
                exc_info=original_error
            )
        elif error_code.value >= 4000:
            logger.error(
                exception.message,
                error_code=error_code.name,
                exc_info=original_error
            )
        else:
            logger.warning(
                exception.message,
                error_code=error_code.name
            )

    return exception
