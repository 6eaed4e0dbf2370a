"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Agent 관련
    ErrorCode.AGENT_NOT_FOUND: (
        "Agent '{agent_id}'를 찾을 수 없습니다."
    ),
    ErrorCode.AGENT_BUSY: (
        "Agent '{agent_name}'는 이미 다른 Order를 실행 중입니다. "
        "실행이 끝난 뒤 다시 시도하거나 다른 Agent를 선택하세요."
    ),
    # Order 관련
    ErrorCode.ORDER_INVALID_STATE: (
        "Order '{order_id}'는 실행할 수 없는 상태입니다 (현재 상태: {status})."
    ),
    ErrorCode.ORDER_INVALID_TASK_SPEC: (
        "{index}번째 Task 명세가 올바르지 않습니다: {reason}"
    ),
    # Task 관련
    ErrorCode.TASK_FAILED: (
        "Order '{order_name}'의 Task '{task_name}' 실행에 실패했습니다: {task_error}"
    ),
    # Event 관련
    ErrorCode.EVENT_HANDLER_FAILED: (
        "'{event_type}' 이벤트 핸들러 실행 중 오류가 발생했습니다: {error}"
    ),
    # Config 관련
    ErrorCode.CONFIG_LOAD_FAILED: (
        "설정 파일 '{file_path}'를 로드하는 데 실패했습니다: {error}"
    ),
    ErrorCode.CONFIG_INVALID: (
        "설정 파일 '{file_path}'의 형식이 올바르지 않습니다: {error}"
    ),
    # Logging 관련
    ErrorCode.LOGGING_SETUP_FAILED: (
        "로깅 설정에 실패했습니다: {error}"
    ),
    # 기타
    ErrorCode.UNKNOWN_ERROR: (
        "알 수 없는 오류가 발생했습니다: {error}"
    ),
    ErrorCode.INVALID_ARGUMENT: (
        "유효하지 않은 인자입니다: {argument}"
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿

    Examples:
        >>> get_error_message(ErrorCode.AGENT_NOT_FOUND)
        "Agent '{agent_id}'를 찾을 수 없습니다."
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(ErrorCode.AGENT_NOT_FOUND, agent_id="abc")
        "Agent 'abc'를 찾을 수 없습니다."
    """
    template = get_error_message(error_code)

    # 컨텍스트에 error_code도 추가 (템플릿에서 사용 가능)
    context["error_code"] = error_code

    try:
        return template.format(**context)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(context.keys())}]"
        )
