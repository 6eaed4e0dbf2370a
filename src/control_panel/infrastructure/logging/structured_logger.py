"""
구조화된 로깅 설정 모듈

structlog 라이브러리를 사용하여 JSON 형식 로그 출력,
Agent ID, Order ID 등 메타데이터를 자동으로 포함합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

from ...domain.errors import ErrorCode, handle_error

# JSON 직렬화 가능한 타입 정의
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_NAME = "control-panel.log"
ERROR_LOG_FILE_NAME = "control-panel-error.log"
DEBUG_LOG_FILE_NAME = "control-panel-debug.log"


def _get_default_log_dir() -> str:
    """
    기본 로그 디렉토리 경로 반환 (~/.control-panel/logs)

    Returns:
        로그 디렉토리 경로 (문자열)
    """
    from ..config.validator import get_data_dir
    return str(get_data_dir("logs"))


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = True,
) -> None:
    """
    structlog를 설정합니다.

    Args:
        log_dir: 로그 파일 디렉토리 (None이면 ~/.control-panel/logs 사용)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: JSON 형식 출력 활성화 여부 (False시 콘솔 형식)

    Raises:
        LoggingError: 로그 디렉토리를 만들 수 없는 경우

    Example:
        >>> configure_structlog(log_dir=None, log_level="INFO", enable_json=True)
        >>> logger = get_logger(__name__, agent_id="abc123")
        >>> logger.info("Order started", order_id="order-1", task_count=3)
    """
    if log_dir is None:
        log_dir = _get_default_log_dir()

    log_path = Path(log_dir)
    try:
        log_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # 로깅이 준비되지 않았으므로 로그 없이 예외만 생성
        raise handle_error(
            ErrorCode.LOGGING_SETUP_FAILED,
            original_error=e,
            log=False,
        ) from e

    # 프로세서 체인 설정
    processors = [
        structlog.contextvars.merge_contextvars,  # context vars 병합
        structlog.stdlib.add_logger_name,  # 로거 이름 추가
        add_log_level,  # 로그 레벨 추가
        structlog.processors.TimeStamper(fmt="iso"),  # ISO 8601 타임스탬프
        structlog.processors.CallsiteParameterAdder(  # 호출 위치 정보 추가
            [
                structlog.processors.CallsiteParameter.PATHNAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.stdlib.PositionalArgumentsFormatter(),  # 위치 인자 포맷팅
        structlog.processors.StackInfoRenderer(),  # 스택 정보 렌더링
        structlog.processors.format_exc_info,  # 예외 정보 포맷팅
        structlog.processors.UnicodeDecoder(),  # 유니코드 디코딩
    ]

    if enable_json:
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 표준 logging 설정
    # 메인 로그: 10MB (모든 레벨의 로그)
    # 에러 로그: 5MB (ERROR 이상만)
    # 디버그 로그: 20MB (DEBUG 레벨일 때만)
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[
            logging.handlers.RotatingFileHandler(
                str(log_path / LOG_FILE_NAME),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8"
            ),
            logging.StreamHandler(),  # 콘솔 출력
        ],
        force=True  # 기존 설정 덮어쓰기
    )

    # 에러 로그 전용 핸들러 추가
    error_handler = logging.handlers.RotatingFileHandler(
        str(log_path / ERROR_LOG_FILE_NAME),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    logging.getLogger().addHandler(error_handler)

    # DEBUG 레벨이 활성화된 경우 디버그 로그 파일 추가
    if log_level.upper() == "DEBUG":
        debug_handler = logging.handlers.RotatingFileHandler(
            str(log_path / DEBUG_LOG_FILE_NAME),
            maxBytes=20 * 1024 * 1024,  # 20MB
            backupCount=3,
            encoding="utf-8"
        )
        debug_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(debug_handler)


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거를 가져옵니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        **context: 기본 컨텍스트 (JSON 직렬화 가능한 타입만 허용)
                  예: component, agent_id, order_id 등

    Returns:
        BoundLogger 인스턴스 (메타데이터가 바인딩된 로거)

    Example:
        >>> logger = get_logger(__name__, component="OrderExecutor")
        >>> logger.info("Task completed", task_name="Open page")
        # Output (JSON): {"event": "Task completed", "component": "OrderExecutor",
        #                 "task_name": "Open page", "level": "info", ...}

    Note:
        context 파라미터는 JSON 직렬화 가능한 타입만 허용합니다.
        Agent/Order 객체 대신 ID와 이름을 전달하세요.
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
