"""환경변수 파싱 유틸리티

환경변수를 타입 안전하게 파싱하는 헬퍼 함수들을 제공합니다.
"""

import os
from typing import Any, Optional

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def parse_bool_env(var_name: str, default: bool = False) -> bool:
    """
    환경변수를 bool로 파싱

    다양한 형식을 지원합니다:
    - True: "true", "1", "yes", "on" (대소문자 무시)
    - False: "false", "0", "no", "off" (대소문자 무시)
    - 기타: default 값 반환

    Args:
        var_name: 환경변수 이름
        default: 기본값 (환경변수가 없거나 파싱 실패 시)

    Returns:
        파싱된 bool 값

    Examples:
        >>> os.environ["CONTROL_PANEL_JSON_LOGS"] = "FALSE"
        >>> parse_bool_env("CONTROL_PANEL_JSON_LOGS", default=True)
        False
    """
    value = os.getenv(var_name, "").lower().strip()

    if value in _TRUE_VALUES:
        return True
    elif value in _FALSE_VALUES:
        return False

    return default


def coerce_bool(value: Any) -> bool:
    """
    설정 파일 값을 bool로 변환

    bool은 그대로, 문자열은 parse_bool_env와 같은 규칙으로 해석합니다.

    Raises:
        ValueError: 해석할 수 없는 값 ("maybe", 2, None 등)
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.lower().strip()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False

    raise ValueError(f"bool 값이 아닙니다: {value!r}")


def parse_int_env(var_name: str, default: int = 0) -> int:
    """
    환경변수를 int로 파싱

    Args:
        var_name: 환경변수 이름
        default: 기본값 (환경변수가 없거나 파싱 실패 시)

    Returns:
        파싱된 int 값

    Examples:
        >>> os.environ["CONTROL_PANEL_EVENT_HISTORY_SIZE"] = "500"
        >>> parse_int_env("CONTROL_PANEL_EVENT_HISTORY_SIZE")
        500

        >>> parse_int_env("NOT_SET", default=1000)
        1000
    """
    value = os.getenv(var_name, "").strip()

    if not value:
        return default

    try:
        return int(value)
    except ValueError:
        return default


def parse_str_env(var_name: str, default: Optional[str] = None) -> Optional[str]:
    """
    환경변수를 str로 파싱 (공백 제거)

    Args:
        var_name: 환경변수 이름
        default: 기본값 (환경변수가 없거나 빈 문자열일 때)

    Returns:
        파싱된 str 값
    """
    value = os.getenv(var_name, "").strip()
    return value if value else default
