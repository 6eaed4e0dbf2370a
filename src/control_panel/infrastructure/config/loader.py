"""
설정 로더 구현

JsonConfigLoader: JSON 파일에서 설정 로드
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...domain.errors import ErrorCode, handle_error
from ..logging import get_logger
from .env_utils import coerce_bool, parse_bool_env, parse_int_env, parse_str_env

logger = get_logger(__name__, component="ConfigLoader")


@dataclass
class SystemConfig:
    """
    시스템 설정 구현

    JSON 파일에서 로드된 설정
    딕셔너리 접근도 지원
    """
    # Logging 설정
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    enable_json_logs: bool = True

    # Event 설정
    event_history_enabled: bool = True
    event_history_size: int = 1000

    # Stats 설정
    recent_orders_limit: int = 10

    _raw_data: dict = field(default_factory=dict, init=False, repr=False)

    def get(self, key: str, default=None):
        """
        딕셔너리처럼 get() 메서드 제공

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정 값 또는 기본값
        """
        # 먼저 dataclass 필드 확인
        if hasattr(self, key):
            return getattr(self, key)

        # _raw_data에서 확인
        return self._raw_data.get(key, default)

    def __getitem__(self, key: str):
        """
        딕셔너리처럼 [] 접근 제공

        Raises:
            KeyError: 키가 없을 경우
        """
        if hasattr(self, key):
            return getattr(self, key)

        if key in self._raw_data:
            return self._raw_data[key]
        raise KeyError(f"설정 키를 찾을 수 없습니다: {key}")

    def apply_env_overrides(self) -> "SystemConfig":
        """
        환경변수 값으로 설정을 덮어씁니다.

        CONTROL_PANEL_LOG_LEVEL, CONTROL_PANEL_LOG_DIR,
        CONTROL_PANEL_JSON_LOGS, CONTROL_PANEL_EVENT_HISTORY_SIZE

        Returns:
            self (체이닝용)
        """
        self.log_level = parse_str_env("CONTROL_PANEL_LOG_LEVEL", self.log_level).upper()
        self.log_dir = parse_str_env("CONTROL_PANEL_LOG_DIR", self.log_dir)
        self.enable_json_logs = parse_bool_env("CONTROL_PANEL_JSON_LOGS", self.enable_json_logs)
        self.event_history_size = parse_int_env(
            "CONTROL_PANEL_EVENT_HISTORY_SIZE", self.event_history_size
        )
        return self


class JsonConfigLoader:
    """
    JSON 설정 로더

    config/system_config.json에서 설정 로드
    """

    def __init__(self, project_root: Path):
        """
        Args:
            project_root: 프로젝트 루트 디렉토리
        """
        self.project_root = project_root
        self.system_config_path = project_root / "config" / "system_config.json"

    def load_system_config(self) -> SystemConfig:
        """
        시스템 설정 로드

        Returns:
            시스템 설정 객체 (파일이 없으면 기본값)

        Raises:
            ConfigError: JSON 파싱 실패 또는 형식 오류 시
        """
        if not self.system_config_path.exists():
            logger.warning(f"시스템 설정 파일이 없습니다: {self.system_config_path}. 기본값 사용.")
            return SystemConfig()

        try:
            with open(self.system_config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                original_error=e,
                file_path=str(self.system_config_path),
            ) from e
        except OSError as e:
            raise handle_error(
                ErrorCode.CONFIG_LOAD_FAILED,
                original_error=e,
                file_path=str(self.system_config_path),
            ) from e

        if not isinstance(data, dict):
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                file_path=str(self.system_config_path),
                error="최상위 값은 객체여야 합니다",
            )

        logging_config = data.get("logging", {})
        events = data.get("events", {})
        stats = data.get("stats", {})

        try:
            config = SystemConfig(
                log_level=str(logging_config.get("level", "INFO")).upper(),
                log_dir=logging_config.get("log_dir"),
                enable_json_logs=coerce_bool(logging_config.get("enable_json", True)),
                event_history_enabled=coerce_bool(events.get("enable_history", True)),
                event_history_size=int(events.get("max_history_size", 1000)),
                recent_orders_limit=int(stats.get("recent_orders_limit", 10)),
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                original_error=e,
                file_path=str(self.system_config_path),
            ) from e

        # 원본 데이터 저장 (딕셔너리 접근용)
        config._raw_data = data

        logger.info("System config loaded", config_path=str(self.system_config_path))
        return config


def load_system_config(project_root: Optional[Path] = None) -> SystemConfig:
    """
    시스템 설정을 SystemConfig 객체로 로드 (간편 함수)

    .env 파일과 환경변수 오버라이드를 함께 적용합니다.

    Args:
        project_root: 프로젝트 루트 (None이면 자동 탐지)

    Returns:
        SystemConfig: 설정 객체 (파일이 없으면 기본 설정 반환)

    Raises:
        ConfigError: 설정 파일 형식이 잘못된 경우
    """
    from .validator import get_project_root, load_environment

    load_environment()
    root = project_root if project_root is not None else get_project_root()

    loader = JsonConfigLoader(root)
    return loader.load_system_config().apply_env_overrides()
