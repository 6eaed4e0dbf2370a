"""
환경 검증 및 경로 유틸리티

load_environment: .env 파일 로드
get_project_root: 프로젝트 루트 탐지
get_data_dir: 데이터(로그 등) 디렉토리 반환
"""

import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT_ENV = "CONTROL_PANEL_ROOT"
DATA_DIR_NAME = ".control-panel"


def load_environment() -> Optional[Path]:
    """
    .env 파일을 찾아 환경변수로 로드합니다.

    우선순위: 1. 현재 작업 디렉토리 2. 프로젝트 루트
    이미 설정된 환경변수는 덮어쓰지 않습니다.

    Returns:
        로드한 .env 파일 경로, 없으면 None
    """
    cwd_dotenv = Path.cwd() / ".env"
    if cwd_dotenv.exists():
        load_dotenv(dotenv_path=cwd_dotenv)
        logger.debug(f"Loaded .env from current directory: {cwd_dotenv}")
        return cwd_dotenv

    project_dotenv = get_project_root() / ".env"
    if project_dotenv.exists():
        load_dotenv(dotenv_path=project_dotenv)
        logger.debug(f"Loaded .env from project root: {project_dotenv}")
        return project_dotenv

    logger.debug("No .env file found")
    return None


def get_project_root() -> Path:
    """
    프로젝트 루트 디렉토리 반환

    우선순위:
    1. 환경변수 CONTROL_PANEL_ROOT
    2. 현재 작업 디렉토리에 config/ 존재 시
    3. __file__ 기반 경로 (개발 모드)
    4. 현재 작업 디렉토리

    Returns:
        프로젝트 루트 디렉토리 (절대 경로)
    """
    # 1. 환경변수 확인
    env_root = os.getenv(PROJECT_ROOT_ENV)
    if env_root:
        root = Path(env_root).expanduser().resolve()
        if (root / "config").exists():
            return root
        logger.warning(f"환경변수 {PROJECT_ROOT_ENV}에 config/ 디렉토리가 없습니다: {root}")

    # 2. 현재 작업 디렉토리 확인
    cwd = Path.cwd()
    if (cwd / "config").exists():
        return cwd

    # 3. __file__ 기반 경로 (개발 모드)
    # control-panel/src/control_panel/infrastructure/config/validator.py -> control-panel
    file_based_root = Path(__file__).resolve().parents[4]
    if (file_based_root / "config").exists():
        return file_based_root

    # 4. 찾지 못한 경우 현재 작업 디렉토리 반환
    logger.warning(
        f"프로젝트 루트를 찾을 수 없습니다. 현재 작업 디렉토리를 사용합니다: {cwd}"
    )
    return cwd


def get_data_dir(subdir: Optional[str] = None) -> Path:
    """
    데이터 디렉토리 경로 반환 (~/.control-panel/)

    로그 등을 저장하는 디렉토리를 반환합니다.
    디렉토리가 없으면 자동으로 생성합니다.

    Args:
        subdir: 하위 디렉토리 이름 (예: "logs")

    Returns:
        데이터 디렉토리 경로 (절대 경로)

    Raises:
        OSError: 디렉토리 생성에 실패한 경우

    Example:
        >>> get_data_dir("logs")
        Path('/home/user/.control-panel/logs')
    """
    data_path = Path.home() / DATA_DIR_NAME
    if subdir:
        data_path = data_path / subdir

    try:
        data_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Data directory ensured: {data_path}")
    except OSError as e:
        error_msg = (
            f"Failed to create data directory: {data_path}\n"
            f"Current working directory: {Path.cwd()}\n"
            f"Error: {e}"
        )
        logger.error(error_msg)
        raise OSError(error_msg) from e

    return data_path
