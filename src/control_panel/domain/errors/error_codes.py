"""에러 코드 정의

Control Panel의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """Control Panel 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        10xx: Agent 관련 에러
        20xx: Order 관련 에러
        30xx: Task 관련 에러
        40xx: Event 관련 에러
        50xx: Config 관련 에러
        60xx: Logging 관련 에러
        90xx: 기타 에러
    """

    # ==================== Agent 관련 (1000-1999) ====================
    AGENT_NOT_FOUND = 1001
    """존재하지 않는 Agent"""

    AGENT_BUSY = 1002
    """Agent가 이미 다른 Order를 실행 중"""

    # ==================== Order 관련 (2000-2999) ====================
    ORDER_INVALID_STATE = 2001
    """Order가 실행 가능한 상태(pending)가 아님"""

    ORDER_INVALID_TASK_SPEC = 2002
    """Order 생성 시 Task 명세 형식 오류"""

    # ==================== Task 관련 (3000-3999) ====================
    TASK_FAILED = 3001
    """Task 실행 실패"""

    # ==================== Event 관련 (4000-4999) ====================
    EVENT_HANDLER_FAILED = 4001
    """이벤트 핸들러 실행 실패"""

    # ==================== Config 관련 (5000-5999) ====================
    CONFIG_LOAD_FAILED = 5001
    """설정 파일 로드 실패"""

    CONFIG_INVALID = 5002
    """설정 파일 형식 오류"""

    # ==================== Logging 관련 (6000-6999) ====================
    LOGGING_SETUP_FAILED = 6001
    """로깅 설정 실패"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    INVALID_ARGUMENT = 9002
    """유효하지 않은 인자"""

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'AGENT_BUSY (1002)')"""
        return f"{self.name} ({self.value})"

    @property
    def code(self) -> int:
        """에러 코드 숫자 반환"""
        return self.value

    @property
    def category(self) -> str:
        """에러 카테고리 반환"""
        code = self.value
        if 1000 <= code < 2000:
            return "Agent"
        elif 2000 <= code < 3000:
            return "Order"
        elif 3000 <= code < 4000:
            return "Task"
        elif 4000 <= code < 5000:
            return "Event"
        elif 5000 <= code < 6000:
            return "Config"
        elif 6000 <= code < 7000:
            return "Logging"
        else:
            return "Other"
