"""
Application Layer

도메인 서비스를 묶어 외부에 노출하는 파사드
"""

from .agent_manager import AgentManager

__all__ = ["AgentManager"]
