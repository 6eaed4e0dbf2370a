"""
Infrastructure Layer

로깅, 설정, 이벤트 발행 등 외부 의존성 구현
"""
