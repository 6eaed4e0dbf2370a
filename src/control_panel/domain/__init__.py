"""
Domain Layer

순수한 비즈니스 로직과 도메인 모델
"""
