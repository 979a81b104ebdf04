# cli/ui - 콘솔/로깅 컴포넌트 (rich)
"""
콘솔 출력 및 로깅 설정 모듈
"""

from .console import NOISY_LOGGERS, get_console, setup_logging

__all__: list[str] = [
    "NOISY_LOGGERS",
    "get_console",
    "setup_logging",
]
