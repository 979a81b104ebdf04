"""
cli/ui/console.py - Rich 콘솔 및 로깅 설정

도구 출력(stdout)과 로그/에러(stderr)가 섞이지 않도록 로그는 항상 stderr로 보냅니다.
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler

# botocore 노이즈 로그 제한
NOISY_LOGGERS = (
    "botocore.httpchecksum",
    "botocore.credentials",
    "botocore.loaders",
    "botocore.session",
    "botocore.hooks",
    "urllib3.connectionpool",
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다.

    Args:
        stderr: True이면 stderr로 출력하는 콘솔
    """
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


def setup_logging(debug: bool = False) -> None:
    """루트 logger 설정

    기본은 WARNING 레벨로 INFO 로그가 도구 출력에 섞이지 않도록 하고,
    debug이면 DEBUG 레벨 + RichHandler(stderr)를 사용합니다.

    Args:
        debug: --debug 옵션 여부
    """
    if debug:
        handler: logging.Handler = RichHandler(console=get_console(stderr=True), rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, datefmt=LOG_DATEFMT, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
