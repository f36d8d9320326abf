"""로깅 설정 모듈.

Logging configuration for the application.
``setup_logging`` attaches a console handler to the root logger once;
repeated calls (tests, multiple ``create_app`` invocations) only adjust
the level.
"""

import logging

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """루트 로거를 구성합니다.

    Configure the root logger with a console handler.

    Args:
        level: 로그 레벨 이름, 대소문자 무시 (Level name, case insensitive)
    """
    root: logging.Logger = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
