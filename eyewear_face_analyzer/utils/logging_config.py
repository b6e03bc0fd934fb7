"""
Logging configuration module for eyewear face analyzer.
config.yaml의 logging 섹션으로 콘솔/파일 핸들러를 구성한다.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config_loader import ConfigSection, get_config

PACKAGE_LOGGER_NAME = 'eyewear_face_analyzer'


def _level(name: Optional[str], default: int) -> int:
    """'DEBUG' 같은 레벨 이름을 logging 상수로 변환 (모르는 이름이면 default)"""
    if not name:
        return default
    return getattr(logging, str(name).upper(), default)


def _console_handler(section: ConfigSection, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(_level(section.get('level'), logging.INFO))
    handler.setFormatter(formatter)
    return handler


def _file_handler(section: ConfigSection, formatter: logging.Formatter) -> logging.Handler:
    log_dir = Path(section.get('directory', 'logs'))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / section.get('filename', f'{PACKAGE_LOGGER_NAME}.log'),
        maxBytes=int(section.get('max_bytes', 0)),
        backupCount=int(section.get('backup_count', 0)),
        encoding='utf-8',
    )
    handler.setLevel(_level(section.get('level'), logging.DEBUG))
    handler.setFormatter(formatter)
    return handler


def setup_logging(force: bool = False) -> logging.Logger:
    """
    패키지 로거에 설정 파일 기반 핸들러를 구성

    모듈 로거(eyewear_face_analyzer.*)는 핸들러 없이 패키지 로거로 전파된다.
    이미 핸들러가 있으면 그대로 반환한다.

    Args:
        force: True면 기존 핸들러를 닫고 현재 설정으로 다시 구성

    Returns:
        logging.Logger: 패키지 로거
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if logger.handlers and not force:
        return logger

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    log_config = get_config().logging
    logger.setLevel(_level(log_config.get('level'), logging.INFO))

    formatter = logging.Formatter(log_config.get('format'), datefmt=log_config.get('date_format'))

    if log_config.console.get('enabled', True):
        logger.addHandler(_console_handler(log_config.console, formatter))

    if log_config.file.get('enabled', False):
        logger.addHandler(_file_handler(log_config.file, formatter))

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    로거 가져오기 (모듈 상단에서 logger = get_logger(__name__))

    Args:
        name: 로거 이름 (None이면 패키지 로거)
    """
    setup_logging()
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)
