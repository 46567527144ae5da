"""
skin_age_analyzer 로깅 설정

핸들러는 패키지 루트 로거('skin_age_analyzer')에 한 번만 붙인다.
모듈 로거는 get_logger(__name__)로 받아 루트로 전파한다.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional

from .config_loader import Config, get_config

PACKAGE_LOGGER = 'skin_age_analyzer'

# config.yaml의 logging 섹션에 없는 키는 이 값 사용
LOGGING_DEFAULTS: Dict[str, Any] = {
    'level': 'INFO',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
    'console.enabled': True,
    'console.level': 'WARNING',
    'file.enabled': False,
    'file.level': 'DEBUG',
    'file.directory': 'logs',
    'file.filename': 'skin_age_analyzer.log',
    'file.max_bytes': 10 * 1024 * 1024,
    'file.backup_count': 5,
}


def _setting(config: Config, key: str) -> Any:
    return config.get(f'logging.{key}', LOGGING_DEFAULTS[key])


def _level(config: Config, key: str) -> int:
    return getattr(logging, str(_setting(config, key)).upper(), logging.INFO)


def setup_logging(config: Optional[Config] = None, force: bool = False) -> logging.Logger:
    """
    패키지 루트 로거에 콘솔 / 회전 파일 핸들러 설정

    Args:
        config: 사용할 설정 (None이면 전역 config)
        force: True면 기존 핸들러를 닫고 다시 설정

    Returns:
        패키지 루트 로거
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if root.handlers and not force:
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    config = config or get_config()
    root.setLevel(_level(config, 'level'))
    formatter = logging.Formatter(_setting(config, 'format'), datefmt=_setting(config, 'date_format'))

    if _setting(config, 'console.enabled'):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(config, 'console.level'))
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if _setting(config, 'file.enabled'):
        log_dir = Path(_setting(config, 'file.directory'))
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / _setting(config, 'file.filename'),
            maxBytes=int(_setting(config, 'file.max_bytes')),
            backupCount=int(_setting(config, 'file.backup_count')),
            encoding='utf-8'
        )
        file_handler.setLevel(_level(config, 'file.level'))
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root


def get_logger(name: str = None) -> logging.Logger:
    """모듈 로거 (패키지 루트 로거가 설정 전이면 먼저 설정)"""
    setup_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
