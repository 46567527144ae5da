"""
Utilities package.
"""
from .config_loader import get_config, reload_config, Config
from .logging_config import get_logger, setup_logging
from .color_log import ColorLog
from .exceptions import (
    SkinAgeAnalyzerException,
    ConfigurationError,
    LandmarkInputError,
    DetectionError,
)
from .json_exporter import (
    build_improvement_tiers,
    to_report_json,
    to_json_string,
    save_json,
    load_session_json,
)

__all__ = [
    'get_config', 'reload_config', 'Config',
    'get_logger', 'setup_logging',
    'ColorLog',
    'SkinAgeAnalyzerException', 'ConfigurationError', 'LandmarkInputError', 'DetectionError',
    'build_improvement_tiers', 'to_report_json', 'to_json_string', 'save_json', 'load_session_json',
]
