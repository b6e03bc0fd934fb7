"""
Utilities package.
"""
from .config_loader import get_config, Config
from .logging_config import get_logger, setup_logging
from .json_exporter import to_submission_payload, to_json_string, save_json

__all__ = [
    'get_config', 'Config',
    'get_logger', 'setup_logging',
    'to_submission_payload', 'to_json_string', 'save_json',
]
