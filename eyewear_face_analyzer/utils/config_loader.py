"""
Configuration Loader Module
패키지 기본 설정(config.yaml) 위에 사용자 설정 파일을 덮어써서 관리하는 모듈
"""
import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config.settings import AnalysisSettings
from .exceptions import ConfigurationError

CONFIG_PATH_ENV = 'EYEWEAR_ANALYZER_CONFIG_PATH'
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            f"Check the path or unset {CONFIG_PATH_ENV}."
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML format in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root must be a mapping, got {type(data).__name__}: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """override의 값을 base에 재귀적으로 덮어쓴 새 딕셔너리"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigSection:
    """
    중첩 딕셔너리를 속성 접근 방식으로 읽는 래퍼

    Usage:
        section.console.enabled
        section.get('level', 'INFO')
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")

        try:
            value = self._data[name]
        except KeyError:
            raise AttributeError(f"{self.__class__.__name__} has no key '{name}'") from None

        return ConfigSection(value) if isinstance(value, dict) else value

    def get(self, key: str, default: Any = None) -> Any:
        """
        점(.) 구분자로 중첩된 설정값 가져오기

        Example:
            >>> config.get('analysis.min_landmark_count')
            468
        """
        value = self._data
        try:
            for part in key.split('.'):
                value = value[part]
        except (KeyError, TypeError):
            return default
        return value

    def to_dict(self) -> Dict[str, Any]:
        """설정 사본 반환"""
        return copy.deepcopy(self._data)

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._data.keys())})"


class Config(ConfigSection):
    """
    Configuration Manager

    항상 패키지 기본 설정을 먼저 읽고, 사용자 설정 파일이 있으면 그 위에 병합한다.
    사용자 파일에는 바꾸고 싶은 키만 적으면 된다.

    Usage:
        config = Config()
        config.get('logging.level')
        config.logging.console.enabled
        config.analysis_settings().min_landmark_count
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Args:
            config_path: 사용자 config.yaml 경로
                         (None이면 EYEWEAR_ANALYZER_CONFIG_PATH, 그것도 없으면 기본 설정만 사용)
        """
        if config_path is None and CONFIG_PATH_ENV in os.environ:
            config_path = os.environ[CONFIG_PATH_ENV]

        self.config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
        super().__init__({})
        self._load_config()

    def _load_config(self):
        data = _read_yaml(DEFAULT_CONFIG_PATH)
        if self.config_path != DEFAULT_CONFIG_PATH:
            data = _deep_merge(data, _read_yaml(self.config_path))
        self._data = data

    def reload(self):
        """설정 파일 다시 로드"""
        self._load_config()

    def analysis_settings(self) -> AnalysisSettings:
        """
        analysis 섹션을 AnalysisSettings로 변환

        Raises:
            ConfigurationError: 값이 허용 범위를 벗어난 경우
        """
        try:
            return AnalysisSettings.from_mapping(self.get('analysis'))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid analysis settings in {self.config_path}: {e}") from e

    def __repr__(self):
        return f"Config(path={self.config_path})"


# Singleton 인스턴스
_global_config: Optional[Config] = None


def get_config() -> Config:
    """전역 Config 인스턴스 반환 (Singleton 패턴)"""
    global _global_config

    if _global_config is None:
        _global_config = Config()

    return _global_config


def reload_config():
    """전역 설정 다시 로드"""
    if _global_config is not None:
        _global_config.reload()


def reset_config():
    """전역 설정 초기화 (다음 get_config()에서 환경 변수부터 다시 확인)"""
    global _global_config
    _global_config = None
