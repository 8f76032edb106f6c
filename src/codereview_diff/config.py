"""
Configuration Management

시스템 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import logging


VIEW_MODES = {'side_by_side', 'unified', 'plain'}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class DisplayConfig:
    """화면 표시 설정"""
    show_full_context: bool = False
    show_hunk_headers: bool = True
    view_mode: str = "side_by_side"


@dataclass
class PairingConfig:
    """Side-by-side 라인 매칭 설정"""
    lookahead_window: int = 4
    similarity_threshold: float = 0.5


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    pairing: PairingConfig = field(default_factory=PairingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        return cls(
            display=DisplayConfig(
                show_full_context=_env_flag("SHOW_FULL_CONTEXT", "false"),
                show_hunk_headers=_env_flag("SHOW_HUNK_HEADERS", "true"),
                view_mode=os.getenv("DIFF_VIEW_MODE", "side_by_side"),
            ),
            pairing=PairingConfig(
                lookahead_window=int(os.getenv("PAIRING_LOOKAHEAD", "4")),
                similarity_threshold=float(os.getenv("PAIRING_SIMILARITY_THRESHOLD", "0.5")),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            debug=_env_flag("DEBUG", "false"),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(
            display=DisplayConfig(**config_data.get('display', {})),
            pairing=PairingConfig(**config_data.get('pairing', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            debug=config_data.get('debug', False),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 보기 모드 검증
        if self.display.view_mode not in VIEW_MODES:
            errors.append(f"Invalid view mode: {self.display.view_mode}")

        # 매칭 설정 검증
        if self.pairing.lookahead_window < 0:
            errors.append("Lookahead window must be non-negative")

        if not 0.0 <= self.pairing.similarity_threshold <= 1.0:
            errors.append("Similarity threshold must be between 0.0 and 1.0")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'display': {
                'show_full_context': self.display.show_full_context,
                'show_hunk_headers': self.display.show_hunk_headers,
                'view_mode': self.display.view_mode,
            },
            'pairing': {
                'lookahead_window': self.pairing.lookahead_window,
                'similarity_threshold': self.pairing.similarity_threshold,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


class ConfigManager:
    """설정 관리자"""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig.from_env()
        self._config.validate()
        self._setup_logging()

    @property
    def config(self) -> AppConfig:
        """현재 설정 반환"""
        return self._config

    def update_config(self, **kwargs) -> None:
        """설정 업데이트"""
        config_dict = self._config.to_dict()

        for key, value in kwargs.items():
            if '.' in key:
                # 중첩된 설정 (예: 'pairing.lookahead_window')
                section, name = key.split('.', 1)
                if section not in config_dict or not isinstance(config_dict[section], dict):
                    raise ValueError(f"Unknown config section: {section}")
                if name not in config_dict[section]:
                    raise ValueError(f"Unknown config key: {key}")
                config_dict[section][name] = value
            else:
                if key not in config_dict:
                    raise ValueError(f"Unknown config key: {key}")
                config_dict[key] = value

        new_config = AppConfig(
            display=DisplayConfig(**config_dict['display']),
            pairing=PairingConfig(**config_dict['pairing']),
            logging=LoggingConfig(**config_dict['logging']),
            debug=config_dict['debug'],
        )

        new_config.validate()
        self._config = new_config
        self._setup_logging()

    def _setup_logging(self) -> None:
        """로깅 설정"""
        level = logging.DEBUG if self._config.debug else getattr(logging, self._config.logging.level.upper())
        logging.basicConfig(
            level=level,
            format=self._config.logging.format,
        )
        logging.getLogger('codereview_diff').setLevel(level)

        # 파일 로깅이 설정된 경우 로테이션 설정
        if self._config.logging.file_path:
            from logging.handlers import RotatingFileHandler

            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))

            package_logger = logging.getLogger('codereview_diff')
            for existing in list(package_logger.handlers):
                if isinstance(existing, RotatingFileHandler):
                    package_logger.removeHandler(existing)
                    existing.close()
            package_logger.addHandler(handler)


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """전역 설정 관리자 반환 (최초 호출 시 생성)"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_config() -> AppConfig:
    """현재 설정 반환"""
    return get_config_manager().config


def update_config(**kwargs) -> None:
    """설정 업데이트"""
    get_config_manager().update_config(**kwargs)
