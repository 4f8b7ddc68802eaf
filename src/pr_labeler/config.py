"""
Configuration Management

Labeler settings loaded from the environment or a YAML file
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
from pathlib import Path
import logging

from .exceptions import ConfigError
from .labeling.classifier import DEFAULT_TOOLING_EXTENSIONS
from .labeling.mass_changes import (
    DEFAULT_MAX_PAGE_EDITS,
    DEFAULT_MAX_TRANSLATION_EDITS,
    MassChangeThresholds,
)


@dataclass
class GitHubConfig:
    """GitHub API settings"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    repository: Optional[str] = None
    timeout_seconds: int = 30
    webhook_secret: Optional[str] = None


@dataclass
class LabelingConfig:
    """Labeling policy settings"""
    max_page_edits: int = DEFAULT_MAX_PAGE_EDITS
    max_translation_edits: int = DEFAULT_MAX_TRANSLATION_EDITS
    tooling_extensions: Tuple[str, ...] = DEFAULT_TOOLING_EXTENSIONS
    dry_run: bool = False

    def __post_init__(self):
        if isinstance(self.tooling_extensions, str):
            self.tooling_extensions = _split_list(self.tooling_extensions)
        else:
            self.tooling_extensions = tuple(self.tooling_extensions)

    @property
    def thresholds(self) -> MassChangeThresholds:
        return MassChangeThresholds(
            max_page_edits=self.max_page_edits,
            max_translation_edits=self.max_translation_edits,
        )


@dataclass
class LoggingConfig:
    """Logging settings"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(',') if item.strip())


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class AppConfig:
    """Whole application configuration"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    labeling: LabelingConfig = field(default_factory=LabelingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load settings from environment variables"""
        return cls(
            github=GitHubConfig(
                token=os.getenv("GITHUB_TOKEN"),
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
                repository=os.getenv("GITHUB_REPOSITORY"),
                timeout_seconds=int(os.getenv("GITHUB_TIMEOUT", "30")),
                webhook_secret=os.getenv("GITHUB_WEBHOOK_SECRET"),
            ),
            labeling=LabelingConfig(
                max_page_edits=int(os.getenv("MAX_PAGE_EDITS", str(DEFAULT_MAX_PAGE_EDITS))),
                max_translation_edits=int(
                    os.getenv("MAX_TRANSLATION_EDITS", str(DEFAULT_MAX_TRANSLATION_EDITS))
                ),
                tooling_extensions=_split_list(
                    os.getenv("TOOLING_EXTENSIONS", ",".join(DEFAULT_TOOLING_EXTENSIONS))
                ),
                dry_run=_env_flag("DRY_RUN"),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            debug=_env_flag("DEBUG"),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """
        Load settings from a YAML file.

        The token is always taken from ``GITHUB_TOKEN`` when the file has none.
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        try:
            github = GitHubConfig(**config_data.get('github', {}))
            labeling = LabelingConfig(**config_data.get('labeling', {}))
            logging_config = LoggingConfig(**config_data.get('logging', {}))
        except TypeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

        if not github.token:
            github.token = os.getenv("GITHUB_TOKEN")

        return cls(
            github=github,
            labeling=labeling,
            logging=logging_config,
            debug=config_data.get('debug', False),
        )

    def validate(self, require_token: bool = True) -> None:
        """Validate settings"""
        errors = []

        if require_token and not self.github.token:
            errors.append("GitHub token is required")

        repository = self.github.repository
        if repository is not None and (repository.count('/') != 1 or not all(repository.split('/'))):
            errors.append(f"Repository must be in format 'owner/repo': {repository}")

        if self.github.timeout_seconds <= 0:
            errors.append("Timeout must be positive")

        if self.labeling.max_page_edits < 0 or self.labeling.max_translation_edits < 0:
            errors.append("Mass-change thresholds must be non-negative")

        if not self.labeling.tooling_extensions:
            errors.append("At least one tooling extension is required")

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """Settings as a dictionary"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'repository': self.github.repository,
                'timeout_seconds': self.github.timeout_seconds,
                # token and webhook secret left out on purpose
            },
            'labeling': {
                'max_page_edits': self.labeling.max_page_edits,
                'max_translation_edits': self.labeling.max_translation_edits,
                'tooling_extensions': list(self.labeling.tooling_extensions),
                'dry_run': self.labeling.dry_run,
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
    """Configuration manager"""

    def __init__(self, config: Optional[AppConfig] = None, require_token: bool = True):
        self._config = config or AppConfig.from_env()
        self._config.validate(require_token=require_token)
        self._setup_logging()

    @property
    def config(self) -> AppConfig:
        """Current configuration"""
        return self._config

    def _setup_logging(self) -> None:
        """Configure logging"""
        level = logging.DEBUG if self._config.debug else getattr(logging, self._config.logging.level.upper())
        logging.basicConfig(
            level=level,
            format=self._config.logging.format,
        )

        # rotate when logging to a file
        if self._config.logging.file_path:
            from logging.handlers import RotatingFileHandler

            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))

            root_logger = logging.getLogger()
            root_logger.addHandler(handler)


_config_manager: Optional[ConfigManager] = None


def get_config() -> AppConfig:
    """Current configuration, loaded from the environment on first use"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.config
