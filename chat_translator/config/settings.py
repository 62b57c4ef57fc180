"""
Centralized Configuration for Chat Translator
==============================================
All configuration values in one place, configurable via environment variables.
"""
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    try:
        return int(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def get_data_dir() -> str:
    """Get the per-user application-data directory."""
    override = os.environ.get('CHAT_TRANSLATOR_DATA_DIR')
    if override:
        return override
    if sys.platform.startswith('win') and os.environ.get('APPDATA'):
        return os.path.join(os.environ['APPDATA'], 'chat_translator')
    return os.path.join(str(Path.home()), '.chat_translator')


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("CHAT_TRANSLATOR_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _get_int_env("CHAT_TRANSLATOR_PORT", 5002))
    debug: bool = field(default_factory=lambda: _get_bool_env("CHAT_TRANSLATOR_DEBUG", False))

    # CORS settings
    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:5002",
        "http://127.0.0.1:5002"
    ])


@dataclass
class OpenAIConfig:
    """Chat-completion API configuration."""
    api_url: str = field(default_factory=lambda: os.environ.get(
        "OPENAI_API_URL", "https://api.openai.com/v1/chat/completions"))
    model: str = field(default_factory=lambda: os.environ.get("OPENAI_MODEL", "gpt-3.5-turbo"))

    # Generation parameters
    max_tokens: int = field(default_factory=lambda: _get_int_env("OPENAI_MAX_TOKENS", 1000))
    temperature: float = field(default_factory=lambda: _get_float_env("OPENAI_TEMPERATURE", 0.2))

    # Timeouts
    connect_timeout: int = field(default_factory=lambda: _get_int_env("OPENAI_CONNECT_TIMEOUT", 10))
    read_timeout: int = field(default_factory=lambda: _get_int_env("OPENAI_READ_TIMEOUT", 60))

    # How often a waiting caller checks its cancellation signal
    cancel_poll_interval: float = field(default_factory=lambda: _get_float_env("CANCEL_POLL_INTERVAL", 0.05))


@dataclass
class DebounceConfig:
    """Debounce window configuration."""
    quiet_period: float = field(default_factory=lambda: _get_float_env("DEBOUNCE_QUIET_PERIOD", 1.0))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose_debug: bool = field(default_factory=lambda: _get_bool_env("VERBOSE_DEBUG", False))
    log_buffer_size: int = field(default_factory=lambda: _get_int_env("LOG_BUFFER_SIZE", 500))
    log_file_max_bytes: int = field(default_factory=lambda: _get_int_env("LOG_FILE_MAX_BYTES", 5 * 1024 * 1024))
    log_file_backup_count: int = field(default_factory=lambda: _get_int_env("LOG_FILE_BACKUP_COUNT", 3))


@dataclass
class PathConfig:
    """Path configuration."""
    data_dir: str = field(default_factory=get_data_dir)

    @property
    def token_file(self) -> Path:
        return Path(self.data_dir) / 'openai_token.txt'

    @property
    def response_log_file(self) -> Path:
        return Path(self.data_dir) / 'responses.log'

    @property
    def log_folder(self) -> Path:
        return Path(self.data_dir) / 'logs'

    @property
    def icon_path(self) -> str:
        return os.path.join('Images', 'icon.png')


@dataclass
class Config:
    """Main application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    debounce: DebounceConfig = field(default_factory=DebounceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def __post_init__(self):
        """Create necessary directories after initialization."""
        self._create_directories()
        self._validate()

    def _create_directories(self):
        """Create necessary directories."""
        for folder in [Path(self.paths.data_dir), self.paths.log_folder]:
            os.makedirs(folder, exist_ok=True)

    def _validate(self):
        """Validate configuration values."""
        if self.debounce.quiet_period < 0:
            raise ValueError("quiet_period must not be negative")
        if self.openai.temperature < 0 or self.openai.temperature > 2:
            raise ValueError("temperature must be between 0 and 2")
        if self.openai.max_tokens < 1:
            raise ValueError("max_tokens must be at least 1")


# Global configuration instance
config = Config()
