"""Configuration management for the RaspiPass configuration page.

Loads configuration from config.ini (if present) with fallback to environment variables.
Config.ini takes precedence over environment variables.
"""
import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass
class PathsConfig:
    """Template engine directories and the version marker file."""
    base_dir: str = str(PACKAGE_DIR)
    template_dir: str = "templates"
    compile_dir: str = "templates_c"
    config_dir: str = "configs"
    cache_dir: str = "cache"
    version_file: str = "/raspipass/version"

    def resolve(self, name: str) -> Path:
        """Resolve a directory setting against base_dir."""
        path = Path(getattr(self, name))
        if not path.is_absolute():
            path = Path(self.base_dir) / path
        return path


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class LoggingConfig:
    """Logging configuration."""
    log_level: str = "INFO"


@dataclass
class Config:
    """Main configuration container."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from config.ini or environment variables.

    Priority:
    1. config.ini (if exists)
    2. Environment variables
    3. Default values

    Args:
        config_path: Path to config.ini file. If None, looks next to the package.

    Returns:
        Config object with all settings.

    Raises:
        ValueError: If a numeric setting cannot be parsed.
    """
    if config_path is None:
        config_path = os.path.join(os.path.dirname(__file__), "..", "config.ini")

    config_file = Path(config_path)
    parser = ConfigParser()

    if config_file.exists():
        logger.info("Loading configuration from %s", config_file)
        parser.read(config_file)
    else:
        logger.debug("No config.ini found, using environment variables and defaults")

    def get_value(section: str, key: str, env_var: str, default=None, value_type=str):
        if parser.has_section(section) and parser.has_option(section, key):
            if value_type == int:
                return parser.getint(section, key)
            return parser.get(section, key)

        env_value = os.getenv(env_var)
        if env_value is not None:
            if value_type == int:
                return int(env_value)
            return env_value

        return default

    defaults = PathsConfig()
    paths = PathsConfig(
        base_dir=get_value("paths", "base_dir", "RASPIPASS_BASE_DIR", defaults.base_dir),
        template_dir=get_value("paths", "template_dir", "RASPIPASS_TEMPLATE_DIR", defaults.template_dir),
        compile_dir=get_value("paths", "compile_dir", "RASPIPASS_COMPILE_DIR", defaults.compile_dir),
        config_dir=get_value("paths", "config_dir", "RASPIPASS_CONFIG_DIR", defaults.config_dir),
        cache_dir=get_value("paths", "cache_dir", "RASPIPASS_CACHE_DIR", defaults.cache_dir),
        version_file=get_value("paths", "version_file", "RASPIPASS_VERSION_FILE", defaults.version_file),
    )

    server = ServerConfig(
        host=get_value("server", "host", "FLASK_HOST", "0.0.0.0"),
        port=get_value("server", "port", "FLASK_PORT", 8080, int),
    )

    logging_config = LoggingConfig(
        log_level=get_value("logging", "log_level", "LOG_LEVEL", "INFO"),
    )

    return Config(paths=paths, server=server, logging=logging_config)
