"""Configuration management for the pathmark CLI."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class OutputConfig:
    """How the CLI presents a marked map."""

    # Highlight marked cells with rich when writing to a terminal
    color: bool = False
    # Print path cost and step count to stderr after the map
    show_cost: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to config/default.yaml

    Returns:
        Populated Config dataclass
    """
    if config_path is None:
        # Look for config in standard locations
        candidates = [
            Path("config/default.yaml"),
            Path(__file__).parent.parent / "config" / "default.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break

    config = Config()

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            data = yaml.safe_load(f)

        if data:
            if "output" in data:
                config.output = OutputConfig(**data["output"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])
    elif config_path:
        logger.warning(f"Config file {config_path} not found, using defaults")

    # Environment variable overrides
    if os.environ.get("PATHMARK_LOG_LEVEL"):
        config.logging.level = os.environ["PATHMARK_LOG_LEVEL"]
    if os.environ.get("PATHMARK_COLOR"):
        config.output.color = _env_flag(os.environ["PATHMARK_COLOR"])

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on configuration.

    Args:
        config: Logging configuration
    """
    level = getattr(logging, config.level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        # Ensure log directory exists
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
        force=True,
    )

    logger.debug(f"Logging configured at level {config.level}")
