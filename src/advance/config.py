"""Configuration management for Advance."""

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)

# Log formats used by setup_logger
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Whose leaders the safety filter protects
LEADER_GUARDS = ("any", "own")


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'advance'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


@dataclass
class AgentSettings:
    """Agent identity."""
    name: str = "Cagnus Marlsen Bot"


@dataclass
class SearchSettings:
    """Move search settings."""
    depth: int = 1  # Opponent replies looked at beyond the candidate move
    leader_guard: str = "any"  # any, own

    def __post_init__(self):
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 0:
            raise ValueError(f"search.depth must be a non-negative integer, got {self.depth!r}")
        if self.leader_guard not in LEADER_GUARDS:
            raise ValueError(
                f"search.leader_guard must be one of {LEADER_GUARDS}, got {self.leader_guard!r}"
            )


@dataclass
class LoggingSettings:
    """Logging settings."""
    level: str = "WARNING"
    log_file: str = ""  # Empty = console only


@dataclass
class Config:
    """Main configuration class."""
    agent: AgentSettings = field(default_factory=AgentSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'agent': asdict(self.agent),
            'search': asdict(self.search),
            'logging': asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'agent' in data:
            config.agent = AgentSettings(**data['agent'])
        if 'search' in data:
            config.search = SearchSettings(**data['search'])
        if 'logging' in data:
            config.logging = LoggingSettings(**data['logging'])

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file, falling back to defaults."""
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
                if data is None:
                    return cls()
                return cls.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
            logger.warning("Failed to load config %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the global configuration instance (None reloads on next use)."""
    global _config
    _config = config


def save_config() -> None:
    """Save the global configuration."""
    global _config
    if _config is not None:
        _config.save()


def reset_config() -> Config:
    """Reset configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
    return _config
