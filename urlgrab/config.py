"""
Settings file management for urlgrab
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import yaml

from .errors import ConfigError


CONFIG_ENV_VAR = "URLGRAB_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/urlgrab/config.yaml")


@dataclass
class MenuConfig:
    """Chooser-related configuration"""
    command: str = "dmenu"
    arguments: List[str] = field(default_factory=lambda: ["-i", "-l", "10"])
    prompt_flag: str = "-p"


@dataclass
class PromptConfig:
    """Prompt text shown by the chooser, per action"""
    default: str = "URLs>"
    copy: str = "CopyURL>"
    open: str = "OpenURL>"


@dataclass
class Config:
    """Main settings class for urlgrab"""
    menu: MenuConfig = field(default_factory=MenuConfig)
    prompts: PromptConfig = field(default_factory=PromptConfig)
    email_prefix: str = "mailto:"
    browser: Optional[str] = None
    log_file: Optional[str] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file or use defaults.

        Args:
            config_path: Path to the settings file. Defaults to $URLGRAB_CONFIG,
                then ~/.config/urlgrab/config.yaml.

        Returns:
            Config instance with loaded or default settings.
        """
        if config_path is None:
            config_path = default_config_path()

        config_path = Path(config_path).expanduser()
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"error loading {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"error loading {config_path}: expected a mapping")

        try:
            return cls._from_dict(data)
        except ConfigError as e:
            raise ConfigError(f"error loading {config_path}: {e}") from e

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary.

        Raises:
            ConfigError: if a value has the wrong type.
        """
        config = cls()

        if "menu" in data:
            menu_data = _mapping(data["menu"], "menu")
            if "command" in menu_data:
                config.menu.command = _string(menu_data["command"], "menu.command")
                if not config.menu.command:
                    raise ConfigError("menu.command must not be empty")
            if "arguments" in menu_data:
                config.menu.arguments = _string_list(menu_data["arguments"], "menu.arguments")
            if "prompt_flag" in menu_data:
                config.menu.prompt_flag = _string(menu_data["prompt_flag"], "menu.prompt_flag")

        if "prompts" in data:
            prompt_data = _mapping(data["prompts"], "prompts")
            for key in ["default", "copy", "open"]:
                if key in prompt_data:
                    setattr(config.prompts, key, _string(prompt_data[key], f"prompts.{key}"))

        if "email_prefix" in data:
            config.email_prefix = _string(data["email_prefix"], "email_prefix", optional=True) or ""

        for key in ["browser", "log_file"]:
            if key in data:
                setattr(config, key, _string(data[key], key, optional=True))

        return config


def _mapping(value, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a mapping")
    return value


def _string(value, name: str, optional: bool = False) -> Optional[str]:
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string")
    return value


def _string_list(value, name: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{name} must be a list")
    for item in value:
        if isinstance(item, (dict, list)) or item is None:
            raise ConfigError(f"{name} must hold plain values")
    return [str(item) for item in value]


def default_config_path() -> Path:
    """Return the settings path from the environment or the XDG default."""
    return Path(os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH).expanduser()
