import os
import tomllib
from typing import Any, Dict, List

from loguru import logger

APP_NAME = "pop-launcher-plugins"

HOME_DIR = os.path.expanduser("~")

LOG_LEVEL_ENV = "POP_LAUNCHER_PLUGINS_LOG"
DEFAULT_LOG_LEVEL = "INFO"


def get_config_home() -> str:
    """Return the user config directory ($XDG_CONFIG_HOME or ~/.config)."""
    config_home = os.environ.get("XDG_CONFIG_HOME", "").strip()
    if config_home:
        return os.path.expanduser(config_home)
    return os.path.expanduser("~/.config")


def get_config_dirs() -> List[str]:
    """Return the system config directories from $XDG_CONFIG_DIRS."""
    config_dirs = os.environ.get("XDG_CONFIG_DIRS", "").strip()
    if not config_dirs:
        return ["/etc/xdg"]
    return [os.path.expanduser(d) for d in config_dirs.split(":") if d]


def get_search_dirs(prefix: str) -> List[str]:
    """
    Return every config directory for an application prefix.

    System directories come first and the user config home last, so callers
    that let later entries override earlier ones give the user the final say.
    """
    dirs = get_config_dirs() + [get_config_home()]
    return [os.path.join(d, prefix) for d in dirs]


def get_config_files(name: str) -> List[str]:
    """
    Return the existing config files for a plugin, highest priority first.

    A plugin named ``kicad`` reads ``<config dir>/pop-launcher-plugins/kicad.toml``.
    """
    candidates = [
        os.path.join(d, f"{name}.toml") for d in reversed(get_search_dirs(APP_NAME))
    ]
    return [path for path in candidates if os.path.isfile(path)]


def read_toml(path: str) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_config(name: str) -> Dict[str, Any]:
    """
    Load and merge the config files of a plugin.

    For every key the first file that sets it wins. Files that cannot be read
    or parsed are skipped.
    """
    config: Dict[str, Any] = {}

    for path in get_config_files(name):
        try:
            data = read_toml(path)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading config {path}: {e}")
            continue

        for key, value in data.items():
            config.setdefault(key, value)

    return config
