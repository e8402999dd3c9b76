"""
Command files for the commando plugin.

Commands are declared in TOML files under ``<config dir>/commando/commandos/``::

    [[commands]]
    name = "Lock Screen"
    command = "loginctl lock-session"
    icon = "system-lock-screen"
"""

import os
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from loguru import logger

from launcher_plugins.config.data import get_search_dirs, read_toml

COMMANDO_PREFIX = "commando"
COMMANDS_DIR = "commandos"


@dataclass
class Command:
    name: str
    command: str
    icon: Optional[str] = None


def get_command_dirs() -> List[str]:
    return [os.path.join(d, COMMANDS_DIR) for d in get_search_dirs(COMMANDO_PREFIX)]


def get_command_files() -> List[str]:
    files = []
    for command_dir in get_command_dirs():
        if not os.path.isdir(command_dir):
            continue
        for filename in sorted(os.listdir(command_dir)):
            path = os.path.join(command_dir, filename)
            if os.path.isfile(path):
                files.append(path)
    return files


def parse_commands(data: Dict[str, Any]) -> List[Command]:
    """Read the ``commands`` array of one command file."""
    commands = []
    for entry in data.get("commands", []):
        if not isinstance(entry, dict):
            raise ValueError(f"command entry must be a table, got {entry!r}")

        name = entry.get("name")
        command = entry.get("command")
        icon = entry.get("icon")
        if not isinstance(name, str) or not isinstance(command, str):
            raise ValueError(f"command entry needs a name and a command: {entry!r}")
        if icon is not None and not isinstance(icon, str):
            raise ValueError(f"command icon must be a string: {entry!r}")

        commands.append(Command(name=name, command=command, icon=icon))
    return commands


def get_commands() -> List[Command]:
    """Load every command from every command file; bad files are skipped."""
    commands = []
    for path in get_command_files():
        try:
            commands.extend(parse_commands(read_toml(path)))
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            logger.warning(f"Skipping command file {path}: {e}")

    logger.info(f"Loaded {len(commands)} commands")
    return commands
