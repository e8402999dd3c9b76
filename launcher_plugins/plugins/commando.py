"""
Commando plugin for the launcher.
Runs user-defined commands from command files.
"""

import shlex
from typing import List, Optional

from loguru import logger

from launcher_plugins.matcher import FuzzyMatcher
from launcher_plugins.plugin_base import PluginBase
from launcher_plugins.protocol import Responder
from launcher_plugins.result import IconSource
from launcher_plugins.services.commands import Command, get_commands
from launcher_plugins.session import run_plugin
from launcher_plugins.spawner import Spawner


class CommandoPlugin(PluginBase):
    """
    Plugin for running user-defined commands.
    Claims every query, so it has no prefix.
    """

    def __init__(
        self,
        commands: List[Command],
        spawner: Optional[Spawner] = None,
        responder: Responder = None,
        matcher: Optional[FuzzyMatcher] = None,
    ):
        super().__init__(responder)
        self.commands = commands
        self.spawner = spawner or Spawner()
        self.matcher = matcher or FuzzyMatcher()

    def search(self, query: str) -> None:
        self.clear()
        logger.info(f"Starting search with pattern: {query}")

        for command, _score in self.matcher.rank(self.commands, query, lambda c: c.name):
            self.append(
                command,
                name=command.name,
                icon=IconSource.name(command.icon) if command.icon else None,
            )

        self.finished()

    def activate(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        logger.info(f"Activating {item}")

        try:
            argv = shlex.split(item.command)
        except ValueError as e:
            logger.error(f"Could not split command {item.command}: {e}")
            argv = []

        if not argv:
            logger.error(f"Nothing to run for {item.name}")
        elif not self.spawner.spawn(argv):
            logger.error(f"Could not run command {item.command}")

        self.close()


def main():
    run_plugin("commando", lambda: CommandoPlugin(get_commands()))


if __name__ == "__main__":
    main()
