"""
KiCad plugin for the launcher.
Opens KiCad projects found below a configured directory.
"""

import os
from typing import Any, Dict, List, Optional

from loguru import logger

from launcher_plugins.config.data import HOME_DIR, load_config
from launcher_plugins.errors import SetupError
from launcher_plugins.matcher import FuzzyMatcher
from launcher_plugins.plugin_base import PluginBase
from launcher_plugins.protocol import Responder
from launcher_plugins.result import IconSource
from launcher_plugins.services.projects import KicadProject, get_projects
from launcher_plugins.session import run_plugin
from launcher_plugins.spawner import Spawner

KICAD_ICON = "kicad"


def get_search_path(config: Dict[str, Any], home_dir: Optional[str] = HOME_DIR) -> str:
    """
    Return the configured project directory, or the home directory when the
    configured one is unset or missing.
    """
    path = config.get("path")
    if isinstance(path, str) and os.path.exists(os.path.expanduser(path)):
        return os.path.expanduser(path)

    logger.warning("Falling back to homedir")
    if not home_dir or not os.path.isdir(home_dir):
        raise SetupError("Could not find configured or home directory")
    return home_dir


class KicadPlugin(PluginBase):
    """
    Plugin for opening KiCad projects.
    """

    PREFIX = "kicad"

    def __init__(
        self,
        projects: List[KicadProject],
        spawner: Optional[Spawner] = None,
        responder: Responder = None,
        matcher: Optional[FuzzyMatcher] = None,
    ):
        super().__init__(responder)
        self.projects = projects
        self.spawner = spawner or Spawner()
        self.matcher = matcher or FuzzyMatcher()

    def search(self, query: str) -> None:
        self.clear()

        pattern = self.strip_prefix(query)
        if pattern is None:
            logger.warning(f"Search query did not match: {query}")
            self.finished()
            return

        logger.info(f"Starting search with pattern: {pattern}")

        for project, _score in self.matcher.rank(self.projects, pattern, lambda p: p.name):
            self.append(
                project,
                name=project.name,
                description=str(project.path.parent),
                icon=IconSource.name(KICAD_ICON),
            )

        self.finished()

    def activate(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        logger.info(f"Activating {item}")
        if not self.spawner.spawn(["kicad", str(item.path)]):
            logger.error(f"Could not open project {item.name}")

        self.close()


def main():
    def create_plugin() -> KicadPlugin:
        search_path = get_search_path(load_config("kicad"))
        return KicadPlugin(get_projects(search_path))

    run_plugin("kicad", create_plugin)


if __name__ == "__main__":
    main()
