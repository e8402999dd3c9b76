"""
Rust documentation plugin for the launcher.

"rust std::collections::Hash" lists the items of std::collections matching
"Hash" and opens the selected page in the browser.
"""

from typing import List, Optional, Protocol, Sequence, Tuple

from loguru import logger

from launcher_plugins.errors import CollaboratorError
from launcher_plugins.matcher import FuzzyMatcher
from launcher_plugins.plugin_base import PluginBase
from launcher_plugins.protocol import Responder
from launcher_plugins.query import plugin_prefix
from launcher_plugins.services.docs import DocEntry, DocTree, EntryKind
from launcher_plugins.session import run_plugin
from launcher_plugins.spawner import Spawner

MAX_RESULTS = 10
PATH_SEPARATOR = "::"


class DocSource(Protocol):
    def list_entries(self, module_path: Sequence[str]) -> List[DocEntry]: ...


def split_path(query: str) -> Tuple[List[str], str]:
    """Split "a::b::term" into (["a", "b"], "term")."""
    segments = query.split(PATH_SEPARATOR)
    term = segments.pop()
    return [segment.strip() for segment in segments if segment.strip()], term


class RustDocsPlugin(PluginBase):
    """
    Plugin for browsing the local Rust documentation.
    """

    PREFIX = "rust"

    def __init__(
        self,
        docs: DocSource,
        spawner: Optional[Spawner] = None,
        responder: Responder = None,
        matcher: Optional[FuzzyMatcher] = None,
        max_results: int = MAX_RESULTS,
    ):
        super().__init__(responder)
        self.docs = docs
        self.spawner = spawner or Spawner()
        self.matcher = matcher or FuzzyMatcher()
        self.max_results = max_results

    def search(self, query: str) -> None:
        self.clear()

        pattern = self.strip_prefix(query)
        if pattern is None:
            logger.warning(f"Search query did not match: {query}")
            self.finished()
            return

        logger.info(f"Starting search with pattern: {pattern}")
        module_path, term = split_path(pattern)

        try:
            entries = self.docs.list_entries(module_path)
        except CollaboratorError as e:
            logger.warning(f"Aborting search: {e}")
            entries = []

        ranked = self.matcher.rank(entries, term, lambda e: e.name)
        for entry, _score in ranked[: self.max_results]:
            self.append(entry, name=entry.name, description=str(entry.kind))

        self.finished()

    def activate(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        logger.info(f"Activating {item}")
        if not self.spawner.xdg_open(item.file_path):
            logger.error(f"Could not open docs {item.name}")

        self.close()

    def complete_target(self, item: DocEntry) -> str:
        path = PATH_SEPARATOR.join([*item.module_path, item.name])
        if item.kind is EntryKind.MODULE:
            path += PATH_SEPARATOR
        return plugin_prefix(self.PREFIX) + path

    def complete(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        query = self.complete_target(item)
        self.fill(query)
        self.search(query)


def main():
    run_plugin("rustdocs", lambda: RustDocsPlugin(DocTree()))


if __name__ == "__main__":
    main()
