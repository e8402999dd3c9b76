"""
Base class for launcher plugins.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from loguru import logger

from launcher_plugins.protocol import (
    Activate,
    ActivateContext,
    Append,
    Clear,
    Close,
    Complete,
    Context,
    Exit,
    Fill,
    Finished,
    Interrupt,
    Quit,
    Request,
    Responder,
    Search,
)
from launcher_plugins.query import claim
from launcher_plugins.result import IconSource, SearchResult
from launcher_plugins.result_list import ResultList


class PluginBase(ABC):
    """
    Abstract base class for launcher plugins.

    Plugins must implement search() and activate(). The remaining verbs of
    the protocol are accepted and only logged unless a plugin overrides them.
    """

    # Keyword that claims a query ("media" claims "media ..."); None claims all
    PREFIX: Optional[str] = None

    def __init__(self, responder: Responder = None):
        self.name = self.__class__.__name__.lower()
        self.responder = responder if responder is not None else Responder()
        self.items: ResultList[Any] = ResultList()

    # Required

    @abstractmethod
    def search(self, query: str) -> None:
        """
        Answer a search request.

        Must emit Clear first and Finished last, with one Append per entry
        pushed to self.items in between.
        """
        pass

    @abstractmethod
    def activate(self, id: int) -> None:
        """Act on the result with the given id from the current pass."""
        pass

    # Optional

    def activate_context(self, id: int, context: int) -> None:
        logger.info(f"Ignoring activate context request for {id}/{context}")

    def complete(self, id: int) -> None:
        logger.info(f"Ignoring complete request for {id}")

    def context(self, id: int) -> None:
        logger.info(f"Ignoring context request for {id}")

    def exit(self) -> None:
        logger.info("Ignoring exit request")

    def interrupt(self) -> None:
        logger.info("Ignoring interrupt request")

    def quit(self, id: int) -> None:
        logger.info(f"Ignoring quit request for {id}")

    def request(self, request: Request) -> None:
        """Dispatch a decoded request to its handler."""
        if isinstance(request, Search):
            self.search(request.query)
        elif isinstance(request, Activate):
            self.activate(request.id)
        elif isinstance(request, ActivateContext):
            self.activate_context(request.id, request.context)
        elif isinstance(request, Complete):
            self.complete(request.id)
        elif isinstance(request, Context):
            self.context(request.id)
        elif isinstance(request, Exit):
            self.exit()
        elif isinstance(request, Interrupt):
            self.interrupt()
        elif isinstance(request, Quit):
            self.quit(request.id)
        else:
            logger.warning(f"Unhandled request {request!r}")

    # Helpers

    def strip_prefix(self, query: str) -> Optional[str]:
        """
        Remove the plugin prefix from a query.
        Returns None when the query belongs to another plugin.
        """
        if self.PREFIX is None:
            return query
        return claim(query, self.PREFIX)

    def clear(self) -> None:
        self.items.clear()
        self.responder.respond(Clear())

    def append(
        self,
        item: Any,
        name: str,
        description: str = "",
        icon: Optional[IconSource] = None,
        keywords: Optional[List[str]] = None,
    ) -> int:
        """Store item in the result list and send the matching result."""
        id = self.items.push(item)
        self.responder.respond(
            Append(
                SearchResult(
                    id=id,
                    name=name,
                    description=description,
                    keywords=keywords,
                    icon=icon,
                )
            )
        )
        return id

    def finished(self) -> None:
        self.responder.respond(Finished())

    def fill(self, text: str) -> None:
        self.responder.respond(Fill(text))

    def close(self) -> None:
        self.responder.respond(Close())

    def get_item(self, id: int) -> Any:
        item = self.items.get(id)
        if item is None:
            logger.warning(f"Could not find item with id {id}")
        return item

    def __str__(self):
        return f"Plugin({self.name})"

    def __repr__(self):
        return self.__str__()
