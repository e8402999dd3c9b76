"""
Notmuch plugin for the launcher.
Searches mail threads in the notmuch index and opens them in the mail client.
"""

from typing import List, Optional, Protocol

from loguru import logger

from launcher_plugins.config.data import load_config
from launcher_plugins.errors import CollaboratorError
from launcher_plugins.plugin_base import PluginBase
from launcher_plugins.protocol import Responder
from launcher_plugins.session import run_plugin
from launcher_plugins.spawner import Spawner

MAX_RESULTS = 20


class MailSource(Protocol):
    def search_threads(self, query: str, limit: int) -> List: ...


def thread_uri(thread_id: str) -> str:
    return f"notmuch://thread/{thread_id}"


def describe_thread(thread) -> str:
    return f"{thread.authors} ({thread.matched}/{thread.total})"


class NotmuchPlugin(PluginBase):
    """
    Plugin for searching mail threads.
    Results keep the order of the mail index, which ranks them itself.
    """

    PREFIX = "notmuch"

    def __init__(
        self,
        mail: MailSource,
        spawner: Optional[Spawner] = None,
        responder: Responder = None,
        max_results: int = MAX_RESULTS,
    ):
        super().__init__(responder)
        self.mail = mail
        self.spawner = spawner or Spawner()
        self.max_results = max_results

    def search(self, query: str) -> None:
        self.clear()

        mail_query = self.strip_prefix(query)
        if mail_query is None:
            logger.warning(f"Search query did not match: {query}")
            self.finished()
            return

        logger.info(f"Received request with query {mail_query}")

        try:
            threads = self.mail.search_threads(mail_query, self.max_results)
        except CollaboratorError as e:
            logger.warning(f"Could not query notmuch database: {e}")
            threads = []

        for thread in threads[: self.max_results]:
            self.append(thread, name=thread.subject, description=describe_thread(thread))

        self.finished()

    def activate(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        logger.info(f"Opening thread {item.thread_id}")
        self.spawner.xdg_open(thread_uri(item.thread_id))
        self.close()


def main():
    def create_plugin() -> NotmuchPlugin:
        # The notmuch bindings need libnotmuch, so they are only loaded here
        from launcher_plugins.services.mail import MailIndex

        config = load_config("notmuch")
        return NotmuchPlugin(MailIndex(config.get("path"), config.get("config")))

    run_plugin("notmuch", create_plugin)


if __name__ == "__main__":
    main()
