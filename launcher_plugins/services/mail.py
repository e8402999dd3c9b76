import os
from dataclasses import dataclass
from typing import List, Optional

import notmuch2
from loguru import logger

from launcher_plugins.errors import CollaboratorError, SetupError


@dataclass
class Thread:
    thread_id: str
    subject: str
    authors: str
    matched: int
    total: int


class MailIndex:
    """
    Read-only view of a notmuch database.

    ``path`` and ``config`` default to whatever notmuch finds on its own.
    """

    def __init__(self, path: Optional[str] = None, config: Optional[str] = None):
        try:
            self.database = notmuch2.Database(
                path=os.path.expanduser(path) if path else None,
                mode=notmuch2.Database.MODE.READ_ONLY,
                config=os.path.expanduser(config) if config else notmuch2.Database.CONFIG.SEARCH,
            )
        except notmuch2.NotmuchError as e:
            raise SetupError(f"Could not open notmuch database: {e}") from e

        logger.info("Loaded notmuch database")

    def search_threads(self, query: str, limit: int) -> List[Thread]:
        """Return the first ``limit`` threads matching a notmuch query, newest first."""
        threads = []
        try:
            for thread in self.database.threads(
                query, sort=notmuch2.Database.SORT.NEWEST_FIRST
            ):
                threads.append(
                    Thread(
                        thread_id=str(thread.threadid),
                        subject=thread.subject,
                        authors=str(thread.authors or ""),
                        matched=thread.matched,
                        total=len(thread),
                    )
                )
                if len(threads) >= limit:
                    break
        except notmuch2.NotmuchError as e:
            raise CollaboratorError(f"Could not search threads for {query!r}: {e}") from e

        return threads
