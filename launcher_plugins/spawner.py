import os
import subprocess
from typing import Sequence, Union

from loguru import logger


class Spawner:
    """
    Starts programs for their side effect and forgets about them.

    The child runs in its own session with its output discarded; it is never
    waited on, so it outlives the plugin process.
    """

    def spawn(self, argv: Sequence[str]) -> bool:
        if not argv:
            logger.error("Refusing to spawn an empty command")
            return False

        try:
            subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Could not run command {argv[0]}: {e}")
            return False

        logger.info(f"Spawned {' '.join(argv)}")
        return True

    def xdg_open(self, target: Union[str, os.PathLike]) -> bool:
        """Open a file or URI with the desktop's default handler."""
        return self.spawn(["xdg-open", os.fspath(target)])
