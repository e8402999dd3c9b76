"""
Session driver shared by every plugin entry point.
"""

import sys
from typing import Callable, Iterable, Union

import setproctitle
from loguru import logger

from launcher_plugins.errors import SetupError
from launcher_plugins.logger import setup_logging
from launcher_plugins.plugin_base import PluginBase
from launcher_plugins.protocol import json_input_stream


def serve(plugin: PluginBase, stream: Iterable[Union[str, bytes]]) -> None:
    """
    Feed requests from stream to plugin, one at a time, until the stream ends.

    A request is fully handled before the next line is read. Errors raised by
    a handler are logged and the session goes on.
    """
    for request in json_input_stream(stream):
        try:
            plugin.request(request)
        except Exception:
            logger.exception(f"{plugin} failed to handle {request!r}")

    logger.warning("Stopping")


def run_plugin(name: str, factory: Callable[[], PluginBase]) -> None:
    """
    Entry point body of a plugin process.

    Exits with status 1 when the plugin cannot be set up.
    """
    setup_logging(name)
    setproctitle.setproctitle(f"pop-launcher-{name}")
    logger.info(f"Loaded pop launcher {name} integration")

    try:
        plugin = factory()
    except SetupError as e:
        logger.error(f"Could not start {name} plugin: {e}")
        sys.exit(1)

    serve(plugin, sys.stdin.buffer)
