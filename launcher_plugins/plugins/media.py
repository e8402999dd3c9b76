"""
Media plugin for the launcher.

Controls running media players in two steps: "media <player>" lists the
players, "media <player identity> <action>" lists the actions of one player.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Union

from loguru import logger

from launcher_plugins.config.data import load_config
from launcher_plugins.errors import CollaboratorError
from launcher_plugins.matcher import FuzzyMatcher
from launcher_plugins.plugin_base import PluginBase
from launcher_plugins.protocol import Responder
from launcher_plugins.query import (
    ForSource,
    ForSourceAction,
    ParsedQuery,
    Unclaimed,
    plugin_prefix,
    resolve_source,
)
from launcher_plugins.result import IconSource
from launcher_plugins.session import run_plugin

VOLUME_STEP = 0.1
MIN_VOLUME = 0.0
MAX_VOLUME = 1.0

PLAYER_ICONS = {
    "Spotify": "spotify",
    "Mozilla Firefox": "firefox",
}
DEFAULT_PLAYER_ICON = "folder-music"


class MediaPlayer(Protocol):
    identity: str

    def get_volume(self) -> float: ...

    def set_volume(self, volume: float) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...


class MediaRegistry(Protocol):
    def find_all(self) -> Sequence[MediaPlayer]: ...


class PlayerControl(Enum):
    VOLUME_UP = ("Volume up", "audio-volume-high")
    VOLUME_DOWN = ("Volume down", "audio-volume-low")
    PLAY = ("Play", "player_play")
    PAUSE = ("Pause", "player_pause")

    def __init__(self, display_name: str, icon_name: str):
        self.display_name = display_name
        self.icon_name = icon_name

    @property
    def closes_session(self) -> bool:
        """Volume changes can be repeated; play and pause end the interaction."""
        return self in (PlayerControl.PLAY, PlayerControl.PAUSE)

    def __str__(self):
        return self.display_name


@dataclass
class PlayerItem:
    player: MediaPlayer


@dataclass
class ActionItem:
    player: MediaPlayer
    control: PlayerControl


Item = Union[PlayerItem, ActionItem]


def clamp_volume(volume: float) -> float:
    return max(MIN_VOLUME, min(MAX_VOLUME, volume))


def change_volume(player: MediaPlayer, delta: float) -> float:
    volume = clamp_volume(player.get_volume() + delta)
    player.set_volume(volume)
    return volume


def get_player_icon(player: MediaPlayer) -> IconSource:
    return IconSource.name(PLAYER_ICONS.get(player.identity, DEFAULT_PLAYER_ICON))


class MediaPlugin(PluginBase):
    """
    Plugin for controlling media players.
    """

    PREFIX = "media"

    def __init__(
        self,
        registry: MediaRegistry,
        responder: Responder = None,
        matcher: Optional[FuzzyMatcher] = None,
    ):
        super().__init__(responder)
        self.registry = registry
        self.matcher = matcher or FuzzyMatcher()

    def get_all_players(self) -> List[MediaPlayer]:
        try:
            return list(self.registry.find_all())
        except CollaboratorError as e:
            logger.warning(f"Could not find players: {e}")
            return []

    def parse(self, query: str) -> ParsedQuery:
        remainder = self.strip_prefix(query)
        if remainder is None:
            return Unclaimed(query)
        return resolve_source(remainder, self.get_all_players(), lambda p: p.identity)

    def add_player(self, player: MediaPlayer) -> None:
        self.append(
            PlayerItem(player),
            name=player.identity,
            description=f"Control {player.identity}",
            icon=get_player_icon(player),
        )

    def add_action(self, player: MediaPlayer, control: PlayerControl) -> None:
        self.append(
            ActionItem(player, control),
            name=control.display_name,
            icon=IconSource.name(control.icon_name),
        )

    def search(self, query: str) -> None:
        logger.info(f"Searching for players: {query}")
        self.clear()

        parsed = self.parse(query)

        if isinstance(parsed, Unclaimed):
            logger.warning(f"Search query did not match: {query}")
        elif isinstance(parsed, ForSourceAction):
            for control, _score in self.matcher.rank(
                PlayerControl, parsed.remainder, lambda c: c.display_name
            ):
                self.add_action(parsed.source, control)
        elif isinstance(parsed, ForSource):
            for player, _score in self.matcher.rank(
                parsed.sources, parsed.remainder, lambda p: p.identity
            ):
                self.add_player(player)

        self.finished()

    def activate(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        if isinstance(item, PlayerItem):
            self.complete(id)
            return

        control = item.control
        try:
            if control is PlayerControl.VOLUME_UP:
                volume = change_volume(item.player, VOLUME_STEP)
                logger.info(f"Volume of {item.player.identity} raised to {volume:.2f}")
            elif control is PlayerControl.VOLUME_DOWN:
                volume = change_volume(item.player, -VOLUME_STEP)
                logger.info(f"Volume of {item.player.identity} lowered to {volume:.2f}")
            elif control is PlayerControl.PLAY:
                item.player.play()
            elif control is PlayerControl.PAUSE:
                item.player.pause()
        except CollaboratorError as e:
            logger.error(f"Could not activate item with id {id}: {e}")

        if control.closes_session:
            self.close()

    def complete_target(self, item: Item) -> str:
        """The query that selecting item would have typed."""
        prefix = plugin_prefix(self.PREFIX)
        if isinstance(item, ActionItem):
            return f"{prefix}{item.player.identity} {item.control}"
        return f"{prefix}{item.player.identity} "

    def complete(self, id: int) -> None:
        item = self.get_item(id)
        if item is None:
            return

        query = self.complete_target(item)
        self.fill(query)
        self.search(query)


def main():
    def create_plugin() -> MediaPlugin:
        # Requires the playerctl typelib
        from launcher_plugins.services.mpris import MprisRegistry

        config = load_config("media")
        return MediaPlugin(MprisRegistry(config.get("allowed_players")))

    run_plugin("media", create_plugin)


if __name__ == "__main__":
    main()
