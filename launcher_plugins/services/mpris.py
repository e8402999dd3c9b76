from typing import List, Optional, Sequence

import gi

gi.require_version("Playerctl", "2.0")

from gi.repository import Gio, GLib, Playerctl  # noqa: E402
from loguru import logger  # noqa: E402

from launcher_plugins.errors import MediaError, SetupError  # noqa: E402

MPRIS_BUS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_OBJECT_PATH = "/org/mpris/MediaPlayer2"
MPRIS_ROOT_INTERFACE = "org.mpris.MediaPlayer2"


class MprisPlayer:
    """A running MPRIS player, controlled through playerctl."""

    def __init__(self, player: Playerctl.Player, identity: str, bus_name: str):
        self._player = player
        self.identity = identity
        self.bus_name = bus_name

    def get_volume(self) -> float:
        try:
            return float(self._player.props.volume)
        except GLib.Error as e:
            raise MediaError(f"Could not read volume of {self.identity}: {e}") from e

    def set_volume(self, volume: float) -> None:
        try:
            self._player.set_volume(volume)
        except GLib.Error as e:
            raise MediaError(f"Could not set volume of {self.identity}: {e}") from e

    def play(self) -> None:
        try:
            self._player.play()
        except GLib.Error as e:
            raise MediaError(f"Could not play {self.identity}: {e}") from e

    def pause(self) -> None:
        try:
            self._player.pause()
        except GLib.Error as e:
            raise MediaError(f"Could not pause {self.identity}: {e}") from e

    def __repr__(self):
        return f"MprisPlayer({self.identity!r})"


class MprisRegistry:
    """
    Enumerates the media players on the session bus.

    Players are looked up fresh on every call, so the list always reflects
    what is running right now.
    """

    def __init__(self, allowed_players: Optional[Sequence[str]] = None):
        try:
            self._bus = Gio.bus_get_sync(Gio.BusType.SESSION, None)
        except GLib.Error as e:
            raise SetupError(f"Could not connect to the session bus: {e}") from e

        self.allowed_players = list(allowed_players or [])

    def _get_identity(self, bus_name: str, fallback: str) -> str:
        """Read the human readable Identity property of a player."""
        try:
            proxy = Gio.DBusProxy.new_sync(
                self._bus,
                Gio.DBusProxyFlags.NONE,
                None,
                bus_name,
                MPRIS_OBJECT_PATH,
                MPRIS_ROOT_INTERFACE,
                None,
            )
        except GLib.Error as e:
            logger.warning(f"Could not query identity of {bus_name}: {e}")
            return fallback

        identity = proxy.get_cached_property("Identity")
        if identity is None:
            return fallback
        return identity.unpack() or fallback

    def find_all(self) -> List[MprisPlayer]:
        try:
            player_names = Playerctl.list_players()
        except GLib.Error as e:
            raise MediaError(f"Could not find players: {e}") from e

        players = []
        for player_name in player_names:
            if self.allowed_players and player_name.name not in self.allowed_players:
                continue

            try:
                player = Playerctl.Player.new_from_name(player_name)
            except GLib.Error as e:
                logger.warning(f"Could not connect to player {player_name.instance}: {e}")
                continue

            bus_name = MPRIS_BUS_PREFIX + player_name.instance
            identity = self._get_identity(bus_name, player_name.name)
            players.append(MprisPlayer(player, identity, bus_name))

        return players
