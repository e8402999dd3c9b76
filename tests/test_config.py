import os

from launcher_plugins.config.data import (
    APP_NAME,
    get_config_dirs,
    get_config_files,
    get_config_home,
    get_search_dirs,
    load_config,
)


def write_config(base, name, text):
    directory = base / APP_NAME
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.toml"
    path.write_text(text)
    return path


def test_xdg_defaults(monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_CONFIG_DIRS", raising=False)

    assert get_config_home() == os.path.expanduser("~/.config")
    assert get_config_dirs() == ["/etc/xdg"]


def test_search_dirs_put_user_config_last(config_dirs):
    home, system = config_dirs

    assert get_search_dirs("commando") == [
        str(system / "commando"),
        str(home / "commando"),
    ]


def test_config_files_put_user_config_first(config_dirs):
    home, system = config_dirs
    user_file = write_config(home, "kicad", 'path = "/user"\n')
    system_file = write_config(system, "kicad", 'path = "/system"\n')

    assert get_config_files("kicad") == [str(user_file), str(system_file)]


def test_load_config_first_file_wins_per_key(config_dirs):
    home, system = config_dirs
    write_config(home, "notmuch", 'path = "~/mail"\n')
    write_config(system, "notmuch", 'path = "/var/mail"\nconfig = "/etc/notmuchrc"\n')

    assert load_config("notmuch") == {"path": "~/mail", "config": "/etc/notmuchrc"}


def test_load_config_skips_broken_files(config_dirs):
    home, system = config_dirs
    write_config(home, "media", "allowed_players = [\n")
    write_config(system, "media", 'allowed_players = ["spotify"]\n')

    assert load_config("media") == {"allowed_players": ["spotify"]}


def test_load_config_without_files(config_dirs):
    assert load_config("kicad") == {}
