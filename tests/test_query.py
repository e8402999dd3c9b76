from launcher_plugins.query import (
    ForSource,
    ForSourceAction,
    claim,
    plugin_prefix,
    resolve_source,
    select_source,
)


def identity(source):
    return source


def test_claim_strips_prefix():
    assert plugin_prefix("media") == "media "
    assert claim("media Spotify", "media") == "Spotify"
    assert claim("media ", "media") == ""


def test_claim_rejects_other_queries():
    assert claim("media", "media") is None
    assert claim("mediaSpotify", "media") is None
    assert claim("kicad media", "media") is None
    assert claim("Media Spotify", "media") is None


def test_select_source_is_exact_and_case_sensitive():
    sources = ["Spotify", "Firefox"]

    assert select_source("Spotify Vol", sources, identity) == "Spotify"
    assert select_source("spotify Vol", sources, identity) is None
    assert select_source("Spot", sources, identity) is None


def test_select_source_prefers_longest_identity():
    sources = ["Firefox", "Firefox Nightly"]

    assert select_source("Firefox Nightly Play", sources, identity) == "Firefox Nightly"
    assert select_source("Firefox Play", sources, identity) == "Firefox"


def test_select_source_ambiguous_identity():
    assert select_source("Spotify Play", ["Spotify", "Spotify"], identity) is None


def test_select_source_ignores_empty_identity():
    assert select_source("anything", [""], identity) is None


def test_resolve_source_with_selected_source():
    parsed = resolve_source("Spotify   Vol", ["Spotify", "Firefox"], identity)

    assert parsed == ForSourceAction("Spotify", "Vol")


def test_resolve_source_without_selected_source():
    parsed = resolve_source("Spot", ["Spotify", "Firefox"], identity)

    assert isinstance(parsed, ForSource)
    assert parsed.remainder == "Spot"
    assert list(parsed.sources) == ["Spotify", "Firefox"]
