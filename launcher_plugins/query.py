"""
Query parsing for plugins that resolve a source first and an action second.

A raw query goes through three stages:

1. claim      -- the plugin prefix is stripped, or the query is ``Unclaimed``
2. source     -- the remainder either starts with a source identity
                 (``ForSourceAction``) or filters the sources (``ForSource``)
3. action     -- the text left after the identity filters that source's actions
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar, Union

S = TypeVar("S")


@dataclass(frozen=True)
class Unclaimed:
    """The query does not start with the plugin prefix."""

    query: str


@dataclass(frozen=True)
class ForSource(Generic[S]):
    """No source was selected; ``remainder`` filters ``sources``."""

    remainder: str
    sources: Sequence[S] = ()


@dataclass(frozen=True)
class ForSourceAction(Generic[S]):
    """``source`` was selected; ``remainder`` filters its actions."""

    source: S
    remainder: str


ParsedQuery = Union[Unclaimed, ForSource, ForSourceAction]


def plugin_prefix(keyword: str) -> str:
    return f"{keyword} "


def claim(query: str, keyword: str) -> Optional[str]:
    """Strip ``"<keyword> "`` from query, or return None if it is missing."""
    prefix = plugin_prefix(keyword)
    if not query.startswith(prefix):
        return None
    return query[len(prefix):]


def select_source(
    remainder: str, sources: Sequence[S], identity: Callable[[S], str]
) -> Optional[S]:
    """
    Find the source whose identity the remainder starts with.

    The match is exact and case-sensitive. When several identities match, the
    longest one wins; if that is still ambiguous no source is selected.
    """
    candidates = [
        source for source in sources if identity(source) and remainder.startswith(identity(source))
    ]
    if not candidates:
        return None

    longest = max(len(identity(source)) for source in candidates)
    candidates = [source for source in candidates if len(identity(source)) == longest]

    if len(candidates) != 1:
        return None
    return candidates[0]


def resolve_source(
    remainder: str, sources: Sequence[S], identity: Callable[[S], str]
) -> Union[ForSource, ForSourceAction]:
    source = select_source(remainder, sources, identity)
    if source is None:
        return ForSource(remainder, tuple(sources))
    return ForSourceAction(source, remainder[len(identity(source)):].lstrip())
