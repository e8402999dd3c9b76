"""
Fuzzy matching shared by every plugin.

A candidate matches when the query is a subsequence of it. Matching candidates
are scored with thefuzz so that tighter and better-placed matches rank higher.
"""

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from thefuzz import fuzz

T = TypeVar("T")

EXACT_BONUS = 100
PREFIX_BONUS = 50
SUBSTRING_BONUS = 25


def is_subsequence(query: str, candidate: str) -> bool:
    """Check that every character of query occurs in candidate, in order."""
    remaining = iter(candidate)
    return all(char in remaining for char in query)


def score(candidate: str, query: str, case_sensitive: bool = False) -> Optional[int]:
    """
    Score how well query matches candidate.

    Returns None when the query is not a subsequence of the candidate. An empty
    query matches everything with a score of 0.
    """
    if not query:
        return 0

    if not case_sensitive:
        candidate = candidate.lower()
        query = query.lower()

    if not is_subsequence(query, candidate):
        return None

    # Best alignment of the query against any window of the candidate
    relevance = fuzz.partial_ratio(query, candidate)

    if candidate == query:
        relevance += EXACT_BONUS
    elif candidate.startswith(query):
        relevance += PREFIX_BONUS
    elif query in candidate:
        relevance += SUBSTRING_BONUS

    return relevance


class FuzzyMatcher:
    """
    Ranks candidates against a query.
    Ties keep the order in which candidates were enumerated.
    """

    def __init__(self, case_sensitive: bool = False):
        self.case_sensitive = case_sensitive

    def fuzzy(self, candidate: str, query: str) -> Optional[int]:
        return score(candidate, query, self.case_sensitive)

    def rank(
        self, items: Iterable[T], query: str, key: Callable[[T], str]
    ) -> List[Tuple[T, int]]:
        """Return the matching items with their scores, best first."""
        matches = []
        for item in items:
            item_score = self.fuzzy(key(item), query)
            if item_score is not None:
                matches.append((item, item_score))

        # sorted() is stable, so equal scores keep enumeration order
        return sorted(matches, key=lambda match: match[1], reverse=True)

    def filter(self, items: Iterable[T], query: str, key: Callable[[T], str]) -> List[T]:
        return [item for item, _score in self.rank(items, query, key)]
