"""
Result class representing a search result sent to the launcher.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class IconSource:
    """
    Icon reference understood by the launcher.
    ``kind`` is either ``Name`` (a themed icon name) or ``Mime`` (a mime type).
    """

    value: str
    kind: str = "Name"

    @classmethod
    def name(cls, value: str) -> "IconSource":
        return cls(value, "Name")

    @classmethod
    def mime(cls, value: str) -> "IconSource":
        return cls(value, "Mime")

    def to_wire(self) -> Dict[str, str]:
        return {self.kind: self.value}


@dataclass
class SearchResult:
    """
    Represents one ranked result of a search pass.

    ``id`` is a position in the plugin's current result list, not a stable
    key: it is meaningless once the next search pass clears the list.
    """

    # Display information
    id: int
    name: str
    description: str = ""
    keywords: Optional[List[str]] = None
    icon: Optional[IconSource] = None

    # Launcher hints
    exec: Optional[str] = None
    window: Optional[Tuple[int, int]] = None

    def to_wire(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "keywords": list(self.keywords) if self.keywords is not None else None,
            "icon": self.icon.to_wire() if self.icon is not None else None,
            "exec": self.exec,
            "window": list(self.window) if self.window is not None else None,
        }

    def __str__(self):
        return f"SearchResult(id={self.id}, name='{self.name}')"
