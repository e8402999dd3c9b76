"""
Local Rust documentation, as installed by rustup.

Item pages are named ``<kind>.<name>.html``; every sub-directory of a module is
itself a module with an ``index.html``.
"""

import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from launcher_plugins.errors import CollaboratorError


class EntryKind(Enum):
    CONSTANT = "constant"
    ENUM = "enum"
    FUNCTION = "function"
    KEYWORD = "keyword"
    MACRO = "macro"
    MODULE = "module"
    PRIMITIVE = "primitive"
    STRUCT = "struct"
    TRAIT = "trait"
    TYPE = "type"

    def __str__(self):
        return self.value


# File name prefixes used by rustdoc
FILE_KINDS = {
    "constant": EntryKind.CONSTANT,
    "enum": EntryKind.ENUM,
    "fn": EntryKind.FUNCTION,
    "keyword": EntryKind.KEYWORD,
    "macro": EntryKind.MACRO,
    "primitive": EntryKind.PRIMITIVE,
    "struct": EntryKind.STRUCT,
    "trait": EntryKind.TRAIT,
    "type": EntryKind.TYPE,
}


@dataclass
class DocEntry:
    name: str
    kind: EntryKind
    file_path: Path
    module_path: Sequence[str] = ()


def get_index_path() -> Path:
    """Ask rustup where the local documentation index lives."""
    try:
        result = subprocess.run(
            ["rustup", "doc", "--path"], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise CollaboratorError(f"Could not find index path: {e}") from e

    index_path = result.stdout.strip()
    if not index_path:
        raise CollaboratorError("rustup did not print an index path")
    return Path(index_path)


def parse_entry(entry: os.DirEntry, module_path: Sequence[str]) -> Optional[DocEntry]:
    if entry.is_dir():
        return DocEntry(
            name=entry.name,
            kind=EntryKind.MODULE,
            file_path=Path(entry.path) / "index.html",
            module_path=module_path,
        )

    segments = entry.name.split(".")
    if len(segments) < 3:
        return None

    kind = FILE_KINDS.get(segments[0])
    if kind is None:
        return None

    return DocEntry(
        name=segments[1],
        kind=kind,
        file_path=Path(entry.path),
        module_path=module_path,
    )


class DocTree:
    """
    Documentation tree rooted at the directory of the rustup index.

    ``root`` may be given directly; otherwise rustup is asked on first use.
    """

    def __init__(self, root: Optional[Path] = None):
        self._root = root

    @property
    def root(self) -> Path:
        if self._root is None:
            self._root = get_index_path().parent
        return self._root

    def list_entries(self, module_path: Sequence[str]) -> List[DocEntry]:
        """List the modules and items directly inside a module path."""
        directory = self.root.joinpath(*module_path)
        if not directory.resolve().is_relative_to(self.root.resolve()):
            raise CollaboratorError(f"Module path leaves the documentation: {directory}")
        if not directory.is_dir():
            raise CollaboratorError(f"Index path does not exist: {directory}")

        entries = []
        try:
            with os.scandir(directory) as dir_entries:
                for dir_entry in dir_entries:
                    try:
                        entry = parse_entry(dir_entry, tuple(module_path))
                    except OSError as e:
                        logger.debug(f"Skipping {dir_entry.path}: {e}")
                        continue
                    if entry is not None:
                        entries.append(entry)
        except OSError as e:
            raise CollaboratorError(f"Could not read {directory}: {e}") from e

        # scandir order is arbitrary
        return sorted(entries, key=lambda e: (e.name, e.kind.value))
