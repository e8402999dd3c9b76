import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List

from loguru import logger

PROJECT_PATTERN = "kicad_pro"


@dataclass
class KicadProject:
    path: Path
    name: str


def get_project_name(path: Path) -> str:
    return path.stem


def parse_projects(output: str) -> List[KicadProject]:
    """Build projects from the newline separated paths printed by fd."""
    projects = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        path = Path(line)
        projects.append(KicadProject(path=path, name=get_project_name(path)))
    return projects


def get_projects(search_path: str) -> List[KicadProject]:
    """
    Find every KiCad project file below search_path with fd.
    A missing or failing fd yields no projects.
    """
    try:
        result = subprocess.run(
            ["fd", PROJECT_PATTERN, os.path.expanduser(search_path)],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.error(f"Could not search for projects in {search_path}: {e}")
        return []

    projects = parse_projects(result.stdout)
    logger.info(f"Found {len(projects)} projects in {search_path}")
    return projects
