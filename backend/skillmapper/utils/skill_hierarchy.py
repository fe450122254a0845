"""
Skill hierarchy — parent skill → sub-skills it already implies.

Loads data/skill_hierarchy.json (or settings.skill_hierarchy_file) and drops
sub-skills from a list when their parent is also listed, e.g. "pandas" goes
away when "python" is present. The mapping is plain configuration data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from skillmapper.config import settings

logger = logging.getLogger(__name__)

_DEFAULT_HIERARCHY_FILE = Path(__file__).resolve().parents[1] / "data" / "skill_hierarchy.json"

# Built on first call, cached forever after
_hierarchy: dict[str, frozenset[str]] | None = None


def load_hierarchy(path: str | Path | None = None) -> dict[str, frozenset[str]]:
    """Read a parent → sub-skills mapping, lower-cased. Missing/bad files give {}."""
    source = Path(path) if path else _DEFAULT_HIERARCHY_FILE
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except Exception as e:
        logger.warning(f"Could not load skill hierarchy from {source}: {e}")
        return {}

    if not isinstance(raw, dict):
        logger.warning(f"Ignoring skill hierarchy in {source}: expected a JSON object")
        return {}

    hierarchy: dict[str, frozenset[str]] = {}
    for parent, subs in raw.items():
        if not isinstance(parent, str) or parent.startswith("_"):
            continue  # skip _comment
        if not isinstance(subs, list):
            logger.warning(f"Ignoring hierarchy entry '{parent}': expected a list")
            continue
        hierarchy[parent.lower().strip()] = frozenset(
            str(s).lower().strip() for s in subs if str(s).strip()
        )
    logger.info(f"Loaded skill hierarchy: {len(hierarchy)} parents from {source}")
    return hierarchy


def get_hierarchy() -> dict[str, frozenset[str]]:
    global _hierarchy
    if _hierarchy is None:
        _hierarchy = load_hierarchy(settings.skill_hierarchy_file)
    return _hierarchy


def filter_subskills(
    skills: list[str],
    hierarchy: dict[str, frozenset[str]] | None = None,
) -> list[str]:
    """
    Remove skills that are sub-skills of a parent present in the same list.

    Membership is case-insensitive and whitespace-trimmed. Order and original
    spelling of the kept skills are preserved. A parent never removes itself.
    """
    if hierarchy is None:
        hierarchy = get_hierarchy()
    if not hierarchy:
        return list(skills)

    present = {s.strip().lower() for s in skills if isinstance(s, str)}
    implied: set[str] = set()
    for parent in present:
        implied.update(sub for sub in hierarchy.get(parent, ()) if sub != parent)

    return [
        skill for skill in skills
        if isinstance(skill, str) and skill.strip().lower() not in implied
    ]
