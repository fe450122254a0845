"""
Resource Service — learning resources (websites, YouTube channels) for missing skills.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from skillmapper.models.llm_models import LLMSelection
from skillmapper.models.skill_models import ResourceSuggestion
from skillmapper.prompts.suggest_resources import SYSTEM_PROMPT, USER_PROMPT_TEMPLATE
from skillmapper.services.llm_service import complete_json

logger = logging.getLogger(__name__)


async def suggest_resources(missing_skills: list[str], *, llm: LLMSelection) -> list[ResourceSuggestion]:
    """
    Ask the model for resources per skill.

    Returns [] without a model call when missing_skills is empty. Failures
    are logged and also give [], since a report without suggestions is still useful.
    """
    skills = [s.strip() for s in missing_skills if isinstance(s, str) and s.strip()]
    if not skills:
        return []

    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": USER_PROMPT_TEMPLATE.format(skills_list="\n".join(f"- {s}" for s in skills)),
        },
    ]

    logger.info(f"Suggesting resources for {len(skills)} missing skills")

    try:
        data = await complete_json(llm=llm, messages=messages, prompt_name="suggest_resources")
    except Exception as e:
        logger.error(f"Resource suggestion failed, returning none: {e!r}")
        return []

    return _build_suggestions(data)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _build_suggestions(data: dict | list) -> list[ResourceSuggestion]:
    """Build suggestions from LLM JSON output, skipping malformed entries."""
    items: Any = data.get("suggestions") if isinstance(data, dict) else data
    if not isinstance(items, list):
        logger.error("Resource suggestion returned an invalid payload, returning none")
        return []

    suggestions: list[ResourceSuggestion] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            suggestions.append(ResourceSuggestion.model_validate({
                "skill": item.get("skill"),
                "websites": _ensure_str_list(item.get("websites")),
                "youtube_channels": _ensure_str_list(
                    item.get("youtubeChannels", item.get("youtube_channels"))
                ),
            }))
        except ValidationError as e:
            logger.warning(f"Skipping malformed suggestion {item!r}: {e.error_count()} errors")
    return suggestions


def _ensure_str_list(val: Any) -> list[str]:
    """Ensure the value is a list of strings."""
    if isinstance(val, list):
        return [str(v) for v in val if v]
    if isinstance(val, str) and val:
        return [val]
    return []
