"""
JD Service — generate job descriptions and technical skill lists from a role.

Responsibilities:
  • Validate role + experience input
  • Ask the LLM for the JD sections → format into pasteable plain text
  • Ask the LLM for the essential technical skills of a role

Unlike analysis, the user explicitly asked for this output, so failures
raise ValueError instead of degrading to an empty result.
"""

from __future__ import annotations

import logging
from typing import Any

from skillmapper.models.jd_models import ExperienceLevel
from skillmapper.models.llm_models import LLMSelection
from skillmapper.prompts import jd_generator, technical_skills
from skillmapper.services.llm_service import complete_json

logger = logging.getLogger(__name__)

_LEVEL_LABELS = {
    ExperienceLevel.ENTRY: "Entry-level",
    ExperienceLevel.MID: "Mid-level",
    ExperienceLevel.SENIOR: "Senior",
}


# ── Public API ───────────────────────────────────────────────────────────────


async def generate_job_description(
    *,
    role: str,
    experience_level: ExperienceLevel,
    years_of_experience: int | None = None,
    llm: LLMSelection,
) -> str:
    """Generate a formatted job description for a role."""
    role = role.strip()
    experience = describe_experience(role, experience_level, years_of_experience)

    messages = [
        {"role": "system", "content": jd_generator.SYSTEM_PROMPT},
        {"role": "user", "content": jd_generator.USER_PROMPT_TEMPLATE.format(role=role, experience=experience)},
    ]

    logger.info(f"Generating JD for '{role}' ({experience}) with {llm.provider}/{llm.model_key}")

    data = await complete_json(llm=llm, messages=messages, prompt_name="jd_generator")
    if not isinstance(data, dict) or not data.get("roleSummary"):
        raise ValueError("Failed to generate job description components from AI.")

    return format_job_description(
        role=role,
        experience=experience,
        role_summary=str(data["roleSummary"]).strip(),
        responsibilities=_ensure_list(data.get("keyResponsibilities")),
        required_skills=_ensure_list(data.get("requiredSkills")),
        preferred=_ensure_list(data.get("preferredQualifications")),
    )


async def get_technical_skills(
    *,
    role: str,
    experience_level: ExperienceLevel,
    years_of_experience: int | None = None,
    llm: LLMSelection,
) -> list[str]:
    """Essential technical skills for a role at an experience level."""
    role = role.strip()
    experience = describe_experience(role, experience_level, years_of_experience)

    messages = [
        {"role": "system", "content": technical_skills.SYSTEM_PROMPT},
        {"role": "user", "content": technical_skills.USER_PROMPT_TEMPLATE.format(role=role, experience=experience)},
    ]

    data = await complete_json(llm=llm, messages=messages, prompt_name="technical_skills")
    skills = data.get("technicalSkills") if isinstance(data, dict) else data
    if not isinstance(skills, list):
        raise ValueError("Failed to generate technical skills from AI.")

    result = _ensure_list(skills)
    logger.info(f"Technical skills for '{role}': {len(result)}")
    return result


# ── Formatting ───────────────────────────────────────────────────────────────


def describe_experience(role: str, level: ExperienceLevel, years: int | None) -> str:
    """Human label for the experience level, e.g. "Senior (8 years)"."""
    if not role:
        raise ValueError("Please provide a job role.")

    label = _LEVEL_LABELS[level]
    if level == ExperienceLevel.ENTRY:
        return label
    if years is None or years <= 0:
        raise ValueError("Please enter a valid number of years for experience.")
    return f"{label} ({years} {'year' if years == 1 else 'years'})"


def format_job_description(
    *,
    role: str,
    experience: str,
    role_summary: str,
    responsibilities: list[str],
    required_skills: list[str],
    preferred: list[str],
) -> str:
    """Lay the generated sections out as plain text."""
    sections = [
        f"Job Title: {role} ({experience})",
        f"Role Summary\n{role_summary}",
        "Key Responsibilities\n" + _bullets(responsibilities),
        "Required Skills\n" + _bullets(required_skills),
        "Preferred Qualifications\n" + _bullets(preferred),
    ]
    return "\n\n".join(sections).strip()


# ── Helpers ──────────────────────────────────────────────────────────────────


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _ensure_list(val: Any) -> list[str]:
    """Ensure the value is a list of non-blank strings."""
    if isinstance(val, list):
        return [str(v).strip() for v in val if str(v).strip()]
    if isinstance(val, str) and val.strip():
        return [val.strip()]
    return []
