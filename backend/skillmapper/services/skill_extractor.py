"""
Skill Extractor — ask the model for the skills in a job description or a resume.

Both calls share one contract: text in, list of skill strings out, and they
never raise. Empty text, provider errors, timeouts, unparsable JSON and
payloads of the wrong shape all come back as [].
"""

from __future__ import annotations

import logging
from typing import Any

from skillmapper.models.llm_models import LLMSelection
from skillmapper.prompts import job_skills, resume_skills
from skillmapper.services.llm_service import complete_json
from skillmapper.utils.text_cleanup import has_text

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def extract_job_skills(text: str, *, llm: LLMSelection) -> list[str]:
    """Skills required by a job description."""
    if not has_text(text):
        logger.info("Job description is empty, skipping skill extraction")
        return []

    messages = [
        {"role": "system", "content": job_skills.SYSTEM_PROMPT},
        {"role": "user", "content": job_skills.USER_PROMPT_TEMPLATE.format(jd_text=text.strip())},
    ]
    return await _extract(messages, key="requiredSkills", prompt_name="job_skills", llm=llm)


async def extract_resume_skills(text: str, *, llm: LLMSelection) -> list[str]:
    """Skills shown on a resume (plain text, already pulled out of the PDF)."""
    if not has_text(text):
        logger.info("Resume text is empty, skipping skill extraction")
        return []

    messages = [
        {"role": "system", "content": resume_skills.SYSTEM_PROMPT},
        {"role": "user", "content": resume_skills.USER_PROMPT_TEMPLATE.format(resume_text=text.strip())},
    ]
    return await _extract(messages, key="skills", prompt_name="resume_skills", llm=llm)


# ── Helpers ──────────────────────────────────────────────────────────────────


async def _extract(
    messages: list[dict[str, str]],
    *,
    key: str,
    prompt_name: str,
    llm: LLMSelection,
) -> list[str]:
    try:
        data = await complete_json(llm=llm, messages=messages, prompt_name=prompt_name)
    except Exception as e:
        logger.error(f"Skill extraction '{prompt_name}' failed, using no skills: {e!r}")
        return []

    skills = parse_skill_list(data, key)
    if skills is None:
        logger.error(f"Skill extraction '{prompt_name}' returned an invalid payload, using no skills")
        return []

    logger.info(f"Skill extraction '{prompt_name}': {len(skills)} skills")
    return skills


def parse_skill_list(data: Any, key: str) -> list[str] | None:
    """
    Pull a list of skill strings out of a model reply.

    Accepts {key: [...]} or a bare list. Non-string and blank entries are
    dropped. Returns None when the payload does not have that shape at all.
    """
    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        return None
    return [item.strip() for item in data if isinstance(item, str) and item.strip()]
