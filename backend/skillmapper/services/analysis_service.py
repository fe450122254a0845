"""
Analysis Service — one resume vs. one job description.

Flow:
  1. PDF → text, deterministically, before any model call
  2. Job skills + resume skills, extracted concurrently
  3. Optional parent/sub-skill filter on the job skills, then compare + score
  4. Learning resources, only when something is missing

Every step degrades instead of failing, so the caller always gets a report.
"""

from __future__ import annotations

import asyncio
import logging

from skillmapper.config import settings
from skillmapper.models.llm_models import LLMSelection
from skillmapper.models.skill_models import SkillReport
from skillmapper.services.pdf_service import extract_text, extract_text_from_data_uri
from skillmapper.services.resource_service import suggest_resources
from skillmapper.services.skill_extractor import extract_job_skills, extract_resume_skills
from skillmapper.services.skill_matcher import compare_skills
from skillmapper.utils.skill_hierarchy import filter_subskills

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def analyze(
    *,
    job_description: str,
    resume_pdf: bytes,
    llm: LLMSelection,
) -> SkillReport:
    """Run a full analysis of a resume PDF against a job description."""
    resume_text = extract_text(resume_pdf)
    return await analyze_text(job_description=job_description, resume_text=resume_text, llm=llm)


async def analyze_data_uri(
    *,
    job_description: str,
    resume_data_uri: str,
    llm: LLMSelection,
) -> SkillReport:
    """Same as analyze(), for a base64 data URI sent by the browser."""
    resume_text = extract_text_from_data_uri(resume_data_uri)
    return await analyze_text(job_description=job_description, resume_text=resume_text, llm=llm)


async def analyze_text(
    *,
    job_description: str,
    resume_text: str,
    llm: LLMSelection,
) -> SkillReport:
    """Analysis over already-extracted resume text."""
    logger.info(
        f"Analysis started: jd={len(job_description or '')} chars, "
        f"resume={len(resume_text or '')} chars, model={llm.provider}/{llm.model_key}"
    )

    job_skills, resume_skills = await asyncio.gather(
        extract_job_skills(job_description or "", llm=llm),
        extract_resume_skills(resume_text or "", llm=llm),
    )

    # Only the requirements are filtered: every skill on the resume still counts as a match
    compared_job = filter_subskills(job_skills) if settings.subskill_filter_enabled else job_skills
    comparison = compare_skills(compared_job, resume_skills)

    suggestions = []
    if comparison.missing_skills:
        suggestions = await suggest_resources(comparison.missing_skills, llm=llm)

    logger.info(
        f"Analysis done: score={comparison.score} matched={len(comparison.matched_skills)} "
        f"missing={len(comparison.missing_skills)} suggestions={len(suggestions)}"
    )

    return SkillReport(
        all_job_skills=comparison.all_job_skills,
        matched_skills=comparison.matched_skills,
        missing_skills=comparison.missing_skills,
        score=comparison.score,
        resource_suggestions=suggestions,
        job_skills=job_skills,
        resume_skills=resume_skills,
        resume_text_extracted=bool(resume_text),
    )
