"""
Skill Matcher — compare job skills against resume skills and score the match.

Pure functions, no I/O:
  - Skills compare on skill.strip().lower()
  - Job skills are deduplicated, keeping the first trimmed spelling and order
  - Every job skill lands in exactly one of matched / missing
  - Score = round(100 * matched / total), halves up; 100 when there are no job skills
"""

from __future__ import annotations

from typing import Iterable

from skillmapper.models.skill_models import SkillComparison


def skill_key(skill: str) -> str:
    """Comparison key for a skill name."""
    return skill.strip().lower()


def dedupe_skills(skills: Iterable[str]) -> list[str]:
    """Unique skills by key, first-seen trimmed spelling, first-seen order. Blanks dropped."""
    seen: set[str] = set()
    unique: list[str] = []
    for skill in skills:
        if not isinstance(skill, str):
            continue
        key = skill_key(skill)
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(skill.strip())
    return unique


def compute_match_score(matched_count: int, total_count: int) -> int:
    """Integer percentage 0-100, rounding halves up. 100 for an empty requirement list."""
    if total_count <= 0:
        return 100
    # Integer arithmetic: float round() would send 12.5 to 12
    return (200 * matched_count + total_count) // (2 * total_count)


def compare_skills(job_skills: Iterable[str], resume_skills: Iterable[str]) -> SkillComparison:
    """Partition the job's skills into matched and missing against the resume's skills."""
    all_job_skills = dedupe_skills(job_skills or [])
    resume_keys = {skill_key(s) for s in (resume_skills or []) if isinstance(s, str)}

    matched: list[str] = []
    missing: list[str] = []
    for skill in all_job_skills:
        if skill_key(skill) in resume_keys:
            matched.append(skill)
        else:
            missing.append(skill)

    return SkillComparison(
        all_job_skills=all_job_skills,
        matched_skills=matched,
        missing_skills=missing,
        score=compute_match_score(len(matched), len(all_job_skills)),
    )
