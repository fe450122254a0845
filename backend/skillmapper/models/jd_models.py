from typing import Optional
from enum import Enum

from pydantic import Field

from skillmapper.models.skill_models import CamelModel


class ExperienceLevel(str, Enum):
    """Seniority of the role a job description is generated for."""

    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


# ── Request Models ──────────────────────────────────────────────────────────


class RoleInput(CamelModel):
    """Role + experience, used to generate a JD or a technical skill list."""

    role: str = Field(..., min_length=1)
    experience_level: ExperienceLevel = ExperienceLevel.ENTRY
    years_of_experience: Optional[int] = None


# ── Response Models ─────────────────────────────────────────────────────────


class GeneratedJD(CamelModel):
    """A generated job description, ready to paste into the analysis form."""

    job_description: str


class TechnicalSkills(CamelModel):
    """Essential technical skills for a role."""

    technical_skills: list[str]
