from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized in camelCase for the browser client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Comparison ──────────────────────────────────────────────────────────────


class SkillComparison(CamelModel):
    """Result of comparing job skills against resume skills."""

    model_config = ConfigDict(frozen=True)

    all_job_skills: list[str] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    score: int = Field(100, ge=0, le=100)  # 0-100, 100 when no job skills


# ── Resources ───────────────────────────────────────────────────────────────


class ResourceSuggestion(CamelModel):
    """Learning resources for one missing skill."""

    skill: str
    websites: list[str] = []
    youtube_channels: list[str] = []


# ── Analysis ────────────────────────────────────────────────────────────────


class AnalysisRequest(CamelModel):
    """JSON input for an analysis: JD text + resume as a base64 PDF data URI."""

    job_description: str
    resume_data_uri: str


class SkillReport(CamelModel):
    """Everything the report page needs for one analysis."""

    all_job_skills: list[str] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    score: int = 100
    resource_suggestions: list[ResourceSuggestion] = []
    job_skills: list[str] = []  # raw extraction output, before dedup
    resume_skills: list[str] = []
    resume_text_extracted: bool = False
