from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
import logging

from skillmapper.config import settings
from skillmapper.models.llm_models import LLMSelection
from skillmapper.models.skill_models import AnalysisRequest, SkillReport
from skillmapper.services.analysis_service import analyze, analyze_data_uri
from skillmapper.services.pdf_service import looks_like_pdf
from skillmapper.utils.dependencies import get_llm_selection

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_job_description(text: str) -> str:
    if not text or not text.strip():
        raise HTTPException(status_code=400, detail="Job description cannot be empty")
    return text


@router.post("", response_model=SkillReport)
async def analyze_json(req: AnalysisRequest, llm: LLMSelection = Depends(get_llm_selection)):
    """
    Analyze a resume (base64 PDF data URI) against a job description.
    Extraction problems produce a degenerate report, never an error.
    """
    _require_job_description(req.job_description)
    return await analyze_data_uri(
        job_description=req.job_description,
        resume_data_uri=req.resume_data_uri,
        llm=llm,
    )


@router.post("/upload", response_model=SkillReport)
async def analyze_upload(
    resume: UploadFile = File(...),
    job_description: str = Form(...),
    llm: LLMSelection = Depends(get_llm_selection),
):
    """Analyze an uploaded resume PDF against a job description."""
    _require_job_description(job_description)

    if not resume.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    ext = resume.filename.rsplit(".", 1)[-1].lower() if "." in resume.filename else ""
    if ext != "pdf":
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: .{ext}. Please upload a PDF.",
        )

    file_bytes = await resume.read()
    if len(file_bytes) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(status_code=400, detail=f"File too large (max {settings.max_upload_mb} MB)")
    if not looks_like_pdf(file_bytes):
        # Not fatal: the report just shows every job skill as missing
        logger.warning(f"Upload '{resume.filename}' does not look like a PDF")

    return await analyze(job_description=job_description, resume_pdf=file_bytes, llm=llm)
