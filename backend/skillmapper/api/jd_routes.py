from fastapi import APIRouter, Depends, HTTPException

from skillmapper.models.jd_models import GeneratedJD, RoleInput, TechnicalSkills
from skillmapper.models.llm_models import LLMSelection
from skillmapper.services.jd_service import generate_job_description, get_technical_skills
from skillmapper.utils.dependencies import get_llm_selection

router = APIRouter()


@router.post("/generate", response_model=GeneratedJD)
async def generate_jd(req: RoleInput, llm: LLMSelection = Depends(get_llm_selection)):
    """Generate a job description for a role, to paste into the analysis form."""
    try:
        text = await generate_job_description(
            role=req.role,
            experience_level=req.experience_level,
            years_of_experience=req.years_of_experience,
            llm=llm,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=502, detail=f"Job description generation failed: {e}")
    return GeneratedJD(job_description=text)


@router.post("/technical-skills", response_model=TechnicalSkills)
async def technical_skills(req: RoleInput, llm: LLMSelection = Depends(get_llm_selection)):
    """List the essential technical skills for a role."""
    try:
        skills = await get_technical_skills(
            role=req.role,
            experience_level=req.experience_level,
            years_of_experience=req.years_of_experience,
            llm=llm,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=502, detail=f"Technical skill generation failed: {e}")
    return TechnicalSkills(technical_skills=skills)
