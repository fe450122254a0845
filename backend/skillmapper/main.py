import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillmapper.config import settings
from skillmapper.api import (
    analysis_routes,
    jd_routes,
    llm_routes,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Match resume skills against a job description and suggest resources for the gaps",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(analysis_routes.router, prefix="/api/analysis", tags=["Analysis"])
app.include_router(jd_routes.router, prefix="/api/jd", tags=["Job Description"])
app.include_router(llm_routes.router, prefix="/api/llm", tags=["LLM"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
