from fastapi import APIRouter, Depends, HTTPException, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_app_state, get_taxonomy
from config import settings
from models.requests import (
    ApplicationCreateRequest,
    ApplicationUpdateRequest,
    ExtractSkillsRequest,
    MatchRequest,
    ProfileUpdateRequest,
    RankJobsRequest,
    SaveJobRequest,
    SkillGapRequest,
)
from models.responses import ExtractSkillsResponse, HealthResponse, MatchResponse, TaxonomyEntry
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import RankedJob
from models.schemas.skill_gap import LearningResource, SkillGapReport
from models.schemas.tracking import JobApplication, SavedJob
from services import job_catalog, job_ranker, learning_recommendations, matching_engine, skill_gap
from services.app_state import AppState, ApplicationNotFoundError
from services.skill_taxonomy import SkillTaxonomy

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(taxonomy: SkillTaxonomy = Depends(get_taxonomy)):
    return HealthResponse(status="ok", categories=len(taxonomy.categories()))


@router.get("/taxonomy", response_model=dict[str, list[TaxonomyEntry]])
async def taxonomy_view(taxonomy: SkillTaxonomy = Depends(get_taxonomy)):
    return {
        category: [TaxonomyEntry(skill=name, weight=weight) for name, weight in skills]
        for category, skills in taxonomy.as_dict().items()
    }


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

@router.post("/match", response_model=MatchResponse)
@limiter.limit(settings.rate_limit)
async def match(
    request: Request,
    body: MatchRequest,
    state: AppState = Depends(get_app_state),
    taxonomy: SkillTaxonomy = Depends(get_taxonomy),
):
    profile = body.profile or state.get_profile()
    if profile is None:
        return MatchResponse()

    result = matching_engine.compute_match(profile, taxonomy)
    return MatchResponse(
        **result.model_dump(),
        tier=matching_engine.match_tier(result.score),
        learning=learning_recommendations.get_recommendations_for_skills(result.recommended_skills),
    )


@router.post("/jobs/rank", response_model=list[RankedJob])
@limiter.limit(settings.rate_limit)
async def rank_jobs(
    request: Request,
    body: RankJobsRequest,
    state: AppState = Depends(get_app_state),
):
    if body.sort_by not in job_catalog.SORT_KEYS:
        raise HTTPException(
            status_code=400,
            detail=f"sort_by must be one of: {', '.join(job_catalog.SORT_KEYS)}",
        )
    profile = body.profile or state.get_profile()
    return job_ranker.rank_jobs(profile, body.jobs, query=body.query, sort_by=body.sort_by)


@router.post("/jobs/extract-skills", response_model=ExtractSkillsResponse)
async def extract_skills(body: ExtractSkillsRequest):
    return ExtractSkillsResponse(
        skills=job_catalog.extract_skills_from_description(body.description, limit=body.limit)
    )


@router.post("/skills/gap", response_model=SkillGapReport)
async def skills_gap(body: SkillGapRequest):
    return skill_gap.compute_skill_gap(body.skills)


@router.get("/skills/{skill}/resources", response_model=list[LearningResource])
async def skill_resources(skill: str):
    return learning_recommendations.get_resources_for_skill(skill)


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------

@router.get("/profile", response_model=CandidateProfile | None)
async def get_profile(state: AppState = Depends(get_app_state)):
    return state.get_profile()


@router.put("/profile", response_model=CandidateProfile)
async def put_profile(profile: CandidateProfile, state: AppState = Depends(get_app_state)):
    return state.set_profile(profile)


@router.patch("/profile", response_model=CandidateProfile)
async def patch_profile(body: ProfileUpdateRequest, state: AppState = Depends(get_app_state)):
    return state.update_profile(**body.model_dump(exclude_none=True))


@router.delete("/profile", status_code=204)
async def delete_profile(state: AppState = Depends(get_app_state)):
    state.clear_profile()
    return Response(status_code=204)


@router.get("/saved-jobs", response_model=list[SavedJob])
async def list_saved_jobs(state: AppState = Depends(get_app_state)):
    return state.saved_jobs


@router.post("/saved-jobs", response_model=SavedJob)
async def save_job(body: SaveJobRequest, state: AppState = Depends(get_app_state)):
    if not body.job.id:
        raise HTTPException(status_code=400, detail="Job id is required to save a job")
    return state.save_job(body.job, match=body.match)


@router.get("/saved-jobs/{job_id}")
async def is_job_saved(job_id: str, state: AppState = Depends(get_app_state)):
    return {"job_id": job_id, "saved": state.is_job_saved(job_id)}


@router.delete("/saved-jobs", status_code=204)
async def clear_saved_jobs(state: AppState = Depends(get_app_state)):
    state.clear_saved_jobs()
    return Response(status_code=204)


@router.delete("/saved-jobs/{job_id}", status_code=204)
async def unsave_job(job_id: str, state: AppState = Depends(get_app_state)):
    state.unsave_job(job_id)
    return Response(status_code=204)


@router.get("/applications", response_model=list[JobApplication])
async def list_applications(state: AppState = Depends(get_app_state)):
    return state.applications


@router.post("/applications", response_model=JobApplication, status_code=201)
async def add_application(body: ApplicationCreateRequest, state: AppState = Depends(get_app_state)):
    return state.add_application(**body.model_dump())


@router.delete("/applications", status_code=204)
async def clear_applications(state: AppState = Depends(get_app_state)):
    state.clear_applications()
    return Response(status_code=204)


@router.get("/applications/by-job/{job_id}", response_model=JobApplication)
async def application_for_job(job_id: str, state: AppState = Depends(get_app_state)):
    application = state.get_application_by_job_id(job_id)
    if application is None:
        raise HTTPException(status_code=404, detail=f"No application for job {job_id}")
    return application


@router.patch("/applications/{app_id}", response_model=JobApplication)
async def update_application(
    app_id: str,
    body: ApplicationUpdateRequest,
    state: AppState = Depends(get_app_state),
):
    try:
        application = None
        if body.status is not None:
            application = state.update_application_status(app_id, body.status)
        if body.notes is not None:
            application = state.update_application_notes(app_id, body.notes)
        if application is None:
            raise HTTPException(status_code=400, detail="Nothing to update")
    except ApplicationNotFoundError:
        raise HTTPException(status_code=404, detail=f"Application {app_id} not found")
    return application


@router.delete("/applications/{app_id}", status_code=204)
async def remove_application(app_id: str, state: AppState = Depends(get_app_state)):
    try:
        state.remove_application(app_id)
    except ApplicationNotFoundError:
        raise HTTPException(status_code=404, detail=f"Application {app_id} not found")
    return Response(status_code=204)
