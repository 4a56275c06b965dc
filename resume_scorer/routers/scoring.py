import logging

from fastapi import APIRouter, Depends, HTTPException

from resume_scorer.schemas.score import RankingRequest, RankingResponse, ScoreRequest, ScoreResult
from resume_scorer.services.ranking_service import RankingService
from resume_scorer.services.scoring_service import ScoringService
from resume_scorer.store import JOB, RESUME, ProfileFormatError, ProfileNotFoundError, ProfileStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scoring"])


def get_profile_store() -> ProfileStore:
    return ProfileStore()


def _resolve_id(store: ProfileStore, text_type: str, profile_id) -> str:
    if profile_id and profile_id.strip():
        return profile_id.strip()
    return store.latest_id(text_type)


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, ProfileNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ProfileFormatError):
        return HTTPException(status_code=422, detail=str(e))
    logger.exception("Unexpected scoring failure")
    return HTTPException(status_code=500, detail=str(e))


@router.get("/")
def root():
    return {"message": "Resume scoring API is running!"}


@router.post("/score", response_model=ScoreResult)
@router.post("/score-resume", response_model=ScoreResult)
def score_resume(
    request: ScoreRequest,
    store: ProfileStore = Depends(get_profile_store),
):
    try:
        resume_id = _resolve_id(store, RESUME, request.resume_id)
        job_id = _resolve_id(store, JOB, request.job_id)
        logger.info("Scoring resume %s against job %s", resume_id, job_id)

        candidate = store.load_candidate(resume_id)
        requirements = store.load_requirements(job_id)
        return ScoringService.score(candidate, requirements)
    except Exception as e:
        raise _http_error(e)


@router.post("/rank", response_model=RankingResponse)
def rank_resumes(
    request: RankingRequest,
    store: ProfileStore = Depends(get_profile_store),
):
    try:
        job_id = _resolve_id(store, JOB, request.job_id)
        resume_ids = request.resume_ids or store.list_ids(RESUME)
        logger.info("Ranking %d resumes against job %s", len(resume_ids), job_id)

        requirements = store.load_requirements(job_id)
        candidates = {resume_id: store.load_candidate(resume_id) for resume_id in resume_ids}
        ranking = RankingService.rank_candidates(candidates, requirements)
        return RankingResponse(job_id=job_id, candidates=ranking.to_dict(orient="records"))
    except Exception as e:
        raise _http_error(e)


@router.post("/clear")
def clear_profiles(store: ProfileStore = Depends(get_profile_store)):
    removed = store.clear()
    return {"message": "Stored profiles cleared", "removed": removed}
