import logging
from typing import Dict, Mapping

import pandas as pd
from joblib import Parallel, delayed

from resume_scorer.config import RANKING_N_JOBS
from resume_scorer.schemas.profile import CandidateProfile, JobRequirements
from resume_scorer.services.scoring_service import ScoringService

logger = logging.getLogger(__name__)

RANKING_COLUMNS = [
    "candidate_id",
    "overall_score",
    "skills_match",
    "experience_match",
    "education_match",
    "technical_skills",
    "soft_skills",
]


def _score_row(candidate_id: str, candidate: CandidateProfile, requirements: JobRequirements) -> Dict:
    result = ScoringService.score(candidate, requirements)
    return {
        "candidate_id": candidate_id,
        "overall_score": result.overall_score,
        "skills_match": result.skills_match,
        "experience_match": result.experience_match,
        "education_match": result.education_match,
        "technical_skills": result.detailed_scores["technical_skills"],
        "soft_skills": result.detailed_scores["soft_skills"],
    }


class RankingService:
    @staticmethod
    def rank_candidates(
        candidates: Mapping[str, CandidateProfile],
        requirements: JobRequirements,
        n_jobs: int = RANKING_N_JOBS,
    ) -> pd.DataFrame:
        """
        Score every candidate against one job and rank them.

        Candidates are scored in parallel with joblib; scoring shares no state
        so any backend works. The result is sorted by overall score (best
        first, ties in input order) and carries a 1-based rank column.
        """
        rows = Parallel(n_jobs=n_jobs)(
            delayed(_score_row)(candidate_id, candidate, requirements)
            for candidate_id, candidate in candidates.items()
        )

        ranking = pd.DataFrame(rows, columns=RANKING_COLUMNS)
        ranking = ranking.sort_values("overall_score", ascending=False, kind="stable").reset_index(drop=True)
        ranking["rank"] = range(1, len(ranking) + 1)
        logger.info("Ranked %d candidates", len(ranking))
        return ranking
