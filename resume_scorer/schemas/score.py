from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class PartialMatch(BaseModel):
    job_skill: str
    resume_skill: str
    similarity: float


class SkillMatches(BaseModel):
    exact_matches: List[str] = Field(default_factory=list)
    partial_matches: List[PartialMatch] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)


class SoftSkillsAnalysis(BaseModel):
    score: float = 0.0
    extracted_skills: List[str] = Field(default_factory=list)
    experience_based_skills: List[str] = Field(default_factory=list)


class ScoreResult(BaseModel):
    overall_score: float
    skills_match: float
    experience_match: float
    education_match: float
    detailed_scores: Dict[str, float]
    feedback: List[str] = Field(default_factory=list)
    matched_skills: SkillMatches = Field(default_factory=SkillMatches)
    soft_skills_analysis: SoftSkillsAnalysis = Field(default_factory=SoftSkillsAnalysis)


class ScoreRequest(BaseModel):
    resume_id: Optional[str] = None
    job_id: Optional[str] = None


class RankingRequest(BaseModel):
    job_id: Optional[str] = None
    resume_ids: List[str] = Field(default_factory=list)


class RankedCandidate(BaseModel):
    candidate_id: str
    rank: int
    overall_score: float
    skills_match: float
    experience_match: float
    education_match: float
    technical_skills: float
    soft_skills: float


class RankingResponse(BaseModel):
    job_id: str
    candidates: List[RankedCandidate]
