import logging
from typing import List, NamedTuple, Sequence, Tuple

from resume_scorer.services.similarity import safe_float, semantic_similarity
from resume_scorer.services.skill_matcher import SkillMatcher

logger = logging.getLogger(__name__)


class SoftSkillsResult(NamedTuple):
    score: float
    extracted_skills: List[str]
    experience_based_skills: List[str]


class SoftSkillsAnalyzer:
    SEMANTIC_WEIGHT = 0.4
    KEYWORD_WEIGHT = 0.4
    EXPERIENCE_WEIGHT = 0.2

    # Action verbs that show a soft skill being exercised
    EXPERIENCE_INDICATORS = (
        "led", "managed", "coordinated",
        "collaborated", "mentored", "trained",
        "facilitated", "organized", "presented",
        "negotiated", "resolved", "improved",
    )

    @staticmethod
    def extract_from_experience(candidate_skills: Sequence[str]) -> Tuple[List[str], float]:
        """
        Candidate skills phrased as experience ("led a team of 5") and the
        share of the indicator dictionary they account for.
        """
        indicators = SoftSkillsAnalyzer.EXPERIENCE_INDICATORS
        extracted = [
            skill for skill in candidate_skills
            if any(indicator in skill.lower() for indicator in indicators)
        ]
        return extracted, len(extracted) / len(indicators)

    @staticmethod
    def analyze_soft_skills(candidate_skills: Sequence[str], job_skills: Sequence[str]) -> SoftSkillsResult:
        soft_skills = SkillMatcher.filter_soft_skills(candidate_skills)
        required_soft_skills = SkillMatcher.filter_soft_skills(job_skills)
        experience_skills, experience_score = SoftSkillsAnalyzer.extract_from_experience(candidate_skills)
        logger.debug(
            "Soft skills - extracted: %s, required: %s, experience based: %s",
            soft_skills, required_soft_skills, experience_skills,
        )

        if not required_soft_skills:
            return SoftSkillsResult(1.0, soft_skills, experience_skills)

        semantic = semantic_similarity(soft_skills, required_soft_skills)
        keyword = SkillMatcher.keyword_match(soft_skills, required_soft_skills)
        score = (
            semantic * SoftSkillsAnalyzer.SEMANTIC_WEIGHT
            + keyword * SoftSkillsAnalyzer.KEYWORD_WEIGHT
            + experience_score * SoftSkillsAnalyzer.EXPERIENCE_WEIGHT
        )
        return SoftSkillsResult(min(max(safe_float(score), 0.0), 1.0), soft_skills, experience_skills)
