import logging
from typing import List

from resume_scorer.schemas.profile import CandidateProfile, JobRequirements
from resume_scorer.schemas.score import ScoreResult, SkillMatches, SoftSkillsAnalysis
from resume_scorer.services.education_matcher import EducationMatcher
from resume_scorer.services.experience_matcher import ExperienceMatcher
from resume_scorer.services.similarity import safe_float
from resume_scorer.services.skill_matcher import SkillMatcher
from resume_scorer.services.soft_skills_analyzer import SoftSkillsAnalyzer

logger = logging.getLogger(__name__)

MAX_SCORE = 100.0

# Education is reported but does not contribute to the overall score
SKILLS_WEIGHT = 0.4
EXPERIENCE_WEIGHT = 0.3
TECHNICAL_WEIGHT = 0.3

# Scores below this (on the 0-100 scale) produce feedback
FEEDBACK_THRESHOLD = 70.0


def to_percentage(ratio: float) -> float:
    """Scale a [0, 1] ratio to [0, 100], mapping non-finite values to 0.0."""
    return clamp_score(safe_float(ratio) * MAX_SCORE)


def clamp_score(score: float) -> float:
    return min(max(safe_float(score), 0.0), MAX_SCORE)


class ScoringService:
    @staticmethod
    def technical_score(candidate: CandidateProfile, requirements: JobRequirements) -> float:
        tech_skills = SkillMatcher.filter_technical_skills(candidate.skills)
        required_tech_skills = SkillMatcher.filter_technical_skills(requirements.skills)
        return min(SkillMatcher.skills_score(tech_skills, required_tech_skills), 1.0)

    @staticmethod
    def experience_feedback(candidate: CandidateProfile, requirements: JobRequirements) -> List[str]:
        feedback = []
        min_years = requirements.experience.min_years

        years = ExperienceMatcher.extract_years(candidate.experience_signals)
        if years < min_years:
            feedback.append(f"Need {min_years - int(years)} more years of experience")

        missing_areas = ExperienceMatcher.missing_areas(candidate.experience_signals, requirements.experience.areas)
        if missing_areas:
            feedback.append(f"Need experience in: {', '.join(missing_areas)}")

        return feedback

    @staticmethod
    def education_feedback(candidate: CandidateProfile, requirements: JobRequirements) -> List[str]:
        if not candidate.education:
            return ["No education information found in resume"]

        degree = requirements.education.degree
        if not EducationMatcher.has_degree(candidate.education, degree):
            return [f"Consider pursuing {degree} degree"]
        return []

    @staticmethod
    def generate_feedback(
        missing_skills: List[str],
        experience_score: float,
        education_score: float,
        candidate: CandidateProfile,
        requirements: JobRequirements,
    ) -> List[str]:
        """Suggestions for the weak areas; scores are on the 0-100 scale."""
        feedback = []

        if missing_skills:
            feedback.append(f"Consider developing these skills: {', '.join(missing_skills)}")

        if experience_score < FEEDBACK_THRESHOLD:
            feedback.extend(ScoringService.experience_feedback(candidate, requirements))

        if education_score < FEEDBACK_THRESHOLD:
            feedback.extend(ScoringService.education_feedback(candidate, requirements))

        return feedback

    @staticmethod
    def score(candidate: CandidateProfile, requirements: JobRequirements) -> ScoreResult:
        """
        Score a candidate profile against a job's requirements.

        Steps:
        - Match skills, experience and education separately
        - Score the technical subset of the skills and the soft skills
        - Combine skills, experience and technical scores into the overall score
        - Generate feedback for the weak areas
        """
        skills = SkillMatcher.match_skills(candidate.skills, requirements.skills)
        experience_ratio = ExperienceMatcher.match_experience(candidate, requirements)
        education_ratio = EducationMatcher.match_education(candidate.education, requirements.education)
        technical_ratio = ScoringService.technical_score(candidate, requirements)
        soft = SoftSkillsAnalyzer.analyze_soft_skills(candidate.skills, requirements.skills)

        skills_score = to_percentage(skills.score)
        experience_score = to_percentage(experience_ratio)
        education_score = to_percentage(education_ratio)
        technical_score = to_percentage(technical_ratio)
        soft_score = to_percentage(soft.score)

        overall_score = clamp_score(
            skills_score * SKILLS_WEIGHT
            + experience_score * EXPERIENCE_WEIGHT
            + technical_score * TECHNICAL_WEIGHT
        )
        logger.debug(
            "Component scores - skills: %.2f, experience: %.2f, education: %.2f, technical: %.2f, soft: %.2f",
            skills_score, experience_score, education_score, technical_score, soft_score,
        )

        feedback = ScoringService.generate_feedback(
            skills.missing_skills, experience_score, education_score, candidate, requirements
        )

        result = ScoreResult(
            overall_score=overall_score,
            skills_match=skills_score,
            experience_match=experience_score,
            education_match=education_score,
            detailed_scores={
                "technical_skills": technical_score,
                "soft_skills": soft_score,
                "qualifications": education_score,
            },
            feedback=feedback,
            matched_skills=SkillMatches(
                exact_matches=skills.exact_matches,
                partial_matches=skills.partial_matches,
                missing_skills=skills.missing_skills,
            ),
            soft_skills_analysis=SoftSkillsAnalysis(
                score=soft_score,
                extracted_skills=soft.extracted_skills,
                experience_based_skills=soft.experience_based_skills,
            ),
        )
        logger.info("Overall score: %.2f", result.overall_score)
        return result
