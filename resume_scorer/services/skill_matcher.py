import logging
from typing import List, NamedTuple, Sequence

from resume_scorer.schemas.score import PartialMatch
from resume_scorer.services.similarity import (
    WORD_SIM_THRESHOLD,
    safe_float,
    semantic_similarity,
    word_similarity,
)

logger = logging.getLogger(__name__)


class SkillMatchResult(NamedTuple):
    score: float
    exact_matches: List[str]
    partial_matches: List[PartialMatch]
    missing_skills: List[str]


class SkillMatcher:
    # Weights of the composite skills score
    SEMANTIC_WEIGHT = 0.4
    KEYWORD_WEIGHT = 0.3
    ENTITY_WEIGHT = 0.3

    # Weights inside the entity score
    DIRECT_WEIGHT = 0.7
    FUZZY_WEIGHT = 0.3

    TECHNICAL_KEYWORDS = (
        "programming", "software", "development",
        "java", "python", "go", "golang",
        "javascript", "react", "node", "aws",
        "cloud", "docker", "kubernetes", "git",
        "database", "sql", "nosql", "api",
    )

    SOFT_KEYWORDS = (
        "communication", "leadership", "teamwork",
        "problem solving", "analytical", "creative",
        "interpersonal", "organization", "time management",
        "adaptability", "collaboration", "management",
        "critical thinking", "emotional intelligence",
        "conflict resolution", "negotiation", "presentation",
        "decision making", "flexibility", "multitasking",
        "self-motivated", "work ethic", "attention to detail",
        "team player", "project management", "mentoring",
        "strategic thinking", "coaching", "public speaking",
    )

    STOP_WORDS = frozenset({
        "the", "and", "or", "in", "on",
        "at", "to", "for", "with", "by",
    })

    @staticmethod
    def _filter_by_keywords(skills: Sequence[str], keywords: Sequence[str]) -> List[str]:
        filtered = []
        for skill in skills:
            skill = skill.lower()
            if any(keyword in skill for keyword in keywords):
                filtered.append(skill)
        return filtered

    @staticmethod
    def filter_technical_skills(skills: Sequence[str]) -> List[str]:
        """Lower-cased skills containing any technical keyword."""
        return SkillMatcher._filter_by_keywords(skills, SkillMatcher.TECHNICAL_KEYWORDS)

    @staticmethod
    def filter_soft_skills(skills: Sequence[str]) -> List[str]:
        """Lower-cased skills containing any soft-skill keyword."""
        return SkillMatcher._filter_by_keywords(skills, SkillMatcher.SOFT_KEYWORDS)

    @staticmethod
    def keyword_match(resume_skills: Sequence[str], job_skills: Sequence[str]) -> float:
        """
        Fraction of job skills that some resume skill resembles.

        A job skill counts when its best word similarity against the resume
        skills reaches WORD_SIM_THRESHOLD.
        """
        if not job_skills:
            return 1.0

        matches = 0
        for job_skill in job_skills:
            best = max((word_similarity(job_skill, resume_skill) for resume_skill in resume_skills), default=0.0)
            if best >= WORD_SIM_THRESHOLD:
                matches += 1
        return matches / len(job_skills)

    @staticmethod
    def extract_terms(skills: Sequence[str]) -> List[str]:
        terms = []
        for skill in skills:
            for word in skill.lower().split():
                if len(word) > 2 and word not in SkillMatcher.STOP_WORDS:
                    terms.append(word)
        return terms

    @staticmethod
    def direct_term_matches(resume_terms: Sequence[str], job_terms: Sequence[str]) -> float:
        if not job_terms:
            return 1.0
        available = set(resume_terms)
        matches = sum(1 for term in job_terms if term in available)
        return matches / len(job_terms)

    @staticmethod
    def fuzzy_term_matches(resume_terms: Sequence[str], job_terms: Sequence[str]) -> float:
        if not job_terms:
            return 1.0

        total = 0.0
        for job_term in job_terms:
            best = max((word_similarity(resume_term, job_term) for resume_term in resume_terms), default=0.0)
            if best > WORD_SIM_THRESHOLD:
                total += best
        return total / len(job_terms)

    @staticmethod
    def entity_match(resume_skills: Sequence[str], job_skills: Sequence[str]) -> float:
        """Blend of exact and fuzzy overlap of the meaningful skill terms."""
        if not job_skills:
            return 1.0

        resume_terms = SkillMatcher.extract_terms(resume_skills)
        job_terms = SkillMatcher.extract_terms(job_skills)

        direct = SkillMatcher.direct_term_matches(resume_terms, job_terms)
        fuzzy = SkillMatcher.fuzzy_term_matches(resume_terms, job_terms)
        return safe_float(direct * SkillMatcher.DIRECT_WEIGHT + fuzzy * SkillMatcher.FUZZY_WEIGHT)

    @staticmethod
    def analyze_skill_matches(resume_skills: Sequence[str], job_skills: Sequence[str]):
        """
        Classify every job skill as an exact, partial or missing match.

        Comparison is case-insensitive. A job skill with no identical resume
        skill becomes a partial match against the most similar resume skill
        when that similarity is above WORD_SIM_THRESHOLD.
        """
        exact_matches: List[str] = []
        partial_matches: List[PartialMatch] = []
        missing_skills: List[str] = []

        resume_by_lower = {}
        for skill in resume_skills:
            resume_by_lower.setdefault(skill.lower(), skill)

        for job_skill in job_skills:
            job_lower = job_skill.lower()
            if job_lower in resume_by_lower:
                exact_matches.append(job_skill)
                continue

            best_match = None
            best_similarity = 0.0
            for resume_lower, original in resume_by_lower.items():
                similarity = word_similarity(job_lower, resume_lower)
                if similarity > WORD_SIM_THRESHOLD and similarity > best_similarity:
                    best_match = original
                    best_similarity = similarity

            if best_match is not None:
                partial_matches.append(PartialMatch(
                    job_skill=job_skill,
                    resume_skill=best_match,
                    similarity=best_similarity,
                ))
            else:
                missing_skills.append(job_skill)

        return exact_matches, partial_matches, missing_skills

    @staticmethod
    def skills_score(resume_skills: Sequence[str], job_skills: Sequence[str]) -> float:
        if not job_skills:
            return 1.0

        semantic = semantic_similarity(resume_skills, job_skills)
        keyword = SkillMatcher.keyword_match(resume_skills, job_skills)
        entity = SkillMatcher.entity_match(resume_skills, job_skills)
        logger.debug("Skills match scores - semantic: %.2f, keyword: %.2f, entity: %.2f", semantic, keyword, entity)

        score = (
            semantic * SkillMatcher.SEMANTIC_WEIGHT
            + keyword * SkillMatcher.KEYWORD_WEIGHT
            + entity * SkillMatcher.ENTITY_WEIGHT
        )
        return min(max(safe_float(score), 0.0), 1.0)

    @staticmethod
    def match_skills(resume_skills: Sequence[str], job_skills: Sequence[str]) -> SkillMatchResult:
        """Composite skills score plus the exact/partial/missing breakdown."""
        if not job_skills:
            return SkillMatchResult(1.0, [], [], [])

        score = SkillMatcher.skills_score(resume_skills, job_skills)
        exact, partial, missing = SkillMatcher.analyze_skill_matches(resume_skills, job_skills)
        return SkillMatchResult(score, exact, partial, missing)
