import logging
import math
from typing import List, Sequence

from resume_scorer.schemas.profile import CandidateProfile, ExperienceLevel, JobRequirements
from resume_scorer.services.similarity import safe_float, semantic_similarity

logger = logging.getLogger(__name__)


class ExperienceMatcher:
    YEARS_WEIGHT = 0.3
    AREA_WEIGHT = 0.3
    LEVEL_WEIGHT = 0.2
    SEMANTIC_WEIGHT = 0.2

    LEVEL_SCORES = {
        ExperienceLevel.ENTRY: 0.33,
        ExperienceLevel.MID: 0.66,
        ExperienceLevel.SENIOR: 1.0,
    }

    SENIORITY_MARKERS = ("senior", "lead")

    @staticmethod
    def extract_years(signals: Sequence[str]) -> float:
        """
        Sum of the numbers written just before a word containing "year",
        e.g. "3 years of Python" and "2 year tenure" give 5.0.
        """
        total = 0.0
        for signal in signals:
            parts = signal.split()
            for i, part in enumerate(parts):
                if i == 0 or "year" not in part.lower():
                    continue
                try:
                    years = float(parts[i - 1])
                except ValueError:
                    continue
                if math.isfinite(years):
                    total += years
        return max(safe_float(total), 0.0)

    @staticmethod
    def years_score(signals: Sequence[str], min_years: int) -> float:
        if min_years <= 0:
            return 1.0
        years = ExperienceMatcher.extract_years(signals)
        try:
            ratio = years / min_years
        except OverflowError:
            # min_years too large to represent as a float
            return 0.0
        return max(min(safe_float(ratio), 1.0), 0.0)

    @staticmethod
    def has_area(signals: Sequence[str], area: str) -> bool:
        area = area.lower()
        return any(area in signal.lower() for signal in signals)

    @staticmethod
    def area_score(signals: Sequence[str], areas: Sequence[str]) -> float:
        if not areas:
            return 1.0
        matches = sum(1 for area in areas if ExperienceMatcher.has_area(signals, area))
        return matches / len(areas)

    @staticmethod
    def missing_areas(signals: Sequence[str], areas: Sequence[str]) -> List[str]:
        return [area for area in areas if not ExperienceMatcher.has_area(signals, area)]

    @staticmethod
    def candidate_level(signals: Sequence[str]) -> ExperienceLevel:
        # Candidates are either senior or entry; mid level is never inferred
        for signal in signals:
            signal = signal.lower()
            if any(marker in signal for marker in ExperienceMatcher.SENIORITY_MARKERS):
                return ExperienceLevel.SENIOR
        return ExperienceLevel.ENTRY

    @staticmethod
    def level_score(signals: Sequence[str], required_level: ExperienceLevel) -> float:
        candidate_value = ExperienceMatcher.LEVEL_SCORES[ExperienceMatcher.candidate_level(signals)]
        required_value = ExperienceMatcher.LEVEL_SCORES[required_level]
        if candidate_value >= required_value:
            return 1.0
        return candidate_value / required_value

    @staticmethod
    def semantic_score(signals: Sequence[str], areas: Sequence[str]) -> float:
        if not areas:
            return 1.0
        return semantic_similarity(signals, areas)

    @staticmethod
    def match_experience(candidate: CandidateProfile, requirements: JobRequirements) -> float:
        signals = candidate.experience_signals
        required = requirements.experience

        years = ExperienceMatcher.years_score(signals, required.min_years)
        area = ExperienceMatcher.area_score(signals, required.areas)
        level = ExperienceMatcher.level_score(signals, required.level)
        semantic = ExperienceMatcher.semantic_score(signals, required.areas)
        logger.debug(
            "Experience match scores - years: %.2f, area: %.2f, level: %.2f, semantic: %.2f",
            years, area, level, semantic,
        )

        score = (
            years * ExperienceMatcher.YEARS_WEIGHT
            + area * ExperienceMatcher.AREA_WEIGHT
            + level * ExperienceMatcher.LEVEL_WEIGHT
            + semantic * ExperienceMatcher.SEMANTIC_WEIGHT
        )
        return min(max(safe_float(score), 0.0), 1.0)
