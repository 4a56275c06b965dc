from typing import Sequence

from resume_scorer.schemas.profile import EducationEntry, EducationRequirement
from resume_scorer.services.similarity import safe_float


class EducationMatcher:
    DEGREE_WEIGHT = 0.4
    FIELD_WEIGHT = 0.4
    QUALIFICATION_WEIGHT = 0.2

    @staticmethod
    def text_match(text1: str, text2: str) -> float:
        """1.0 when either string contains the other, ignoring case."""
        text1 = text1.lower()
        text2 = text2.lower()
        if text1 in text2 or text2 in text1:
            return 1.0
        return 0.0

    @staticmethod
    def field_score(specialization: str, required_fields: Sequence[str]) -> float:
        if not required_fields:
            return 1.0
        return max(EducationMatcher.text_match(specialization, field) for field in required_fields)

    @staticmethod
    def qualification_score(degree: str, qualifications: Sequence[str]) -> float:
        if not qualifications:
            return 1.0
        degree = degree.lower()
        matches = sum(1 for qualification in qualifications if qualification.lower() in degree)
        return matches / len(qualifications)

    @staticmethod
    def entry_score(entry: EducationEntry, requirement: EducationRequirement) -> float:
        degree = EducationMatcher.text_match(entry.degree, requirement.degree)
        field = EducationMatcher.field_score(entry.specialization, requirement.fields)
        qualification = EducationMatcher.qualification_score(entry.degree, requirement.qualifications)
        return (
            degree * EducationMatcher.DEGREE_WEIGHT
            + field * EducationMatcher.FIELD_WEIGHT
            + qualification * EducationMatcher.QUALIFICATION_WEIGHT
        )

    @staticmethod
    def match_education(entries: Sequence[EducationEntry], requirement: EducationRequirement) -> float:
        """
        Score of the best-fitting education entry. A candidate with no
        education entries scores 0.0.
        """
        if not entries:
            return 0.0
        best = max(EducationMatcher.entry_score(entry, requirement) for entry in entries)
        return min(max(safe_float(best), 0.0), 1.0)

    @staticmethod
    def has_degree(entries: Sequence[EducationEntry], degree: str) -> bool:
        return any(EducationMatcher.text_match(entry.degree, degree) == 1.0 for entry in entries)
