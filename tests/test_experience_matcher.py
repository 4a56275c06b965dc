import math

import pytest

from resume_scorer.schemas.profile import CandidateProfile, ExperienceLevel, JobRequirements
from resume_scorer.services.experience_matcher import ExperienceMatcher


# Test cases for years extraction
def test_extract_years():
    signals = ["3 years Python", "2.5 years of Go", "nan years", "five years", "years 4"]
    assert ExperienceMatcher.extract_years(signals) == pytest.approx(5.5)
    assert ExperienceMatcher.extract_years([]) == 0.0


def test_years_score():
    assert ExperienceMatcher.years_score(["3 year tenure"], 5) == pytest.approx(0.6)
    assert ExperienceMatcher.years_score(["10 years backend"], 5) == 1.0
    assert ExperienceMatcher.years_score([], 5) == 0.0

    # No minimum means automatically satisfied
    assert ExperienceMatcher.years_score([], 0) == 1.0


def test_area_score():
    signals = ["Backend development", "Cloud migrations"]
    assert ExperienceMatcher.area_score(signals, ["backend", "frontend"]) == 0.5
    assert ExperienceMatcher.area_score(signals, ["CLOUD"]) == 1.0
    assert ExperienceMatcher.area_score(signals, []) == 1.0
    assert ExperienceMatcher.missing_areas(signals, ["backend", "frontend"]) == ["frontend"]


def test_candidate_level():
    assert ExperienceMatcher.candidate_level(["Senior engineer"]) == ExperienceLevel.SENIOR
    assert ExperienceMatcher.candidate_level(["Python", "Team Lead"]) == ExperienceLevel.SENIOR
    assert ExperienceMatcher.candidate_level(["Mid-level developer"]) == ExperienceLevel.ENTRY
    assert ExperienceMatcher.candidate_level([]) == ExperienceLevel.ENTRY


def test_level_score():
    assert ExperienceMatcher.level_score([], ExperienceLevel.ENTRY) == 1.0
    assert ExperienceMatcher.level_score([], ExperienceLevel.MID) == pytest.approx(0.5)
    assert ExperienceMatcher.level_score([], ExperienceLevel.SENIOR) == pytest.approx(0.33)
    assert ExperienceMatcher.level_score(["Senior developer"], ExperienceLevel.SENIOR) == 1.0


def test_match_experience():
    candidate = CandidateProfile(skills=["5 years backend development", "Senior Python developer"])
    requirements = JobRequirements.model_validate({
        "experience": {"min_years": 5, "level": "senior", "areas": ["backend"]},
    })

    # Seven distinct signal terms, one of which is the required area
    expected = 0.3 + 0.3 + 0.2 + 0.2 / math.sqrt(7)
    assert ExperienceMatcher.match_experience(candidate, requirements) == pytest.approx(expected)


def test_match_experience_without_requirements():
    assert ExperienceMatcher.match_experience(CandidateProfile(), JobRequirements()) == 1.0


def test_match_experience_uses_explicit_signals():
    candidate = CandidateProfile(skills=["Python"], experience_signals=["6 years data engineering"])
    requirements = JobRequirements.model_validate({
        "experience": {"min_years": 3, "level": "entry", "areas": ["data engineering"]},
    })

    score = ExperienceMatcher.match_experience(candidate, requirements)
    assert 0.8 < score <= 1.0


def test_extract_years_with_overflowing_total():
    # Each number is finite but the sums are not
    assert ExperienceMatcher.extract_years(["-1e308 years"] * 2) == 0.0
    assert ExperienceMatcher.extract_years(["1e308 years"] * 2) == 0.0
    assert ExperienceMatcher.extract_years(["-4 years"]) == 0.0


def test_years_score_with_huge_minimum():
    assert ExperienceMatcher.years_score(["3 years backend"], 10**400) == 0.0
