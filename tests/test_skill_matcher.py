import math

import pytest

from resume_scorer.services.skill_matcher import SkillMatcher


def test_match_skills_exact_match():
    result = SkillMatcher.match_skills(["Python", "Leadership"], ["python"])

    assert result.exact_matches == ["python"]
    assert result.partial_matches == []
    assert result.missing_skills == []
    # Semantic part is diluted by the extra resume skill, the rest match fully
    assert result.score == pytest.approx(0.4 / math.sqrt(2) + 0.3 + 0.3)
    assert result.score > 0.85


def test_match_skills_empty_resume():
    result = SkillMatcher.match_skills([], ["Go", "Docker"])

    assert result.score == 0.0
    assert result.exact_matches == []
    assert result.partial_matches == []
    assert result.missing_skills == ["Go", "Docker"]


def test_match_skills_no_job_skills():
    for resume_skills in ([], ["Python"], ["Go", "Docker", "Leadership"]):
        result = SkillMatcher.match_skills(resume_skills, [])
        assert result.score == 1.0
        assert result.exact_matches == []
        assert result.partial_matches == []
        assert result.missing_skills == []


def test_analyze_skill_matches_partial():
    exact, partial, missing = SkillMatcher.analyze_skill_matches(["Javascript", "SQL"], ["JavaScripts"])

    assert exact == []
    assert missing == []
    assert len(partial) == 1
    assert partial[0].job_skill == "JavaScripts"
    assert partial[0].resume_skill == "Javascript"
    assert partial[0].similarity == pytest.approx(10 / 11)


def test_analyze_skill_matches_partitions_job_skills():
    job_skills = ["Python", "Kubernetes", "Dockers", "Rust", "python"]
    exact, partial, missing = SkillMatcher.analyze_skill_matches(["python", "Docker", "Java"], job_skills)

    partial_skills = [match.job_skill for match in partial]
    assert exact == ["Python", "python"]
    assert partial_skills == ["Dockers"]
    assert missing == ["Kubernetes", "Rust"]

    # Every job skill lands in exactly one bucket
    assert sorted(exact + partial_skills + missing) == sorted(job_skills)


def test_match_skills_score_bounds():
    cases = [
        (["Python"], ["Python"]),
        (["python python python"], ["python"]),
        (["a", "b"], ["c", "d", "e"]),
        (["Machine learning with Python"], ["machine learning", "python", "sql"]),
        ([""], [""]),
    ]
    for resume_skills, job_skills in cases:
        score = SkillMatcher.match_skills(resume_skills, job_skills).score
        assert 0.0 <= score <= 1.0


# Test cases for the keyword dictionaries
def test_filter_technical_skills():
    skills = ["Python programming", "Leadership", "Golang", "Kubernetes"]
    assert SkillMatcher.filter_technical_skills(skills) == ["python programming", "golang", "kubernetes"]
    assert SkillMatcher.filter_technical_skills([]) == []


def test_filter_soft_skills():
    skills = ["Team Leadership", "Python", "Public Speaking"]
    assert SkillMatcher.filter_soft_skills(skills) == ["team leadership", "public speaking"]
    assert SkillMatcher.filter_soft_skills(["Docker"]) == []


# Test cases for the score components
def test_keyword_match():
    assert SkillMatcher.keyword_match(["Python"], ["python"]) == 1.0
    assert SkillMatcher.keyword_match(["abc"], ["xyz"]) == 0.0
    assert SkillMatcher.keyword_match([], ["python", "go"]) == 0.0
    assert SkillMatcher.keyword_match(["python"], ["python", "rust"]) == 0.5
    assert SkillMatcher.keyword_match(["python"], []) == 1.0


def test_extract_terms():
    terms = SkillMatcher.extract_terms(["Machine Learning and AI", "Go", "Design for the web"])
    assert terms == ["machine", "learning", "design", "web"]


def test_entity_match():
    assert SkillMatcher.entity_match(["Machine learning"], ["machine learning"]) == pytest.approx(1.0)
    assert SkillMatcher.entity_match([], ["Docker"]) == 0.0

    # Only fuzzy matches: "dockers" is close to "docker"
    expected = 0.3 * (1 - 1 / 7)
    assert SkillMatcher.entity_match(["Dockers"], ["docker"]) == pytest.approx(expected)

    # No meaningful job terms at all
    assert SkillMatcher.entity_match([], ["Go", "C"]) == 1.0


def test_similarity_threshold_boundaries():
    # Three substitutions in ten characters: similarity is exactly 0.7
    resume_skill, job_skill = "abcdefgxyz", "abcdefghij"

    # Keyword match accepts the threshold itself
    assert SkillMatcher.keyword_match([resume_skill], [job_skill]) == 1.0

    # Partial and fuzzy matches need to be strictly above it
    exact, partial, missing = SkillMatcher.analyze_skill_matches([resume_skill], [job_skill])
    assert exact == []
    assert partial == []
    assert missing == [job_skill]
    assert SkillMatcher.fuzzy_term_matches([resume_skill], [job_skill]) == 0.0
