import pytest
from fastapi.testclient import TestClient

from resume_scorer.main import app
from resume_scorer.routers.scoring import get_profile_store
from resume_scorer.store import ProfileStore


@pytest.fixture
def store(tmp_path):
    """Profile store rooted in a temporary directory."""
    return ProfileStore(tmp_path / "processed_texts")


@pytest.fixture
def client(store):
    """Test client whose routes read from the temporary store."""
    app.dependency_overrides[get_profile_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def resume_entities():
    return {
        "name": "Jane Doe",
        "email": ["jane@example.com"],
        "skills": ["Python", "Docker", "5 years backend development", "Led a team of four", "Communication"],
        "education": [
            {
                "degree": "Bachelor of Science",
                "institution": "State University",
                "specialization": "Computer Science",
                "year": "2018",
            }
        ],
    }


@pytest.fixture
def job_requirements():
    return {
        "skills": ["Python", "Docker", "Kubernetes", "Communication"],
        "experience": {"min_years": 5, "level": "mid", "areas": ["backend"]},
        "education": {"degree": "Bachelor", "fields": ["Computer Science"], "qualifications": []},
        "responsibilities": ["Build services"],
    }
