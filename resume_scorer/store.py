import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resume_scorer.config import PROCESSED_TEXTS_DIR
from resume_scorer.schemas.profile import CandidateProfile, JobRequirements

logger = logging.getLogger(__name__)

RESUME = "resume"
JOB = "job"
TEXT_TYPES = (RESUME, JOB)


class ProfileNotFoundError(ValueError):
    pass


class ProfileFormatError(ValueError):
    pass


class ResumeEntities(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    skills: List[Any] = Field(default_factory=list)
    education: List[Any] = Field(default_factory=list)
    experience_signals: Optional[List[Any]] = None

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value):
        return value or ""

    @field_validator("skills", "education", mode="before")
    @classmethod
    def _default_lists(cls, value):
        return value or []


class ResumeDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    type: str = RESUME
    processed_text: Optional[str] = None
    entities: ResumeEntities = Field(default_factory=ResumeEntities)

    @field_validator("entities", mode="before")
    @classmethod
    def _default_entities(cls, value):
        return value or {}

    def to_profile(self) -> CandidateProfile:
        return CandidateProfile.model_validate({
            "skills": self.entities.skills,
            "education": self.entities.education,
            "experience_signals": self.entities.experience_signals,
        })


class JobDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    type: str = JOB
    processed_text: Optional[str] = None
    requirements: JobRequirements = Field(default_factory=JobRequirements)

    @field_validator("requirements", mode="before")
    @classmethod
    def _default_requirements(cls, value):
        return value or {}


class ProfileStore:
    """
    JSON documents laid out as <root>/<type>/<type>_<id>.json, written by the
    extraction step and read back for scoring.
    """

    def __init__(self, root: Union[str, Path] = PROCESSED_TEXTS_DIR):
        self.root = Path(root)

    def _path(self, text_type: str, profile_id: str) -> Path:
        return self.root / text_type / f"{text_type}_{profile_id}.json"

    def _files(self, text_type: str) -> List[Path]:
        directory = self.root / text_type
        if not directory.is_dir():
            return []
        return [path for path in directory.glob(f"{text_type}_*.json") if path.is_file()]

    def list_ids(self, text_type: str) -> List[str]:
        prefix = f"{text_type}_"
        return sorted(path.stem[len(prefix):] for path in self._files(text_type))

    def latest_id(self, text_type: str) -> str:
        """Id of the most recently modified document of the given type."""
        files = self._files(text_type)
        if not files:
            raise ProfileNotFoundError(f"No {text_type} files found")

        latest = max(files, key=lambda path: path.stat().st_mtime)
        return latest.stem[len(f"{text_type}_"):]

    def _read(self, text_type: str, profile_id: str, model):
        path = self._path(text_type, profile_id)
        logger.debug("Loading %s", path)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ProfileNotFoundError(f"No {text_type} found for id {profile_id}") from None
        except UnicodeDecodeError as e:
            raise ProfileFormatError(f"Invalid {text_type} document {path.name}: {e}") from e

        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise ProfileFormatError(f"Invalid {text_type} document {path.name}: {e}") from e

    def load_candidate(self, profile_id: str) -> CandidateProfile:
        document = self._read(RESUME, profile_id, ResumeDocument)
        logger.info("Loaded resume %s with %d skills", profile_id, len(document.entities.skills))
        try:
            return document.to_profile()
        except ValidationError as e:
            raise ProfileFormatError(f"Invalid resume entities for id {profile_id}: {e}") from e

    def load_requirements(self, profile_id: str) -> JobRequirements:
        document = self._read(JOB, profile_id, JobDocument)
        logger.info("Loaded job %s with %d required skills", profile_id, len(document.requirements.skills))
        return document.requirements

    def _write(self, text_type: str, profile_id: str, document: Dict[str, Any]) -> Path:
        path = self._path(text_type, profile_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    def save_resume(self, profile_id: str, entities: Dict[str, Any], processed_text: str = "") -> Path:
        return self._write(RESUME, profile_id, {
            "id": profile_id,
            "type": RESUME,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "processed_text": processed_text,
            "entities": entities,
        })

    def save_job(self, profile_id: str, requirements: Dict[str, Any], processed_text: str = "") -> Path:
        return self._write(JOB, profile_id, {
            "id": profile_id,
            "type": JOB,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "processed_text": processed_text,
            "requirements": requirements,
        })

    def clear(self) -> int:
        """Delete every stored resume and job document. Returns the count."""
        removed = 0
        for text_type in TEXT_TYPES:
            for path in self._files(text_type):
                path.unlink(missing_ok=True)
                removed += 1
        logger.info("Cleared %d stored documents", removed)
        return removed
