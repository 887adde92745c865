# models.py
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Dict, List

from .utils import guess_mime_type


@dataclass(frozen=True)
class UploadedFile:
    name: str
    size: int
    mime_type: str = ""

    @classmethod
    def from_path(cls, path: Path) -> "UploadedFile":
        # only the size is looked at; contents are never read
        return cls(
            name=path.name,
            size=path.stat().st_size,
            mime_type=guess_mime_type(path.name),
        )

    @classmethod
    def from_name(cls, name: str, size: int) -> "UploadedFile":
        return cls(name=name, size=size, mime_type=guess_mime_type(name))


@dataclass(frozen=True)
class Candidate:
    id: int
    name: str
    email: str = ""
    phone: str = ""
    experience: str = ""
    company: str = ""
    years_experience: int = 0
    skills: List[str] = field(default_factory=list)
    education: str = ""
    location: str = ""
    file_name: str = ""
    summary: str = ""

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class ScoreResult:
    score: int
    matched_skills: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RankedCandidate(Candidate):
    score: int = 0
    matched_skills: List[str] = field(default_factory=list)
    ranking: int = 0

    @classmethod
    def from_candidate(
        cls,
        candidate: Candidate,
        result: ScoreResult,
        ranking: int,
    ) -> "RankedCandidate":
        # base fields only, so an already ranked record can be re-ranked
        base = {f.name: getattr(candidate, f.name) for f in fields(Candidate)}
        base["skills"] = list(candidate.skills)
        return cls(
            **base,
            score=result.score,
            matched_skills=list(result.matched_skills),
            ranking=ranking,
        )

    def is_matched(self, skill: str) -> bool:
        return skill in self.matched_skills
