# session.py
import logging
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from .config import ACCEPTED_MIME_TYPES, PROGRESS_STEP_SECONDS, RANDOM_SEED
from .exceptions import (
    AnalysisError,
    MissingInputError,
    NoResultsError,
    UnknownRankError,
    UnsupportedFileTypeError,
)
from .export import export_results
from .models import RankedCandidate, UploadedFile
from .ranker import rank_candidates
from .synthesizer import is_bulk_file, resumes_in_file, synthesize_candidates

logger = logging.getLogger(__name__)


@dataclass
class AnalysisSession:
    """State for one shortlist run: uploads, job text and the ranked result.

    Each session owns its own random source, so independent sessions never
    share mutable state.
    """

    uploaded_files: List[UploadedFile] = field(default_factory=list)
    job_description: str = ""
    ranked_candidates: List[RankedCandidate] = field(default_factory=list)
    is_processing: bool = False
    rng: random.Random = field(default_factory=lambda: random.Random(RANDOM_SEED))
    jitter: Optional[float] = None

    @classmethod
    def with_seed(cls, seed: Optional[int], **kwargs) -> "AnalysisSession":
        return cls(rng=random.Random(seed), **kwargs)

    # ---------- Uploads ----------
    def add_file(self, file: UploadedFile) -> bool:
        """Accept one file. Returns False when a file of that name is already present."""
        if file.mime_type not in ACCEPTED_MIME_TYPES:
            raise UnsupportedFileTypeError(file)

        if any(existing.name == file.name for existing in self.uploaded_files):
            logger.debug("Skipping duplicate upload %s", file.name)
            return False

        self.uploaded_files.append(file)
        return True

    def add_files(self, files: Iterable[UploadedFile]) -> List[UploadedFile]:
        rejected: List[UploadedFile] = []
        for file in files:
            try:
                self.add_file(file)
            except UnsupportedFileTypeError as exc:
                logger.warning("%s", exc)
                rejected.append(file)
        return rejected

    def remove_file(self, index: int) -> UploadedFile:
        if not 0 <= index < len(self.uploaded_files):
            raise IndexError(f"No uploaded file at position {index}")
        return self.uploaded_files.pop(index)

    # ---------- Job Description ----------
    def set_job_description(self, text: str) -> None:
        self.job_description = text

    def clear_job_description(self) -> None:
        self.job_description = ""

    # ---------- Summary ----------
    def has_bulk_files(self) -> bool:
        return any(is_bulk_file(f) for f in self.uploaded_files)

    def total_resume_count(self) -> int:
        return sum(resumes_in_file(f) for f in self.uploaded_files)

    def processing_stages(self) -> List[str]:
        reading = (
            "Reading bulk files and individual resumes..."
            if self.has_bulk_files()
            else "Reading resume files..."
        )
        return [
            reading,
            f"Extracting content from {self.total_resume_count()} resumes...",
            "Analyzing skills and experience...",
            "Matching against job requirements...",
            "Generating rankings...",
        ]

    # ---------- Analysis ----------
    def _validate(self) -> None:
        if not self.uploaded_files:
            raise MissingInputError("Please upload at least one resume file.")
        if not self.job_description.strip():
            raise MissingInputError(
                "Please enter job requirements before analyzing resumes."
            )

    def analyze(self, show_progress: bool = False) -> List[RankedCandidate]:
        self._validate()

        self.is_processing = True
        stages = self.processing_stages()
        try:
            with tqdm(total=len(stages), disable=not show_progress, unit="step") as bar:
                candidates = []
                for step, text in enumerate(stages):
                    bar.set_description(text)
                    if step == 1:
                        candidates = synthesize_candidates(self.uploaded_files, rng=self.rng)
                    elif step == 4:
                        self.ranked_candidates = rank_candidates(
                            candidates,
                            self.job_description,
                            rng=self.rng,
                            jitter=self.jitter,
                        )
                    if PROGRESS_STEP_SECONDS:
                        time.sleep(PROGRESS_STEP_SECONDS)
                    bar.update(1)
        except Exception as exc:
            logger.error("Processing error", exc_info=exc)
            raise AnalysisError() from exc
        finally:
            self.is_processing = False

        return self.ranked_candidates

    # ---------- Results ----------
    def candidate_by_rank(self, rank: int) -> RankedCandidate:
        if not self.ranked_candidates:
            raise NoResultsError("No results available. Run an analysis first.")
        for candidate in self.ranked_candidates:
            if candidate.ranking == rank:
                return candidate
        raise UnknownRankError(rank)

    def export(self, path: Optional[Path] = None) -> Path:
        target = export_results(self.ranked_candidates, path)
        logger.info("Results exported successfully!")
        return target

    def reset(self) -> None:
        self.uploaded_files = []
        self.job_description = ""
        self.ranked_candidates = []
        logger.info("Analysis reset. Ready for new resumes!")
