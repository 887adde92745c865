# exceptions.py
from typing import Optional

from .models import UploadedFile


class ResumeShortlistError(Exception):
    """Base class for failures surfaced to the user."""


class UnsupportedFileTypeError(ResumeShortlistError):
    def __init__(self, file: UploadedFile) -> None:
        self.file = file
        super().__init__(
            f"File {file.name} is not supported. Please upload PDF, DOC, or DOCX files."
        )


class MissingInputError(ResumeShortlistError):
    pass


class NoResultsError(MissingInputError):
    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "No results to export.")


class AnalysisError(ResumeShortlistError):
    def __init__(self, message: str = "Error processing resumes. Please try again.") -> None:
        super().__init__(message)


class UnknownRankError(ResumeShortlistError, IndexError):
    def __init__(self, rank: int) -> None:
        self.rank = rank
        super().__init__(f"No candidate at rank {rank}")
