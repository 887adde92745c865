# config.py
import os
from pathlib import Path
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


# ---------- Project Paths ----------
BASE_DIR = Path(__file__).resolve().parent
LOG_DIR = Path(os.getenv("RESUME_SHORTLIST_LOG_DIR", str(BASE_DIR / "logs")))
LOG_FILE = LOG_DIR / "app.log"

# ---------- Randomness ----------
# unset seed keeps the interactive, non-reproducible behaviour
RANDOM_SEED = _env_int("RESUME_SHORTLIST_SEED")
SCORE_JITTER = float(os.getenv("RESUME_SHORTLIST_SCORE_JITTER", "5.0"))

# ---------- Presentation ----------
PROGRESS_STEP_SECONDS = float(os.getenv("RESUME_SHORTLIST_PROGRESS_STEP_SECONDS", "0"))
DISPLAY_LIMIT = 20

# ---------- Uploads ----------
ACCEPTED_MIME_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

BULK_NAME_KEYWORDS = ("bulk", "multiple", "batch", "resumes", "candidates")
BULK_SIZE_THRESHOLD = 500_000

# (exclusive upper size bound, estimated resumes); anything larger gets the fallback
RESUME_COUNT_BRACKETS = (
    (100_000, 5),
    (500_000, 10),
    (1_000_000, 20),
)
RESUME_COUNT_FALLBACK = 50

# ---------- Scoring Points ----------
SKILL_MATCH_POINTS = 8
SENIOR_EXPERIENCE_POINTS = 10
MID_EXPERIENCE_POINTS = 6
JUNIOR_EXPERIENCE_POINTS = 3
EDUCATION_POINTS = 6
COMPANY_POINTS = 5
LOCATION_POINTS = 3
MAX_SCORE = 100

SENIOR_YEARS = 5
MID_YEARS = 3

SENIORITY_KEYWORDS = ("senior", "lead", "principal", "manager", "director")
EDUCATION_KEYWORDS = ("degree", "bachelor", "master", "phd", "university", "college")
TOP_COMPANIES = ("google", "microsoft", "amazon", "apple", "facebook", "netflix")
LOCATION_KEYWORDS = ("remote", "san francisco", "new york", "seattle", "austin")
