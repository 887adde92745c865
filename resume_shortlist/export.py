# export.py
import csv
import io
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from .exceptions import NoResultsError
from .models import RankedCandidate

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Rank",
    "Name",
    "Email",
    "Phone",
    "Experience",
    "Company",
    "Years Exp",
    "Location",
    "Score",
    "Matched Skills",
    "Summary",
]


def _row(candidate: RankedCandidate) -> List[str]:
    return [
        str(candidate.ranking),
        candidate.name,
        candidate.email,
        candidate.phone,
        candidate.experience,
        candidate.company,
        str(candidate.years_experience),
        candidate.location,
        str(candidate.score),
        "; ".join(candidate.matched_skills),
        candidate.summary.replace(",", ";"),
    ]


def generate_csv(ranked: Sequence[RankedCandidate]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(_row(c) for c in ranked)
    return buffer.getvalue()


def default_export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"resume_rankings_{today.isoformat()}.csv"


def export_results(
    ranked: Sequence[RankedCandidate],
    path: Optional[Path] = None,
) -> Path:
    if not ranked:
        raise NoResultsError()

    target = Path(path) if path else Path(default_export_filename())
    if target.is_dir():
        target = target / default_export_filename()

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(generate_csv(ranked), encoding="utf-8")
    logger.info("Exported %d candidates to %s", len(ranked), target)
    return target
