# ranker.py
import logging
import random
from typing import List, Optional, Sequence

from tabulate import tabulate

from .config import DISPLAY_LIMIT
from .extractor import extract_keywords
from .models import Candidate, RankedCandidate
from .scorer import score_candidate

logger = logging.getLogger(__name__)


# ---------- Ranking ----------
def rank_candidates(
    candidates: Sequence[Candidate],
    job_description: str,
    rng: Optional[random.Random] = None,
    jitter: Optional[float] = None,
) -> List[RankedCandidate]:
    job_keywords = extract_keywords(job_description)
    logger.debug("Extracted %d job keywords", len(job_keywords))

    scored = [
        (candidate, score_candidate(candidate, job_keywords, rng=rng, jitter=jitter))
        for candidate in candidates
    ]
    # list.sort is stable, so equal scores keep their upload order
    scored.sort(key=lambda pair: pair[1].score, reverse=True)

    ranked = [
        RankedCandidate.from_candidate(candidate, result, ranking=idx + 1)
        for idx, (candidate, result) in enumerate(scored)
    ]

    if ranked:
        logger.info(
            "Ranked %d candidates (top score %d)", len(ranked), ranked[0].score
        )
    return ranked


# ---------- Rendering ----------
def render_rankings(
    ranked: Sequence[RankedCandidate],
    top_k: int = DISPLAY_LIMIT,
) -> str:
    shown = list(ranked[:top_k])
    table = [
        [
            c.ranking,
            c.name,
            c.experience,
            c.years_experience,
            c.company,
            c.location,
            f"{c.score}%",
            ", ".join(c.matched_skills),
        ]
        for c in shown
    ]

    header = f"{len(ranked)} resumes processed · Top {len(shown)} candidates shown"
    body = tabulate(
        table,
        headers=[
            "Rank",
            "Name",
            "Experience",
            "Years",
            "Company",
            "Location",
            "Score",
            "Matched Skills",
        ],
        tablefmt="github",
    )
    return f"{header}\n\n{body}"


def render_candidate_detail(candidate: RankedCandidate) -> str:
    skills = ", ".join(
        f"{skill} ✓" if candidate.is_matched(skill) else skill
        for skill in candidate.skills
    )
    rows = [
        ["Email", candidate.email],
        ["Phone", candidate.phone],
        ["Location", candidate.location],
        ["Current Role", candidate.experience],
        ["Company", candidate.company],
        ["Experience", f"{candidate.years_experience} years"],
        ["Education", candidate.education],
        ["Skills", skills],
        ["Matched", f"{len(candidate.matched_skills)} skills match job requirements"],
        ["Source File", candidate.file_name],
        ["Summary", candidate.summary],
        ["Overall Match Score", f"{candidate.score}%"],
    ]
    title = f"#{candidate.ranking} {candidate.name} - Detailed Profile"
    return f"{title}\n{tabulate(rows, tablefmt='plain')}"
