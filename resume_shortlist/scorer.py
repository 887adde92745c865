# scorer.py
import math
import random
from typing import List, Optional, Sequence, Tuple

from .config import (
    COMPANY_POINTS,
    EDUCATION_KEYWORDS,
    EDUCATION_POINTS,
    JUNIOR_EXPERIENCE_POINTS,
    LOCATION_KEYWORDS,
    LOCATION_POINTS,
    MAX_SCORE,
    MID_EXPERIENCE_POINTS,
    MID_YEARS,
    SCORE_JITTER,
    SENIOR_EXPERIENCE_POINTS,
    SENIOR_YEARS,
    SENIORITY_KEYWORDS,
    SKILL_MATCH_POINTS,
    TOP_COMPANIES,
)
from .models import Candidate, ScoreResult


def _lowered(job_keywords: Sequence[str]) -> List[str]:
    return [keyword.lower() for keyword in job_keywords]


def _mentions(text: str, terms: Sequence[str], job_keywords: Sequence[str]) -> bool:
    # substring of the candidate field, or an exact job keyword
    lowered = text.lower()
    keywords = _lowered(job_keywords)
    return any(term in lowered or term in keywords for term in terms)


# ---------- Skill Score ----------
def skill_match_score(
    skills: Sequence[str],
    job_keywords: Sequence[str],
) -> Tuple[int, List[str]]:
    keywords = _lowered(job_keywords)
    matched: List[str] = []
    for skill in skills:
        lowered = skill.lower()
        if any(keyword in lowered or lowered in keyword for keyword in keywords):
            matched.append(skill)
    return len(matched) * SKILL_MATCH_POINTS, matched


# ---------- Experience Score ----------
def experience_score(
    title: str,
    years: int,
    job_keywords: Sequence[str],
) -> int:
    if _mentions(title, SENIORITY_KEYWORDS, job_keywords) and years >= SENIOR_YEARS:
        return SENIOR_EXPERIENCE_POINTS
    if years >= MID_YEARS:
        return MID_EXPERIENCE_POINTS
    return JUNIOR_EXPERIENCE_POINTS


# ---------- Education Score ----------
def education_score(education: str, job_keywords: Sequence[str]) -> int:
    return EDUCATION_POINTS if _mentions(education, EDUCATION_KEYWORDS, job_keywords) else 0


# ---------- Company Score ----------
def company_score(company: str) -> int:
    return COMPANY_POINTS if company.lower() in TOP_COMPANIES else 0


# ---------- Location Score ----------
def location_score(location: str, job_keywords: Sequence[str]) -> int:
    return LOCATION_POINTS if _mentions(location, LOCATION_KEYWORDS, job_keywords) else 0


# ---------- Final Score ----------
def score_candidate(
    candidate: Candidate,
    job_keywords: Sequence[str],
    rng: Optional[random.Random] = None,
    jitter: Optional[float] = None,
) -> ScoreResult:
    """Additive 0-100 match score for one candidate.

    ``jitter`` bounds the random bonus (``[0, jitter)``); pass ``0`` for a
    reproducible score.
    """
    jitter = SCORE_JITTER if jitter is None else jitter

    skill_points, matched = skill_match_score(candidate.skills, job_keywords)

    total = (
        skill_points
        + experience_score(candidate.experience, candidate.years_experience, job_keywords)
        + education_score(candidate.education, job_keywords)
        + company_score(candidate.company)
        + location_score(candidate.location, job_keywords)
    )

    if jitter > 0:
        rng = rng or random.Random()
        total += rng.random() * jitter

    # round half up, not to even
    score = min(int(math.floor(total + 0.5)), MAX_SCORE)

    return ScoreResult(score=score, matched_skills=matched)
