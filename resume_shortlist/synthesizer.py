# synthesizer.py
import logging
import random
from typing import List, Optional, Sequence

from .config import (
    BULK_NAME_KEYWORDS,
    BULK_SIZE_THRESHOLD,
    RESUME_COUNT_BRACKETS,
    RESUME_COUNT_FALLBACK,
)
from .models import Candidate, UploadedFile

logger = logging.getLogger(__name__)

# ---------- Vocabularies ----------
NAMES = [
    "Sarah Johnson", "Michael Chen", "Emily Rodriguez", "David Kim", "Lisa Thompson",
    "James Wilson", "Maria Garcia", "Robert Brown", "Jennifer Davis", "Christopher Lee",
    "Amanda Taylor", "Daniel Martinez", "Jessica Anderson", "Matthew Thomas", "Ashley Jackson",
    "Andrew White", "Stephanie Harris", "Kevin Martin", "Nicole Thompson", "Ryan Garcia",
]

SKILLS = [
    "JavaScript", "Python", "React", "Node.js", "SQL", "AWS", "Docker", "Git",
    "Machine Learning", "Data Analysis", "Project Management", "Agile", "Scrum",
    "UI/UX Design", "Figma", "Photoshop", "Marketing", "Sales", "Customer Service",
    "Communication", "Leadership", "Problem Solving", "Team Management", "Analytics",
]

EXPERIENCES = [
    "Software Engineer", "Data Scientist", "Product Manager", "UX Designer", "Marketing Manager",
    "Sales Representative", "Business Analyst", "DevOps Engineer", "Frontend Developer",
    "Backend Developer", "Full Stack Developer", "Project Manager", "HR Specialist",
    "Financial Analyst", "Operations Manager", "Content Writer", "Graphic Designer",
]

COMPANIES = [
    "Google", "Microsoft", "Amazon", "Apple", "Facebook", "Netflix", "Uber", "Airbnb",
    "Tesla", "SpaceX", "IBM", "Oracle", "Salesforce", "Adobe", "Intel", "NVIDIA",
    "Spotify", "Twitter", "LinkedIn", "Pinterest", "Slack", "Zoom", "Shopify", "Stripe",
]

EDUCATION = "Bachelor's Degree in Computer Science"
LOCATION = "San Francisco, CA"

MIN_SKILLS = 5
MAX_SKILLS = 12
MIN_YEARS = 1
MAX_YEARS = 10


# ---------- Bulk Detection ----------
def is_bulk_file(file: UploadedFile) -> bool:
    name = file.name.lower()
    return (
        any(keyword in name for keyword in BULK_NAME_KEYWORDS)
        or file.size > BULK_SIZE_THRESHOLD
    )


def estimate_resume_count(file: UploadedFile) -> int:
    # size only; the file body is never opened
    for upper_bound, count in RESUME_COUNT_BRACKETS:
        if file.size < upper_bound:
            return count
    return RESUME_COUNT_FALLBACK


def resumes_in_file(file: UploadedFile) -> int:
    return estimate_resume_count(file) if is_bulk_file(file) else 1


# ---------- Candidate Generation ----------
def _email_for(name: str) -> str:
    return f"{name.lower().replace(' ', '.', 1)}@email.com"


def _random_phone(rng: random.Random) -> str:
    return "+1-{}-{}-{}".format(
        rng.randint(100, 999),
        rng.randint(100, 999),
        rng.randint(1000, 9999),
    )


def _summary(experience: str, years: int, skills: List[str], company: str) -> str:
    return (
        f"Experienced {experience} with {years} years of expertise in "
        f"{', '.join(skills[:3])}. Proven track record at {company} "
        f"with strong analytical and problem-solving skills."
    )


def generate_candidate(
    file_name: str,
    index: int,
    rng: Optional[random.Random] = None,
) -> Candidate:
    rng = rng or random.Random()

    name = NAMES[index % len(NAMES)]
    experience = rng.choice(EXPERIENCES)
    company = rng.choice(COMPANIES)
    years = rng.randint(MIN_YEARS, MAX_YEARS)

    # sampling without replacement always fills the target and terminates
    skill_count = rng.randint(MIN_SKILLS, MAX_SKILLS)
    skills = rng.sample(SKILLS, skill_count)

    return Candidate(
        id=index + 1,
        name=name,
        email=_email_for(name),
        phone=_random_phone(rng),
        experience=experience,
        company=company,
        years_experience=years,
        skills=skills,
        education=EDUCATION,
        location=LOCATION,
        file_name=file_name,
        summary=_summary(experience, years, skills, company),
    )


def synthesize_candidates(
    files: Sequence[UploadedFile],
    rng: Optional[random.Random] = None,
) -> List[Candidate]:
    rng = rng or random.Random()
    candidates: List[Candidate] = []

    for file in files:
        if is_bulk_file(file):
            count = estimate_resume_count(file)
            logger.debug("Expanding bulk file %s into %d resumes", file.name, count)
            for _ in range(count):
                index = len(candidates)
                candidates.append(
                    generate_candidate(f"Resume_{index + 1}_from_{file.name}", index, rng)
                )
        else:
            candidates.append(generate_candidate(file.name, len(candidates), rng))

    logger.info("Synthesized %d candidates from %d files", len(candidates), len(files))
    return candidates

