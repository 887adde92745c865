"""Shared fixtures for the shortlist tests."""

import random

import pytest

from resume_shortlist.models import Candidate


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_candidate():
    def _make(**overrides):
        fields = {
            "id": 1,
            "name": "Sarah Johnson",
            "email": "sarah.johnson@email.com",
            "phone": "+1-555-555-5555",
            "experience": "Software Engineer",
            "company": "Oracle",
            "years_experience": 6,
            "skills": ["Python", "SQL"],
            "education": "Self-taught",
            "location": "Remote",
            "file_name": "sarah.pdf",
            "summary": "Experienced Software Engineer with 6 years of expertise in Python, SQL.",
        }
        fields.update(overrides)
        return Candidate(**fields)

    return _make
