import logging

import pytest

from resume_shortlist import session as session_module
from resume_shortlist.exceptions import (
    AnalysisError,
    MissingInputError,
    NoResultsError,
    ResumeShortlistError,
    UnknownRankError,
    UnsupportedFileTypeError,
)
from resume_shortlist.extractor import extract_keywords
from resume_shortlist.models import UploadedFile
from resume_shortlist.scorer import score_candidate
from resume_shortlist.session import AnalysisSession

JD = "Senior Python developer with AWS and Docker, remote friendly"


def _file(name, size=10_000):
    return UploadedFile.from_name(name, size)


@pytest.fixture
def session():
    return AnalysisSession.with_seed(42)


# ---------- Uploads ----------

def test_add_files_rejects_unsupported_types(session, caplog):
    with caplog.at_level(logging.WARNING):
        rejected = session.add_files(
            [_file("a.pdf"), _file("notes.txt"), _file("b.docx"), _file("c.doc")]
        )

    assert [f.name for f in rejected] == ["notes.txt"]
    assert [f.name for f in session.uploaded_files] == ["a.pdf", "b.docx", "c.doc"]
    assert "File notes.txt is not supported" in caplog.text


def test_add_file_raises_for_unsupported_type(session):
    with pytest.raises(UnsupportedFileTypeError) as info:
        session.add_file(_file("photo.png"))
    assert info.value.file.name == "photo.png"


def test_add_file_ignores_duplicate_names(session):
    assert session.add_file(_file("a.pdf")) is True
    assert session.add_file(_file("a.pdf", 99)) is False
    assert len(session.uploaded_files) == 1


def test_remove_file(session):
    session.add_files([_file("a.pdf"), _file("b.pdf")])
    removed = session.remove_file(0)

    assert removed.name == "a.pdf"
    assert [f.name for f in session.uploaded_files] == ["b.pdf"]
    with pytest.raises(IndexError):
        session.remove_file(5)


def test_job_description_set_and_clear(session):
    session.set_job_description(JD)
    assert session.job_description == JD
    session.clear_job_description()
    assert session.job_description == ""


# ---------- Summary ----------

def test_total_resume_count_and_stages(session):
    session.add_files([_file("a.pdf"), _file("bulk.pdf", 300_000)])

    assert session.has_bulk_files()
    assert session.total_resume_count() == 11
    stages = session.processing_stages()
    assert stages[0] == "Reading bulk files and individual resumes..."
    assert stages[1] == "Extracting content from 11 resumes..."
    assert len(stages) == 5


def test_stages_without_bulk_files(session):
    session.add_file(_file("a.pdf"))
    assert not session.has_bulk_files()
    assert session.processing_stages()[0] == "Reading resume files..."


# ---------- Analysis ----------

def test_analyze_requires_files(session):
    session.set_job_description(JD)
    with pytest.raises(MissingInputError, match="upload at least one"):
        session.analyze()
    assert session.ranked_candidates == []


def test_analyze_requires_job_description(session):
    session.add_file(_file("a.pdf"))
    session.set_job_description("   ")
    with pytest.raises(MissingInputError, match="job requirements"):
        session.analyze()


def test_analyze_ranks_all_candidates(session):
    session.add_files([_file("a.pdf"), _file("candidates.pdf", 50_000)])
    session.set_job_description(JD)

    ranked = session.analyze()

    assert len(ranked) == 6
    assert ranked is session.ranked_candidates
    assert [c.ranking for c in ranked] == [1, 2, 3, 4, 5, 6]
    assert not session.is_processing


def test_analyze_is_reproducible_for_same_seed():
    results = []
    for _ in range(2):
        s = AnalysisSession.with_seed(3)
        s.add_files([_file("a.pdf"), _file("batch.pdf")])
        s.set_job_description(JD)
        results.append(s.analyze())
    assert results[0] == results[1]


def test_analyze_wraps_unexpected_errors(session, monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("synthesis exploded")

    monkeypatch.setattr(session_module, "synthesize_candidates", _boom)
    session.add_file(_file("a.pdf"))
    session.set_job_description(JD)

    with pytest.raises(AnalysisError) as info:
        session.analyze()

    assert isinstance(info.value.__cause__, RuntimeError)
    assert not session.is_processing


def test_analyze_can_retry_after_failure(session, monkeypatch):
    original = session_module.synthesize_candidates
    def _flaky(*args, **kwargs):
        raise RuntimeError("flaky")

    monkeypatch.setattr(session_module, "synthesize_candidates", _flaky)
    session.add_file(_file("a.pdf"))
    session.set_job_description(JD)
    with pytest.raises(AnalysisError):
        session.analyze()

    monkeypatch.setattr(session_module, "synthesize_candidates", original)
    assert len(session.analyze()) == 1


def test_zero_jitter_gives_rule_based_scores():
    s = AnalysisSession.with_seed(1, jitter=0.0)
    s.add_files([_file("a.pdf"), _file("batch.pdf")])
    s.set_job_description(JD)

    keywords = extract_keywords(JD)
    for ranked in s.analyze():
        assert ranked.score == score_candidate(ranked, keywords, jitter=0).score


# ---------- Results ----------

def test_candidate_by_rank(session):
    with pytest.raises(NoResultsError):
        session.candidate_by_rank(1)

    session.add_files([_file("batch.pdf")])
    session.set_job_description(JD)
    session.analyze()

    assert session.candidate_by_rank(3).ranking == 3
    with pytest.raises(IndexError):
        session.candidate_by_rank(99)


def test_export_without_results(session, tmp_path):
    with pytest.raises(NoResultsError):
        session.export(tmp_path / "out.csv")


def test_export_after_analysis(session, tmp_path):
    session.add_file(_file("a.pdf"))
    session.set_job_description(JD)
    session.analyze()

    target = session.export(tmp_path / "out.csv")
    assert target.read_text(encoding="utf-8").startswith('"Rank","Name"')


def test_reset_clears_everything(session, caplog):
    session.add_file(_file("a.pdf"))
    session.set_job_description(JD)
    session.analyze()

    with caplog.at_level(logging.INFO):
        session.reset()

    assert session.uploaded_files == []
    assert session.job_description == ""
    assert session.ranked_candidates == []
    assert "Analysis reset" in caplog.text


def test_sessions_do_not_share_state():
    first = AnalysisSession()
    second = AnalysisSession()
    first.add_file(_file("a.pdf"))
    assert second.uploaded_files == []
    assert first.rng is not second.rng


@pytest.mark.parametrize("index", [-1, -3, 2])
def test_remove_file_rejects_out_of_range_index(session, index):
    session.add_files([_file("a.pdf"), _file("b.pdf")])

    with pytest.raises(IndexError):
        session.remove_file(index)
    assert [f.name for f in session.uploaded_files] == ["a.pdf", "b.pdf"]


def test_candidate_by_rank_unknown_rank_is_a_shortlist_error(session):
    session.add_file(_file("a.pdf"))
    session.set_job_description(JD)
    session.analyze()

    with pytest.raises(UnknownRankError, match="No candidate at rank 9") as info:
        session.candidate_by_rank(9)
    assert isinstance(info.value, ResumeShortlistError)
