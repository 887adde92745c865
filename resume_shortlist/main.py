# main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tabulate import tabulate

from .config import DISPLAY_LIMIT, LOG_DIR, LOG_FILE, RANDOM_SEED
from .exceptions import MissingInputError, ResumeShortlistError
from .models import UploadedFile
from .ranker import render_candidate_detail, render_rankings
from .session import AnalysisSession
from .synthesizer import is_bulk_file, resumes_in_file
from .utils import format_file_size, parse_fake_file

logger = logging.getLogger(__name__)


# ---------- Logging Setup ----------
def setup_logging(verbose: bool = False) -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler(),
        ],
    )


# ---------- Inputs ----------
def collect_files(paths: List[str], fakes: List[str]) -> List[UploadedFile]:
    files: List[UploadedFile] = []
    for raw in paths:
        path = Path(raw)
        if not path.is_file():
            raise FileNotFoundError(f"Resume file not found: {path}")
        files.append(UploadedFile.from_path(path))

    for spec in fakes:
        name, size = parse_fake_file(spec)
        files.append(UploadedFile.from_name(name, size))
    return files


def read_job_description(args: argparse.Namespace) -> str:
    if args.job_text is not None:
        return args.job_text

    jd_file = Path(args.job)
    if not jd_file.exists():
        raise FileNotFoundError(f"JD file not found: {jd_file}")
    return jd_file.read_text(encoding="utf-8")


def _add_file_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        nargs="*",
        help="Resume files (PDF, DOC, DOCX); only their size is used",
    )
    parser.add_argument(
        "--fake",
        action="append",
        default=[],
        metavar="NAME:SIZE",
        help="Simulated upload, e.g. batch_resumes.pdf:750000 (repeatable)",
    )


# ---------- Commands ----------
def cmd_inspect(args: argparse.Namespace) -> None:
    session = AnalysisSession()
    session.add_files(collect_files(args.files, args.fake))

    table = [
        [
            idx,
            f.name,
            format_file_size(f.size),
            "Bulk File" if is_bulk_file(f) else "Individual Resume",
            resumes_in_file(f),
        ]
        for idx, f in enumerate(session.uploaded_files)
    ]
    print(
        tabulate(
            table,
            headers=["#", "File", "Size", "Type", "Est. Resumes"],
            tablefmt="github",
        )
    )
    print(f"\nTotal resumes: {session.total_resume_count()}")


def cmd_analyze(args: argparse.Namespace) -> None:
    seed = args.seed if args.seed is not None else RANDOM_SEED
    session = AnalysisSession.with_seed(
        seed, jitter=0.0 if args.deterministic else None
    )
    session.add_files(collect_files(args.files, args.fake))
    session.set_job_description(read_job_description(args))

    ranked = session.analyze(show_progress=not args.no_progress)

    # export runs before the --details lookup
    target = None
    if args.export is not None:
        target = session.export(Path(args.export) if args.export else None)

    detail = None
    if args.details is not None:
        detail = session.candidate_by_rank(args.details)

    if args.json:
        print(json.dumps([c.to_dict() for c in ranked[: args.top]], indent=2))
    else:
        print(render_rankings(ranked, top_k=args.top))
        if detail is not None:
            print()
            print(render_candidate_detail(detail))

    if target is not None:
        print(f"\nExported to {target}")


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resume shortlisting demo with simulated AI ranking"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    # ---- inspect ----
    inspect_parser = subparsers.add_parser(
        "inspect", help="Show accepted uploads and estimated resume counts"
    )
    _add_file_arguments(inspect_parser)

    # ---- analyze ----
    analyze_parser = subparsers.add_parser(
        "analyze", help="Rank candidates against a job description"
    )
    _add_file_arguments(analyze_parser)
    job_group = analyze_parser.add_mutually_exclusive_group(required=True)
    job_group.add_argument("--job", help="Path to job description text file")
    job_group.add_argument("--job-text", help="Job description given inline")
    analyze_parser.add_argument(
        "--top",
        type=int,
        default=DISPLAY_LIMIT,
        help=f"How many top candidates to show (default {DISPLAY_LIMIT})",
    )
    analyze_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible runs"
    )
    analyze_parser.add_argument(
        "--deterministic",
        action="store_true",
        help="Drop the random score bonus",
    )
    analyze_parser.add_argument(
        "--details",
        type=int,
        default=None,
        metavar="RANK",
        help="Show the detailed profile of the candidate at this rank",
    )
    analyze_parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Export rankings to CSV (default resume_rankings_<date>.csv)",
    )
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    analyze_parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "analyze" and args.top < 1:
        parser.error("--top must be at least 1")
    setup_logging(args.verbose)

    try:
        if args.command == "inspect":
            cmd_inspect(args)
        elif args.command == "analyze":
            cmd_analyze(args)
        else:
            parser.print_help()
        return 0

    except MissingInputError as exc:
        logger.warning("%s", exc)
    except ResumeShortlistError as exc:
        logger.error("%s", exc)
    except Exception as exc:
        logger.error("Command failed", exc_info=exc)
    return 1


if __name__ == "__main__":
    sys.exit(main())
