"""Shared loaders for jobs and contribution input files."""

from __future__ import annotations

from pathlib import Path

from ..domain.benefits import contributions_by_job
from ..domain.jobs import JobRecord
from ..exceptions import InputFileNotFoundError
from ..io_validation import parse_benefits_entries, parse_job_records
from ..observability import get_logger
from ..protocols import FileSystem


def load_jobs(path: Path, fs: FileSystem) -> list[JobRecord]:
    """Read and validate the job classifications for one report."""
    if not fs.exists(path):
        raise InputFileNotFoundError("Jobs file", str(path))
    jobs = parse_job_records(fs.read_csv(path), source=f"Jobs input ({path})")
    logger = get_logger("pay_equity_engine.inputs")
    logger.info("Loaded %s job classifications from %s", len(jobs), path)
    return jobs


def load_contributions(path: Path, fs: FileSystem) -> dict[int, float]:
    """Read monthly employer contributions keyed by job number.

    Jobs without a row are left out; the detector treats them as 0.
    """
    if not fs.exists(path):
        raise InputFileNotFoundError("Contributions file", str(path))
    entries = parse_benefits_entries(fs.read_csv(path), source=f"Contributions input ({path})")
    logger = get_logger("pay_equity_engine.inputs")
    logger.info("Loaded %s employer contributions from %s", len(entries), path)
    return contributions_by_job(entries)
