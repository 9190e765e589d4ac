"""
JSON file store for the working resume and job description.

Keeps one resume and one job description under ATSRESUME_STORE_PATH
(default outs/store), so a CLI session can pick up where the last one left
off. Loading never raises: a missing or unreadable file logs and returns None.
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.resume_data_structure import ResumeData

load_dotenv()
STORE_PATH = Path(os.getenv("ATSRESUME_STORE_PATH", "outs/store"))

RESUME_FILE = "ats-resume-data.json"
JOB_DESCRIPTION_FILE = "ats-job-description.json"
STORE_FILES = (RESUME_FILE, JOB_DESCRIPTION_FILE)


class ResumeStore:
    """
    Save/load the current resume and job description as JSON files.

    Usage:
        store = ResumeStore()
        store.save_resume(resume)
        resume = store.load_resume()  # None if nothing saved
    """

    def __init__(self, store_path: Path = None):
        self.store_path = Path(store_path) if store_path is not None else STORE_PATH

    def _path(self, file_name: str) -> Path:
        return self.store_path / file_name

    def _write(self, file_name: str, payload: str) -> Path:
        self.store_path.mkdir(parents=True, exist_ok=True)
        path = self._path(file_name)
        path.write_text(payload, encoding="utf-8")
        logger.debug(f"Saved {path}")
        return path

    def _read(self, file_name: str) -> Optional[str]:
        path = self._path(file_name)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    # =========================================================================
    # RESUME
    # =========================================================================

    def save_resume(self, resume: ResumeData) -> Path:
        return self._write(RESUME_FILE, resume.to_json())

    def load_resume(self) -> Optional[ResumeData]:
        """Saved resume, or None if absent or unreadable."""
        text = self._read(RESUME_FILE)
        if text is None:
            return None
        try:
            return ResumeData.from_json(text)
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to load resume from {self._path(RESUME_FILE)}: {e}")
            return None

    # =========================================================================
    # JOB DESCRIPTION
    # =========================================================================

    def save_job_description(self, job: JobDescription) -> Path:
        return self._write(JOB_DESCRIPTION_FILE, job.to_json())

    def load_job_description(self) -> Optional[JobDescription]:
        """Saved job description, or None if absent or unreadable."""
        text = self._read(JOB_DESCRIPTION_FILE)
        if text is None:
            return None
        try:
            return JobDescription.from_json(text)
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to load job description from {self._path(JOB_DESCRIPTION_FILE)}: {e}")
            return None

    # =========================================================================
    # HOUSEKEEPING
    # =========================================================================

    def clear(self) -> None:
        """Delete every stored file."""
        for file_name in STORE_FILES:
            path = self._path(file_name)
            if path.exists():
                path.unlink()
                logger.debug(f"Removed {path}")

    def storage_size(self) -> str:
        """
        Human-readable total size of stored files.

        Returns:
            "N bytes" below 1 KB, otherwise "N.NN KB"
        """
        total = sum(self._path(f).stat().st_size for f in STORE_FILES if self._path(f).exists())
        return f"{total} bytes" if total < 1024 else f"{total / 1024:.2f} KB"
