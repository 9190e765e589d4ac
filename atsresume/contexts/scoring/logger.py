"""
Scoring context logger.

Provides logging interface for the scoring context with automatic [scoring] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atsresume.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[scoring]"


def setup_scoring_logger(log_dir: Path = None, job_title: str = None) -> Path:
    """
    Setup logger for the scoring context.

    Args:
        log_dir: Directory for this scoring session
        job_title: Title of the job description scored against, if any

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="scoring",
        log_dir=log_dir,
        extra_provenance={"Job": job_title or "(none)"},
    )


def _log_info(message: str) -> None:
    """Log info message with [scoring] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [scoring] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [scoring] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_score_result(score, has_job_description: bool) -> None:
    """
    Log a computed ATS score.

    Args:
        score: ATSScore just computed
        has_job_description: Whether keyword matching ran against a posting
    """
    _log_debug(
        f"Sub-scores: keyword={score.keyword_match} formatting={score.formatting} "
        f"structure={score.structure}"
    )
    if has_job_description:
        details = score.details
        _log_debug(
            f"Keywords matched {len(details.matched_keywords)}/"
            f"{len(details.matched_keywords) + len(details.missing_keywords)}"
        )
    for warning in score.details.warnings:
        _log_warning(warning)
    _log_info(f"ATS score {score.overall}/100")
