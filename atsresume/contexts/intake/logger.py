"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atsresume.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path = None, source: str = "text") -> Path:
    """
    Setup logger for the intake context.

    Args:
        log_dir: Directory for this parsing session
        source: Where the resume text came from ("text", "pdf", "docx", ...)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_parse_start(line_count: int, char_count: int) -> None:
    """Log start of a parse with input size."""
    _log_info(f"Parsing resume text ({line_count} lines, {char_count} chars)")


def log_parse_result(resume, token_count: int, section_types: list) -> None:
    """
    Log what a parse recovered.

    Args:
        resume: ResumeData produced by the assembler
        token_count: Number of tokens the tokenizer emitted
        section_types: Section types the segmenter accepted, in order
    """
    _log_debug(f"Tokens: {token_count}, sections: {section_types}")

    found = []
    if resume.contact.full_name:
        found.append("name")
    if resume.contact.email:
        found.append("email")
    if resume.contact.phone:
        found.append("phone")

    summary = (
        f"contact fields: {', '.join(found) or 'none'}; "
        f"{len(resume.experience)} experience, "
        f"{len(resume.education)} education, "
        f"{len(resume.skills)} skills"
    )

    if found or resume.experience:
        _log_success(f"Parsed resume ({summary})")
    else:
        _log_warning(f"Parsing had limited success ({summary})")
