"""
Resume parsing entry points for the Intake context.

Pipeline (each stage runs exactly once per document):
    text -> lines -> tokens -> section ranges -> five independent extractors
         -> ResumeData

Parsing never fails on low-quality input. When almost nothing is recovered
the structure is still returned and the summary explains what happened;
callers only ever see an exception for input that is not text at all.
"""

from typing import Optional

from atsresume.contexts.intake.exceptions import DocumentDecodeError, EmptyResumeTextError
from atsresume.contexts.intake.extractors import (
    extract_contact,
    extract_education,
    extract_experience,
    extract_skills,
    extract_summary,
)
from atsresume.contexts.intake.logger import (
    _log_error,
    _log_info,
    _log_warning,
    log_parse_result,
    log_parse_start,
)
from atsresume.contexts.intake.resume_data_structure import (
    SECTION_ORDER,
    Education,
    Experience,
    ResumeData,
)
from atsresume.contexts.intake.segmenter import segment_sections
from atsresume.contexts.intake.tokenizer import tokenize
from atsresume.utils.document_decoder import decode_document
from atsresume.utils.text_processing import split_resume_lines

# Shorter stripped text is treated as "no text extracted"
MIN_TEXT_LENGTH = 10


def limited_success_summary(file_name: str = "your resume") -> str:
    return (
        f'Text was extracted from "{file_name}" but automatic parsing had limited success. '
        "Please review and edit the information below."
    )


def guided_summary(file_name: str) -> str:
    return (
        f'File "{file_name}" was uploaded successfully. Please fill in your information '
        "manually using the forms below. The ATS optimizer will still work perfectly to "
        "help you optimize your resume for job applications."
    )


def parse_resume_text(raw_text: str, file_name: Optional[str] = None) -> ResumeData:
    """
    Parse plain resume text into ResumeData.

    Args:
        raw_text: Text recovered from a resume document
        file_name: Used only in the limited-success summary

    Returns:
        ResumeData with sections == [contact, summary, experience, education, skills]

    Raises:
        TypeError: If raw_text is not a string
        EmptyResumeTextError: If the stripped text is shorter than 10 chars
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"Resume text must be str, got {type(raw_text).__name__}")
    if len(raw_text.strip()) < MIN_TEXT_LENGTH:
        raise EmptyResumeTextError(f"Resume text is empty or too short ({len(raw_text.strip())} chars)")

    lines = split_resume_lines(raw_text)
    log_parse_start(len(lines), len(raw_text))

    tokens = tokenize(lines)
    sections = segment_sections(lines)

    resume = ResumeData(
        contact=extract_contact(lines, tokens),
        summary=extract_summary(lines, sections),
        experience=extract_experience(lines, sections),
        education=extract_education(lines, sections),
        skills=extract_skills(lines, sections),
        sections=list(SECTION_ORDER),
    )

    limited = not resume.contact.full_name and not resume.contact.email and not resume.experience
    if limited and not resume.summary:
        resume.summary = limited_success_summary(file_name or "your resume")

    log_parse_result(resume, len(tokens), [s.section_type for s in sections])
    return resume


def create_guided_resume(file_name: str) -> ResumeData:
    """
    Blank resume for manual entry after a failed or empty upload.

    Holds one blank experience (with one blank bullet), one blank education
    entry and no skills, so forms have something to fill in.
    """
    return ResumeData(
        summary=guided_summary(file_name),
        experience=[Experience(id="exp-1", description=[""])],
        education=[Education(id="edu-1")],
        skills=[],
        sections=list(SECTION_ORDER),
    )


def parse_resume_document(text: Optional[str], file_name: str) -> ResumeData:
    """
    Parse text obtained from an uploaded document.

    Missing or near-empty text yields the guided template instead of an error.
    """
    if text is None or len(text.strip()) < MIN_TEXT_LENGTH:
        _log_warning(f"No usable text from {file_name}; using guided template")
        return create_guided_resume(file_name)
    return parse_resume_text(text, file_name=file_name)


def parse_resume_file(data: bytes, mime_type: str, file_name: str) -> ResumeData:
    """
    Decode and parse an uploaded resume file.

    Args:
        data: Raw file bytes
        mime_type: Declared MIME type
        file_name: Original file name

    Returns:
        Parsed ResumeData, or the guided template if the document yields no text

    Raises:
        UnsupportedFormatError: Wrong document type or file too large
    """
    try:
        text = decode_document(data, mime_type, file_name=file_name)
    except DocumentDecodeError as e:
        _log_error(f"Could not extract text from {file_name}: {e.message}")
        return create_guided_resume(file_name)

    _log_info(f"Extracted {len(text)} chars from {file_name}")
    return parse_resume_document(text, file_name)
