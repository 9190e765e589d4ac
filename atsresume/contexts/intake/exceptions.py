"""Custom exceptions for the intake context."""

from typing import Optional


class ATSResumeError(Exception):
    """Base class for errors raised by atsresume."""


class UnsupportedFormatError(ATSResumeError):
    """
    Raised before parsing when an upload cannot be accepted at all
    (wrong document type or oversized file). Callers surface this to the user.

    Attributes:
        mime_type: Declared MIME type of the upload
        file_name: Name of the uploaded file, if known
        reason: Why the file was rejected
    """

    def __init__(self, mime_type: str, file_name: Optional[str] = None, reason: Optional[str] = None):
        self.mime_type = mime_type
        self.file_name = file_name
        self.reason = reason or "Unsupported file format. Please upload a PDF or DOCX file."

        parts = [self.reason]
        if file_name:
            parts.append(f"File: {file_name}")
        parts.append(f"Type: {mime_type}")

        super().__init__("\n".join(parts))


class DocumentDecodeError(ATSResumeError):
    """
    Raised when a supported document yields no text.

    Never reaches the end user: parse_resume_file() answers it with the
    guided template.

    Attributes:
        message: Error description
        file_name: Name of the uploaded file, if known
        original_error: The underlying library error, if any
    """

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.file_name = file_name
        self.original_error = original_error

        parts = [message]
        if file_name:
            parts.append(f"File: {file_name}")
        if original_error is not None:
            parts.append(f"Cause: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))


class EmptyResumeTextError(ATSResumeError):
    """Raised when the text handed to the parser is empty or near-empty."""
