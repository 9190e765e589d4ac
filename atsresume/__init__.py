"""
atsresume - Applicant Tracking System resume parsing and scoring

Turns the plain text recovered from an uploaded resume into a structured
record and scores that record against an optional job description.

Architecture:
- Intake Context: Tokenizing, section segmentation, field extraction and assembly
- Scoring Context: Keyword extraction, ATS sub-scores and optimization suggestions
- Utils: Configuration tables, logging, document decoding, persistence, AI stub
"""

__version__ = "0.1.0"
