"""
Intake Context

Responsibilities:
- Decodes uploaded resume documents into plain text
- Tokenizes, segments and extracts resume fields
- Assembles ResumeData, falling back to a guided template when nothing usable is found
- Holds the JobDescription record scoring matches against

Owns: Resume and job description data structures, parsing logic
Never: Scores resumes or decides what to suggest
"""
