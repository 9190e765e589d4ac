"""
Bounded contexts for atsresume.

- intake: raw resume text to structured ResumeData
- scoring: ResumeData (+ job description) to ATSScore and suggestions
"""
