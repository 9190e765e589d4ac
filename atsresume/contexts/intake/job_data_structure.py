"""
Job description data structure for the Intake context.

Only `description` feeds the scoring engine; `requirements` and `keywords`
are carried for callers that populate them, but scoring derives its own
keyword list from the free text.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class JobDescription:
    title: str = ""
    company: str = ""
    description: str = ""
    requirements: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_text(
        cls, text: str, title: Optional[str] = None, company: Optional[str] = None
    ) -> "JobDescription":
        """
        Wrap raw job posting text.

        The title, when not given, is the first non-blank line of the text.
        """
        if title is None:
            first_line = next((line.strip() for line in text.splitlines() if line.strip()), "")
            title = first_line.lstrip("#").strip()
        return cls(title=title, company=company or "", description=text)

    @classmethod
    def from_file(cls, file_path: Path, **kwargs) -> "JobDescription":
        """Load job posting text from a file (see from_text for kwargs)."""
        return cls.from_text(Path(file_path).read_text(encoding="utf-8"), **kwargs)

    @classmethod
    def from_dict(cls, data: dict) -> "JobDescription":
        return cls(
            title=data.get("title", ""),
            company=data.get("company", ""),
            description=data.get("description", ""),
            requirements=list(data.get("requirements", [])),
            keywords=list(data.get("keywords", [])),
        )

    @classmethod
    def from_json(cls, text: str) -> "JobDescription":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "company": self.company,
            "description": self.description,
            "requirements": list(self.requirements),
            "keywords": list(self.keywords),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
