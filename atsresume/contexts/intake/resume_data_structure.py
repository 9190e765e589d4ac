"""
Resume data structure for the Intake context.

Provides the structured record the parser produces, the scoring engine
consumes, and the store persists. JSON uses camelCase field names
(fullName, startDate, ...) so persisted resumes stay readable by other tools.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Display/export order; also the full set of allowed section tags
SECTION_ORDER = ("contact", "summary", "experience", "education", "skills")

PRESENT = "Present"


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class SkillCategory(str, Enum):
    TECHNICAL = "Technical"
    SOFT = "Soft"
    LANGUAGE = "Language"
    CERTIFICATION = "Certification"


@dataclass
class Contact:
    """Contact block. Every field is best-effort and may be an empty string."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""

    def to_dict(self) -> dict:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedin": self.linkedin,
            "github": self.github,
            "website": self.website,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Contact":
        return cls(
            full_name=data.get("fullName", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
            location=data.get("location", ""),
            linkedin=data.get("linkedin") or "",
            github=data.get("github") or "",
            website=data.get("website") or "",
        )


@dataclass
class Experience:
    """
    One work history entry.

    Dates are free-text tokens, never parsed into calendar types. When
    `current` is True the logical end date is "Present" whatever end_date holds.
    """

    id: str
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: List[str] = field(default_factory=list)

    @property
    def effective_end_date(self) -> str:
        return PRESENT if self.current else self.end_date

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company": self.company,
            "position": self.position,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "current": self.current,
            "description": list(self.description),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Experience":
        return cls(
            id=data.get("id", ""),
            company=data.get("company", ""),
            position=data.get("position", ""),
            location=data.get("location", ""),
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate", ""),
            current=bool(data.get("current", False)),
            description=list(data.get("description", [])),
        )


@dataclass
class Education:
    """One education entry. GPA is kept as an unvalidated string."""

    id: str
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "gpa": self.gpa,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Education":
        return cls(
            id=data.get("id", ""),
            institution=data.get("institution", ""),
            degree=data.get("degree", ""),
            field=data.get("field", ""),
            location=data.get("location", ""),
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate", ""),
            gpa=data.get("gpa", ""),
        )


@dataclass
class Skill:
    id: str
    name: str
    level: SkillLevel = SkillLevel.INTERMEDIATE
    category: SkillCategory = SkillCategory.TECHNICAL

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level.value,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Skill":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            level=SkillLevel(data.get("level", SkillLevel.INTERMEDIATE.value)),
            category=SkillCategory(data.get("category", SkillCategory.TECHNICAL.value)),
        )


@dataclass
class ResumeData:
    """
    Root aggregate for one resume.

    `sections` controls display/export order. It must hold unique tags drawn
    from SECTION_ORDER; anything else raises ValueError on construction.

    Factory methods:
        empty() - Blank "start fresh" resume
        from_dict(data) / from_json(text) - Restore persisted state
    """

    contact: Contact = field(default_factory=Contact)
    summary: str = ""
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    sections: List[str] = field(default_factory=lambda: list(SECTION_ORDER))

    def __post_init__(self):
        unknown = [s for s in self.sections if s not in SECTION_ORDER]
        if unknown:
            raise ValueError(f"Unknown resume section(s): {unknown}")
        if len(set(self.sections)) != len(self.sections):
            raise ValueError(f"Duplicate resume sections: {self.sections}")

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def empty(cls) -> "ResumeData":
        """Blank resume with every section enabled and no entries."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "ResumeData":
        return cls(
            contact=Contact.from_dict(data.get("contact", {})),
            summary=data.get("summary", ""),
            experience=[Experience.from_dict(e) for e in data.get("experience", [])],
            education=[Education.from_dict(e) for e in data.get("education", [])],
            skills=[Skill.from_dict(s) for s in data.get("skills", [])],
            sections=list(data.get("sections", SECTION_ORDER)),
        )

    @classmethod
    def from_json(cls, text: str) -> "ResumeData":
        return cls.from_dict(json.loads(text))

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> dict:
        return {
            "contact": self.contact.to_dict(),
            "summary": self.summary,
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "skills": [s.to_dict() for s in self.skills],
            "sections": list(self.sections),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
