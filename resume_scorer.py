# resume_scorer.py

from dataclasses import dataclass
from typing import Tuple

# -----------------------------
# Rules & Config
# -----------------------------

BASELINE_SCORE = 60
DEFAULT_ROLE = "Software Developer"
FRONTEND_ROLE = "Frontend Developer"

FRONTEND_KEYWORDS = ("react", "frontend")
LANGUAGE_KEYWORDS = ("java", "python")

FRONTEND_BONUS = 10
LANGUAGE_BONUS = 5


@dataclass(frozen=True)
class Finding:
    title: str
    description: str


@dataclass(frozen=True)
class Analysis:
    score: int
    role: str
    strengths: Tuple[Finding, ...]
    weaknesses: Tuple[Finding, ...]
    score_breakdown: Tuple[Tuple[str, int], ...]


FRONTEND_SKILLS = Finding("Frontend Skills", "React detected in resume name")
PROGRAMMING = Finding("Programming", "Programming language detected")
MISSING_PROJECTS = Finding("Projects", "Add projects section")
MISSING_EXPERIENCE = Finding("Experience", "Add experience section")
RESUME_UPLOADED = Finding("Resume Uploaded", "File recognized successfully")

# -----------------------------
# Scoring
# -----------------------------


def _contains_any(name: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in name for k in keywords)


def score_file_name(file_name: str) -> Analysis:
    """Score a resume by its file name alone.

    Matching is plain substring containment on the lower-cased name, so
    "javascript" counts as "java". The score starts at 60 and is not clamped.
    """
    name = file_name.lower()

    score = BASELINE_SCORE
    role = DEFAULT_ROLE
    strengths = []
    weaknesses = []
    breakdown = [("Baseline", BASELINE_SCORE)]

    if _contains_any(name, FRONTEND_KEYWORDS):
        strengths.append(FRONTEND_SKILLS)
        role = FRONTEND_ROLE
        score += FRONTEND_BONUS
        breakdown.append((FRONTEND_SKILLS.title, FRONTEND_BONUS))

    if _contains_any(name, LANGUAGE_KEYWORDS):
        strengths.append(PROGRAMMING)
        score += LANGUAGE_BONUS
        breakdown.append((PROGRAMMING.title, LANGUAGE_BONUS))

    if "project" not in name:
        weaknesses.append(MISSING_PROJECTS)

    if "experience" not in name:
        weaknesses.append(MISSING_EXPERIENCE)

    if not strengths:
        strengths.append(RESUME_UPLOADED)

    return Analysis(
        score=score,
        role=role,
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        score_breakdown=tuple(breakdown),
    )

# -----------------------------
# Export
# -----------------------------


def format_report(analysis: Analysis, file_name: str) -> str:
    def bullets(findings: Tuple[Finding, ...]) -> str:
        if not findings:
            return "- None"
        return "\n".join(f"- {f.title}: {f.description}" for f in findings)

    return (
        f"Resume: {file_name}\n"
        f"Score: {analysis.score}/100\n"
        f"Suggested Role: {analysis.role}\n\n"
        f"Strengths:\n{bullets(analysis.strengths)}\n\n"
        f"Weaknesses:\n{bullets(analysis.weaknesses)}\n"
    )
