"""Human-readable interpretation of an overall score."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

ScoreColor = Literal["green", "blue", "yellow", "orange", "red"]


class ScoreInterpretation(BaseModel):
    """Display level for an overall score."""

    model_config = ConfigDict(frozen=True)

    level: str
    description: str
    color: ScoreColor


# (minimum score, interpretation), highest first
_LEVELS: tuple[tuple[int, ScoreInterpretation], ...] = (
    (
        90,
        ScoreInterpretation(
            level="Exceptional",
            description="Outstanding ATS optimization with excellent recruiter appeal",
            color="green",
        ),
    ),
    (
        80,
        ScoreInterpretation(
            level="Strong",
            description="Well-optimized resume with good ATS compatibility",
            color="blue",
        ),
    ),
    (
        70,
        ScoreInterpretation(
            level="Good",
            description="Solid foundation with some optimization opportunities",
            color="yellow",
        ),
    ),
    (
        60,
        ScoreInterpretation(
            level="Fair",
            description="Basic ATS compatibility with significant improvement potential",
            color="orange",
        ),
    ),
)

_NEEDS_WORK = ScoreInterpretation(
    level="Needs Work",
    description="Major optimization needed for ATS and recruiter success",
    color="red",
)


def interpret_score(score: float) -> ScoreInterpretation:
    """Map an overall score to its display level."""
    for minimum, interpretation in _LEVELS:
        if score >= minimum:
            return interpretation
    return _NEEDS_WORK
