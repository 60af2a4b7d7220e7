"""Improvement ranking and missing-skill recommendations."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from resume_match_core.constants import (
    DEFAULT_TOP_FIXES,
    FACTOR_DESCRIPTIONS,
    FACTOR_WEIGHTS,
    IMPROVEMENT_CANDIDATES,
    IMPROVEMENT_SCORE_THRESHOLD,
)
from resume_match_core.factors import Factor
from resume_match_core.models.scores import SubScoreRecord
from resume_match_core.models.signals import SkillsAnalysis


class Improvement(BaseModel):
    """A sub-optimal factor and the score it could recover."""

    model_config = ConfigDict(frozen=True)

    factor: Factor = Field(description="Factor code")
    score: float = Field(description="Current factor score 0-100")
    weight: float = Field(description="Factor weight used for the impact")
    impact: float = Field(description="Potential overall gain: (100 - score) * weight")
    description: str = Field(description="Human-readable factor name")


def rank_improvements(
    record: SubScoreRecord,
    weights: Mapping[str, float] | None = None,
    *,
    limit: int = DEFAULT_TOP_FIXES,
    threshold: float = IMPROVEMENT_SCORE_THRESHOLD,
) -> list[Improvement]:
    """Rank high-leverage factors scoring below the threshold by potential gain.

    ``weights`` may be keyed by Factor or by wire code (Factor is a str
    enum); a missing or zero weight falls back to the default table.
    """
    supplied = weights or {}
    issues: list[Improvement] = []
    for factor in IMPROVEMENT_CANDIDATES:
        score = record.score(factor) or 0.0
        if score >= threshold:
            continue
        weight = supplied.get(factor) or FACTOR_WEIGHTS[factor]
        issues.append(
            Improvement(
                factor=factor,
                score=score,
                weight=weight,
                impact=(100 - score) * weight,
                description=FACTOR_DESCRIPTIONS[factor],
            )
        )

    # sorted() is stable: ties keep shortlist order
    issues = sorted(issues, key=lambda i: i.impact, reverse=True)
    return issues[: max(0, limit)]


def recommend_missing_skills(skills: SkillsAnalysis | None, limit: int = 3) -> list[str]:
    """Critical job skills the resume lacks, topped up from the missing list."""
    if skills is None or limit <= 0:
        return []

    recommendations: list[str] = []
    for skill in skills.hard_skills or []:
        if len(recommendations) >= limit:
            break
        criticality = (skill.criticality or "").lower()
        if not skill.found and criticality == "critical" and skill.name not in recommendations:
            recommendations.append(skill.name)

    for name in skills.missing_hard_skills or []:
        if len(recommendations) >= limit:
            break
        if name not in recommendations:
            recommendations.append(name)

    return recommendations
