"""Sub-score record and overall score result models."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resume_match_core.constants import MAX_RED_FLAG_PENALTY, SCORE_MAX, SCORE_MIN
from resume_match_core.factors import MARKET_FACTORS, Factor

# Python attribute name for each factor; aliases carry the wire codes
FACTOR_FIELDS: Mapping[Factor, str] = MappingProxyType(
    {
        Factor.PARSING_QUALITY: "parsing_quality",
        Factor.SECTION_PRESENCE: "section_presence",
        Factor.CONTACT_COMPLETENESS: "contact_completeness",
        Factor.DATE_VALIDITY: "date_validity",
        Factor.FILENAME_QUALITY: "filename_quality",
        Factor.JOB_TITLE_MATCH: "job_title_match",
        Factor.WORD_COUNT_FIT: "word_count_fit",
        Factor.WEB_PRESENCE: "web_presence",
        Factor.FORMATTING_PITFALLS: "formatting_pitfalls",
        Factor.HARD_SKILL_MATCH: "hard_skill_match",
        Factor.SOFT_SKILL_COVERAGE: "soft_skill_coverage",
        Factor.TRANSFERABLE_SKILLS: "transferable_skills",
        Factor.KEYWORD_DENSITY: "keyword_density",
        Factor.EXPERIENCE_FIT: "experience_fit",
        Factor.READABILITY: "readability",
        Factor.AUTHORITY_LANGUAGE: "authority_language",
        Factor.NARRATIVE_COHERENCE: "narrative_coherence",
        Factor.RED_FLAG_PENALTY: "red_flag_penalty",
        Factor.MARKET_PERCENTILE: "market_percentile",
        Factor.COMPANY_ALIGNMENT: "company_alignment",
        Factor.COMPETITIVENESS: "competitiveness",
        Factor.X_FACTOR: "x_factor",
        Factor.FUTURE_PROOFING: "future_proofing",
    }
)

_REQUIRED_SCORE_FIELDS = tuple(
    name
    for factor, name in FACTOR_FIELDS.items()
    if factor not in MARKET_FACTORS and not factor.is_penalty
)
_MARKET_FIELDS = tuple(FACTOR_FIELDS[f] for f in MARKET_FACTORS)


class MarketState(StrEnum):
    """Presence of the optional market/company category."""

    COMPLETE = "complete"  # all three D factors supplied
    ABSENT = "absent"  # no D factor supplied
    PARTIAL = "partial"  # some but not all; scored as absent


def coerce_number(value: object) -> float | None:
    """Coerce a raw value to a finite float, or None when not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SubScoreRecord(BaseModel):
    """One normalized measurement per factor plus signal coverage meta.

    Invalid values never raise: factor scores are clamped to 0-100
    (non-numeric becomes 0), the penalty to 0-5, and non-numeric market
    values are treated as absent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # A: Foundational ATS & searchability
    parsing_quality: float = Field(default=0.0, alias="A1")
    section_presence: float = Field(default=0.0, alias="A2")
    contact_completeness: float = Field(default=0.0, alias="A3")
    date_validity: float = Field(default=0.0, alias="A4")
    filename_quality: float = Field(default=0.0, alias="A5")
    job_title_match: float = Field(default=0.0, alias="A6")
    word_count_fit: float = Field(default=0.0, alias="A7")
    web_presence: float = Field(default=0.0, alias="A8")
    formatting_pitfalls: float = Field(default=0.0, alias="A9")

    # B: Relevancy & skills
    hard_skill_match: float = Field(default=0.0, alias="B1")
    soft_skill_coverage: float = Field(default=0.0, alias="B2")
    transferable_skills: float = Field(default=0.0, alias="B3")
    keyword_density: float = Field(default=0.0, alias="B4")
    experience_fit: float = Field(default=0.0, alias="B5")

    # C: Recruiter psychology
    readability: float = Field(default=0.0, alias="C1")
    authority_language: float = Field(default=0.0, alias="C2")
    narrative_coherence: float = Field(default=0.0, alias="C3")
    red_flag_penalty: float = Field(default=0.0, alias="redFlagPenalty")

    # D: Market & company context (all or nothing)
    market_percentile: float | None = Field(default=None, alias="D1")
    company_alignment: float | None = Field(default=None, alias="D2")
    competitiveness: float | None = Field(default=None, alias="D3")

    # E: Predictive
    x_factor: float = Field(default=0.0, alias="E1")
    future_proofing: float = Field(default=0.0, alias="E2")

    # Meta, used for confidence only
    signals_available: int = Field(default=0, alias="signalsAvailable")
    signals_total: int = Field(default=0, alias="signalsTotal")

    @field_validator(*_REQUIRED_SCORE_FIELDS, mode="before")
    @classmethod
    def clamp_score(cls, value: object) -> float:
        """Clamp factor scores to 0-100; non-numeric becomes 0."""
        number = coerce_number(value)
        if number is None:
            return 0.0
        return _clamp(number, SCORE_MIN, SCORE_MAX)

    @field_validator("red_flag_penalty", mode="before")
    @classmethod
    def clamp_penalty(cls, value: object) -> float:
        """Clamp the red flag penalty to 0-5."""
        number = coerce_number(value)
        if number is None:
            return 0.0
        return _clamp(number, 0, MAX_RED_FLAG_PENALTY)

    @field_validator(*_MARKET_FIELDS, mode="before")
    @classmethod
    def clamp_market(cls, value: object) -> float | None:
        """Clamp market factors to 0-100; non-numeric means absent."""
        number = coerce_number(value)
        if number is None:
            return None
        return _clamp(number, SCORE_MIN, SCORE_MAX)

    @field_validator("signals_available", "signals_total", mode="before")
    @classmethod
    def coerce_count(cls, value: object) -> int:
        """Signal counts are non-negative integers."""
        number = coerce_number(value)
        if number is None:
            return 0
        return max(0, int(number))

    @classmethod
    def from_factors(
        cls,
        scores: Mapping[Factor, float | None],
        *,
        signals_available: int = 0,
        signals_total: int = 0,
    ) -> SubScoreRecord:
        """Build a record from a factor -> score mapping."""
        values: dict[str, object] = {
            FACTOR_FIELDS[factor]: value for factor, value in scores.items()
        }
        return cls(
            signals_available=signals_available,
            signals_total=signals_total,
            **values,  # type: ignore[arg-type]
        )

    def score(self, factor: Factor) -> float | None:
        """Return the recorded value for a factor (None for absent market data)."""
        value: float | None = getattr(self, FACTOR_FIELDS[factor])
        return value

    @property
    def market_state(self) -> MarketState:
        """Classify the optional market category as complete, absent or partial."""
        present = sum(1 for f in MARKET_FACTORS if self.score(f) is not None)
        if present == len(MARKET_FACTORS):
            return MarketState.COMPLETE
        if present == 0:
            return MarketState.ABSENT
        return MarketState.PARTIAL


class ScoreBreakdown(BaseModel):
    """Per-category contributions, rounded to one decimal."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    foundational: float = Field(alias="A", description="Foundational ATS contribution")
    relevancy: float = Field(alias="B", description="Relevancy & skills contribution")
    psychology: float = Field(alias="C", description="Recruiter psychology contribution")
    market: float = Field(alias="D", description="Market contribution or reallocation")
    predictive: float = Field(alias="E", description="Predictive contribution")
    red_penalty: float = Field(alias="redPenalty", description="Red flag penalty applied")


class ScoreMeta(BaseModel):
    """How the score was derived."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    signals_used: int = Field(alias="signalsUsed")
    signals_total: int = Field(alias="signalsTotal")
    market_data_available: bool = Field(alias="marketDataAvailable")
    reallocation_applied: bool = Field(alias="reallocationApplied")
    market_state: MarketState = Field(alias="marketState")
    scoring_version: str = Field(alias="scoringVersion")


class ScoreResult(BaseModel):
    """Overall compatibility score with confidence band and breakdown."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    overall: int = Field(ge=0, le=100, description="Final score 0-100")
    band: int = Field(ge=3, description="Confidence band in +/- points")
    confidence: int = Field(ge=0, le=100, description="Signal coverage percentage")
    breakdown: ScoreBreakdown
    meta: ScoreMeta

    def to_wire(self) -> dict[str, object]:
        """Serialize with the stable camelCase/category keys used by report consumers."""
        return self.model_dump(mode="json", by_alias=True)
