"""Scoring factor and category catalog."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Weighted scoring categories, keyed by their stable wire codes."""

    FOUNDATIONAL = "A"  # ATS parsing and searchability
    RELEVANCY = "B"  # Skills and experience relevancy
    PSYCHOLOGY = "C"  # Recruiter psychology
    MARKET = "D"  # Market and company context, optional as a group
    PREDICTIVE = "E"  # Predictive enhancements


class Factor(StrEnum):
    """Every measured factor that contributes to the overall score."""

    PARSING_QUALITY = "A1"
    SECTION_PRESENCE = "A2"
    CONTACT_COMPLETENESS = "A3"
    DATE_VALIDITY = "A4"
    FILENAME_QUALITY = "A5"
    JOB_TITLE_MATCH = "A6"
    WORD_COUNT_FIT = "A7"
    WEB_PRESENCE = "A8"
    FORMATTING_PITFALLS = "A9"

    HARD_SKILL_MATCH = "B1"
    SOFT_SKILL_COVERAGE = "B2"
    TRANSFERABLE_SKILLS = "B3"
    KEYWORD_DENSITY = "B4"
    EXPERIENCE_FIT = "B5"

    READABILITY = "C1"
    AUTHORITY_LANGUAGE = "C2"
    NARRATIVE_COHERENCE = "C3"
    RED_FLAG_PENALTY = "redFlagPenalty"

    MARKET_PERCENTILE = "D1"
    COMPANY_ALIGNMENT = "D2"
    COMPETITIVENESS = "D3"

    X_FACTOR = "E1"
    FUTURE_PROOFING = "E2"

    @property
    def category(self) -> Category:
        """Category this factor belongs to."""
        if self is Factor.RED_FLAG_PENALTY:
            return Category.PSYCHOLOGY
        return Category(self.value[0])

    @property
    def is_penalty(self) -> bool:
        """True for the 0-5 point deduction applied after summation."""
        return self is Factor.RED_FLAG_PENALTY


MARKET_FACTORS: tuple[Factor, ...] = (
    Factor.MARKET_PERCENTILE,
    Factor.COMPANY_ALIGNMENT,
    Factor.COMPETITIVENESS,
)


def factors_in(category: Category, *, include_penalty: bool = False) -> tuple[Factor, ...]:
    """Return the factors of a category in catalog order."""
    return tuple(
        f
        for f in Factor
        if f.category is category and (include_penalty or not f.is_penalty)
    )
