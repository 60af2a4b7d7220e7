"""Shared constants for the scoring engine.

The weight table is versioned: any change to a weight or threshold
below must bump SCORING_MODEL_VERSION so stored results stay comparable.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from resume_match_core.factors import Factor

SCORING_MODEL_VERSION = "v2"

# Factor weights. The penalty share is nominal: the penalty itself is
# applied as 0-5 points after summation. E1/E2 are 1/40 each.
FACTOR_WEIGHTS: Mapping[Factor, float] = MappingProxyType(
    {
        Factor.PARSING_QUALITY: 0.15,
        Factor.SECTION_PRESENCE: 0.05,
        Factor.CONTACT_COMPLETENESS: 0.03,
        Factor.DATE_VALIDITY: 0.02,
        Factor.FILENAME_QUALITY: 0.01,
        Factor.JOB_TITLE_MATCH: 0.06,
        Factor.WORD_COUNT_FIT: 0.03,
        Factor.WEB_PRESENCE: 0.02,
        Factor.FORMATTING_PITFALLS: 0.03,
        Factor.HARD_SKILL_MATCH: 0.18,
        Factor.SOFT_SKILL_COVERAGE: 0.04,
        Factor.TRANSFERABLE_SKILLS: 0.03,
        Factor.KEYWORD_DENSITY: 0.05,
        Factor.EXPERIENCE_FIT: 0.05,
        Factor.READABILITY: 0.03,
        Factor.AUTHORITY_LANGUAGE: 0.03,
        Factor.NARRATIVE_COHERENCE: 0.02,
        Factor.RED_FLAG_PENALTY: 0.02,
        Factor.MARKET_PERCENTILE: 0.04,
        Factor.COMPANY_ALIGNMENT: 0.03,
        Factor.COMPETITIVENESS: 0.03,
        Factor.X_FACTOR: 0.025,
        Factor.FUTURE_PROOFING: 0.025,
    }
)

FACTOR_DESCRIPTIONS: Mapping[Factor, str] = MappingProxyType(
    {
        Factor.PARSING_QUALITY: "File format and parsing quality",
        Factor.SECTION_PRESENCE: "Essential sections presence",
        Factor.CONTACT_COMPLETENESS: "Contact information completeness",
        Factor.DATE_VALIDITY: "Date formatting validity",
        Factor.FILENAME_QUALITY: "Filename optimization",
        Factor.JOB_TITLE_MATCH: "Job title matching",
        Factor.WORD_COUNT_FIT: "Word count optimization",
        Factor.WEB_PRESENCE: "Web presence links",
        Factor.FORMATTING_PITFALLS: "Formatting pitfalls avoidance",
        Factor.HARD_SKILL_MATCH: "Hard skills from job description",
        Factor.SOFT_SKILL_COVERAGE: "Soft skills coverage",
        Factor.TRANSFERABLE_SKILLS: "Transferable skills value",
        Factor.KEYWORD_DENSITY: "Keyword density optimization",
        Factor.EXPERIENCE_FIT: "Experience level alignment",
        Factor.READABILITY: "6-second readability impression",
        Factor.AUTHORITY_LANGUAGE: "Authority language strength",
        Factor.NARRATIVE_COHERENCE: "Narrative coherence",
        Factor.RED_FLAG_PENALTY: "Red flag penalty",
        Factor.MARKET_PERCENTILE: "Market percentile positioning",
        Factor.COMPANY_ALIGNMENT: "Company culture, stack and background alignment",
        Factor.COMPETITIVENESS: "Market competitiveness",
        Factor.X_FACTOR: "X-factor uniqueness",
        Factor.FUTURE_PROOFING: "Future-proofing (automation resistance and leverage)",
    }
)

# Expected soft skill count when the skills analyzer reports none
DEFAULT_SOFT_SKILLS_EXPECTED = 5

# --- Score bounds ---
SCORE_MIN = 0
SCORE_MAX = 100
MAX_RED_FLAG_PENALTY = 5

# --- Market reallocation ---
# Weight share of category D moved onto A + B when market data is missing
MARKET_REALLOCATION_SHARE = 0.10

# --- Predictive category ---
PREDICTIVE_DIVISOR = 40.0
PREDICTIVE_CAP = 5.0

# --- Confidence ---
MIN_CONFIDENCE_BAND = 3
CONFIDENCE_BAND_SCALE = 10

# --- Improvement ranking ---
IMPROVEMENT_CANDIDATES: tuple[Factor, ...] = (
    Factor.PARSING_QUALITY,
    Factor.JOB_TITLE_MATCH,
    Factor.HARD_SKILL_MATCH,
    Factor.KEYWORD_DENSITY,
    Factor.EXPERIENCE_FIT,
    Factor.READABILITY,
    Factor.AUTHORITY_LANGUAGE,
)
IMPROVEMENT_SCORE_THRESHOLD = 80
DEFAULT_TOP_FIXES = 3

# --- Hard skill criticality weights ---
CRITICALITY_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {"critical": 3.0, "required": 2.0, "preferred": 1.0}
)
RECENT_SKILL_MONTHS = 18
STALE_SKILL_MONTHS = 60
RECENT_SKILL_BONUS = 1.1
STALE_SKILL_DISCOUNT = 0.9

# --- Competitiveness labels ---
COMPETITIVENESS_LEVELS: Mapping[str, int] = MappingProxyType(
    {"hot": 100, "normal": 80, "crowded": 60}
)
