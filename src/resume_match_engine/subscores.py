"""Sub-score calculators.

Each calculator maps raw analyzer signals for one factor to an integer
score in 0-100 (the red flag penalty returns 0-5). They are pure and
total: missing or non-numeric inputs fall back to a documented neutral
default instead of raising.

Rounding is half-up (2.5 -> 3, -2.5 -> -2) so scores match the values
already stored by report consumers.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from resume_match_core.constants import (
    COMPETITIVENESS_LEVELS,
    CRITICALITY_WEIGHTS,
    MAX_RED_FLAG_PENALTY,
    RECENT_SKILL_BONUS,
    RECENT_SKILL_MONTHS,
    SCORE_MAX,
    SCORE_MIN,
    STALE_SKILL_DISCOUNT,
    STALE_SKILL_MONTHS,
)
from resume_match_core.models.scores import coerce_number
from resume_match_core.models.signals import HardSkill, TransferableSkill

_WORD_PROCESSOR_MIME_RE = re.compile(r"word|officedocument", re.IGNORECASE)
_PDF_MIME_RE = re.compile(r"pdf", re.IGNORECASE)
_TEXT_MIME_RE = re.compile(r"text", re.IGNORECASE)
_RESUME_EXTENSION_RE = re.compile(r"\.(pdf|docx|doc|txt)$", re.IGNORECASE)
_CLEAN_FILENAME_RE = re.compile(r"^[a-z0-9._-]+$", re.IGNORECASE)

MAX_SOFT_SKILLS_EXPECTED = 8
SOFT_SKILL_CAP = 90
GRAPHICS_DENSITY_LIMIT = 0.1


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    """Clamp to the 0-100 score range and round half-up; NaN scores 0."""
    if math.isnan(value):
        return SCORE_MIN
    return round_half_up(max(SCORE_MIN, min(SCORE_MAX, value)))


def _number(value: object, default: float) -> float:
    number = coerce_number(value)
    return default if number is None else number


def _unit_interval(value: object, default: float) -> float:
    return max(0.0, min(1.0, _number(value, default)))


# ---------------------------------------------------------------------------
# A: Foundational ATS & searchability
# ---------------------------------------------------------------------------


def parsing_quality(
    *,
    mime: str | None = None,
    ocr: bool | None = None,
    multi_column: bool | None = None,
    tables: bool | None = None,
) -> int:
    """Score how reliably an ATS can parse the file.

    Word-processor documents parse best, then text-layer PDFs, plain
    text, and image-only PDFs that needed OCR. Multi-column layouts and
    embedded tables each cost 10 points.
    """
    mime_text = mime if isinstance(mime, str) else ""
    if _WORD_PROCESSOR_MIME_RE.search(mime_text):
        score = 100
    elif _PDF_MIME_RE.search(mime_text):
        score = 60 if ocr else 90
    elif _TEXT_MIME_RE.search(mime_text):
        score = 85
    else:
        score = 50

    if multi_column:
        score -= 10
    if tables:
        score -= 10
    return clamp_score(score)


def section_presence(
    *,
    experience: bool | None = None,
    education: bool | None = None,
    skills: bool | None = None,
    summary: bool | None = None,
) -> int:
    """Share of the four essential sections present."""
    present = sum(1 for flag in (experience, education, skills, summary) if flag)
    return clamp_score(present / 4 * 100)


def contact_completeness(
    *,
    email: object = None,
    phone: object = None,
    location: object = None,
) -> int:
    """Email 40, phone 40, location 20."""
    score = 0
    if email:
        score += 40
    if phone:
        score += 40
    if location:
        score += 20
    return clamp_score(score)


def date_validity(*, dates_valid: bool | None = None) -> int:
    """Consistent, parseable dates score 100; anything else 40."""
    return clamp_score(100 if dates_valid else 40)


def filename_quality(*, filename: str | None = None) -> int:
    """Clean professional filenames score 100, others (or unknown) 60."""
    if not filename or not isinstance(filename, str):
        return 60
    stem = _RESUME_EXTENSION_RE.sub("", filename)
    if _CLEAN_FILENAME_RE.match(stem):
        return 100
    return 60


def job_title_match(*, exact: bool | None = None, similarity: float | None = None) -> int:
    """Exact title match scores 100, otherwise the normalized similarity."""
    if exact:
        return 100
    return clamp_score(_number(similarity, 0.0) * 100)


def word_count_fit(*, words: int | None = None) -> int:
    """400-1200 words is ideal; 300-400 and 1200-1500 are acceptable."""
    count = _number(words, 0.0)
    if 400 <= count <= 1200:
        return 100
    if 300 <= count < 400 or 1200 < count <= 1500:
        return 70
    return 30


def web_presence(*, linkedin: bool | None = None, portfolio: bool | None = None) -> int:
    """LinkedIn 60, portfolio or personal site 40."""
    score = 0
    if linkedin:
        score += 60
    if portfolio:
        score += 40
    return clamp_score(score)


def formatting_pitfalls(
    *,
    has_text_boxes: bool | None = None,
    headers_footers: bool | None = None,
    graphics_density: float | None = None,
) -> int:
    """Start from 100 and deduct for layout elements ATS parsers drop."""
    score = 100
    if has_text_boxes:
        score -= 20
    if headers_footers:
        score -= 10
    if _number(graphics_density, 0.0) > GRAPHICS_DENSITY_LIMIT:
        score -= 20
    return clamp_score(score)


# ---------------------------------------------------------------------------
# B: Relevancy & skills
# ---------------------------------------------------------------------------


def _criticality_weight(criticality: str | None) -> float:
    if not isinstance(criticality, str):
        return 1.0
    return CRITICALITY_WEIGHTS.get(criticality.lower(), 1.0)


def hard_skill_match(*, skills: Iterable[HardSkill] | None = None) -> int:
    """Criticality-weighted share of job-required hard skills found.

    Critical skills weigh 3, required 2, preferred 1. A found skill used
    within the last 18 months earns 10% extra credit; one unused for more
    than 60 months earns 10% less. Returns 50 when no skill list is known.
    """
    if skills is None:
        return 50
    skill_list = list(skills)

    total_weight = sum(_criticality_weight(s.criticality) for s in skill_list) or 1.0
    earned_weight = 0.0
    for skill in skill_list:
        if not skill.found:
            continue
        weight = _criticality_weight(skill.criticality)
        months = coerce_number(skill.last_used_months)
        if months is not None:
            if months <= RECENT_SKILL_MONTHS:
                weight *= RECENT_SKILL_BONUS
            elif months > STALE_SKILL_MONTHS:
                weight *= STALE_SKILL_DISCOUNT
        earned_weight += weight

    return clamp_score(earned_weight / total_weight * 100)


def soft_skill_coverage(*, expected: int | None = None, found: int | None = None) -> int:
    """Found vs. expected soft skills (expected capped at 8), score capped at 90."""
    expected_count = max(1.0, min(MAX_SOFT_SKILLS_EXPECTED, _number(expected, 0.0)))
    found_count = max(0.0, min(_number(found, 0.0), expected_count))
    return clamp_score(min(SOFT_SKILL_CAP, found_count / expected_count * 100))


def transferable_skills(*, skills: Iterable[TransferableSkill] | None = None) -> int:
    """Weighted mean transfer credit; credit defaults to 0.5, weight to 1."""
    if skills is None:
        return 50
    skill_list = list(skills)

    total_weight = sum(_number(s.weight, 0.0) or 1.0 for s in skill_list) or 1.0
    earned = sum(
        (_number(s.credit, 0.0) or 0.5) * (_number(s.weight, 0.0) or 1.0) for s in skill_list
    )
    return clamp_score(earned / total_weight * 100)


def keyword_density(*, density_per_k: float | None = None) -> int:
    """Job-description term matches per 1000 words; 8-20 is ideal.

    Sparser resumes ramp linearly from 40 at zero to 100 at 8. Between
    20 and 30 the score decays 3 points per unit; above 30 the resume
    reads as keyword-stuffed and scores a flat 50.
    """
    density = _number(density_per_k, 0.0)
    if 8 <= density <= 20:
        return 100
    if density < 8:
        return clamp_score(40 + density / 8 * 60)
    if density > 30:
        return 50
    return clamp_score(100 - (density - 20) * 3)


def _sigmoid(x: float) -> float:
    # math.exp overflows for large -x
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def experience_fit(
    *,
    candidate_years: float | None = None,
    required_years: float | None = None,
) -> int:
    """Logistic fit around the required years, mapped to 40-100.

    Each two-year gap moves one unit along the sigmoid, so meeting the
    requirement exactly scores 70 and the curve is symmetric around it.
    """
    x = (_number(candidate_years, 0.0) - _number(required_years, 0.0)) / 2
    return clamp_score(40 + _sigmoid(x) * 60)


# ---------------------------------------------------------------------------
# C: Recruiter psychology
# ---------------------------------------------------------------------------


def readability(*, score: float | None = None) -> int:
    """Six-second impression score; 70 when unknown."""
    return clamp_score(_number(score, 70.0))


def authority_language(
    *,
    strong_pct: float | None = None,
    weak_pct: float | None = None,
) -> int:
    """Piecewise-linear curve on strong minus weak verb percentage.

    A delta of -20 or lower scores 0, balanced language scores 60 and a
    delta of +30 or higher scores 100.
    """
    delta = _number(strong_pct, 0.0) - _number(weak_pct, 0.0)
    if delta <= -20:
        return 0
    if delta >= 30:
        return 100
    if delta <= 0:
        return clamp_score(60 + delta / 20 * 60)
    return clamp_score(60 + delta / 30 * 40)


def narrative_coherence(*, score: float | None = None) -> int:
    """Career story coherence; 65 when unknown."""
    return clamp_score(_number(score, 65.0))


def red_flag_penalty(
    *,
    job_hopping: bool | None = None,
    long_gap: bool | None = None,
    skill_inflation: bool | None = None,
    severe_title_mismatch: bool | None = None,
) -> int:
    """Additive penalty points, capped at 5."""
    penalty = 0
    if job_hopping:
        penalty += 2
    if long_gap:
        penalty += 1
    if skill_inflation:
        penalty += 2
    if severe_title_mismatch:
        penalty += 1
    return min(MAX_RED_FLAG_PENALTY, penalty)


# ---------------------------------------------------------------------------
# D: Market & company context
# ---------------------------------------------------------------------------


def market_percentile(*, percentile: float | None = None) -> int:
    """Candidate position relative to the market; 50 when unknown."""
    return clamp_score(_number(percentile, 50.0))


def company_alignment(
    *,
    culture: float | None = None,
    stack: float | None = None,
    background: float | None = None,
) -> int:
    """Mean of whichever culture, stack and background scores are known."""
    known = [n for n in (coerce_number(v) for v in (culture, stack, background)) if n is not None]
    if not known:
        return 50
    return clamp_score(sum(known) / len(known))


def competitiveness(*, level: float | str | None = None) -> int:
    """Numeric competitiveness, or a hot/normal/crowded label (default normal)."""
    number = coerce_number(level) if not isinstance(level, str) else None
    if number is not None:
        return clamp_score(number)
    label = level.lower() if isinstance(level, str) else ""
    return clamp_score(COMPETITIVENESS_LEVELS.get(label, COMPETITIVENESS_LEVELS["normal"]))


# ---------------------------------------------------------------------------
# E: Predictive
# ---------------------------------------------------------------------------


def x_factor(*, score: float | None = None) -> int:
    """Uniqueness of the candidate's value proposition; 0 when unknown."""
    return clamp_score(_number(score, 0.0))


def future_proofing(
    *,
    automation_risk: float | None = None,
    future_leverage: float | None = None,
) -> int:
    """Blend 60% automation resistance with 40% future leverage.

    Both inputs are 0-1; risk defaults to 0.3 and leverage to 0.5.
    """
    resistance = 1 - _unit_interval(automation_risk, 0.3)
    leverage = _unit_interval(future_leverage, 0.5)
    return clamp_score((0.6 * resistance + 0.4 * leverage) * 100)
