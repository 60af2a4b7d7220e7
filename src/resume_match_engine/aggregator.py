"""Weighted aggregation of sub-scores into one explainable score.

Category subtotals use the versioned weight table. The market category
is optional as a group: when it is absent (or only partially supplied)
its 10% share is reallocated proportionally onto the foundational and
relevancy categories, so resumes without market data are not penalized
relative to those with it. The red flag penalty is subtracted after
summation, and signal coverage drives the confidence band.
"""

from __future__ import annotations

from collections.abc import Mapping

from resume_match_core.constants import (
    CONFIDENCE_BAND_SCALE,
    FACTOR_WEIGHTS,
    MARKET_REALLOCATION_SHARE,
    MAX_RED_FLAG_PENALTY,
    MIN_CONFIDENCE_BAND,
    PREDICTIVE_CAP,
    PREDICTIVE_DIVISOR,
    SCORE_MAX,
    SCORE_MIN,
    SCORING_MODEL_VERSION,
)
from resume_match_core.factors import Category, Factor, factors_in
from resume_match_core.models.scores import (
    MarketState,
    ScoreBreakdown,
    ScoreMeta,
    ScoreResult,
    SubScoreRecord,
)
from resume_match_engine.subscores import round_half_up


def round_one_decimal(value: float) -> float:
    """Half-up rounding to one decimal place."""
    return round_half_up(value * 10) / 10


def category_subtotal(
    record: SubScoreRecord,
    category: Category,
    weights: Mapping[Factor, float] = FACTOR_WEIGHTS,
) -> float:
    """Weighted sum of a category's factors (absent values count as 0)."""
    total = 0.0
    for factor in factors_in(category):
        total += weights[factor] * (record.score(factor) or 0.0)
    return total


def reallocated_market_contribution(foundational: float, relevancy: float) -> float:
    """Stand-in for the market category when its data is missing."""
    return MARKET_REALLOCATION_SHARE * (foundational + relevancy)


def predictive_contribution(x_factor: float, future_proofing: float) -> float:
    """Compress the two 0-100 predictive scores into at most 5 points."""
    return min(PREDICTIVE_CAP, (x_factor + future_proofing) / PREDICTIVE_DIVISOR)


def confidence_ratio(available: int, total: int) -> float:
    """Share of expected signals supplied, clamped to 0-1."""
    return max(0.0, min(1.0, available / max(1, total)))


def confidence_band(confidence: float) -> int:
    """Uncertainty in +/- points; never narrower than 3."""
    return max(MIN_CONFIDENCE_BAND, round_half_up((1 - confidence) * CONFIDENCE_BAND_SCALE))


def compute_overall_score(record: SubScoreRecord) -> ScoreResult:
    """Combine a sub-score record into the overall score result.

    overall = clamp(round(A + B + C + D + E - penalty), 0, 100), where D
    is either the weighted market subtotal or 10% of (A + B).
    """
    foundational = category_subtotal(record, Category.FOUNDATIONAL)
    relevancy = category_subtotal(record, Category.RELEVANCY)
    psychology = category_subtotal(record, Category.PSYCHOLOGY)

    market_state = record.market_state
    if market_state is MarketState.COMPLETE:
        market = category_subtotal(record, Category.MARKET)
        reallocation_applied = False
    else:
        # ABSENT and PARTIAL both fall back to full reallocation
        market = reallocated_market_contribution(foundational, relevancy)
        reallocation_applied = True

    predictive = predictive_contribution(record.x_factor, record.future_proofing)
    penalty = max(0.0, min(float(MAX_RED_FLAG_PENALTY), record.red_flag_penalty))

    raw = foundational + relevancy + psychology + market + predictive - penalty
    overall = max(SCORE_MIN, min(SCORE_MAX, round_half_up(raw)))

    confidence = confidence_ratio(record.signals_available, record.signals_total)

    return ScoreResult(
        overall=overall,
        band=confidence_band(confidence),
        confidence=round_half_up(confidence * 100),
        breakdown=ScoreBreakdown(
            foundational=round_one_decimal(foundational),
            relevancy=round_one_decimal(relevancy),
            psychology=round_one_decimal(psychology),
            market=round_one_decimal(market),
            predictive=round_one_decimal(predictive),
            red_penalty=round_one_decimal(penalty),
        ),
        meta=ScoreMeta(
            signals_used=record.signals_available,
            signals_total=record.signals_total,
            market_data_available=market_state is MarketState.COMPLETE,
            reallocation_applied=reallocation_applied,
            market_state=market_state,
            scoring_version=SCORING_MODEL_VERSION,
        ),
    )
