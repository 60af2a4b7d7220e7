"""Scoring service: analyzer outputs in, explainable score report out."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resume_match_core.config.settings import Settings
from resume_match_core.exceptions import AnalysisPayloadError
from resume_match_core.models.scores import MarketState, ScoreResult, SubScoreRecord
from resume_match_core.models.signals import AnalyzerOutputs
from resume_match_engine.aggregator import compute_overall_score
from resume_match_engine.assembly import build_sub_scores
from resume_match_engine.improvements import (
    Improvement,
    rank_improvements,
    recommend_missing_skills,
)
from resume_match_engine.interpretation import ScoreInterpretation, interpret_score

logger = structlog.get_logger()


class ScoreReport(BaseModel):
    """Everything a caller needs to render or persist one scoring request."""

    model_config = ConfigDict(frozen=True)

    sub_scores: SubScoreRecord
    result: ScoreResult
    top_fixes: list[Improvement] = Field(default_factory=list)
    interpretation: ScoreInterpretation
    recommended_skills: list[str] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready report using the stable keys existing consumers expect."""
        return {
            "overallScoreV2": self.result.to_wire(),
            "subscoresV2": self.sub_scores.model_dump(mode="json", by_alias=True),
            "topFixes": [fix.model_dump(mode="json") for fix in self.top_fixes],
            "interpretation": self.interpretation.model_dump(mode="json"),
            "recommendedSkills": list(self.recommended_skills),
            "overallScore": self.result.overall,
        }


class ScoringService:
    """Score analyzer outputs with the versioned weight table."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def score(self, outputs: AnalyzerOutputs) -> ScoreReport:
        """Compute sub-scores, the overall result, top fixes and recommendations."""
        start = time.monotonic()
        record = build_sub_scores(outputs, self.settings)

        if record.market_state is MarketState.PARTIAL:
            logger.warning(
                "market_data_partial",
                market_percentile=record.market_percentile,
                company_alignment=record.company_alignment,
                competitiveness=record.competitiveness,
            )

        result = compute_overall_score(record)
        report = ScoreReport(
            sub_scores=record,
            result=result,
            top_fixes=rank_improvements(record, limit=self.settings.top_fixes_limit),
            interpretation=interpret_score(result.overall),
            recommended_skills=recommend_missing_skills(
                outputs.skills, limit=self.settings.recommended_skills_limit
            ),
        )

        logger.info(
            "score_computed",
            overall=result.overall,
            band=result.band,
            confidence=result.confidence,
            market_state=result.meta.market_state.value,
            reallocation_applied=result.meta.reallocation_applied,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        return report

    def score_payload(self, payload: object) -> ScoreReport:
        """Validate a raw JSON-shaped payload, then score it.

        Raises:
            AnalysisPayloadError: If the payload is not a JSON object or a
                field has a malformed type.
        """
        if not isinstance(payload, Mapping):
            msg = f"analyzer payload must be a JSON object, got {type(payload).__name__}"
            logger.warning("analysis_payload_invalid", reason=msg)
            raise AnalysisPayloadError(msg)
        try:
            outputs = AnalyzerOutputs.model_validate(dict(payload))
        except ValidationError as e:
            logger.warning("analysis_payload_invalid", errors=e.error_count())
            raise AnalysisPayloadError(f"invalid analyzer payload: {e}") from e
        return self.score(outputs)
