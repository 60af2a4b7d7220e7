"""Deterministic multi-factor scoring engine for resume/job matching."""

from resume_match_engine.aggregator import compute_overall_score
from resume_match_engine.assembly import build_sub_scores
from resume_match_engine.availability import count_available_signals
from resume_match_engine.improvements import rank_improvements, recommend_missing_skills
from resume_match_engine.interpretation import interpret_score
from resume_match_engine.service import ScoreReport, ScoringService

__all__ = [
    "ScoreReport",
    "ScoringService",
    "build_sub_scores",
    "compute_overall_score",
    "count_available_signals",
    "interpret_score",
    "rank_improvements",
    "recommend_missing_skills",
]
