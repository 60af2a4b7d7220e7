"""Domain models for the resume match scoring engine."""

from resume_match_core.models.scores import (
    FACTOR_FIELDS,
    MarketState,
    ScoreBreakdown,
    ScoreMeta,
    ScoreResult,
    SubScoreRecord,
)
from resume_match_core.models.signals import (
    AnalyzerOutputs,
    AtsChecks,
    AuthorityLanguage,
    CompanyFit,
    ContactInfo,
    FileMeta,
    FormattingChecks,
    HardSkill,
    IndustryMarket,
    JobTitleMatch,
    PredictiveEstimates,
    RecruiterPsychology,
    RedFlag,
    SectionFlags,
    SkillsAnalysis,
    TransferableSkill,
)

__all__ = [
    "FACTOR_FIELDS",
    "AnalyzerOutputs",
    "AtsChecks",
    "AuthorityLanguage",
    "CompanyFit",
    "ContactInfo",
    "FileMeta",
    "FormattingChecks",
    "HardSkill",
    "IndustryMarket",
    "JobTitleMatch",
    "MarketState",
    "PredictiveEstimates",
    "RecruiterPsychology",
    "RedFlag",
    "ScoreBreakdown",
    "ScoreMeta",
    "ScoreResult",
    "SectionFlags",
    "SkillsAnalysis",
    "SubScoreRecord",
    "TransferableSkill",
]
