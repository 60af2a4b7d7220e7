"""Raw analyzer output models consumed by the scoring engine.

Each upstream analyzer (format/contact detector, skills matcher,
psychology analyzer, industry/market analyzer, company-fit analyzer,
predictive estimator) produces one of these shapes. Every field is
optional: a missing field means the analyzer could not supply that
signal, and the engine falls back to the calculator default.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RedFlag(StrEnum):
    """Red flag codes reported by the psychology analyzer."""

    JOB_HOPPING = "job_hopping"
    GAP = "gap"
    SKILL_INFLATION = "skill_inflation"
    TITLE_MISMATCH_SEVERE = "title_mismatch_severe"


class SignalModel(BaseModel):
    """Base for analyzer payloads: camelCase or snake_case keys, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Format / contact / section detector
# ---------------------------------------------------------------------------


class FileMeta(SignalModel):
    """Uploaded resume file metadata and layout detection."""

    filename: str | None = Field(default=None, description="Original upload filename")
    mime: str | None = Field(default=None, description="MIME type of the upload")
    ocr: bool | None = Field(default=None, description="Text was recovered via OCR")
    multi_column: bool | None = Field(default=None, description="Multi-column layout detected")
    tables: bool | None = Field(default=None, description="Embedded tables detected")


class SectionFlags(SignalModel):
    """Which essential resume sections were detected."""

    experience: bool | None = None
    education: bool | None = None
    skills: bool | None = None
    summary: bool | None = None


class ContactInfo(SignalModel):
    """Contact details and web presence links found in the resume."""

    email: bool | str | None = None
    phone: bool | str | None = None
    location: bool | str | None = None
    links: list[str] | None = Field(
        default=None, description="Link kinds found, e.g. 'linkedin', 'github', 'portfolio'"
    )


class JobTitleMatch(SignalModel):
    """Resume title vs. job title comparison."""

    exact: bool | None = None
    normalized_similarity: float | None = Field(default=None, description="Title similarity 0-1")


class FormattingChecks(SignalModel):
    """ATS formatting pitfalls detected in the document."""

    has_text_boxes: bool | None = None
    headers_footers: bool | None = None
    graphics_density: float | None = Field(
        default=None, description="Share of page area covered by graphics (0-1)"
    )


class AtsChecks(SignalModel):
    """Output of the format/contact/section detector."""

    file_meta: FileMeta | None = None
    sections: SectionFlags | None = None
    contact: ContactInfo | None = None
    dates_valid: bool | None = None
    job_title_match: JobTitleMatch | None = None
    word_count: int | None = None
    formatting: FormattingChecks | None = None


# ---------------------------------------------------------------------------
# Skills matcher
# ---------------------------------------------------------------------------


class HardSkill(SignalModel):
    """A hard skill required by the job description."""

    name: str
    criticality: str | None = Field(
        default=None, description="critical, required or preferred"
    )
    found: bool = Field(default=False, description="Skill appears in the resume")
    last_used_months: float | None = Field(
        default=None, description="Months since the candidate last used the skill"
    )


class TransferableSkill(SignalModel):
    """A skill credited partially toward a job requirement."""

    name: str
    credit: float | None = Field(default=None, description="Credit ratio 0-1")
    weight: float | None = Field(default=None, description="Relative importance")


class SkillsAnalysis(SignalModel):
    """Output of the skills-matching analyzer."""

    hard_skills: list[HardSkill] | None = None
    missing_hard_skills: list[str] | None = None
    soft_expected: int | None = None
    soft_found: list[str] | None = None
    transferable: list[TransferableSkill] | None = None
    keyword_density_per_k: float | None = Field(
        default=None, description="Job-description term matches per 1000 words"
    )
    years_candidate: float | None = None
    years_required: float | None = None


# ---------------------------------------------------------------------------
# Narrative / psychology analyzer
# ---------------------------------------------------------------------------


class AuthorityLanguage(SignalModel):
    """Share of strong vs. weak verbs in experience bullets."""

    strong_verb_pct: float | None = None
    weak_verb_pct: float | None = None


class RecruiterPsychology(SignalModel):
    """Output of the narrative/psychology analyzer."""

    six_second_impression: float | None = None
    authority_language: AuthorityLanguage | None = None
    narrative_coherence: float | None = None
    red_flags: list[str] | None = None


# ---------------------------------------------------------------------------
# Market, company and predictive analyzers
# ---------------------------------------------------------------------------


class IndustryMarket(SignalModel):
    """Output of the industry/market analyzer."""

    market_percentile: float | None = None
    competitiveness: float | str | None = Field(
        default=None, description="0-100 or one of hot, normal, crowded"
    )


class CompanyFit(SignalModel):
    """Output of the optional company-fit analyzer."""

    enabled: bool = False
    culture_alignment: float | None = None
    tech_stack_match: float | None = None
    background_fit: float | None = None


class PredictiveEstimates(SignalModel):
    """Output of the predictive-estimate analyzer."""

    x_factor: float | None = None
    automation_risk: float | None = None
    future_leverage: float | None = None


class AnalyzerOutputs(SignalModel):
    """All raw analyzer outputs assembled for a single scoring request."""

    ats_checks: AtsChecks | None = None
    skills: SkillsAnalysis | None = None
    recruiter_psychology: RecruiterPsychology | None = None
    industry: IndustryMarket | None = None
    company_fit: CompanyFit | None = None
    predictive: PredictiveEstimates | None = None
