"""Assemble a sub-score record from raw analyzer outputs.

Runs every calculator over the matching analyzer fields and embeds the
signal availability counts. Market factors are only recorded when
their analyzer actually supplied data, so the aggregator can tell a
complete market category from an absent or partial one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_match_core.constants import DEFAULT_SOFT_SKILLS_EXPECTED
from resume_match_core.factors import Factor
from resume_match_core.models.scores import SubScoreRecord
from resume_match_core.models.signals import (
    AnalyzerOutputs,
    AtsChecks,
    AuthorityLanguage,
    CompanyFit,
    ContactInfo,
    FileMeta,
    FormattingChecks,
    IndustryMarket,
    JobTitleMatch,
    PredictiveEstimates,
    RecruiterPsychology,
    RedFlag,
    SectionFlags,
    SkillsAnalysis,
)
from resume_match_engine import subscores
from resume_match_engine.availability import count_available_signals

if TYPE_CHECKING:
    from resume_match_core.config.settings import Settings


def _has_link(links: list[str], *, linkedin: bool) -> bool:
    lowered = [link.lower() for link in links]
    if linkedin:
        return any("linkedin" in link for link in lowered)
    return any("linkedin" not in link for link in lowered)


def foundational_scores(ats: AtsChecks | None) -> dict[Factor, float]:
    """Category A scores from the format/contact/section detector."""
    ats = ats or AtsChecks()
    meta = ats.file_meta or FileMeta()
    sections = ats.sections or SectionFlags()
    contact = ats.contact or ContactInfo()
    title = ats.job_title_match or JobTitleMatch()
    formatting = ats.formatting or FormattingChecks()
    links = contact.links or []

    return {
        Factor.PARSING_QUALITY: subscores.parsing_quality(
            mime=meta.mime, ocr=meta.ocr, multi_column=meta.multi_column, tables=meta.tables
        ),
        Factor.SECTION_PRESENCE: subscores.section_presence(
            experience=sections.experience,
            education=sections.education,
            skills=sections.skills,
            summary=sections.summary,
        ),
        Factor.CONTACT_COMPLETENESS: subscores.contact_completeness(
            email=contact.email, phone=contact.phone, location=contact.location
        ),
        Factor.DATE_VALIDITY: subscores.date_validity(dates_valid=ats.dates_valid),
        Factor.FILENAME_QUALITY: subscores.filename_quality(filename=meta.filename),
        Factor.JOB_TITLE_MATCH: subscores.job_title_match(
            exact=title.exact, similarity=title.normalized_similarity
        ),
        Factor.WORD_COUNT_FIT: subscores.word_count_fit(words=ats.word_count),
        Factor.WEB_PRESENCE: subscores.web_presence(
            linkedin=_has_link(links, linkedin=True),
            portfolio=_has_link(links, linkedin=False),
        ),
        Factor.FORMATTING_PITFALLS: subscores.formatting_pitfalls(
            has_text_boxes=formatting.has_text_boxes,
            headers_footers=formatting.headers_footers,
            graphics_density=formatting.graphics_density,
        ),
    }


def relevancy_scores(
    skills: SkillsAnalysis | None,
    *,
    soft_expected_default: int = DEFAULT_SOFT_SKILLS_EXPECTED,
) -> dict[Factor, float]:
    """Category B scores from the skills matcher."""
    skills = skills or SkillsAnalysis()
    soft_expected = (
        skills.soft_expected if skills.soft_expected is not None else soft_expected_default
    )
    return {
        Factor.HARD_SKILL_MATCH: subscores.hard_skill_match(skills=skills.hard_skills),
        Factor.SOFT_SKILL_COVERAGE: subscores.soft_skill_coverage(
            expected=soft_expected, found=len(skills.soft_found or [])
        ),
        Factor.TRANSFERABLE_SKILLS: subscores.transferable_skills(skills=skills.transferable),
        Factor.KEYWORD_DENSITY: subscores.keyword_density(
            density_per_k=skills.keyword_density_per_k
        ),
        Factor.EXPERIENCE_FIT: subscores.experience_fit(
            candidate_years=skills.years_candidate, required_years=skills.years_required
        ),
    }


def psychology_scores(psych: RecruiterPsychology | None) -> dict[Factor, float]:
    """Category C scores and the red flag penalty from the psychology analyzer."""
    psych = psych or RecruiterPsychology()
    authority = psych.authority_language or AuthorityLanguage()
    flags = {flag.lower() for flag in psych.red_flags or []}
    return {
        Factor.READABILITY: subscores.readability(score=psych.six_second_impression),
        Factor.AUTHORITY_LANGUAGE: subscores.authority_language(
            strong_pct=authority.strong_verb_pct, weak_pct=authority.weak_verb_pct
        ),
        Factor.NARRATIVE_COHERENCE: subscores.narrative_coherence(
            score=psych.narrative_coherence
        ),
        Factor.RED_FLAG_PENALTY: subscores.red_flag_penalty(
            job_hopping=RedFlag.JOB_HOPPING in flags,
            long_gap=RedFlag.GAP in flags,
            skill_inflation=RedFlag.SKILL_INFLATION in flags,
            severe_title_mismatch=RedFlag.TITLE_MISMATCH_SEVERE in flags,
        ),
    }


def market_scores(
    industry: IndustryMarket | None,
    company: CompanyFit | None,
) -> dict[Factor, float | None]:
    """Category D scores; a factor is None when its analyzer supplied nothing."""
    percentile: float | None = None
    level: float | None = None
    alignment: float | None = None

    if industry is not None and industry.market_percentile is not None:
        percentile = subscores.market_percentile(percentile=industry.market_percentile)
    if industry is not None and industry.competitiveness is not None:
        level = subscores.competitiveness(level=industry.competitiveness)
    if company is not None and company.enabled:
        alignment = subscores.company_alignment(
            culture=company.culture_alignment,
            stack=company.tech_stack_match,
            background=company.background_fit,
        )

    return {
        Factor.MARKET_PERCENTILE: percentile,
        Factor.COMPANY_ALIGNMENT: alignment,
        Factor.COMPETITIVENESS: level,
    }


def predictive_scores(predictive: PredictiveEstimates | None) -> dict[Factor, float]:
    """Category E scores from the predictive estimator."""
    predictive = predictive or PredictiveEstimates()
    return {
        Factor.X_FACTOR: subscores.x_factor(score=predictive.x_factor),
        Factor.FUTURE_PROOFING: subscores.future_proofing(
            automation_risk=predictive.automation_risk,
            future_leverage=predictive.future_leverage,
        ),
    }


def build_sub_scores(
    outputs: AnalyzerOutputs,
    settings: Settings | None = None,
) -> SubScoreRecord:
    """Run every calculator over the analyzer outputs and attach signal coverage."""
    soft_expected_default = (
        settings.default_soft_skills_expected if settings else DEFAULT_SOFT_SKILLS_EXPECTED
    )
    availability = count_available_signals(outputs)

    scores: dict[Factor, float | None] = {}
    scores.update(foundational_scores(outputs.ats_checks))
    scores.update(relevancy_scores(outputs.skills, soft_expected_default=soft_expected_default))
    scores.update(psychology_scores(outputs.recruiter_psychology))
    scores.update(market_scores(outputs.industry, outputs.company_fit))
    scores.update(predictive_scores(outputs.predictive))

    return SubScoreRecord.from_factors(
        scores,
        signals_available=availability.available,
        signals_total=availability.total,
    )
