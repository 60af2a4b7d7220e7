"""Signal availability counter.

Counts how many of a fixed catalog of expected analyzer signals were
actually supplied. Presence is type-checked, not value-checked: a
supplied ``dates_valid=False`` is an available signal, an infinite
number is not (calculators ignore it too). The count only
drives the confidence estimate; calculators still produce their
defaults when a signal is missing.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from resume_match_core.factors import Factor
from resume_match_core.models.signals import (
    AnalyzerOutputs,
    AuthorityLanguage,
    CompanyFit,
    ContactInfo,
    FormattingChecks,
    JobTitleMatch,
    SectionFlags,
)

_NUMBER = (int, float)


def _is_number(value: object) -> bool:
    return isinstance(value, _NUMBER) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class SignalSpec:
    """One expected signal and how to detect it in the analyzer outputs.

    Primary signals map one-to-one onto factors. Supporting signals
    (supporting=True) refine a factor already covered by a primary one.
    """

    key: str
    factor: Factor
    check: Callable[[AnalyzerOutputs], bool]
    supporting: bool = False


@dataclass(frozen=True)
class SignalAvailability:
    """Result of counting available signals."""

    available: int
    total: int
    missing: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ratio(self) -> float:
        """Available share of the catalog, 0-1."""
        return self.available / max(1, self.total)


def _layout_detected(o: AnalyzerOutputs) -> bool:
    meta = o.ats_checks.file_meta if o.ats_checks else None
    return meta is not None and (
        isinstance(meta.multi_column, bool) or isinstance(meta.tables, bool)
    )


def _company_fit_supplied(o: AnalyzerOutputs) -> bool:
    return isinstance(o.company_fit, CompanyFit) and o.company_fit.enabled


def _future_signal(o: AnalyzerOutputs) -> bool:
    p = o.predictive
    return p is not None and (_is_number(p.automation_risk) or _is_number(p.future_leverage))


SIGNAL_CATALOG: tuple[SignalSpec, ...] = (
    # A: format / contact / section detector
    SignalSpec(
        "file_type",
        Factor.PARSING_QUALITY,
        lambda o: bool(o.ats_checks and o.ats_checks.file_meta)
        and isinstance(o.ats_checks.file_meta.mime, str),  # type: ignore[union-attr]
    ),
    SignalSpec("layout", Factor.PARSING_QUALITY, _layout_detected, supporting=True),
    SignalSpec(
        "sections",
        Factor.SECTION_PRESENCE,
        lambda o: o.ats_checks is not None and isinstance(o.ats_checks.sections, SectionFlags),
    ),
    SignalSpec(
        "contact",
        Factor.CONTACT_COMPLETENESS,
        lambda o: o.ats_checks is not None and isinstance(o.ats_checks.contact, ContactInfo),
    ),
    SignalSpec(
        "dates_valid",
        Factor.DATE_VALIDITY,
        lambda o: o.ats_checks is not None and isinstance(o.ats_checks.dates_valid, bool),
    ),
    SignalSpec(
        "filename",
        Factor.FILENAME_QUALITY,
        lambda o: bool(o.ats_checks and o.ats_checks.file_meta)
        and isinstance(o.ats_checks.file_meta.filename, str),  # type: ignore[union-attr]
    ),
    SignalSpec(
        "job_title_match",
        Factor.JOB_TITLE_MATCH,
        lambda o: o.ats_checks is not None
        and isinstance(o.ats_checks.job_title_match, JobTitleMatch),
    ),
    SignalSpec(
        "word_count",
        Factor.WORD_COUNT_FIT,
        lambda o: o.ats_checks is not None and _is_number(o.ats_checks.word_count),
    ),
    SignalSpec(
        "links",
        Factor.WEB_PRESENCE,
        lambda o: bool(o.ats_checks and o.ats_checks.contact)
        and isinstance(o.ats_checks.contact.links, list),  # type: ignore[union-attr]
    ),
    SignalSpec(
        "formatting",
        Factor.FORMATTING_PITFALLS,
        lambda o: o.ats_checks is not None
        and isinstance(o.ats_checks.formatting, FormattingChecks),
    ),
    # B: skills matcher
    SignalSpec(
        "hard_skills",
        Factor.HARD_SKILL_MATCH,
        lambda o: o.skills is not None and isinstance(o.skills.hard_skills, list),
    ),
    SignalSpec(
        "soft_found",
        Factor.SOFT_SKILL_COVERAGE,
        lambda o: o.skills is not None and isinstance(o.skills.soft_found, list),
    ),
    SignalSpec(
        "soft_expected",
        Factor.SOFT_SKILL_COVERAGE,
        lambda o: o.skills is not None and _is_number(o.skills.soft_expected),
        supporting=True,
    ),
    SignalSpec(
        "transferable",
        Factor.TRANSFERABLE_SKILLS,
        lambda o: o.skills is not None and isinstance(o.skills.transferable, list),
    ),
    SignalSpec(
        "keyword_density",
        Factor.KEYWORD_DENSITY,
        lambda o: o.skills is not None and _is_number(o.skills.keyword_density_per_k),
    ),
    SignalSpec(
        "years_candidate",
        Factor.EXPERIENCE_FIT,
        lambda o: o.skills is not None and _is_number(o.skills.years_candidate),
    ),
    SignalSpec(
        "years_required",
        Factor.EXPERIENCE_FIT,
        lambda o: o.skills is not None and _is_number(o.skills.years_required),
        supporting=True,
    ),
    # C: psychology analyzer
    SignalSpec(
        "six_second_impression",
        Factor.READABILITY,
        lambda o: o.recruiter_psychology is not None
        and _is_number(o.recruiter_psychology.six_second_impression),
    ),
    SignalSpec(
        "authority_language",
        Factor.AUTHORITY_LANGUAGE,
        lambda o: o.recruiter_psychology is not None
        and isinstance(o.recruiter_psychology.authority_language, AuthorityLanguage),
    ),
    SignalSpec(
        "narrative_coherence",
        Factor.NARRATIVE_COHERENCE,
        lambda o: o.recruiter_psychology is not None
        and _is_number(o.recruiter_psychology.narrative_coherence),
    ),
    SignalSpec(
        "red_flags",
        Factor.RED_FLAG_PENALTY,
        lambda o: o.recruiter_psychology is not None
        and isinstance(o.recruiter_psychology.red_flags, list),
    ),
    # D: market and company analyzers
    SignalSpec(
        "market_percentile",
        Factor.MARKET_PERCENTILE,
        lambda o: o.industry is not None and _is_number(o.industry.market_percentile),
    ),
    SignalSpec("company_fit", Factor.COMPANY_ALIGNMENT, _company_fit_supplied),
    SignalSpec(
        "competitiveness",
        Factor.COMPETITIVENESS,
        lambda o: o.industry is not None
        and (_is_number(o.industry.competitiveness) or isinstance(o.industry.competitiveness, str)),
    ),
    # E: predictive estimator
    SignalSpec(
        "x_factor",
        Factor.X_FACTOR,
        lambda o: o.predictive is not None and _is_number(o.predictive.x_factor),
    ),
    SignalSpec("future_proofing", Factor.FUTURE_PROOFING, _future_signal),
)

SIGNALS_TOTAL = len(SIGNAL_CATALOG)


def count_available_signals(outputs: AnalyzerOutputs | None) -> SignalAvailability:
    """Count catalog signals present in the analyzer outputs.

    ``total`` is always the catalog size, so confidence values stay
    comparable across requests regardless of which analyzers ran.
    """
    if outputs is None:
        outputs = AnalyzerOutputs()
    missing = tuple(spec.key for spec in SIGNAL_CATALOG if not spec.check(outputs))
    return SignalAvailability(
        available=SIGNALS_TOTAL - len(missing),
        total=SIGNALS_TOTAL,
        missing=missing,
    )
