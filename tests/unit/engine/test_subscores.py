"""Tests for the sub-score calculators."""

from __future__ import annotations

import pytest

from resume_match_core.models.signals import HardSkill, TransferableSkill
from resume_match_engine import subscores


@pytest.mark.unit
class TestRounding:
    """Half-up rounding helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(77.5, 78), (72.5, 73), (0.5, 1), (1.49, 1), (-2.5, -2), (-2.6, -3)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        """Ties round toward positive infinity."""
        assert subscores.round_half_up(value) == expected

    def test_clamp_score(self) -> None:
        """Scores are clamped to 0-100."""
        assert subscores.clamp_score(120.4) == 100
        assert subscores.clamp_score(-3) == 0
        assert subscores.clamp_score(49.5) == 50


@pytest.mark.unit
class TestFoundationalCalculators:
    """Category A calculators."""

    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({"mime": "application/vnd.openxmlformats-officedocument.wordprocessingml.document"}, 100),
            ({"mime": "application/msword"}, 100),
            ({"mime": "application/pdf"}, 90),
            ({"mime": "application/pdf", "ocr": True}, 60),
            ({"mime": "text/plain"}, 85),
            ({"mime": "image/png"}, 50),
            ({}, 50),
            ({"mime": "application/pdf", "multi_column": True, "tables": True}, 70),
            ({"mime": "application/pdf", "ocr": True, "multi_column": True}, 50),
        ],
    )
    def test_parsing_quality(self, kwargs: dict[str, object], expected: int) -> None:
        """Format base score minus layout penalties."""
        assert subscores.parsing_quality(**kwargs) == expected  # type: ignore[arg-type]

    def test_section_presence(self) -> None:
        """Each of four sections is worth 25."""
        assert subscores.section_presence() == 0
        assert subscores.section_presence(experience=True, skills=True) == 50
        assert (
            subscores.section_presence(experience=True, education=True, skills=True, summary=True)
            == 100
        )

    def test_contact_completeness(self) -> None:
        """Email 40, phone 40, location 20."""
        assert subscores.contact_completeness() == 0
        assert subscores.contact_completeness(email="a@b.co") == 40
        assert subscores.contact_completeness(email=True, phone=True) == 80
        assert subscores.contact_completeness(email=True, phone=True, location="NYC") == 100

    def test_date_validity(self) -> None:
        """Valid dates 100, otherwise 40."""
        assert subscores.date_validity(dates_valid=True) == 100
        assert subscores.date_validity(dates_valid=False) == 40
        assert subscores.date_validity() == 40

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("jane_doe_resume.pdf", 100),
            ("Jane-Doe.CV.docx", 100),
            ("resume (final) v2!.pdf", 60),
            ("", 60),
            (None, 60),
        ],
    )
    def test_filename_quality(self, filename: str | None, expected: int) -> None:
        """Clean filenames score 100."""
        assert subscores.filename_quality(filename=filename) == expected

    def test_job_title_match(self) -> None:
        """Exact match wins, otherwise similarity percentage."""
        assert subscores.job_title_match(exact=True, similarity=0.1) == 100
        assert subscores.job_title_match(similarity=0.734) == 73
        assert subscores.job_title_match(similarity=0.746) == 75
        assert subscores.job_title_match() == 0

    @pytest.mark.parametrize(
        ("words", "expected"),
        [
            (800, 100),
            (400, 100),
            (1200, 100),
            (350, 70),
            (300, 70),
            (1201, 70),
            (1500, 70),
            (2000, 30),
            (299, 30),
            (None, 30),
        ],
    )
    def test_word_count_fit(self, words: int | None, expected: int) -> None:
        """Ideal, acceptable and poor word-count bands."""
        assert subscores.word_count_fit(words=words) == expected

    def test_web_presence(self) -> None:
        """LinkedIn 60, portfolio 40."""
        assert subscores.web_presence() == 0
        assert subscores.web_presence(linkedin=True) == 60
        assert subscores.web_presence(portfolio=True) == 40
        assert subscores.web_presence(linkedin=True, portfolio=True) == 100

    def test_formatting_pitfalls(self) -> None:
        """Deductions for text boxes, headers/footers and heavy graphics."""
        assert subscores.formatting_pitfalls() == 100
        assert subscores.formatting_pitfalls(has_text_boxes=True) == 80
        assert subscores.formatting_pitfalls(graphics_density=0.1) == 100
        assert (
            subscores.formatting_pitfalls(
                has_text_boxes=True, headers_footers=True, graphics_density=0.4
            )
            == 50
        )


@pytest.mark.unit
class TestRelevancyCalculators:
    """Category B calculators."""

    def test_hard_skill_default_without_list(self) -> None:
        """No skill list scores a neutral 50."""
        assert subscores.hard_skill_match() == 50

    def test_hard_skill_empty_list(self) -> None:
        """An empty list earns nothing."""
        assert subscores.hard_skill_match(skills=[]) == 0

    def test_hard_skill_weighted_by_criticality(self) -> None:
        """Critical (3) found, required (2) missing -> 60."""
        skills = [
            HardSkill(name="Python", criticality="critical", found=True),
            HardSkill(name="Go", criticality="required", found=False),
        ]
        assert subscores.hard_skill_match(skills=skills) == 60

    def test_hard_skill_recency_adjustments(self) -> None:
        """Recent use earns 1.1x, stale use 0.9x, mid-range unchanged."""
        recent = [HardSkill(name="A", criticality="required", found=True, last_used_months=6),
                  HardSkill(name="B", criticality="required", found=False)]
        stale = [HardSkill(name="A", criticality="required", found=True, last_used_months=72),
                 HardSkill(name="B", criticality="required", found=False)]
        middle = [HardSkill(name="A", criticality="required", found=True, last_used_months=36),
                  HardSkill(name="B", criticality="required", found=False)]
        assert subscores.hard_skill_match(skills=recent) == 55
        assert subscores.hard_skill_match(skills=stale) == 45
        assert subscores.hard_skill_match(skills=middle) == 50

    def test_hard_skill_capped_at_100(self) -> None:
        """Recency bonus cannot push the score past 100."""
        skills = [HardSkill(name="A", criticality="critical", found=True, last_used_months=1)]
        assert subscores.hard_skill_match(skills=skills) == 100

    def test_hard_skill_unknown_criticality_weighs_one(self) -> None:
        """Unknown criticality counts like preferred."""
        skills = [
            HardSkill(name="A", criticality="nice-to-have", found=True),
            HardSkill(name="B", criticality="critical", found=False),
        ]
        assert subscores.hard_skill_match(skills=skills) == 25

    def test_soft_skill_coverage(self) -> None:
        """Coverage ratio capped at 90."""
        assert subscores.soft_skill_coverage(expected=5, found=2) == 40
        assert subscores.soft_skill_coverage(expected=5, found=9) == 90
        assert subscores.soft_skill_coverage(expected=20, found=4) == 50
        assert subscores.soft_skill_coverage() == 0
        assert subscores.soft_skill_coverage(found=1) == 90

    def test_transferable_skills(self) -> None:
        """Weighted mean credit with 0.5 / 1 defaults."""
        assert subscores.transferable_skills() == 50
        assert subscores.transferable_skills(skills=[]) == 0
        skills = [
            TransferableSkill(name="Airflow", credit=0.75, weight=3),
            TransferableSkill(name="Excel"),
        ]
        # (0.75 * 3 + 0.5 * 1) / 4 = 0.6875
        assert subscores.transferable_skills(skills=skills) == 69

    @pytest.mark.parametrize(
        ("density", "expected"),
        [
            (10, 100),
            (8, 100),
            (20, 100),
            (5, 78),
            (0, 40),
            (None, 40),
            (25, 85),
            (30, 70),
            (35, 50),
        ],
    )
    def test_keyword_density(self, density: float | None, expected: int) -> None:
        """Ramp up to 8, plateau to 20, decay to 30, flat 50 beyond."""
        assert subscores.keyword_density(density_per_k=density) == expected

    @pytest.mark.parametrize(
        ("candidate", "required", "expected"),
        [
            (5, 5, 70),
            (7, 5, 84),
            (3, 5, 56),
            (30, 0, 100),
            (0, 30, 40),
            (None, None, 70),
        ],
    )
    def test_experience_fit(
        self, candidate: float | None, required: float | None, expected: int
    ) -> None:
        """Sigmoid around required years, mapped to 40-100."""
        assert (
            subscores.experience_fit(candidate_years=candidate, required_years=required)
            == expected
        )

    def test_experience_fit_symmetric(self) -> None:
        """Equal surplus and deficit are equidistant from 70."""
        over = subscores.experience_fit(candidate_years=9, required_years=5)
        under = subscores.experience_fit(candidate_years=1, required_years=5)
        assert over - 70 == 70 - under

    def test_experience_fit_extreme_gap(self) -> None:
        """Huge gaps do not overflow."""
        assert subscores.experience_fit(candidate_years=0, required_years=10_000) == 40
        assert subscores.experience_fit(candidate_years=10_000, required_years=0) == 100


@pytest.mark.unit
class TestPsychologyCalculators:
    """Category C calculators and the red flag penalty."""

    def test_readability_and_coherence_defaults(self) -> None:
        """Neutral defaults 70 and 65."""
        assert subscores.readability() == 70
        assert subscores.narrative_coherence() == 65
        assert subscores.readability(score=130) == 100
        assert subscores.narrative_coherence(score=81.6) == 82

    @pytest.mark.parametrize(
        ("strong", "weak", "expected"),
        [
            (10, 0, 73),
            (0, 25, 0),
            (40, 0, 100),
            (0, 0, 60),
            (0, 20, 0),
            (0, 10, 30),
            (30, 0, 100),
            (50, 35, 80),
        ],
    )
    def test_authority_language(self, strong: float, weak: float, expected: int) -> None:
        """Piecewise-linear curve anchored at 60."""
        assert subscores.authority_language(strong_pct=strong, weak_pct=weak) == expected

    def test_red_flag_penalty(self) -> None:
        """Additive flags capped at 5."""
        assert subscores.red_flag_penalty() == 0
        assert subscores.red_flag_penalty(job_hopping=True) == 2
        assert subscores.red_flag_penalty(long_gap=True, severe_title_mismatch=True) == 2
        assert (
            subscores.red_flag_penalty(
                job_hopping=True, long_gap=True, skill_inflation=True, severe_title_mismatch=True
            )
            == 5
        )


@pytest.mark.unit
class TestMarketCalculators:
    """Category D calculators."""

    def test_market_percentile(self) -> None:
        """Percentile clamped, 50 default."""
        assert subscores.market_percentile() == 50
        assert subscores.market_percentile(percentile=87.4) == 87

    def test_company_alignment(self) -> None:
        """Mean of known values, 50 when none."""
        assert subscores.company_alignment() == 50
        assert subscores.company_alignment(culture=80, stack=70, background=60) == 70
        assert subscores.company_alignment(culture=81, stack=None, background=84) == 83

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("hot", 100), ("normal", 80), ("crowded", 60), ("HOT", 100), ("weird", 80),
         (None, 80), (65, 65), (140, 100)],
    )
    def test_competitiveness(self, level: float | str | None, expected: int) -> None:
        """Labels map to fixed scores; numbers are clamped."""
        assert subscores.competitiveness(level=level) == expected


@pytest.mark.unit
class TestPredictiveCalculators:
    """Category E calculators."""

    def test_x_factor(self) -> None:
        """X-factor defaults to 0."""
        assert subscores.x_factor() == 0
        assert subscores.x_factor(score=64) == 64

    @pytest.mark.parametrize(
        ("risk", "leverage", "expected"),
        [
            (None, None, 62),
            (0.0, 1.0, 100),
            (1.0, 0.0, 0),
            (0.5, 0.5, 50),
            (0.2, 0.7, 76),
            (-1.0, 2.0, 100),
        ],
    )
    def test_future_proofing(
        self, risk: float | None, leverage: float | None, expected: int
    ) -> None:
        """60% automation resistance plus 40% leverage."""
        assert (
            subscores.future_proofing(automation_risk=risk, future_leverage=leverage)
            == expected
        )


_NON_FINITE = [float("inf"), float("-inf"), float("nan")]

# calculator name -> numeric keyword arguments it takes
_NUMERIC_INPUTS: list[tuple[str, tuple[str, ...]]] = [
    ("job_title_match", ("similarity",)),
    ("word_count_fit", ("words",)),
    ("formatting_pitfalls", ("graphics_density",)),
    ("soft_skill_coverage", ("expected", "found")),
    ("keyword_density", ("density_per_k",)),
    ("experience_fit", ("candidate_years", "required_years")),
    ("readability", ("score",)),
    ("authority_language", ("strong_pct", "weak_pct")),
    ("narrative_coherence", ("score",)),
    ("market_percentile", ("percentile",)),
    ("company_alignment", ("culture", "stack", "background")),
    ("competitiveness", ("level",)),
    ("x_factor", ("score",)),
    ("future_proofing", ("automation_risk", "future_leverage")),
]


@pytest.mark.unit
class TestNonFiniteInputs:
    """Infinite and NaN inputs are treated as missing."""

    @pytest.mark.parametrize("value", _NON_FINITE, ids=["inf", "-inf", "nan"])
    @pytest.mark.parametrize(
        ("name", "params"), _NUMERIC_INPUTS, ids=[n for n, _ in _NUMERIC_INPUTS]
    )
    def test_falls_back_to_default(
        self, name: str, params: tuple[str, ...], value: float
    ) -> None:
        """Every numeric input given a non-finite value scores like an omitted one."""
        calculator = getattr(subscores, name)
        assert calculator(**dict.fromkeys(params, value)) == calculator()

    @pytest.mark.parametrize("value", _NON_FINITE, ids=["inf", "-inf", "nan"])
    def test_single_non_finite_argument(self, value: float) -> None:
        """Only the non-finite side falls back; the other input still counts."""
        assert subscores.experience_fit(candidate_years=value, required_years=0) == 70
        assert subscores.authority_language(strong_pct=10, weak_pct=value) == 73
        assert subscores.readability(score=str(value)) == 70

    @pytest.mark.parametrize("value", _NON_FINITE, ids=["inf", "-inf", "nan"])
    def test_skill_lists(self, value: float) -> None:
        """Non-finite recency, credit and weight use their defaults."""
        hard = [
            HardSkill(name="Python", criticality="critical", found=True, last_used_months=value)
        ]
        transferable = [TransferableSkill(name="Airflow", credit=value, weight=value)]
        assert subscores.hard_skill_match(skills=hard) == 100
        assert subscores.transferable_skills(skills=transferable) == 50

    def test_clamp_score_non_finite(self) -> None:
        """clamp_score clamps before rounding and maps NaN to 0."""
        assert subscores.clamp_score(float("inf")) == 100
        assert subscores.clamp_score(float("-inf")) == 0
        assert subscores.clamp_score(float("nan")) == 0

    def test_huge_finite_inputs(self) -> None:
        """Sums that overflow to infinity still clamp."""
        assert subscores.company_alignment(culture=1e308, stack=1e308, background=1e308) == 100
        assert subscores.keyword_density(density_per_k=-1e308) == 0
        assert subscores.experience_fit(candidate_years=1e308, required_years=-1e308) == 100
