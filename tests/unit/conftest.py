"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from resume_match_core.models.scores import SubScoreRecord
from resume_match_core.models.signals import AnalyzerOutputs
from tests.mocks.mock_factories import make_analyzer_outputs, make_sub_scores
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def midpoint_record() -> SubScoreRecord:
    """Every factor at 50, no penalty, no market data, full coverage."""
    return make_sub_scores()


@pytest.fixture
def analyzer_outputs() -> AnalyzerOutputs:
    """Analyzer outputs from every analyzer except the market ones."""
    return make_analyzer_outputs()
