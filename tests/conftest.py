"""Shared fixtures for the ExoDetect test suite."""

import asyncio

import pytest

from exodetect.services import AnalysisPipeline, LocalAdvisoryService, PerformanceReporter


class FailingAdvisor:
    """Advisor whose every call raises."""

    def __init__(self):
        self.calls = 0

    async def generate(self, task, payload):
        self.calls += 1
        raise RuntimeError("advisory backend unavailable")


class SlowAdvisor:
    """Advisor that never answers within a short timeout."""

    async def generate(self, task, payload):
        await asyncio.sleep(5)
        return {}


class CannedAdvisor:
    """Advisor returning a fixed response per task and recording payloads."""

    def __init__(self, responses):
        self.responses = responses
        self.payloads = {}

    async def generate(self, task, payload):
        self.payloads[task] = payload
        return self.responses.get(task, {})


class BrokenClassifier:
    def classify(self, features):
        raise ZeroDivisionError("model exploded")


@pytest.fixture
def form_record():
    return {
        "orbitalPeriod": 11.8,
        "transitDuration": 0.1,
        "planetaryRadius": 0.8,
        "transitDepth": 689.0,
        "snr": 45.8,
        "missingDataStrategy": "mean",
        "normalizationStrategy": "minmax",
        "modelType": "Random Forest",
    }


@pytest.fixture
def engineered_features():
    return {
        "orbital_period_scaled": 23.6,
        "transit_duration_halved": 0.05,
        "planetary_radius_shifted": 1.8,
        "transit_depth_shifted": 688.0,
        "snr_amplified": 458.0,
    }


@pytest.fixture
def failing_advisor():
    return FailingAdvisor()


@pytest.fixture
def slow_advisor():
    return SlowAdvisor()


@pytest.fixture
def pipeline():
    return AnalysisPipeline(
        advisor=LocalAdvisoryService(),
        reporter=PerformanceReporter(seed=7),
        advisory_timeout=1.0
    )
