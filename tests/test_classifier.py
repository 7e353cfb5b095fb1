"""Tests for the placeholder classifier."""

import math

import pytest

from exodetect.schemas import ClassificationLabel
from exodetect.services import SineScoreClassifier, label_for_confidence


class TestLabelForConfidence:

    @pytest.mark.parametrize("confidence,expected", [
        (0.99, ClassificationLabel.CONFIRMED_EXOPLANET),
        (0.90, ClassificationLabel.CONFIRMED_EXOPLANET),
        (0.85, ClassificationLabel.PLANETARY_CANDIDATE),
        (0.70, ClassificationLabel.PLANETARY_CANDIDATE),
        (0.60, ClassificationLabel.FALSE_POSITIVE),
        (0.50, ClassificationLabel.FALSE_POSITIVE),
        (0.49, ClassificationLabel.FALSE_POSITIVE),
    ])
    def test_thresholds(self, confidence, expected):
        assert label_for_confidence(confidence) == expected


class TestSineScoreClassifier:

    def setup_method(self):
        self.classifier = SineScoreClassifier()

    def test_peak_score_is_capped(self):
        result = self.classifier.classify({"a": math.pi / 4, "b": math.pi / 4})

        assert result.confidence == pytest.approx(0.99)
        assert result.label == ClassificationLabel.CONFIRMED_EXOPLANET

    def test_zero_score_is_false_positive(self):
        result = self.classifier.classify({"a": 0.0})

        assert result.confidence == pytest.approx(0.49)
        assert result.label == ClassificationLabel.FALSE_POSITIVE

    def test_mid_score_is_candidate(self):
        result = self.classifier.classify({"a": math.pi / 6})

        assert result.confidence == pytest.approx(0.74)
        assert result.label == ClassificationLabel.PLANETARY_CANDIDATE

    def test_formula(self, engineered_features):
        score = sum(engineered_features.values())
        expected = min(0.99, abs(math.sin(score)) * 0.5 + 0.49)

        result = self.classifier.classify(engineered_features)
        assert result.confidence == pytest.approx(expected)
        assert result.label == label_for_confidence(result.confidence)

    def test_deterministic(self, engineered_features):
        first = self.classifier.classify(engineered_features)
        second = SineScoreClassifier().classify(dict(engineered_features))
        assert first == second

    @pytest.mark.parametrize("score", [-1000.0, -3.3, 0.1, 1.0, 2.5, 17.0, 1171.45, 1e6])
    def test_confidence_range(self, score):
        result = self.classifier.classify({"score": score})

        assert 0.49 <= result.confidence <= 0.99
        assert result.label == label_for_confidence(result.confidence)

    def test_overflowing_sum_keeps_confidence_range(self):
        result = self.classifier.classify({"a": 1.6e308, "b": 1.7e308})

        assert 0.49 <= result.confidence <= 0.99
        assert result.label == label_for_confidence(result.confidence)

    def test_overflowing_sum_is_deterministic(self):
        features = {"a": 1.6e308, "b": 1.7e308, "c": 2.0}
        assert self.classifier.classify(features) == self.classifier.classify(dict(features))
