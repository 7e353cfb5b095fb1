from typing import Mapping, Protocol
from exodetect.schemas import ClassificationLabel, ClassificationResult
import math

CONFIRMED_THRESHOLD = 0.85
CANDIDATE_THRESHOLD = 0.60
MAX_CONFIDENCE = 0.99


class Classifier(Protocol):
    def classify(self, features: Mapping[str, float]) -> ClassificationResult:
        ...


def label_for_confidence(confidence: float) -> ClassificationLabel:
    if confidence > CONFIRMED_THRESHOLD:
        return ClassificationLabel.CONFIRMED_EXOPLANET
    if confidence > CANDIDATE_THRESHOLD:
        return ClassificationLabel.PLANETARY_CANDIDATE
    return ClassificationLabel.FALSE_POSITIVE


class SineScoreClassifier:
    """
    Placeholder model scoring the sum of the engineered features.

    confidence = min(0.99, |sin(score)| * 0.5 + 0.49), so it always lies in
    [0.49, 0.99].
    """

    def classify(self, features: Mapping[str, float]) -> ClassificationResult:
        score = sum(features.values())
        if not math.isfinite(score):
            # Finite features whose sum overflows; sin is 2*pi periodic
            score = sum(math.fmod(value, 2 * math.pi) for value in features.values())
        confidence = min(MAX_CONFIDENCE, abs(math.sin(score)) * 0.5 + 0.49)
        return ClassificationResult(label=label_for_confidence(confidence), confidence=confidence)
