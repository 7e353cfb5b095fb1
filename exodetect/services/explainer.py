from typing import Dict, Mapping, Optional
from exodetect.exceptions import AdvisoryServiceError
from exodetect.schemas import (
    ClassificationLabel, ExplanationResult, ExplanationType, ModelType
)
from .advisory import AdvisoryService, EXPLAIN_PREDICTION, consult
from .rationale import summarize_attributions
import logging
import math

logger = logging.getLogger(__name__)

# Signed distance of each class from a neutral baseline
CLASS_DIRECTION = {
    ClassificationLabel.CONFIRMED_EXOPLANET: 1.0,
    ClassificationLabel.PLANETARY_CANDIDATE: 0.5,
    ClassificationLabel.FALSE_POSITIVE: -1.0,
}


def explanation_type_for(model_type: ModelType) -> ExplanationType:
    if model_type == ModelType.NEURAL_NETWORK:
        return ExplanationType.SHAP_VALUES
    return ExplanationType.FEATURE_IMPORTANCE


def importance_shares(features: Mapping[str, float]) -> Dict[str, float]:
    """Share of the total feature magnitude carried by each feature"""
    total = sum(abs(value) for value in features.values())
    if total == 0:
        return {name: 1.0 / len(features) for name in features}
    return {name: abs(value) / total for name, value in features.items()}


def compute_attributions(
    label: ClassificationLabel,
    features: Mapping[str, float],
    explanation_type: ExplanationType
) -> Dict[str, float]:
    shares = importance_shares(features)
    if explanation_type == ExplanationType.FEATURE_IMPORTANCE:
        return shares

    direction = CLASS_DIRECTION[label]
    return {name: share * direction for name, share in shares.items()}


def _usable_attributions(candidate, features: Mapping[str, float]) -> Optional[Dict[str, float]]:
    if not isinstance(candidate, dict) or set(candidate) != set(features):
        return None

    attributions = {}
    for name, value in candidate.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            return None
        attributions[name] = float(value)
    return attributions


class Explainer:
    """
    Attributes a prediction to the engineered features.

    Neural networks are explained with SHAP values, every other model with
    feature importance. Attributions and rationale from the advisory service
    are used when valid; otherwise they are computed locally.
    """

    def __init__(self, advisor: AdvisoryService, timeout: float = 10.0):
        self.advisor = advisor
        self.timeout = timeout

    async def explain(
        self,
        label: ClassificationLabel,
        features: Mapping[str, float],
        model_type: ModelType
    ) -> ExplanationResult:
        explanation_type = explanation_type_for(model_type)
        local_attributions = compute_attributions(label, features, explanation_type)

        payload = {
            "prediction": label.value,
            "features": dict(features),
            "modelType": model_type.value,
            "explanationType": explanation_type.value,
            "attributions": local_attributions,
        }
        try:
            response = await consult(self.advisor, EXPLAIN_PREDICTION, payload, self.timeout)
        except AdvisoryServiceError as e:
            logger.warning("Falling back to local explanation: %s", e.message)
            response = {}

        attributions = _usable_attributions(response.get("attributions"), features)
        if attributions is None:
            if "attributions" in response:
                logger.warning("Discarding advisory attributions that do not match the engineered features")
            attributions = local_attributions

        rationale = response.get("rationale")
        if not isinstance(rationale, str) or not rationale.strip():
            rationale = summarize_attributions(
                label.value, model_type.value, explanation_type.value, attributions
            )

        return ExplanationResult(
            attributions=attributions,
            explanation_type=explanation_type,
            rationale=rationale.strip()
        )
