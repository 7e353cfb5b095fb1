from enum import Enum
from typing import Dict
from pydantic import Field
from .base import FrozenRecord


class ExplanationType(str, Enum):
    SHAP_VALUES = "shap_values"
    FEATURE_IMPORTANCE = "feature_importance"


class ExplanationResult(FrozenRecord):
    attributions: Dict[str, float] = Field(..., description="Attribution value per engineered feature")
    explanation_type: ExplanationType = Field(..., description="Semantics of the attribution values")
    rationale: str = Field(..., min_length=1, description="Natural-language rationale for the prediction")
