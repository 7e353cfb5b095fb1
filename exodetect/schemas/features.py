from typing import Dict
from pydantic import Field, field_validator
from .base import FrozenRecord
import math


class FeatureEngineeringResult(FrozenRecord):
    engineered_features: Dict[str, float] = Field(..., description="Engineered features by name")
    feature_engineering_steps: str = Field(..., min_length=1, description="Steps taken during feature engineering")

    @field_validator("engineered_features")
    @classmethod
    def check_features(cls, value: Dict[str, float]) -> Dict[str, float]:
        if not value:
            raise ValueError("at least one engineered feature is required")
        for name, number in value.items():
            if not math.isfinite(number):
                raise ValueError(f"engineered feature '{name}' is not finite")
        return value
