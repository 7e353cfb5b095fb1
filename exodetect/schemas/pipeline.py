from typing import List
from pydantic import BaseModel, Field
from .base import FrozenRecord
from .features import FeatureEngineeringResult
from .prediction import ClassificationResult
from .performance import PerformanceSummary
from .explainability import ExplanationResult


class PipelineResult(FrozenRecord):
    """Combined output of one analysis run"""

    feature_engineering: FeatureEngineeringResult = Field(..., description="Engineered features and steps taken")
    prediction: ClassificationResult = Field(..., description="Predicted class and confidence")
    performance: PerformanceSummary = Field(..., description="Historical model performance")
    explanation: ExplanationResult = Field(..., description="Explanation of the prediction")


class AnalysisOptions(FrozenRecord):
    missing_data_strategies: List[str] = Field(..., description="Allowed missing data strategies")
    normalization_strategies: List[str] = Field(..., description="Allowed normalization strategies")
    model_types: List[str] = Field(..., description="Allowed model types")


class FieldError(BaseModel):
    field: str = Field(..., description="Name of the invalid field")
    message: str = Field(..., description="Why the value was rejected")


class ValidationErrorResponse(BaseModel):
    detail: str = Field(..., examples=["Invalid input data."])
    errors: List[FieldError] = Field(..., description="Per-field validation errors")
