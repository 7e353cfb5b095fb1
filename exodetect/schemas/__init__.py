from .measurement import (
    MissingDataStrategy, NormalizationStrategy, ModelType,
    FeatureEngineeringInput, MeasurementInput, MAX_MEASUREMENT
)
from .features import FeatureEngineeringResult
from .prediction import ClassificationLabel, ClassificationResult
from .explainability import ExplanationType, ExplanationResult
from .performance import PerformanceSummary, harmonic_mean
from .pipeline import (
    PipelineResult, AnalysisOptions, FieldError, ValidationErrorResponse
)

__all__ = [
    "MissingDataStrategy", "NormalizationStrategy", "ModelType",
    "FeatureEngineeringInput", "MeasurementInput", "MAX_MEASUREMENT",
    "FeatureEngineeringResult",
    "ClassificationLabel", "ClassificationResult",
    "ExplanationType", "ExplanationResult",
    "PerformanceSummary", "harmonic_mean",
    "PipelineResult", "AnalysisOptions", "FieldError", "ValidationErrorResponse"
]
