from .advisory import (
    AdvisoryService, LocalAdvisoryService, HttpAdvisoryService,
    build_advisory_service, consult
)
from .classifier import Classifier, SineScoreClassifier, label_for_confidence
from .explainer import Explainer, explanation_type_for
from .feature_engineering import FeatureEngineer, derive_features
from .performance import PerformanceReporter
from .pipeline import AnalysisPipeline, build_pipeline, get_pipeline
from .validation import validate_measurement, validate_feature_input

__all__ = [
    "AdvisoryService", "LocalAdvisoryService", "HttpAdvisoryService",
    "build_advisory_service", "consult",
    "Classifier", "SineScoreClassifier", "label_for_confidence",
    "Explainer", "explanation_type_for",
    "FeatureEngineer", "derive_features",
    "PerformanceReporter",
    "AnalysisPipeline", "build_pipeline", "get_pipeline",
    "validate_measurement", "validate_feature_input"
]
