from typing import Any, Mapping, Optional
from exodetect.exceptions import PipelineError
from exodetect.schemas import PipelineResult
from exodetect.settings import get_settings
from .advisory import AdvisoryService, LocalAdvisoryService, build_advisory_service
from .classifier import Classifier, SineScoreClassifier
from .explainer import Explainer
from .feature_engineering import FeatureEngineer
from .performance import PerformanceReporter
from .validation import validate_feature_input, validate_measurement
import logging
import time

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Validate -> engineer features -> classify -> explain -> report performance"""

    def __init__(
        self,
        advisor: Optional[AdvisoryService] = None,
        classifier: Optional[Classifier] = None,
        reporter: Optional[PerformanceReporter] = None,
        advisory_timeout: float = 10.0
    ):
        advisor = advisor or LocalAdvisoryService()
        self.feature_engineer = FeatureEngineer(advisor, timeout=advisory_timeout)
        self.classifier = classifier or SineScoreClassifier()
        self.explainer = Explainer(advisor, timeout=advisory_timeout)
        self.reporter = reporter or PerformanceReporter()

    async def run(self, raw: Mapping[str, Any]) -> PipelineResult:
        # Validation errors reach the caller before any stage runs
        measurement = validate_measurement(raw)
        feature_input = validate_feature_input(measurement)

        start_time = time.time()
        try:
            feature_engineering = await self.feature_engineer.engineer_features(feature_input)
            features = feature_engineering.engineered_features

            prediction = self.classifier.classify(features)
            explanation = await self.explainer.explain(prediction.label, features, measurement.model_type)
            performance = self.reporter.report_performance()

            result = PipelineResult(
                feature_engineering=feature_engineering,
                prediction=prediction,
                performance=performance,
                explanation=explanation
            )
        except Exception as e:
            logger.exception("Analysis pipeline failed")
            raise PipelineError("Analysis failed.", cause=e) from e

        logger.info(
            "Classified signal as '%s' (confidence %.3f) in %.3fs",
            prediction.label.value, prediction.confidence, time.time() - start_time
        )
        return result


def build_pipeline(config) -> AnalysisPipeline:
    return AnalysisPipeline(
        advisor=build_advisory_service(config),
        reporter=PerformanceReporter(seed=config.performance_seed),
        advisory_timeout=config.advisory_timeout_seconds
    )


_pipeline: Optional[AnalysisPipeline] = None


def get_pipeline() -> AnalysisPipeline:
    """Dependency to get the shared analysis pipeline"""
    global _pipeline
    if _pipeline is None:
        _pipeline = build_pipeline(get_settings())
    return _pipeline
