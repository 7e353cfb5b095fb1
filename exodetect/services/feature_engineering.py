from typing import Dict
from exodetect.exceptions import AdvisoryServiceError
from exodetect.schemas import FeatureEngineeringInput, FeatureEngineeringResult
from .advisory import AdvisoryService, FEATURE_ENGINEERING_STEPS, consult
from .feature_catalog import FEATURE_TRANSFORMS
import logging

logger = logging.getLogger(__name__)

DEFAULT_STEPS = "No steps taken."


def derive_features(measurement: FeatureEngineeringInput) -> Dict[str, float]:
    """Apply the fixed scalar transform of every raw measurement"""
    return {
        name: float(transform(getattr(measurement, source)))
        for name, (source, transform) in FEATURE_TRANSFORMS.items()
    }


class FeatureEngineer:
    """
    Produces the engineered features and a description of the steps taken.

    The missing data and normalization strategies only shape the steps
    description; the numeric features come from ``derive_features`` and do
    not depend on the advisory service.
    """

    def __init__(self, advisor: AdvisoryService, timeout: float = 10.0):
        self.advisor = advisor
        self.timeout = timeout

    async def engineer_features(self, measurement: FeatureEngineeringInput) -> FeatureEngineeringResult:
        engineered_features = derive_features(measurement)
        steps = await self.determine_steps(measurement)
        logger.debug("Engineered %d features", len(engineered_features))

        return FeatureEngineeringResult(
            engineered_features=engineered_features,
            feature_engineering_steps=steps
        )

    async def determine_steps(self, measurement: FeatureEngineeringInput) -> str:
        payload = measurement.model_dump(mode="json", by_alias=True)
        try:
            response = await consult(self.advisor, FEATURE_ENGINEERING_STEPS, payload, self.timeout)
        except AdvisoryServiceError as e:
            logger.warning("Falling back to default feature engineering steps: %s", e.message)
            return DEFAULT_STEPS

        steps = response.get("steps")
        if not isinstance(steps, str) or not steps.strip():
            logger.warning("Advisory service returned no steps description")
            return DEFAULT_STEPS
        return steps.strip()
