from enum import Enum
from pydantic import Field
from .base import FrozenRecord

# Keeps every engineered feature and their sum finite
MAX_MEASUREMENT = 1e12


class MissingDataStrategy(str, Enum):
    MEAN = "mean"
    MEDIAN = "median"
    DROP = "drop"


class NormalizationStrategy(str, Enum):
    MINMAX = "minmax"
    ZSCORE = "zscore"
    NONE = "none"


class ModelType(str, Enum):
    RANDOM_FOREST = "Random Forest"
    XGBOOST = "XGBoost"
    NEURAL_NETWORK = "Neural Network"


class FeatureEngineeringInput(FrozenRecord):
    """Measurements and strategies consumed by the feature engineer"""

    orbital_period: float = Field(..., gt=0, le=MAX_MEASUREMENT, allow_inf_nan=False, examples=[11.8], description="Orbital period (days)")
    transit_duration: float = Field(..., gt=0, le=MAX_MEASUREMENT, allow_inf_nan=False, examples=[0.1], description="Transit duration (days)")
    planetary_radius: float = Field(..., gt=0, le=MAX_MEASUREMENT, allow_inf_nan=False, examples=[0.8], description="Planetary radius (R⊕)")
    transit_depth: float = Field(..., gt=0, le=MAX_MEASUREMENT, allow_inf_nan=False, examples=[689.0], description="Transit depth (ppm)")
    snr: float = Field(..., gt=0, le=MAX_MEASUREMENT, allow_inf_nan=False, examples=[45.8], description="Signal-to-noise ratio")
    missing_data_strategy: MissingDataStrategy = Field(
        default=MissingDataStrategy.MEAN,
        description="Strategy for handling missing data: mean, median, or drop rows/columns"
    )
    normalization_strategy: NormalizationStrategy = Field(
        default=NormalizationStrategy.MINMAX,
        description="Strategy for normalization: minmax (scale to [0, 1]), zscore (standardize), or none"
    )


class MeasurementInput(FeatureEngineeringInput):
    """Validated form record submitted for analysis"""

    missing_data_strategy: MissingDataStrategy = Field(..., examples=["mean"], description="Missing data strategy")
    normalization_strategy: NormalizationStrategy = Field(..., examples=["minmax"], description="Normalization strategy")
    model_type: ModelType = Field(..., examples=["Random Forest"], description="Model used for the prediction")

    def feature_engineering_input(self) -> FeatureEngineeringInput:
        """Re-validate the subset of fields the feature engineer needs"""
        return FeatureEngineeringInput.model_validate(self.model_dump(exclude={"model_type"}))
