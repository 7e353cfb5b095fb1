from enum import Enum
from pydantic import Field
from .base import FrozenRecord


class ClassificationLabel(str, Enum):
    CONFIRMED_EXOPLANET = "Confirmed Exoplanet"
    PLANETARY_CANDIDATE = "Planetary Candidate"
    FALSE_POSITIVE = "False Positive"


class ClassificationResult(FrozenRecord):
    label: ClassificationLabel = Field(..., alias="class", examples=["Planetary Candidate"], description="Predicted class")
    confidence: float = Field(..., ge=0, le=1, examples=[0.72], description="Confidence of the prediction")
