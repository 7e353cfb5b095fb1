from typing import List
from pydantic import Field, NonNegativeInt, field_validator, model_validator
from .base import FrozenRecord
import math


class PerformanceSummary(FrozenRecord):
    """Held-out evaluation metrics of the model"""

    precision: float = Field(..., ge=0, le=1, description="Precision")
    recall: float = Field(..., ge=0, le=1, description="Recall")
    f1_score: float = Field(..., ge=0, le=1, description="Harmonic mean of precision and recall")
    confusion_matrix: List[List[NonNegativeInt]] = Field(
        ...,
        description="[[true positive, false positive], [false negative, true negative]]"
    )

    @field_validator("confusion_matrix")
    @classmethod
    def check_shape(cls, value: List[List[int]]) -> List[List[int]]:
        if len(value) != 2 or any(len(row) != 2 for row in value):
            raise ValueError("confusion matrix must be 2x2")
        return value

    @model_validator(mode="after")
    def check_f1(self) -> "PerformanceSummary":
        expected = harmonic_mean(self.precision, self.recall)
        if not math.isclose(self.f1_score, expected, rel_tol=1e-9, abs_tol=1e-12):
            raise ValueError("f1Score must equal 2*precision*recall/(precision+recall)")
        return self

    @property
    def true_positive(self) -> int:
        return self.confusion_matrix[0][0]

    @property
    def false_positive(self) -> int:
        return self.confusion_matrix[0][1]

    @property
    def false_negative(self) -> int:
        return self.confusion_matrix[1][0]

    @property
    def true_negative(self) -> int:
        return self.confusion_matrix[1][1]


def harmonic_mean(precision: float, recall: float) -> float:
    if precision + recall == 0:
        return 0.0
    return (2 * (precision * recall)) / (precision + recall)
