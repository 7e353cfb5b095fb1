from typing import Mapping
from .feature_catalog import get_feature_category, get_feature_description


def summarize_attributions(
    label: str,
    model_type: str,
    explanation_type: str,
    attributions: Mapping[str, float]
) -> str:
    """Describe a prediction through its three largest-magnitude attributions"""
    summary = f"The {model_type} model classifies this signal as '{label}'. "
    if explanation_type == "shap_values":
        summary += "SHAP values show how each feature moved this specific prediction away from the baseline. "
    else:
        summary += "Feature importance shows how much each feature weighs in the model overall. "

    top_features = sorted(attributions.items(), key=lambda item: abs(item[1]), reverse=True)[:3]
    if top_features:
        factors = [
            f"{get_feature_description(name).lower()} ({get_feature_category(name)}, {value:.3f})"
            for name, value in top_features
        ]
        summary += "The main factors that influenced this decision were: " + "; ".join(factors) + "."
    return summary.strip()
