from typing import Any, Dict, List, Mapping
from pydantic import ValidationError as PydanticValidationError
from exodetect.exceptions import ValidationError
from exodetect.schemas import FeatureEngineeringInput, MeasurementInput
import logging

logger = logging.getLogger(__name__)


def _field_errors(error: PydanticValidationError) -> List[Dict[str, str]]:
    errors = []
    for item in error.errors():
        loc = item.get("loc") or ()
        field = str(loc[0]) if loc else "input"
        errors.append({"field": field, "message": item.get("msg", "Invalid value")})
    return errors


def validate_measurement(raw: Mapping[str, Any]) -> MeasurementInput:
    """
    Coerce and constrain a raw form record.

    Numeric-looking strings are converted to numbers. All five measurements
    must be finite and strictly positive and the three strategy fields must
    take one of their declared values.
    """
    try:
        return MeasurementInput.model_validate(raw)
    except PydanticValidationError as e:
        errors = _field_errors(e)
        logger.info("Rejected form record: %s", ", ".join(err["field"] for err in errors))
        raise ValidationError(errors=errors, cause=e) from e


def validate_feature_input(measurement: MeasurementInput) -> FeatureEngineeringInput:
    """Narrow a validated record to the fields the feature engineer needs"""
    try:
        return measurement.feature_engineering_input()
    except PydanticValidationError as e:
        raise ValidationError(errors=_field_errors(e), cause=e) from e
