"""Tests for form record validation."""

import asyncio
import math

import pytest

from exodetect.exceptions import ValidationError
from exodetect.schemas import (
    FeatureEngineeringInput, MissingDataStrategy, ModelType, NormalizationStrategy,
    MAX_MEASUREMENT
)
from exodetect.services import (
    FeatureEngineer, LocalAdvisoryService, validate_feature_input, validate_measurement
)

NUMERIC_FIELDS = ["orbitalPeriod", "transitDuration", "planetaryRadius", "transitDepth", "snr"]
ENUM_FIELDS = ["missingDataStrategy", "normalizationStrategy", "modelType"]


class TestValidateMeasurement:

    def test_valid_record(self, form_record):
        measurement = validate_measurement(form_record)

        assert measurement.orbital_period == 11.8
        assert measurement.snr == 45.8
        assert measurement.missing_data_strategy == MissingDataStrategy.MEAN
        assert measurement.normalization_strategy == NormalizationStrategy.MINMAX
        assert measurement.model_type == ModelType.RANDOM_FOREST

    def test_numeric_strings_are_coerced(self, form_record):
        form_record.update({"orbitalPeriod": "11.8", "snr": "45"})
        measurement = validate_measurement(form_record)

        assert measurement.orbital_period == 11.8
        assert measurement.snr == 45.0

    def test_snake_case_keys_accepted(self, form_record):
        record = {
            "orbital_period": 1.0, "transit_duration": 1.0, "planetary_radius": 1.0,
            "transit_depth": 1.0, "snr": 1.0, "missing_data_strategy": "median",
            "normalization_strategy": "zscore", "model_type": "XGBoost",
        }
        measurement = validate_measurement(record)
        assert measurement.model_type == ModelType.XGBOOST

    def test_measurement_is_immutable(self, form_record):
        measurement = validate_measurement(form_record)
        with pytest.raises(Exception):
            measurement.snr = 1.0

    @pytest.mark.parametrize("field", NUMERIC_FIELDS)
    @pytest.mark.parametrize("bad_value", [0, -1, -0.5, "abc", "", None, "nan", "inf"])
    def test_rejects_bad_numeric_value(self, form_record, field, bad_value):
        form_record[field] = bad_value
        with pytest.raises(ValidationError) as exc_info:
            validate_measurement(form_record)

        assert exc_info.value.fields == [field]

    @pytest.mark.parametrize("field", ENUM_FIELDS)
    @pytest.mark.parametrize("bad_value", ["bogus", "", 3, "MEAN", "RandomForest"])
    def test_rejects_unknown_enum_value(self, form_record, field, bad_value):
        form_record[field] = bad_value
        with pytest.raises(ValidationError) as exc_info:
            validate_measurement(form_record)

        assert exc_info.value.fields == [field]

    @pytest.mark.parametrize("field", NUMERIC_FIELDS + ENUM_FIELDS)
    def test_rejects_missing_field(self, form_record, field):
        del form_record[field]
        with pytest.raises(ValidationError) as exc_info:
            validate_measurement(form_record)

        assert field in exc_info.value.fields

    @pytest.mark.parametrize("field", NUMERIC_FIELDS)
    @pytest.mark.parametrize("huge_value", [1e13, 8e307, 1e308, "1.7e308"])
    def test_rejects_value_above_bound(self, form_record, field, huge_value):
        form_record[field] = huge_value
        with pytest.raises(ValidationError) as exc_info:
            validate_measurement(form_record)

        assert exc_info.value.fields == [field]

    def test_largest_values_stay_finite(self, form_record):
        for field in NUMERIC_FIELDS:
            form_record[field] = MAX_MEASUREMENT
        feature_input = validate_feature_input(validate_measurement(form_record))
        result = asyncio.run(FeatureEngineer(LocalAdvisoryService()).engineer_features(feature_input))

        assert len(result.engineered_features) == 5
        assert all(math.isfinite(value) for value in result.engineered_features.values())
        assert math.isfinite(sum(result.engineered_features.values()))

    def test_reports_every_failing_field(self, form_record):
        form_record.update({"snr": -3, "modelType": "SVM"})
        with pytest.raises(ValidationError) as exc_info:
            validate_measurement(form_record)

        error = exc_info.value
        assert set(error.fields) == {"snr", "modelType"}
        assert error.message == "Invalid input data."
        assert all(item["message"] for item in error.errors)

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            validate_measurement(["not", "a", "record"])


class TestFeatureEngineeringInput:

    def test_narrowed_record_drops_model_type(self, form_record):
        feature_input = validate_feature_input(validate_measurement(form_record))

        assert type(feature_input) is FeatureEngineeringInput
        assert not hasattr(feature_input, "model_type")
        assert feature_input.transit_depth == 689.0

    def test_strategies_default(self):
        feature_input = FeatureEngineeringInput(
            orbital_period=1.0, transit_duration=1.0, planetary_radius=1.0,
            transit_depth=1.0, snr=1.0
        )
        assert feature_input.missing_data_strategy == MissingDataStrategy.MEAN
        assert feature_input.normalization_strategy == NormalizationStrategy.MINMAX

    def test_same_positivity_constraint(self):
        with pytest.raises(Exception):
            FeatureEngineeringInput(
                orbital_period=0.0, transit_duration=1.0, planetary_radius=1.0,
                transit_depth=1.0, snr=1.0
            )
