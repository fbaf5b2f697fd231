"""
Unit tests for the parameter handling in poseutils.parameters.
"""

import warnings

import pytest

from poseutils.parameters import (
    DEFAULT_PARAMS,
    check_params,
    load_parameters,
    validate_and_fill_params,
)


@pytest.mark.unit
class TestValidateAndFillParams:
    """Test the filling of user parameters with defaults."""

    def test_empty_params(self):
        params = validate_and_fill_params({})

        assert params == DEFAULT_PARAMS
        # nested dictionaries are new objects
        assert params["insight"] is not DEFAULT_PARAMS["insight"]

    def test_nested_override(self):
        params = validate_and_fill_params(
            {"precision": 14, "insight": {"model": "other-model"}}
        )

        assert params["precision"] == 14
        assert params["insight"]["model"] == "other-model"
        assert params["insight"]["api_key_env"] == "API_KEY"
        assert DEFAULT_PARAMS["insight"]["model"] == "gemini-3-flash-preview"

    def test_unknown_parameter_warns(self):
        with pytest.warns(UserWarning, match="'colour' is unknown"):
            params = validate_and_fill_params({"colour": "red"})
        assert "colour" not in params

    def test_unknown_nested_parameter_warns(self):
        with pytest.warns(UserWarning, match="'retries' is unknown"):
            params = validate_and_fill_params({"insight": {"retries": 3}})
        assert params["insight"] == DEFAULT_PARAMS["insight"]

    def test_known_parameters_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            params = validate_and_fill_params(
                {"show_radians": True, "insight": {"timeout": 2.5}}
            )
        assert params["show_radians"] is True
        assert params["insight"]["timeout"] == 2.5


@pytest.mark.unit
class TestCheckParams:
    """Test the checks of parameter values."""

    def test_defaults_are_valid(self):
        check_params(validate_and_fill_params({}))

    @pytest.mark.parametrize("precision", [0, 7, 16])
    def test_invalid_precision(self, precision):
        params = validate_and_fill_params({"precision": precision})
        with pytest.raises(ValueError, match="precision"):
            check_params(params)

    def test_invalid_timeout(self):
        params = validate_and_fill_params({"insight": {"timeout": -1}})
        with pytest.raises(ValueError, match="timeout"):
            check_params(params)

    def test_empty_model(self):
        params = validate_and_fill_params({"insight": {"model": ""}})
        with pytest.raises(ValueError, match="model"):
            check_params(params)


@pytest.mark.unit
class TestLoadParameters:
    """Test the loading of YAML parameter files."""

    def test_load(self, params_file):
        params = load_parameters(params_file)

        assert params["precision"] == 6
        assert params["show_radians"] is True
        assert params["insight"]["model"] == "test-model"
        assert params["insight"]["timeout"] == 5
        assert params["insight"]["api_key_env"] == "API_KEY"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_parameters(path) == DEFAULT_PARAMS

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "invalid.yml"
        path.write_text("precision: 9\n")
        with pytest.raises(ValueError):
            load_parameters(path)
