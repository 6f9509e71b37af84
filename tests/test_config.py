"""Tests for generator option resolution."""

import json
from dataclasses import FrozenInstanceError

import pytest

from schema_interfaces.codegen.core.config import (
    DEFAULT_HEADER_COMMENT,
    OPTION_SPECS,
    ConfigError,
    EnumType,
    GeneratorConfig,
    ModelType,
    describe_options,
    load_config_file,
    resolve_config,
    stringify_option,
)


class TestDefaults:
    """Tests for the configuration produced without any options."""

    def test_empty_options_give_defaults(self):
        """Test that no options resolve to the documented defaults."""
        config = resolve_config({})

        assert config == GeneratorConfig()
        assert config.model_type is ModelType.INTERFACE
        assert config.enum_type is EnumType.STRING_UNION
        assert config.date_type == "Date"
        assert config.big_int_type == "bigint"
        assert config.decimal_type == "Decimal"
        assert config.bytes_type == "Uint8Array"
        assert config.header_comment == DEFAULT_HEADER_COMMENT
        assert config.export_enums is True
        assert config.optional_relations is True
        assert config.omit_relations is False
        assert config.optional_nullables is False
        assert config.prettier is False
        assert config.resolve_prettier_config is True

    def test_none_options(self):
        """Test that None is treated as an empty mapping."""
        assert resolve_config(None) == GeneratorConfig()

    def test_config_is_immutable(self):
        """Test that a resolved configuration cannot be changed."""
        config = resolve_config({})
        with pytest.raises(FrozenInstanceError):
            config.model_suffix = "X"

    def test_direct_construction_accepts_raw_shape_values(self):
        """Test that shape selectors given as strings become enum members."""
        config = GeneratorConfig(model_type="type", enum_type="enum")

        assert config.model_type is ModelType.TYPE
        assert config.enum_type is EnumType.ENUM

    def test_direct_construction_rejects_unknown_shape(self):
        with pytest.raises(ValueError):
            GeneratorConfig(enum_type="union")


class TestCoercion:
    """Tests for string-to-typed option coercion."""

    def test_affixes_are_taken_verbatim(self):
        """Test that prefix and suffix options are copied as given."""
        config = resolve_config(
            {"modelPrefix": "I", "modelSuffix": "Model", "enumObjectSuffix": "Values"}
        )

        assert config.model_prefix == "I"
        assert config.model_suffix == "Model"
        assert config.enum_object_suffix == "Values"

    def test_empty_header_comment(self):
        """Test that an empty header comment is kept empty."""
        assert resolve_config({"headerComment": ""}).header_comment == ""

    def test_shape_options_become_enums(self):
        """Test that shape selectors become enum members."""
        config = resolve_config({"modelType": "type", "enumType": "object"})

        assert config.model_type is ModelType.TYPE
        assert config.enum_type is EnumType.OBJECT

    @pytest.mark.parametrize(
        "key,attr,value",
        [
            ("dateType", "date_type", "string"),
            ("bigIntType", "big_int_type", "number"),
            ("decimalType", "decimal_type", "string"),
            ("bytesType", "bytes_type", "BufferObject"),
            ("bytesType", "bytes_type", "number[]"),
        ],
    )
    def test_scalar_representations(self, key, attr, value):
        """Test that scalar representation options accept their alternatives."""
        assert getattr(resolve_config({key: value}), attr) == value

    @pytest.mark.parametrize("raw,expected", [("false", False), ("true", True), ("no", True), ("", True)])
    def test_default_true_flag_only_flips_on_false(self, raw, expected):
        """Test that a default-true flag is false only for the literal "false"."""
        assert resolve_config({"exportEnums": raw}).export_enums is expected
        assert resolve_config({"optionalRelations": raw}).optional_relations is expected

    @pytest.mark.parametrize("raw,expected", [("true", True), ("false", False), ("yes", False), ("TRUE", False)])
    def test_default_false_flag_only_flips_on_true(self, raw, expected):
        """Test that a default-false flag is true only for the literal "true"."""
        assert resolve_config({"omitRelations": raw}).omit_relations is expected
        assert resolve_config({"optionalNullables": raw}).optional_nullables is expected
        assert resolve_config({"prettier": raw}).prettier is expected


class TestValidation:
    """Tests for rejected option values."""

    def test_invalid_model_type_names_option(self):
        """Test that an unknown modelType aborts with an error naming it."""
        with pytest.raises(ConfigError) as exc_info:
            resolve_config({"modelType": "class"})

        assert "modelType" in str(exc_info.value)
        assert exc_info.value.errors == ["Invalid modelType: class"]

    def test_all_errors_reported_at_once(self):
        """Test that every invalid option is listed in a single error."""
        with pytest.raises(ConfigError) as exc_info:
            resolve_config(
                {"modelType": "class", "enumType": "union", "dateType": "Moment"}
            )

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any("modelType" in error for error in errors)
        assert any("enumType" in error for error in errors)
        assert any("dateType" in error for error in errors)

    def test_choice_values_are_case_sensitive(self):
        """Test that closed-choice values must match exactly."""
        with pytest.raises(ConfigError):
            resolve_config({"bytesType": "uint8array"})

    def test_non_string_value_rejected(self):
        """Test that non-string raw values are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            resolve_config({"prettier": True})

        assert "prettier" in str(exc_info.value)
        assert "bool" in str(exc_info.value)

    def test_unknown_option_is_ignored_with_warning(self, caplog):
        """Test that unknown options are logged and otherwise ignored."""
        with caplog.at_level("WARNING"):
            config = resolve_config({"notAnOption": "1"})

        assert config == GeneratorConfig()
        assert "notAnOption" in caplog.text


class TestDescribeOptions:
    """Tests for the option table."""

    def test_every_option_listed_once(self):
        """Test that each option key appears exactly once."""
        keys = [spec.key for spec in describe_options()]

        assert len(keys) == len(set(keys)) == len(OPTION_SPECS) == 21
        assert "resolvePrettierConfig" in keys

    def test_choice_defaults_are_allowed_values(self):
        """Test that every closed-choice default is one of its choices."""
        for spec in describe_options():
            if spec.choices:
                assert spec.default in spec.choices


class TestConfigFile:
    """Tests for loading options from a JSON file."""

    def test_load_converts_scalars_to_strings(self, tmp_path):
        """Test that JSON booleans become the host's string form."""
        path = tmp_path / "options.json"
        path.write_text(
            json.dumps({"prettier": True, "exportEnums": False, "modelSuffix": "Model", "x": None})
        )

        options = load_config_file(path)

        assert options == {"prettier": "true", "exportEnums": "false", "modelSuffix": "Model"}
        assert resolve_config(options).prettier is True

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises ConfigError."""
        path = tmp_path / "options.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config_file(path)

    def test_non_object(self, tmp_path):
        """Test that a JSON array is rejected."""
        path = tmp_path / "options.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError, match="JSON object"):
            load_config_file(path)

    def test_stringify_option(self):
        """Test scalar conversion rules."""
        assert stringify_option(True) == "true"
        assert stringify_option(3) == "3"
        assert stringify_option("enum") == "enum"
