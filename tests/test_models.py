"""Tests for formtree data models."""

import pytest

from formtree.exceptions import FieldConstructionError
from formtree.models.schema import FieldOptions, SchemaFragment
from formtree.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)


class TestSchemaFragment:
    """Tests for SchemaFragment model."""

    def test_leaf_fragment(self):
        """Test parsing a leaf fragment with aliases."""
        fragment = SchemaFragment.parse({"type": "string", "minLength": 2, "maxLength": 10})
        assert fragment.type == "string"
        assert fragment.min_length == 2
        assert fragment.max_length == 10
        assert not fragment.is_object

    def test_object_fragment(self):
        """Test nested properties parse into fragments."""
        fragment = SchemaFragment.parse({
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
            "dependencies": {"name": []},
        })
        assert fragment.is_object
        assert isinstance(fragment.properties["name"], SchemaFragment)
        assert fragment.required == ["name"]

    def test_all_of_merge(self):
        """Test allOf groups merge with plain properties."""
        fragment = SchemaFragment.parse({
            "properties": {
                "id": {"type": "integer"},
                "allOf": [{"name": {"type": "string"}}, {"email": {"type": "string"}}],
            },
        })
        assert list(fragment.properties) == ["id", "name", "email"]
        assert fragment.is_object

    def test_all_of_must_be_list(self):
        """Test malformed allOf is rejected."""
        with pytest.raises(FieldConstructionError):
            SchemaFragment.parse({"properties": {"allOf": {"name": {"type": "string"}}}})

    def test_schema_dependencies_rejected(self):
        """Test only property-list dependencies are supported."""
        with pytest.raises(FieldConstructionError):
            SchemaFragment.parse({
                "properties": {"name": {"type": "string"}},
                "dependencies": {"name": {"properties": {}}},
            })

    def test_parse_passes_models_through(self):
        """Test parse is idempotent."""
        fragment = SchemaFragment(type="string")
        assert SchemaFragment.parse(fragment) is fragment

    def test_json_schema_export(self):
        """Test export uses aliases and drops defaults."""
        fragment = SchemaFragment.parse({"type": "string", "maxLength": 5})
        assert fragment.to_json_schema() == {"type": "string", "maxLength": 5}

    def test_property_names_may_hold_spaces_and_digits(self):
        """Test any JSON property name without a dot is accepted."""
        fragment = SchemaFragment.parse({
            "properties": {"first name": {"type": "string"}, "2fa": {"type": "boolean"}},
        })
        assert list(fragment.properties) == ["first name", "2fa"]

    @pytest.mark.parametrize("name", ["a.b", ""])
    def test_dotted_or_empty_property_names_rejected(self, name):
        """Test names that would break path lookup are rejected."""
        with pytest.raises(FieldConstructionError):
            SchemaFragment.parse({"properties": {name: {"type": "string"}}})


class TestFieldOptions:
    """Tests for FieldOptions model."""

    def test_defaults(self):
        """Test empty options."""
        options = FieldOptions()
        assert options.serializers == []
        assert options.widget is None

    def test_single_serializer(self):
        """Test a single serializer name becomes a list."""
        assert FieldOptions(serialize="trim").serializers == ["trim"]

    def test_extra_options_kept(self):
        """Test unknown options are allowed and dumped."""
        options = FieldOptions.model_validate({"serialize": ["trim", "lower"], "hint": "x"})
        assert options.serializers == ["trim", "lower"]
        assert options.model_dump()["hint"] == "x"


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_valid_result(self):
        """Test valid validation result."""
        result = ValidationResult(
            is_valid=True,
            validated_data={"email": "test@example.com"},
        )
        assert result.is_valid
        assert result.error_count == 0

    def test_invalid_result(self):
        """Test invalid validation result with errors."""
        result = ValidationResult(
            is_valid=False,
            errors=[
                FieldValidationError(
                    field_name="email",
                    error_type="format",
                    message="Enter a valid email address.",
                ),
            ],
            error_report={"email": ["Enter a valid email address."]},
        )
        assert not result.is_valid
        assert result.error_count == 1
        assert len(result.get_field_errors("email")) == 1

    def test_error_dict_conversion(self):
        """Test converting errors to dict format."""
        result = ValidationResult(
            is_valid=False,
            errors=[
                FieldValidationError(
                    field_name="address.street",
                    error_type="required",
                    message="This field is required.",
                ),
                FieldValidationError(
                    field_name="name",
                    error_type="min_length",
                    message="Ensure this value has at least 2 characters.",
                ),
                FieldValidationError(
                    field_name="name",
                    error_type="dependency",
                    message="This field depends on an invalid field: email.",
                ),
            ],
        )
        error_dict = result.to_error_dict()
        assert len(error_dict["name"]) == 2
        assert len(error_dict["address.street"]) == 1

    def test_field_errors_include_nested_paths(self):
        """Test errors are looked up by path prefix, not by substring."""
        result = ValidationResult(
            is_valid=False,
            errors=[
                FieldValidationError(
                    field_name="address",
                    error_type="dependency",
                    message="This field depends on an invalid field: email.",
                ),
                FieldValidationError(
                    field_name="address.street",
                    error_type="required",
                    message="This field is required.",
                ),
                FieldValidationError(
                    field_name="address_line",
                    error_type="required",
                    message="This field is required.",
                ),
            ],
        )
        assert [e.field_name for e in result.get_field_errors("address")] == ["address", "address.street"]
        assert len(result.get_field_errors("address.street")) == 1
        assert result.get_field_errors("street") == []
        assert result.error_paths == ["address", "address.street", "address_line"]
