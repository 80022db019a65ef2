"""Tests for Form and validate_form."""

import dataclasses

import pytest

from formtree.config import get_config
from formtree.exceptions import FieldConstructionError, FieldValueError
from formtree.form import Form, validate_form
from formtree.models.validation_result import ValidationResult
from formtree.registry import default_registry


@pytest.fixture
def contact_schema():
    return {
        "type": "object",
        "title": "Contact",
        "properties": {
            "name": {"type": "string"},
            "email": {"type": "string", "format": "email"},
            "telephone": {"type": "string"},
            "address": {
                "type": "object",
                "properties": {
                    "street": {"type": "string"},
                    "postcode": {"type": "string", "maxLength": 8},
                },
                "required": ["street"],
            },
        },
        "required": ["name"],
        "dependencies": {"telephone": ["email"]},
    }


class TestFormConstruction:
    """Tests for building forms."""

    def test_root_field(self, contact_schema):
        """Test the root object uses the form name."""
        form = Form(contact_schema, name="contact")
        assert form.field.id == "contact"
        assert form.get_field_by_path("address.street").id == "address_street"

    def test_default_name_from_config(self, contact_schema):
        """Test the form name falls back to config."""
        form = Form(contact_schema)
        assert form.name == get_config().default_form_name

    def test_rejects_leaf_schema(self):
        """Test forms need an object schema."""
        with pytest.raises(FieldConstructionError, match="must describe an object"):
            Form({"type": "string"})

    def test_to_json_schema_flattens_all_of(self):
        """Test the exported schema has merged properties."""
        form = Form({
            "type": "object",
            "properties": {"allOf": [{"a": {"type": "string", "minLength": 2}}, {"b": {"type": "integer"}}]},
        })
        exported = form.to_json_schema()
        assert exported["properties"] == {
            "a": {"type": "string", "minLength": 2},
            "b": {"type": "integer"},
        }


class TestValidateData:
    """Tests for ValidationResult production."""

    def test_valid_data(self, contact_schema):
        """Test valid data yields serialized output."""
        form = Form(contact_schema, options={"name": {"serialize": "trim"}})
        result = form.validate_data({
            "name": " Ada ",
            "address": {"street": "1 High St"},
        })
        assert isinstance(result, ValidationResult)
        assert result.is_valid
        assert result.error_count == 0
        assert result.validated_data["name"] == "Ada"
        assert result.validated_data["address"] == {"street": "1 High St", "postcode": None}
        assert form.value["name"] == " Ada "

    def test_invalid_data(self, contact_schema):
        """Test errors are flattened to dotted paths."""
        result = validate_form(contact_schema, {
            "name": "",
            "telephone": "0123",
            "email": "nope",
            "address": {"postcode": "LS1 1AAAAA"},
        })
        assert not result.is_valid
        assert result.validated_data is None
        assert result.to_error_dict() == {
            "name": ["This field is required."],
            "email": ["Enter a valid email address."],
            "telephone": ["This field depends on an invalid field: email."],
            "address.street": ["This field is required."],
            "address.postcode": ["Ensure this value has at most 8 characters."],
        }
        assert result.get_field_errors("telephone")[0].error_type == "dependency"
        assert result.error_report["address"] == {
            "street": ["This field is required."],
            "postcode": ["Ensure this value has at most 8 characters."],
        }

    def test_results_are_independent(self, contact_schema):
        """Test each pass returns a fresh result."""
        form = Form(contact_schema)
        first = form.validate_data({"name": ""})
        second = form.validate_data({"name": "Ada", "address": {"street": "1 High St"}})
        assert not first.is_valid
        assert second.is_valid
        assert "name" in first.error_report
        assert second.error_report == {}

    def test_results_are_frozen(self, contact_schema):
        """Test results cannot be modified."""
        result = validate_form(contact_schema, {"name": "Ada"})
        with pytest.raises(Exception):
            result.is_valid = True

    def test_unknown_keys_become_warnings(self, contact_schema):
        """Test ignored keys are reported, including nested ones."""
        result = validate_form(contact_schema, {
            "name": "Ada",
            "nickname": "A",
            "address": {"street": "1 High St", "county": "Yorks"},
        })
        assert result.is_valid
        assert result.warnings == [
            "Ignored unknown field 'nickname'",
            "Ignored unknown field 'address.county'",
        ]

    def test_warnings_only_cover_the_latest_data(self, contact_schema):
        """Test unknown keys from an earlier pass are not reported again."""
        form = Form(contact_schema)
        first = form.validate_data({"name": "Ada", "address": {"street": "1 High St", "county": "Yorks"}})
        assert first.warnings == ["Ignored unknown field 'address.county'"]

        assert form.validate_data({"name": "Ada"}).warnings == []
        assert form.validate_data().warnings == []

    def test_strict_values(self, contact_schema):
        """Test strict config rejects unknown keys."""
        config = dataclasses.replace(get_config(), strict_values=True)
        form = Form(contact_schema, registry=default_registry(config))
        with pytest.raises(FieldValueError, match="nickname"):
            form.validate_data({"name": "Ada", "nickname": "A"})

    def test_custom_required_message(self, contact_schema):
        """Test the required message comes from config."""
        config = dataclasses.replace(get_config(), required_message="Please fill this in.")
        form = Form(contact_schema, registry=default_registry(config))
        result = form.validate_data({"name": ""})
        assert result.to_error_dict()["name"] == ["Please fill this in."]

    def test_non_field_errors_path(self):
        """Test composite-level errors are reported under the object's path."""
        schema = {
            "type": "object",
            "properties": {
                "email": {"type": "string"},
                "address": {"type": "object", "properties": {"street": {"type": "string"}}},
            },
            "required": ["email"],
            "dependencies": {"address": ["email"]},
        }
        result = validate_form(schema, {"address": {"street": "1 High St"}})
        assert result.to_error_dict()["address"] == ["This field depends on an invalid field: email."]


class TestRender:
    """Tests for Form.render."""

    def test_render_tree(self, contact_schema):
        """Test the whole tree renders with nested fields."""
        form = Form(contact_schema, name="contact")
        form.set_data({"name": "Ada"})
        rendered = form.render()
        assert rendered["label"] == "Contact"
        assert rendered["fields"]["name"]["value"] == "Ada"
        assert rendered["fields"]["telephone"]["dependencies"] == ["email"]
        assert set(rendered["fields"]["address"]["fields"]) == {"street", "postcode"}
