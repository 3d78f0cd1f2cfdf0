"""Field Rules - tests for name validation, attribute normalization, projection."""

import pytest

from fieldhub.core.errors import FieldOperationError, PayloadValidationError
from fieldhub.core.field_rules import (
    is_system_collection,
    normalize_attributes,
    project_field,
    validate_field_name,
)


def test_valid_field_name_passes():
    assert validate_field_name("posts", "published_on") == "published_on"


@pytest.mark.parametrize("name", [None, "", 12])
def test_missing_field_name_is_payload_error(name):
    with pytest.raises(PayloadValidationError):
        validate_field_name("posts", name)


@pytest.mark.parametrize("name", ["1title", "ti tle", "title-2", "a" * 65])
def test_malformed_field_name_rejected(name):
    with pytest.raises(FieldOperationError):
        validate_field_name("posts", name)


def test_normalize_keeps_known_attributes():
    attrs = normalize_attributes(
        "posts", "title", {"type": "string", "hidden": True, "sort": 2},
    )
    assert attrs == {"type": "string", "hidden": True, "sort": 2}


def test_normalize_drops_matching_field_key():
    attrs = normalize_attributes("posts", "title", {"field": "title", "note": "x"})
    assert attrs == {"note": "x"}


def test_normalize_rejects_rename():
    with pytest.raises(FieldOperationError) as exc:
        normalize_attributes("posts", "title", {"field": "headline"})
    assert "renamed" in exc.value.message


def test_normalize_rejects_unknown_attributes():
    with pytest.raises(FieldOperationError) as exc:
        normalize_attributes("posts", "title", {"length": 10, "color": "red"})
    assert "color, length" in exc.value.message


def test_normalize_rejects_unknown_type():
    with pytest.raises(FieldOperationError):
        normalize_attributes("posts", "title", {"type": "varchar"})


def test_normalize_rejects_non_boolean_flags():
    with pytest.raises(FieldOperationError):
        normalize_attributes("posts", "title", {"required": "yes"})


def test_normalize_rejects_non_integer_sort():
    with pytest.raises(FieldOperationError):
        normalize_attributes("posts", "title", {"sort": True})


def test_normalize_rejects_non_object_options():
    with pytest.raises(FieldOperationError):
        normalize_attributes("posts", "title", {"options": ["a"]})


def test_system_collection_by_prefix():
    assert is_system_collection("fieldhub_users", "fieldhub_")
    assert not is_system_collection("posts", "fieldhub_")
    assert not is_system_collection("fieldhub_users", "")


def test_project_field_keeps_requested_attributes():
    data = {"field": "title", "type": "string", "note": None}
    assert project_field(data, "field, type") == {"field": "title", "type": "string"}


def test_project_field_wildcard_and_missing_option_keep_all():
    data = {"field": "title", "type": "string"}
    assert project_field(data, "*") == data
    assert project_field(data, None) == data


def test_unknown_type_error_hides_lookup_failure():
    with pytest.raises(FieldOperationError) as exc:
        normalize_attributes("posts", "title", {"type": "varchar"})
    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__ is True
