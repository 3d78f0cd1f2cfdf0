"""Request Classification - tests for the pure PATCH/GET shape decisions.

Tests cover:
    - split_field_names trims, keeps order, duplicates and blanks
    - require_payload rejects None, empty, and scalar bodies
    - classify_update picks single, batch-by-ids, or batch-by-payload
    - a comma at index 0 does not trigger batch mode
"""

import pytest

from fieldhub.core.dispatch import (
    BatchByIds,
    BatchByPayload,
    SingleUpdate,
    classify_update,
    has_field_list,
    is_aggregate_sequence,
    require_payload,
    split_field_names,
)
from fieldhub.core.domain_types import UpdateKind
from fieldhub.core.errors import PayloadValidationError


# --- split_field_names ------------------------------------------

def test_split_single_name():
    assert split_field_names("title") == ["title"]


def test_split_keeps_order_and_duplicates():
    assert split_field_names("body,title,body") == ["body", "title", "body"]


def test_split_trims_whitespace():
    assert split_field_names(" title , body ") == ["title", "body"]


def test_split_keeps_blank_names():
    assert split_field_names("title,,") == ["title", "", ""]
    assert split_field_names(" , ") == ["", ""]


def test_split_none_is_empty():
    assert split_field_names(None) == []


# --- require_payload --------------------------------------------

@pytest.mark.parametrize("payload", [None, {}, []])
def test_require_payload_rejects_empty(payload):
    with pytest.raises(PayloadValidationError):
        require_payload(payload)


@pytest.mark.parametrize("payload", ["title", 42, True])
def test_require_payload_rejects_scalars(payload):
    with pytest.raises(PayloadValidationError):
        require_payload(payload)


def test_require_payload_returns_body():
    body = {"type": "string"}
    assert require_payload(body) is body


# --- shape predicates -------------------------------------------

def test_list_of_objects_is_aggregate_sequence():
    assert is_aggregate_sequence([{"field": "title"}])


def test_list_of_lists_is_aggregate_sequence():
    assert is_aggregate_sequence([["title"]])


def test_flat_object_is_not_aggregate_sequence():
    assert not is_aggregate_sequence({"type": "string"})


def test_list_of_scalars_is_not_aggregate_sequence():
    assert not is_aggregate_sequence(["title", "body"])


def test_field_list_needs_comma_after_first_character():
    assert has_field_list("title,body")
    assert has_field_list("title,")
    assert not has_field_list("title")
    assert not has_field_list(",title")
    assert not has_field_list(None)


# --- classify_update --------------------------------------------

def test_flat_payload_single_name_is_single_update():
    result = classify_update("title", {"note": "Headline"})
    assert result == SingleUpdate(field="title")
    assert result.kind == UpdateKind.SINGLE


def test_sequence_payload_with_field_is_batch_by_ids():
    result = classify_update("title", [{"field": "title", "hidden": True}])
    assert result == BatchByIds(ids=("title",))


def test_comma_list_is_batch_by_ids_even_with_flat_payload():
    result = classify_update("title,body", {"hidden": True})
    assert result == BatchByIds(ids=("title", "body"))
    assert result.kind == UpdateKind.BATCH_BY_IDS


def test_sequence_payload_without_field_is_batch_by_payload():
    result = classify_update(None, [{"field": "title"}, {"field": "body"}])
    assert result == BatchByPayload()


def test_flat_payload_without_field_is_batch_by_payload():
    result = classify_update(None, {"hidden": True})
    assert isinstance(result, BatchByPayload)
    assert result.kind == UpdateKind.BATCH_BY_PAYLOAD


def test_leading_comma_stays_single_update():
    """Only a comma after index 0 counts as a name list; ',title' is one target."""
    result = classify_update(",title", {"hidden": True})
    assert result == SingleUpdate(field=",title")


def test_leading_comma_with_sequence_payload_batches_every_name():
    result = classify_update(",title", [{"field": "title"}])
    assert result == BatchByIds(ids=("", "title"))


def test_only_commas_with_sequence_payload_is_batch_by_ids():
    assert classify_update(",", [{"field": "title"}]) == BatchByIds(ids=("", ""))


def test_blank_name_list_never_widens_to_whole_collection():
    result = classify_update(" , ", {"hidden": True})
    assert result == BatchByIds(ids=("", ""))
    assert not isinstance(result, BatchByPayload)


def test_single_update_requires_object_payload():
    with pytest.raises(PayloadValidationError):
        classify_update("title", ["hidden"])


def test_empty_payload_rejected_before_classification():
    with pytest.raises(PayloadValidationError):
        classify_update("title,body", {})
