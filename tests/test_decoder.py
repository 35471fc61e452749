"""Tests for decoding AWX response bodies into resources and list envelopes."""

import json

import pytest

from awx_client.awxapi import decoder, errors, types


def _body(payload) -> bytes:
    return json.dumps(payload).encode()


# ---------------------------------------------------------------------------
# Single resources
# ---------------------------------------------------------------------------


def test_decode_resource_ignores_unknown_fields():
    """Fields added by newer AWX versions are tolerated."""
    content = _body({"id": 3, "name": "Default", "brand_new_field": {"x": 1}})
    org = decoder.decode_resource(content, types.Organization)
    assert org.id == 3
    assert org.name == "Default"
    assert not hasattr(org, "brand_new_field")


def test_decode_resource_keeps_nested_mappings():
    """related and summary_fields come through as plain mappings."""
    content = _body(
        {
            "id": 7,
            "related": {"inventory": "/api/v2/inventories/2/"},
            "summary_fields": {"inventory": {"id": 2, "name": "prod"}},
        },
    )
    source = decoder.decode_resource(content, types.InventorySource)
    assert source.related["inventory"] == "/api/v2/inventories/2/"
    assert source.summary_fields["inventory"]["name"] == "prod"


def test_decode_resource_parses_timestamps():
    """AWX ISO-8601 timestamps become datetimes."""
    content = _body({"id": 1, "created": "2024-03-01T10:15:00.123456Z"})
    project = decoder.decode_resource(content, types.Project)
    assert project.created is not None
    assert project.created.year == 2024


def test_decode_resource_null_reads_as_default():
    """A JSON null on a non-nullable field falls back to its default."""
    content = _body({"id": 2, "description": None, "forks": None, "diff_mode": None})
    template = decoder.decode_resource(content, types.JobTemplate)
    assert template.description == ""
    assert template.forks == 0
    assert template.diff_mode is False


def test_decode_envelope_tolerates_null_fields_in_items():
    """One item with null settings does not fail the whole page."""
    content = _body(
        {
            "count": 2,
            "results": [{"id": 1, "name": "A"}, {"id": 2, "name": None, "scm_type": None}],
        },
    )
    envelope = decoder.decode_envelope(content, types.Project)
    assert [(p.id, p.name, p.scm_type) for p in envelope.results] == [(1, "A", ""), (2, "", "")]


def test_decode_resource_null_id_is_rejected():
    """id stays required even when sent as null."""
    with pytest.raises(errors.DecodeError):
        decoder.decode_resource(_body({"id": None, "name": "x"}), types.Inventory)


def test_decode_resource_requires_id():
    """A resource body without an id is rejected."""
    with pytest.raises(errors.DecodeError):
        decoder.decode_resource(_body({"name": "nameless"}), types.JobTemplate)


def test_decode_resource_rejects_non_object():
    """A JSON list where an object is expected is a shape error."""
    with pytest.raises(errors.DecodeError):
        decoder.decode_resource(_body([{"id": 1}]), types.Inventory)


def test_decode_invalid_json_keeps_body():
    """Unparseable bodies are kept on the error for diagnostics."""
    with pytest.raises(errors.DecodeError) as exc_info:
        decoder.decode_resource(b"not json", types.Organization)
    assert exc_info.value.body == b"not json"


# ---------------------------------------------------------------------------
# List envelopes
# ---------------------------------------------------------------------------


def test_decode_envelope_preserves_server_order():
    """Results come back in the order the server listed them."""
    content = _body(
        {
            "count": 3,
            "next": None,
            "previous": None,
            "results": [{"id": 9, "name": "C"}, {"id": 1, "name": "A"}, {"id": 5, "name": "B"}],
        },
    )
    envelope = decoder.decode_envelope(content, types.Project)
    assert [p.id for p in envelope.results] == [9, 1, 5]
    assert all(isinstance(p, types.Project) for p in envelope.results)


def test_decode_envelope_exposes_page_references():
    """next/previous are surfaced untouched for the caller to follow."""
    content = _body(
        {
            "count": 50,
            "next": "/api/v2/inventories/?page=3",
            "previous": "/api/v2/inventories/?page=1",
            "results": [{"id": 1}],
        },
    )
    envelope = decoder.decode_envelope(content, types.Inventory)
    assert envelope.count == 50
    assert envelope.next == "/api/v2/inventories/?page=3"
    assert envelope.previous == "/api/v2/inventories/?page=1"


def test_decode_envelope_ignores_unknown_top_level_keys():
    """Extra envelope keys do not break decoding."""
    content = _body({"count": 0, "next": None, "previous": None, "results": [], "extra": 1})
    envelope = decoder.decode_envelope(content, types.Organization)
    assert envelope.results == []


def test_decode_envelope_missing_results_raises():
    """A single-resource body is not a list envelope."""
    with pytest.raises(errors.DecodeError):
        decoder.decode_envelope(_body({"id": 1, "name": "A"}), types.Organization)


def test_decode_envelope_more_results_than_count_raises():
    """A page cannot hold more results than the reported total."""
    content = _body({"count": 1, "results": [{"id": 1}, {"id": 2}]})
    with pytest.raises(errors.DecodeError):
        decoder.decode_envelope(content, types.Organization)


def test_decode_envelope_bad_result_item_raises():
    """Every result must decode as the resource type."""
    content = _body({"count": 1, "results": [{"name": "missing id"}]})
    with pytest.raises(errors.DecodeError):
        decoder.decode_envelope(content, types.JobTemplate)
