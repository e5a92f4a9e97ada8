import json

import pytest
from pydantic import ValidationError

from foursquare_merchant.response import Envelope, ErrorMeta, ResponseObject, pluck, to_plain, wrap


@pytest.mark.unit
def test_attribute_and_key_access_match():
    obj = ResponseObject({"id": "c1", "status": "active"})
    assert obj.id == obj["id"] == "c1"


@pytest.mark.unit
def test_nested_objects_and_lists_are_wrapped():
    obj = wrap({"campaign": {"venues": [{"id": "v1"}, {"id": "v2"}], "tags": ["a"]}})

    assert isinstance(obj.campaign, ResponseObject)
    assert [v.id for v in obj.campaign.venues] == ["v1", "v2"]
    assert obj.campaign.tags == ["a"]


@pytest.mark.unit
def test_missing_attribute_raises_attribute_error():
    obj = ResponseObject({"id": "c1"})

    with pytest.raises(AttributeError):
        obj.missing
    assert not hasattr(obj, "missing")
    assert obj.get("missing") is None


@pytest.mark.unit
def test_assigned_values_are_wrapped():
    obj = ResponseObject()
    obj.venue = {"id": "v1"}
    obj["items"] = [{"id": "i1"}]

    assert obj.venue.id == "v1"
    assert obj["items"][0].id == "i1"


@pytest.mark.unit
def test_to_dict_is_json_serializable():
    data = {"a": {"b": [{"c": 1}]}, "d": None}
    assert json.loads(json.dumps(wrap(data).to_dict())) == data


@pytest.mark.unit
def test_scalars_pass_through_wrap():
    assert wrap(3) == 3
    assert wrap(None) is None


@pytest.mark.unit
def test_envelope_requires_response():
    with pytest.raises(ValidationError):
        Envelope.model_validate({"meta": {"code": 200}})

    env = Envelope.model_validate({"response": {"x": 1}, "notifications": None})
    assert env.response == {"x": 1}
    assert env.notifications == []


@pytest.mark.unit
def test_error_meta_reads_vendor_field_names():
    meta = ErrorMeta.model_validate(
        {"code": "400", "errorType": "param_error", "errorDetail": "bad param"}
    )
    assert meta.code == 400
    assert meta.error_type == "param_error"
    assert meta.error_detail == "bad param"


@pytest.mark.unit
def test_fields_named_like_dict_methods_read_as_fields():
    """
    Given: A list payload shaped {"count", "items"} plus other method-like keys
    When: The fields are read as attributes
    Then: The payload values come back, not the dict methods
    """
    obj = wrap({"count": 2, "items": [{"id": "s1"}, {"id": "s2"}], "keys": "k", "get": 1})

    assert obj.items[0].id == "s1"
    assert obj.items == obj["items"]
    assert obj.keys == "k"
    assert obj.get == 1
    assert dict.items(obj)


@pytest.mark.unit
def test_dict_methods_still_work_when_not_shadowed():
    obj = wrap({"id": "c1"})

    assert list(obj.items()) == [("id", "c1")]
    assert obj.get("id") == "c1"


@pytest.mark.unit
def test_to_dict_with_items_field():
    data = {"specials": {"count": 1, "items": [{"id": "s1"}]}}
    assert wrap(data).to_dict() == data


@pytest.mark.unit
def test_to_plain_handles_lists():
    data = [{"venueId": "v1", "items": [{"id": "i1"}]}]
    plain = to_plain(wrap(data))

    assert plain == data
    assert type(plain[0]) is dict


@pytest.mark.unit
def test_pluck_returns_field_or_none():
    obj = wrap({"special": {"id": "s1"}, "get": "shadowed"})

    assert pluck(obj, "special").id == "s1"
    assert pluck(obj, "missing") is None
    assert pluck(None, "special") is None


@pytest.mark.unit
def test_error_meta_coerces_structured_detail_to_text():
    meta = ErrorMeta.model_validate({"code": 400, "errorType": 7, "errorDetail": {"field": "venueId"}})

    assert meta.error_type == "7"
    assert meta.error_detail == '{"field": "venueId"}'
