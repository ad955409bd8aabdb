from datetime import timedelta

import pytest

from nosqlqtf.put import OpCode, PutRequest, PutResult


def test_default_op_code_is_put():
    assert PutRequest("users").op_code() is OpCode.PUT


def test_if_absent_op_code():
    assert PutRequest("users").if_absent().op_code() is OpCode.PUT_IF_ABSENT


def test_if_present_op_code():
    assert PutRequest("users").if_present().op_code() is OpCode.PUT_IF_PRESENT


def test_if_version_op_code_and_version_kept():
    req = PutRequest("users").if_version(b"\x01\x02")
    assert req.op_code() is OpCode.PUT_IF_VERSION
    assert req.match_version == b"\x01\x02"


def test_if_absent_clears_version():
    req = PutRequest("users").if_version(b"\x01").if_absent()
    assert req.match_version == b""
    assert req.op_code() is OpCode.PUT_IF_ABSENT


def test_if_present_overrides_if_absent():
    req = PutRequest("users").if_absent().if_present()
    assert req.op_code() is OpCode.PUT_IF_PRESENT
    assert req.absent_required is False


def test_if_version_overrides_if_present():
    req = PutRequest("users").if_present().if_version(b"\x09")
    assert req.op_code() is OpCode.PUT_IF_VERSION
    assert req.present_required is False


def test_empty_version_means_plain_put():
    assert PutRequest("users").if_version(b"").op_code() is OpCode.PUT


def test_builder_chain_returns_same_request():
    req = PutRequest("users")
    chained = (
        req.value({"id": 1})
        .timeout(timedelta(seconds=5))
        .compartment_id("comp")
        .return_row(True)
    )
    assert chained is req
    assert req.row == {"id": 1}
    assert req.request_timeout == timedelta(seconds=5)
    assert req.compartment == "comp"
    assert req.wants_return_row is True
    assert req.table_name == "users"


def test_value_copies_mapping():
    row = {"id": 1, "name": "Jane"}
    req = PutRequest("users").value(row)
    row["id"] = 2
    assert req.row == {"id": 1, "name": "Jane"}


def test_value_rejects_non_mapping():
    with pytest.raises(TypeError):
        PutRequest("users").value([1, 2, 3])


def test_no_ttl_by_default():
    assert PutRequest("users").ttl_spec() is None


def test_ttl_minimum_one_hour():
    assert PutRequest("users").ttl(timedelta(seconds=1)).ttl_spec() == "1 HOURS"


def test_ttl_rounds_down_to_whole_hours():
    assert PutRequest("users").ttl(timedelta(minutes=90)).ttl_spec() == "1 HOURS"


def test_ttl_whole_days():
    assert PutRequest("users").ttl(timedelta(hours=48)).ttl_spec() == "2 DAYS"


def test_ttl_not_whole_days_stays_hours():
    assert PutRequest("users").ttl(timedelta(hours=25)).ttl_spec() == "25 HOURS"


def test_table_ttl_suppresses_ttl_value():
    req = PutRequest("users").ttl(timedelta(hours=48)).use_table_ttl(True)
    assert req.ttl_spec() is None
    assert req.uses_table_ttl is True


def test_put_result_defaults():
    res = PutResult()
    assert res.version is None
    assert res.existing_modification_time == 0
    assert res.existing_value is None
    assert res.existing_version is None


def test_repr_mentions_table_and_op():
    text = repr(PutRequest("users").if_absent())
    assert "users" in text
    assert OpCode.PUT_IF_ABSENT.value in text