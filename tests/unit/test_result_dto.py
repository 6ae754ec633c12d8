"""Unit tests for xrbase.dto.result."""
import pytest

from xrbase.config import ResultCode
from xrbase.dto.result import ResultDto
from xrbase.exceptions import IllegalStateException, XrBaseException


def test_success_message_has_no_payload():
    result = ResultDto.success_message("saved")

    assert result.code == ResultCode.SUCCESS.value
    assert result.message == "saved"
    assert result.data is None
    assert result.ext_data is None
    assert isinstance(result.time, int)


def test_success_data_uses_ok_message():
    result = ResultDto.success_data({"id": 1})

    assert result.code == ResultCode.SUCCESS.value
    assert result.message == "OK"
    assert result.data == {"id": 1}


def test_failure_variants_use_unknown_error_code():
    by_message = ResultDto.failure_message("boom")
    by_data = ResultDto.failure_data([1, 2])
    both = ResultDto.failure("boom", [3])

    for result in (by_message, by_data, both):
        assert result.code == ResultCode.UNKNOWN_SYSTEM_ERROR.value
        assert not result.is_success()

    assert by_message.message == "boom" and by_message.data is None
    assert by_data.message == "Failed" and by_data.data == [1, 2]
    assert both.message == "boom" and both.data == [3]


def test_time_is_taken_at_construction(monkeypatch):
    monkeypatch.setattr("xrbase.dto.result.current_time_in_second", lambda: 1_700_000_000)

    assert ResultDto.success_message("ok").time == 1_700_000_000


def test_put_ext_data_initializes_mapping():
    result = ResultDto.success_message("ok")

    result.put_ext_data("trace", "abc")

    assert result.ext_data == {"trace": "abc"}


def test_put_ext_data_keeps_last_value_for_key():
    result = ResultDto.success_message("ok")

    result.put_ext_data("k", 1)
    result.put_ext_data("k", 2)

    assert result.ext_data == {"k": 2}


def test_assert_success_passes_for_success():
    ResultDto.success("ok", 1).assert_success()


def test_assert_success_raises_with_message_for_failure():
    result = ResultDto.failure_message("not allowed")

    with pytest.raises(IllegalStateException) as exc_info:
        result.assert_success()

    assert exc_info.value.message == "not allowed"
    assert exc_info.value.result_code == ResultCode.UNKNOWN_SYSTEM_ERROR.value
    assert exc_info.value.code == ResultCode.ILLEGAL_STATE.value


def test_get_success_data():
    assert ResultDto.success_data([1, 2, 3]).get_success_data() == [1, 2, 3]

    with pytest.raises(IllegalStateException, match="Failed"):
        ResultDto.failure_data("payload").get_success_data()


def test_of_exception_copies_code_message_and_ext_data():
    exc = XrBaseException(ResultCode.DATA_NOT_FOUND, "account 7 not found", {"id": 7})

    result = ResultDto.of_exception(exc)

    assert result.code == ResultCode.DATA_NOT_FOUND.value
    assert result.message == "account 7 not found"
    assert result.ext_data == {"id": 7}
    assert result.data is None


def test_dump_uses_ext_data_alias():
    result = ResultDto.success_data(5)
    result.put_ext_data("a", 1)

    dumped = result.model_dump(by_alias=True)

    assert dumped["extData"] == {"a": 1}
    assert dumped["code"] == ResultCode.SUCCESS.value
    assert ResultDto.model_validate(dumped).ext_data == {"a": 1}


def test_parametrized_result():
    result = ResultDto[int].success_data(3)

    assert result.get_success_data() == 3
