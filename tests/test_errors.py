import warnings

import pytest

from phosynth.errors import (
    ErrorCode,
    MbrolaError,
    MbrolaWarning,
    warn,
)


@pytest.mark.parametrize(
    "value, member",
    [
        (-3, ErrorCode.SYNTAX_ERROR),
        (-21, ErrorCode.TOO_MANY_PHO_WO_PITCH),
        (-80, ErrorCode.WARNING_UPGRADE),
    ],
)
def test_error_codes_match_documented_values(value, member):
    err = MbrolaError(value, "message")
    assert err.code is member


def test_every_code_round_trips_through_error():
    for member in ErrorCode:
        err = MbrolaError(member.value, "message")
        assert err.code is member


def test_error_keeps_code_and_message():
    err = MbrolaError(ErrorCode.UNKNOWN_COMMAND, "bad line")
    assert err.code is ErrorCode.UNKNOWN_COMMAND
    assert str(err) == "bad line"
    assert err.message == "bad line"


def test_error_integer_code_is_converted_to_member():
    err = MbrolaError(-40, "missing database")
    assert err.code is ErrorCode.DB_NOT_FOUND


def test_error_unknown_code_stays_integer():
    err = MbrolaError(1, "reset signal")
    assert err.code == 1
    assert not isinstance(err.code, ErrorCode)


def test_warn_issues_warning_with_code():
    with pytest.warns(MbrolaWarning) as record:
        returned = warn(ErrorCode.TOO_MANY_PHO_WO_PITCH, "too many phones")
    assert len(record) == 1
    issued = record[0].message
    assert issued is returned
    assert issued.code is ErrorCode.TOO_MANY_PHO_WO_PITCH
    assert str(issued) == "too many phones"


def test_warning_can_be_turned_into_error():
    with warnings.catch_warnings():
        warnings.simplefilter("error", MbrolaWarning)
        with pytest.raises(MbrolaWarning) as info:
            warn(ErrorCode.WARNING_SATURATION, "clipped")
    assert info.value.code is ErrorCode.WARNING_SATURATION