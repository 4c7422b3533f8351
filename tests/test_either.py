import pytest

from arango_dal import DalError, ErrorKind, JobInfo, Left, Right


def test_right_holds_payload():
    result = Right({"a": 1})
    assert result.is_right()
    assert not result.is_left()
    assert result.unwrap_right() == {"a": 1}


def test_left_holds_job_receipt():
    result = Left(JobInfo(code=202, id="42"))
    assert result.is_left()
    assert result.unwrap_left().id == "42"


@pytest.mark.parametrize(
    ("result", "unwrap"),
    [
        (Left(JobInfo(code=202)), "unwrap_right"),
        (Right(1), "unwrap_left"),
    ],
)
def test_unwrapping_the_wrong_side(result, unwrap):
    with pytest.raises(DalError) as exc_info:
        getattr(result, unwrap)()
    assert exc_info.value.kind is ErrorKind.INVALID_INPUT


def test_error_repr_and_defaults():
    error = DalError("boom")
    assert error.kind is ErrorKind.SERVER
    assert error.server_error is None
    assert str(error) == "boom"
    assert repr(error) == "DalError('boom', kind=<ErrorKind.SERVER: 'server'>, status=None)"
