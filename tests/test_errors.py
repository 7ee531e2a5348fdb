import pytest

from smart_chessboard.errors import ErrorType, MoveError


@pytest.mark.parametrize(
    ("error_type", "text"),
    [
        (ErrorType.INVALID_MOVE, "Invalid Move"),
        (ErrorType.INVALID_MOVE_STRUCTURE, "Invalid Move structure"),
    ],
)
def test_message(error_type, text):
    assert str(MoveError(error_type)) == text


def test_error_type_is_kept():
    err = MoveError(ErrorType.INVALID_MOVE_STRUCTURE)
    assert err.error_type is ErrorType.INVALID_MOVE_STRUCTURE


def test_can_be_raised_and_caught():
    err = MoveError(ErrorType.INVALID_MOVE)
    assert err.error_type is ErrorType.INVALID_MOVE
    with pytest.raises(MoveError, match="^Invalid Move$") as info:
        raise err
    assert info.value.error_type is ErrorType.INVALID_MOVE
    assert str(info.value) == "Invalid Move"