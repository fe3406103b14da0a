import pytest

from tictactoe.errors import (
    GameError,
    IllegalCellError,
    IllegalStateError,
    NoWinnerError,
)


@pytest.mark.parametrize(
    "error_type, message",
    [
        (IllegalStateError, "The Game Is Already Over"),
        (IllegalCellError, "The Cell Can't Be Played in"),
        (NoWinnerError, "There Is No Winner Yet"),
    ],
)
def test_default_messages(error_type, message):
    assert str(error_type()) == message


@pytest.mark.parametrize(
    "error_type, message",
    [
        (IllegalStateError, "The Game Is Already Over"),
        (IllegalCellError, "The Cell Can't Be Played in"),
        (NoWinnerError, "There Is No Winner Yet"),
    ],
)
def test_caught_as_game_error(error_type, message):
    with pytest.raises(GameError) as excinfo:
        raise error_type()
    assert excinfo.type is error_type
    assert str(excinfo.value) == message


def test_custom_message_overrides_default():
    assert str(IllegalCellError("row 5 is off the grid")) == "row 5 is off the grid"


@pytest.mark.parametrize(
    "first, second, message",
    [
        (NoWinnerError, IllegalCellError, "There Is No Winner Yet"),
        (IllegalCellError, IllegalStateError, "The Cell Can't Be Played in"),
        (IllegalStateError, NoWinnerError, "The Game Is Already Over"),
    ],
)
def test_errors_are_distinct(first, second, message):
    error = first()
    assert isinstance(error, GameError)
    assert not isinstance(error, second)
    with pytest.raises(first) as excinfo:
        try:
            raise error
        except second:
            pytest.fail("caught by an unrelated error type")
    assert excinfo.value is error
    assert str(excinfo.value) == message