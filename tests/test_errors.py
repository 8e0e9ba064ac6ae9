import pytest

from stringext import errors


@pytest.mark.parametrize(
    "error, builtin",
    [
        (errors.NullInputError("s"), TypeError),
        (errors.EmptyArgumentError("text"), ValueError),
        (errors.NotACharacterError("target", "ab"), ValueError),
        (errors.MalformedPairError("b", "="), ValueError),
        (errors.DuplicateKeyError("a"), ValueError),
        (errors.LengthOutOfRangeError(6, 5), IndexError),
    ],
)
def test_errors_share_base_and_builtin(error, builtin):
    assert isinstance(error, errors.StringExtError)
    assert isinstance(error, builtin)


def test_messages_name_the_culprit():
    assert "'source'" in str(errors.NullInputError("source"))
    assert "'a'" in str(errors.DuplicateKeyError("a"))
    assert "6" in str(errors.LengthOutOfRangeError(6, 5))
