import pytest

from berlint.errors import ErrorKind, MapError, format_error


def test_extension_message_matches_source():
    assert ErrorKind.BAD_EXTENSION.message() == "the map provided is not a .ber file\n"


def test_size_message_matches_source():
    assert (
        ErrorKind.TOO_LARGE.message()
        == "The map is limited to 100 * 100 du to stack limitation\n"
    )


def test_no_error_message_is_joined_without_space():
    assert ErrorKind.NO_ERROR.message() == (
        "WTF an error has beenthrown, but no error was detected\n"
    )


def test_every_kind_has_newline_terminated_message():
    for kind in ErrorKind:
        message = ErrorKind(kind.value).message()
        assert message.endswith("\n")
        assert len(message) > 1
        assert format_error(kind).endswith(message)


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_format_error_prefixes_header(kind):
    assert format_error(kind) == "Error\n" + kind.message()


def test_format_error_unknown_value_falls_back():
    assert format_error(42) == "Error\n" + ErrorKind.UNKNOWN.message()


def test_format_malloc_error():
    assert format_error(ErrorKind.OUT_OF_MEMORY) == "Error\nErreur malloc\n"


def test_map_error_carries_kind_and_message():
    error = MapError(ErrorKind.BAD_SHAPE)
    assert error.kind is ErrorKind.BAD_SHAPE
    assert str(error) == "The Map is not a rectangle"


def test_kind_values_are_distinct_and_ordered():
    kinds = list(ErrorKind)
    values = [kind.value for kind in kinds]
    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert [ErrorKind(value) for value in values] == kinds