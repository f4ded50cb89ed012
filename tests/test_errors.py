import pytest

from arscrew.errors import MylibError, assert_that, build_str


def test_build_str_concatenates_arguments():
    assert build_str("value ", 42, " and ", 1.5) == "value 42 and 1.5"


def test_build_str_without_arguments_is_empty():
    assert build_str() == ""


def test_build_str_uses_str_of_objects():
    class Thing:
        def __str__(self):
            return "thing"

    assert build_str("<", Thing(), ">") == "<thing>"


def test_assert_that_passes_on_true_condition():
    assert assert_that(True, "unused") is None
    assert assert_that(1 + 1 == 2) is None


def test_assert_that_raises_with_message():
    with pytest.raises(MylibError) as info:
        assert_that(False, "invalid enum class value ", 7)
    message = str(info.value)
    assert message.startswith("assert failed")
    assert "invalid enum class value 7" in message


def test_assert_that_uses_truthiness():
    with pytest.raises(MylibError):
        assert_that(0)
    with pytest.raises(MylibError):
        assert_that([])


def test_mylib_error_is_exception():
    error = MylibError("boom")
    assert isinstance(error, Exception)
    assert str(error) == "boom"