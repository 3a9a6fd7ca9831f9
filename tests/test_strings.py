import pytest

from rustlings.lessons.strings import compose_me, replace_me, trim_me


@pytest.mark.parametrize(
    "text, expected",
    [("Hello!     ", "Hello!"), ("  What's up!", "What's up!"), ("   Hola!  ", "Hola!")],
)
def test_trim_a_string(text, expected):
    assert trim_me(text) == expected


@pytest.mark.parametrize(
    "text, expected", [("Hello", "Hello world!"), ("Goodbye", "Goodbye world!")]
)
def test_compose_a_string(text, expected):
    assert compose_me(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("I think cars are cool", "I think balloons are cool"),
        ("I love to look at cars", "I love to look at balloons"),
    ],
)
def test_replace_a_string(text, expected):
    assert replace_me(text) == expected