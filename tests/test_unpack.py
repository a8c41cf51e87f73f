import pytest

from l2utils.unpack import UnpackError, unpack


def test_incorrect_empty():
    assert unpack("") == ""


def test_digit():
    assert unpack("a4bc2d5e") == "aaaabccddddde"


def test_base():
    assert unpack("abcd") == "abcd"


def test_escaped():
    assert unpack("qwe\\45") == "qwe44444"


def test_escaped_digits():
    assert unpack("qwe\\4\\5") == "qwe45"


def test_escaped_slash():
    assert unpack("qwe\\\\5") == "qwe\\\\\\\\\\"


@pytest.mark.parametrize("text", ["45", "-12", "+7"])
def test_number_rejected(text):
    with pytest.raises(UnpackError):
        unpack(text)


def test_zero_count_rejected():
    with pytest.raises(UnpackError):
        unpack("a0")


def test_one_count_keeps_single():
    assert unpack("a1b") == "ab"


def test_unicode_letters():
    assert unpack("я3") == "яяя"