"""Unit tests for text and list helpers."""

import pytest

from userdir.utils import drop_last_until, normalize_phone, split_full_name, to_none_if_empty


class TestNormalizePhone:
    @pytest.mark.parametrize("raw, expected", [
        ("+7 (916) 123-45-67", "+79161234567"),
        ("+79161234567", "+79161234567"),
        ("tel: 8-800", "8800"),
        ("", ""),
    ])
    def test_strips_everything_but_digits_and_plus(self, raw, expected):
        assert normalize_phone(raw) == expected

    def test_idempotent(self):
        for raw in ["+7 (916) 123-45-67", "abc+1 2", "+++"]:
            assert normalize_phone(normalize_phone(raw)) == normalize_phone(raw)


class TestSplitFullName:
    def test_first_and_last(self):
        assert split_full_name("John Doe") == ("John", "Doe")

    def test_extra_spaces_ignored(self):
        assert split_full_name(" John  Doe ") == ("John", "Doe")

    def test_first_only(self):
        assert split_full_name("John") == ("John", None)

    @pytest.mark.parametrize("full_name", ["John Ronald Doe", "", "   "])
    def test_wrong_token_count(self, full_name):
        with pytest.raises(ValueError, match="FullName must contain only first name and last name"):
            split_full_name(full_name)


def test_to_none_if_empty():
    assert to_none_if_empty("") is None
    assert to_none_if_empty(None) is None
    assert to_none_if_empty(" ") == " "
    assert to_none_if_empty("x") == "x"


class TestDropLastUntil:
    def test_drops_through_last_match(self):
        assert drop_last_until([1, 2, 3, 2, 5], lambda x: x == 2) == [1, 2, 3]

    def test_no_match(self):
        assert drop_last_until([1, 3], lambda x: x == 2) == []

    def test_match_at_start(self):
        assert drop_last_until(["a", "b"], lambda x: x == "a") == []
