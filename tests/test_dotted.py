"""Tests for versioning_scheme.schemes.dotted."""

from __future__ import annotations

import pytest

from versioning_scheme import DottedScheme, InvalidOption, InvalidVersion, Underflow


@pytest.fixture
def scheme() -> DottedScheme:
    return DottedScheme()


class TestIsValid:
    @pytest.mark.parametrize("version", ["1", "1.2", "0.001.2.0", "1.100.0394", "3.4.5.6"])
    def test_valid(self, scheme, version):
        assert scheme.is_valid(version)

    @pytest.mark.parametrize(
        "version", ["v0.001.2.0", "1.2beta", "", ".1", "1.", "1..2", "-1.2", "1.-2", " 1.2", "1.2\n"]
    )
    def test_invalid(self, scheme, version):
        assert not scheme.is_valid(version)


class TestParse:
    def test_segments(self, scheme):
        assert scheme.parse("0.001.2.0") == (0, 1, 2, 0)


class TestNormalize:
    def test_no_options_keeps_text(self, scheme):
        assert scheme.normalize("0.001.2.0") == "0.001.2.0"

    def test_truncate(self, scheme):
        assert scheme.normalize("0.1.2.0", {"parts": 3}) == "0.1.2"
        assert scheme.normalize("0.001.2.0", {"parts": 3}) == "0.001.2"

    def test_extend(self, scheme):
        assert scheme.normalize("0.001.2.0", {"parts": 5}) == "0.001.2.0.0"

    def test_same_length(self, scheme):
        assert scheme.normalize("1.2", {"parts": 2}) == "1.2"

    def test_parts_below_one(self, scheme):
        with pytest.raises(InvalidOption):
            scheme.normalize("1.2", {"parts": 0})

    def test_unknown_option(self, scheme):
        with pytest.raises(InvalidOption):
            scheme.normalize("1.2", {"segments": 2})

    def test_invalid(self, scheme):
        with pytest.raises(InvalidVersion):
            scheme.normalize("1.2beta")


class TestCompare:
    @pytest.mark.parametrize(
        ("v1", "v2", "expected"),
        [
            ("1.2.3", "1.2.3.0", 0),
            ("1.2.3", "1.2.4", -1),
            ("1.3.1", "1.2.4", 1),
            ("1.10", "1.9", 1),
            ("1.002", "1.2", 0),
            ("1", "1.0.0.1", -1),
        ],
    )
    def test_compare(self, scheme, v1, v2, expected):
        assert scheme.compare(v1, v2) == expected

    def test_invalid(self, scheme):
        with pytest.raises(InvalidVersion):
            scheme.compare("1.2", "v1.2")


class TestBump:
    @pytest.mark.parametrize(
        ("version", "options", "expected"),
        [
            ("1.2.3", None, "1.2.4"),
            ("1.2.009", None, "1.2.010"),
            ("1.2.999", None, "1.2.1000"),
            ("1.2.3", {"num": 2}, "1.2.5"),
            ("1.2.3", {"num": -1}, "1.2.2"),
            ("1.2.3", {"num": -3}, "1.2.0"),
            ("1.2.3", {"part": -2}, "1.3.0"),
            ("1.2.3", {"part": 0}, "2.0.0"),
            ("1.2.3", {"part": -2, "reset_smaller": False}, "1.3.3"),
            ("1.2.003", {"part": 1}, "1.3.000"),
            ("1.5.3", {"part": 1, "num": -1}, "1.4.3"),
            ("7", None, "8"),
        ],
    )
    def test_bump(self, scheme, version, options, expected):
        assert scheme.bump(version, options) == expected

    def test_underflow(self, scheme):
        with pytest.raises(Underflow):
            scheme.bump("1.2.3", {"num": -4})

    def test_zero_num(self, scheme):
        with pytest.raises(InvalidOption):
            scheme.bump("1.2.3", {"num": 0})

    @pytest.mark.parametrize("part", [3, -4])
    def test_part_out_of_range(self, scheme, part):
        with pytest.raises(InvalidOption):
            scheme.bump("1.2.3", {"part": part})

    def test_invalid_version(self, scheme):
        with pytest.raises(InvalidVersion):
            scheme.bump("1.2.x")
