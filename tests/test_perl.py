"""Tests for versioning_scheme.schemes.perl."""

from __future__ import annotations

import pytest

from versioning_scheme import AmbiguousBump, InvalidOption, InvalidVersion, PerlScheme, Underflow


@pytest.fixture
def scheme() -> PerlScheme:
    return PerlScheme()


class TestIsValid:
    @pytest.mark.parametrize("version", ["1.02", "1.0.0", "v1.0.0.0", "1", "v1"])
    def test_valid(self, scheme, version):
        assert scheme.is_valid(version)

    @pytest.mark.parametrize("version", ["1.2beta", "", "1.2.-3", "x", "1.2.3.", None])
    def test_invalid(self, scheme, version):
        assert not scheme.is_valid(version)


class TestNormalize:
    def test_adds_v(self, scheme):
        assert scheme.normalize("0.1.2") == "v0.1.2"

    def test_decimal(self, scheme):
        assert scheme.normalize("1.02") == "v1.20.0"

    def test_invalid(self, scheme):
        with pytest.raises(InvalidVersion):
            scheme.normalize("1.2beta")

    def test_parts_not_supported(self, scheme):
        with pytest.raises(InvalidOption):
            scheme.normalize("1.2.3", {"parts": 4})


class TestParse:
    def test_padded_to_three(self, scheme):
        assert scheme.parse("v1") == (1, 0, 0)
        assert scheme.parse("1.2.3.4") == (1, 2, 3, 4)

    def test_decimal_reads_normal_segments(self, scheme):
        assert scheme.parse("1.02") == (1, 20, 0)


class TestCompare:
    @pytest.mark.parametrize(
        ("v1", "v2", "expected"),
        [
            ("1.2.3", "1.2.3.0", 0),
            ("1.2.3", "1.2.4", -1),
            ("1.3.1", "1.2.4", 1),
            ("1.02", "v1.20", 0),
        ],
    )
    def test_compare(self, scheme, v1, v2, expected):
        assert scheme.compare(v1, v2) == expected

    def test_invalid(self, scheme):
        with pytest.raises(InvalidVersion):
            scheme.compare("1.2.3", "1.2beta")


class TestBump:
    @pytest.mark.parametrize(
        ("version", "options", "expected"),
        [
            ("1.2.3", None, "v1.2.4"),
            ("1.2.999", None, "v1.3.0"),
            ("1.999.999", None, "v2.0.0"),
            ("999.999.999", None, "v1000.0.0"),
            ("1.2.3", {"num": 2}, "v1.2.5"),
            ("1.2.3", {"num": -1}, "v1.2.2"),
            ("1.2.3", {"part": -2}, "v1.3.0"),
            ("1.2.3", {"part": 0}, "v2.0.0"),
            ("1.2.3", {"part": -2, "reset_smaller": False}, "v1.3.3"),
            ("1.2.3", {"num": 2500}, "v1.4.503"),
            ("1.02", None, "v1.20.1"),
            ("v1", None, "v1.0.1"),
            ("1.2.3.4", {"part": 1}, "v1.3.0.0"),
            ("1.2.3", {"part": 0, "num": -1}, "v0.2.3"),
        ],
    )
    def test_bump(self, scheme, version, options, expected):
        assert scheme.bump(version, options) == expected

    def test_carry_keeps_reset_anchor(self, scheme):
        # reset applies right of the requested part, not of where carry stopped
        assert scheme.bump("1.999.5", {"part": 1}) == "v2.0.0"
        assert scheme.bump("1.999.5", {"part": 1, "reset_smaller": False}) == "v2.0.5"

    def test_first_part_underflow(self, scheme):
        with pytest.raises(Underflow) as excinfo:
            scheme.bump("1.2.3", {"part": 0, "num": -2})
        assert not isinstance(excinfo.value, AmbiguousBump)

    def test_borrow_is_ambiguous(self, scheme):
        with pytest.raises(AmbiguousBump) as excinfo:
            scheme.bump("1.2.3", {"num": -4})
        assert isinstance(excinfo.value, Underflow)
        assert excinfo.value.index == 2

    def test_zero_num(self, scheme):
        with pytest.raises(InvalidOption):
            scheme.bump("1.2.3", {"num": 0})

    @pytest.mark.parametrize("part", [3, -4])
    def test_part_out_of_range(self, scheme, part):
        with pytest.raises(InvalidOption):
            scheme.bump("1.2.3", {"part": part})

    def test_invalid_version(self, scheme):
        with pytest.raises(InvalidVersion):
            scheme.bump("1.2beta")
