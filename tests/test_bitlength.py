import pytest

from arithcode.coding.bitlength import compression_ratio, estimate_bit_length


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.3, 4),
        (0.5, 4),
        (0.25, 8),
        (0.565, 12),
        (0.123456789012345, 60),
        (0.0, 0),
        (1.0, 0),
    ],
)
def test_estimate_bit_length(value: float, expected: int):
    assert estimate_bit_length(value) == expected


def test_rendering_uses_fifteen_digits():
    """0.1 + 0.2 carries noise past the 15th digit, which is dropped."""

    assert estimate_bit_length(0.1 + 0.2) == 4


def test_compression_ratio():
    assert compression_ratio("AAB", 4) == 6.0
    assert compression_ratio("hello", 8) == 5.0


def test_compression_ratio_degenerate():
    assert compression_ratio("", 4) == 0.0
    assert compression_ratio("AAB", 0) == 0.0
