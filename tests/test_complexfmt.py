import pytest

from fftframe.complexfmt import format_complex


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (complex(3.0, 4.0), "3.00 + 4.00i"),
        (complex(1.0, -2.0), "1.00 - 2.00i"),
        (complex(0.0, 0.0), "0.00 + 0.00i"),
    ],
)
def test_format_complex(value, expected):
    assert format_complex(value) == expected


def test_negative_imaginary_part_uses_minus_sign():
    text = format_complex(complex(-1.5, -0.25))
    assert text.startswith("-1.50 - ")
    assert text.endswith("0.25i")


def test_real_number_has_zero_imaginary_part():
    assert format_complex(2.5) == "2.50 + 0.00i"