"""
Tests for plain-text matrix rendering.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.formatting import format_matrix, format_scalar, format_vector


class TestFormatMatrix:

    def test_integer_entries(self):
        text = format_matrix([[4, 7, 1], [5, 8, 3]])
        assert text == "[ 4       7       1]\n[ 5       8       3]"

    def test_significant_digits(self):
        assert format_matrix([[1 / 3, 2.0]]) == "[ 0.3333       2]"

    def test_precision_and_width(self):
        assert format_matrix([[1.23456, 2.0]], precision=2, width=4) == "[ 1.2   2]"

    def test_negative_zero_printed_as_zero(self):
        assert format_matrix([[-0.0, 1.0]]) == "[ 0       1]"

    def test_empty_matrix(self):
        assert format_matrix([]) == ""

    def test_single_column(self):
        assert format_matrix(np.array([[5.0], [3.0]])) == "[ 5]\n[ 3]"

    def test_invalid_precision(self):
        with pytest.raises(ValidationError, match="precision"):
            format_matrix([[1.0]], precision=0)


class TestFormatHelpers:

    def test_format_scalar(self):
        assert format_scalar(-6.294117647) == "-6.294"

    def test_format_vector_is_one_based(self):
        assert format_vector([1.0, 2.5]) == "x1 = 1\nx2 = 2.5"
