"""
Tests for timing and tolerance infrastructure.
"""

import pytest

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    EXACT_FP64,
    PIVOT_TOLERANCE,
    PROPERTY_FP64,
    SINGULAR_TOLERANCE,
    check_tolerance,
)
from pymatrix.core.exceptions import ValidationError


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('expansion'):
            pass
        with timer.section('expansion'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'expansion'}
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert 'total_seconds' in timer.result()


class TestTolerances:

    def test_defaults(self):
        assert PIVOT_TOLERANCE == 1e-10
        assert SINGULAR_TOLERANCE == 1e-10

    def test_tiers(self):
        assert PROPERTY_FP64.atol == 1e-9
        assert EXACT_FP64.rtol == 1e-10

    def test_check_tolerance_accepts_zero(self):
        assert check_tolerance(0, 'tol') == 0.0

    @pytest.mark.parametrize("tol", [-1e-10, float('nan'), float('inf'), "small"])
    def test_check_tolerance_rejects(self, tol):
        with pytest.raises(ValidationError, match="tol"):
            check_tolerance(tol, 'tol')
