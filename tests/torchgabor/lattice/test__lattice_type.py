"""Tests for lattice_type and is_separable."""

import math

import hypothesis
import numpy
import pytest
import torch

from torchgabor.lattice import (
    InvalidLatticeTypeError,
    is_separable,
    lattice_type,
)
from torchgabor.testing import lattice_types


class TestLatticeType:
    """Tests for lattice type coercion."""

    @pytest.mark.parametrize(
        "value",
        [
            [1, 2],
            (1, 2),
            [1.0, 2.0],
            numpy.array([1.0, 2.0]),
            torch.tensor([1, 2]),
            torch.tensor([[1.0], [2.0]]),
        ],
    )
    def test_accepted_containers(self, value):
        assert lattice_type(value) == (1, 2)

    def test_returns_python_ints(self):
        lt1, lt2 = lattice_type(torch.tensor([1.0, 3.0]))

        assert type(lt1) is int
        assert type(lt2) is int

    def test_round_half_up(self):
        """Elements are rounded with floor(x + 0.5)."""
        assert lattice_type([2.4, 3.6]) == (2, 4)
        assert lattice_type([0.5, 2.5]) == (1, 3)
        assert lattice_type([-0.5, 1.49]) == (0, 1)

    def test_round_half_up_double_precision(self):
        """Sequences are rounded in double precision, not float32."""
        assert lattice_type([1.0, 3.4999999]) == (1, 3)
        assert lattice_type([0.49999999, 2.0]) == (0, 2)
        assert lattice_type((1.0, 3.4999999)) == (1, 3)
        assert lattice_type(numpy.array([1.0, 3.4999999])) == (1, 3)

    def test_non_reduced_is_accepted(self):
        """Reduced form is a caller contract and is not enforced."""
        assert lattice_type([2, 4]) == (2, 4)

    @hypothesis.given(lattice_types())
    def test_reduced_types_round_trip(self, lt):
        assert lattice_type(list(lt)) == lt
        assert lt[1] >= 1
        assert 0 <= lt[0] < lt[1]
        assert lt[0] == 0 or math.gcd(*lt) == 1

    @pytest.mark.parametrize(
        "value",
        [
            [0, 0],
            [0, -1],
            [1, 1],
            [3, 2],
            [-1, 2],
            [2.6, 3.4],
        ],
    )
    def test_out_of_range(self, value):
        with pytest.raises(InvalidLatticeTypeError):
            lattice_type(value)

    @pytest.mark.parametrize(
        "value",
        [
            [1],
            [1, 2, 3],
            [],
            torch.zeros(2, 2),
        ],
    )
    def test_wrong_number_of_elements(self, value):
        with pytest.raises(InvalidLatticeTypeError, match="exactly 2"):
            lattice_type(value)

    @pytest.mark.parametrize(
        "value",
        [
            [float("nan"), 2.0],
            [0.0, float("inf")],
            [1 + 1j, 2],
            torch.tensor([True, True]),
            "12",
        ],
    )
    def test_not_real_finite(self, value):
        with pytest.raises(InvalidLatticeTypeError):
            lattice_type(value)


class TestIsSeparable:
    """Tests for is_separable."""

    def test_separable(self):
        assert is_separable([0, 1])
        assert is_separable([0.2, 3])

    def test_non_separable(self):
        assert not is_separable([1, 2])
        assert not is_separable([0.5, 2])

    @hypothesis.given(lattice_types(separable=False))
    def test_sheared_lattices(self, lt):
        assert not is_separable(lt)

    def test_invalid(self):
        with pytest.raises(InvalidLatticeTypeError):
            is_separable([1, 1])
