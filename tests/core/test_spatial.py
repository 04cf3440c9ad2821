"""Tests for spatial hashing operations.

Critical Invariants:
- quantize rounds towards negative infinity
- region enumerates every cell, first axis slowest, deterministically
- flatten never aliases distinct cells strictly inside the field
- inbounds includes the field size itself
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gridecs.core.spatial import flatten, inbounds, quantize, region

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
positive = st.floats(min_value=1e-3, max_value=1e3, allow_nan=False, allow_infinity=False)


# Quantization


def test_quantize_rounds_towards_negative_infinity():
    assert quantize((1.0, 1.0), (-0.1, 2.9)) == (-1, 2)


def test_quantize_has_no_discontinuity_at_zero():
    """-0.1 and -1.0 share cell -1; 0.0 starts cell 0."""
    assert quantize((1.0,), (-0.1,)) == (-1,)
    assert quantize((1.0,), (-1.0,)) == (-1,)
    assert quantize((1.0,), (0.0,)) == (0,)


def test_quantize_uses_per_axis_cell_size():
    assert quantize((2.0, 0.5, 10.0), (5.0, 5.0, 5.0)) == (2, 10, 0)


def test_quantize_returns_ints():
    cell = quantize((0.25, 0.25), (1.3, -7.9))
    assert all(isinstance(x, int) for x in cell)


def test_quantize_rejects_mismatched_axes():
    with pytest.raises(ValueError):
        quantize((1.0, 1.0), (0.5,))


@given(
    sizes=st.lists(positive, min_size=1, max_size=4),
    data=st.data(),
)
def test_quantize_is_floor_of_quotient(sizes, data):
    """PROPERTY: each axis equals floor(point / size)."""
    point = data.draw(st.lists(finite, min_size=len(sizes), max_size=len(sizes)))

    cell = quantize(sizes, point)

    assert cell == tuple(math.floor(p / s) for s, p in zip(sizes, point))


# Region enumeration


def test_region_unit_square_order():
    assert region((0, 0), (1, 1)) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_region_is_repeatable():
    assert region((-1, 2), (1, 4)) == region((-1, 2), (1, 4))


def test_region_reversed_bounds_is_empty():
    assert region((1, 1), (0, 0)) == []


def test_region_empty_when_any_axis_is_inverted():
    assert region((0, 5, 0), (3, 4, 3)) == []


def test_region_single_cell():
    assert region((2, -3), (2, -3)) == [(2, -3)]


@given(
    low=st.tuples(st.integers(-5, 5), st.integers(-5, 5), st.integers(-5, 5)),
    extent=st.tuples(st.integers(-1, 3), st.integers(-1, 3), st.integers(-1, 3)),
)
def test_region_is_complete_and_sorted(low, extent):
    """PROPERTY: region holds exactly the cells of the box, lexicographically ordered."""
    high = tuple(lo + e for lo, e in zip(low, extent))

    cells = region(low, high)

    expected_count = math.prod(max(e + 1, 0) for e in extent)
    assert len(cells) == expected_count
    assert len(set(cells)) == len(cells)
    assert cells == sorted(cells)
    for cell in cells:
        assert all(lo <= x <= hi for lo, x, hi in zip(low, cell, high))


# Flattening


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ((0, 0), 0),
        ((1, 0), 1),
        ((2, 0), 2),
        ((0, 1), 3),
        ((2, 2), 8),
    ],
)
def test_flatten_first_axis_is_least_significant(cell, expected):
    assert flatten((3, 3), cell) == expected


def test_flatten_three_axes():
    # x + 4 * (y + 5 * z)
    assert flatten((4, 5, 6), (1, 2, 3)) == 1 + 4 * (2 + 5 * 3)


def test_flatten_does_not_check_bounds():
    """Out-of-field cells produce out-of-range indices instead of failing."""
    assert flatten((3, 3), (-1, 0)) == -1
    assert flatten((3, 3), (5, 5)) == 20


def test_flatten_boundary_cells_alias():
    """The inclusive bound of inbounds admits cells that collide with interior cells."""
    assert inbounds((3, 3), (3, 0))
    assert flatten((3, 3), (3, 0)) == flatten((3, 3), (0, 1))


@given(size=st.tuples(st.integers(1, 6), st.integers(1, 6), st.integers(1, 6)))
def test_flatten_is_injective_inside_field(size):
    """PROPERTY: distinct cells in [0, size) map to distinct indices in [0, prod(size))."""
    cells = region((0, 0, 0), tuple(n - 1 for n in size))

    indices = [flatten(size, cell) for cell in cells]

    assert len(set(indices)) == len(cells)
    assert sorted(indices) == list(range(math.prod(size)))


# Bounds checking


def test_inbounds_upper_bound_is_inclusive():
    assert inbounds((3, 3), (3, 3))
    assert not inbounds((3, 3), (4, 3))


def test_inbounds_origin():
    assert inbounds((3, 3), (0, 0))


@given(size=st.lists(st.integers(0, 100), min_size=1, max_size=4))
def test_inbounds_accepts_field_size(size):
    """PROPERTY: the field size vector itself is always in bounds."""
    assert inbounds(size, size)


@given(
    size=st.lists(st.integers(0, 100), min_size=1, max_size=4),
    data=st.data(),
)
def test_inbounds_rejects_negative_axes(size, data):
    """PROPERTY: any negative component is out of bounds."""
    cell = list(size)
    axis = data.draw(st.integers(0, len(size) - 1))
    cell[axis] = data.draw(st.integers(-100, -1))

    assert not inbounds(size, cell)
