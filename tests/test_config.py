#!/usr/bin/env python3
"""Tests for argument validation and defaults."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fractal_image_composer import (MAX_OFFSETS, FractalConfig,
                                    InvalidArgumentError, Point,
                                    parse_offset_values)


def test_defaults():
    config = FractalConfig.from_args([])
    assert config.reduction_factor == 2
    assert config.iterations == 2
    assert config.offsets is None


def test_default_offset_is_image_centre():
    assert FractalConfig().resolve_offsets(101, 60) == [Point(50, 30)]


def test_parameters_without_offsets_mean_no_pastes():
    config = FractalConfig.from_args(["2", "2"])
    assert config.offsets == []
    assert config.resolve_offsets(101, 60) == []


def test_explicit_offsets_override_centre():
    config = FractalConfig.from_args(["3", "2", "150", "100", "500", "50"])
    assert config.reduction_factor == 3
    assert config.iterations == 2
    assert config.resolve_offsets(640, 480) == [Point(150, 100), Point(500, 50)]


def test_negative_offsets_allowed():
    config = FractalConfig.from_args(["2", "2", "-100", "-100", "0", "0"])
    assert config.offsets == [Point(-100, -100), Point(0, 0)]


def test_odd_offset_count_rejected():
    with pytest.raises(InvalidArgumentError, match="even number"):
        parse_offset_values(["1", "2", "3"])


def test_reduction_without_iterations_rejected():
    with pytest.raises(InvalidArgumentError):
        FractalConfig.from_args(["2"])


def test_too_many_offsets_rejected():
    values = [str(i) for i in range(2 * (MAX_OFFSETS + 1))]
    with pytest.raises(InvalidArgumentError, match="Max 10"):
        parse_offset_values(values)
    assert len(parse_offset_values(values[:2 * MAX_OFFSETS])) == MAX_OFFSETS


def test_non_integer_rejected():
    with pytest.raises(InvalidArgumentError):
        FractalConfig.from_args(["two", "2"])
    with pytest.raises(InvalidArgumentError):
        parse_offset_values(["1", "x"])


@pytest.mark.parametrize("params", [["0", "2"], ["-1", "2"], ["2", "-1"]])
def test_out_of_range_parameters_rejected(params):
    with pytest.raises(InvalidArgumentError):
        FractalConfig.from_args(params)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        parse_offset_values(["1"])


def test_validate_counts_points():
    config = FractalConfig(offsets=[Point(i, i) for i in range(MAX_OFFSETS + 1)])
    with pytest.raises(InvalidArgumentError):
        config.validate()
