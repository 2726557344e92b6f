#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Oct  3 10:31:15 2023

@author: walsh4py developers
"""

import numpy as np
import pytest

from walsh4py.utilities import InvalidLengthError, as_signal, check_index, integrate, is_power_of_two


def test_is_power_of_two():
    assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


def test_as_signal_copies():
    v = [1, 2, 3, 4]
    a, d = as_signal(v)
    assert d == 2
    assert a.dtype == np.float64
    a[0] = 10
    assert v[0] == 1


@pytest.mark.parametrize('v', [[], [1., 2., 3.], np.ones((2, 2))])
def test_as_signal_invalid_length(v):
    with pytest.raises(InvalidLengthError):
        as_signal(v)


def test_check_index():
    assert check_index(np.int64(3)) == 3
    with pytest.raises(ValueError):
        check_index(-1)
    with pytest.raises(ValueError):
        check_index(1.5)


@pytest.mark.parametrize('rule', ['rectangular', 'trapezoid', 'simpson'])
def test_integrate_polynomial(rule):
    # exact for affine integrands
    assert integrate(lambda x: 3 * x + 1, 0., 2., 4, rule) == pytest.approx(8.)
    assert integrate(lambda x: x**2, 0., 1., 64, rule) == pytest.approx(1 / 3, abs=1e-3)


def test_integrate_simpson_cubic():
    assert integrate(lambda x: x**3, 0., 1., 2, 'simpson') == pytest.approx(0.25)


def test_integrate_empty_interval():
    assert integrate(np.sin, 0.5, 0.5, 8) == 0.


def test_integrate_invalid():
    with pytest.raises(ValueError):
        integrate(np.sin, 0., 1., 4, 'gauss')
    with pytest.raises(ValueError):
        integrate(np.sin, 0., 1., 0)
