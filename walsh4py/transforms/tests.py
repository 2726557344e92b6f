#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Oct  3 14:55:02 2023

@author: walsh4py developers
"""

import numpy as np
import pytest

from walsh4py.basis import Ordering, bit_reversed_indices, evaluate, generate_matrix
from walsh4py.transforms import (OneKSeries, PiecewiseLinearFunction, WalshTransformOperator, 
                                 bit_reversal_permute, butterfly, coefficient_one_k, 
                                 coefficient_one_k_quadrature, fast_forward, fast_inverse, forward, 
                                 increments, inverse, inverse_transform, partial_sum, 
                                 partial_sum_one_k, partial_sum_one_k_from_function, sobolev_forward, 
                                 sobolev_inverse, transform)
from walsh4py.transforms.fwht import fwht_ip
from walsh4py.utilities import InvalidLengthError

orderings = list(Ordering)


def f(x):
    return x * x


def df(x):
    return 2 * x


# %% Matrix transform

def test_forward():
    assert forward([1., 0, 1, 0]).tolist() == [2., 0, 2, 0]


def test_inverse():
    assert inverse([2., 0, 2, 0]).tolist() == [1., 0, 1, 0]


@pytest.mark.parametrize('ordering', orderings)
@pytest.mark.parametrize('k', [0, 1, 3, 6])
def test_matrix_round_trip(k, ordering):
    v = np.random.RandomState(k).randn(2**k)
    assert np.allclose(inverse(forward(v, ordering), ordering), v, atol=1e-10)


def test_forward_does_not_modify_input():
    v = np.array([1., 2., 3., 4.])
    forward(v)
    fast_forward(v)
    assert v.tolist() == [1., 2., 3., 4.]


def test_partial_sum():
    n = 8
    g = partial_sum(np.sin, n)
    samples = np.sin(np.arange(n) / (n - 1))
    for x in [0., 0.2, 0.55, 0.9, 1.]:
        expected = sum(samples[i] * evaluate(i)(min(x, 1 - 1 / n)) for i in range(n))
        assert g(x) == pytest.approx(expected)
    assert g(1.) == g(1 - 1 / n)


def test_partial_sum_invalid():
    with pytest.raises(ValueError):
        partial_sum(np.sin, 1)


# %% Fast transform

def test_fast_transform_natural():
    x = [1, 0, 1, 0, 0, 1, 1, 0.]
    assert fast_forward(x, Ordering.NATURAL).tolist() == [4, 2, 0, -2, 0, 2, 0, 2]


def test_fast_inverse_natural():
    x = [1, 0, 1, 0, 0, 1, 1, 0.]
    y = fast_forward(x, Ordering.NATURAL)
    assert fast_inverse(y, Ordering.NATURAL).tolist() == x


@pytest.mark.parametrize('ordering', orderings)
@pytest.mark.parametrize('k', [0, 1, 3, 6, 10])
def test_fast_round_trip(k, ordering):
    v = np.random.RandomState(k).randn(2**k)
    assert np.allclose(fast_inverse(fast_forward(v, ordering), ordering), v, atol=1e-10)


def test_fast_round_trip_quadratic():
    k = 3
    x = np.arange(2**k) / (2**k - 1)
    y = 2 * x**2
    c = fast_forward(y)
    assert np.allclose(fast_inverse(c), y, atol=1e-10)


@pytest.mark.parametrize('ordering', orderings)
@pytest.mark.parametrize('k', [1, 2, 5, 8])
def test_fast_matches_matrix(k, ordering):
    v = np.random.RandomState(k).randn(2**k)
    assert np.allclose(fast_forward(v, ordering), forward(v, ordering), atol=1e-10)
    assert np.allclose(transform(v, ordering, 'matrix'), transform(v, ordering, 'fast'), atol=1e-10)
    assert np.allclose(inverse_transform(v, ordering, 'matrix'), 
                       inverse_transform(v, ordering, 'fast'), atol=1e-10)


def test_bit_reversal_permute():
    assert bit_reversal_permute(np.arange(8)).tolist() == [0, 4, 2, 6, 1, 5, 3, 7]
    assert bit_reversed_indices(2).tolist() == [0, 2, 1, 3]
    assert bit_reversal_permute([3.]).tolist() == [3.]


def test_butterfly_twice_scales():
    v = np.random.RandomState(0).randn(16)
    assert np.allclose(butterfly(butterfly(v)), 16 * v)


def test_fwht_ip_rows():
    a = np.random.RandomState(1).randn(3, 8)
    expected = np.array([butterfly(row) for row in a])
    fwht_ip(a)
    assert np.allclose(a, expected)


@pytest.mark.parametrize('func', [forward, inverse, fast_forward, fast_inverse, 
                                  bit_reversal_permute, butterfly])
@pytest.mark.parametrize('v', [[], [1., 2., 3.], np.ones(12), np.ones((4, 4))])
def test_invalid_length(func, v):
    with pytest.raises(InvalidLengthError):
        func(v)


def test_unknown_method():
    with pytest.raises(ValueError):
        transform(np.ones(4), method='recursive')
    with pytest.raises(ValueError):
        WalshTransformOperator(2, method='recursive')


# %% Walsh-Sobolev transform

def test_sobolev_forward_is_transform_of_increments():
    k = 4
    n = 2**k
    g = [f((i + 1) / n) - f(i / n) for i in range(n)]
    assert np.allclose(increments(f, k), g)
    assert np.allclose(sobolev_forward(f, k), forward(g), atol=1e-12)


@pytest.mark.parametrize('ordering', orderings)
@pytest.mark.parametrize('k', [4, 5, 6])
def test_sobolev_reconstruction(k, ordering):
    c = sobolev_forward(f, k, ordering)
    y = sobolev_inverse(c, f(0), ordering)
    x = np.arange(100) / 99
    assert isinstance(y, PiecewiseLinearFunction)
    assert np.allclose(y(x), f(x), atol=1e-3)
    assert all(abs(y(xi) - f(xi)) < 1e-3 for xi in x)


@pytest.mark.parametrize('k', [4, 5, 6])
def test_sobolev_reconstruction_on_grid(k):
    n = 2**k
    x = np.arange(n) / (n - 1)
    y = sobolev_inverse(sobolev_forward(f, k), f(0))
    assert np.allclose(y(x), f(x), atol=1e-3)
    nodes = np.arange(n + 1) / n
    assert np.allclose(y(nodes), f(nodes), atol=1e-12)


def test_piecewise_linear_function():
    y = PiecewiseLinearFunction(np.array([1., 3., 2.]))
    assert y(-0.5) == 1.
    assert y(0.) == 1.
    assert y(0.25) == pytest.approx(2.)
    assert y(0.5) == 3.
    assert y(0.75) == pytest.approx(2.5)
    assert y(1.) == 2.
    assert y(7.) == 2.
    assert y(np.array([[0.25, 0.5]])).shape == (1, 2)
    assert np.allclose(y.nodes, [0., 0.5, 1.])


def test_piecewise_linear_function_invalid():
    with pytest.raises(ValueError):
        PiecewiseLinearFunction(np.array([1.]))


@pytest.mark.parametrize('k', [4, 5, 6])
def test_partial_sum_one_k(k):
    n = 2**k
    x = np.arange(n) / (n - 1)
    c = sobolev_forward(f, k)
    s = partial_sum_one_k(f(0), c)
    assert isinstance(s, OneKSeries)
    assert np.allclose(s(x), f(x), atol=1e-3)
    assert np.allclose(s(x), sobolev_inverse(c, f(0))(x), atol=1e-10)


@pytest.mark.parametrize('k', [4, 5, 6])
def test_coefficient_consistency(k):
    n = 2**k
    c1 = sobolev_forward(f, k)
    c2 = [coefficient_one_k(f, i) for i in range(1, n + 1)]
    assert np.allclose(c1, c2, rtol=0, atol=1e-10)


def test_coefficient_low_indices():
    g = lambda x: np.exp(x)
    assert coefficient_one_k(g, 0) == coefficient_one_k(g, 1) == pytest.approx(np.e - 1)


def test_coefficient_natural_row():
    # k - 1 = 2 needs the 4 x 4 natural matrix, row 2 is [1, 1, -1, -1]
    g = increments(f, 2)
    expected = g[0] + g[1] - g[2] - g[3]
    assert coefficient_one_k(f, 3, Ordering.NATURAL) == pytest.approx(expected)


def test_coefficient_quadrature():
    k = 3
    c = sobolev_forward(f, k)
    for i in range(1, 2**k + 1):
        assert coefficient_one_k_quadrature(df, i) == pytest.approx(c[i - 1], abs=1e-3)


def test_partial_sum_one_k_from_function():
    k = 4
    x = np.arange(50) / 49
    s = partial_sum_one_k_from_function(f, 2**k)
    assert np.allclose(s(x), partial_sum_one_k(f(0), sobolev_forward(f, k))(x), atol=1e-10)


# %% Operator

@pytest.mark.parametrize('ordering', orderings)
@pytest.mark.parametrize('method', ['fast', 'matrix'])
def test_walsh_transform_operator(ordering, method):
    k = 3
    op = WalshTransformOperator(k, ordering, method)
    data = np.random.RandomState(2).randn(4, 2**k)
    U = op.source.from_numpy(data)
    V = op.apply(U)
    expected = np.array([forward(u, ordering) for u in data])
    assert np.allclose(V.to_numpy(), expected)
    assert np.allclose(op.apply_adjoint(U).to_numpy(), expected)
    assert np.allclose(op.apply_inverse(V).to_numpy(), data)
    assert np.allclose(op.apply_inverse_adjoint(V).to_numpy(), data)
    assert np.array_equal(op.get_matrix(), generate_matrix(k, ordering))
    assert len(op.as_range_array()) == 2**k


@pytest.mark.parametrize('ordering', orderings)
@pytest.mark.parametrize('n_vectors', [0, 1, 5])
def test_walsh_transform_operator_block(ordering, n_vectors):
    k = 5
    fast = WalshTransformOperator(k, ordering, 'fast')
    matrix = WalshTransformOperator(k, ordering, 'matrix')
    data = np.random.RandomState(n_vectors).randn(n_vectors, 2**k)
    U = fast.source.from_numpy(data)
    expected = np.array([fast_forward(u, ordering) for u in data]).reshape(n_vectors, 2**k)
    assert np.allclose(fast.apply(U).to_numpy(), expected)
    assert np.allclose(matrix.apply(U).to_numpy(), expected)
    assert np.allclose(fast.apply_inverse(fast.apply(U)).to_numpy(), data)
    assert np.allclose(U.to_numpy(), data)
