#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Sep 28 17:12:40 2023

@author: walsh4py developers
"""

import numpy as np
import pytest
from scipy.linalg import hadamard

from walsh4py.basis import (Ordering, bit_reversed_indices, evaluate, evaluate_general, evaluate_one_k, 
                            generate_matrix, ordering_permutation, to_binary_fraction, to_binary_le)
from walsh4py.basis.functions import AntiderivativeFunction, PolynomialFunction

xs = np.arange(100) / 99


# %% Binary expansions

def test_to_binary_le():
    assert to_binary_le(4).tolist() == [0, 0, 1]
    assert to_binary_le(11).tolist() == [1, 1, 0, 1]
    assert len(to_binary_le(0)) == 0


def test_to_binary_fraction():
    assert to_binary_fraction(.625, 3).tolist() == [1, 0, 1]
    assert to_binary_fraction(.5, 4).tolist() == [1, 0, 0, 0]
    assert to_binary_fraction(1.625, 3).tolist() == [1, 0, 1]
    assert to_binary_fraction(np.array([.25, .75]), 2).tolist() == [[0, 1], [1, 1]]


def test_bit_reversed_indices():
    assert bit_reversed_indices(3).tolist() == [0, 4, 2, 6, 1, 5, 3, 7]
    assert bit_reversed_indices(0).tolist() == [0]
    with pytest.raises(ValueError):
        bit_reversed_indices(-1)


# %% Walsh functions

def test_constant_walsh_function():
    w0 = evaluate(0)
    assert all(w0(x) == 1 for x in xs)
    assert np.all(w0(xs) == 1)


def test_walsh_function_one():
    w1 = evaluate(1)
    x = np.arange(100) / 100
    assert np.all(w1(x[x < .5]) == 1)
    assert np.all(w1(x[x > .5]) == -1)


def test_walsh_function_three():
    w3 = evaluate(3)
    x = np.arange(100) / 100
    assert np.all(w3(x[x < .25]) == 1)
    assert np.all(w3(x[x > .75]) == 1)
    assert np.all(w3(x[(x > .25) & (x < .75)]) == -1)


def test_walsh_function_is_periodic():
    w5 = evaluate(5)
    assert np.all(w5(xs[:-1] + 1) == w5(xs[:-1]))
    assert w5(1.) == 1


def test_walsh_functions_match_dyadic_matrix():
    k = 4
    w = generate_matrix(k)
    midpoints = (np.arange(2**k) + 0.5) / 2**k
    for i in range(2**k):
        assert np.all(evaluate(i)(midpoints) == w[i])


def test_general_polynomial_branch():
    w = evaluate_general(1, 0)
    assert all(abs(w(x) - 1) < 1e-15 for x in xs)
    assert isinstance(evaluate_general(3, 2), PolynomialFunction)
    assert evaluate_general(3, 2)(0.5) == pytest.approx(0.125)


def test_general_r_one_is_one_k():
    w = evaluate_general(1, 1)
    assert np.allclose(w(xs), xs, atol=1e-10)
    assert evaluate_general(1, 5)(0.3) == evaluate_one_k(5)(0.3)


def test_general_r_zero_is_walsh():
    assert np.all(evaluate_general(0, 3)(xs) == evaluate(3)(xs))


def test_general_second_antiderivative():
    # W2,2 = int_0^x (x-t) dt = x**2 / 2
    w = evaluate_general(2, 2)
    assert isinstance(w, AntiderivativeFunction)
    assert w(0.5) == pytest.approx(0.125, abs=1e-4)
    assert np.allclose(w(np.array([0.25, 1.])), [0.03125, 0.5], atol=1e-4)


def test_general_antiderivative_of_walsh_one():
    # W2,3 and W3,4 integrate w_1, which is 1 on [0, 1/2) and -1 on [1/2, 1)
    w = evaluate_general(2, 3)
    x = np.array([0.1, 0.3, 0.5])
    assert np.allclose(w(x), x**2 / 2, atol=1e-12)
    assert w(1.) == pytest.approx(0.25, abs=1e-2)
    assert w(0.75) == pytest.approx(0.21875, abs=1e-2)
    assert evaluate_general(3, 4)(0.5) == pytest.approx(0.125 / 6, abs=1e-4)
    assert evaluate_general(3, 4)(1.) == pytest.approx(0.125, abs=5e-3)


def test_antiderivative_function_invalid():
    with pytest.raises(ValueError):
        AntiderivativeFunction(1, 3)
    with pytest.raises(ValueError):
        AntiderivativeFunction(3, 2)


def test_general_invalid():
    with pytest.raises(ValueError):
        evaluate_general(-1, 2)
    with pytest.raises(ValueError):
        evaluate(-3)


@pytest.mark.parametrize('x,expected', [(0, 0), (.25, .25), (.5, .5), (.75, .25), (1, 0)])
def test_one_k_two(x, expected):
    assert evaluate_one_k(2)(x) == pytest.approx(expected)


@pytest.mark.parametrize('x,expected', [(0, 0), (.125, .125), (.25, .25), (.375, .125), (.5, 0),
                                        (.625, .125), (.75, .25), (.875, .125), (1, 0)])
def test_one_k_three(x, expected):
    assert evaluate_one_k(3)(x) == pytest.approx(expected)


@pytest.mark.parametrize('x,expected', [(0, 0), (.125, .125), (.25, .25), (.375, .125), (.5, 0),
                                        (.625, -.125), (.75, -.25), (.875, -.125), (1, 0)])
def test_one_k_four(x, expected):
    assert evaluate_one_k(4)(x) == pytest.approx(expected)


def test_one_k_low_indices():
    assert np.all(evaluate_one_k(0)(xs) == 1)
    assert np.array_equal(evaluate_one_k(1)(xs), xs)


# %% Walsh matrices

@pytest.mark.parametrize('ordering', list(Ordering))
def test_matrix_size_zero(ordering):
    assert generate_matrix(0, ordering).tolist() == [[1]]


def test_dyadic_matrices():
    assert generate_matrix(1).tolist() == [[1, 1], [1, -1]]
    assert generate_matrix(2, 'dyadic').tolist() == [[1, 1, 1, 1],
                                                      [1, 1, -1, -1],
                                                      [1, -1, 1, -1],
                                                      [1, -1, -1, 1]]


def test_natural_matrices():
    assert generate_matrix(1, Ordering.NATURAL).tolist() == [[1, 1], [1, -1]]
    assert generate_matrix(2, Ordering.NATURAL).tolist() == [[1, 1, 1, 1],
                                                              [1, -1, 1, -1],
                                                              [1, 1, -1, -1],
                                                              [1, -1, -1, 1]]
    assert np.array_equal(generate_matrix(5, 'natural'), hadamard(32))


@pytest.mark.parametrize('ordering', list(Ordering))
@pytest.mark.parametrize('k', range(7))
def test_matrix_orthogonality(k, ordering):
    w = generate_matrix(k, ordering).astype(np.int64)
    assert w.dtype == np.int64
    assert np.array_equal(w @ w.T, 2**k * np.eye(2**k, dtype=np.int64))
    assert np.array_equal(w, w.T)
    assert np.all(w[0] == 1)
    assert set(np.unique(w)) <= {-1, 1}


@pytest.mark.parametrize('k', range(6))
def test_ordering_permutation(k):
    p = ordering_permutation(k)
    assert np.array_equal(generate_matrix(k, 'dyadic'), generate_matrix(k, 'natural')[p])


def test_unknown_ordering():
    with pytest.raises(ValueError):
        generate_matrix(2, 'sequency')
