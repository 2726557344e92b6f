#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Oct  3 11:48:20 2023

@author: walsh4py developers
"""

import numpy as np
from pymor.core.defaults import defaults

from walsh4py.basis.functions import WalshFunction
from walsh4py.basis.ordering import Ordering
from walsh4py.basis.walsh import generate_matrix
from walsh4py.transforms.sobolev import increments, partial_sum_one_k
from walsh4py.utilities.quadrature import integrate
from walsh4py.utilities.utilities import check_index


def coefficient_one_k(f, k, ordering=Ordering.DYADIC):
    """
    Single coefficient of the W1,k series of f, without computing the whole 
    transform. The increments of f are sampled on the coarsest dyadic grid 
    on which w_{k-1} is constant, and projected onto the Walsh matrix row 
    k-1. For the dyadic ordering it is the entry k-1 of `sobolev_forward(f, m)`
    for any m with 2**m >= k.

    Parameters
    ----------
    f : callable
        Scalar function on [0, 1].
    k : int
        Index of the coefficient. k = 0 and k = 1 both give f(1) - f(0).
    ordering : Ordering or str, optional
        Ordering of the Walsh matrix. Default is Ordering.DYADIC.

    Returns
    -------
    c : float

    """
    k = check_index(k, 'k')
    if k <= 1:
        return f(1.) - f(0.)
    row = k - 1
    n = row.bit_length()
    w = generate_matrix(n, ordering)
    return float(np.dot(w[row], increments(f, n)))


@defaults('n', 'rule')
def coefficient_one_k_quadrature(df, k, n=64, rule='rectangular'):
    """
    Coefficient of the W1,k series of a function from its derivative df, 
    int_0^1 df(t) w_{k-1}(t) dt, approximated by quadrature on n subintervals.
    """
    k = check_index(k, 'k')
    w = WalshFunction(max(k - 1, 0))
    return integrate(lambda t: df(t) * w(t), 0., 1., n, rule)


def partial_sum_one_k_from_function(f, n):
    """
    Partial sum of the first n terms of the W1,k series of f, with the 
    coefficients computed one by one by `coefficient_one_k`.
    """
    n = check_index(n)
    coefficients = [coefficient_one_k(f, i) for i in range(1, n + 1)]
    return partial_sum_one_k(f(0.), coefficients)
