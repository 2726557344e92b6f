#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Sep 28 14:21:09 2023

@author: walsh4py developers
"""

import numpy as np
from pymor.core.defaults import defaults
from pymor.core.logger import getLogger

from walsh4py.basis.binary import bit_reversed_indices
from walsh4py.basis.functions import (AntiderivativeFunction, ConstantFunction, OneKFunction, 
                                      PolynomialFunction, WalshFunction)
from walsh4py.basis.ordering import Ordering, as_ordering
from walsh4py.utilities.utilities import check_index

logger = getLogger('walsh4py.basis.walsh')


def evaluate(n):
    """
    Walsh function of index n, see `WalshFunction`.
    """
    return WalshFunction(check_index(n))


def evaluate_one_k(k):
    """
    Function W1,k of the sequency-one family: the constant 1 for k = 0, the 
    identity for k = 1, and the antiderivative of w_{k-1} otherwise.

    Parameters
    ----------
    k : int
        Non-negative index.

    Returns
    -------
    function : BasisFunction

    """
    k = check_index(k, 'k')
    if k == 0:
        return ConstantFunction(1.)
    return OneKFunction(k)


@defaults('n', 'rule')
def evaluate_general(r, k, n=64, rule='trapezoid'):
    """
    The function Wr,k, r-th antiderivative of the Walsh function w_{k-r}.

    Parameters
    ----------
    r : int
        Order of the antiderivative. r = 0 gives the Walsh function w_k itself.
    k : int
        Index of the function. For k < r, Wr,k is the monomial x^k / k!.
    n : int, optional
        Number of quadrature subintervals used for r >= 2. Default is 64.
    rule : str, optional
        Quadrature rule used for r >= 2. Default is 'trapezoid'.

    Returns
    -------
    function : BasisFunction

    """
    r = check_index(r, 'r')
    k = check_index(k, 'k')
    if k < r:
        return PolynomialFunction(k)
    if r == 0:
        return WalshFunction(k)
    if r == 1:
        return evaluate_one_k(k)
    return AntiderivativeFunction(r, k, n, rule)


def _dyadic_matrix(k):
    matrix = np.ones((1, 1), dtype=np.int8)
    for _ in range(k):
        m = matrix.shape[0]
        doubled = np.empty((2 * m, 2 * m), dtype=np.int8)
        doubled[0::2, :m] = matrix
        doubled[0::2, m:] = matrix
        doubled[1::2, :m] = matrix
        doubled[1::2, m:] = -matrix
        matrix = doubled
    return matrix


def _natural_matrix(k):
    matrix = np.ones((1, 1), dtype=np.int8)
    for _ in range(k):
        matrix = np.block([[matrix, matrix], [matrix, -matrix]])
    return matrix


def generate_matrix(k, ordering=Ordering.DYADIC):
    """
    Walsh matrix of size 2**k. Row i holds the values of the i-th Walsh 
    function of the given ordering on the 2**k dyadic subintervals of [0, 1).

    Parameters
    ----------
    k : int
        Base 2 logarithm of the size of the matrix.
    ordering : Ordering or str, optional
        Ordering of the rows. Default is Ordering.DYADIC.

    Returns
    -------
    matrix : ndarray of int8 of shape (2**k, 2**k)
        Symmetric matrix with entries +-1 such that matrix @ matrix.T is 
        2**k times the identity.

    """
    k = check_index(k, 'k')
    ordering = as_ordering(ordering)
    logger.debug(f"Generating {ordering.value} Walsh matrix of size {2**k}")
    if ordering is Ordering.NATURAL:
        return _natural_matrix(k)
    return _dyadic_matrix(k)


def ordering_permutation(k):
    """
    Permutation p of range(2**k) such that 
    generate_matrix(k, 'dyadic') == generate_matrix(k, 'natural')[p].
    """
    return bit_reversed_indices(k)
