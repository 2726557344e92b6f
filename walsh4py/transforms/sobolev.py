#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct  2 15:37:06 2023

@author: walsh4py developers
"""

import numpy as np
from pymor.core.defaults import defaults
from pymor.core.logger import getLogger

from walsh4py.basis.functions import BasisFunction, OneKFunction
from walsh4py.basis.ordering import Ordering
from walsh4py.transforms.fast import fast_forward, fast_inverse
from walsh4py.utilities.utilities import check_index, sample

logger = getLogger('walsh4py.transforms.sobolev')


def increments(f, k):
    """
    Increments f((i+1)/2**k) - f(i/2**k) of f on the dyadic grid of [0, 1].
    """
    n = 2**check_index(k, 'k')
    values = sample(f, np.arange(n + 1) / n)
    return np.diff(values)


def sobolev_forward(f, k, ordering=Ordering.DYADIC):
    """
    Walsh-Sobolev transform of f: the fast Walsh transform of the increments 
    of f on the 2**k dyadic cells of [0, 1], which approximates the Walsh 
    coefficients of the derivative of f.

    Parameters
    ----------
    f : callable
        Scalar function on [0, 1].
    k : int
        Base 2 logarithm of the number of coefficients.
    ordering : Ordering or str, optional
        Ordering of the coefficients. Default is Ordering.DYADIC.

    Returns
    -------
    c : ndarray of shape (2**k,)
        The coefficients.

    """
    g = increments(f, k)
    logger.debug(f"Walsh-Sobolev transform with {len(g)} increments")
    return fast_forward(g, ordering)


class PiecewiseLinearFunction(BasisFunction):
    """
    Continuous piecewise linear function on the uniform partition of [0, 1] 
    in n cells, constant outside of [0, 1].
    
    Attributes
    ----------
    values : ndarray of shape (n+1,)
        Values at the nodes i/n.
    tol : float
        Points x such that x*n is closer than tol to an integer are treated 
        as nodes and get the node value without interpolation.
    """

    def __init__(self, values, tol=1e-12):
        if len(values) < 2:
            raise ValueError(f"a piecewise linear function needs at least 2 node values, got {len(values)}")
        self.__auto_init(locals())

    @property
    def nodes(self):
        return np.linspace(0., 1., len(self.values))

    def evaluate(self, x):
        s = self.values
        n = len(s) - 1
        scaled = np.clip(x, 0., 1.) * n
        index = np.minimum(np.floor(scaled).astype(np.int64), n - 1)
        p = scaled - index
        result = s[index] + (s[index + 1] - s[index]) * p
        nearest = np.rint(scaled).astype(np.int64)
        result = np.where(np.abs(scaled - nearest) < self.tol, s[nearest], result)
        result = np.where(x <= 0, s[0], result)
        result = np.where(x >= 1, s[n], result)
        return result


@defaults('tol')
def sobolev_inverse(coefficients, f0, ordering=Ordering.DYADIC, tol=1e-12):
    """
    Inverse Walsh-Sobolev transform: the increments recovered by the inverse 
    fast Walsh transform are summed up from f0 into the node values of a 
    piecewise linear function.

    Parameters
    ----------
    coefficients : array_like of shape (2**k,)
        Coefficients, as returned by `sobolev_forward`.
    f0 : float
        Value of the function at 0.
    ordering : Ordering or str, optional
        Ordering of the coefficients. Default is Ordering.DYADIC.
    tol : float, optional
        Tolerance used to detect nodes, see `PiecewiseLinearFunction`.

    Returns
    -------
    function : PiecewiseLinearFunction

    """
    g = fast_inverse(coefficients, ordering)
    values = np.cumsum(np.concatenate([[f0], g]))
    values.setflags(write=False)
    return PiecewiseLinearFunction(values, tol)


class OneKSeries(BasisFunction):
    """
    Series x -> f0 + sum_i coefficients[i] * W1,(i+1)(x).
    
    Attributes
    ----------
    f0 : float
        Value at 0.
    coefficients : ndarray
        Coefficients in dyadic ordering.
    """

    def __init__(self, f0, coefficients):
        self.__auto_init(locals())
        self._terms = [OneKFunction(i + 1) for i in range(len(coefficients))]

    def evaluate(self, x):
        result = np.full(x.shape, float(self.f0))
        for c, w in zip(self.coefficients, self._terms):
            result += c * w.evaluate(x)
        return result


def partial_sum_one_k(f0, coefficients):
    """
    Reconstruct a function from its value at 0 and its dyadic Walsh-Sobolev 
    coefficients as a series of the W1,k functions. With all 2**k 
    coefficients of `sobolev_forward`, this is the same function as the one 
    returned by `sobolev_inverse`.
    """
    coefficients = np.array(coefficients, dtype=float)
    coefficients.setflags(write=False)
    return OneKSeries(f0, coefficients)
