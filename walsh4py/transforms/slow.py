#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Sep 29 14:02:18 2023

@author: walsh4py developers
"""

import numpy as np
from pymor.core.logger import getLogger

from walsh4py.basis.functions import BasisFunction, WalshFunction
from walsh4py.basis.ordering import Ordering, as_ordering
from walsh4py.basis.walsh import generate_matrix
from walsh4py.utilities.utilities import as_signal, check_index, sample

logger = getLogger('walsh4py.transforms.slow')


def forward(y, ordering=Ordering.DYADIC):
    """
    Walsh transform by matrix multiplication, c = W @ y.

    Parameters
    ----------
    y : array_like of shape (2**k,)
        The samples to transform.
    ordering : Ordering or str, optional
        Ordering of the Walsh matrix. Default is Ordering.DYADIC.

    Returns
    -------
    c : ndarray of shape (2**k,)
        The unnormalized Walsh coefficients of y.

    """
    y, k = as_signal(y)
    ordering = as_ordering(ordering)
    logger.debug(f"Matrix Walsh transform of length {2**k}")
    return generate_matrix(k, ordering) @ y


def inverse(c, ordering=Ordering.DYADIC):
    """
    Inverse of `forward`, y = W @ c / len(c).
    """
    result = forward(c, ordering)
    return result / len(result)


class PartialSumFunction(BasisFunction):
    """
    Finite Walsh sum x -> sum_i samples[i] * w_i(min(x, 1 - 1/n)), where 
    samples[i] = f(i / (n-1)). Clamping keeps x = 1 inside the last dyadic 
    cell instead of wrapping around to 0.
    
    Attributes
    ----------
    samples : ndarray of shape (n,)
        Weights of the Walsh functions.
    """

    def __init__(self, samples):
        self.__auto_init(locals())
        self._walsh = [WalshFunction(i) for i in range(len(samples))]

    def evaluate(self, x):
        n = len(self.samples)
        x = np.minimum(x, 1 - 1 / n)
        result = np.zeros(x.shape)
        for weight, w in zip(self.samples, self._walsh):
            result += weight * w.evaluate(x)
        return result


def partial_sum(f, n):
    """
    Walsh partial sum of order n of the function f sampled at n equally 
    spaced points of [0, 1], see `PartialSumFunction`.

    Parameters
    ----------
    f : callable
        Scalar function on [0, 1].
    n : int
        Number of terms, at least 2.

    Returns
    -------
    function : PartialSumFunction

    """
    n = check_index(n)
    if n < 2:
        raise ValueError(f"a partial sum needs at least 2 terms, got {n}")
    samples = sample(f, np.arange(n) / (n - 1))
    samples.setflags(write=False)
    return PartialSumFunction(samples)
