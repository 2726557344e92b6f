#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Sep 29 10:15:50 2023

@author: walsh4py developers
"""

import numpy as np
from pymor.core.defaults import defaults
from pymor.core.logger import getLogger

from walsh4py.basis.binary import bit_reversed_indices
from walsh4py.basis.ordering import Ordering, as_ordering
from walsh4py.transforms import slow
from walsh4py.transforms.fwht import fwht_ip
from walsh4py.utilities.utilities import as_signal

logger = getLogger('walsh4py.transforms.fast')

METHODS = ('fast', 'matrix')


def bit_reversal_permute(v):
    """
    Reorder v such that the entry at index i moves to the index obtained by 
    reversing the k bits of i, where len(v) = 2**k.
    """
    v, k = as_signal(v)
    result = np.empty_like(v)
    result[bit_reversed_indices(k)] = v
    return result


def butterfly(v):
    """
    Unnormalized Fast Walsh-Hadamard Transform of v in Hadamard ordering, 
    computed on a copy of v. Applying it twice gives len(v) * v.
    """
    result, _ = as_signal(v)
    fwht_ip(result)
    return result


def fast_forward(v, ordering=Ordering.DYADIC):
    """
    Walsh transform of v in O(n log(n)) operations. Same result as 
    `walsh4py.transforms.slow.forward`.

    Parameters
    ----------
    v : array_like of shape (2**k,)
        The samples to transform.
    ordering : Ordering or str, optional
        Ordering of the coefficients. For Ordering.DYADIC, the input is bit 
        reversed before the butterfly network. Default is Ordering.DYADIC.

    Returns
    -------
    c : ndarray of shape (2**k,)
        The unnormalized Walsh coefficients of v.

    """
    ordering = as_ordering(ordering)
    if ordering is Ordering.DYADIC:
        v = bit_reversal_permute(v)
    result = butterfly(v)
    logger.debug(f"Fast Walsh transform of length {len(result)}")
    return result


def fast_inverse(c, ordering=Ordering.DYADIC):
    result = fast_forward(c, ordering)
    return result / len(result)


@defaults('method')
def transform(v, ordering=Ordering.DYADIC, method='fast'):
    """
    Walsh transform computed either with the butterfly network ('fast') or 
    by matrix multiplication ('matrix').
    """
    if method == 'fast':
        return fast_forward(v, ordering)
    if method == 'matrix':
        return slow.forward(v, ordering)
    raise ValueError(f"unknown method {method!r}, expected one of {METHODS}")


@defaults('method')
def inverse_transform(c, ordering=Ordering.DYADIC, method='fast'):
    """
    Inverse of `transform`.
    """
    if method == 'fast':
        return fast_inverse(c, ordering)
    if method == 'matrix':
        return slow.inverse(c, ordering)
    raise ValueError(f"unknown method {method!r}, expected one of {METHODS}")
