#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Sep 27 16:02:15 2023

@author: walsh4py developers
"""

import numpy as np
from numba import njit

from walsh4py.utilities.utilities import check_index


def to_binary_le(n):
    """
    Little-endian binary digits of a non-negative integer.

    Parameters
    ----------
    n : int
        Non-negative integer.

    Returns
    -------
    bits : ndarray of uint8 of shape (n.bit_length(),)
        The bits of n, least significant first. Empty for n = 0.

    """
    n = check_index(n)
    return np.array([(n >> i) & 1 for i in range(n.bit_length())], dtype=np.uint8)


def to_binary_fraction(x, digits):
    """
    First binary digits of the fractional part of x, computed by repeated 
    doubling and truncation. The fractional part is x - floor(x), so that 
    negative arguments and arguments larger than 1 are folded back into 
    [0, 1).

    Parameters
    ----------
    x : float or ndarray
        The number(s) to expand.
    digits : int
        Number of digits to compute.

    Returns
    -------
    bits : ndarray of uint8 of shape x.shape + (digits,)
        The digits, most significant first.

    """
    digits = check_index(digits, 'digits')
    x = np.asarray(x, dtype=float)
    x = x - np.floor(x)
    bits = np.empty(x.shape + (digits,), dtype=np.uint8)
    for i in range(digits):
        x = 2 * x
        bit = np.floor(x)
        bits[..., i] = bit
        x = x - bit
    return bits


@njit('i8[:](i8)')
def _bit_reversed_indices(d):
    n = 1 << d
    result = np.zeros(n, dtype=np.int64)
    for i in range(n):
        m = i
        r = 0
        for _ in range(d):
            r = (r << 1) | (m & 1)
            m >>= 1
        result[i] = r
    return result


def bit_reversed_indices(d):
    """
    Array r of size 2**d such that r[i] is i with its d bits reversed.
    """
    return _bit_reversed_indices(check_index(d, 'd'))
