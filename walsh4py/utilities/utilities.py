#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct  2 10:20:03 2023

@author: walsh4py developers
"""

import numpy as np

from walsh4py.utilities.exceptions import InvalidLengthError


def is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def check_index(n, name='n'):
    """
    Check that `n` is a non-negative integer and return it as an int.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")
    return int(n)


def as_signal(v):
    """
    Copy a sample or coefficient vector into a fresh float64 array and check 
    its length.

    Parameters
    ----------
    v : array_like of shape (2**d,)
        The vector to transform.

    Returns
    -------
    a : ndarray of shape (2**d,)
        Contiguous float64 copy of v.
    d : int
        The base 2 logarithm of the length of v.

    """
    a = np.array(v, dtype=float)
    if a.ndim != 1:
        raise InvalidLengthError(f"expected a one dimensional vector, got shape {a.shape}")
    n = a.shape[0]
    if not is_power_of_two(n):
        raise InvalidLengthError(f"vector length must be a power of two, got {n}")
    return a, n.bit_length() - 1


def sample(f, points):
    """
    Evaluate the scalar function f at each of the given points.
    """
    return np.array([f(t) for t in np.asarray(points, dtype=float)], dtype=float)
