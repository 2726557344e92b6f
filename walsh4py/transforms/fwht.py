#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Sep 29 09:31:44 2023

@author: walsh4py developers
"""

import numpy as np
from numba import njit


@njit('void(f8[:])')
def _fwht_1d(a) -> None:
    """
    In-place, unnormalized Fast Walsh-Hadamard Transform of array a.

    Parameters
    ----------
    a : ndarray of size (2**d,)
        The array on which the FWHT is applied.
        
    """
    n = a.shape[0]
    h = 1
    while h < n:
        for i in range(0, n, h * 2):
            for j in range(i, i + h):
                x = a[j]
                y = a[j + h]
                a[j] = x + y
                a[j + h] = x - y
        h *= 2


@njit('void(f8[:,:])')
def _fwht_2d(a) -> None:
    """
    In-place, unnormalized Fast Walsh-Hadamard Transform of each row of the 
    2d array a, all rows at the same time.

    Parameters
    ----------
    a : ndarray of size (k, 2**d)
        The array on which the FWHT is applied.

    """
    n = a.shape[1]
    h = 1
    x = np.empty(a.shape[0], dtype=a.dtype)
    y = np.empty(a.shape[0], dtype=a.dtype)
    while h < n:
        for i in range(0, n, h * 2):
            for j in range(i, i + h):
                x[:] = a[:,j]
                y[:] = a[:,j + h]
                a[:,j] = x + y
                a[:,j + h] = x - y
        h *= 2


def fwht_ip(a) -> None:
    """
    In-place Fast Walsh-Hadamard Transform of array a with n=2**d entries
    along its last axis.

    Parameters
    ----------
    a : ndarray of size (2**d,) or (k, 2**d)
        The array on which the FWHT is applied. If a is a 2d array, the FWHT 
        is applied on each row at the same time.
    """
    d = np.log2(a.shape[-1])
    assert d%1 == 0
    assert a.ndim <= 2
    if a.ndim == 1:
        _fwht_1d(a)
    elif a.shape[0] == 1:
        _fwht_1d(a[0])
    else:
        _fwht_2d(a)
