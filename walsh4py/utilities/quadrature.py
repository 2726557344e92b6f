#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Oct  3 09:47:28 2023

@author: walsh4py developers
"""

import numpy as np
from scipy.integrate import simpson, trapezoid

from walsh4py.utilities.utilities import sample

RULES = ('rectangular', 'trapezoid', 'simpson')


def integrate(f, a=0., b=1., n=1, rule='trapezoid'):
    """
    Approximate the integral of f over [a, b] with a composite quadrature rule
    on n equal subintervals.

    Parameters
    ----------
    f : callable
        Scalar function of a real variable.
    a, b : float, optional
        Bounds of the integration interval. Default is [0, 1].
    n : int, optional
        Number of subintervals. Default is 1.
    rule : str, optional
        One of 'rectangular' (midpoint), 'trapezoid' or 'simpson'. 
        Default is 'trapezoid'.

    Returns
    -------
    result : float
        The approximated integral.

    """
    if rule not in RULES:
        raise ValueError(f"unknown quadrature rule {rule!r}, expected one of {RULES}")
    if n < 1:
        raise ValueError(f"the number of subintervals must be positive, got {n}")
    if a == b:
        return 0.
    
    if rule == 'rectangular':
        h = (b - a) / n
        midpoints = a + h * (np.arange(n) + 0.5)
        return float(h * np.sum(sample(f, midpoints)))
    
    nodes = np.linspace(a, b, n + 1)
    values = sample(f, nodes)
    if rule == 'trapezoid':
        result = trapezoid(values, nodes)
    else:
        result = simpson(values, x=nodes)
    return float(result)
