#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Sep 28 11:05:37 2023

@author: walsh4py developers
"""

from math import factorial

import numpy as np
from pymor.core.base import ImmutableObject, abstractmethod

from walsh4py.basis.binary import to_binary_fraction, to_binary_le
from walsh4py.utilities.quadrature import integrate


class BasisFunction(ImmutableObject):
    """
    Real function of one real variable, evaluated pointwise on [0, 1]. 
    Calling the object with a scalar returns a scalar, calling it with an 
    array returns an array of the same shape.
    """

    @abstractmethod
    def evaluate(self, x):
        """
        Parameters
        ----------
        x : ndarray of float
            The evaluation points.

        Returns
        -------
        values : ndarray with the same shape as x

        """
        pass

    def __call__(self, x):
        values = self.evaluate(np.asarray(x, dtype=float))
        if values.ndim == 0:
            return values.item()
        return values


class ConstantFunction(BasisFunction):

    def __init__(self, value=1):
        self.__auto_init(locals())

    def evaluate(self, x):
        return np.full(x.shape, self.value)


class WalshFunction(BasisFunction):
    """
    Walsh function w_n in Paley (dyadic) ordering. Bit i of n selects the 
    Rademacher function of the i-th dyadic subdivision, so that 
    w_n(x) = (-1)^(sum_i n_i x_i) with x_i the i-th binary digit of x.
    Arguments are reduced to their fractional part, which makes w_n 
    1-periodic and w_n(1) = w_n(0) = 1.
    
    Attributes
    ----------
    n : int
        Index of the Walsh function.
    """

    def __init__(self, n):
        self.__auto_init(locals())
        self._bits = to_binary_le(n)

    def evaluate(self, x):
        if self.n == 0:
            return np.ones(x.shape, dtype=np.int8)
        x_bits = to_binary_fraction(x, len(self._bits))
        parity = np.sum(x_bits * self._bits, axis=-1) % 2
        return np.where(parity == 0, 1, -1).astype(np.int8)


class OneKFunction(BasisFunction):
    """
    First antiderivative of the Walsh function w_{k-1}, vanishing at 0. For 
    k-1 = 2**t + i it reads w_i(x) * 2**-t * tri(2**t * x), tri being the 
    unit triangular wave of height 1/2.
    
    Attributes
    ----------
    k : int
        Index of the function in the W1,k family.
    """

    def __init__(self, k):
        self.__auto_init(locals())
        if k >= 2:
            t = (k - 1).bit_length() - 1
            self._scale = float(2**t)
            self._walsh = WalshFunction(k - 1 - 2**t)

    def evaluate(self, x):
        if self.k == 0:
            return np.ones(x.shape)
        if self.k == 1:
            return x.copy()
        u = self._scale * x
        u = u - np.floor(u)
        triangle = np.where(u < 0.5, u, 1 - u)
        return self._walsh.evaluate(x) * triangle / self._scale


class PolynomialFunction(BasisFunction):
    """x**degree / degree!"""

    def __init__(self, degree):
        self.__auto_init(locals())

    def evaluate(self, x):
        return x**self.degree / factorial(self.degree)


class AntiderivativeFunction(BasisFunction):
    """
    The r-th antiderivative of w_{k-r} vanishing at 0 with its first r-1 
    derivatives, computed with the Cauchy formula for repeated integration

        1/(r-1)! * int_0^x (x-t)^(r-1) w_{k-r}(t) dt

    where the integral is approximated by a composite quadrature rule.
    
    Attributes
    ----------
    r : int
        Order of the antiderivative, at least 2.
    k : int
        Index of the function, at least r.
    n : int
        Number of quadrature subintervals.
    rule : str
        Quadrature rule, see `walsh4py.utilities.quadrature.integrate`.
    """

    def __init__(self, r, k, n=64, rule='trapezoid'):
        if r < 2 or k < r:
            raise ValueError(f"expected 2 <= r <= k, got r={r} and k={k}")
        self.__auto_init(locals())
        self._walsh = WalshFunction(k - r)
        self._factor = 1. / factorial(r - 1)

    def _evaluate_point(self, x):
        integrand = lambda t: (x - t)**(self.r - 1) * self._walsh(t)
        return self._factor * integrate(integrand, 0., x, self.n, self.rule)

    def evaluate(self, x):
        values = np.array([self._evaluate_point(xi) for xi in x.reshape(-1)])
        return values.reshape(x.shape)
