#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Oct  4 16:10:32 2023

@author: walsh4py developers
"""

import numpy as np
from pymor.operators.interface import Operator
from pymor.vectorarrays.numpy import NumpyVectorSpace

from walsh4py.basis.binary import bit_reversed_indices
from walsh4py.basis.ordering import Ordering, as_ordering
from walsh4py.basis.walsh import generate_matrix
from walsh4py.transforms.fast import METHODS
from walsh4py.transforms.fwht import fwht_ip


class WalshTransformOperator(Operator):
    """
    The (unnormalized) Walsh transform of vectors of size 2**k, seen as a 
    linear operator on a NumpyVectorSpace. The Walsh matrices being 
    symmetric, the adjoint coincides with the operator itself, and the 
    inverse is the operator scaled by 2**-k.
    
    Attibutes
    ---------
    k : int
        Base 2 logarithm of the dimension of the source and range spaces.
    ordering : Ordering
        Ordering of the Walsh coefficients.
    method : str
        'fast' to use the butterfly network, 'matrix' for the matrix 
        multiplication.
    log_level : int, optional
        Level of the logger. Default is 20.
    """

    linear = True

    def __init__(self, k, ordering=Ordering.DYADIC, method='fast', log_level=20):
        if method not in METHODS:
            raise ValueError(f"unknown method {method!r}, expected one of {METHODS}")
        ordering = as_ordering(ordering)
        self.__auto_init(locals())
        self.logger.setLevel(log_level)
        self.source = NumpyVectorSpace(2**k)
        self.range = NumpyVectorSpace(2**k)

    def _transform_rows(self, array, inverse=False):
        if self.method == 'fast':
            result = np.empty(array.shape)
            if self.ordering is Ordering.DYADIC:
                result[:, bit_reversed_indices(self.k)] = array
            else:
                result[:] = array
            fwht_ip(result)
        else:
            result = array @ self.get_matrix().T
        if inverse:
            result /= 2**self.k
        return result

    def apply(self, U, mu=None):
        assert U in self.source
        with self.logger.block(f"Walsh transform of {len(U)} vectors"):
            result = self._transform_rows(U.to_numpy())
        return self.range.from_numpy(result)

    def apply_adjoint(self, V, mu=None):
        assert V in self.range
        return self.source.from_numpy(self._transform_rows(V.to_numpy()))

    def apply_inverse(self, V, mu=None, initial_guess=None, least_squares=False):
        assert V in self.range
        with self.logger.block(f"Inverse Walsh transform of {len(V)} vectors"):
            result = self._transform_rows(V.to_numpy(), inverse=True)
        return self.source.from_numpy(result)

    def apply_inverse_adjoint(self, U, mu=None, initial_guess=None, least_squares=False):
        assert U in self.source
        return self.range.from_numpy(self._transform_rows(U.to_numpy(), inverse=True))

    def get_matrix(self):
        return generate_matrix(self.k, self.ordering)

    def as_range_array(self, mu=None):
        return self.range.from_numpy(self.get_matrix().T.astype(float))

    def as_source_array(self, mu=None):
        return self.source.from_numpy(self.get_matrix().astype(float))
