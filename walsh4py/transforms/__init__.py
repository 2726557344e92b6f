#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Sep 29 09:30:12 2023

@author: walsh4py developers
"""

from walsh4py.transforms.coefficients import (coefficient_one_k, coefficient_one_k_quadrature, 
                                              partial_sum_one_k_from_function)
from walsh4py.transforms.fast import (bit_reversal_permute, butterfly, fast_forward, fast_inverse, 
                                      inverse_transform, transform)
from walsh4py.transforms.operators import WalshTransformOperator
from walsh4py.transforms.slow import PartialSumFunction, forward, inverse, partial_sum
from walsh4py.transforms.sobolev import (OneKSeries, PiecewiseLinearFunction, increments, 
                                         partial_sum_one_k, sobolev_forward, sobolev_inverse)
