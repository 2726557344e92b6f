#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Sep 27 15:51:08 2023

@author: walsh4py developers

Discrete Walsh functions, Walsh matrices in dyadic and natural ordering, 
slow and fast Walsh transforms, and Walsh-Sobolev reconstruction of 
functions on [0, 1].
"""

from walsh4py.basis import (Ordering, evaluate, evaluate_general, evaluate_one_k, generate_matrix, 
                            to_binary_fraction, to_binary_le)
from walsh4py.transforms import (WalshTransformOperator, bit_reversal_permute, butterfly, 
                                 coefficient_one_k, fast_forward, fast_inverse, forward, inverse, 
                                 partial_sum, partial_sum_one_k, sobolev_forward, sobolev_inverse)
from walsh4py.utilities import InvalidLengthError, WalshError, integrate
