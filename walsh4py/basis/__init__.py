#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Sep 27 15:58:30 2023

@author: walsh4py developers
"""

from walsh4py.basis.binary import bit_reversed_indices, to_binary_fraction, to_binary_le
from walsh4py.basis.functions import (AntiderivativeFunction, BasisFunction, ConstantFunction, 
                                      OneKFunction, PolynomialFunction, WalshFunction)
from walsh4py.basis.ordering import Ordering, as_ordering
from walsh4py.basis.walsh import (evaluate, evaluate_general, evaluate_one_k, generate_matrix, 
                                  ordering_permutation)
