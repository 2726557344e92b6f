#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct  2 10:11:57 2023

@author: walsh4py developers
"""

from walsh4py.utilities.exceptions import WalshError, InvalidLengthError
from walsh4py.utilities.quadrature import integrate
from walsh4py.utilities.utilities import as_signal, check_index, is_power_of_two, sample
