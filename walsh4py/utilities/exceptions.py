#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct  2 10:12:41 2023

@author: walsh4py developers
"""


class WalshError(Exception):
    """Base class for the errors raised by walsh4py."""


class InvalidLengthError(WalshError, ValueError):
    """
    Raised when a vector handed to a transform is not one dimensional or its
    length is not a power of two.
    """
