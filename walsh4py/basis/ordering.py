#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Sep 27 16:40:52 2023

@author: walsh4py developers
"""

from enum import Enum


class Ordering(Enum):
    """
    Row ordering of the Walsh matrices. DYADIC is the Paley ordering obtained 
    by interleaving rows when doubling the matrix, NATURAL the Hadamard 
    ordering of the Sylvester construction.
    """
    DYADIC = 'dyadic'
    NATURAL = 'natural'


def as_ordering(ordering):
    if isinstance(ordering, Ordering):
        return ordering
    if isinstance(ordering, str) and ordering.lower() in [o.value for o in Ordering]:
        return Ordering(ordering.lower())
    raise ValueError(f"unknown ordering {ordering!r}, expected 'dyadic' or 'natural'")
