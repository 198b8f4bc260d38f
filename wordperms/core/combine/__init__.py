"""Combination engine.

Every k-combination of the input words (k = 1..max_len) is an independent
unit of work producing its own local set. Local sets are folded with set
union starting from the empty set, so work can be split across any number
of threads and merged in any order without changing the result.
"""
