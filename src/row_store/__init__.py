"""
Row Store - Fixed-schema in-memory record store

A single-table record store holding uniform-size rows in fixed-size memory
pages, addressed by row number, with a byte-exact row codec, an insert/select
execution engine and an interactive prompt.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
