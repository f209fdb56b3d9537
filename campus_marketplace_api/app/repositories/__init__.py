"""
Persistence helpers.

Each repository module maps one table to a plain record type using
hand-written SQL.  Functions take an open connection so that the
calling service controls the transaction boundary.
"""
