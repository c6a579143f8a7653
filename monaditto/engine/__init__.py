"""Outcome normalization and short-circuiting folds.

Pure and synchronous: no I/O, no shared state.
"""
