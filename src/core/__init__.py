"""
Core domain models and numeric reducers.

Pure functions over numeric sequences with missing values; no I/O,
no shared state.
"""
