"""
Core Package.

Contains the rewrite engine, its passes, and the file-level read/transform/write cycle.
"""
