"""
Shared utilities (console and logging).
"""
