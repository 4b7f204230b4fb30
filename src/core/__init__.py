"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of arbitrary-precision
integer arithmetic: single-word primitives, magnitude algorithms and the
signed Int value type.
"""
