"""
Core domain models, calculation primitives, and storage contracts.

This module contains the foundational building blocks of the calculator
that are independent of the UI and of the concrete storage backend.
"""
