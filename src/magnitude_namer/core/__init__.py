"""
Core domain models, naming algorithms, and contracts.

This module contains the foundational building blocks of magnitude naming.
They are pure and independent of any presentation layer.
"""
