"""
Core domain models, pricing primitives, and invariants.

This module contains the catalog and ordering building blocks that are
independent of any user interface.
"""
