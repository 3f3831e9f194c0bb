"""
Core protocol for change detection.

This module contains the sameness protocol (is_same / is_not_same) and its
handlers for scalars, handles, views and containers. It has no knowledge of
how user-defined aggregates are derived (see src.derive).
"""
