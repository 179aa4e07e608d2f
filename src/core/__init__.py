"""
Core domain models, calendar primitives, and contracts.

This module contains the foundational building blocks that are independent
of storage and presentation (week policy, week identity, week arithmetic).
"""
