"""
Example pairs, one sub-package per design principle.

Each sub-package holds a ``correct`` and a ``violation`` module. Both define
their toy domain at module level and expose ``main()``, which prints the
demonstration. Modules run on their own with ``python -m``.
"""
