"""Infrastructure layer — timezone rule database and system clock.

This layer depends on stdlib ``zoneinfo`` backed by the ``tzdata`` package.
It may import domain value types; it must never import from services,
commands, or output. The service layer bridges between the two.
"""
