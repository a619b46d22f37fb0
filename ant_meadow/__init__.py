"""
Ant Meadow: a tick-driven colony simulation.

Colonies of simple ants share a food pool, work and rest each tick,
and starve when the pool runs dry. The meadow keeps ticking until at
most one colony is left standing.
"""

__version__ = "0.1.0"
