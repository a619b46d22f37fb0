"""
Observation tools.

- recorder: Per-tick colony snapshots and summaries
"""

from .recorder import ColonyFrame, MeadowRecorder

__all__ = ["ColonyFrame", "MeadowRecorder"]
