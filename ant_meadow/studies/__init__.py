"""
Studies: runnable scenarios.

Each study builds a meadow, runs it, and reports what happened.

- two_colonies: Two queens, one worker each, one shared fate
"""
