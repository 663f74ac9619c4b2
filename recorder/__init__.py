"""
Action Recorder

Records every action dispatched to a reducer store, persists the sequence with
timestamps, and rebuilds state at any recorded step by cached snapshot or
deterministic re-execution.
"""

__version__ = "0.1.0"
