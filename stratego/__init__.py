"""Stratego board and rules engine.

Rules live under ``stratego.engine.systems``; ``stratego.cli`` is the
terminal front end.
"""
