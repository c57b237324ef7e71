"""Attendance API Package — classroom rosters and daily attendance over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
