"""Jobly Application Package — companies and jobs REST backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
