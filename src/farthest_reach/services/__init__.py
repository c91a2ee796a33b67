"""
External service plumbing.

- http.py - shared requests session with retry/backoff, used by the oracles
"""
