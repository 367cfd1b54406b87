"""
Shared utilities for datasources.

- http.py  - shared requests session (User-Agent, no retries)
"""
