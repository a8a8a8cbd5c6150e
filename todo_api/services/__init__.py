"""Services Layer — per-resource CRUD flows between routes and repositories.

Invariants:
    - Services take a repository (Protocol) and plain payloads, return envelopes
    - Failures are raised as core.errors types, never returned as envelopes
"""
