"""Test suite for scoped-rbac.

Test structure:
- unit/: Unit tests - domain logic and services with mocked ports
- integration/: Integration tests - real adapters (SQLite, fakeredis) and
  the create_rbac() entry point end to end
"""
