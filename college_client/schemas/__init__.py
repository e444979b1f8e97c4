"""
schemas/ — Pydantic models for the college API client

Session user, uniform operation results, list pages, and the per-entity
required/optional field schemas used before create/update calls.
"""
