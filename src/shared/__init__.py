"""
Shared Layer - Cross-Cutting Concerns
Configuration-aware logging, errors, validation, persistence plumbing and security helpers
"""
