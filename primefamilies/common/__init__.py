"""
Common - cross-cutting infrastructure.

- logging/  - Structured logging, correlation context, YAML-driven levels
"""
