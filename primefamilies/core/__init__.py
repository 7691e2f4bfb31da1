"""
Core - Library infrastructure.

- config/      - Settings and factory functions
- interfaces/  - Protocols for DI
- connectors/  - Store implementations (in-memory)
- adapters/    - External service adapters (clipboard)
- errors.py    - Error hierarchy
"""
