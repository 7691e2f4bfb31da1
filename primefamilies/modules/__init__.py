"""
Modules - domain logic.

- families/   - Predicates, range evaluator, memo cache
- streaming/  - Cancellable incremental publishing of cached results
"""
