"""Sample Database API: REST access to agents, companies and customers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
