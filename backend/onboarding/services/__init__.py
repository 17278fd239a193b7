"""Services Layer — async data-access functions and the AI overview service.

Invariants:
    - Every function takes the AsyncSession as its first argument
    - Missing rows raise ResourceNotFoundError; blank required fields raise RequiredFieldError
    - Public write operations commit; multi-step writes commit once

Design Decisions:
    - One module per aggregate (employees, tasks, templates) for locality
    - Pure rules (template copy, prompt building) live in core/, IO lives here
"""
