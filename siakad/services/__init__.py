"""Services Layer — async orchestration of the pure core over injected collaborators.

Invariants:
    - Services depend on core Protocols, never on concrete infrastructure classes
    - Shared mutable state (course seat counts) mutated only under CourseLockRegistry

Design Decisions:
    - Imperative shell: IO around pure checks, errors raised at the public boundary
"""
