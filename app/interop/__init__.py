"""Interop Layer: transport-agnostic adapters between Delivery and Usecases.

Invariants:
    - Input: RequestContext (raw credential, request id, deadline) + domain payload
    - Output: exactly one core.outcome.Outcome per call
    - No business logic, no store or verifier access: Usecases only

Design Decisions:
    - Stateless objects wired once per process (app/container.py)
    - Usecases stay testable without any HTTP harness; Delivery stays a thin binding
"""
