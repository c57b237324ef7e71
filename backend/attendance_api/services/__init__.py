"""Services Layer — persistence gateway used by the route handlers.

Invariants:
    - Routes never issue SQL directly; they go through ClassroomGateway
"""
