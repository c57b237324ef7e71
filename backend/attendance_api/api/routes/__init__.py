"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never issue SQL (delegate to services/classroom_gateway)
    - Every handler body runs inside failure_boundary
"""
