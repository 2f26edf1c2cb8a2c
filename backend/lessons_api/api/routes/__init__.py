"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never talk to the driver directly (repositories do)
    - orders router is included before collections so POST /collections/orders wins
"""
