"""
Identifier generation.
"""

import uuid


def new_id() -> str:
    """Return a fresh collision-resistant identifier."""
    return uuid.uuid4().hex
