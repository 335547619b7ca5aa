from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Address:
    """Postal address owned by exactly one user."""

    id: str
    user_id: str
    street_name: str
    locality: str
    state: str
    pincode: str
