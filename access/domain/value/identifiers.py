"""Strongly typed identifiers for access domain entities.

Using NewType for strong typing prevents mixing up role and user IDs
and makes the code more self-documenting.
"""

from typing import NewType

RoleId = NewType("RoleId", int)
UserId = NewType("UserId", int)
