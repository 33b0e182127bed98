"""Shared type aliases for keys and values."""
from __future__ import annotations

from typing import TypeAlias

Key: TypeAlias = str
Value: TypeAlias = str
