"""Trigger field taxonomy.

Trigger fields hold deferred-activation conditions. A component that
populates any of them is lazy by default, and conflicting values for a
trigger field are unioned on merge instead of overwritten.
"""

from __future__ import annotations

EVENT = "event"
KEYS = "keys"
CMD = "cmd"
FT = "ft"

TRIGGER_FIELDS = frozenset({EVENT, KEYS, CMD, FT})
