"""Marker types for fixed-width scalars.

Python has one ``int``, one ``float`` and no character type.  Records that
want a specific width or a legacy instant annotate their fields with these
``NewType`` markers; at runtime the values are plain ``int``/``float``/``str``
/``datetime`` objects::

    @dataclass
    class Packet:
        size: Long = 0
        flag: Char = " "
"""

from __future__ import annotations

from datetime import datetime
from typing import NewType

__all__ = ["Byte", "Char", "Float32", "Instant", "Long", "Short"]

Long = NewType("Long", int)
Short = NewType("Short", int)
Byte = NewType("Byte", int)
Float32 = NewType("Float32", float)
Char = NewType("Char", str)
Instant = NewType("Instant", datetime)
