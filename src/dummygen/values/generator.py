"""Value generator bound to one generation call.

:class:`ValueGenerator` ties together a :class:`~dummygen.config.DummyConfig`,
a private :class:`random.Random` and a reference instant so that callers can
ask for scalar values by hint without threading those three objects through
every call.  It holds no other state; one instance serves exactly one
top-level populate call.
"""

from __future__ import annotations

import random
from datetime import date, datetime
from decimal import Decimal

from dummygen.config import DummyConfig

from . import dates, numbers, strings

_PRINTABLE_FIRST = 32
_PRINTABLE_LAST = 126


class ValueGenerator:
    """Generate scalar values for field-name hints."""

    def __init__(
        self,
        cfg: DummyConfig,
        *,
        rng: random.Random | None = None,
        now: datetime | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration read by the string generators.
        rng:
            Random source; a fresh OS-seeded one is created when omitted.
        now:
            Reference instant for relative date ranges.  Fixed at
            construction so that all dates of one call share it.
        """

        self.cfg: DummyConfig = cfg
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.now: datetime = now if now is not None else datetime.now()

    # -- Text ---------------------------------------------------------------

    def text(self, hint: str) -> str:
        return strings.generate_string(hint, self.cfg, rng=self.rng)

    def char(self) -> str:
        """Return one printable ASCII character (code points 32-126)."""

        return chr(self.rng.randint(_PRINTABLE_FIRST, _PRINTABLE_LAST))

    # -- Numbers ------------------------------------------------------------

    def integer(self, hint: str) -> int:
        return numbers.generate_int(hint, rng=self.rng)

    def long(self, hint: str) -> int:
        return numbers.generate_long(hint, rng=self.rng)

    def short(self, hint: str) -> int:
        return numbers.generate_short(hint, rng=self.rng)

    def byte(self, hint: str) -> int:
        return numbers.generate_byte(hint, rng=self.rng)

    def double(self, hint: str) -> float:
        return numbers.generate_double(hint, rng=self.rng)

    def float32(self, hint: str) -> float:
        return numbers.generate_float(hint, rng=self.rng)

    def decimal(self, hint: str) -> Decimal:
        return Decimal(str(self.double(hint)))

    def boolean(self) -> bool:
        return self.rng.random() < 0.5

    # -- Temporal -------------------------------------------------------------

    def instant(self, hint: str) -> datetime:
        """Return a timezone-aware instant."""

        return dates.generate_date(hint, rng=self.rng, now=self.now)

    def local_date(self, hint: str) -> date:
        return dates.generate_local_date(hint, rng=self.rng, now=self.now)

    def date_time(self, hint: str) -> datetime:
        return dates.generate_date_time(hint, rng=self.rng, now=self.now)


__all__ = ["ValueGenerator"]
