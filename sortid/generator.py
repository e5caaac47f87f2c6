"""Short, time-sortable identifiers.

An identifier is ``prefix + encode(timestamp) + suffix`` with no separators:

    >>> gen = Generator(prefix="ord_", length=4)
    >>> gen.generate()            # e.g. 'ord_t3bq2ka7f'
    >>> gen.generate(3)           # three distinct ids, sorted
    >>> gen.verify("ord_t3bq2ka7f")
    True

Parsing relies on the known prefix and the fixed suffix length only, so a
prefix made of alphabet characters is stripped leniently and ids from any
generator sharing prefix, base and length verify as well.
"""

import random

from core.errors import (
    BatchExhausted,
    InvalidCharacter,
    InvalidCount,
    InvalidLength,
    InvalidMaxAttempts,
)
from internal.logging import get_logger
from sortid import radix
from sortid.options import MAX_LENGTH, Precision, resolve_base, resolve_precision
from utils.timestamp import in_time_range, now_millis


class Generator:
    """Builds, batches and verifies identifiers for one fixed configuration."""

    __slots__ = ("prefix", "base", "alphabet", "length", "precision",
                 "max_attempts", "_rng", "_clock", "_log")

    def __init__(self, prefix="", base=36, length=4, precision=None, rng=None, clock=None,
                 max_attempts=None):
        """
        Args:
            prefix: literal text put in front of every id.
            base: 36 (``0-9a-z``) or 62 (``0-9a-zA-Z``).
            length: random suffix length, 0 to 20.
            precision: ``"s"`` (default) or ``"ms"``, or a Precision member.
            rng: random source with ``randrange(n)``; a private
                ``random.Random`` when omitted.
            clock: callable returning epoch milliseconds.
            max_attempts: optional cap on ``single()`` calls per batch.
        """
        self.prefix = "" if prefix is None else str(prefix)
        self.base = resolve_base(base)
        self.alphabet = self.base.alphabet
        self.precision = resolve_precision(precision)

        if isinstance(length, bool) or not isinstance(length, int) or not 0 <= length <= MAX_LENGTH:
            raise InvalidLength(f"Length must be a non-negative integer between 0 and {MAX_LENGTH}",
                                value=length)
        self.length = length

        if max_attempts is not None and (isinstance(max_attempts, bool)
                                         or not isinstance(max_attempts, int) or max_attempts < 1):
            raise InvalidMaxAttempts("max_attempts must be a positive integer or None", value=max_attempts)
        self.max_attempts = max_attempts

        self._rng = rng or random.Random()
        self._clock = clock or now_millis
        self._log = get_logger()

    @classmethod
    def from_config(cls, config, **kwargs):
        """Build a generator from a GeneratorConfig."""
        return cls(prefix=config.prefix, base=config.base, length=config.length,
                   precision=config.precision, max_attempts=config.max_attempts, **kwargs)

    def __repr__(self):
        return (f"Generator(prefix={self.prefix!r}, base={int(self.base)}, "
                f"length={self.length}, precision={self.precision.value!r})")

    def timestamp(self):
        """Current time in the configured precision."""
        return self._clock() // self.precision.millis

    def random(self):
        """Random suffix of exactly ``length`` alphabet characters."""
        size = len(self.alphabet)
        return "".join(self.alphabet[self._rng.randrange(size)] for _ in range(self.length))

    def single(self):
        """One identifier; uniqueness is left to the random suffix."""
        return self.prefix + radix.encode(self.timestamp(), self.base) + self.random()

    def generate(self, count=None):
        """One identifier, or a sorted list of ``count`` distinct ones."""
        if count is None:
            return self.single()
        return self.multiple(count)

    def multiple(self, count):
        """Sorted list of ``count`` distinct identifiers.

        Retries until enough distinct ids exist. Without ``max_attempts`` the
        loop is unbounded; with it, BatchExhausted is raised once the cap is hit.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 2:
            raise InvalidCount("Count must be a positive integer greater than 1", count=count)

        ids = set()
        attempts = 0
        while len(ids) < count:
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise BatchExhausted(f"Gave up after {attempts} attempts", count=count,
                                     attempts=attempts, distinct=len(ids))
            ids.add(self.single())
            attempts += 1

        self._log.debug("batch", count=count, attempts=attempts, collisions=attempts - count)
        return sorted(ids)

    def verify(self, candidate):
        """Whether ``candidate`` parses as an id of this configuration. Never raises."""
        if not isinstance(candidate, str) or not candidate or not candidate.startswith(self.prefix):
            return False

        remainder = candidate[len(self.prefix):]
        if not remainder:
            return False
        if any(char not in self.alphabet for char in remainder):
            return False

        split = len(remainder) - self.length
        timestamp_part, suffix = remainder[:split], remainder[split:]
        if len(suffix) != self.length or not timestamp_part:
            return False

        try:
            value = radix.decode(timestamp_part, self.base)
        except InvalidCharacter:
            return False
        return in_time_range(value * self.precision.millis)
