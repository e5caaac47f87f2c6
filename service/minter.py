"""Identifier minting with issuance counters and an audit trail."""

import time
from config import load_config
from internal.logging import get_logger
from sortid.generator import Generator


class IdMinter:
    """Wraps a Generator for the service; counts what it issues and checks."""

    def __init__(self, generator=None, config=None, audit=None):
        self.config = config or load_config().generator
        self.generator = generator or Generator.from_config(self.config)
        self.audit = audit
        self._log = get_logger()
        self.started_at = time.time()
        self.issued = 0
        self.batches = 0
        self.verified = 0
        self.rejected = 0
        self._log.info(f"minter ready {self.generator!r}")

    def mint(self):
        identifier = self.generator.generate()
        self.issued += 1
        self._record("issued", {"ids": [identifier]})
        return identifier

    def mint_batch(self, count):
        """Sorted batch of distinct ids; InvalidCount and BatchExhausted propagate."""
        ids = self.generator.generate(count)
        self.issued += len(ids)
        self.batches += 1
        self._record("issued", {"ids": ids})
        return ids

    def random(self):
        return self.generator.random()

    def verify(self, candidate):
        valid = self.generator.verify(candidate)
        if valid:
            self.verified += 1
        else:
            self.rejected += 1
        return valid

    def uptime(self):
        return time.time() - self.started_at

    def get_stats(self):
        return {
            "issued": self.issued,
            "batches": self.batches,
            "verified": self.verified,
            "rejected": self.rejected,
            "generator": {
                "prefix": self.generator.prefix,
                "base": int(self.generator.base),
                "length": self.generator.length,
                "precision": self.generator.precision.value,
            },
        }

    def _record(self, kind, data):
        if self.audit and not self.audit.try_log(kind, data):
            self._log.warn("audit queue full, record dropped", kind=kind)
