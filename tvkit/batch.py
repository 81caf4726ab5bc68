"""
batch.py – apply a bundle of sets/deletes against the key/value store
=====================================================================

There is no atomicity across keys.  With the default `BEST_EFFORT`
policy every operation is attempted even after a failure, and the first
failure is reported once the whole batch has run.  `FAIL_FAST` stops at
the first failure instead.  Either way, partially applied batches are
possible; all-or-nothing semantics belong above this layer.

Sets are applied before deletes, so a key named in both ends up deleted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .errors import BatchStoreError
from .logging import null_logger
from .store import KeyValueStore, default_store


@dataclass
class BatchStoreOperations:
    sets: Dict[str, str] = field(default_factory=dict)
    deletes: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.sets and not self.deletes


@dataclass(frozen=True)
class BatchPolicy:
    continue_on_error: bool = True


BEST_EFFORT = BatchPolicy(continue_on_error=True)
FAIL_FAST   = BatchPolicy(continue_on_error=False)


class BatchStoreOperator:
    def __init__(
        self,
        store: KeyValueStore,
        policy: BatchPolicy = BEST_EFFORT,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.store = store
        self.policy = policy
        self.log = log or null_logger()

    def apply(self, ops: BatchStoreOperations) -> None:
        """Run every set, then every delete; raise `BatchStoreError` on failure."""
        if ops.is_empty():
            return

        failures: List[Tuple[str, str, BaseException]] = []
        steps = [("set", k, v) for k, v in ops.sets.items()]
        steps += [("delete", k, None) for k in ops.deletes]

        for op, key, value in steps:
            try:
                if op == "set":
                    self.store.set(key, value)
                else:
                    self.store.delete(key)
            except Exception as exc:  # noqa: BLE001 – any store failure counts
                self.log.error("batch %s %s failed – %s", op, key, exc)
                failures.append((op, key, exc))
                if not self.policy.continue_on_error:
                    break

        if failures:
            raise BatchStoreError(failures) from failures[0][2]
        self.log.debug("batch applied (%d sets / %d deletes)", len(ops.sets), len(ops.deletes))


def execute_batch_store_operations(
    ops: BatchStoreOperations,
    store: Optional[KeyValueStore] = None,
    policy: BatchPolicy = BEST_EFFORT,
) -> None:
    """Apply *ops* to *store* (the process-wide store when omitted)."""
    BatchStoreOperator(store if store is not None else default_store(), policy).apply(ops)
