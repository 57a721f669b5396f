"""Bank accounts with transfers that lock both sides without deadlocking."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Account:
    """A named account whose balance is guarded by its own lock."""

    name: str
    balance: int
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, init=False)


def transfer(source: Account, target: Account, amount: int) -> int:
    """Move ``amount`` from ``source`` to ``target`` and return the target's balance.

    Both locks are taken in a fixed order, so opposite transfers running at
    the same time cannot deadlock. A transfer to the same account changes
    nothing. Raises ``ValueError`` for a negative amount or when ``source``
    holds too little.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if source is target:
        with source._lock:
            return source.balance

    first, second = sorted((source, target), key=id)
    with first._lock, second._lock:
        if source.balance < amount:
            raise ValueError(f"Transfer failed due to insufficient balance for {source.name}")
        source.balance -= amount
        target.balance += amount
        logger.debug(
            "Transferred %d from %s to %s, balance=%d",
            amount, source.name, target.name, target.balance,
        )
        return target.balance