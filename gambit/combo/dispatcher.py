"""
Cashout Dispatcher
==================
Turns the current chain into at most one effect, then clears it.
"""

import logging
import threading
from typing import Optional, Mapping
from dataclasses import dataclass

from ..config import NO_COMBO
from .sequence import SequenceStore
from .rules import CashoutRule, CASHOUT_TABLE, find_rule

logger = logging.getLogger(__name__)


@dataclass
class CashoutResult:
    """What one execute() call did"""
    combo_id: int
    rule: Optional[CashoutRule] = None
    fired: bool = False
    reset: bool = False
    skipped: bool = False
    error: Optional[str] = None

    @property
    def name(self) -> str:
        return self.rule.name if self.rule else ""


class CashoutDispatcher:
    """
    Reads the chain, runs the matching effect and resets the store.

    The whole cashout runs under the store's transaction, so a builder hit
    arriving from another thread is applied either before the decode or
    after the reset.
    """

    def __init__(self, store: SequenceStore,
                 table: Mapping[int, CashoutRule] = CASHOUT_TABLE):
        self.store = store
        self.table = table
        self.last_result: Optional[CashoutResult] = None
        self._local = threading.local()

    def execute(self, actor) -> CashoutResult:
        """Cash out the current chain for ``actor``"""
        if getattr(self._local, "active", False):
            logger.info("Cashout already in progress, ignoring nested trigger")
            return CashoutResult(combo_id=NO_COMBO, skipped=True)

        self._local.active = True
        try:
            with self.store.transaction():
                result = self._execute_locked(actor)
                if result.reset:
                    self.last_result = result
                return result
        finally:
            self._local.active = False

    def _execute_locked(self, actor) -> CashoutResult:
        combo_id = self.store.decode()

        # Nothing was building; let the normal power attack play
        if combo_id == NO_COMBO:
            logger.info("No chain to cash out")
            return CashoutResult(combo_id=combo_id)

        logger.info("Attempting Cashout for ID: %d", combo_id)
        result = CashoutResult(combo_id=combo_id, rule=find_rule(combo_id, self.table))

        if result.rule is None:
            logger.info("Unknown Combo: %d", combo_id)
        else:
            logger.info("Effect: %s (tier %d, %s)", result.rule.name,
                        result.rule.tier, result.rule.effect.describe())
            try:
                result.rule.effect.apply(actor)
                result.fired = True
            except Exception as e:
                logger.exception("Effect %s failed", result.rule.name)
                result.error = str(e)

        self.store.reset()
        result.reset = True
        return result
