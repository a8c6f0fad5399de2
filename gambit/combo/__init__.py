"""
Combo Module
"""

from .sequence import SequenceStore, encode
from .rules import (
    CashoutRule, CashoutType, CASHOUT_RULES, CASHOUT_TABLE, find_rule,
    Effect, AnimationSequenceEffect, RestoreActorValueEffect, LogOnlyEffect
)
from .dispatcher import CashoutDispatcher, CashoutResult

__all__ = [
    'SequenceStore', 'encode',
    'CashoutRule', 'CashoutType', 'CASHOUT_RULES', 'CASHOUT_TABLE', 'find_rule',
    'Effect', 'AnimationSequenceEffect', 'RestoreActorValueEffect', 'LogOnlyEffect',
    'CashoutDispatcher', 'CashoutResult'
]
