"""
Cashout Rules
=============
Fixed table of finished chains and the effect each one pays out.
"""

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Optional, List, Tuple, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto

from ..config import (
    ComboToken,
    ANIM_IDLE_FORCE_DEFAULT, ANIM_SHOUT_START, ANIM_SHOUT_RELEASE,
    AV_HEALTH, AV_STAMINA,
    DEFT_STRIKE_HEAL, DEFENSIVE_STRIKE_STAMINA,
)
from .sequence import encode

logger = logging.getLogger(__name__)


class CashoutType(Enum):
    """Cashouts that the table knows about"""
    DEFT_STRIKE = auto()       # A -> A
    DEFENSIVE_STRIKE = auto()  # B -> B
    PERSEVERANCE = auto()      # A -> A -> B
    THE_BOOT = auto()          # A -> B -> A


# =============================================================================
# EFFECTS
# =============================================================================

class Effect(ABC):
    """Something a cashout does to the actor"""

    @abstractmethod
    def apply(self, actor) -> None:
        """Run the effect against the actor that triggered the cashout"""
        pass

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class AnimationSequenceEffect(Effect):
    """Send a fixed, ordered list of animation graph events"""
    signals: Tuple[str, ...]

    def apply(self, actor) -> None:
        for signal in self.signals:
            if not actor.notify_animation_graph(signal):
                logger.debug("Animation graph ignored %s", signal)

    def describe(self) -> str:
        return " -> ".join(self.signals)


@dataclass(frozen=True)
class RestoreActorValueEffect(Effect):
    """Restore an actor value (health, stamina, magicka) by a flat amount"""
    actor_value: str
    amount: float

    def apply(self, actor) -> None:
        actor.restore_actor_value(self.actor_value, self.amount)

    def describe(self) -> str:
        return f"restore {self.actor_value} +{self.amount:g}"


@dataclass(frozen=True)
class LogOnlyEffect(Effect):
    """No host call; the cashout is only announced in the log"""

    def apply(self, actor) -> None:
        return None

    def describe(self) -> str:
        return "log only"


# =============================================================================
# RULE TABLE
# =============================================================================

@dataclass(frozen=True)
class CashoutRule:
    """A finished chain and what it pays out"""
    name: str
    cashout_type: CashoutType
    sequence: Tuple[ComboToken, ...]
    effect: Effect = field(default_factory=LogOnlyEffect)
    tier: int = 1  # 1 for two-token chains, 2 for three

    @property
    def combo_id(self) -> int:
        return encode(self.sequence)


A = ComboToken.NORMAL
B = ComboToken.BASH

CASHOUT_RULES: List[CashoutRule] = [
    # --- TIER 1 ---
    CashoutRule(
        name="Deft Strike",
        cashout_type=CashoutType.DEFT_STRIKE,
        sequence=(A, A),
        effect=RestoreActorValueEffect(AV_HEALTH, DEFT_STRIKE_HEAL),
        tier=1
    ),
    CashoutRule(
        name="Defensive Strike",
        cashout_type=CashoutType.DEFENSIVE_STRIKE,
        sequence=(B, B),
        effect=RestoreActorValueEffect(AV_STAMINA, DEFENSIVE_STRIKE_STAMINA),
        tier=1
    ),
    # --- TIER 2 ---
    # Shout events loop until the graph is forced back to its default state
    CashoutRule(
        name="Perseverance",
        cashout_type=CashoutType.PERSEVERANCE,
        sequence=(A, A, B),
        effect=AnimationSequenceEffect((
            ANIM_IDLE_FORCE_DEFAULT,
            ANIM_SHOUT_START,
            ANIM_SHOUT_RELEASE,
            ANIM_IDLE_FORCE_DEFAULT,
        )),
        tier=2
    ),
    # TODO: swap LogOnlyEffect for a stagger push once the host exposes one
    CashoutRule(
        name="The Boot",
        cashout_type=CashoutType.THE_BOOT,
        sequence=(A, B, A),
        tier=2
    ),
]


def build_table(rules: List[CashoutRule]) -> Mapping[int, CashoutRule]:
    """Index rules by decoded value. Duplicate chains are a table bug."""
    table = {}
    for rule in rules:
        if rule.combo_id in table:
            raise ValueError(
                f"{rule.name} reuses chain {rule.combo_id} "
                f"of {table[rule.combo_id].name}"
            )
        table[rule.combo_id] = rule
    return MappingProxyType(table)


CASHOUT_TABLE: Mapping[int, CashoutRule] = build_table(CASHOUT_RULES)


def find_rule(combo_id: int,
              table: Mapping[int, CashoutRule] = CASHOUT_TABLE) -> Optional[CashoutRule]:
    """Look up the rule for a decoded chain"""
    return table.get(combo_id)
