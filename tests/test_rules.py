from __future__ import annotations

import pytest

from gambit.combo.rules import (
    CASHOUT_RULES,
    CASHOUT_TABLE,
    AnimationSequenceEffect,
    CashoutRule,
    CashoutType,
    Effect,
    LogOnlyEffect,
    RestoreActorValueEffect,
    build_table,
    find_rule,
)
from gambit.config import (
    ANIM_IDLE_FORCE_DEFAULT,
    ANIM_SHOUT_RELEASE,
    ANIM_SHOUT_START,
    AV_HEALTH,
    AV_STAMINA,
    ComboToken,
)
from gambit.sandbox import SandboxActor

A = ComboToken.NORMAL
B = ComboToken.BASH


def test_table_has_expected_entries():
    assert sorted(CASHOUT_TABLE) == [11, 22, 112, 121]
    assert CASHOUT_TABLE[11].cashout_type is CashoutType.DEFT_STRIKE
    assert CASHOUT_TABLE[22].cashout_type is CashoutType.DEFENSIVE_STRIKE
    assert CASHOUT_TABLE[112].cashout_type is CashoutType.PERSEVERANCE
    assert CASHOUT_TABLE[121].cashout_type is CashoutType.THE_BOOT


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CASHOUT_TABLE[12] = CASHOUT_RULES[0]


def test_rule_ids_follow_sequences():
    for rule in CASHOUT_RULES:
        assert rule.combo_id == int("".join(str(t.digit) for t in rule.sequence))


def test_tiers_follow_chain_length():
    assert {rule.combo_id: rule.tier for rule in CASHOUT_RULES} == {11: 1, 22: 1, 112: 2, 121: 2}


def test_effect_base_cannot_be_created():
    with pytest.raises(TypeError):
        Effect()


def test_effect_without_apply_cannot_be_created():
    class Forgetful(Effect):
        pass

    with pytest.raises(TypeError):
        Forgetful()


def test_find_rule_misses_unmapped_values():
    assert find_rule(11).name == "Deft Strike"
    assert find_rule(21) is None
    assert find_rule(0) is None


def test_build_table_rejects_duplicate_chains():
    rules = [
        CashoutRule("One", CashoutType.DEFT_STRIKE, (A, A)),
        CashoutRule("Two", CashoutType.THE_BOOT, (A, A)),
    ]
    with pytest.raises(ValueError):
        build_table(rules)


def test_perseverance_sends_fixed_signal_order():
    effect = CASHOUT_TABLE[112].effect
    assert isinstance(effect, AnimationSequenceEffect)
    actor = SandboxActor(name="Player", is_player=True)
    effect.apply(actor)
    assert actor.graph_events == [
        ANIM_IDLE_FORCE_DEFAULT,
        ANIM_SHOUT_START,
        ANIM_SHOUT_RELEASE,
        ANIM_IDLE_FORCE_DEFAULT,
    ]


def test_deft_strike_heals_and_defensive_strike_restores_stamina():
    actor = SandboxActor(name="Player", is_player=True, health=50.0, stamina=10.0)
    CASHOUT_TABLE[11].effect.apply(actor)
    CASHOUT_TABLE[22].effect.apply(actor)
    assert actor.health == 75.0
    assert actor.stamina == 60.0


def test_restore_is_capped_by_sandbox_actor():
    actor = SandboxActor(name="Player", is_player=True)
    RestoreActorValueEffect(AV_HEALTH, 500).apply(actor)
    RestoreActorValueEffect(AV_STAMINA, 500).apply(actor)
    assert actor.health == actor.max_health
    assert actor.stamina == actor.max_stamina


def test_the_boot_makes_no_host_calls():
    rule = CASHOUT_TABLE[121]
    assert isinstance(rule.effect, LogOnlyEffect)
    actor = SandboxActor(name="Player", is_player=True, health=10.0)
    rule.effect.apply(actor)
    assert actor.graph_events == []
    assert actor.health == 10.0


def test_animation_effect_tolerates_ignored_signals():
    class DeafActor:
        def __init__(self):
            self.calls = []

        def notify_animation_graph(self, name):
            self.calls.append(name)
            return False

    actor = DeafActor()
    AnimationSequenceEffect(("a", "b")).apply(actor)
    assert actor.calls == ["a", "b"]
