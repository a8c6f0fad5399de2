from __future__ import annotations

import itertools
import logging

import pytest

from gambit.combo.sequence import SequenceStore, encode
from gambit.config import ComboToken, MAX_COMBO_LENGTH, NO_COMBO

A = ComboToken.NORMAL
B = ComboToken.BASH


def test_fresh_store_decodes_to_no_combo():
    store = SequenceStore()
    assert store.decode() == NO_COMBO == 0
    assert len(store) == 0
    assert store.sequence == ()


@pytest.mark.parametrize("length", range(1, MAX_COMBO_LENGTH + 1))
def test_decode_is_digit_concatenation(length):
    for tokens in itertools.product((A, B), repeat=length):
        store = SequenceStore()
        for token in tokens:
            store.append(token)
        expected = int("".join(str(t.digit) for t in tokens))
        assert store.decode() == expected


def test_append_returns_new_sequence():
    store = SequenceStore()
    assert store.append(A) == (A,)
    assert store.append(B) == (A, B)
    assert store.chain == "12"


def test_append_beyond_limit_is_rejected_without_mutation(caplog):
    caplog.set_level(logging.INFO, logger="gambit")
    store = SequenceStore()
    for _ in range(MAX_COMBO_LENGTH):
        assert store.append(A) is not None
    before = store.decode()

    assert store.append(B) is None
    assert store.decode() == before == 111111
    assert len(store) == MAX_COMBO_LENGTH
    assert store.is_full
    assert "Max Combo Length Reached" in caplog.text


def test_seven_normals_cap_at_six():
    store = SequenceStore()
    results = [store.append(A) for _ in range(7)]
    assert results[-1] is None
    assert all(r is not None for r in results[:-1])
    assert store.decode() == 111111


def test_reset_clears_and_is_idempotent():
    store = SequenceStore()
    store.append(B)
    store.append(A)
    store.reset()
    assert store.decode() == NO_COMBO
    store.reset()
    assert store.sequence == ()


def test_decode_has_no_side_effects():
    store = SequenceStore()
    store.append(A)
    store.append(B)
    assert store.decode() == store.decode() == 12
    assert store.sequence == (A, B)


def test_append_rejects_non_tokens():
    store = SequenceStore()
    with pytest.raises(TypeError):
        store.append("1")
    with pytest.raises(TypeError):
        store.append(1)
    assert store.decode() == NO_COMBO


def test_encode_matches_store_decode():
    assert encode([]) == 0
    assert encode([A, A, B]) == 112
    assert encode((B, B)) == 22


def test_append_logs_builder_line(caplog):
    caplog.set_level(logging.INFO, logger="gambit")
    store = SequenceStore()
    store.append(A)
    store.append(B)
    assert "Builder: Normal Attack (1) -> Chain: 1" in caplog.text
    assert "Builder: Bash Attack (2) -> Chain: 12" in caplog.text


def test_transaction_allows_nested_calls():
    store = SequenceStore()
    with store.transaction() as locked:
        locked.append(A)
        assert locked.decode() == 1
        locked.reset()
    assert store.decode() == 0
