from __future__ import annotations

import threading
import time
from types import MappingProxyType

from gambit.combo import CashoutDispatcher, CashoutRule, CashoutType, Effect, SequenceStore
from gambit.config import ComboToken
from gambit.sandbox import SandboxActor

A = ComboToken.NORMAL


class GatedEffect(Effect):
    """Blocks inside apply() until released"""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def apply(self, actor):
        self.started.set()
        self.release.wait(timeout=5)


class RecordAll(dict):
    """Table that maps every chain to one recording rule"""

    def __init__(self):
        super().__init__()
        self.seen = []
        self._lock = threading.Lock()

    def get(self, combo_id, default=None):
        with self._lock:
            self.seen.append(combo_id)
        return CashoutRule("Any", CashoutType.DEFT_STRIKE, (A,))


def test_append_during_cashout_lands_after_reset():
    effect = GatedEffect()
    table = MappingProxyType({
        11: CashoutRule("Deft Strike", CashoutType.DEFT_STRIKE, (A, A), effect),
    })
    store = SequenceStore()
    dispatcher = CashoutDispatcher(store, table)
    player = SandboxActor(name="Player", is_player=True)
    store.append(A)
    store.append(A)

    results = []
    cashout = threading.Thread(target=lambda: results.append(dispatcher.execute(player)))
    builder = threading.Thread(target=lambda: store.append(A))

    cashout.start()
    assert effect.started.wait(timeout=5)
    builder.start()
    time.sleep(0.05)
    assert builder.is_alive(), "append must wait for the cashout to finish"

    effect.release.set()
    cashout.join(timeout=5)
    builder.join(timeout=5)

    assert results[0].combo_id == 11
    assert store.sequence == (A,)


def test_second_trigger_waits_and_sees_empty_chain():
    effect = GatedEffect()
    table = MappingProxyType({
        11: CashoutRule("Deft Strike", CashoutType.DEFT_STRIKE, (A, A), effect),
    })
    store = SequenceStore()
    dispatcher = CashoutDispatcher(store, table)
    player = SandboxActor(name="Player", is_player=True)
    store.append(A)
    store.append(A)

    results = []
    first = threading.Thread(target=lambda: results.append(dispatcher.execute(player)))
    second = threading.Thread(target=lambda: results.append(dispatcher.execute(player)))

    first.start()
    assert effect.started.wait(timeout=5)
    second.start()
    time.sleep(0.05)
    effect.release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert [r.combo_id for r in results] == [11, 0]
    assert not results[1].skipped


def test_no_token_lost_between_builders_and_cashouts():
    store = SequenceStore()
    table = RecordAll()
    dispatcher = CashoutDispatcher(store, table)
    player = SandboxActor(name="Player", is_player=True)

    accepted = []
    stop = threading.Event()

    def build():
        for _ in range(2000):
            if store.append(A) is not None:
                accepted.append(1)
        stop.set()

    def cash_out():
        while not stop.is_set():
            dispatcher.execute(player)
            time.sleep(0)

    threads = [threading.Thread(target=build), threading.Thread(target=cash_out)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    # Every decoded chain is a run of ones, never a torn read
    assert all(set(str(cid)) == {"1"} for cid in table.seen)
    consumed = sum(len(str(cid)) for cid in table.seen)
    assert consumed + len(store) == len(accepted)
