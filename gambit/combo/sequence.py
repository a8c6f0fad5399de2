"""
Sequence Store
==============
The in-progress combo chain for the tracked player.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Tuple

from ..config import ComboToken, MAX_COMBO_LENGTH, NO_COMBO

logger = logging.getLogger(__name__)


def encode(sequence: Iterable[ComboToken]) -> int:
    """Concatenate token digits, oldest first. 0 for an empty sequence."""
    value = NO_COMBO
    for token in sequence:
        value = value * 10 + token.digit
    return value


class SequenceStore:
    """
    Bounded, ordered chain of builder tokens.

    Every read and write goes through one re-entrant lock, so the
    dispatcher can hold a whole cashout (decode, effect, reset) as a
    single critical section via ``transaction()``.
    """

    def __init__(self, max_length: int = MAX_COMBO_LENGTH):
        self.max_length = max_length
        self._tokens: List[ComboToken] = []
        self._lock = threading.RLock()

    def append(self, token: ComboToken) -> Optional[Tuple[ComboToken, ...]]:
        """
        Add a token to the tail of the chain.
        Return the new chain, or None when the chain is already full.
        """
        if not isinstance(token, ComboToken):
            raise TypeError(f"expected ComboToken, got {type(token).__name__}")

        with self._lock:
            if len(self._tokens) >= self.max_length:
                logger.info("Max Combo Length Reached (chain: %s)", self._chain())
                return None

            self._tokens.append(token)
            logger.info("Builder: %s (%d) -> Chain: %s",
                        token.label, token.digit, self._chain())
            return tuple(self._tokens)

    def decode(self) -> int:
        """Chain as an integer, one digit per token. 0 when empty."""
        with self._lock:
            return encode(self._tokens)

    def reset(self):
        """Clear the chain"""
        with self._lock:
            self._tokens.clear()
            logger.info("Gambit Chain Cleared.")

    @contextmanager
    def transaction(self) -> Iterator["SequenceStore"]:
        """Hold the store lock across several calls"""
        with self._lock:
            yield self

    @property
    def sequence(self) -> Tuple[ComboToken, ...]:
        with self._lock:
            return tuple(self._tokens)

    @property
    def chain(self) -> str:
        with self._lock:
            return self._chain()

    @property
    def is_full(self) -> bool:
        with self._lock:
            return len(self._tokens) >= self.max_length

    def _chain(self) -> str:
        return "".join(str(t.digit) for t in self._tokens)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def __repr__(self) -> str:
        return f"SequenceStore(chain={self.chain!r})"
