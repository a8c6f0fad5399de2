"""
Animation Event Sink
====================
Cashouts only: watches the player's animation graph for the trigger cue.
"""

import logging
from typing import Optional

from ..config import CASHOUT_TRIGGER_TAG, NotifyControl
from ..combo.dispatcher import CashoutDispatcher
from ..host import AnimationEvent, Host

logger = logging.getLogger(__name__)


class AnimEventSink:
    """Calls the dispatcher once per trigger cue emitted by the player"""

    def __init__(self, dispatcher: CashoutDispatcher, host: Host,
                 trigger_tag: str = CASHOUT_TRIGGER_TAG):
        self.dispatcher = dispatcher
        self.host = host
        self.trigger_tag = trigger_tag

    def is_trigger(self, event: AnimationEvent) -> bool:
        return event.tag == self.trigger_tag

    def process_event(self, event: Optional[AnimationEvent], source=None) -> NotifyControl:
        if event is None or event.holder is None:
            return NotifyControl.CONTINUE

        # Read-only check on the holder before touching the player
        if not event.holder.is_player_ref():
            return NotifyControl.CONTINUE

        player = self.host.player()
        if player is None:
            logger.debug("Player not ready, dropping %s", event.tag)
            return NotifyControl.CONTINUE

        if self.is_trigger(event):
            logger.info("Trigger %s received, executing gambit", event.tag)
            self.dispatcher.execute(player)

        return NotifyControl.CONTINUE

    __call__ = process_event
