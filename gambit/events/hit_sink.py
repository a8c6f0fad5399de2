"""
Hit Event Sink
==============
Builders only: classifies player melee hits into combo tokens.
"""

import logging
from typing import Optional

from ..config import ComboToken, FormType, HitFlag, NotifyControl
from ..combo.sequence import SequenceStore
from ..host import HitEvent, Host

logger = logging.getLogger(__name__)


class HitEventSink:
    """
    Receives every hit the host reports and feeds builder tokens to the
    sequence store. Never cashes out and never resets.
    """

    def __init__(self, store: SequenceStore, host: Host):
        self.store = store
        self.host = host

    def validate(self, event: Optional[HitEvent]) -> bool:
        """Player-caused hit on an actor"""
        if event is None or event.cause is None or event.target is None:
            return False
        if event.target.as_actor() is None:
            return False
        if not event.cause.is_player_ref():
            return False
        return True

    def classify(self, event: HitEvent) -> Optional[ComboToken]:
        """Token for a validated hit, or None if it is not a builder"""
        # Power attacks are the cashout, they never build
        if event.has_flag(HitFlag.POWER_ATTACK):
            return None

        if event.has_flag(HitFlag.BASH_ATTACK):
            return ComboToken.BASH

        form = self.host.lookup_form(event.source)
        if form is None or form.form_type != FormType.WEAPON:
            return None
        if not form.is_melee():
            return None
        return ComboToken.NORMAL

    def process_event(self, event: Optional[HitEvent], source=None) -> NotifyControl:
        if not self.validate(event):
            logger.debug("Ignoring hit event: %r", event)
            return NotifyControl.CONTINUE

        token = self.classify(event)
        if token is not None:
            self.store.append(token)

        return NotifyControl.CONTINUE

    __call__ = process_event
