"""
Gambit Plugin
=============
Owns the single combo store and wires the sinks into the host.
"""

import logging
from typing import Callable, Dict, Optional

from .config import PLUGIN_NAME, PLUGIN_VERSION, MessageType, SESSION_MESSAGES
from .combo import SequenceStore, CashoutDispatcher
from .events import HitEventSink, AnimEventSink
from .host import Host, Message

logger = logging.getLogger(__name__)


class GambitPlugin:
    """
    Constructed once at startup. Every component shares the same store.
    """

    def __init__(self, store: Optional[SequenceStore] = None):
        self.host: Optional[Host] = None
        self.store = store if store is not None else SequenceStore()
        self.dispatcher = CashoutDispatcher(self.store)

        self.hit_sink: Optional[HitEventSink] = None
        self.anim_sink: Optional[AnimEventSink] = None
        self.anim_sink_attached = False
        self.loaded = False

        self._message_handlers: Dict[MessageType, Callable[[Message], None]] = {}
        for message_type in SESSION_MESSAGES:
            self.register_handler(message_type, self._on_session_start)

    def register_handler(self, message_type: MessageType,
                         handler: Callable[[Message], None]):
        """Register a handler for a host lifecycle message"""
        self._message_handlers[message_type] = handler

    def load(self, host: Host) -> bool:
        """Attach to the host. Hit events now, animation events per session."""
        if self.loaded:
            logger.warning("%s already loaded", PLUGIN_NAME)
            return True

        self.host = host
        self.hit_sink = HitEventSink(self.store, host)
        self.anim_sink = AnimEventSink(self.dispatcher, host)

        host.add_hit_sink(self.hit_sink)
        if not host.register_listener(self.on_message):
            logger.warning("Messaging listener rejected, animation sink "
                           "will never be attached")

        self.loaded = True
        logger.info("%s Plugin Loaded (v%s).", PLUGIN_NAME, PLUGIN_VERSION)
        return True

    def on_message(self, message: Message):
        """Host lifecycle listener"""
        handler = self._message_handlers.get(message.type)
        if handler:
            handler(message)

    def _on_session_start(self, message: Message):
        # The player instance can change between sessions
        self.register_anim_sink()

    def register_anim_sink(self) -> bool:
        """Attach the animation sink to the current player"""
        logger.info("registering anim sink")
        player = self.host.player() if self.host else None
        if player is None:
            logger.warning("registering anim sink failed: no player")
            self.anim_sink_attached = False
            return False

        if not player.add_animation_graph_event_sink(self.anim_sink):
            logger.warning("registering anim sink failed: sink rejected")
            self.anim_sink_attached = False
            return False

        logger.info("Gambit: Animation Sink Attached.")
        self.anim_sink_attached = True
        return True
