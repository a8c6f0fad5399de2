"""
Gambit
======
Melee combo chains that cash out on a power attack.
"""

from .config import PLUGIN_VERSION as __version__
from .config import ComboToken, HitFlag, MessageType, NotifyControl
from .combo import SequenceStore, CashoutDispatcher, CashoutResult, CASHOUT_TABLE
from .events import HitEventSink, AnimEventSink
from .host import HitEvent, AnimationEvent, Message
from .plugin import GambitPlugin

__all__ = [
    'ComboToken', 'HitFlag', 'MessageType', 'NotifyControl',
    'SequenceStore', 'CashoutDispatcher', 'CashoutResult', 'CASHOUT_TABLE',
    'HitEventSink', 'AnimEventSink',
    'HitEvent', 'AnimationEvent', 'Message',
    'GambitPlugin',
]
