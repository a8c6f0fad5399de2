"""
Event Sink Module
"""

from .hit_sink import HitEventSink
from .anim_sink import AnimEventSink

__all__ = ['HitEventSink', 'AnimEventSink']
