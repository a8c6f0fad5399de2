"""
Host Interfaces
===============
Event payloads and the narrow surface of the game engine the combo core
talks to. Real engines and the sandbox both implement these protocols.
"""

from typing import Optional, Callable, Protocol, runtime_checkable
from dataclasses import dataclass

from .config import HitFlag, FormType, MessageType, NotifyControl


@runtime_checkable
class ObjectRef(Protocol):
    """Any placed object in the world"""

    def is_player_ref(self) -> bool: ...

    def as_actor(self) -> Optional["Actor"]: ...


@runtime_checkable
class Actor(ObjectRef, Protocol):
    """An object reference that has an animation graph and actor values"""

    def notify_animation_graph(self, event_name: str) -> bool: ...

    def restore_actor_value(self, actor_value: str, amount: float) -> None: ...

    def add_animation_graph_event_sink(self, sink: "AnimSink") -> bool: ...


@runtime_checkable
class Form(Protocol):
    """A looked-up game form (weapon, spell, armor...)"""
    form_type: FormType

    def is_melee(self) -> bool: ...


@dataclass
class HitEvent:
    """A hit occurred between two object references"""
    cause: Optional[ObjectRef]
    target: Optional[ObjectRef]
    source: int = 0
    flags: HitFlag = HitFlag.NONE

    def has_flag(self, flag: HitFlag) -> bool:
        return bool(self.flags & flag)


@dataclass
class AnimationEvent:
    """An animation graph emitted a tagged cue"""
    tag: str
    holder: Optional[ObjectRef]
    payload: str = ""


@dataclass
class Message:
    """Lifecycle message from the host"""
    type: MessageType


HitSink = Callable[..., NotifyControl]
AnimSink = Callable[..., NotifyControl]
MessageListener = Callable[[Message], None]


@runtime_checkable
class Host(Protocol):
    """The engine-side registry and lookups the plugin relies on"""

    def player(self) -> Optional[Actor]: ...

    def lookup_form(self, form_id: int) -> Optional[Form]: ...

    def add_hit_sink(self, sink: HitSink) -> None: ...

    def register_listener(self, listener: MessageListener) -> bool: ...
