"""
Sandbox Host
============
In-memory stand-in for the game engine: a player, a training dummy,
a handful of forms and the event sources the plugin registers with.
"""

import logging
from typing import Optional, List, Dict
from dataclasses import dataclass, field

from ..config import (
    FormType, WeaponType, HitFlag, MessageType,
    AV_HEALTH, AV_STAMINA,
    PLAYER_MAX_HEALTH, PLAYER_MAX_STAMINA,
    FORM_IRON_SWORD, FORM_HUNTING_BOW, FORM_FLAMES_TOME,
    CASHOUT_TRIGGER_TAG,
)
from ..host import HitEvent, AnimationEvent, Message, HitSink, AnimSink, MessageListener

logger = logging.getLogger(__name__)


@dataclass
class SandboxForm:
    """A non-weapon form"""
    name: str
    form_type: FormType = FormType.NONE

    def is_melee(self) -> bool:
        return False


@dataclass
class SandboxWeapon:
    name: str
    weapon_type: WeaponType
    form_type: FormType = FormType.WEAPON

    def is_melee(self) -> bool:
        return self.weapon_type <= WeaponType.TWO_HAND_AXE


@dataclass
class SandboxRef:
    """A placed object that is not an actor (door, barrel...)"""
    name: str

    def is_player_ref(self) -> bool:
        return False

    def as_actor(self):
        return None


@dataclass(eq=False)
class SandboxActor:
    name: str
    is_player: bool = False
    health: float = PLAYER_MAX_HEALTH
    stamina: float = PLAYER_MAX_STAMINA
    max_health: float = PLAYER_MAX_HEALTH
    max_stamina: float = PLAYER_MAX_STAMINA

    # Every animation graph event this actor was told to play, in order
    graph_events: List[str] = field(default_factory=list)
    anim_sinks: List[AnimSink] = field(default_factory=list)

    def is_player_ref(self) -> bool:
        return self.is_player

    def as_actor(self) -> "SandboxActor":
        return self

    def notify_animation_graph(self, event_name: str) -> bool:
        self.graph_events.append(event_name)
        self.emit_animation_event(event_name)
        return True

    def restore_actor_value(self, actor_value: str, amount: float):
        if actor_value == AV_HEALTH:
            self.health = min(self.max_health, self.health + amount)
        elif actor_value == AV_STAMINA:
            self.stamina = min(self.max_stamina, self.stamina + amount)
        else:
            raise ValueError(f"Unknown actor value: {actor_value}")

    def damage_actor_value(self, actor_value: str, amount: float):
        if actor_value == AV_HEALTH:
            self.health = max(0.0, self.health - amount)
        elif actor_value == AV_STAMINA:
            self.stamina = max(0.0, self.stamina - amount)

    def add_animation_graph_event_sink(self, sink: AnimSink) -> bool:
        if sink not in self.anim_sinks:
            self.anim_sinks.append(sink)
        return True

    def emit_animation_event(self, tag: str):
        """Send a tagged cue to every sink on this graph"""
        event = AnimationEvent(tag=tag, holder=self)
        for sink in list(self.anim_sinks):
            sink(event, self)


class SandboxHost:
    """
    Host with one player and one target dummy.
    A new player instance is created for every new game or load.
    """

    def __init__(self):
        self._player: Optional[SandboxActor] = None
        self.dummy = SandboxActor(name="Training Dummy")
        self.door = SandboxRef(name="Door")

        self.forms: Dict[int, object] = {
            FORM_IRON_SWORD: SandboxWeapon("Iron Sword", WeaponType.ONE_HAND_SWORD),
            FORM_HUNTING_BOW: SandboxWeapon("Hunting Bow", WeaponType.BOW),
            FORM_FLAMES_TOME: SandboxForm("Spell Tome: Flames", FormType.BOOK),
        }

        self.hit_sinks: List[HitSink] = []
        self.listeners: List[MessageListener] = []
        self.session_count = 0

    # -------------------------------------------------------------------------
    # Host protocol
    # -------------------------------------------------------------------------

    def player(self) -> Optional[SandboxActor]:
        return self._player

    def lookup_form(self, form_id: int):
        return self.forms.get(form_id)

    def add_hit_sink(self, sink: HitSink):
        self.hit_sinks.append(sink)

    def register_listener(self, listener: MessageListener) -> bool:
        self.listeners.append(listener)
        return True

    # -------------------------------------------------------------------------
    # Driving the sandbox
    # -------------------------------------------------------------------------

    def send_message(self, message_type: MessageType):
        message = Message(type=message_type)
        for listener in list(self.listeners):
            listener(message)

    def start_session(self, message_type: MessageType = MessageType.NEW_GAME) -> SandboxActor:
        """Spawn a fresh player and announce the session"""
        self.session_count += 1
        self._player = SandboxActor(name="Player", is_player=True)
        logger.debug("Session %d started (%s)", self.session_count, message_type.name)
        self.send_message(message_type)
        return self._player

    def send_hit(self, event: HitEvent):
        for sink in list(self.hit_sinks):
            sink(event, self)

    def player_hit(self, form_id: int = FORM_IRON_SWORD,
                   flags: HitFlag = HitFlag.NONE, target=None) -> HitEvent:
        """Player strikes the dummy (or ``target``) with ``form_id``"""
        event = HitEvent(
            cause=self._player,
            target=self.dummy if target is None else target,
            source=form_id,
            flags=flags,
        )
        self.send_hit(event)
        return event

    def player_power_attack(self, form_id: int = FORM_IRON_SWORD):
        """Power attack: the hit lands and the graph reaches the boundary cue"""
        self.player_hit(form_id, HitFlag.POWER_ATTACK)
        if self._player is not None:
            self._player.emit_animation_event(CASHOUT_TRIGGER_TAG)
