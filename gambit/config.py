"""
Gambit - Configuration & Constants
==================================
All combo settings, host signal names and sandbox constants in one place.
"""

from enum import Enum, IntEnum, IntFlag, auto

# =============================================================================
# PLUGIN
# =============================================================================

PLUGIN_NAME = "Gambit"
PLUGIN_VERSION = "0.1.0"

# =============================================================================
# COMBO SETTINGS
# =============================================================================

MAX_COMBO_LENGTH = 6
NO_COMBO = 0  # Decoded value of an empty chain


class ComboToken(Enum):
    """Builder input classes. The value is the digit used when decoding."""
    NORMAL = 1
    BASH = 2

    @property
    def digit(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return "Normal Attack" if self is ComboToken.NORMAL else "Bash Attack"


# =============================================================================
# ANIMATION GRAPH
# =============================================================================

# Fires at both the start and end boundary of a power attack
CASHOUT_TRIGGER_TAG = "PowerAttack_Start_End"

ANIM_IDLE_FORCE_DEFAULT = "IdleForceDefaultState"
ANIM_SHOUT_START = "ShoutStart"
ANIM_SHOUT_RELEASE = "ShoutRelease"

# =============================================================================
# EFFECT AMOUNTS
# =============================================================================

AV_HEALTH = "Health"
AV_STAMINA = "Stamina"

DEFT_STRIKE_HEAL = 25.0
DEFENSIVE_STRIKE_STAMINA = 50.0

# =============================================================================
# HOST ENUMS
# =============================================================================


class HitFlag(IntFlag):
    """Flags carried by a hit notification"""
    NONE = 0
    POWER_ATTACK = 1 << 0
    SNEAK_ATTACK = 1 << 1
    BASH_ATTACK = 1 << 2
    HIT_BLOCKED = 1 << 3


class FormType(Enum):
    NONE = auto()
    WEAPON = auto()
    ARMOR = auto()
    SPELL = auto()
    BOOK = auto()
    ACTOR = auto()


class WeaponType(IntEnum):
    """Weapon animation types. Everything up to TWO_HAND_AXE swings in melee."""
    HAND_TO_HAND = 0
    ONE_HAND_SWORD = 1
    ONE_HAND_DAGGER = 2
    ONE_HAND_AXE = 3
    ONE_HAND_MACE = 4
    TWO_HAND_SWORD = 5
    TWO_HAND_AXE = 6
    BOW = 7
    STAFF = 8
    CROSSBOW = 9


class MessageType(Enum):
    """Host lifecycle messages"""
    POST_LOAD = auto()
    POST_POST_LOAD = auto()
    INPUT_LOADED = auto()
    DATA_LOADED = auto()
    NEW_GAME = auto()
    PRE_LOAD_GAME = auto()
    POST_LOAD_GAME = auto()
    SAVE_GAME = auto()
    DELETE_GAME = auto()


# Messages after which the player instance may have changed
SESSION_MESSAGES = (MessageType.NEW_GAME, MessageType.POST_LOAD_GAME)


class NotifyControl(Enum):
    """Returned by sinks to the event source"""
    CONTINUE = auto()
    STOP = auto()


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = "logs"

# =============================================================================
# SANDBOX
# =============================================================================

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
FPS = 60
SANDBOX_TITLE = "GAMBIT - Combo Sandbox"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
GOLD = (255, 215, 0)
RED = (220, 50, 50)
GREEN = (50, 200, 50)
STAMINA_GOLD = (200, 180, 50)
UI_BG = (20, 20, 30)

PLAYER_MAX_HEALTH = 100.0
PLAYER_MAX_STAMINA = 100.0

# Form ids registered by the sandbox host
FORM_IRON_SWORD = 0x00012EB7
FORM_HUNTING_BOW = 0x00013985
FORM_FLAMES_TOME = 0x0009CD51
