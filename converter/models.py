from dataclasses import dataclass, replace
from enum import Enum

from converter.errors import HeaderError, InvalidDirection

# === RESERVED SYMBOLS ===
LEFT_WALL = "#"
RIGHT_WALL = "$"
BLANK = "_"
ANY = "*"

COMMENT = ";"

# === RESERVED STATE LABELS ===
HALT_PREFIX = "halt"
SIM_PREFIX = "sim_"
START_STATE = "0"


class Direction(Enum):
    LEFT = "l"
    RIGHT = "r"
    STAY = "*"

    @classmethod
    def from_token(cls, token):
        for direction in cls:
            if direction.value == token:
                return direction
        raise InvalidDirection(token)

    @property
    def token(self):
        return self.value


class MachineType(Enum):
    INFINITE = ";I"
    SIPSER = ";S"

    @classmethod
    def from_header(cls, header):
        for machine_type in cls:
            if machine_type.value == header:
                return machine_type
        raise HeaderError(header)

    @property
    def target(self):
        """The model produced when converting a table of this type."""
        return MachineType.SIPSER if self is MachineType.INFINITE else MachineType.INFINITE

    @property
    def label(self):
        return "Infinite" if self is MachineType.INFINITE else "Sipser"


@dataclass(frozen=True)
class Transition:
    current_state: str
    current_symbol: str
    new_symbol: str
    direction: Direction
    new_state: str

    def retarget(self, new_state):
        """Return a copy of this rule that enters new_state instead."""
        return replace(self, new_state=new_state)


def is_halt_state(state):
    return state.startswith(HALT_PREFIX)


def next_state_or_halt(original_new_state, check_state):
    """Keep terminal destinations as they are, otherwise route through check_state."""
    if is_halt_state(original_new_state):
        return original_new_state
    return check_state
