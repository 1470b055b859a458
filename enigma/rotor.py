import enum
import logging

from enigma_errors import EnigmaError, ReflectorPositionChange
from permutation import Permutation

logger = logging.getLogger(__name__)


class RotorKind(enum.Enum):
    CONTACT = 'N'
    MOVING = 'M'
    REFLECTOR = 'R'


class Rotor:
    def __init__(self, name: str, permutation: Permutation, kind: RotorKind = RotorKind.CONTACT, notches: str = ''):
        self.name = name
        self.permutation = permutation
        self.kind = kind

        if notches and kind != RotorKind.MOVING:
            raise EnigmaError(f'only moving rotors have notches, rotor {name} is {kind.name.lower()}')
        self.notches = frozenset(permutation.alphabet.to_index(char) for char in notches)

        self.ring = 0
        self.setting = 0

    @property
    def alphabet(self):
        return self.permutation.alphabet

    @property
    def rotates(self) -> bool:
        return self.kind == RotorKind.MOVING

    @property
    def reflecting(self) -> bool:
        return self.kind == RotorKind.REFLECTOR

    def size(self) -> int:
        return self.permutation.size()

    def set_ring(self, ring: int):
        if self.reflecting and ring != 0:
            raise ReflectorPositionChange(f'reflector {self.name} has only one position')
        self.ring = ring

    def set_ring_char(self, char: str):
        self.set_ring(self.alphabet.to_index(char))

    def set(self, posn: int):
        if self.reflecting and posn != 0:
            raise ReflectorPositionChange(f'reflector {self.name} has only one position')
        self.setting = posn

    def set_char(self, char: str):
        # not wrapped here, forward/backward and at_notch wrap lazily
        self.set(self.alphabet.to_index(char) - self.ring)

    def reset(self):
        self.ring = 0
        self.setting = 0

    def position(self) -> str:
        """the symbol visible in the rotor window"""
        return self.alphabet.to_char(self.permutation.wrap(self.setting + self.ring))

    def forward(self, p: int) -> int:
        return self.permutation.wrap(self.permutation.permute(p + self.setting) - self.setting)

    def backward(self, e: int) -> int:
        return self.permutation.wrap(self.permutation.invert(e + self.setting) - self.setting)

    def at_notch(self) -> bool:
        if self.kind != RotorKind.MOVING:
            return False
        return self.permutation.wrap(self.setting + self.ring) in self.notches

    def advance(self):
        if self.kind != RotorKind.MOVING:
            return
        self.setting = self.permutation.wrap(self.setting + 1)

    def __repr__(self):
        return f'<Rotor {self.name} {self.kind.name.lower()} setting={self.setting} ring={self.ring}>'


def advance_stack(rotors: list):
    """
    one keypress worth of stepping for rotors ordered left to right.
    a moving rotor steps if it is the rightmost one or if its right neighbour sits at a notch,
    in the latter case it also pushes that neighbour one position further (double step).
    a rotor that got pushed is not stepped a second time in the same pass.
    """
    pushed = set()
    last = len(rotors) - 1
    for i, rotor in enumerate(rotors):
        if not rotor.rotates or i in pushed:
            continue
        if i == last:
            rotor.advance()
        elif rotors[i + 1].at_notch():
            rotor.advance()
            rotors[i + 1].advance()
            pushed.add(i + 1)
            logger.debug('rotor %s at notch, stepping %s with it', rotors[i + 1].name, rotor.name)
