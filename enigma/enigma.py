import logging

from alphabet import Alphabet
from enigma_errors import (BadRingLength, BadRotorCount, BadSettingLength, DuplicateRotor, ExpectedNonMovingRotor,
                           NotAMovingRotor, NotAReflector, NotConfigured, SettingNotInAlphabet, UnknownRotorName)
from permutation import Permutation
from rotor import advance_stack

logger = logging.getLogger(__name__)


class Machine:
    def __init__(self, alphabet: Alphabet, num_rotors: int, pawls: int, all_rotors):
        """
        :param alphabet: common alphabet of the machine and all its rotors
        :param num_rotors: number of rotor slots, including the reflector
        :param pawls: number of slots (counted from the right) holding moving rotors
        :param all_rotors: every rotor that can be inserted, looked up by name
        """
        if num_rotors <= 1 or not 0 <= pawls < num_rotors:
            raise BadRotorCount(f'need 1 < num_rotors and 0 <= pawls < num_rotors, got {num_rotors} and {pawls}')
        self.alphabet = alphabet
        self._num_rotors = num_rotors
        self._num_pawls = pawls

        self.all_rotors = dict()
        for rotor in all_rotors:
            if rotor.name in self.all_rotors:
                raise DuplicateRotor(f'rotor {rotor.name} is defined twice')
            self.all_rotors[rotor.name] = rotor

        self.rotors = []
        self.plugboard = Permutation('', alphabet)

    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._num_pawls

    def rotor_names(self) -> list:
        return list(self.all_rotors)

    def insert_rotors(self, names):
        """
        put the rotors called names into the slots, names[0] is the reflector.
        all inserted rotors start at ring 0 and setting 0.
        """
        if len(names) != self._num_rotors:
            raise BadRotorCount(f'expected {self._num_rotors} rotors, got {len(names)}')

        first_moving = self._num_rotors - self._num_pawls
        rotors = []
        for i, name in enumerate(names):
            try:
                rotor = self.all_rotors[name]
            except KeyError:
                raise UnknownRotorName(f'rotor {name} not found') from None
            if i == 0:
                if not rotor.reflecting:
                    raise NotAReflector(f'rotor {name} is not a reflector')
            elif i >= first_moving:
                if not rotor.rotates:
                    raise NotAMovingRotor(f'rotor {name} in slot {i} is not a moving rotor')
            elif rotor.rotates or rotor.reflecting:
                raise ExpectedNonMovingRotor(f'rotor {name} in slot {i} must be a non-moving contact rotor')
            if rotor in rotors:
                raise DuplicateRotor(f'rotor {name} cannot be repeated')
            rotors.append(rotor)

        for rotor in rotors:
            rotor.reset()
        self.rotors = rotors
        logger.debug('inserted rotors %s', ' '.join(names))

    def _check_slot_string(self, chars: str, what: str):
        for char in chars:
            if not self.alphabet.contains(char):
                raise SettingNotInAlphabet(f'{what} {chars!r} contains {char!r} which is not in the alphabet')
        if not self.rotors:
            raise NotConfigured('no rotors inserted')

    def set_rotors(self, setting: str):
        """setting[0] is the leftmost rotor after the reflector"""
        if len(setting) != self._num_rotors - 1:
            raise BadSettingLength(f'setting {setting!r} must have {self._num_rotors - 1} symbols')
        self._check_slot_string(setting, 'setting')
        for rotor, char in zip(self.rotors[1:], setting):
            rotor.set_char(char)
        logger.debug('rotor setting %s', setting)

    def set_ring(self, ring: str):
        if len(ring) != self._num_rotors - 1:
            raise BadRingLength(f'ring setting {ring!r} must have {self._num_rotors - 1} symbols')
        self._check_slot_string(ring, 'ring setting')
        for rotor, char in zip(self.rotors[1:], ring):
            rotor.set_ring_char(char)
        logger.debug('ring setting %s', ring)

    def set_plugboard(self, plugboard: Permutation):
        self.plugboard = plugboard

    def positions(self) -> str:
        return ''.join(rotor.position() for rotor in self.rotors[1:])

    def advance(self):
        advance_stack(self.rotors)

    def convert(self, c: int) -> int:
        """advance the rotors, then send index c through the machine and back"""
        if not self.rotors:
            raise NotConfigured('no rotors inserted')
        self.advance()

        c = self.plugboard.permute(c)
        for rotor in reversed(self.rotors):
            c = rotor.forward(c)
        for rotor in self.rotors[1:]:
            c = rotor.backward(c)
        return self.plugboard.invert(c)

    def convert_message(self, msg: str) -> str:
        msg = ''.join(msg.split())
        input_ints = [self.alphabet.to_index(char) for char in msg]

        output = str()
        for input_int in input_ints:
            output += self.alphabet.to_char(self.convert(input_int))
        return output
