import re

import numpy as np

from alphabet import Alphabet
from enigma_errors import MalformedCycles

_cycles_re = re.compile(r'(\([^()]*\))*')
_cycle_re = re.compile(r'\(([^()]*)\)')


def parse_cycles(cycles: str) -> list:
    """
    split cycle notation like '(AELT) (BK) ()' into ['AELT', 'BK'].
    whitespace is ignored, empty groups are dropped.
    """
    compact = ''.join(cycles.split())
    if not _cycles_re.fullmatch(compact):
        raise MalformedCycles(f'not a sequence of cycles: {cycles!r}')
    return [cycle for cycle in _cycle_re.findall(compact) if cycle]


def cycles_from_table(forward, alphabet: Alphabet) -> str:
    """
    cycle notation of the permutation that sends index i to forward[i].
    fixed points are left out, every cycle starts at its lowest index.
    """
    n_chars = alphabet.size()
    if sorted(int(el) for el in forward) != list(range(n_chars)):
        raise MalformedCycles('forward table is not a permutation of the alphabet indices')

    visited = np.zeros(n_chars, dtype=bool)
    groups = []
    for start in range(n_chars):
        if visited[start] or forward[start] == start:
            continue
        group = []
        idx = start
        while not visited[idx]:
            visited[idx] = True
            group.append(alphabet.to_char(idx))
            idx = int(forward[idx])
        groups.append('(' + ''.join(group) + ')')
    return ' '.join(groups)


class Permutation:
    def __init__(self, cycles: str, alphabet: Alphabet):
        self.alphabet = alphabet
        n_chars = alphabet.size()

        # identity first, every cycle overrides its own edges
        self.forward_table = np.arange(n_chars)
        self.backward_table = np.arange(n_chars)

        seen = set()
        for cycle in parse_cycles(cycles):
            indices = [alphabet.to_index(char) for char in cycle]
            for char in cycle:
                if char in seen:
                    raise MalformedCycles(f'symbol {char!r} appears in more than one place in {cycles!r}')
                seen.add(char)
            for this, next_ in zip(indices, indices[1:] + indices[:1]):
                self.forward_table[this] = next_
                self.backward_table[next_] = this

        self._derangement = not np.any(self.forward_table == np.arange(n_chars))

    def size(self) -> int:
        return self.alphabet.size()

    def wrap(self, p: int) -> int:
        return p % self.size()

    def permute(self, p: int) -> int:
        return int(self.forward_table[self.wrap(p)])

    def invert(self, c: int) -> int:
        return int(self.backward_table[self.wrap(c)])

    def permute_char(self, char: str) -> str:
        return self.alphabet.to_char(self.permute(self.alphabet.to_index(char)))

    def invert_char(self, char: str) -> str:
        return self.alphabet.to_char(self.invert(self.alphabet.to_index(char)))

    def derangement(self) -> bool:
        return self._derangement

    def cycles(self) -> str:
        return cycles_from_table(self.forward_table, self.alphabet)

    def __repr__(self):
        return f'Permutation({self.cycles()!r})'
