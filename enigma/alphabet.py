import string

from enigma_errors import DuplicateSymbol, EnigmaError, IndexOutOfRange, SymbolNotInAlphabet


class Alphabet:
    """
    ordered set of symbols, symbol number k has index k.
    """
    def __init__(self, chars: str = string.ascii_uppercase):
        if len(chars) == 0:
            raise EnigmaError('alphabet must contain at least one symbol')

        self.chars = chars
        self.char_to_number_map = dict()
        for i, char in enumerate(chars):
            if char in self.char_to_number_map:
                raise DuplicateSymbol(f'symbol {char!r} appears more than once in alphabet {chars!r}')
            self.char_to_number_map[char] = i

    def size(self) -> int:
        return len(self.chars)

    def contains(self, char: str) -> bool:
        return char in self.char_to_number_map

    def to_char(self, index: int) -> str:
        if not 0 <= index < len(self.chars):
            raise IndexOutOfRange(f'index {index} out of range 0-{len(self.chars) - 1}')
        return self.chars[index]

    def to_index(self, char: str) -> int:
        try:
            return self.char_to_number_map[char]
        except KeyError:
            raise SymbolNotInAlphabet(f'symbol {char!r} not in alphabet') from None

    def __len__(self):
        return self.size()

    def __contains__(self, char):
        return self.contains(char)

    def __iter__(self):
        return iter(self.chars)

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.chars == other.chars

    def __hash__(self):
        return hash(self.chars)

    def __str__(self):
        return self.chars

    def __repr__(self):
        return f'Alphabet({self.chars!r})'
