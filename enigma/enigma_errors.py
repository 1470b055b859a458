class EnigmaError(ValueError):
    """Base class for every configuration or input error of the machine."""


class DuplicateSymbol(EnigmaError):
    pass


class SymbolNotInAlphabet(EnigmaError):
    pass


class IndexOutOfRange(EnigmaError, IndexError):
    pass


class MalformedCycles(EnigmaError):
    pass


class ReflectorPositionChange(EnigmaError):
    pass


class BadRotorCount(EnigmaError):
    pass


class UnknownRotorName(EnigmaError):
    pass


class NotAReflector(EnigmaError):
    pass


class NotAMovingRotor(EnigmaError):
    pass


class ExpectedNonMovingRotor(EnigmaError):
    pass


class DuplicateRotor(EnigmaError):
    pass


class BadSettingLength(EnigmaError):
    pass


class BadRingLength(EnigmaError):
    pass


class SettingNotInAlphabet(EnigmaError):
    pass


class NotConfigured(EnigmaError):
    pass


class ConfigError(EnigmaError):
    pass


class SetupError(EnigmaError):
    pass
