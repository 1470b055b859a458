"""
Reading machine descriptions and setup lines.

A configuration file is a sequence of whitespace separated tokens:

    ABCDEFGHIJKLMNOPQRSTUVWXYZ      alphabet
    5 3                             number of rotor slots, number of pawls
    I MQ (AELTPHQXRU) (BKNW) ...    rotor name, type, cycles
    ...

The type token starts with M (moving rotor, the rest of the token are its notches),
N (non-moving contact rotor) or R (reflector). The cycles of one rotor may span several lines.

A setup line looks like

    * B Beta III IV I AXLE LLAA (HQ) (EX)

reflector and rotor names, the rotor setting, an optional ring setting and the plugboard cycles.
"""
import io
import logging
import os

from alphabet import Alphabet
from enigma import Machine
from enigma_errors import BadRotorCount, ConfigError, SetupError
from permutation import Permutation
from rotor import Rotor, RotorKind

logger = logging.getLogger(__name__)

_forbidden_alphabet_chars = '()*'


def _is_cycle_token(token: str) -> bool:
    return token.startswith('(')


def _read_alphabet(token: str) -> Alphabet:
    for char in _forbidden_alphabet_chars:
        if char in token:
            raise ConfigError(f'alphabet {token!r} must not contain {char!r}')
    return Alphabet(token)


def _read_rotor(tokens: list, pos: int, alphabet: Alphabet):
    """parse the rotor description starting at tokens[pos], return the rotor and the next position"""
    if pos + 1 >= len(tokens):
        raise ConfigError(f'rotor description truncated after {tokens[pos]!r}')
    name, type_ = tokens[pos], tokens[pos + 1]
    if _is_cycle_token(name) or _is_cycle_token(type_):
        raise ConfigError(f'bad rotor description {name} {type_}')

    try:
        kind = RotorKind(type_[0])
    except ValueError:
        raise ConfigError(f'bad rotor type {type_!r} for rotor {name}') from None
    notches = type_[1:]
    if notches and kind != RotorKind.MOVING:
        raise ConfigError(f'rotor {name} of type {type_[0]} cannot have notches')

    pos += 2
    cycles = []
    while pos < len(tokens) and _is_cycle_token(tokens[pos]):
        cycles.append(tokens[pos])
        pos += 1
    if not cycles:
        raise ConfigError(f'rotor {name} has no wiring cycles')

    rotor = Rotor(name, Permutation(' '.join(cycles), alphabet), kind=kind, notches=notches)
    return rotor, pos


def parse_config(text: str) -> Machine:
    tokens = text.split()
    if not tokens:
        raise ConfigError('configuration is empty')
    alphabet = _read_alphabet(tokens[0])

    try:
        num_rotors, pawls = int(tokens[1]), int(tokens[2])
    except IndexError:
        raise ConfigError('configuration truncated before the rotor counts') from None
    except ValueError:
        raise ConfigError(f'rotor counts must be integers, got {tokens[1:3]}') from None
    if num_rotors <= pawls or pawls < 0:
        raise BadRotorCount(f'{num_rotors} rotor slots cannot hold {pawls} pawls')

    rotors = []
    pos = 3
    while pos < len(tokens):
        rotor, pos = _read_rotor(tokens, pos, alphabet)
        rotors.append(rotor)

    logger.info('read %d rotors over a %d symbol alphabet', len(rotors), alphabet.size())
    return Machine(alphabet, num_rotors, pawls, rotors)


def read_config(source) -> Machine:
    """
    :param source: path of the configuration file or an open text stream
    """
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, 'r') as file_:
                text = file_.read()
        except OSError as err:
            raise ConfigError(f'could not open {source}: {err.strerror}') from err
    else:
        text = source.read()
    return parse_config(text)


def setup_machine(machine: Machine, settings: str):
    tokens = settings.split()
    if not tokens or tokens[0] != '*':
        raise SetupError(f'setup line must start with "*": {settings!r}')

    n_rotors = machine.num_rotors()
    names = tokens[1:1 + n_rotors]
    pos = 1 + n_rotors
    if len(names) != n_rotors or pos >= len(tokens):
        raise SetupError(f'setup line needs {n_rotors} rotor names and a setting: {settings!r}')
    if any(_is_cycle_token(name) for name in names) or _is_cycle_token(tokens[pos]):
        raise SetupError(f'setup line needs {n_rotors} rotor names and a setting: {settings!r}')
    setting = tokens[pos]
    pos += 1

    ring = None
    if pos < len(tokens) and not _is_cycle_token(tokens[pos]):
        ring = tokens[pos]
        pos += 1

    plugs = tokens[pos:]
    if not all(_is_cycle_token(plug) for plug in plugs):
        raise SetupError(f'unexpected tokens after the plugboard: {settings!r}')

    machine.insert_rotors(names)
    if ring is not None:
        machine.set_ring(ring)
    machine.set_rotors(setting)
    machine.set_plugboard(Permutation(' '.join(plugs), machine.alphabet))


def is_setup_line(line: str) -> bool:
    return line.lstrip().startswith('*')


def group_message(msg: str, group_size: int = 5) -> str:
    return ' '.join(msg[i:i + group_size] for i in range(0, len(msg), group_size))


def process_messages(machine: Machine, lines):
    """
    yield one output line for every input line except setup lines.
    setup lines reconfigure the machine, blank lines are passed on as blank lines.
    """
    configured = False
    for line in lines:
        line = line.rstrip('\n')
        if is_setup_line(line):
            setup_machine(machine, line)
            configured = True
        elif not line.strip():
            yield ''
        elif not configured:
            raise SetupError('message before the first setup line')
        else:
            yield group_message(machine.convert_message(line))


def convert_text(config_text: str, message_text: str) -> str:
    """convenience wrapper around parse_config and process_messages working on strings"""
    machine = parse_config(config_text)
    lines = io.StringIO(message_text)
    return ''.join(out + '\n' for out in process_messages(machine, lines))
