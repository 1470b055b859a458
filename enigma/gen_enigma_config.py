"""
Random rotors, reflectors and plugboards in cycle notation, and whole configuration files built from them.

Every generator takes a seed, which may also be a numpy Generator so that several calls can share one stream.
"""
import argparse
import logging
import string

import numpy as np

from alphabet import Alphabet
from permutation import Permutation, cycles_from_table

logger = logging.getLogger(__name__)


def cycles_from_wiring(wiring: str, alphabet: Alphabet) -> str:
    """
    translate a wiring string such as 'EKMFLGDQVZNTOWYHXUSPAIBRCJ',
    where the k-th symbol is the image of the k-th alphabet symbol, to cycle notation
    """
    if len(wiring) != alphabet.size():
        raise ValueError(f'wiring {wiring!r} does not have {alphabet.size()} symbols')
    return cycles_from_table([alphabet.to_index(char) for char in wiring], alphabet)


def gen_rotor_cycles(alphabet: Alphabet, seed) -> str:
    rng = np.random.default_rng(seed)
    perm_forward = rng.permutation(alphabet.size()).tolist()
    return cycles_from_table(perm_forward, alphabet)


def gen_swap_cycles(alphabet: Alphabet, n_swaps: int, seed) -> str:
    """n_swaps disjoint transpositions, with n_swaps == size // 2 this is a reflector"""
    if not 0 <= n_swaps <= alphabet.size() // 2:
        raise ValueError(f'cannot place {n_swaps} swaps on {alphabet.size()} symbols')
    rng = np.random.default_rng(seed)

    # random jacks of the board, consecutive ones get connected
    jacks = rng.choice(alphabet.size(), size=2 * n_swaps, replace=False).tolist()
    pairs = []
    for first, second in zip(jacks[::2], jacks[1::2]):
        pairs.append('(' + alphabet.to_char(first) + alphabet.to_char(second) + ')')
    return ' '.join(pairs)


def gen_notches(alphabet: Alphabet, n_notches: int, seed) -> str:
    rng = np.random.default_rng(seed)
    picked = sorted(rng.choice(alphabet.size(), size=n_notches, replace=False).tolist())
    return ''.join(alphabet.to_char(idx) for idx in picked)


def gen_config_text(alphabet: Alphabet, num_rotors: int = 5, pawls: int = 3, n_moving: int = 8, n_fixed: int = 2,
                    n_reflectors: int = 2, n_notches: int = 1, seed: int = 0) -> str:
    """
    a complete configuration file. moving rotors are called M1, M2, ...,
    non-moving ones N1, N2, ... and reflectors R1, R2, ...
    """
    if n_moving < pawls or n_fixed < num_rotors - pawls - 1 or n_reflectors < 1:
        raise ValueError('not enough rotors to fill all slots of the machine')
    rng = np.random.default_rng(seed)

    lines = [str(alphabet), f'{num_rotors} {pawls}']
    for i in range(n_moving):
        notches = gen_notches(alphabet, n_notches, rng)
        lines.append(f'M{i + 1} M{notches} {gen_rotor_cycles(alphabet, rng) or "()"}')
    for i in range(n_fixed):
        lines.append(f'N{i + 1} N {gen_rotor_cycles(alphabet, rng) or "()"}')
    for i in range(n_reflectors):
        reflector = gen_swap_cycles(alphabet, alphabet.size() // 2, rng)
        if not Permutation(reflector, alphabet).derangement():
            logger.warning('reflector R%d has a fixed point, the alphabet has an odd number of symbols', i + 1)
        lines.append(f'R{i + 1} R {reflector or "()"}')
    return '\n'.join(lines) + '\n'


def main(argv=None):
    p = argparse.ArgumentParser(prog='gen-enigma-config', description='write a random rotor machine configuration')
    p.add_argument('output', nargs='?', help='configuration file to write, stdout if omitted')
    p.add_argument('--alphabet', default=string.ascii_uppercase)
    p.add_argument('--num-rotors', type=int, default=5)
    p.add_argument('--pawls', type=int, default=3)
    p.add_argument('--n-moving', type=int, default=8)
    p.add_argument('--n-fixed', type=int, default=2)
    p.add_argument('--n-reflectors', type=int, default=2)
    p.add_argument('--n-notches', type=int, default=1)
    p.add_argument('--seed', type=int, default=0)
    args = p.parse_args(argv)

    text = gen_config_text(Alphabet(args.alphabet), num_rotors=args.num_rotors, pawls=args.pawls,
                           n_moving=args.n_moving, n_fixed=args.n_fixed, n_reflectors=args.n_reflectors,
                           n_notches=args.n_notches, seed=args.seed)
    if args.output:
        with open(args.output, 'w') as out_file:
            out_file.write(text)
        print(f'configuration written to {args.output}')
    else:
        print(text, end='')


if __name__ == '__main__':
    main()
