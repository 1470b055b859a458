"""
run-enigma CONFIG [INPUT] [OUTPUT]

Configure a machine from CONFIG and apply it to the messages in INPUT (stdin if omitted),
writing the converted messages in groups of five to OUTPUT (stdout if omitted).
"""
import argparse
import contextlib
import logging
import sys

import tqdm

from enigma_config import process_messages, read_config
from enigma_errors import EnigmaError

logger = logging.getLogger(__name__)


def _open(name, mode, default):
    if name is None:
        return contextlib.nullcontext(default)
    try:
        return open(name, mode)
    except OSError as err:
        raise EnigmaError(f'could not open {name}: {err.strerror}') from err


def run(config, input_=None, output=None, progress=False):
    machine = read_config(config)
    with _open(input_, 'r', sys.stdin) as in_file:
        lines = in_file.readlines()
    with _open(output, 'w', sys.stdout) as out_file:
        for out_line in process_messages(machine, tqdm.tqdm(lines, disable=not progress, file=sys.stderr)):
            out_file.write(out_line + '\n')


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog='run-enigma', description='rotor cipher machine simulator')
    p.add_argument('config', help='machine configuration file')
    p.add_argument('input', nargs='?', help='file with setup lines and messages, stdin if omitted')
    p.add_argument('output', nargs='?', help='file for the converted messages, stdout if omitted')
    p.add_argument('--verbose', action='store_true', help='log configuration and stepping details')
    p.add_argument('--progress', action='store_true', help='show a progress bar over the input lines')
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                        stream=sys.stderr)

    try:
        run(args.config, args.input, args.output, progress=args.progress)
    except EnigmaError as err:
        logger.debug('aborting', exc_info=True)
        print(f'Error: {err}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
