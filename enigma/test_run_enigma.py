import io
import os
import tempfile

import unittest as ut
from unittest import mock

import run_enigma

DEFAULT_CONF = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'default.conf')

MESSAGES = """* B Beta I II III AAAA
AAAAA

* B Beta I II III AAAA ABBB
AAAAA
"""


class RunEnigmaTest(ut.TestCase):
    def test_files(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            in_path = os.path.join(tmp_dir, 'messages.in')
            out_path = os.path.join(tmp_dir, 'messages.out')
            with open(in_path, 'w') as in_file:
                in_file.write(MESSAGES)

            self.assertEqual(run_enigma.main([DEFAULT_CONF, in_path, out_path]), 0)

            with open(out_path) as out_file:
                self.assertEqual(out_file.read(), 'BDZGO\n\nEWTYX\n')

    def test_stdin_stdout(self):
        stdout = io.StringIO()
        with mock.patch('sys.stdin', io.StringIO(MESSAGES)), mock.patch('sys.stdout', stdout):
            self.assertEqual(run_enigma.main([DEFAULT_CONF]), 0)
        self.assertEqual(stdout.getvalue(), 'BDZGO\n\nEWTYX\n')

    def test_error_exit_code(self):
        stderr = io.StringIO()
        bad_input = '* B Beta I II III AAA\nAAAAA\n'
        with mock.patch('sys.stdin', io.StringIO(bad_input)), mock.patch('sys.stderr', stderr):
            self.assertEqual(run_enigma.main([DEFAULT_CONF]), 1)
        self.assertTrue(stderr.getvalue().startswith('Error: '))

    def test_missing_config(self):
        stderr = io.StringIO()
        with mock.patch('sys.stderr', stderr):
            self.assertEqual(run_enigma.main([DEFAULT_CONF + '.missing']), 1)
        self.assertIn('could not open', stderr.getvalue())

    def test_missing_input(self):
        stderr = io.StringIO()
        with mock.patch('sys.stderr', stderr):
            self.assertEqual(run_enigma.main([DEFAULT_CONF, DEFAULT_CONF + '.missing']), 1)
        self.assertIn('could not open', stderr.getvalue())


if __name__ == '__main__':
    ut.main()
