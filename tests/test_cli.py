#!/usr/bin/env python3
'''Unit tests for the command-line interface'''

from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from hostbind import get_config
from hostbind.cli import main
from hostbind.embedding import is_live


class TestCLI(unittest.TestCase):
    '''Test the hostbind console script'''

    def tearDown(self):
        get_config().reset()

    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(list(argv))
        return status, out.getvalue()

    def test_info(self):
        status, output = self.run_main('info')

        self.assertEqual(status, 0)
        self.assertIn('clone_method: clone', output)
        self.assertIn('_testing_extra.py', output)

    def test_no_command_shows_info(self):
        status, output = self.run_main()

        self.assertEqual(status, 0)
        self.assertIn('hostbind', output)

    def test_rejects_unknown_log_level(self):
        err = io.StringIO()
        with redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                main(['--log-level', 'verbose', 'info'])

        self.assertEqual(cm.exception.code, 2)
        self.assertIn('usage: hostbind', err.getvalue())
        self.assertNotIn('configuration', err.getvalue())

    def test_log_level_case_insensitive(self):
        status, _ = self.run_main('--log-level', 'error', 'info')

        self.assertEqual(status, 0)
        self.assertEqual(get_config().log_level, 'ERROR')

    def test_check_passes(self):
        status, output = self.run_main(
            'check', 'hostbind.testing',
            'check_copy(copy.copy, [1, 2])',
            'check_copy(copy.deepcopy, {"a": [1]})',
        )

        self.assertEqual(status, 0)
        self.assertIn('2/2 passed', output)
        self.assertFalse(is_live())

    def test_check_fails(self):
        status, output = self.run_main(
            'check', 'hostbind.testing',
            'check_copy(lambda obj: obj, [1])',
            'undefined_name',
        )

        self.assertEqual(status, 1)
        self.assertIn('0/2 passed', output)
        self.assertIn('NameError', output)

    def test_check_missing_aux_code(self):
        status, output = self.run_main('check', 'pkg.unknown', 'True')

        self.assertEqual(status, 1)
        self.assertIn('no auxiliary code', output)
        self.assertFalse(is_live())


if __name__ == '__main__':
    unittest.main()
