"""Unit test host filter CLI.
"""

import io
import json
import os
import shutil
import tempfile
import unittest

import click.testing
import mock
import yaml

from hostfilter import cli
from hostfilter import console
import hostfilter.cli.attributes
import hostfilter.cli.evaluate


_SNAPSHOT = """
job: proid.hello
constraints:
  - {name: rack, limit: 1}
  - {name: dc, value: {values: [east]}}
hosts:
  host1: {rack: [r1], dc: [east]}
  host2: {rack: [r2], dc: [east]}
  host3: {rack: [r3], dc: [west]}
tasks:
  - {id: 'proid.hello#1', host: host1}
"""


def check_help(testcase, args):
    """Checks help invocation."""
    run = testcase.runner.invoke(testcase.cli, args + ['--help'])
    testcase.assertEqual(
        run.exit_code, 0
    )


class _CliTestBase(unittest.TestCase):
    """Common CLI test setup."""

    def setUp(self):
        self.root = tempfile.mkdtemp()
        self.snapshot = os.path.join(self.root, 'snapshot.yml')
        with io.open(self.snapshot, 'w') as f:
            f.write(_SNAPSHOT)

        self.runner = click.testing.CliRunner()

    def tearDown(self):
        cli.OUTPUT_FORMAT = 'pretty'
        if self.root and os.path.isdir(self.root):
            shutil.rmtree(self.root)


class ConsoleTest(_CliTestBase):
    """Test 'hostfilter' top level command."""

    def setUp(self):
        super(ConsoleTest, self).setUp()
        self.cli = console.run

    def test_help(self):
        """Test help with no arguments."""
        check_help(self, [])
        check_help(self, ['evaluate'])
        check_help(self, ['attributes'])

    def test_commands(self):
        """Test sub-commands are discovered."""
        result = self.runner.invoke(self.cli, ['--help'])
        self.assertIn('evaluate', result.output)
        self.assertIn('attributes', result.output)

    def test_json(self):
        """Test json output."""
        result = self.runner.invoke(
            self.cli, ['--outfmt', 'json', 'evaluate', self.snapshot]
        )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual(
            [
                {'host': 'host1', 'eligible': False,
                 'vetoes': ['Constraint not satisfied: rack']},
                {'host': 'host2', 'eligible': True, 'vetoes': []},
                {'host': 'host3', 'eligible': False,
                 'vetoes': ['Constraint not satisfied: dc']},
            ],
            json.loads(result.output)
        )

    def test_yaml(self):
        """Test yaml output."""
        result = self.runner.invoke(
            self.cli,
            ['--outfmt', 'yaml', 'evaluate', '--host', 'host2', self.snapshot]
        )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual(
            [{'host': 'host2', 'eligible': True, 'vetoes': []}],
            yaml.safe_load(result.output)
        )

    def test_outfmt_reset(self):
        """Test output format is reset when --outfmt is not given."""
        result = self.runner.invoke(
            self.cli, ['--outfmt', 'json', 'evaluate', self.snapshot]
        )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual('json', cli.OUTPUT_FORMAT)

        result = self.runner.invoke(self.cli, ['evaluate', self.snapshot])
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual('pretty', cli.OUTPUT_FORMAT)
        self.assertEqual(
            ['host', 'eligible', 'vetoes'],
            result.output.splitlines()[0].split()
        )

    @mock.patch('hostfilter.logging.set_log_level', mock.Mock())
    def test_debug(self):
        """Test debug flag sets log level."""
        result = self.runner.invoke(
            self.cli, ['--debug', 'attributes', self.snapshot]
        )
        self.assertEqual(0, result.exit_code, result.output)
        hostfilter.logging.set_log_level.assert_called_once_with(10)


class EvaluateTest(_CliTestBase):
    """Test 'hostfilter evaluate' command."""

    def setUp(self):
        super(EvaluateTest, self).setUp()
        self.cli = hostfilter.cli.evaluate.init()

    def test_evaluate(self):
        """Test pretty output."""
        result = self.runner.invoke(self.cli, [self.snapshot])
        self.assertEqual(0, result.exit_code, result.output)

        lines = result.output.splitlines()
        self.assertEqual(['host', 'eligible', 'vetoes'], lines[0].split())
        self.assertIn('Constraint not satisfied: rack', lines[1])
        self.assertTrue(lines[2].split()[:2] == ['host2', 'yes'])

    def test_unknown_host(self):
        """Test unknown host is reported as error."""
        result = self.runner.invoke(
            self.cli, ['--host', 'nope', self.snapshot]
        )
        self.assertEqual(cli.EXIT_CODE_DEFAULT, result.exit_code)
        self.assertIn('Unknown host(s): nope', result.output)

    def test_invalid_snapshot(self):
        """Test invalid snapshot is reported as error."""
        with io.open(self.snapshot, 'w') as f:
            f.write('job: x\nconstraints: [{name: rack}]')

        result = self.runner.invoke(self.cli, [self.snapshot])
        self.assertEqual(cli.EXIT_CODE_DEFAULT, result.exit_code)


    def test_malformed_snapshot(self):
        """Test malformed YAML is reported as error."""
        with io.open(self.snapshot, 'w') as f:
            f.write('job: [unclosed\n')

        result = self.runner.invoke(self.cli, [self.snapshot])
        self.assertEqual(cli.EXIT_CODE_DEFAULT, result.exit_code)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn('Invalid snapshot', result.output)

    @mock.patch('hostfilter.snapshot.load',
                mock.Mock(side_effect=RuntimeError('boom')))
    def test_unhandled_error(self):
        """Test unexpected errors exit with default exit code."""
        result = self.runner.invoke(self.cli, [self.snapshot])
        self.assertEqual(cli.EXIT_CODE_DEFAULT, result.exit_code)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn('Error: boom', result.output)


class AttributesTest(_CliTestBase):
    """Test 'hostfilter attributes' command."""

    def setUp(self):
        super(AttributesTest, self).setUp()
        self.cli = hostfilter.cli.attributes.init()

    def test_attributes(self):
        """Test host attributes output."""
        cli.OUTPUT_FORMAT = 'json'
        result = self.runner.invoke(self.cli, [self.snapshot, 'host3'])
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual(
            [
                {'host': 'host3', 'attribute': 'dc', 'values': ['west']},
                {'host': 'host3', 'attribute': 'rack', 'values': ['r3']},
            ],
            json.loads(result.output)
        )

    def test_unknown_host(self):
        """Test unknown host is reported as error."""
        result = self.runner.invoke(self.cli, [self.snapshot, 'nope'])
        self.assertEqual(cli.EXIT_CODE_DEFAULT, result.exit_code)


if __name__ == '__main__':
    unittest.main()
