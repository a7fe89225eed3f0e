"""Unit test for ponci.logging.
"""

import io
import json
import logging
import os
import shutil
import tempfile
import unittest

import mock

from ponci import logging as plogging


class LoggingTest(unittest.TestCase):
    """Tests for ponci.logging."""

    def setUp(self):
        self.root = tempfile.mkdtemp()

    def tearDown(self):
        if self.root and os.path.isdir(self.root):
            shutil.rmtree(self.root)

    def test_load_packaged_conf(self):
        """Test loading the packaged cli configuration.
        """
        conf = plogging.load_logging_conf('cli.json')

        self.assertEqual(conf['version'], 1)
        self.assertIn('ponci', conf['loggers'])

    def test_load_conf_override(self):
        """Test a configuration directory takes precedence.
        """
        with io.open(os.path.join(self.root, 'cli.json'), 'w') as f:
            f.write(json.dumps({'version': 1, 'loggers': {}}))

        with mock.patch.dict(os.environ,
                             {plogging.ENV_LOGGING_CONF: self.root}):
            conf = plogging.load_logging_conf('cli.json')

        self.assertEqual(conf, {'version': 1, 'loggers': {}})

    def test_set_log_level(self):
        """Test the level is set on ponci loggers only.
        """
        root = logging.getLogger()
        mine = logging.getLogger('ponci.cgroups')
        other = logging.getLogger('ponciother')
        saved = [(lgr, lgr.level) for lgr in (root, mine, other)]
        other.setLevel(logging.WARNING)

        try:
            plogging.set_log_level(logging.DEBUG)

            self.assertEqual(mine.level, logging.DEBUG)
            self.assertEqual(root.level, logging.DEBUG)
            self.assertEqual(other.level, logging.WARNING)
        finally:
            for lgr, level in saved:
                lgr.setLevel(level)


if __name__ == '__main__':
    unittest.main()
