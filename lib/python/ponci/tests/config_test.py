"""Unit test for ponci.config.
"""

import os
import unittest

import mock

from ponci import config


class ConfigTest(unittest.TestCase):
    """Tests for ponci.config."""

    def test_defaults(self):
        """Test the default, separated, configuration.
        """
        cfg = config.Config()

        self.assertEqual(cfg.root, '/sys/fs/cgroup/')
        self.assertEqual(cfg.env_var, 'PONCI_PATH')
        self.assertTrue(cfg.separated)
        self.assertEqual(cfg.hierarchies(), ('cpuset', 'freezer'))
        self.assertEqual(cfg.poll_interval, 0)
        self.assertIsNone(cfg.max_attempts)

    def test_flat(self):
        """Test the single hierarchy configuration.
        """
        cfg = config.Config.flat(max_attempts=3)

        self.assertFalse(cfg.separated)
        self.assertEqual(cfg.hierarchies(), (None,))
        self.assertEqual(cfg.max_attempts, 3)

    @mock.patch.dict(os.environ, {'PONCI_PATH': '/scratch/'})
    def test_root_path_env(self):
        """Test the environment overrides the root.
        """
        cfg = config.Config(root='/cgroups/')
        self.assertEqual(cfg.root_path(), '/scratch/')

        cfg = config.Config(root='/cgroups/', env_var=None)
        self.assertEqual(cfg.root_path(), '/cgroups/')

    def test_root_path_reads_env_every_time(self):
        """Test the environment is not cached.
        """
        cfg = config.Config(root='/cgroups/', env_var='PONCI_TEST_ROOT')
        self.assertEqual(cfg.root_path(), '/cgroups/')

        with mock.patch.dict(os.environ, {'PONCI_TEST_ROOT': '/other/'}):
            self.assertEqual(cfg.root_path(), '/other/')

        self.assertEqual(cfg.root_path(), '/cgroups/')

    def test_invalid(self):
        """Test rejection of invalid configurations.
        """
        with self.assertRaises(ValueError):
            config.Config(subsystems=('cpuset', 'memory'))

        with self.assertRaises(ValueError):
            config.Config(poll_interval=-1)

        with self.assertRaises(ValueError):
            config.Config(max_attempts=0)


if __name__ == '__main__':
    unittest.main()
