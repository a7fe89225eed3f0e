"""Unit test for ponci.terminate.
"""

import os
import shutil
import signal
import tempfile
import unittest

import mock

from ponci import cgutils
from ponci import config
from ponci import exc
from ponci import terminate


class TerminateTest(unittest.TestCase):
    """Tests for ponci.terminate."""

    def setUp(self):
        self.root = tempfile.mkdtemp()
        self.config = config.Config(root=self.root, env_var=None)
        os.mkdir(os.path.join(self.root, 'cpuset'))
        os.mkdir(os.path.join(self.root, 'freezer'))
        cgutils.create(self.config, 'job1')
        self.tasks_file = os.path.join(self.root, 'cpuset', 'job1', 'tasks')

    def tearDown(self):
        if self.root and os.path.isdir(self.root):
            shutil.rmtree(self.root)

    @mock.patch('os.kill', mock.Mock(spec_set=True))
    @mock.patch('ponci.cgroups.proc_tasks', mock.Mock(return_value=[1, 2]))
    @mock.patch('ponci.cgroups.read_lines',
                mock.Mock(side_effect=[[100, 101], [101], []]))
    def test_kill(self):
        """Test all tasks are signalled, drained and the group deleted.
        """
        terminate.kill(self.config, 'job1')

        os.kill.assert_has_calls([
            mock.call(100, signal.SIGTERM),
            mock.call(101, signal.SIGTERM),
        ])
        self.assertEqual(os.kill.call_count, 2)
        terminate.cgroups.read_lines.assert_called_with(self.tasks_file)
        self.assertEqual(terminate.cgroups.read_lines.call_count, 3)
        self.assertFalse(cgutils.exists(self.config, 'job1'))
        self.assertFalse(
            os.path.exists(os.path.join(self.root, 'freezer', 'job1'))
        )

    @mock.patch('os.kill', mock.Mock(spec_set=True))
    @mock.patch('ponci.cgroups.proc_tasks', mock.Mock(return_value=[1, 2]))
    @mock.patch('ponci.cgroups.read_lines',
                mock.Mock(side_effect=[[2, 100], []]))
    def test_kill_skips_own_tasks(self):
        """Test tasks of the calling process are not signalled.
        """
        terminate.kill(self.config, 'job1', sig=signal.SIGKILL)

        os.kill.assert_called_once_with(100, signal.SIGKILL)

    @mock.patch('os.kill', mock.Mock(side_effect=ProcessLookupError(
        3, 'No such process')))
    @mock.patch('ponci.cgroups.proc_tasks', mock.Mock(return_value=[1]))
    @mock.patch('ponci.cgroups.read_lines', mock.Mock(return_value=[100]))
    def test_kill_signal_failure(self):
        """Test a signalling failure is raised and the group kept.
        """
        with self.assertRaises(OSError):
            terminate.kill(self.config, 'job1')

        self.assertTrue(cgutils.exists(self.config, 'job1'))

    @mock.patch('os.kill', mock.Mock(spec_set=True))
    @mock.patch('ponci.cgroups.proc_tasks', mock.Mock(return_value=[1]))
    @mock.patch('ponci.cgroups.read_lines', mock.Mock(return_value=[1]))
    def test_kill_own_group_bounded(self):
        """Test a group holding only own tasks never drains.
        """
        cfg = config.Config(root=self.root, env_var=None, max_attempts=5)

        with self.assertRaises(exc.WaitTimeoutError):
            terminate.kill(cfg, 'job1')

        os.kill.assert_not_called()
        self.assertTrue(cgutils.exists(self.config, 'job1'))

    @mock.patch('os.kill', mock.Mock(spec_set=True))
    @mock.patch('ponci.cgroups.proc_tasks', mock.Mock(return_value=[1]))
    def test_kill_empty_group(self):
        """Test killing a group without tasks deletes it.
        """
        with mock.patch('ponci.cgroups.read_lines',
                        mock.Mock(return_value=[])):
            terminate.kill(self.config, 'job1')

        os.kill.assert_not_called()
        self.assertFalse(cgutils.exists(self.config, 'job1'))


if __name__ == '__main__':
    unittest.main()
