# --- tests/cli_test.py ---

import logging
import os
import signal
import sys
import tempfile
import threading
import unittest

from click.testing import CliRunner

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from main import main
from scanner import Search
from signals import DepthBumper, install_interrupt_handler


def touch(*parts) -> str:
    path = os.path.join(*parts)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write("x")
    return path


class TestCli(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.abspath(self._tmp.name)
        self.b_js = touch(self.root, "a", "b.js")
        self.c_js = touch(self.root, "a", "b", "c.js")
        self.readme = touch(self.root, "README.md")
        self.runner = CliRunner()

        # main() reconfigures the root logger
        root = logging.getLogger()
        self._root_handlers = root.handlers[:]
        self._root_level = root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers[:] = self._root_handlers
        root.setLevel(self._root_level)
        self._tmp.cleanup()

    def test_prints_count_and_paths(self):
        result = self.runner.invoke(main, [self.root])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("LEN: 1", result.output)
        self.assertIn(f"RESULT: 0 {self.b_js}", result.output)
        self.assertNotIn(self.c_js, result.output)

    def test_max_depth_option(self):
        result = self.runner.invoke(main, [self.root, "--max-depth", "4"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("LEN: 2", result.output)
        self.assertIn(self.c_js, result.output)

    def test_pattern_option(self):
        result = self.runner.invoke(main, [self.root, "--pattern", "README"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("LEN: 1", result.output)
        self.assertIn(self.readme, result.output)

    def test_no_match(self):
        result = self.runner.invoke(main, [self.root, "-p", "zzz"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("LEN: 0", result.output)
        self.assertNotIn("RESULT:", result.output)

    def test_missing_path_exits_with_1(self):
        result = self.runner.invoke(main, [os.path.join(self.root, "missing")])
        self.assertEqual(result.exit_code, 1)
        self.assertNotIn("LEN:", result.output)

    def test_file_path_exits_with_1(self):
        result = self.runner.invoke(main, [self.readme])
        self.assertEqual(result.exit_code, 1)

    def test_empty_path_exits_with_1(self):
        result = self.runner.invoke(main, [""])
        self.assertEqual(result.exit_code, 1)

    def test_bumper_thread_finished_after_run(self):
        result = self.runner.invoke(main, [self.root])
        self.assertEqual(result.exit_code, 0, result.output)
        alive = [t for t in threading.enumerate() if t.name == "depth-bumper"]
        self.assertEqual(alive, [])

    def test_interrupt_handler_is_restored(self):
        before = signal.getsignal(signal.SIGINT)
        self.runner.invoke(main, [self.root])
        self.assertIs(signal.getsignal(signal.SIGINT), before)


class TestDepthBumper(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.search = Search(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_fire_bumps_once(self):
        bumper = DepthBumper(self.search.increase_depth)
        bumper.start()
        bumper.fire()
        bumper.fire()
        bumper.join(timeout=2)
        self.assertFalse(bumper.is_alive())
        self.assertEqual(self.search.max_depth, 4)

    def test_stop_does_not_bump(self):
        bumper = DepthBumper(self.search.increase_depth)
        bumper.start()
        bumper.stop()
        bumper.join(timeout=2)
        self.assertFalse(bumper.is_alive())
        self.assertEqual(self.search.max_depth, 2)

    @unittest.skipUnless(threading.current_thread() is threading.main_thread(),
                         "signal handlers can only be set from the main thread")
    def test_interrupt_fires_bumper_and_restores_handler(self):
        bumper = DepthBumper(self.search.increase_depth)
        previous = install_interrupt_handler(bumper)
        try:
            bumper.start()
            signal.raise_signal(signal.SIGINT)
            bumper.join(timeout=2)
            self.assertEqual(self.search.max_depth, 4)
            self.assertIs(signal.getsignal(signal.SIGINT), previous)
        finally:
            signal.signal(signal.SIGINT, previous)


if __name__ == "__main__":
    unittest.main()
