import unittest
import sys
import os
import io
import shutil
import tempfile
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rat_maze.main import main

class TestMain(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def write_maze(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_solve(self):
        path = self.write_maze("maze.txt", "rooo\nwwow\nwooc\n")
        code, out = self.run_main(["solve", path])
        self.assertEqual(code, 0)
        self.assertIn("...x\n██.█\n█ .r", out)
        self.assertIn("Solved after 8 steps (1 backtracks)", out)

    def test_solve_no_path(self):
        path = self.write_maze("maze.txt", "rwc\n")
        code, out = self.run_main(["solve", path])
        self.assertEqual(code, 1)
        self.assertIn("No path", out)

    def test_trace_prints_every_frame(self):
        path = self.write_maze("maze.txt", "rc\n")
        code, out = self.run_main(["solve", path, "--trace"])
        self.assertEqual(code, 0)
        self.assertIn("--- step 1 ---\nrc", out)
        self.assertIn("--- step 2 ---\n.r", out)

    def test_invalid_maze(self):
        path = self.write_maze("bad.txt", "rooo\nwwc\n")
        code, _ = self.run_main(["solve", path])
        self.assertEqual(code, 2)

    def test_missing_file(self):
        code, _ = self.run_main(["solve", os.path.join(self.tmpdir, "missing.txt")])
        self.assertEqual(code, 2)

    def test_record_and_replay(self):
        path = self.write_maze("maze.txt", "roc\n")
        events = os.path.join(self.tmpdir, "solve.events")
        code, _ = self.run_main(["solve", path, "--record-events", events])
        self.assertEqual(code, 0)

        code, out = self.run_main(["replay", events])
        self.assertEqual(code, 0)
        self.assertIn("--- step 3 ---\n..r", out)

    def test_replay_invalid_log(self):
        path = self.write_maze("bogus.events", "not a log")
        code, _ = self.run_main(["replay", path])
        self.assertEqual(code, 2)

    def test_replay_truncated_header(self):
        path = os.path.join(self.tmpdir, "short.events")
        with open(path, "wb") as f:
            f.write(b"RATLOG\x00\x00")
        code, _ = self.run_main(["replay", path])
        self.assertEqual(code, 2)

    def test_unwritable_event_log(self):
        path = self.write_maze("maze.txt", "roc\n")
        events = os.path.join(self.tmpdir, "no_such_dir", "solve.events")
        code, out = self.run_main(["solve", path, "--record-events", events])
        self.assertEqual(code, 2)
        self.assertNotIn("Solved", out)

    def test_no_command(self):
        code, out = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("usage", out)

if __name__ == '__main__':
    unittest.main()
