import io
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

import shell_builtins
from exceptions import ShellExit
from platform_profile import get_profile
from shell_state import ShellState


class TestShellBuiltins(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

        self.old_cwd = os.getcwd()
        self.addCleanup(lambda: os.chdir(self.old_cwd))

        self.state = ShellState(get_profile(is_windows=False),
                                environ={"HOME": self.tmpdir.name, "PATH": self.tmpdir.name})

    def run_builtin(self, name, args):
        out, err = io.StringIO(), io.StringIO()
        with patch.object(sys, "stdout", out), patch.object(sys, "stderr", err):
            rc = shell_builtins.BUILTINS[name](args, self.state)
        return rc, out.getvalue(), err.getvalue()

    # -----------------------
    # Registry / decorator
    # -----------------------
    def test_registry_contains_expected_builtins(self):
        for name in ("cd", "exit", "which", "shell", "split"):
            self.assertIn(name, shell_builtins.BUILTINS)

    # ----------------------
    # cd
    # ----------------------
    def test_cd_changes_directory(self):
        rc, _, _ = self.run_builtin("cd", [self.tmpdir.name])
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(self.tmpdir.name), os.path.realpath(os.getcwd()))

    def test_cd_without_args_goes_home(self):
        rc, _, _ = self.run_builtin("cd", [])
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(self.tmpdir.name), os.path.realpath(os.getcwd()))

    def test_cd_missing_directory(self):
        missing = os.path.join(self.tmpdir.name, "missing")
        rc, _, err = self.run_builtin("cd", [missing])
        self.assertEqual(1, rc)
        self.assertIn("no such file or directory", err)

    # ----------------------
    # exit
    # ----------------------
    def test_exit_default_status(self):
        with self.assertRaises(ShellExit) as cm:
            shell_builtins.BUILTINS["exit"]([], self.state)
        self.assertEqual(0, cm.exception.status)

    def test_exit_bad_status(self):
        with patch.object(sys, "stderr", io.StringIO()):
            with self.assertRaises(ShellExit) as cm:
                shell_builtins.BUILTINS["exit"](["x"], self.state)
        self.assertEqual(2, cm.exception.status)

    # ----------------------
    # which
    # ----------------------
    def test_which_found(self):
        path = os.path.join(self.tmpdir.name, "tool")
        with open(path, "w", encoding="utf-8") as f:
            f.write("")
        rc, out, _ = self.run_builtin("which", ["tool"])
        self.assertEqual(0, rc)
        self.assertEqual(path + "\n", out)

    def test_which_missing(self):
        rc, out, err = self.run_builtin("which", ["nope"])
        self.assertEqual(1, rc)
        self.assertEqual("", out)
        self.assertIn("no nope in PATH", err)

    # ----------------------
    # shell
    # ----------------------
    def test_shell_prints_current(self):
        rc, out, _ = self.run_builtin("shell", [])
        self.assertEqual(0, rc)
        self.assertEqual("sh -c\n", out)

    def test_shell_sets_program_and_args(self):
        self.run_builtin("shell", ["my shell", "-x"])
        shell = self.state.get_shell()
        self.assertEqual(["my shell", ["-x"]], [shell.program, shell.args])

    def test_shell_reset(self):
        self.state.set_shell("bash -c")
        _, out, _ = self.run_builtin("shell", ["-r"])
        self.assertEqual("sh -c\n", out)

    # ----------------------
    # split
    # ----------------------
    def test_split_prints_one_arg_per_line(self):
        rc, out, _ = self.run_builtin("split", ["a b", "c"])
        self.assertEqual(0, rc)
        self.assertEqual("a b\nc\n", out)


if __name__ == "__main__":
    unittest.main()
