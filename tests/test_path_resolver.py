import os
import tempfile
import unittest

import path_resolver


class TestWhich(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.other = tempfile.TemporaryDirectory()
        self.addCleanup(self.other.cleanup)

    def touch(self, directory, name):
        path = os.path.join(directory, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write("")
        return path

    def test_finds_file_on_path(self):
        expected = self.touch(self.tmpdir.name, "tool")
        env = {"PATH": os.pathsep.join([self.other.name, self.tmpdir.name])}
        found = path_resolver.which("tool", environ=env, is_windows=False)
        self.assertEqual(expected, found)

    def test_first_directory_wins(self):
        first = self.touch(self.other.name, "tool")
        self.touch(self.tmpdir.name, "tool")
        env = {"PATH": f"{self.other.name}:{self.tmpdir.name}"}
        self.assertEqual(first, path_resolver.which("tool", environ=env, is_windows=False))

    def test_missing_returns_empty(self):
        env = {"PATH": self.tmpdir.name}
        self.assertEqual("", path_resolver.which("nope", environ=env, is_windows=False))

    def test_empty_name_returns_empty(self):
        self.assertEqual("", path_resolver.which("", environ={"PATH": self.tmpdir.name}))

    def test_directories_are_skipped(self):
        os.mkdir(os.path.join(self.tmpdir.name, "tool"))
        env = {"PATH": self.tmpdir.name}
        self.assertEqual("", path_resolver.which("tool", environ=env, is_windows=False))

    def test_name_with_directory_is_made_absolute(self):
        found = path_resolver.which(os.path.join("bin", "tool"), environ={}, is_windows=False)
        self.assertEqual(os.path.abspath(os.path.join("bin", "tool")), found)

    # Windows-style lookup
    def test_windows_tries_pathext(self):
        expected = self.touch(self.tmpdir.name, "tool.CMD")
        env = {"PATH": self.tmpdir.name, "PATHEXT": ".COM;.EXE;.CMD"}
        self.assertEqual(expected, path_resolver.which("tool", environ=env, is_windows=True))

    def test_windows_own_extension_first(self):
        expected = self.touch(self.tmpdir.name, "tool.py")
        self.touch(self.tmpdir.name, "tool.EXE")
        env = {"PATH": self.tmpdir.name, "PATHEXT": ".EXE"}
        self.assertEqual(expected, path_resolver.which("tool.py", environ=env, is_windows=True))

    def test_windows_default_pathext(self):
        expected = self.touch(self.tmpdir.name, "tool.EXE")
        env = {"PATH": self.tmpdir.name}
        self.assertEqual(expected, path_resolver.which("tool", environ=env, is_windows=True))

    def test_search_dirs_and_exts(self):
        stem, dirs, exts = path_resolver.search_dirs_and_exts(
            "tool.py", {"PATH": "a;;b", "PATHEXT": ".EXE;.PY"}, True)
        self.assertEqual(["tool", ["a", "b"], [".py", ".EXE", ".PY"]], [stem, dirs, exts])


if __name__ == "__main__":
    unittest.main()
