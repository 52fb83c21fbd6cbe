import os
import sys
import subprocess
import unittest


def _add_src_to_path():
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    src_path = os.path.join(repo_root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


class TestScaffold(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        _add_src_to_path()

    def test_import_root_and_subpackages(self):
        import botdoc  # type: ignore

        from botdoc import config, core, observability, processing, sdk  # noqa: F401

        expected = {"config", "core", "observability", "processing", "sdk"}
        self.assertTrue(hasattr(botdoc, "__all__"))
        self.assertTrue(expected.issubset(set(getattr(botdoc, "__all__"))))

    def test_processing_exports(self):
        from botdoc import processing

        for name in ("html_to_prose", "html_to_text", "wrap", "fit_to_lines", "map_type", "to_identifier"):
            self.assertTrue(hasattr(processing, name), name)

    def test_python_m_botdoc_runs(self):
        repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        env = os.environ.copy()
        env["PYTHONPATH"] = os.path.join(repo_root, "src") + os.pathsep + env.get("PYTHONPATH", "")
        result = subprocess.run(
            [sys.executable, "-m", "botdoc", "type", "Array of String"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=env,
            cwd=repo_root,
            text=True,
            check=False,
        )
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout.strip(), "[]string")


if __name__ == "__main__":
    unittest.main()
