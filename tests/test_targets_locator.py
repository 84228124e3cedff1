import os
import shutil
import tempfile
import unittest
from unittest.mock import patch, MagicMock
from usersecrets import targets_locator
from usersecrets.targets_locator import TARGETS_FILE, candidate_directories, locate


class TestTargetsLocator(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.dir_a = os.path.join(self.test_dir, "nested", "a")
        self.dir_b = os.path.join(self.test_dir, "nested", "b")
        os.makedirs(self.dir_a)
        os.makedirs(self.dir_b)
        self.reporter = MagicMock()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _touch(self, directory):
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, TARGETS_FILE)
        with open(path, "w") as f:
            f.write("<Project />")
        return path

    def test_first_candidate_wins(self):
        expected = self._touch(self.dir_a)
        self._touch(self.dir_b)
        found = locate(self.reporter, install_root=self.dir_b, base_dir=self.dir_a)
        self.assertEqual(found, expected)
        self.reporter.error.assert_not_called()

    def test_later_candidate_used_when_first_missing(self):
        expected = self._touch(self.dir_b)
        found = locate(self.reporter, install_root=self.dir_b, base_dir=self.dir_a)
        self.assertEqual(found, expected)

    def test_toolassets_next_to_install_root(self):
        expected = self._touch(os.path.join(self.dir_b, "toolassets"))
        found = locate(self.reporter, install_root=self.dir_b, base_dir=self.dir_a)
        self.assertEqual(found, expected)

    def test_packaged_layout_two_levels_up(self):
        expected = self._touch(os.path.join(self.test_dir, "toolassets"))
        found = locate(self.reporter, install_root=self.dir_b, base_dir=self.dir_a)
        self.assertEqual(found, expected)

    def test_not_found_reports_once_and_returns_none(self):
        found = locate(self.reporter, install_root=self.dir_b, base_dir=self.dir_a)
        self.assertIsNone(found)
        self.reporter.error.assert_called_once_with("Fatal error: could not find SecretManager.targets")

    def test_probing_stops_at_first_hit(self):
        self._touch(self.dir_a)
        with patch.object(targets_locator.os.path, "isfile", wraps=os.path.isfile) as mock_isfile:
            locate(self.reporter, install_root=self.dir_b, base_dir=self.dir_a)
        self.assertEqual(mock_isfile.call_count, 1)

    def test_candidate_order(self):
        candidates = list(candidate_directories("/opt/tool/lib", "/opt/tool/bin"))
        self.assertEqual(candidates[0], "/opt/tool/bin")
        self.assertEqual(candidates[1], "/opt/tool/lib")
        self.assertEqual(len(candidates), 5)

    def test_shipped_asset_is_found(self):
        found = locate(self.reporter, base_dir=self.dir_a)
        self.assertIsNotNone(found)
        self.assertTrue(found.endswith(os.path.join("toolassets", TARGETS_FILE)))
        with open(found) as f:
            self.assertIn("_ExtractUserSecretsMetadata", f.read())


if __name__ == "__main__":
    unittest.main()
