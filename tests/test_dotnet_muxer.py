import os
import tempfile
import unittest
from unittest.mock import patch
from usersecrets.utils.dotnet_muxer import muxer_path_or_default


class TestDotnetMuxer(unittest.TestCase):

    def test_host_path_env_preferred(self):
        with tempfile.NamedTemporaryFile() as host:
            with patch.dict(os.environ, {"DOTNET_HOST_PATH": host.name}):
                self.assertEqual(muxer_path_or_default(), host.name)

    @patch("shutil.which", return_value="/usr/local/bin/dotnet")
    def test_path_lookup(self, mock_which):
        with patch.dict(os.environ, {"DOTNET_HOST_PATH": "/does/not/exist"}):
            self.assertEqual(muxer_path_or_default(), "/usr/local/bin/dotnet")
        mock_which.assert_called_once_with("dotnet")

    @patch("shutil.which", return_value=None)
    def test_bare_name_fallback(self, mock_which):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(muxer_path_or_default(), "dotnet")


if __name__ == "__main__":
    unittest.main()
