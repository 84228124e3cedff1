import subprocess
import unittest
from unittest.mock import patch, MagicMock
from usersecrets.utils import command_executor
from usersecrets.utils.command_executor import escape_and_concatenate, run_shell_command


class TestCommandExecutor(unittest.TestCase):

    @patch("subprocess.run")
    def test_run_captures_output(self, mock_run):
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)
        result = run_shell_command(["dotnet", "msbuild"], cwd="/tmp")
        self.assertEqual(result, ("out", "err", 3))
        mock_run.assert_called_once_with(
            ["dotnet", "msbuild"], capture_output=True, text=True, env=None, check=False, cwd="/tmp"
        )

    def test_missing_executable_raises(self):
        with self.assertRaises(FileNotFoundError):
            run_shell_command(["usersecrets-no-such-executable-7f3a"])

    def test_escape_posix(self):
        with patch.object(command_executor.os, "name", "posix"):
            line = escape_and_concatenate(["dotnet", "/p:Configuration=Debug", "/tmp/my project/App.csproj"])
        self.assertEqual(line, "dotnet /p:Configuration=Debug '/tmp/my project/App.csproj'")

    def test_escape_windows(self):
        with patch.object(command_executor.os, "name", "nt"):
            line = escape_and_concatenate(["dotnet", r"C:\my project\App.csproj"])
        self.assertEqual(line, subprocess.list2cmdline(["dotnet", r"C:\my project\App.csproj"]))
        self.assertIn('"C:\\my project\\App.csproj"', line)


if __name__ == "__main__":
    unittest.main()
