import os
import shlex
import subprocess

def run_shell_command(command, cwd=None, env=None):
    """
    Runs a command to completion with its output captured.

    Args:
        command (list): The command to execute as a list of strings.
        cwd (str, optional): The working directory for the command.
        env (dict, optional): A dictionary of environment variables.

    Returns:
        A tuple (stdout, stderr, return_code).

    Raises:
        OSError: The executable could not be started at all. This is left to
            the caller; a missing toolchain is not the same as a failed run.
    """
    result = subprocess.run(
        command,
        capture_output=True,
        text=True,
        env=env,
        check=False,
        cwd=cwd
    )
    return result.stdout, result.stderr, result.returncode

def escape_and_concatenate(args):
    """Join args into one command line quoted for the host shell."""
    args = [str(arg) for arg in args]
    if os.name == "nt":
        return subprocess.list2cmdline(args)
    return shlex.join(args)
