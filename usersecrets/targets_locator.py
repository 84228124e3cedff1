import os
import sys

TARGETS_FILE = "SecretManager.targets"

INSTALL_ROOT = os.path.dirname(os.path.abspath(__file__))

def default_base_dir():
    """Directory of the entry script that started this process."""
    if sys.argv and sys.argv[0]:
        return os.path.dirname(os.path.abspath(sys.argv[0]))
    return os.getcwd()

def candidate_directories(install_root, base_dir):
    """Yield the directories to probe, highest priority first."""
    yield base_dir
    yield install_root
    yield os.path.join(install_root, "..", "..", "toolassets")  # packaged-dependency layout
    yield os.path.join(install_root, "toolassets")  # local build / installed package
    yield os.path.join(base_dir, "..", "..", "toolassets")

def locate(reporter, install_root=None, base_dir=None):
    """
    Return the path of SecretManager.targets, or None if no candidate has it.

    A miss is reported once through ``reporter.error`` and never raises;
    the resolver decides what to do about it.
    """
    install_root = install_root or INSTALL_ROOT
    base_dir = base_dir or default_base_dir()

    for directory in candidate_directories(install_root, base_dir):
        target_path = os.path.join(directory, TARGETS_FILE)
        if os.path.isfile(target_path):
            return os.path.normpath(target_path)

    reporter.error(f"Fatal error: could not find {TARGETS_FILE}")
    return None
