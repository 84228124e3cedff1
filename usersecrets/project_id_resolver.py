import contextlib
import os
import tempfile
import uuid

from .cli_logger import logger
from .errors import ProjectFailedToLoadError, ProjectMissingIdError, ToolAssetsMissingError
from .targets_locator import locate
from .utils.command_executor import escape_and_concatenate, run_shell_command
from .utils.dotnet_muxer import muxer_path_or_default
from .utils.project_finder import find_msbuild_project

DEFAULT_CONFIG = "Debug"
EXTRACT_TARGET = "_ExtractUserSecretsMetadata"  # defined in SecretManager.targets
METADATA_FILE_PROPERTY = "_UserSecretsMetadataFile"
HOOK_PROPERTIES = (
    "CustomAfterMicrosoftCommonTargets",
    "CustomAfterMicrosoftCommonCrossTargetingTargets",
)

@contextlib.contextmanager
def temporary_output_file():
    """Yield a fresh path in the temp dir; the file is gone once the block exits."""
    output_file = os.path.join(tempfile.gettempdir(), f"usersecrets-{uuid.uuid4().hex}.tmp")
    try:
        yield output_file
    finally:
        with contextlib.suppress(OSError):
            if os.path.exists(output_file):
                os.remove(output_file)

def build_msbuild_args(project_file, output_file, configuration, targets_file):
    args = [
        "msbuild",
        project_file,
        "/nologo",
        f"/t:{EXTRACT_TARGET}",
        f"/p:{METADATA_FILE_PROPERTY}={output_file}",
        f"/p:Configuration={configuration}",
    ]
    args.extend(f"/p:{prop}={targets_file}" for prop in HOOK_PROPERTIES)
    return args

class ProjectIdResolver:
    """Reads a project's UserSecretsId by asking MSBuild for it."""

    def __init__(self, reporter=logger, working_directory=".", install_root=None,
                 base_dir=None, muxer_path=None):
        self.reporter = reporter
        self.working_directory = working_directory
        self.muxer_path = muxer_path
        self.targets_file = locate(reporter, install_root=install_root, base_dir=base_dir)

    def resolve(self, project, configuration):
        if self.targets_file is None:
            raise ToolAssetsMissingError()

        project_file = find_msbuild_project(project, self.working_directory)
        self.reporter.verbose(f"Project file path {project_file}.")

        configuration = configuration or DEFAULT_CONFIG

        with temporary_output_file() as output_file:
            command = [self.muxer_path or muxer_path_or_default()]
            command.extend(build_msbuild_args(project_file, output_file, configuration, self.targets_file))
            self.reporter.verbose(f"Invoking '{escape_and_concatenate(command)}'")

            stdout, stderr, returncode = run_shell_command(command)

            if returncode != 0:
                self.reporter.verbose(stdout)
                self.reporter.verbose(stderr)
                raise ProjectFailedToLoadError(project_file)

            user_secrets_id = None
            if os.path.exists(output_file):
                with open(output_file, "r", encoding="utf-8-sig", errors="replace") as f:
                    user_secrets_id = f.read().strip()
            if not user_secrets_id:
                raise ProjectMissingIdError(project_file)
            return user_secrets_id
