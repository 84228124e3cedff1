import os
from ..errors import ProjectDiscoveryError

def _is_project_file(path):
    _, ext = os.path.splitext(path)
    return ext.lower().endswith("proj") and os.path.isfile(path)

def find_msbuild_project(project, working_directory):
    """
    Map a --project value onto exactly one MSBuild project file.

    An empty value searches the working directory. A relative path is taken
    relative to the working directory; a directory is searched for a single
    *.*proj file.
    """
    project_path = working_directory
    if project:
        project_path = os.path.join(working_directory, project)
    project_path = os.path.abspath(project_path)

    if os.path.isdir(project_path):
        candidates = sorted(
            os.path.join(project_path, name)
            for name in os.listdir(project_path)
            if _is_project_file(os.path.join(project_path, name))
        )
        if not candidates:
            raise ProjectDiscoveryError(
                f"Could not find a MSBuild project file in '{project_path}'. "
                "Specify which project to use with the --project option."
            )
        if len(candidates) > 1:
            raise ProjectDiscoveryError(
                f"Multiple MSBuild project files found in '{project_path}'. "
                "Specify which to use with the --project option."
            )
        return candidates[0]

    if not os.path.exists(project_path):
        raise ProjectDiscoveryError(f"The project file '{project_path}' does not exist.")

    return project_path
