"""Exceptions raised while resolving a project's UserSecretsId."""


class UserSecretsError(Exception):
    """Base class for every failure that is reported to the user as-is."""


class ToolAssetsMissingError(UserSecretsError):
    def __init__(self):
        super().__init__(
            "Could not find the SecretManager.targets tool asset. Reinstall usersecrets."
        )


class ProjectDiscoveryError(UserSecretsError):
    pass


class ProjectFailedToLoadError(UserSecretsError):
    def __init__(self, project_file):
        self.project_file = project_file
        super().__init__(f"Could not load the MSBuild project '{project_file}'.")


class ProjectMissingIdError(UserSecretsError):
    def __init__(self, project_file):
        self.project_file = project_file
        super().__init__(
            f"Could not find the global property 'UserSecretsId' in MSBuild project '{project_file}'. "
            "Ensure this property is set in the project or use the '--id' command line option."
        )
