import os
import shutil

MUXER_NAME = "dotnet"

def muxer_path_or_default():
    """
    Locate the dotnet host executable.

    DOTNET_HOST_PATH is set by the SDK when it launches tools, so it is
    preferred. Falls back to PATH lookup and finally to the bare name.
    """
    host_path = os.environ.get("DOTNET_HOST_PATH")
    if host_path and os.path.isfile(host_path):
        return host_path
    return shutil.which(MUXER_NAME) or MUXER_NAME
