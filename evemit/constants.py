import os
import sys

PACKAGE = "evemit"


def get_data_directory():
    """
    Returns the writable data directory for the application.
    Windows: %APPDATA%/evemit
    Linux/Mac: ~/.evemit
    """
    if sys.platform == "win32":
        base_path = os.environ.get("APPDATA") or os.path.expanduser("~")
        path = os.path.join(base_path, PACKAGE)
    else:
        path = os.path.expanduser(f"~/.{PACKAGE}")

    if not os.path.exists(path):
        os.makedirs(path)

    return path
