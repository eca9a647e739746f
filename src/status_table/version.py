from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Installed version of status-table, or "unknown" when run from a checkout."""
    try:
        return version("status-table")
    except PackageNotFoundError:
        return "unknown"
