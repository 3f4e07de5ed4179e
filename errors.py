# --- errors.py ---

from typing import Optional, Union


class SearchError(Exception):
    """Base class for every error raised by the search engine."""

    def __init__(self, message: str, path: str = "", os_error: Optional[Exception] = None):
        super().__init__(message)
        self.path = path
        self.os_error = os_error


class EmptyPathError(SearchError):
    """The search was asked to start from an empty path."""

    def __init__(self):
        super().__init__("empty path argument")


class StatError(SearchError):
    """The base path could not be stat'ed."""

    def __init__(self, path: str, os_error: Union[OSError, ValueError]):
        super().__init__(f"cannot stat {path}: {os_error}", path, os_error)


class NotADirectoryPathError(SearchError, NotADirectoryError):
    """The base path exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"invalid path argument: {path} is not a directory", path)


class DirectoryListingError(SearchError):
    """A directory could not be listed during the walk."""

    def __init__(self, path: str, os_error: OSError):
        super().__init__(f"cannot list directory {path}: {os_error}", path, os_error)


class MetadataReadError(SearchError):
    """A file's metadata could not be read. Always fatal to the walk."""

    def __init__(self, path: str, os_error: OSError):
        super().__init__(f"cannot read metadata of {path}: {os_error}", path, os_error)
