"""
Bug Load Errors
===============
Typed failures raised by the data loader.

    BugLoadError            — base class, carries the offending path
    BugFileNotFoundError    — path missing, a directory, or unreadable
    BugDecodeError          — invalid JSON, schema mismatch, duplicate ids

Both are terminal for a single load attempt. Callers decide how to report
them and must keep whatever dataset they already had.
"""


class BugLoadError(Exception):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message


class BugFileNotFoundError(BugLoadError):
    pass


class BugDecodeError(BugLoadError):
    pass
