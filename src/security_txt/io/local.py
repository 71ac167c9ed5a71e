"""Local file sources for the parser."""

from pathlib import Path
from typing import BinaryIO, Union


class LocalSource:
    """Opens a path for reading, or adopts a caller's file object.

    Only a file opened here is closed on exit; the caller keeps ownership of
    anything passed in already open.
    """

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self._should_close_file = False
        if hasattr(source, 'read'):
            self._file = source
        else:
            self._file = open(source, 'rb')
            self._should_close_file = True

    @property
    def stream(self):
        return self._file

    def __enter__(self):
        return self._file

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the file if we opened it."""
        if self._should_close_file and self._file is not None:
            self._file.close()
            self._file = None


def open_local_source(source: Union[Path, str, BinaryIO]) -> LocalSource:
    """Create a local source."""
    return LocalSource(source)
