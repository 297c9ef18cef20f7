"""
    Exception types raised while decoding array files.

    This file is part of Npyread.

    Npyread is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    Npyread is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with Npyread.  If not, see <https://www.gnu.org/licenses/>.
"""


class NpyError(Exception):
    """
        Base exception for all errors raised by Npyread.
    """
    pass


class InvalidContainer(NpyError, ValueError):
    """
        The buffer is not a valid array container (bad magic bytes, unsupported version, truncated data).
    """
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TruncatedPayload(InvalidContainer):
    """
        The element payload holds fewer elements than the header declares.
    """
    pass


class InvalidHeader(NpyError, ValueError):
    """
        The textual header is malformed or describes an unsupported array.
    """
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ExtractionFailure(NpyError, IOError):
    """
        An archive entry could not be decompressed.
    """
    def __init__(self, entry_path: str, reason: str = ''):
        message = f'Could not extract "{entry_path}" from the archive'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)
        self.entry_path = entry_path


class UnreadableSource(NpyError, IOError):
    """
        The top-level byte source (file or archive) could not be opened at all.
    """
    def __init__(self, source: str, reason: str = ''):
        message = f'Could not read {source}'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)
        self.source = source
