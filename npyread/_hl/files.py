"""
    Implements high-level support for file objects.

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
from typing import BinaryIO, Dict, List, Optional, Type
from types import TracebackType
from numpy import ndarray
import logging
import os

from .archive import ArchiveEntry, ZipArchive
from .reader import decode_array, decode_buffers
from .. import config
from ..errors import NpyError, UnreadableSource

logger = logging.getLogger(__name__)


class File:
    """
        Represents an array file on disk, either a single array (.npy) or a packed archive of arrays (.npz).
    """
    def __init__(self, file_path: str, is_packed: Optional[bool] = None, log: Optional[logging.Logger] = None):
        """
        Open an array file.
        :param file_path: path to the file on disk
        :param is_packed: whether the file is a packed archive, guessed from the file extension if None
        :param log: logger receiving the warnings, defaults to the module logger
        """
        self._file_path = file_path
        self._is_packed = is_packed
        self._log = log or logger
        self._fp: Optional[BinaryIO] = None
        self._archive: Optional[ZipArchive] = None
        self._entries: Dict[str, ArchiveEntry] = dict()

        self.open(file_path, is_packed)

    @property
    def name(self) -> str:
        """
        Name of the array of a single array file, the base name of the file.
        """
        return os.path.basename(self._file_path)

    @property
    def is_packed(self) -> bool:
        return self._is_packed

    def open(self, file_path: str, is_packed: Optional[bool] = None):
        """
        Open the array file.
        :param file_path: path to the file on disk
        :param is_packed: whether the file is a packed archive, guessed from the file extension if None
        :return:
        """
        if self._fp is not None:
            self.close()

        self._file_path = file_path
        if is_packed is None:
            is_packed = os.path.splitext(file_path)[1].lower() == config.PACKED_EXTENSION
        self._is_packed = is_packed

        try:
            self._fp = open(self._file_path, 'rb')
        except OSError as e:
            raise UnreadableSource(self._file_path, e.strerror or str(e)) from e

        if self._is_packed:
            self._init_archive()

    def _init_archive(self):
        """
        Open the archive and index its entries by path.
        :return:
        """
        try:
            self._archive = ZipArchive(self._fp, self._file_path)
        except UnreadableSource:
            self._fp.close()
            raise

        self._entries = {entry.path: entry for entry in self._archive.entries()}

    def __enter__(self):
        """
        Return File object when using a "with" statement.
        :return: File object
        """
        return self

    def __exit__(self, exception_type: Optional[Type[BaseException]], exception_value: Optional[BaseException],
                 traceback: Optional[TracebackType]):
        """
        Explicitly close the File when exiting a "with" context and handle exceptions.
        :param exception_type: type of exception
        :param exception_value: value of exception
        :param traceback: traceback
        :return:
        """
        self.close()

    def close(self):
        """
        Close file object.
        Needs to be called explicitly or use a "with" statement.
        :return:
        """
        if self._fp is None:
            return
        if self._fp.closed:
            return
        if self._archive is not None:
            self._archive.close()
            self._archive = None

        self._entries = dict()
        self._fp.close()

    def validate_file_handle(self):
        if self._fp is None:
            raise IOError('Trying to read an array from a non initialized file.')
        if self._fp.closed:
            raise IOError('Trying to read an array from a closed file.')

    def keys(self) -> List[str]:
        """
        Get the names of the arrays in the file.
        :return: list of array names
        """
        self.validate_file_handle()

        if self._is_packed:
            return list(self._entries.keys())

        return [self.name]

    def num_arrays(self) -> int:
        """
        Get the number of arrays in the file.
        :return: number of arrays
        """
        return len(self.keys())

    def get_array(self, array_name: str) -> ndarray:
        """
        Get an array from the file.
        :param array_name: name of the array to retrieve
        :return: an array
        """
        self.validate_file_handle()

        if array_name not in self.keys():
            raise KeyError(f'Array {array_name} could not be found in {self._file_path}.')

        if self._is_packed:
            return decode_array(self._archive.read(self._entries[array_name]))

        self._fp.seek(0)
        return decode_array(self._fp.read())

    def get_arrays(self, num_workers: Optional[int] = None) -> Dict[str, ndarray]:
        """
        Get every array from the file.
        A single array failing to decode raises, packed arrays failing to extract or decode are logged and skipped.
        :param num_workers: number of decoding threads for packed files
        :return: a dictionary of (array name, array data) pairs
        """
        self.validate_file_handle()

        if not self._is_packed:
            return {self.name: self.get_array(self.name)}

        return decode_buffers(self._archive.unpack(self._log), num_workers, self._log)


def load_file(file_path: str, is_packed: Optional[bool] = None, num_workers: Optional[int] = None,
              log: Optional[logging.Logger] = None) -> Dict[str, ndarray]:
    """
    Decode every array of a file.
    :param file_path: path to the file on disk
    :param is_packed: whether the file is a packed archive, guessed from the file extension if None
    :param num_workers: number of decoding threads for packed files
    :param log: logger receiving the warnings, defaults to the module logger
    :return: a dictionary of (array name, array data) pairs
    """
    with File(file_path, is_packed, log) as fp:
        return fp.get_arrays(num_workers)


def read_file(file_path: str, is_packed: Optional[bool] = None, num_workers: Optional[int] = None,
              log: Optional[logging.Logger] = None) -> Optional[Dict[str, ndarray]]:
    """
    Decode every array of a file, reporting failures as None.
    :param file_path: path to the file on disk
    :param is_packed: whether the file is a packed archive, guessed from the file extension if None
    :param num_workers: number of decoding threads for packed files
    :param log: logger receiving the warnings, defaults to the module logger
    :return: a dictionary of (array name, array data) pairs, or None if the file could not be decoded at all
    """
    log = log or logger

    try:
        return load_file(file_path, is_packed, num_workers, log)
    except NpyError as e:
        log.warning('Could not read %s: %s', file_path, e)
        return None
