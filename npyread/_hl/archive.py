"""
    Implements access to the zip archives holding packed arrays.

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
from collections import namedtuple
from types import TracebackType
from typing import BinaryIO, Callable, Dict, List, Optional, Type, Union
import io
import logging
import stat
import zipfile
import zlib

from ..errors import ExtractionFailure, UnreadableSource

logger = logging.getLogger(__name__)

ArchiveEntry = namedtuple('ArchiveEntry', 'path size index')

"""
Size of the chunks streamed out of an archive entry
"""
CHUNK_SIZE = 1 << 20

_extraction_errors = (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, EOFError, OSError,
                      ValueError)


class ZipArchive:
    """
    Represents a zip archive opened for reading, from memory or from a file object.
    """
    def __init__(self, source: Union[bytes, bytearray, memoryview, BinaryIO], name: str = 'archive'):
        """
        Open the archive.
        :param source: archive content or readable binary file object
        :param name: name of the archive used in error messages
        """
        self.name = name

        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)

        try:
            self._zip = zipfile.ZipFile(source, 'r')
        except (zipfile.BadZipFile, EOFError, OSError, ValueError) as e:
            raise UnreadableSource(name, f'could not unzip the archive ({e})') from e

        self._infos = self._zip.infolist()

    def __enter__(self):
        return self

    def __exit__(self, exception_type: Optional[Type[BaseException]], exception_value: Optional[BaseException],
                 traceback: Optional[TracebackType]):
        self.close()

    def close(self):
        self._zip.close()

    @staticmethod
    def _is_regular_file(info: zipfile.ZipInfo) -> bool:
        if info.is_dir():
            return False

        # archives written without unix attributes carry no file type bits
        file_type = stat.S_IFMT(info.external_attr >> 16)
        return file_type in (0, stat.S_IFREG)

    def entries(self) -> List[ArchiveEntry]:
        """
        List the regular file entries, in archive order. Directories and symlinks are skipped.
        :return: list of entries
        """
        return [ArchiveEntry(info.filename, info.file_size, index)
                for index, info in enumerate(self._infos) if self._is_regular_file(info)]

    def extract(self, entry: ArchiveEntry, sink: Callable[[bytes], None]):
        """
        Stream the decompressed content of an entry into a sink.
        :param entry: entry to extract
        :param sink: callable receiving each decompressed chunk
        :return:
        """
        try:
            with self._zip.open(self._infos[entry.index]) as fp:
                for chunk in iter(lambda: fp.read(CHUNK_SIZE), b''):
                    sink(chunk)
        except _extraction_errors as e:
            raise ExtractionFailure(entry.path, str(e)) from e

    def read(self, entry: ArchiveEntry) -> bytes:
        """
        Extract an entry into memory.
        :param entry: entry to extract
        :return: decompressed entry content
        """
        buffer = bytearray()
        self.extract(entry, buffer.extend)

        return bytes(buffer)

    def unpack(self, log: Optional[logging.Logger] = None) -> Dict[str, bytes]:
        """
        Extract every regular file entry into memory.
        Entries failing to extract are logged and skipped, the last entry wins when paths are duplicated.
        :param log: logger receiving the warnings, defaults to the module logger
        :return: dictionary of (entry path, entry content) pairs
        """
        log = log or logger
        result: Dict[str, bytes] = dict()

        for entry in self.entries():
            try:
                result[entry.path] = self.read(entry)
            except ExtractionFailure as e:
                log.warning('%s, skipping entry', e)

        return result
