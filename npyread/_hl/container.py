"""
    Implements parsing of single array containers.

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
from typing import Tuple, Union

import numpy as np

from .header import Header
from .. import config
from ..errors import InvalidContainer


class Container:
    """
    Represents a parsed array container: a header and the raw, undecoded element bytes.

    The byte layout is:
    <MAGIC PREFIX><MAJOR VERSION><MINOR VERSION><HEADER LENGTH><HEADER TEXT><ELEMENT BYTES>
    where the header length is a 2 byte (version 1) or 4 byte (version 2) little endian integer.
    """
    def __init__(self, header: Header, elements_data: memoryview, version: Tuple[int, int] = (1, 0)):
        """
        Create a new container.
        :param header: parsed header
        :param elements_data: raw element bytes following the header
        :param version: (major, minor) format version the container was read from
        """
        self.header = header
        self.elements_data = elements_data
        self.version = version

    def __repr__(self) -> str:
        return f'Container(header={self.header!r}, num_bytes={len(self.elements_data)}, version={self.version})'

    @classmethod
    def parse(cls, data: Union[bytes, bytearray, memoryview]) -> 'Container':
        """
        Parse a container from the full file content.
        :param data: file content
        :return: a new container
        """
        data = memoryview(data).cast('B')

        magic = bytes(data[:config.NUM_BYTES_MAGIC_PREFIX])
        if magic != config.MAGIC_PREFIX:
            raise InvalidContainer(f'Invalid prefix: {magic!r}')

        if len(data) < config.HEADER_LENGTH_OFFSET:
            raise InvalidContainer(f'Container truncated after {len(data)} bytes, version bytes missing')

        major = data[config.MAJOR_VERSION_OFFSET]
        if major not in config.SUPPORTED_MAJOR_VERSIONS:
            raise InvalidContainer(f'Invalid major version: {major}')

        minor = data[config.MINOR_VERSION_OFFSET]
        if minor not in config.SUPPORTED_MINOR_VERSIONS:
            raise InvalidContainer(f'Invalid minor version: {minor}')

        header_length_type = np.dtype(config.HEADER_LENGTH_DTYPES[major])
        header_offset = config.HEADER_LENGTH_OFFSET + header_length_type.itemsize

        if len(data) < header_offset:
            raise InvalidContainer(f'Container truncated after {len(data)} bytes, header length missing')

        header_length = int(np.frombuffer(data[config.HEADER_LENGTH_OFFSET:header_offset],
                                          dtype=header_length_type)[0])
        elements_offset = header_offset + header_length

        if len(data) < elements_offset:
            raise InvalidContainer(f'Container truncated after {len(data)} bytes, '
                                   f'expected a header of {header_length} bytes')

        header = Header.parse(data[header_offset:elements_offset])

        return cls(header, data[elements_offset:], (major, minor))
