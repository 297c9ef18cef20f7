"""
    Configuration file

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

"""
    Magic bytes for format identification
"""
MAGIC_PREFIX = b'\x93NUMPY'

"""
    Number of magic bytes.
"""
NUM_BYTES_MAGIC_PREFIX = len(MAGIC_PREFIX)
"""
    Position of the major and minor version bytes.
"""
MAJOR_VERSION_OFFSET = NUM_BYTES_MAGIC_PREFIX
MINOR_VERSION_OFFSET = NUM_BYTES_MAGIC_PREFIX + 1
"""
    Position of the header length field, right after the version bytes.
"""
HEADER_LENGTH_OFFSET = NUM_BYTES_MAGIC_PREFIX + 2

"""
    Supported format versions.
"""
SUPPORTED_MAJOR_VERSIONS = (1, 2)
SUPPORTED_MINOR_VERSIONS = (0,)

"""
    Type of the little endian header length field for each major version.
"""
HEADER_LENGTH_DTYPES = {
    1: '<u2',
    2: '<u4'
}

"""
    File extension of packed (multi-array) files.
"""
PACKED_EXTENSION = '.npz'
"""
    Array name used when a single array buffer is decoded without a name.
"""
DEFAULT_ARRAY_NAME = 'npy'
