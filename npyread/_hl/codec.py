"""
    Implements fixed width element decoding with explicit byte order conversion.

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
from typing import Optional, Union
from numpy import ndarray

import numpy as np

from .header import ByteOrder

Buffer = Union[bytes, bytearray, memoryview]

"""
Widths handled by the multi-byte codec
"""
multi_byte_widths = (2, 4, 8)


def _available(data: Buffer, count: int, width: int) -> int:
    """
    Number of whole elements that can be read from the buffer, at most count.
    """
    return max(0, min(count, len(data) // width))


def load_uints(data: Buffer, count: int, byte_order: ByteOrder, width: int) -> Optional[ndarray]:
    """
    Decode multi-byte unsigned integers in native byte order.
    Buffers holding fewer than count elements are truncated to the whole elements available.
    :param data: raw element bytes
    :param count: number of elements to read
    :param byte_order: byte order of the stored elements
    :param width: element width in bytes (2, 4 or 8)
    :return: unsigned integer array of the given width, or None if the byte order is not applicable
    """
    if width not in multi_byte_widths:
        raise ValueError(f'Expected width to be one of {multi_byte_widths}, got {width}.')

    if byte_order is ByteOrder.NOT_APPLICABLE:
        return None

    stored_type = np.dtype(f'u{width}').newbyteorder(byte_order.value)
    uints = np.frombuffer(data, dtype=stored_type, count=_available(data, count, width))

    return uints.astype(np.dtype(f'=u{width}'))


def load_uint8s(data: Buffer, count: int) -> ndarray:
    """
    Copy single byte values verbatim, no byte swapping is possible.
    :param data: raw element bytes
    :param count: number of bytes to read
    :return: uint8 array
    """
    return np.frombuffer(data, dtype=np.uint8, count=_available(data, count, 1)).copy()
