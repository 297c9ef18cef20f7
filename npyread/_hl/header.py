"""
    Implements parsing of the textual array header.

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
from enum import Enum
from functools import reduce
from typing import List, Tuple, Union
import operator
import re

import numpy as np

from ..errors import InvalidHeader


class ByteOrder(Enum):
    """
    Byte order symbols of a type descriptor, in matching order.
    """
    HOST = '='
    BIG = '>'
    LITTLE = '<'
    NOT_APPLICABLE = '|'


class DataType(Enum):
    """
    Supported element types by type code, in matching order.
    The letter gives the type category (b=boolean, u=unsigned, i=signed, f=float), the digit the byte width.
    """
    BOOL = 'b1'
    UINT8 = 'u1'
    UINT16 = 'u2'
    UINT32 = 'u4'
    UINT64 = 'u8'
    INT8 = 'i1'
    INT16 = 'i2'
    INT32 = 'i4'
    INT64 = 'i8'
    FLOAT32 = 'f4'
    FLOAT64 = 'f8'

    @property
    def width(self) -> int:
        return int(self.value[1])

    @property
    def numpy_type(self) -> np.dtype:
        """
        Native byte order numpy type of the decoded elements.
        """
        return np.dtype(self.name.lower())


_HEADER = namedtuple('_HEADER', 'shape data_type byte_order is_fortran_order descr')

_separators = re.compile(r'[, ]')
_shape_dimension = re.compile(r'[0-9]+')


class Header(_HEADER):
    """
    Represents the immutable header of an array container.
    """
    __slots__ = ()

    @property
    def element_count(self) -> int:
        """
        Number of elements in the array, 1 for a scalar (empty shape).
        """
        return reduce(operator.mul, self.shape, 1)

    @property
    def num_bytes(self) -> int:
        """
        Number of payload bytes the header declares.
        """
        return self.element_count * self.data_type.width

    @classmethod
    def parse(cls, data: Union[bytes, bytearray, memoryview]) -> 'Header':
        """
        Parse the header text, a dictionary literal holding the keys "descr", "fortran_order" and "shape".
        The parse is tolerant and positional: the value of a key is the token following it.
        :param data: raw header bytes
        :return: a new header
        """
        try:
            text = bytes(data).decode('ascii')
        except UnicodeDecodeError as e:
            raise InvalidHeader(f'Header is not valid ASCII text: {e}') from e

        tokens = [token for token in _separators.split(text) if token]

        descr = cls._value_after(tokens, 'descr').strip('\'"')
        byte_order = cls._match_byte_order(descr)
        data_type = cls._match_data_type(descr)
        is_fortran_order = 'True' in cls._value_after(tokens, 'fortran_order')
        shape = cls._parse_shape(text)

        return cls(shape, data_type, byte_order, is_fortran_order, descr)

    @staticmethod
    def _value_after(tokens: List[str], key: str) -> str:
        key_index = next((i for i, token in enumerate(tokens) if key in token), None)

        if key_index is None:
            raise InvalidHeader(f"Header does not contain the key '{key}'")
        if key_index + 1 >= len(tokens):
            raise InvalidHeader(f"Header does not contain a value for the key '{key}'")

        return tokens[key_index + 1]

    @staticmethod
    def _match_byte_order(descr: str) -> ByteOrder:
        for byte_order in ByteOrder:
            if byte_order.value in descr:
                return byte_order

        raise InvalidHeader(f'Unknown endian type: {descr}')

    @staticmethod
    def _match_data_type(descr: str) -> DataType:
        for data_type in DataType:
            if data_type.value in descr:
                return data_type

        raise InvalidHeader(f'Unsupported dtype: {descr}')

    @staticmethod
    def _parse_shape(text: str) -> Tuple[int, ...]:
        left = text.find('(')
        right = text.find(')')

        if left < 0 or right < left:
            raise InvalidHeader('Shape not found in header')

        dimensions = [s for s in text[left + 1:right].replace(' ', '').split(',') if s]

        for s in dimensions:
            if not _shape_dimension.fullmatch(s):
                raise InvalidHeader(f'Shape contains invalid integer: {s}')

        return tuple(int(s) for s in dimensions)
