"""
    Implements conversion of parsed containers into typed numpy arrays.

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
from typing import Callable, Dict
from numpy import ndarray

from .codec import load_uints, load_uint8s
from .container import Container
from .header import DataType, Header
from ..errors import InvalidHeader, TruncatedPayload


def _decode_bool(container: Container) -> ndarray:
    return load_uint8s(container.elements_data, container.header.element_count) != 0


def _decode_single_byte(container: Container) -> ndarray:
    uints = load_uint8s(container.elements_data, container.header.element_count)
    return uints.view(container.header.data_type.numpy_type)


def _decode_multi_byte(container: Container) -> ndarray:
    header: Header = container.header
    uints = load_uints(container.elements_data, header.element_count, header.byte_order, header.data_type.width)

    if uints is None:
        raise InvalidHeader(f'Byte order "{header.byte_order.value}" is not applicable to dtype {header.descr}')

    # bit pattern reinterpretation, not a value conversion
    return uints.view(header.data_type.numpy_type)


"""
Decoding function by element type
"""
decoders: Dict[DataType, Callable[[Container], ndarray]] = {
    DataType.BOOL: _decode_bool,
    DataType.UINT8: _decode_single_byte,
    DataType.INT8: _decode_single_byte,
    DataType.UINT16: _decode_multi_byte,
    DataType.INT16: _decode_multi_byte,
    DataType.UINT32: _decode_multi_byte,
    DataType.INT32: _decode_multi_byte,
    DataType.UINT64: _decode_multi_byte,
    DataType.INT64: _decode_multi_byte,
    DataType.FLOAT32: _decode_multi_byte,
    DataType.FLOAT64: _decode_multi_byte
}


def materialize(container: Container) -> ndarray:
    """
    Build the typed array described by the container header.
    Fortran ordered payloads are laid out column-major so that indexing gives the stored logical values.
    :param container: parsed container
    :return: array of the header shape and type, in native byte order
    """
    header = container.header

    if header.data_type not in decoders:
        raise InvalidHeader(f'No decoder for dtype {header.data_type.name}')

    flat = decoders[header.data_type](container)

    if len(flat) < header.element_count:
        raise TruncatedPayload(f'Payload truncated: expected {header.element_count} elements of '
                               f'{header.data_type.width} bytes, got {len(container.elements_data)} bytes')

    return flat.reshape(header.shape, order='F' if header.is_fortran_order else 'C')
