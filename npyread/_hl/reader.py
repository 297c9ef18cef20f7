"""
    Implements decoding of single and packed array buffers.

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
from multiprocessing.pool import ThreadPool
from typing import Dict, List, Optional, Tuple, Union
from numpy import ndarray
import logging

from .archive import ZipArchive
from .container import Container
from .materialize import materialize
from .. import config
from ..errors import NpyError

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]


def decode_array(data: Buffer) -> ndarray:
    """
    Decode a single array container.
    :param data: container content
    :return: decoded array
    """
    return materialize(Container.parse(data))


def _try_decode(name: str, data: Buffer, log: logging.Logger) -> Optional[ndarray]:
    try:
        array = decode_array(data)
    except NpyError as e:
        log.warning('Could not decode array "%s": %s', name, e)
        return None

    log.debug('Decoded array "%s" of shape %s and dtype %s', name, array.shape, array.dtype)
    return array


def decode_buffers(buffers: Dict[str, Buffer], num_workers: Optional[int] = None,
                   log: Optional[logging.Logger] = None) -> Dict[str, ndarray]:
    """
    Decode named array containers. Containers failing to decode are logged and left out of the result.
    :param buffers: dictionary of (array name, container content) pairs
    :param num_workers: number of decoding threads, entries are decoded sequentially if not greater than 1
    :param log: logger receiving the warnings, defaults to the module logger
    :return: dictionary of (array name, array) pairs
    """
    log = log or logger
    named_buffers: List[Tuple[str, Buffer]] = list(buffers.items())

    if num_workers is not None and num_workers > 1 and len(named_buffers) > 1:
        with ThreadPool(min(num_workers, len(named_buffers))) as pool:
            arrays = pool.starmap(_try_decode, [(name, data, log) for name, data in named_buffers])
    else:
        arrays = [_try_decode(name, data, log) for name, data in named_buffers]

    # merged in enumeration order, never in completion order
    data: Dict[str, ndarray] = dict()
    for (name, _), array in zip(named_buffers, arrays):
        if array is not None:
            data[name] = array

    return data


def load(data: Buffer, is_packed: bool = False, name: str = config.DEFAULT_ARRAY_NAME,
         num_workers: Optional[int] = None, log: Optional[logging.Logger] = None) -> Dict[str, ndarray]:
    """
    Decode a single array container or a packed archive of containers.
    A single container failing to decode raises, packed entries failing to extract or decode are skipped.
    :param data: container or archive content
    :param is_packed: whether the content is a zip archive of containers
    :param name: name of the array when the content is a single container
    :param num_workers: number of decoding threads for packed content
    :param log: logger receiving the warnings, defaults to the module logger
    :return: dictionary of (array name, array) pairs
    """
    log = log or logger

    if not is_packed:
        return {name: decode_array(data)}

    with ZipArchive(data, name) as archive:
        buffers = archive.unpack(log)

    return decode_buffers(buffers, num_workers, log)


def read(data: Buffer, is_packed: bool = False, name: str = config.DEFAULT_ARRAY_NAME,
         num_workers: Optional[int] = None, log: Optional[logging.Logger] = None) -> Optional[Dict[str, ndarray]]:
    """
    Decode a single array container or a packed archive of containers, reporting failures as None.
    :param data: container or archive content
    :param is_packed: whether the content is a zip archive of containers
    :param name: name of the array when the content is a single container
    :param num_workers: number of decoding threads for packed content
    :param log: logger receiving the warnings, defaults to the module logger
    :return: dictionary of (array name, array) pairs, or None if the content could not be decoded at all
    """
    log = log or logger

    try:
        return load(data, is_packed, name, num_workers, log)
    except NpyError as e:
        log.warning('Could not read "%s": %s', name, e)
        return None
