"""
    Dataset utilities for PyTorch.

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
from typing import List, Tuple, Dict, Callable, Optional
from torch.utils.data.dataset import Dataset
from numpy import ndarray
import torch
from .. import File


def to_tensors(arrays: Dict[str, ndarray]) -> Dict[str, torch.Tensor]:
    """
    Hand decoded arrays over to PyTorch.
    :param arrays: dictionary of (array name, array) pairs
    :return: dictionary of (array name, tensor) pairs sharing memory with the arrays
    """
    return {key: torch.from_numpy(array) for key, array in arrays.items()}


class NpyzDataset(Dataset):
    """
    Represent a PyTorch Dataset where each item is read from one packed array file.
    """
    def __init__(self, file_paths: List[str], keys: List[str], process_funcs: Optional[Dict[str, Callable]] = None):
        """
        Create a new `Dataset` object.
        :param file_paths: paths to the packed array files, one per item
        :param keys: list of array names to retrieve from each file
        :param process_funcs: optional processing function for each array name
        """
        self.file_paths = file_paths
        self.keys = keys
        self.process_funcs = process_funcs or dict()

    def __getitem__(self, item: int) -> Tuple[ndarray, ...]:
        """
        Access the item at the specified index
        :param item: index of the item
        :return: tuple of arrays
        """
        with File(self.file_paths[item], is_packed=True) as fp:
            arrays = [fp.get_array(key) for key in self.keys]

        processed_arrays = [
            self.process_funcs[key](array) if key in self.process_funcs else array
            for key, array in zip(self.keys, arrays)
        ]

        return tuple(processed_arrays)

    def __len__(self) -> int:
        """
        Returns the length of the dataset.
        :return: length of the dataset
        """
        return len(self.file_paths)
