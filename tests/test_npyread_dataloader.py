"""
    Run tests for the PyTorch bindings.

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
import importlib.util
import os
import tempfile
import unittest
import numpy as np

HAS_TORCH = importlib.util.find_spec('torch') is not None

NUM_ITEMS = 20
NUM_CLASSES = 10
FIXED_LEN = 100


@unittest.skipUnless(HAS_TORCH, 'torch is not installed')
class TestNpyzDataset(unittest.TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.file_paths = []
        self.data = []

        for i in range(NUM_ITEMS):
            idx = np.array([i], dtype=np.int64)
            label = np.random.randint(0, NUM_CLASSES, size=1, dtype=np.int32)
            fixed_len_array = np.random.random(FIXED_LEN).astype(np.float32)

            file_path = os.path.join(self.directory.name, f'item_{i}.npz')
            np.savez(file_path, idx=idx, label=label, fixed_len_array=fixed_len_array)

            self.file_paths.append(file_path)
            self.data.append((idx, label, fixed_len_array))

    def tearDown(self):
        self.directory.cleanup()

    def test_sequential_item_read(self):
        from torch.utils.data import DataLoader
        from npyread.utils.data import NpyzDataset

        dataset = NpyzDataset(self.file_paths, keys=['idx.npy', 'label.npy', 'fixed_len_array.npy'])
        dataloader = DataLoader(dataset, shuffle=False, batch_size=1)

        self.assertEqual(len(dataset), NUM_ITEMS)
        for idx, label, fixed_len_array in dataloader:
            expected = self.data[int(idx[0].numpy()[0])]
            self.assertTrue(np.all(label[0].numpy() == expected[1]))
            self.assertTrue(np.all(fixed_len_array[0].numpy() == expected[2]))

    def test_process_funcs(self):
        from npyread.utils.data import NpyzDataset

        dataset = NpyzDataset(self.file_paths, keys=['label.npy'],
                              process_funcs={'label.npy': lambda array: array + 100})

        label, = dataset[3]
        self.assertEqual(label.tolist(), (self.data[3][1] + 100).tolist())

    def test_to_tensors(self):
        import torch
        from npyread import read_file
        from npyread.utils.data import to_tensors

        tensors = to_tensors(read_file(self.file_paths[0]))

        self.assertEqual(tensors['fixed_len_array.npy'].dtype, torch.float32)
        self.assertEqual(tuple(tensors['fixed_len_array.npy'].shape), (FIXED_LEN,))
        self.assertEqual(tensors['idx.npy'].tolist(), [0])


if __name__ == '__main__':
    unittest.main()
