"""
    Run tests for the header parser

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
import unittest
import numpy as np
from npyread import InvalidHeader
from npyread._hl.header import Header, DataType, ByteOrder


class TestHeaderParse(unittest.TestCase):
    def test_typical_header(self):
        header = Header.parse(b"{'descr': '<f4', 'fortran_order': False, 'shape': (2, 3), }          \n")

        self.assertEqual(header.shape, (2, 3))
        self.assertIs(header.data_type, DataType.FLOAT32)
        self.assertIs(header.byte_order, ByteOrder.LITTLE)
        self.assertFalse(header.is_fortran_order)
        self.assertEqual(header.descr, '<f4')
        self.assertEqual(header.element_count, 6)
        self.assertEqual(header.num_bytes, 24)

    def test_keys_in_any_order(self):
        header = Header.parse(b"{'shape': (4,), 'fortran_order': True, 'descr': '>u2'}")

        self.assertEqual(header.shape, (4,))
        self.assertIs(header.data_type, DataType.UINT16)
        self.assertIs(header.byte_order, ByteOrder.BIG)
        self.assertTrue(header.is_fortran_order)

    def test_single_element_shape(self):
        header = Header.parse(b"{'descr': '|u1', 'fortran_order': False, 'shape': (5,), }")

        self.assertEqual(header.shape, (5,))
        self.assertIs(header.byte_order, ByteOrder.NOT_APPLICABLE)
        self.assertIs(header.data_type, DataType.UINT8)

    def test_scalar_shape(self):
        header = Header.parse(b"{'descr': '=i8', 'fortran_order': False, 'shape': (), }")

        self.assertEqual(header.shape, ())
        self.assertEqual(header.element_count, 1)
        self.assertIs(header.byte_order, ByteOrder.HOST)
        self.assertIs(header.data_type, DataType.INT64)

    def test_bool_descr(self):
        header = Header.parse(b"{'descr': '|b1', 'fortran_order': False, 'shape': (1, 2), }")

        self.assertIs(header.data_type, DataType.BOOL)
        self.assertEqual(header.data_type.width, 1)
        self.assertEqual(header.data_type.numpy_type, np.dtype(bool))

    def test_header_is_immutable(self):
        header = Header.parse(b"{'descr': '<i2', 'fortran_order': False, 'shape': (3,), }")

        with self.assertRaises(AttributeError):
            header.shape = (4,)

    def test_missing_fortran_order(self):
        with self.assertRaises(InvalidHeader) as context:
            Header.parse(b"{'descr': '<f4', 'shape': (2, 3), }")

        self.assertIn('fortran_order', context.exception.reason)

    def test_missing_descr(self):
        with self.assertRaises(InvalidHeader) as context:
            Header.parse(b"{'fortran_order': False, 'shape': (2, 3), }")

        self.assertIn('descr', context.exception.reason)

    def test_missing_descr_value(self):
        with self.assertRaises(InvalidHeader):
            Header.parse(b"'descr':")

    def test_invalid_shape_integer(self):
        with self.assertRaises(InvalidHeader) as context:
            Header.parse(b"{'descr': '<f4', 'fortran_order': False, 'shape': (2, x, 3), }")

        self.assertIn('x', context.exception.reason)

    def test_negative_shape_dimension(self):
        with self.assertRaises(InvalidHeader):
            Header.parse(b"{'descr': '<f4', 'fortran_order': False, 'shape': (-1,), }")

    def test_shape_not_found(self):
        with self.assertRaises(InvalidHeader) as context:
            Header.parse(b"{'descr': '<f4', 'fortran_order': False, 'shape': [2, 3], }")

        self.assertIn('Shape not found', context.exception.reason)

    def test_unknown_endian(self):
        with self.assertRaises(InvalidHeader) as context:
            Header.parse(b"{'descr': 'f4', 'fortran_order': False, 'shape': (2,), }")

        self.assertIn('endian', context.exception.reason)

    def test_unsupported_dtype(self):
        for descr in (b'<f2', b'<c8', b'|S5'):
            with self.subTest(descr=descr):
                with self.assertRaises(InvalidHeader) as context:
                    Header.parse(b"{'descr': '" + descr + b"', 'fortran_order': False, 'shape': (2,), }")

                self.assertIn('Unsupported dtype', context.exception.reason)

    def test_non_ascii_header(self):
        with self.assertRaises(InvalidHeader):
            Header.parse("{'descr': '<f4', 'fortran_order': False, 'shape': (2,), 'é': 1}".encode('utf-8'))

    def test_invalid_header_is_value_error(self):
        with self.assertRaises(ValueError):
            Header.parse(b'')


if __name__ == '__main__':
    unittest.main()
