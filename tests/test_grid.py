import unittest
from math import prod
from itertools import product

from ndgrid import Grid, grid, DimensionMismatch, OutOfBounds, GridIndexError, ErrorKind
from ndgrid.backend import get_index_dtype
from utils import backends, row_major_indices

class TestGrid(unittest.TestCase):

    def setUp(self):
        self.sizes = [(5, 5), (10,), (2, 3, 4), (3, 1, 2, 2)]

    def test_construction(self):
        for sizes in self.sizes:
            g = Grid("default_value", sizes)
            self.assertEqual(len(g), prod(sizes))
            self.assertEqual(g.size, prod(sizes))
            self.assertEqual(g.ndims, len(sizes))
            self.assertEqual(g.axis_count, len(sizes))
            self.assertEqual(g.shape, sizes)
            self.assertTrue(all(v == "default_value" for v in g.buffer))

        self.assertEqual(Grid.new(0, [5, 5]), grid(0, 5, 5))
        self.assertEqual(len(Grid(0, [])), 1)
        self.assertEqual(len(Grid(0, [3, 0, 2])), 0)
        self.assertEqual(list(Grid(0, [3, 0, 2])), [])
        self.assertRaises(ValueError, Grid, 0, [3, -2])

    def test_default_copies(self):
        g = Grid([], [2, 2])
        g.get([0, 0]).append(1)
        self.assertEqual(g.get([0, 0]), [1])
        self.assertEqual(g.get([1, 1]), [])

    def test_translate_index(self):
        # 2d grid (10x10)
        g = Grid(0, [10, 10])
        for target, value in [([5, 9], 5), ([0, 5], 32), ([5, 0], 25), ([9, 9], 56), ([0, 0], 7)]:
            g.set(target, value)
        buffer = g.buffer
        self.assertEqual(buffer[59], 5)
        self.assertEqual(buffer[5], 32)
        self.assertEqual(buffer[50], 25)
        self.assertEqual(buffer[99], 56)
        self.assertEqual(buffer[0], 7)

        # 3d grid (10x10x10)
        g = Grid(0, [10, 10, 10])
        for target, value in [([3, 7, 6], 12), ([0, 4, 3], 23), ([5, 0, 7], 32),
                              ([4, 6, 0], 63), ([9, 9, 9], 87), ([0, 0, 0], 34)]:
            g.set(target, value)
        buffer = g.buffer
        self.assertEqual(buffer[376], 12)
        self.assertEqual(buffer[43], 23)
        self.assertEqual(buffer[507], 32)
        self.assertEqual(buffer[460], 63)
        self.assertEqual(buffer[999], 87)
        self.assertEqual(buffer[0], 34)

        # 4d grid (10x10x10x10)
        g = Grid(0, [10, 10, 10, 10])
        for target, value in [([5, 3, 7, 9], 20), ([9, 9, 9, 9], 24), ([0, 0, 0, 0], 10)]:
            g.set(target, value)
        buffer = g.buffer
        self.assertEqual(buffer[5379], 20)
        self.assertEqual(buffer[9999], 24)
        self.assertEqual(buffer[0], 10)
        self.assertEqual(buffer[8654], 0)
        self.assertEqual(buffer[23], 0)

    def test_monotonic(self):
        for sizes in self.sizes:
            g = Grid(0, sizes)
            offsets = [g.translate_index(idx) for idx in row_major_indices(*sizes)]
            self.assertEqual(offsets, list(range(g.size)))

    def test_reverse_index(self):
        for sizes in self.sizes:
            g = Grid(0, sizes)
            for idx in row_major_indices(*sizes):
                self.assertEqual(g.reverse_index(g.translate_index(idx)), idx)
            self.assertRaises(OutOfBounds, g.reverse_index, g.size)

    def test_set_get(self):
        for sizes in self.sizes:
            g = Grid(None, sizes)
            for i, idx in enumerate(row_major_indices(*sizes)):
                g.set(idx, i)
                self.assertEqual(g.get(idx), i)
            self.assertEqual(list(g.buffer), list(range(g.size)))

    def test_errors(self):
        g = Grid(0, [4, 5])
        for op in (g.get, g.get_mut, lambda t: g.set(t, 1)):
            self.assertRaises(DimensionMismatch, op, [1])
            self.assertRaises(DimensionMismatch, op, [1, 2, 3])
            self.assertRaises(OutOfBounds, op, [4, 0])
            self.assertRaises(OutOfBounds, op, [3, 5])
            self.assertRaises(GridIndexError, op, [0, -1])
        with self.assertRaises(GridIndexError) as ctx:
            g.get([9, 9, 9])
        self.assertEqual(ctx.exception.kind, ErrorKind.DIMENSION_MISMATCH)
        self.assertTrue(all(v == 0 for v in g.buffer))

    def test_aggregate_bound_check(self):
        # a coordinate beyond its extent is accepted as long as the offset stays in the buffer
        g = Grid(0, [4, 5])
        self.assertEqual(g.translate_index([0, 7]), 7)
        self.assertEqual(g.reverse_index(7), (1, 2))

    def test_item_access(self):
        g = grid(0, 3, 4)
        g[2, 3] = 5
        self.assertEqual(g[2, 3], 5)
        self.assertEqual(g[[2, 3]], 5)
        self.assertEqual(g.buffer[11], 5)
        line = grid("x", 3)
        line[1] = "y"
        self.assertEqual(line.buffer, ("x", "y", "x"))
        point = Grid(1, [])
        point[()] = 2
        self.assertEqual(point.get([]), 2)
        self.assertRaises(IndexError, g.__getitem__, 12)

    def test_get_mut(self):
        g = Grid(0, [3, 3])
        with g.get_mut([1, 2]) as cell:
            self.assertEqual(cell.offset, 5)
            self.assertEqual(cell.index, (1, 2))
            cell.value += 3
            cell.set(cell.get() * 2)
        self.assertEqual(g.get([1, 2]), 6)
        self.assertFalse(cell.alive)

    def test_iteration(self):
        for sizes in self.sizes:
            g = Grid(0, sizes)
            for i, idx in enumerate(row_major_indices(*sizes)):
                g[idx] = i
            values = list(g.iter())
            self.assertEqual(len(values), g.size)
            self.assertEqual(values, list(g.buffer))
            self.assertEqual(list(g), values)

    def test_vectorized(self):
        for xp, sizes in product(backends, self.sizes):
            int_type = get_index_dtype(xp)
            g = Grid(0, sizes)
            idxs = xp.asarray(row_major_indices(*sizes), dtype=int_type).T
            offsets = g.translate_indices(idxs)
            self.assertTrue(xp.all(offsets == xp.arange(g.size, dtype=int_type)))
            self.assertTrue(xp.all(g.reverse_indices(offsets) == idxs))

    def test_eq(self):
        g1, g2 = Grid(0, [2, 2]), Grid(0, [2, 2])
        self.assertEqual(g1, g2)
        g2[1, 1] = 1
        self.assertNotEqual(g1, g2)
        self.assertNotEqual(Grid(0, [4]), Grid(0, [2, 2]))

if __name__ == '__main__':
    unittest.main()
