import importlib.util
import unittest

import PIL.Image
import numpy as np
from PIL.Image import Image as PILImage
from matplotlib.figure import Figure

from pyresize.core import *
from pyresize.utils import *


class ResizeArrayTest(unittest.TestCase):

    def test_ranks(self):
        self.assertEqual((6, 8), resize_array(np.zeros((3, 4), dtype=np.float32), 6, 8).shape)
        self.assertEqual((2, 6, 8), resize_array(np.zeros((2, 3, 4), dtype=np.float32), 6, 8).shape)
        self.assertEqual((6, 8, 2), resize_array(np.zeros((3, 4, 2), dtype=np.float32), 6, 8, layout='NHWC').shape)
        self.assertEqual((1, 2, 6, 8), resize_array(np.zeros((1, 2, 3, 4), dtype=np.float32), 6, 8).shape)

    def test_invalid_rank(self):
        with self.assertRaises(AssertionError):
            resize_array(np.zeros(4, dtype=np.float32), 2, 2)

    def test_values_and_dtype(self):
        arr = np.arange(16, dtype=np.float64).reshape((4, 4))
        out = resize_array(arr, 2, 2, method='bilinear')
        self.assertEqual(np.float64, out.dtype)
        np.testing.assert_array_equal(np.array([[0, 2], [8, 10]]), out)

    def test_2d_same_for_both_layouts(self):
        arr = np.random.RandomState(1).rand(5, 3).astype(np.float32)
        np.testing.assert_array_equal(resize_array(arr, 4, 7, 'bilinear', 'NCHW'), resize_array(arr, 4, 7, 'bilinear', 'NHWC'))


class ResizeImageTest(unittest.TestCase):

    def test_pil_rgb(self):
        arr = np.random.RandomState(2).randint(256, size=(4, 6, 3)).astype(np.uint8)
        img = PIL.Image.fromarray(arr)
        resized = resize_image(img, 12, 8)
        self.assertIsInstance(resized, PILImage)
        self.assertEqual((12, 8), resized.size)
        np.testing.assert_array_equal(np.repeat(np.repeat(arr, 2, axis=0), 2, axis=1), np.array(resized))

    def test_pil_grayscale_identity(self):
        arr = np.random.RandomState(3).randint(256, size=(5, 7)).astype(np.uint8)
        resized = resize_image(PIL.Image.fromarray(arr), 7, 5, method=ResizeMethod.Bilinear)
        self.assertIsInstance(resized, PILImage)
        np.testing.assert_array_equal(arr, np.array(resized))

    def test_numpy(self):
        resized = resize_image(np.zeros((4, 4, 3), dtype=np.float32), 2, 3)
        self.assertIsInstance(resized, np.ndarray)
        self.assertEqual((3, 2, 3), resized.shape)

    def test_convert_type_error(self):
        with self.assertRaises(TypeError):
            convert_type([[0, 1]], PILImage)

    @unittest.skipIf(importlib.util.find_spec('torch') is None, 'torch is not installed')
    def test_torch(self):
        import torch
        import pyresize.optional.torch  # noqa: F401

        resized = resize_image(torch.arange(16, dtype=torch.float32).reshape((4, 4)), 2, 2)
        self.assertIsInstance(resized, torch.Tensor)
        self.assertEqual([[0, 2], [8, 10]], resized.tolist())


class ShowResizeComparisonTest(unittest.TestCase):

    def test_titles(self):
        ax = Figure().subplots(1, 3)
        show_resize_comparison(np.zeros((4, 4), dtype=np.float32), 8, 6, ax=ax)
        self.assertEqual('Original (4, 4)', ax[0].get_title())
        self.assertEqual('NearestNeighbor (6, 8)', ax[1].get_title())
        self.assertEqual('Bilinear (6, 8)', ax[2].get_title())


if __name__ == '__main__':
    unittest.main()
