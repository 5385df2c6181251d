import unittest
from unittest import mock

import numpy as np

from pyresize.core import *
from pyresize.workload import ResizeWorkload


class ResizeWorkloadTest(unittest.TestCase):

    def test_execute(self):
        arr = np.arange(16, dtype=np.float32).reshape((1, 1, 4, 4))
        out = np.zeros((1, 1, 2, 2), dtype=np.float32)
        ResizeWorkload(ResizeDescriptor(2, 2, 'bilinear')).execute(arr, out)
        np.testing.assert_array_equal(np.array([[[[0, 2], [8, 10]]]], dtype=np.float32), out)

    def test_output_shape(self):
        workload = ResizeWorkload(ResizeDescriptor(7, 9, data_layout='NHWC'))
        self.assertEqual((2, 7, 9, 3), workload.get_output_shape((2, 4, 4, 3)))

    def test_quantized(self):
        arr = np.array([[[[0, 100]]]], dtype=np.uint8)
        out = np.zeros((1, 1, 1, 3), dtype=np.uint8)
        ResizeWorkload(ResizeDescriptor(1, 3, ResizeMethod.Bilinear)).execute(arr, out)
        np.testing.assert_array_equal(np.array([[[[0, 67, 100]]]], dtype=np.uint8), out)

    def test_quantized_infos(self):
        arr = np.array([[[[20, 40]]]], dtype=np.uint8)
        out = np.zeros((1, 1, 1, 4), dtype=np.uint8)
        in_info = TensorInfo.from_array(arr, quantization_scale=0.5, quantization_offset=20)
        out_info = TensorInfo.from_array(out, quantization_scale=1.0, quantization_offset=0)
        ResizeWorkload(ResizeDescriptor(1, 4, ResizeMethod.Bilinear)).execute(arr, out, in_info, out_info)
        # dequantized input is [0, 10]
        np.testing.assert_array_equal(np.array([[[[0, 5, 10, 10]]]], dtype=np.uint8), out)

    def test_target_mismatch(self):
        arr = np.zeros((1, 1, 4, 4), dtype=np.float32)
        out = np.zeros((1, 1, 3, 3), dtype=np.float32)
        with self.assertRaises(InvalidShapeError):
            ResizeWorkload(ResizeDescriptor(2, 2)).execute(arr, out)

    def test_batch_mismatch(self):
        arr = np.zeros((2, 1, 4, 4), dtype=np.float32)
        out = np.zeros((1, 1, 2, 2), dtype=np.float32)
        with self.assertRaises(InvalidShapeError):
            ResizeWorkload(ResizeDescriptor(2, 2)).execute(arr, out)

    def test_shapes_validated_once(self):
        arr = np.zeros((1, 1, 2, 2), dtype=np.float32)
        out = np.zeros((1, 1, 1, 1), dtype=np.float32)
        with mock.patch('pyresize.resize.validate_resize_infos', wraps=validate_resize_infos) as validate:
            ResizeWorkload(ResizeDescriptor(1, 1)).execute(arr, out)
        self.assertEqual(1, validate.call_count)

    def test_output_rank(self):
        arr = np.zeros((1, 1, 2, 2), dtype=np.float32)
        out = np.zeros((1, 1, 1), dtype=np.float32)
        with self.assertRaises(InvalidShapeError):
            ResizeWorkload(ResizeDescriptor(1, 1)).execute(arr, out)

    def test_logs_execution(self):
        arr = np.zeros((1, 1, 2, 2), dtype=np.float32)
        out = np.zeros((1, 1, 1, 1), dtype=np.float32)
        with self.assertLogs('pyresize.workload', level='DEBUG') as logs:
            ResizeWorkload(ResizeDescriptor(1, 1)).execute(arr, out)
        self.assertEqual(1, len(logs.records))
        self.assertIn('NearestNeighbor', logs.output[0])


if __name__ == '__main__':
    unittest.main()
