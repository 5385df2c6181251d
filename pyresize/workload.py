import logging
from typing import Optional

import numpy as np

from pyresize.access import make_decoder, make_encoder
from pyresize.core import *
from pyresize.resize import resize

__all__ = ['ResizeWorkload']

logger = logging.getLogger(__name__)


class ResizeWorkload:
    """
    A resize operator, ready to be executed on pre-allocated input and output arrays.
    """

    def __init__(self, descriptor: ResizeDescriptor):
        self.descriptor = descriptor
        self.layout = DataLayoutIndexed(descriptor.data_layout)

    def get_output_shape(self, input_shape) -> tuple:
        batch, num_ch, _, _ = self.layout.get_dims(input_shape)
        return self.layout.make_shape(batch, num_ch, self.descriptor.target_height, self.descriptor.target_width)

    def execute(self, input_arr: np.ndarray, output_arr: np.ndarray, input_info: Optional[TensorInfo] = None,
                output_info: Optional[TensorInfo] = None) -> None:
        """
        Runs the resize kernel. When the tensor infos are not given, they are taken from the arrays, with no quantization.

        :param input_arr: array holding the input tensor
        :param output_arr: array that will receive the output; it must be writeable and C-contiguous
        :param input_info: optional shape, type and quantization of the input
        :param output_info: optional shape, type and quantization of the output
        """
        input_info = input_info or TensorInfo.from_array(input_arr)
        output_info = output_info or TensorInfo.from_array(output_arr)

        # the rest of the shape contract is checked by the kernel
        if output_info.num_dimensions == 4:
            _, _, out_h, out_w = self.layout.get_dims(output_info.shape)
            if (out_h, out_w) != (self.descriptor.target_height, self.descriptor.target_width):
                raise InvalidShapeError(f'Output size {out_h}x{out_w} does not match the target size '
                                        f'{self.descriptor.target_height}x{self.descriptor.target_width}')

        logger.debug('Resizing %s to %s with %s', input_info, output_info, self.descriptor)

        decoder = make_decoder(input_arr, input_info)
        encoder = make_encoder(output_arr, output_info)
        resize(decoder, input_info, encoder, output_info, self.layout, self.descriptor.method)
