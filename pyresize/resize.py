import numpy as np

from pyresize.access import BaseDecoder, BaseEncoder
from pyresize.core import *

__all__ = ['lerp', 'resize']


def lerp(a: np.float32, b: np.float32, w: np.float32) -> np.float32:
    return w * b + (np.float32(1) - w) * a


def resize(decoder: BaseDecoder, input_info: TensorInfo, encoder: BaseEncoder, output_info: TensorInfo, layout: DataLayoutIndexed,
           method: ResizeMethod = DEFAULT_METHOD) -> None:
    """
    Resizes the spatial dimensions of a 4-D tensor, writing every output element exactly once.

    The top-left corner of each output texel is projected into the input image (as TensorFlow and AndroidNN do) to find
    the interpolants and weights. This gives different results than projecting the centre of the output texels.

    :param decoder: reader bound to the input tensor
    :param input_info: shape and type of the input
    :param encoder: writer bound to the output tensor
    :param output_info: shape and type of the output; only height and width may differ from the input
    :param layout: which axes are channels, height and width
    :param method: `ResizeMethod.Bilinear` or `ResizeMethod.NearestNeighbor`; any other value is nearest neighbor
    """
    validate_resize_infos(input_info, output_info, layout)

    input_shape = input_info.shape
    output_shape = output_info.shape
    batch_size, num_ch, input_height, input_width = layout.get_dims(input_shape)
    _, _, output_height, output_width = layout.get_dims(output_shape)

    # how much to scale pixel coordinates in the output image to get the coordinates in the input image
    scale_y = np.float32(input_height) / np.float32(output_height)
    scale_x = np.float32(input_width) / np.float32(output_width)

    for n in range(batch_size):
        for c in range(num_ch):
            for y in range(output_height):
                # real-valued height coordinate in the input image, and the top row of the 2x2 area
                iy = np.float32(y) * scale_y
                fiy = np.floor(iy)
                y0 = int(fiy)
                yw = iy - fiy

                for x in range(output_width):
                    ix = np.float32(x) * scale_x
                    fix = np.floor(ix)
                    x0 = int(fix)
                    xw = ix - fix

                    # the texels below and to the right of (x0, y0), clamped to the border
                    x1 = min(x0 + 1, input_width - 1)
                    y1 = min(y0 + 1, input_height - 1)

                    if method == ResizeMethod.Bilinear:
                        input1 = decoder.seek(layout.get_index(input_shape, n, c, y0, x0)).get()
                        input2 = decoder.seek(layout.get_index(input_shape, n, c, y0, x1)).get()
                        input3 = decoder.seek(layout.get_index(input_shape, n, c, y1, x0)).get()
                        input4 = decoder.seek(layout.get_index(input_shape, n, c, y1, x1)).get()

                        ly0 = lerp(input1, input2, xw)  # along row y0
                        ly1 = lerp(input3, input4, xw)  # along row y1
                        value = lerp(ly0, ly1, yw)
                    else:
                        # only the two diagonal candidates are compared; ties go to (x0, y0)
                        distance0 = np.sqrt((fix - np.float32(x0)) ** 2 + (fiy - np.float32(y0)) ** 2)
                        distance1 = np.sqrt((fix - np.float32(x1)) ** 2 + (fiy - np.float32(y1)) ** 2)
                        x_nearest, y_nearest = (x0, y0) if distance0 <= distance1 else (x1, y1)
                        value = decoder.seek(layout.get_index(input_shape, n, c, y_nearest, x_nearest)).get()

                    encoder.seek(layout.get_index(output_shape, n, c, y, x)).set(value)
