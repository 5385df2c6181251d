from functools import wraps
from typing import Union, Optional

import PIL.Image
import numpy as np
from PIL.Image import Image as PILImage

from pyresize.core import *
from pyresize.workload import ResizeWorkload

__all__ = ['TYPE_CONVERTER_MAP', 'convert_type', 'converting', 'auto_plot', 'resize_array', 'resize_image', 'show_resize_comparison']


# CONVERSION UTILS

TYPE_CONVERTER_MAP = {
    (np.ndarray, PILImage): PIL.Image.fromarray,
    (PILImage, np.ndarray): np.array
}  # (from_type, to_type) -> type conversion func


def convert_type(obj, to_type: Optional[type]):
    if to_type is None or isinstance(obj, to_type):
        return obj
    converters = {from_type: conv for (from_type, tt), conv in TYPE_CONVERTER_MAP.items() if tt == to_type}
    converter_func = get_item_for_type_of(obj, converters)[1]
    if converter_func is None:
        raise TypeError(f'Not possible to convert from {type(obj)} to {to_type}!!!')
    return converter_func(obj)


def converting(to: type, argument: Union[int, str] = 0, preserve_type: bool = False):
    """
    Decorator that converts one argument of the function before calling it.

    :param to: the type to which the indicated argument should be converted BEFORE calling the function
    :param argument: position of the argument to convert; an integer for positional args, a string for kwargs
    :param preserve_type: if True, the output is converted back to the original type of the input
    """

    def convert_decorator(func):
        @wraps(func)
        def decorated(*args, **kwargs):
            input = args[argument] if isinstance(argument, int) else kwargs[argument]
            output_type = type(input) if preserve_type else None
            input_converted = convert_type(input, to)

            if isinstance(argument, int):
                args = replace_at_index(args, argument, input_converted)
            else:
                kwargs[argument] = input_converted

            outputs = func(*args, **kwargs)
            return convert_type(outputs, output_type) if preserve_type else outputs

        return decorated

    return convert_decorator


# PLOTTING UTILS

def auto_plot(**plot_kwargs):
    def auto_axes_decorator(func):
        @wraps(func)
        def decorated(*args, **kwargs):
            _plt = None
            if kwargs.get('ax') is None:
                import matplotlib.pyplot as _plt
                if len(plot_kwargs) == 0:
                    kwargs['ax'] = _plt.axes()
                else:
                    _, kwargs['ax'] = _plt.subplots(**plot_kwargs)

            out = func(*args, **kwargs)

            if _plt:
                _plt.show()
            return out

        return decorated

    return auto_axes_decorator


# RESIZING

def resize_array(arr: np.ndarray, height: int, width: int, method=DEFAULT_METHOD, layout: Union[DataLayout, str] = DEFAULT_LAYOUT,
                 quantization_scale: float = 1.0, quantization_offset: int = 0) -> np.ndarray:
    """
    Resizes a numpy array, returning a new one of the same type.

    :param arr: a 4-D array in the given layout; 2-D arrays are taken as (H, W) and 3-D arrays as (C, H, W) for NCHW or (H, W, C)
                for NHWC, and the output keeps the same number of dimensions
    :param height: output height
    :param width: output width
    :param method: a `ResizeMethod` or its name; unknown values fall back to nearest neighbor
    :param layout: `DataLayout` or its name
    :param quantization_scale: quantization of the values, only used by integer arrays
    :param quantization_offset: see above
    :return: the resized array
    """
    assert arr.ndim in (2, 3, 4), f'Invalid shape: {arr.shape}'
    indexed = DataLayoutIndexed(layout)
    original_ndim = arr.ndim

    if arr.ndim == 2:
        arr = arr.reshape(indexed.make_shape(1, 1, *arr.shape))
    elif arr.ndim == 3:
        arr = arr[None]

    batch, num_ch, _, _ = indexed.get_dims(arr.shape)
    output = np.empty(indexed.make_shape(batch, num_ch, height, width), dtype=arr.dtype)

    input_info = TensorInfo.from_array(arr, quantization_scale, quantization_offset)
    output_info = input_info.with_shape(output.shape)
    workload = ResizeWorkload(ResizeDescriptor(height, width, method, indexed.layout))
    workload.execute(arr, output, input_info, output_info)

    if original_ndim == 2:
        return output.reshape((height, width))
    return output[0] if original_ndim == 3 else output


# this method will keep the type of the input, only making conversions when needed
@converting(to=np.ndarray, preserve_type=True)
def resize_image(img: np.ndarray, width: int, height: int, method=DEFAULT_METHOD) -> np.ndarray:
    # images are always channel-last: (H, W) or (H, W, C)
    return resize_array(img, height, width, method=method, layout=DataLayout.NHWC)


@auto_plot(nrows=1, ncols=3, figsize=(15, 5))
def show_resize_comparison(img, width: int, height: int, ax=None) -> None:
    img = convert_type(img, np.ndarray)
    ax[0].imshow(img)
    ax[0].set_title(f'Original {img.shape[:2]}')
    for a, method in zip(ax[1:], (ResizeMethod.NearestNeighbor, ResizeMethod.Bilinear)):
        a.imshow(resize_image(img, width, height, method=method))
        a.set_title(f'{method.name} {(height, width)}')
    for a in ax: a.axis('off')
