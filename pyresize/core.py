from enum import Enum
from typing import Union, Tuple, Optional

import numpy as np

__all__ = ['replace_at_index', 'get_item_for_type_of', 'InvalidShapeError', 'DataLayout', 'DataLayoutIndexed',
           'ResizeMethod', 'DataType', 'TensorInfo', 'ResizeDescriptor', 'validate_resize_infos', 'DEFAULT_METHOD', 'DEFAULT_LAYOUT']


def replace_at_index(tup: tuple, idx: int, value) -> tuple:
    assert 0 <= idx < len(tup)
    return tup[:idx] + (value,) + tup[idx + 1:]


def get_item_for_type_of(obj, type_map, default=(None, None)):
    return next((t for t in type_map.items() if isinstance(obj, t[0])), default)


class InvalidShapeError(ValueError):
    pass


# LAYOUTS

class DataLayout(Enum):
    NCHW = 'NCHW'
    NHWC = 'NHWC'

    @classmethod
    def parse(cls, value: Union['DataLayout', str]) -> 'DataLayout':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f'Unrecognized data layout: {value}') from None


class DataLayoutIndexed:
    """
    Positions of the logical axes for a 4-D shape in a given layout. The batch is always the first axis.
    """

    def __init__(self, layout: Union[DataLayout, str]):
        self.layout = DataLayout.parse(layout)
        if self.layout == DataLayout.NCHW:
            self.channels_index, self.height_index, self.width_index = 1, 2, 3
        else:
            self.height_index, self.width_index, self.channels_index = 1, 2, 3

    def get_index(self, shape: Tuple[int, ...], n: int, c: int, h: int, w: int) -> int:
        """
        Flat element offset of the logical coordinate (n, c, h, w) in a tensor of the given shape.
        """
        if self.layout == DataLayout.NCHW:
            num_ch, height, width = shape[1], shape[2], shape[3]
            return ((n * num_ch + c) * height + h) * width + w
        else:
            height, width, num_ch = shape[1], shape[2], shape[3]
            return ((n * height + h) * width + w) * num_ch + c

    def get_dims(self, shape: Tuple[int, ...]) -> Tuple[int, int, int, int]:
        """
        :return: (batch, channels, height, width) of the shape
        """
        return shape[0], shape[self.channels_index], shape[self.height_index], shape[self.width_index]

    def make_shape(self, batch: int, num_ch: int, height: int, width: int) -> Tuple[int, int, int, int]:
        shape = [batch, 0, 0, 0]
        shape[self.channels_index] = num_ch
        shape[self.height_index] = height
        shape[self.width_index] = width
        return tuple(shape)

    def __repr__(self):
        return f'DataLayoutIndexed({self.layout.value})'


# METHODS

class ResizeMethod(Enum):
    NearestNeighbor = 'nearest_neighbor'
    Bilinear = 'bilinear'

    @classmethod
    def parse(cls, value) -> 'ResizeMethod':
        # anything that is not recognized behaves as nearest neighbor
        if isinstance(value, cls):
            return value
        name = str(value).lower()
        return cls.Bilinear if name == cls.Bilinear.value else cls.NearestNeighbor


DEFAULT_METHOD = ResizeMethod.NearestNeighbor
DEFAULT_LAYOUT = DataLayout.NCHW


# TENSOR INFO

class DataType(Enum):
    Float32 = 'float32'
    Float16 = 'float16'
    QAsymmU8 = 'qasymm_u8'
    QSymmS16 = 'qsymm_s16'


class TensorInfo:
    DTYPE_MAP = {
        np.dtype(np.float32): DataType.Float32,
        np.dtype(np.float64): DataType.Float32,
        np.dtype(np.float16): DataType.Float16,
        np.dtype(np.uint8): DataType.QAsymmU8,
        np.dtype(np.int16): DataType.QSymmS16
    }

    def __init__(self, shape: Tuple[int, ...], data_type: DataType = DataType.Float32, quantization_scale: float = 1.0,
                 quantization_offset: int = 0):
        if data_type == DataType.QSymmS16 and quantization_offset != 0:
            raise ValueError(f'Symmetric quantization needs a zero offset, got {quantization_offset}')
        self.shape = tuple(int(d) for d in shape)
        self.data_type = data_type
        self.quantization_scale = float(quantization_scale)
        self.quantization_offset = int(quantization_offset)

    @classmethod
    def from_array(cls, arr: np.ndarray, quantization_scale: float = 1.0, quantization_offset: int = 0) -> 'TensorInfo':
        data_type = cls.DTYPE_MAP.get(arr.dtype)
        if data_type is None:
            raise TypeError(f'Unsupported array type: {arr.dtype}')
        return cls(arr.shape, data_type, quantization_scale, quantization_offset)

    @property
    def num_dimensions(self) -> int:
        return len(self.shape)

    @property
    def num_elements(self) -> int:
        return int(np.prod(self.shape, dtype=np.int64))

    def with_shape(self, shape: Tuple[int, ...]) -> 'TensorInfo':
        return TensorInfo(shape, self.data_type, self.quantization_scale, self.quantization_offset)

    def _key(self) -> tuple:
        return self.shape, self.data_type, self.quantization_scale, self.quantization_offset

    def __eq__(self, other):
        return isinstance(other, TensorInfo) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f'TensorInfo(shape={self.shape}, data_type={self.data_type.name}, scale={self.quantization_scale}, ' \
               f'offset={self.quantization_offset})'


class ResizeDescriptor:
    def __init__(self, target_height: int, target_width: int, method=DEFAULT_METHOD, data_layout: Union[DataLayout, str] = DEFAULT_LAYOUT):
        self.target_height = target_height
        self.target_width = target_width
        self.method = ResizeMethod.parse(method)
        self.data_layout = DataLayout.parse(data_layout)

    def __repr__(self):
        return f'ResizeDescriptor({self.target_height}x{self.target_width}, {self.method.name}, {self.data_layout.value})'


def validate_resize_infos(input_info: TensorInfo, output_info: TensorInfo, layout: Optional[DataLayoutIndexed] = None) -> None:
    layout = layout or DataLayoutIndexed(DEFAULT_LAYOUT)
    for name, info in (('input', input_info), ('output', output_info)):
        if info.num_dimensions != 4:
            raise InvalidShapeError(f'The {name} tensor must have 4 dimensions, got shape {info.shape}')

    in_n, in_c, in_h, in_w = layout.get_dims(input_info.shape)
    out_n, out_c, out_h, out_w = layout.get_dims(output_info.shape)
    if in_n != out_n:
        raise InvalidShapeError(f'Batch sizes do not match: {in_n} != {out_n}')
    if in_c != out_c:
        raise InvalidShapeError(f'Channel counts do not match: {in_c} != {out_c}')
    if min(in_h, in_w) < 1:
        raise InvalidShapeError(f'The input spatial size must be at least 1x1, got {in_h}x{in_w}')
    if min(out_h, out_w) < 1:
        raise InvalidShapeError(f'The output spatial size must be at least 1x1, got {out_h}x{out_w}')
