from abc import ABC, abstractmethod

import numpy as np

from pyresize.core import *

__all__ = ['BaseDecoder', 'BaseEncoder', 'Float32Decoder', 'Float32Encoder', 'Float16Decoder', 'Float16Encoder', 'QuantizedDecoder',
           'QuantizedEncoder', 'DECODER_MAP', 'ENCODER_MAP', 'make_decoder', 'make_encoder', 'quantize', 'dequantize']


def round_half_away(value: np.float32) -> np.float32:
    # adding 0.5 before the floor would round up the largest float32 below 0.5
    magnitude = np.abs(value)
    rounded = np.floor(magnitude)
    if magnitude - rounded >= np.float32(0.5):
        rounded += np.float32(1)
    return np.sign(value) * rounded


def quantize(value, scale: float, offset: int, dtype) -> int:
    limits = np.iinfo(dtype)
    q = int(round_half_away(np.float32(value) / np.float32(scale))) + offset
    return min(max(q, limits.min), limits.max)


def dequantize(value, scale: float, offset: int) -> np.float32:
    return np.float32(int(value) - offset) * np.float32(scale)


class _FlatAccessor:
    """
    Keeps a flat view of the array and the currently selected offset.
    """

    def __init__(self, arr: np.ndarray, info: TensorInfo):
        assert arr.size == info.num_elements, f'Array of size {arr.size} does not fit the tensor info {info}'
        self.info = info
        self.buffer = arr.reshape(-1)
        self.index = 0

    def seek(self, index: int):
        self.index = index
        return self


class BaseDecoder(_FlatAccessor, ABC):
    @abstractmethod
    def get(self) -> np.float32:
        pass


class BaseEncoder(_FlatAccessor, ABC):
    def __init__(self, arr: np.ndarray, info: TensorInfo):
        # writes must land in the caller's memory, not in a copy
        assert arr.flags.c_contiguous and arr.flags.writeable, 'The output array must be writeable and C-contiguous'
        super().__init__(arr, info)

    @abstractmethod
    def set(self, value) -> None:
        pass


class Float32Decoder(BaseDecoder):
    def get(self) -> np.float32:
        return np.float32(self.buffer[self.index])


class Float32Encoder(BaseEncoder):
    def set(self, value) -> None:
        self.buffer[self.index] = np.float32(value)


# half precision is widened on read; writes are narrowed by numpy
Float16Decoder = Float32Decoder
Float16Encoder = Float32Encoder


class QuantizedDecoder(BaseDecoder):
    def get(self) -> np.float32:
        return dequantize(self.buffer[self.index], self.info.quantization_scale, self.info.quantization_offset)


class QuantizedEncoder(BaseEncoder):
    def set(self, value) -> None:
        self.buffer[self.index] = quantize(value, self.info.quantization_scale, self.info.quantization_offset, self.buffer.dtype)


DECODER_MAP = {
    DataType.Float32: Float32Decoder,
    DataType.Float16: Float16Decoder,
    DataType.QAsymmU8: QuantizedDecoder,
    DataType.QSymmS16: QuantizedDecoder
}

ENCODER_MAP = {
    DataType.Float32: Float32Encoder,
    DataType.Float16: Float16Encoder,
    DataType.QAsymmU8: QuantizedEncoder,
    DataType.QSymmS16: QuantizedEncoder
}


def make_decoder(arr: np.ndarray, info: TensorInfo) -> BaseDecoder:
    decoder_class = DECODER_MAP.get(info.data_type)
    if decoder_class is None:
        raise TypeError(f'No decoder available for data type {info.data_type}')
    return decoder_class(arr, info)


def make_encoder(arr: np.ndarray, info: TensorInfo) -> BaseEncoder:
    encoder_class = ENCODER_MAP.get(info.data_type)
    if encoder_class is None:
        raise TypeError(f'No encoder available for data type {info.data_type}')
    return encoder_class(arr, info)
