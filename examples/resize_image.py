import logging

import PIL.Image
import numpy as np

from pyresize.core import ResizeMethod
from pyresize.utils import *


def main():
    logging.basicConfig(level=logging.DEBUG)
    # a small RGB gradient, so the difference between the methods is visible
    y, x = np.mgrid[0:8, 0:12]
    arr = np.stack([x * 20, y * 30, (x + y) * 10], axis=-1).astype(np.uint8)
    img = PIL.Image.fromarray(arr)

    resized = resize_image(img, 48, 32, method=ResizeMethod.Bilinear)
    print(resized.size)

    show_resize_comparison(img, 48, 32)


if __name__ == '__main__':
    main()
