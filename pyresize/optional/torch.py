import numpy as np
import torch

from pyresize.utils import TYPE_CONVERTER_MAP

TYPE_CONVERTER_MAP.update({
    (np.ndarray, torch.Tensor): torch.from_numpy,
    (torch.Tensor, np.ndarray): lambda t: t.cpu().detach().numpy(),
})
