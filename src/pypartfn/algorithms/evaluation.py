import logging
from typing import Union

import numpy as np

from pypartfn.core.bounded import PartialFunction
from pypartfn.core.lower_bounded import LowerPartialFunction

logger = logging.getLogger(__name__)


def evaluate_array(function: Union[PartialFunction, LowerPartialFunction],
                   values: Union[np.ndarray, list, float]) -> np.ma.MaskedArray:
    """
    Evaluate a partial function at every point of an array.
    Args:
        function: Built bounded or lower-bounded partial function
        values: Points to evaluate at, any shape
    Returns:
        np.ma.MaskedArray: Float results with the same shape as values,
        masked wherever the function is undefined
    """
    points = np.asarray(values, dtype=float)
    data = np.zeros(points.shape, dtype=float)
    mask = np.zeros(points.shape, dtype=bool)
    for index, x in np.ndenumerate(points):
        result = function.eval(float(x))
        if result is None:
            mask[index] = True
        else:
            data[index] = result
    logger.debug("Evaluated %d points, %d undefined", points.size, int(mask.sum()))
    return np.ma.MaskedArray(data, mask=mask, shrink=False)
