"""Loss functions composed purely from graph-building ops."""

import logging
from typing import Sequence, Union

from ..aad.core.var import Value
from ..aad.core.errors import InvalidArgument

logger = logging.getLogger(__name__)


def mean_squared_error(ygt: Sequence[Union[Value, float]],
                       yout: Sequence[Value]) -> Value:
    """
    Sum of squared differences Σ (yout_i - ygt_i)^2.

    Args:
        ygt: expected values (plain numbers or Values)
        yout: predicted Values

    Returns:
        Scalar Value; calling .backward() on it fills every parameter's grad.
    """
    if len(ygt) != len(yout):
        raise InvalidArgument(
            f"Lengths of arguments don't match: {len(ygt)} targets, {len(yout)} predictions"
        )
    if not yout:
        raise InvalidArgument("mean_squared_error needs at least one prediction")

    loss = (yout[0] - ygt[0]) ** 2
    for yp, yt in zip(yout[1:], ygt[1:]):
        loss = loss + (yp - yt) ** 2
    logger.debug("loss: %.6f", float(loss.data))
    return loss
