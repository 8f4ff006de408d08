# aad/core/errors.py


class InvalidArgument(ValueError):
    """
    Raised when an operation receives an argument it cannot differentiate
    through, e.g. a node-valued exponent for `pow`, or an input vector whose
    length does not match a neuron's fan-in.
    """
