"""Define type aliases purely for documentation purposes."""
import numpy as np
from typing import Sequence, Union

# Sequences of a certain length.
Sequence3 = Sequence
Sequence4 = Sequence

# Numpy arrays of a certain shape. float32 implied.
Vector4 = np.ndarray # (4,)

Scalar = Union[int, float, np.floating]
