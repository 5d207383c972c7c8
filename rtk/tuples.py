"""Homogeneous 4-tuples representing points and vectors in 3D space.

A point has w == 1 and a vector has w == 0. The distinction is recorded in a tag when the tuple is constructed.
Operators carry the tag along from their operands rather than rederiving it from w, so e.g. the sum of two points
is still tagged a point even though its w is 2.

Components are single precision.
"""
from enum import Enum
from numbers import Real
from typing import Iterator
import numpy as np
from . import _utility
from .types import Sequence4, Vector4, Scalar

__all__ = ['TupleType', 'Tuple', 'point', 'vector', 'origin', 'xhat', 'yhat', 'zhat', 'unit_vectors']


class TupleType(Enum):
    POINT = 'point'
    VECTOR = 'vector'


# Tag of a - b, keyed by (a.tuple_type, b.tuple_type).
_DIFFERENCE_TYPES = {
    (TupleType.POINT, TupleType.POINT): TupleType.VECTOR,
    (TupleType.POINT, TupleType.VECTOR): TupleType.POINT,
    (TupleType.VECTOR, TupleType.POINT): TupleType.POINT,
    (TupleType.VECTOR, TupleType.VECTOR): TupleType.VECTOR,
}


class Tuple:
    """Immutable (x, y, z, w) with a point/vector tag.

    The tag is POINT if w is exactly 1, otherwise VECTOR.

    Args:
        x, y, z, w: Components. Converted to float32.
    """
    __slots__ = ('_xyzw', '_tuple_type')

    def __init__(self, x: Scalar, y: Scalar, z: Scalar, w: Scalar):
        with np.errstate(over='ignore'):
            xyzw = np.array((x, y, z, w), np.float32)
        self._set(xyzw, TupleType.POINT if xyzw[3] == 1. else TupleType.VECTOR)

    def _set(self, xyzw: np.ndarray, tuple_type: TupleType):
        xyzw.flags.writeable = False
        self._xyzw = xyzw
        self._tuple_type = tuple_type

    @classmethod
    def new(cls, x: float, y: float, z: float, w: float) -> 'Tuple':
        return cls(x, y, z, w)

    @classmethod
    def _tagged(cls, xyzw: np.ndarray, tuple_type: TupleType) -> 'Tuple':
        # Bypasses the tag derivation in __init__.
        t = cls.__new__(cls)
        t._set(np.asarray(xyzw, np.float32), tuple_type)
        return t

    @classmethod
    def from_array(cls, xyzw: Sequence4, tuple_type: TupleType = None) -> 'Tuple':
        """Make tuple from 3 or 4 components.

        With 3 components, tuple_type is required and sets w. With 4, tuple_type must be omitted and is derived from w.
        """
        xyzw = np.asarray(xyzw, np.float32)
        if xyzw.shape == (4,) and tuple_type is None:
            return cls(*xyzw)
        if xyzw.shape == (3,) and tuple_type is not None:
            return cls(*xyzw, 1. if TupleType(tuple_type) is TupleType.POINT else 0.)
        raise ValueError(f'Expected 4 components, or 3 components and a tuple type, not shape {xyzw.shape} and '
                         f'{tuple_type}.')

    @property
    def x(self) -> np.float32:
        return self._xyzw[0]

    @property
    def y(self) -> np.float32:
        return self._xyzw[1]

    @property
    def z(self) -> np.float32:
        return self._xyzw[2]

    @property
    def w(self) -> np.float32:
        return self._xyzw[3]

    @property
    def tuple_type(self) -> TupleType:
        return self._tuple_type

    @property
    def is_point(self) -> bool:
        return self._tuple_type is TupleType.POINT

    @property
    def is_vector(self) -> bool:
        return self._tuple_type is TupleType.VECTOR

    def to_array(self) -> Vector4:
        """Writable float32 copy of (x, y, z, w)."""
        return self._xyzw.copy()

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self._xyzw)

    def __len__(self):
        return 4

    def __add__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        with np.errstate(over='ignore', invalid='ignore'):
            xyzw = self._xyzw + other._xyzw
        return Tuple._tagged(xyzw, self._tuple_type)

    def __sub__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        with np.errstate(over='ignore', invalid='ignore'):
            xyzw = self._xyzw - other._xyzw
        return Tuple._tagged(xyzw, _DIFFERENCE_TYPES[self._tuple_type, other._tuple_type])

    def __neg__(self):
        return Tuple._tagged(-self._xyzw, self._tuple_type)

    def __mul__(self, scalar: Scalar):
        # Scalar on the right only.
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(over='ignore', invalid='ignore'):
            xyzw = self._xyzw*np.float32(scalar)
        return Tuple._tagged(xyzw, self._tuple_type)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._tuple_type is other._tuple_type and bool(np.all(self._xyzw == other._xyzw))

    def __hash__(self):
        return hash((tuple(float(c) for c in self._xyzw), self._tuple_type))

    def __reduce__(self):
        return Tuple._tagged, (self.to_array(), self._tuple_type)

    def __repr__(self):
        x, y, z, w = (float(c) for c in self._xyzw)
        return f'<Tuple {self._tuple_type.name} x={x!r} y={y!r} z={z!r} w={w!r}>'

    def __str__(self):
        precision = _utility.get_config()['print_precision']
        components = ', '.join(f'{c:.{precision}g}' for c in self._xyzw)
        return f'{self._tuple_type.value}({components})'


def point(x: int, y: int, z: int) -> Tuple:
    return Tuple(x, y, z, 1.)


def vector(x: int, y: int, z: int) -> Tuple:
    return Tuple(x, y, z, 0.)


xhat = vector(1, 0, 0)
yhat = vector(0, 1, 0)
zhat = vector(0, 0, 1)
origin = point(0, 0, 0)
unit_vectors = xhat, yhat, zhat
