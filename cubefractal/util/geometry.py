import collections
import itertools
import math
import numbers


class Vector(collections.namedtuple("Vector", "x y z")):
    __slots__ = ()

    def __new__(cls, x, y, z=0):
        return super().__new__(cls, x, y, z)

    @classmethod
    def splat(cls, value):
        return cls(value, value, value)

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __truediv__(self, other):
        return Vector(self.x / other, self.y / other, self.z / other)

    def elementwise_mul(self, other):
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def elementwise_div(self, other):
        return Vector(self.x / other.x, self.y / other.y, self.z / other.z)

    def max(self):
        return max(self.x, self.y, self.z)

    def min(self):
        return min(self.x, self.y, self.z)


class BoundingBox(collections.namedtuple("BoundingBox", "a b")):
    __slots__ = ()

    def size(self):
        return self.b - self.a

    def midpoint(self):
        return (self.a + self.b) / 2


class Box(collections.namedtuple("Box", "center size")):
    """ Axis aligned cuboid given by its center and edge lengths along each axis.

    Size may be given as a single number for a cube.
    All coordinates must be finite and all edge lengths strictly positive,
    anything else raises ValueError. """
    __slots__ = ()

    def __new__(cls, center, size):
        center = Vector(*center)
        if isinstance(size, numbers.Real):
            size = Vector.splat(size)
        else:
            size = Vector(*size)

        if not all(math.isfinite(x) for x in itertools.chain(center, size)):
            raise ValueError("Box center and size must be finite, got {}, {}".format(center, size))
        if size.min() <= 0:
            raise ValueError("Box size must be positive along every axis, got {}".format(size))

        return super().__new__(cls, center, size)

    def _replace(self, **kwargs):
        return self.__class__(**dict(self._asdict(), **kwargs))

    def bounding_box(self):
        half = self.size / 2
        return BoundingBox(self.center - half, self.center + half)

    def volume(self):
        return self.size.x * self.size.y * self.size.z
