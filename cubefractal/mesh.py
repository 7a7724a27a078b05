""" Merging leaf boxes into a single triangle mesh.

Box counts grow exponentially with depth, so instead of handing out one object
per box all boxes are packed into one vertex buffer and one index buffer that a
renderer or exporter can consume in a single pass. """

import collections

import numpy

from . import util

# Unit cube corners, vertex index = i + 2 * j + 4 * k
_CORNERS = numpy.array([(i, j, k)
                        for k in range(2)
                        for j in range(2)
                        for i in range(2)], dtype=numpy.float64) - 0.5

# Wound counter clockwise when looking from outside
_TRIANGLES = numpy.array([[0, 3, 1],
                          [0, 2, 3],
                          [1, 3, 5],
                          [3, 7, 5],
                          [4, 5, 6],
                          [5, 7, 6],
                          [0, 6, 2],
                          [0, 4, 6],
                          [0, 1, 5],
                          [0, 5, 4],
                          [3, 2, 6],
                          [3, 6, 7]], dtype=numpy.uint32)

VERTICES_PER_BOX = len(_CORNERS)
TRIANGLES_PER_BOX = len(_TRIANGLES)


class GeneratedMesh(collections.namedtuple("GeneratedMesh", "boxes vertices indices")):
    """ Result of one generation run.

    `boxes` is a tuple of leaf `util.Box`es, `vertices` a float32 array of shape
    (8 * box_count, 3) and `indices` a uint32 array of shape (12 * box_count, 3)
    indexing into vertices. """
    __slots__ = ()

    @classmethod
    def empty(cls):
        return cls((),
                   numpy.empty((0, 3), dtype=numpy.float32),
                   numpy.empty((0, 3), dtype=numpy.uint32))

    @property
    def box_count(self):
        return len(self.boxes)

    @property
    def vertex_count(self):
        return len(self.vertices)

    @property
    def triangle_count(self):
        return len(self.indices)

    @property
    def is_empty(self):
        return not self.boxes

    def triangles(self):
        """ Return array of shape (triangle_count, 3, 3) with corner coordinates of each triangle. """
        return self.vertices[self.indices]

    def bounding_box(self):
        """ Return bounding box of all boxes, or None if the mesh is empty. """
        if self.is_empty:
            return None

        data = _box_array(self.boxes)
        a = data[:, 0] - data[:, 1] / 2
        b = data[:, 0] + data[:, 1] / 2
        return util.BoundingBox(util.Vector(*a.min(axis=0).tolist()),
                                util.Vector(*b.max(axis=0).tolist()))

    def volume(self):
        """ Sum of volumes of all boxes.
        Boxes produced by anisotropic subdivision may overlap, in that case
        the overlap is counted multiple times. """
        return util.KahanSummation.sum(box.volume() for box in self.boxes)


class MeshAccumulator:
    """ Collects boxes and merges them into a `GeneratedMesh`.

    `add` has the signature expected by `subdivision.subdivide` for its emit
    callback. """

    def __init__(self):
        self._boxes = []

    def add(self, box):
        self._boxes.append(box)

    def extend(self, boxes):
        self._boxes.extend(boxes)

    def __len__(self):
        return len(self._boxes)

    def finish(self):
        """ Return the merged mesh of all boxes added so far. """
        boxes = tuple(self._boxes)
        if not boxes:
            return GeneratedMesh.empty()

        data = _box_array(boxes)
        centers = data[:, 0, numpy.newaxis, :]
        sizes = data[:, 1, numpy.newaxis, :]

        vertices = (centers + sizes * _CORNERS).reshape(-1, 3).astype(numpy.float32)

        first_vertex = numpy.arange(len(boxes), dtype=numpy.uint32) * VERTICES_PER_BOX
        indices = (_TRIANGLES + first_vertex[:, numpy.newaxis, numpy.newaxis]).reshape(-1, 3)

        return GeneratedMesh(boxes, vertices, indices)


def _box_array(boxes):
    """ Return float64 array of shape (len(boxes), 2, 3) with box centers and sizes. """
    return numpy.array(boxes, dtype=numpy.float64).reshape(len(boxes), 2, 3)


def accumulate(boxes):
    accumulator = MeshAccumulator()
    accumulator.extend(boxes)
    return accumulator.finish()
