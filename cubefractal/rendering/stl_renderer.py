import numpy
import stl
import stl.mesh

from .. import util


def stl_mesh(mesh):
    """ Convert a generated mesh to `stl.mesh.Mesh`. """
    result = stl.mesh.Mesh(numpy.zeros(mesh.triangle_count, dtype=stl.mesh.Mesh.dtype))
    if mesh.triangle_count:
        result.vectors[:] = mesh.triangles()
        result.update_normals()
    return result


def render_stl(mesh, filename):
    with util.status_block("exporting {} triangles".format(mesh.triangle_count)):
        exported = stl_mesh(mesh)

    with util.status_block("saving"):
        exported.save(filename, mode=stl.Mode.BINARY)
