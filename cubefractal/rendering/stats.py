import collections


def mesh_stats(mesh):
    """ Return ordered mapping of human readable statistics of the mesh. """
    stats = collections.OrderedDict()
    stats["boxes"] = mesh.box_count
    stats["vertices"] = mesh.vertex_count
    stats["triangles"] = mesh.triangle_count

    box = mesh.bounding_box()
    if box is None:
        stats["bounding box"] = "empty"
    else:
        stats["bounding box"] = "({:g}, {:g}, {:g}) - ({:g}, {:g}, {:g})".format(*box.a, *box.b)

    stats["volume"] = "{:g}".format(mesh.volume())
    return stats


def render_stats(mesh, filename=None):
    lines = ["{}: {}".format(name, value) for name, value in mesh_stats(mesh).items()]

    if filename is None:
        for line in lines:
            print(line)
    else:
        with open(filename, "w") as fp:
            for line in lines:
                print(line, file=fp)
