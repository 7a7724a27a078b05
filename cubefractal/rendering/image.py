import numpy
import PIL.Image
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import art3d

from .. import generator
from . import render_params

_DPI = 100


def face_colors(triangles):
    """ Flat shaded RGB color for every triangle of a (n, 3, 3) array. """
    normals = numpy.cross(triangles[:, 1] - triangles[:, 0],
                          triangles[:, 2] - triangles[:, 0])
    lengths = numpy.linalg.norm(normals, axis=1, keepdims=True)
    normals = normals / numpy.where(lengths == 0, 1, lengths)

    diffuse = numpy.clip(normals @ numpy.array(render_params.light), 0, 1)
    intensity = render_params.ambient + (1 - render_params.ambient) * diffuse

    return numpy.outer(intensity, numpy.array(render_params.surface))


def draw_mesh(ax, mesh, view_angle=None):
    """ Draw the mesh into 3D matplotlib axes and fit the view to it. """
    triangles = mesh.triangles()
    if len(triangles):
        ax.add_collection3d(art3d.Poly3DCollection(triangles,
                                                   facecolors=face_colors(triangles),
                                                   linewidths=0))

    box = mesh.bounding_box()
    if box is None:
        box = generator.DEFAULT_BOX.bounding_box()
    midpoint = box.midpoint()
    half = box.size().max() / 2

    ax.set_xlim(midpoint.x - half, midpoint.x + half)
    ax.set_ylim(midpoint.y - half, midpoint.y + half)
    ax.set_zlim(midpoint.z - half, midpoint.z + half)
    ax.set_box_aspect((1, 1, 1))

    if view_angle is None:
        view_angle = render_params.default_view_angle
    elevation, azimuth = view_angle
    ax.view_init(elev=elevation, azim=azimuth)


def render_pil_image(mesh, size=(1024, 768), view_angle=None):
    figure = Figure(figsize=(size[0] / _DPI, size[1] / _DPI), dpi=_DPI,
                    facecolor=tuple(render_params.background))
    canvas = FigureCanvasAgg(figure)

    ax = figure.add_axes((0, 0, 1, 1), projection="3d")
    ax.set_facecolor(tuple(render_params.background))
    ax.set_axis_off()
    draw_mesh(ax, mesh, view_angle)

    canvas.draw()
    image = PIL.Image.fromarray(numpy.asarray(canvas.buffer_rgba())).convert("RGB")

    if image.size != tuple(size):
        # Figure size in inches doesn't always round to the exact pixel count
        image = image.resize(tuple(size))

    return image


def render_image(mesh, filename, size=(1024, 768), view_angle=None):
    render_pil_image(mesh, size, view_angle).save(filename)
