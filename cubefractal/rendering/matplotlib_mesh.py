import matplotlib.pyplot as plt

from . import image


def render_mesh(mesh, filename=None, view_angle=None):
    """ Show the mesh in an interactive matplotlib window. """
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    image.draw_mesh(ax, mesh, view_angle)

    if filename is not None:
        fig.savefig(filename)

    plt.show()
