from .. import util


def _color(c):
    return util.Vector(*(((c >> shift) & 0xff) / 255 for shift in [16, 8, 0]))


background = _color(0x000000)
surface = _color(0xaaaaaa)

# Fraction of surface color visible on faces turned away from the light
ambient = 0.25
light = util.Vector(1, 3, 2) / 14 ** 0.5  # Unit light direction

# Elevation and azimuth in degrees
default_view_angle = (30, -60)
