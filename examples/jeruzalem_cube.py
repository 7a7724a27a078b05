#!/usr/bin/env python3
""" Jeruzalem cube, 76 of 125 cells kept on each level. """

import cubefractal

config = cubefractal.configure(cubefractal.JERUZALEM, 2)

if __name__ == "__main__":
    cubefractal.commandline_render(config, default_renderer="stl")
