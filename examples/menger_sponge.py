#!/usr/bin/env python3
""" Generates a menger sponge after three iterations. """

import cubefractal

config = cubefractal.configure("menger", 3)

if __name__ == "__main__":
    cubefractal.commandline_render(config)
