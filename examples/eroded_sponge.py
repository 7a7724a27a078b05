#!/usr/bin/env python3
""" Inverted menger sponge where random branches stop subdividing early.
Run with --seed to get the same shape every time. """

import cubefractal

config = cubefractal.configure("menger", 3, invert=True, randomize=True)

if __name__ == "__main__":
    cubefractal.commandline_render(config)
