#!/usr/bin/env python3
""" Cross shaped fractal that keeps exactly the cells the menger sponge removes,
with children two thirds of their parent's height instead of one third. """

import cubefractal


def cross(metric):
    return metric == 0


rule = cubefractal.rules.custom("cross", 1, (3, 3, 1.5), cross)
config = cubefractal.configure(rule, 3)

if __name__ == "__main__":
    cubefractal.commandline_render(config, default_renderer="stats")
