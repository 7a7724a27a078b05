import sys
import os
import argparse
import importlib
import logging

import PIL.Image

from .. import util
from .. import rules
from .. import generator


def commandline_render(config=None, initial_box=None, default_renderer=None, argv=None):
    """ Reads commandline arguments, generates the fractal and passes it to a renderer.

    Values from `config` are used as defaults, commandline options override them.
    Returns the generated mesh. """

    parser = argparse.ArgumentParser(description='Generate and render a cube fractal')
    parser.add_argument('--rule', choices=list(rules.RULE_SETS),
                        help='Fractal rule set to use.')
    parser.add_argument('--depth', '-d', type=int,
                        help='Number of subdivision levels.')
    parser.add_argument('--invert', action='store_true',
                        help='Keep the cells the rule set would remove and vice versa.')
    parser.add_argument('--randomize', action='store_true',
                        help='Randomly stop subdividing some cells early.')
    parser.add_argument('--anisotropic', action='store_true',
                        help='Use the asymmetric child sizing mode.')
    parser.add_argument('--seed', type=int,
                        help='Seed for the randomize option.')
    parser.add_argument('--size', type=float,
                        help='Edge length of the initial cube.')
    parser.add_argument('--output', '-o',
                        help='File name of the output.')
    parser.add_argument('--renderer', '-r', choices=_renderers,
                        help='Renderer to use.')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log debug messages.')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = _merge_config(config, args)

    if args.size is not None:
        initial_box = args.size

    if args.renderer is not None:
        renderer = args.renderer
    else:
        renderer = default_renderer

    if args.output is not None:
        output = args.output
        if renderer is None:
            extension = os.path.splitext(output)[1].lower()
            try:
                renderer = _extensions[extension]
            except KeyError:
                parser.error('No renderer for file extension "{}"'.format(extension))
    else:
        if renderer is None:
            renderer = "image"
        ext = _renderers[renderer][1]
        if ext is not None:
            output = "output" + ext
        else:
            output = None

    with util.status_block("generating {} to depth {}".format(config.rule_set.name, config.depth)):
        mesh = generator.FractalGenerator(seed=args.seed).regenerate(config, initial_box)

    _render_one(renderer, mesh, output)
    return mesh


def _merge_config(config, args):
    if config is None:
        config = generator.configure(rules.MENGER, 2)

    return generator.configure(args.rule if args.rule is not None else config.rule_set,
                               args.depth if args.depth is not None else config.depth,
                               invert=args.invert or config.invert,
                               randomize=args.randomize or config.randomize,
                               anisotropic=args.anisotropic or config.anisotropic)


def _render_one(renderer, mesh, output):
    if output is not None:
        print("Rendering with renderer {} to file {}".format(renderer, output))
    else:
        print("Rendering with renderer {}".format(renderer))

    _renderers[renderer][0](mesh, filename=output)


def _register(name, module_name, extensions, default_extension=None):
    try:
        module = importlib.import_module("." + module_name, __name__)
    except ImportError as e:
        print("Renderer {} is unavailable due to import error: {}".format(name, str(e)))
        return

    if default_extension is None and len(extensions):
        default_extension = extensions[0]

    for extension in extensions:
        _extensions[extension] = name

    setattr(sys.modules[__name__], module_name, module)
    _renderers[name] = (getattr(module, "render_" + name), default_extension)


def _image_extensions():
    return sorted(extension for extension, image_format in PIL.Image.registered_extensions().items()
                  if image_format in PIL.Image.SAVE)


_renderers = {}
_extensions = {}

PIL.Image.init()

_register("image", "image", _image_extensions(), ".png")
_register("stl", "stl_renderer", [".stl"])
_register("mesh", "matplotlib_mesh", [])
_register("stats", "stats", [])
