from . import util
from . import rules
from . import subdivision
from . import mesh

from .rules import RuleSet, MENGER, JERUZALEM
from .config import GenerationConfig, GenerationOptions
from .guard import GenerationGuard
from .mesh import GeneratedMesh, MeshAccumulator, accumulate
from .generator import configure, regenerate, FractalGenerator, DEFAULT_BOX

from .rendering import commandline_render

# pylama:ignore=W0611
