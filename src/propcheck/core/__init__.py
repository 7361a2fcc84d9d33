"""Core infrastructure: Generators, Reductions, Configuration, Logging.

Generators and reductions are used as namespaces, mirroring each other's
names for each base type:

    from propcheck.core import generator as gen, reduction as red

    pairs = gen.combine(gen.integer_nonneg(10), gen.string(4, gen.alphanumeric_char))
    shrink = red.combine(red.integer_nonneg, red.string(red.alphanum))
"""

from propcheck.core import generator, reduction
from propcheck.core.config import (
    RunnerSettings,
    deep_merge,
    list_presets,
    load_config,
    load_preset,
)
from propcheck.core.generator import Generator
from propcheck.core.logging import configure_logging, get_logger
from propcheck.core.reduction import Reduction

__all__ = [
    "Generator",
    "Reduction",
    "RunnerSettings",
    "configure_logging",
    "deep_merge",
    "generator",
    "get_logger",
    "list_presets",
    "load_config",
    "load_preset",
    "reduction",
]
