from .errors import GeometryError, UndefinedNormalization, InsufficientVertices
from .vect import Vect
from .point import Point
from .matrix import Matrix
from .polygon import Polygon, PointIter
from .canonical import (
    flip_rotate,
    flip_reflect,
    reorient,
    variants,
    canonical_key,
    congruent,
)
from .config import CanonicalConfig, get_canonical_config, set_canonical_config

__all__ = [
    'GeometryError',
    'UndefinedNormalization',
    'InsufficientVertices',
    'Vect',
    'Point',
    'Matrix',
    'Polygon',
    'PointIter',
    'flip_rotate',
    'flip_reflect',
    'reorient',
    'variants',
    'canonical_key',
    'congruent',
    'CanonicalConfig',
    'get_canonical_config',
    'set_canonical_config',
]
