from .config import ReductionConfig, get_reduction_config, set_reduction_config
from .fraction import DomainError, Fraction, gcd
from .matrix import Matrix2x2, Matrix3x3, det
from .predicates import same_side, seg_contains, seg_intersection, seg_intersects, sgn, side
from .primitives import NumericType, Point, Segment

__all__ = [
    'NumericType',
    'Point',
    'Segment',
    'Matrix2x2',
    'Matrix3x3',
    'det',
    'gcd',
    'Fraction',
    'DomainError',
    'ReductionConfig',
    'get_reduction_config',
    'set_reduction_config',
    'sgn',
    'side',
    'same_side',
    'seg_contains',
    'seg_intersects',
    'seg_intersection',
]
