from .value_types import (
    T,
    Scalar,
    ScalarVector,
    Position,
    SamplePair,
    SampleQuad,
    ColorMode,
    is_alpha_mode,
)

__all__ = [
    "T",
    "Scalar",
    "ScalarVector",
    "Position",
    "SamplePair",
    "SampleQuad",
    "ColorMode",
    "is_alpha_mode",
]
