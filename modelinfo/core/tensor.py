# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tensor Descriptor and Shape Profile
"""

from dataclasses import dataclass, field
from typing import Optional

from .types import Dim, Direction, Dynamic, ElementType, LayoutFormat


def _check_dims(dims: tuple, what: str) -> None:
    for d in dims:
        if d is not Dynamic and (not isinstance(d, int) or d < 0):
            raise ValueError(f"{what} has invalid dimension {d!r}")


@dataclass(frozen=True)
class ShapeProfile:
    """
    One optimization-profile range of a tensor.

    Profile 0 is the primary profile; every compiled engine has it.
    """

    profile_index: int
    min_shape: tuple[Dim, ...] = ()
    opt_shape: tuple[Dim, ...] = ()
    max_shape: tuple[Dim, ...] = ()

    def __post_init__(self):
        if self.profile_index < 0:
            raise ValueError(f"profile_index must be >= 0, got {self.profile_index}")
        for attr in ("min_shape", "opt_shape", "max_shape"):
            dims = tuple(getattr(self, attr))
            _check_dims(dims, attr)
            object.__setattr__(self, attr, dims)

    def shapes(self) -> tuple[tuple[Dim, ...], ...]:
        """Get the (min, opt, max) triple."""
        return (self.min_shape, self.opt_shape, self.max_shape)


@dataclass(frozen=True)
class TensorDescriptor:
    """
    Describes one model input or output without holding any data.

    Both backends produce these; the renderer only reads them.
    `index` counts within the tensor's direction, in artifact order.
    """

    index: int
    direction: Direction
    name: str = ""
    element_type: ElementType = ElementType.Unknown
    shape: tuple[Dim, ...] = ()
    layout_format: Optional[LayoutFormat] = None
    profiles: tuple[ShapeProfile, ...] = field(default_factory=tuple)
    is_shape_tensor: bool = False

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        shape = tuple(self.shape)
        _check_dims(shape, "shape")
        object.__setattr__(self, "shape", shape)

        profiles = tuple(self.profiles)
        if profiles and profiles[0].profile_index != 0:
            raise ValueError(
                f"first profile of '{self.name}' must be profile 0, "
                f"got {profiles[0].profile_index}"
            )
        object.__setattr__(self, "profiles", profiles)

    @property
    def is_input(self) -> bool:
        return self.direction is Direction.INPUT

    @property
    def primary_profile(self) -> Optional[ShapeProfile]:
        """Get profile 0, or None for descriptors without profiles."""
        return self.profiles[0] if self.profiles else None

    def rank(self) -> int:
        """Get number of dimensions."""
        return len(self.shape)

    def __repr__(self) -> str:
        return (
            f"TensorDescriptor(index={self.index}, "
            f"direction={self.direction.value}, name='{self.name}', "
            f"element_type={self.element_type.name.lower()}, shape={list(self.shape)})"
        )
