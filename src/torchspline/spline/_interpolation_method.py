"""Capability set shared by interpolation strategies."""

from typing import Protocol, Sequence, Union, runtime_checkable

from torch import Tensor


@runtime_checkable
class InterpolationMethod(Protocol):
    """Interpolant of ``n + 1`` samples on equally spaced nodes in [a, b].

    Calling code that only needs ``init`` and ``evaluate`` can swap one
    strategy for another without further changes.
    """

    def init(
        self,
        a: float,
        b: float,
        n: int,
        y: Union[Tensor, Sequence[float]],
    ) -> None: ...

    def evaluate(self, z: Union[float, Tensor]) -> Tensor: ...
