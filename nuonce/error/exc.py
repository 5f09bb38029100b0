from __future__ import annotations


class InvalidArgument(TypeError):
    """Argument given to a wrapping strategy is invalid."""

    pass
