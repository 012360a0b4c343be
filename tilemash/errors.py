"""Error taxonomy.

Every failure is raised synchronously to the caller of an operation and none
is retried internally:

* :class:`EmptyInputError` - no placements were given.
* :class:`UnresolvedHandleError` - one or more handles are not loaded yet; the
  caller may retry once loading completes.
* :class:`FormatMismatchError` - a tile does not match the compositor's
  :class:`~tilemash.components.TileSpec`.
* :class:`UnsupportedFormatError` - the operation only handles 4-byte pixels.
* :class:`BufferSizeError` - a buffer's byte length disagrees with its size.
"""

from typing import Iterable, Tuple

from tilemash.types import Handle


class TextureError(Exception):
    """Base class for all errors raised by tilemash operations."""


class EmptyInputError(TextureError, ValueError):
    def __init__(self, message: str = "No textures were provided") -> None:
        super().__init__(message)


class UnresolvedHandleError(TextureError, LookupError):
    """Raised when the image provider cannot resolve some handles.

    Attributes:
        handles: The unresolved handles, in the order they were requested.
    """

    handles: Tuple[Handle, ...]

    def __init__(self, handles: Iterable[Handle]) -> None:
        self.handles = tuple(handles)
        listed = ", ".join(str(h) for h in self.handles)
        super().__init__(f"Not all textures are loaded yet: {listed}")


class FormatMismatchError(TextureError, ValueError):
    pass


class UnsupportedFormatError(TextureError, ValueError):
    pass


class BufferSizeError(TextureError, ValueError):
    pass
