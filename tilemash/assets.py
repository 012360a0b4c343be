"""Image provider interface and an in-memory implementation.

Operations never own the images they read. They receive an
:class:`ImageProvider`, resolve handles for the span of one call, and store
exactly one new image per successful call.

:class:`ImageAssets` keeps its images in a persistent map (``pyrsistent.PMap``)
so that a snapshot taken with :meth:`ImageAssets.snapshot` is unaffected by
later insertions or removals.
"""

import itertools
from typing import Iterable, Iterator, List, Optional, Protocol

from pyrsistent import PMap, PSet, pmap, pset

from tilemash.components import PixelBuffer
from tilemash.errors import UnresolvedHandleError
from tilemash.types import Handle


class ImageProvider(Protocol):
    def resolve(self, handle: Handle) -> Optional[PixelBuffer]: ...

    def store(self, buffer: PixelBuffer) -> Handle: ...


class ImageAssets:
    """Handle-addressed image store.

    Attributes:
        images: Loaded images keyed by handle.
        pending: Handles reserved with :meth:`reserve` whose image has not been
            inserted yet. Resolving them yields ``None``.

    Handles are allocated from a counter owned by the store and are never
    recycled, so two stores may hand out the same handle value.
    """

    images: PMap[Handle, PixelBuffer]
    pending: PSet[Handle]

    def __init__(self) -> None:
        self.images = pmap()
        self.pending = pset()
        self._next_handle: Iterator[Handle] = itertools.count()

    def resolve(self, handle: Handle) -> Optional[PixelBuffer]:
        """Return the image for ``handle`` or ``None`` if not loaded."""
        return self.images.get(handle)

    def store(self, buffer: PixelBuffer) -> Handle:
        """Add ``buffer`` under a new handle and return the handle."""
        handle = next(self._next_handle)
        self.images = self.images.set(handle, buffer)
        return handle

    def reserve(self) -> Handle:
        """Hand out a handle whose image will be inserted later."""
        handle = next(self._next_handle)
        self.pending = self.pending.add(handle)
        return handle

    def insert(self, handle: Handle, buffer: PixelBuffer) -> None:
        """Place ``buffer`` under a handle this store already handed out.

        Raises:
            KeyError: If ``handle`` was never reserved or stored here.
        """
        if handle not in self.pending and handle not in self.images:
            raise KeyError(f"Unknown handle: {handle}")
        self.pending = self.pending.discard(handle)
        self.images = self.images.set(handle, buffer)

    def remove(self, handle: Handle) -> Optional[PixelBuffer]:
        """Drop ``handle`` and return its image if it was loaded."""
        buffer = self.images.get(handle)
        self.images = self.images.discard(handle)
        self.pending = self.pending.discard(handle)
        return buffer

    def is_loaded(self, handle: Handle) -> bool:
        return handle in self.images

    def handles(self) -> List[Handle]:
        return sorted(self.images.keys())

    def snapshot(self) -> PMap[Handle, PixelBuffer]:
        return self.images

    def __contains__(self, handle: object) -> bool:
        return handle in self.images

    def __len__(self) -> int:
        return len(self.images)


def resolve_all(provider: ImageProvider, handles: Iterable[Handle]) -> List[PixelBuffer]:
    """Resolve every handle or fail naming all the missing ones.

    Raises:
        UnresolvedHandleError: If any handle resolves to ``None``; no partial
            result is returned.
    """
    resolved: List[PixelBuffer] = []
    missing: List[Handle] = []
    for handle in handles:
        buffer = provider.resolve(handle)
        if buffer is None:
            missing.append(handle)
        else:
            resolved.append(buffer)
    if missing:
        raise UnresolvedHandleError(missing)
    return resolved
