"""Secure erasure of share material.

Share points, polynomial coefficients and reconstructed secrets live in
``bytearray`` buffers so they can be overwritten in place.  ``wipe`` does
the overwrite with ``ctypes.memset`` on the buffer's own storage;
``wiped`` scopes one or more buffers so they are zero-filled on every
exit path of a ``with`` block, exceptions included.
"""

from __future__ import annotations

import ctypes
from contextlib import contextmanager
from typing import Iterator


def wipe(buffer: bytearray) -> None:
    """Zero-fill *buffer* in place."""
    size = len(buffer)
    if not size:
        return
    view = (ctypes.c_char * size).from_buffer(buffer)
    try:
        ctypes.memset(ctypes.addressof(view), 0, size)
    finally:
        # drop the buffer export so the bytearray can be resized again
        del view


@contextmanager
def wiped(*buffers: bytearray) -> Iterator[None]:
    """Zero-fill every buffer in *buffers* when the block exits."""
    try:
        yield
    finally:
        for buffer in buffers:
            wipe(buffer)
