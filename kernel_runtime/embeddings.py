# kernel_runtime/embeddings.py
"""
Single-item convenience over batch embedding generators.
"""
from __future__ import annotations

from typing import Any, List, Optional, Protocol, TypeVar

import numpy as np

TValue = TypeVar("TValue", contravariant=True)


class EmbeddingGenerator(Protocol[TValue]):
    """Produces one embedding vector per input value."""

    async def generate_embeddings(
        self,
        data: List[TValue],
        kernel: Optional[Any] = None,
    ) -> List[np.ndarray]:
        ...


class TextEmbeddingGenerator(EmbeddingGenerator[str], Protocol):
    """Generator of float embeddings for text."""


async def generate_embedding(
    generator: EmbeddingGenerator[TValue],
    value: TValue,
    kernel: Optional[Any] = None,
) -> np.ndarray:
    """
    Embed a single value through a batch generator.

    Returns an empty float32 vector if the generator returned nothing.
    """
    if generator is None:
        raise ValueError("generator must not be None")

    embeddings = await generator.generate_embeddings([value], kernel)
    if not len(embeddings):
        return np.empty(0, dtype=np.float32)
    return embeddings[0]
