from __future__ import annotations

import asyncio
from typing import Any, List, Optional

import numpy as np
import pytest

from kernel_runtime.embeddings import TextEmbeddingGenerator, generate_embedding


class RecordingGenerator(TextEmbeddingGenerator):
    def __init__(self, vectors: List[np.ndarray]):
        self.vectors = vectors
        self.calls: List[tuple] = []

    async def generate_embeddings(self, data: List[str], kernel: Optional[Any] = None) -> List[np.ndarray]:
        self.calls.append((list(data), kernel))
        return self.vectors


def test_single_value_is_sent_as_one_item_batch() -> None:
    vector = np.array([0.1, 0.2, 0.3], dtype=np.float32)
    generator = RecordingGenerator([vector])
    kernel = object()

    result = asyncio.run(generate_embedding(generator, "hello", kernel))

    np.testing.assert_array_equal(result, vector)
    assert generator.calls == [(["hello"], kernel)]


def test_text_generator_protocol_accepts_implementations() -> None:
    vector = np.ones(4, dtype=np.float32)
    generator: TextEmbeddingGenerator = RecordingGenerator([vector, np.zeros(4, dtype=np.float32)])

    result = asyncio.run(generate_embedding(generator, "only the first"))

    np.testing.assert_array_equal(result, vector)
    assert generator.calls == [(["only the first"], None)]


def test_empty_batch_yields_empty_vector() -> None:
    result = asyncio.run(generate_embedding(RecordingGenerator([]), "hello"))
    assert result.shape == (0,)
    assert result.dtype == np.float32


def test_generator_is_required() -> None:
    with pytest.raises(ValueError):
        asyncio.run(generate_embedding(None, "hello"))  # type: ignore[arg-type]
