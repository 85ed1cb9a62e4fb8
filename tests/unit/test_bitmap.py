# tests/unit/test_bitmap.py

import math
import pytest
from typing import List

from blockies.bitmap import generate_bitmap, mirror_row, validate_size
from blockies.errors import InvalidDimensionError
from blockies.palette import create_color
from blockies.stream import RandomStream
from tests.test_utils import (
    ETH_BITMAP_5,
    ETH_BITMAP_7,
    ETH_BITMAP_8,
    ETH_BITMAP_8_ALL_OVERRIDES,
)


def eth_stream_after_palette() -> RandomStream:
    stream = RandomStream.from_seed("eth")
    for _ in range(3):
        create_color(stream)
    return stream


@pytest.mark.parametrize(
    "half, size, expected",
    [
        ([1], 1, [1]),
        ([1], 2, [1, 1]),
        ([1, 2], 3, [1, 2, 1]),
        ([0, 1], 4, [0, 1, 1, 0]),
        ([0, 1, 2], 5, [0, 1, 2, 1, 0]),
        ([2, 0, 1, 1], 8, [2, 0, 1, 1, 1, 1, 0, 2]),
    ],
)
def test_mirror_row(half: List[int], size: int, expected: List[int]) -> None:
    assert mirror_row(half, size) == expected


@pytest.mark.parametrize(
    "size, expected",
    [(8, ETH_BITMAP_8), (7, ETH_BITMAP_7), (5, ETH_BITMAP_5)],
)
def test_bitmap_reference(size: int, expected: List[int]) -> None:
    assert list(generate_bitmap(size, eth_stream_after_palette())) == expected


def test_bitmap_without_palette_draws() -> None:
    bitmap = generate_bitmap(8, RandomStream.from_seed("eth"))
    assert list(bitmap) == ETH_BITMAP_8_ALL_OVERRIDES


@pytest.mark.parametrize("size", range(1, 17))
def test_bitmap_shape_and_mirror(size: int) -> None:
    bitmap = generate_bitmap(size, RandomStream.from_seed(f"mirror-{size}"))
    assert len(bitmap) == size * size
    for r in range(size):
        row = bitmap[r * size : (r + 1) * size]
        for c in range(size):
            assert row[c] == row[size - 1 - c]
            assert row[c] in (0, 1, 2)


@pytest.mark.parametrize("size", [1, 2, 5, 8, 13])
def test_bitmap_draws_left_half_only(size: int) -> None:
    stream = RandomStream.from_seed("draw count")
    reference = RandomStream.from_seed("draw count")
    generate_bitmap(size, stream)
    for _ in range(size * math.ceil(size / 2)):
        reference.draw()
    assert stream.state == reference.state


def test_size_one_is_single_unmirrored_cell() -> None:
    stream = RandomStream.from_seed("eth")
    reference = RandomStream.from_seed("eth")
    bitmap = generate_bitmap(1, stream)
    assert list(bitmap) == [math.floor(reference.draw() * 2.3)]
    assert stream.state == reference.state


def test_cell_distribution_covers_all_values() -> None:
    bitmap = generate_bitmap(32, RandomStream.from_seed("distribution"))
    counts = {value: list(bitmap).count(value) for value in (0, 1, 2)}
    assert all(count > 0 for count in counts.values())
    assert counts[2] < counts[0]
    assert counts[2] < counts[1]


@pytest.mark.parametrize("size", [0, -1, -8, 1.0, 8.5, "8", None, True, False])
def test_invalid_size_rejected(size: object) -> None:
    stream = RandomStream.from_seed("eth")
    with pytest.raises(InvalidDimensionError):
        generate_bitmap(size, stream)  # type: ignore[arg-type]
    # no draws happen before validation
    assert stream.state == (101, 116, 104, 0)


def test_validate_size_names_the_argument() -> None:
    assert validate_size(3) == 3
    with pytest.raises(InvalidDimensionError) as exc_info:
        validate_size(0, "scale")
    assert exc_info.value.name == "scale"
    assert "scale" in str(exc_info.value)
