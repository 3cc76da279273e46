import pytest

from bmppalette.colors import (
    BitCount,
    Color,
    ColorCount,
    count_colors,
    format_colors,
    format_counts,
    sort_counts,
)

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def test_bits_follow_alpha():
    assert RED.bits is BitCount.BITS24
    assert Color(1, 2, 3, 4).bits is BitCount.BITS32


def test_count_keeps_first_appearance_order():
    result = count_colors([RED, BLUE, RED, GREEN, RED, BLUE])
    assert result == [ColorCount(RED, 3), ColorCount(BLUE, 2), ColorCount(GREEN, 1)]


def test_count_total_matches_input_length():
    pixels = [RED, GREEN, GREEN, BLUE, RED, RED, RED]
    result = count_colors(pixels)
    assert sum(entry.count for entry in result) == len(pixels)
    assert len(result) == len(set(pixels))


def test_count_distinguishes_alpha():
    a = Color(10, 20, 30, 0)
    b = Color(10, 20, 30, 255)
    result = count_colors([a, b, a])
    assert result == [ColorCount(a, 2), ColorCount(b, 1)]


def test_count_empty():
    assert count_colors([]) == []


def test_count_rejects_mixed_bits():
    with pytest.raises(ValueError):
        count_colors([RED, Color(1, 2, 3, 4)])


def test_sort_ascending_and_preserves_entries():
    counts = count_colors([RED, RED, RED, GREEN, BLUE, BLUE])
    ordered = sort_counts(counts)
    assert [entry.count for entry in ordered] == sorted(e.count for e in counts)
    assert ordered[-1] == ColorCount(RED, 3)
    assert ordered[0] == ColorCount(GREEN, 1)
    assert set(ordered) == set(counts)


def test_sort_does_not_mutate_input():
    counts = [ColorCount(RED, 5), ColorCount(BLUE, 1)]
    sort_counts(counts)
    assert counts == [ColorCount(RED, 5), ColorCount(BLUE, 1)]


def test_format_colors():
    assert format_colors([Color(255, 0, 16)]) == "   ff     0    10\n"


def test_format_colors_line_per_color():
    text = format_colors([RED, Color(1, 2, 3, 4), BLUE])
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[1].split() == ["1", "2", "3", "4"]


def test_format_counts():
    assert format_counts([ColorCount(Color(255, 0, 16), 3)]) == (
        "   ff     0    10:          3\n"
    )


def test_hex():
    assert Color(255, 0, 16).hex() == "#ff0010"