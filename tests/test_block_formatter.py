# tests/test_block_formatter.py
"""
Selector parsing and fixed-decimal rendering of block channels.
"""

import pytest

from rody import Block, BlockBuilder, BlockFormatter, CHANNELS, forward, parse_selector


def _moving_block():
    return BlockBuilder().set_lengths(1, 1, 1).set_initial_velocity(-1.0, 0.0, 0.0).get()


@pytest.mark.parametrize(
    "selector, expected",
    [
        ("_", [0, 1, 2, 3, 4, 5]),
        ("p", [0, 1, 2]),
        ("v", [3, 4, 5]),
        ("px py pz vx vy vz", [0, 1, 2, 3, 4, 5]),
        ("VZ Px", [5, 0]),
        ("p p", [0, 1, 2, 0, 1, 2]),
        ("v  px\tvx", [3, 4, 5, 0, 3]),
        ("q", []),
        ("", []),
        ("pxx _x", []),
    ],
)
def test_parse_selector(selector, expected):
    assert parse_selector(selector) == expected


def test_all_channels_after_one_step():
    block = _moving_block()
    forward(block, 0.1)
    text = str(block.format("_", 3))
    assert text == " -0.100  0.000  0.000  -1.000  0.000  0.000 "
    assert text.split()[0] == "-0.100"


def test_unknown_tokens_ignored():
    block = _moving_block()
    forward(block, 0.1)
    assert str(block.format("q _", 3)) == str(block.format("_", 3))


def test_unknown_only_renders_empty():
    assert str(_moving_block().format("foo bar", 3)) == ""


def test_decimal_precision():
    block = Block(position=(1.23456, 0, 0))
    assert str(block.format("px", 0)) == " 1 "
    assert str(block.format("px", 2)) == " 1.23 "
    assert str(block.format("px", 5)) == " 1.23456 "


def test_negative_decimal_rejected():
    with pytest.raises(ValueError):
        Block().format("_", -1)


def test_formatter_reads_live_block():
    block = _moving_block()
    formatter = block.format("px", 2)
    assert formatter.render() == " 0.00 "
    forward(block, 0.5)
    assert formatter.render() == " -0.50 "


def test_values_and_labels_follow_selection():
    block = Block(position=(1, 2, 3), velocity=(4, 5, 6))
    formatter = block.format("vz p", 1)
    assert formatter.values() == [6.0, 1.0, 2.0, 3.0]
    assert formatter.labels() == ["vz", "px", "py", "pz"]


def test_direct_construction_skips_out_of_range_indices():
    block = Block(velocity=(4, 5, 6))
    formatter = BlockFormatter(block, [5, 9], 0)
    assert formatter.labels() == [CHANNELS[5]]
    assert formatter.render() == " 6 "
