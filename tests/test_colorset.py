import copy

import pytest

from vortexleds.colors import (
    HsvToRgbAlgorithm,
    HSVColor,
    RGBColor,
    set_hsv_rgb_algorithm,
)
from vortexleds.colorset import (
    INDEX_NONE,
    MAX_COLOR_SLOTS,
    ColorMode,
    ColorMode2,
    Colorset,
    ValueStyle,
)
from vortexleds.constants import RGB_BLUE, RGB_GREEN, RGB_OFF, RGB_RED, RGB_WHITE


class ScriptedRandom:
    """Returns scripted values in order and records every call."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def next8(self, low=None, high=None):
        self.calls.append((low, high))
        if self.values:
            return self.values.pop(0)
        return 0 if low is None else low


@pytest.fixture(autouse=True)
def generic_algorithm():
    set_hsv_rgb_algorithm(HsvToRgbAlgorithm.GENERIC)
    yield
    set_hsv_rgb_algorithm(HsvToRgbAlgorithm.GENERIC)


def rgb3():
    return Colorset(RGB_RED, RGB_GREEN, RGB_BLUE)


def test_empty_colorset():
    cs = Colorset()
    assert len(cs) == 0
    assert cs.get(0) == RGBColor()
    assert cs.get_next() == RGBColor()
    assert cs.get_prev() == RGBColor()
    assert cs.cur_index() == INDEX_NONE
    assert cs.on_end() is False


def test_init_skips_empty_colors():
    cs = Colorset(RGB_RED, RGB_OFF, RGB_BLUE)
    assert cs.num_colors() == 2
    assert list(cs) == [RGBColor.from_raw(RGB_RED), RGBColor.from_raw(RGB_BLUE)]


def test_too_many_constructor_colors():
    with pytest.raises(TypeError):
        Colorset(*([RGB_RED] * (MAX_COLOR_SLOTS + 1)))


def test_from_raw_keeps_empty_and_truncates():
    cs = Colorset.from_raw([RGB_OFF, RGB_WHITE] * 6)
    assert len(cs) == MAX_COLOR_SLOTS
    assert cs[0] == RGBColor()
    assert cs[1] == RGBColor(255, 255, 255)


def test_add_color_full_raises():
    cs = Colorset.from_raw([RGB_RED] * MAX_COLOR_SLOTS)
    with pytest.raises(ValueError):
        cs.add_color(RGB_BLUE)
    assert len(cs) == MAX_COLOR_SLOTS


def test_add_color_hsv_uses_conversion():
    cs = Colorset()
    cs.add_color_hsv(40, 200, 180)
    assert cs[0] == HSVColor(40, 200, 180).to_rgb()


def test_get_returns_copy():
    cs = rgb3()
    col = cs.get(0)
    col.clear()
    assert cs.get(0) == RGBColor(255, 0, 0)


def test_out_of_range_get_is_black():
    cs = rgb3()
    assert cs[5] == RGBColor()
    assert cs[-1] == RGBColor()


def test_get_next_cycles():
    cs = rgb3()
    seen = [cs.get_next() for _ in range(4)]
    assert seen == [cs[0], cs[1], cs[2], cs[0]]
    assert cs.cur_index() == 0
    assert cs.on_start()


def test_get_prev_from_none_is_last():
    cs = rgb3()
    assert cs.get_prev() == cs[2]
    assert cs.on_end()
    assert cs.get_prev() == cs[1]


def test_cur_none_selected_is_black():
    cs = rgb3()
    assert cs.cur() == RGBColor()
    cs.get_next()
    assert cs.cur() == cs[0]


def test_skip_wraps_negative():
    cs = rgb3()
    cs.skip(-1)
    assert cs.cur_index() == 2
    cs.skip(-10)
    assert cs.cur_index() == 1
    cs.skip(5)
    assert cs.cur_index() == 0


def test_skip_empty_does_nothing():
    cs = Colorset()
    cs.skip(3)
    assert cs.cur_index() == INDEX_NONE


def test_set_cur_index_and_reset():
    cs = rgb3()
    cs.set_cur_index(2)
    assert cs.cur() == cs[2]
    cs.set_cur_index(3)
    assert cs.cur_index() == 2
    cs.reset_index()
    assert cs.cur_index() == INDEX_NONE


def test_peek_does_not_move():
    cs = rgb3()
    cs.get_next()
    assert cs.peek_next() == cs[1]
    assert cs.peek(-1) == cs[2]
    assert cs.peek(0) == cs[0]
    assert cs.peek(-4) == RGBColor()
    assert cs.cur_index() == 0


def test_set_replaces_and_appends():
    cs = rgb3()
    cs.set(1, RGB_WHITE)
    assert cs[1] == RGBColor(255, 255, 255)
    cs.set(7, RGB_RED)
    assert len(cs) == 4
    assert cs[3] == RGBColor(255, 0, 0)


def test_set_on_full_raises():
    cs = Colorset.from_raw([RGB_RED] * MAX_COLOR_SLOTS)
    with pytest.raises(ValueError):
        cs.set(MAX_COLOR_SLOTS, RGB_BLUE)


def test_remove_color():
    cs = rgb3()
    cs.remove_color(0)
    assert list(cs) == [RGBColor(0, 255, 0), RGBColor(0, 0, 255)]
    cs.remove_color(9)
    assert len(cs) == 2


def test_equality_ignores_cursor():
    a = rgb3()
    b = rgb3()
    b.get_next()
    assert a == b
    b.remove_color(2)
    assert not (a == b)
    assert a != None  # noqa: E711


def test_copy_resets_cursor():
    a = rgb3()
    a.get_next()
    b = copy.copy(a)
    assert b == a
    assert b.cur_index() == INDEX_NONE
    b.set(0, RGB_WHITE)
    assert a[0] == RGBColor(255, 0, 0)


def test_adjust_brightness_matches_color():
    cs = Colorset(RGBColor(200, 100, 50), RGBColor(10, 20, 30))
    cs.adjust_brightness(128)
    assert cs[0] == RGBColor(200, 100, 50).adjust_brightness(128)
    assert cs[1] == RGBColor(10, 20, 30).adjust_brightness(128)


def test_serialize_layout():
    cs = Colorset(RGBColor(1, 2, 3), RGBColor(4, 5, 6))
    assert cs.serialize() == bytes([2, 1, 4, 2, 5, 3, 6])
    assert Colorset().serialize() == b"\x00"


def test_serialize_round_trip():
    cs = Colorset(RGB_RED, RGBColor(9, 8, 7), RGB_BLUE)
    assert Colorset.unserialize(cs.serialize()) == cs


def test_unserialize_errors():
    with pytest.raises(ValueError):
        Colorset.unserialize(b"")
    with pytest.raises(ValueError):
        Colorset.unserialize(bytes([MAX_COLOR_SLOTS + 1]) + bytes(30))
    with pytest.raises(ValueError):
        Colorset.unserialize(bytes([2, 1, 2, 3]))


def test_value_style_single_color_uses_random_value():
    ctx = ScriptedRandom([77])
    cs = Colorset()
    cs.add_color_with_value_style(ctx, 10, 200, ValueStyle.CONSTANT, 1, 0)
    assert ctx.calls == [(16, 255)]
    assert cs[0] == HSVColor(10, 200, 77).to_rgb()


def test_value_style_constant_and_alternating():
    ctx = ScriptedRandom([])
    cs = Colorset()
    cs.add_color_with_value_style(ctx, 50, 255, ValueStyle.CONSTANT, 3, 0)
    assert cs[0] == HSVColor(50, 255, 255).to_rgb()
    cs.clear()
    for pos in range(3):
        cs.add_color_with_value_style(ctx, 50, 255, ValueStyle.ALTERNATING, 3, pos)
    assert list(cs) == [
        HSVColor(50, 255, 255).to_rgb(),
        HSVColor(50, 255, 85).to_rgb(),
        HSVColor(50, 255, 255).to_rgb(),
    ]
    assert ctx.calls == []


def test_value_style_random_draws_range():
    ctx = ScriptedRandom([3])
    cs = Colorset()
    cs.add_color_with_value_style(ctx, 0, 255, ValueStyle.RANDOM, 4, 0)
    assert ctx.calls == [(1, 4)]
    assert cs[0] == HSVColor(0, 255, 255).to_rgb()


def test_value_style_drops_when_full():
    cs = Colorset.from_raw([RGB_RED] * MAX_COLOR_SLOTS)
    cs.add_color_with_value_style(ScriptedRandom([]), 0, 255, ValueStyle.CONSTANT, 4, 0)
    assert len(cs) == MAX_COLOR_SLOTS


def test_randomize_call_order():
    ctx = ScriptedRandom([ValueStyle.CONSTANT, 11, 22, 33, 44])
    cs = Colorset()
    cs.randomize(ctx, 2)
    assert ctx.calls[0] == (0, ValueStyle.COUNT)
    assert list(cs) == [
        HSVColor(22, 11, 255).to_rgb(),
        HSVColor(44, 33, 255).to_rgb(),
    ]


def test_randomize_picks_count():
    ctx = ScriptedRandom([3, ValueStyle.CONSTANT])
    cs = Colorset()
    cs.randomize(ctx)
    assert ctx.calls[0] == (2, 9)
    assert len(cs) == 3


def test_randomize_solid():
    ctx = ScriptedRandom([10, ValueStyle.CONSTANT, 0, 0, 200])
    cs = Colorset(RGB_RED, RGB_BLUE)
    cs.randomize_solid(ctx)
    assert list(cs) == [HSVColor(10, 255, 200).to_rgb()]


def test_randomize_rainbow_evenly_spaced():
    ctx = ScriptedRandom([5, ValueStyle.CONSTANT])
    cs = Colorset()
    cs.randomize_rainbow(ctx)
    assert len(cs) == 8
    assert list(cs) == [HSVColor((5 + 32 * i) & 0xFF, 255, 255).to_rgb() for i in range(8)]


def test_randomize_doubles_first_color():
    ctx = ScriptedRandom([0, ValueStyle.CONSTANT, 1, 1])
    cs = Colorset()
    cs.randomize_colors(ctx, 3, ColorMode.EVENLY_SPACED)
    assert len(cs) == 4
    assert cs[0] == cs[1]


def test_randomize_colors2_tetradic():
    ctx = ScriptedRandom([10, 60, ValueStyle.CONSTANT])
    cs = Colorset()
    cs.randomize_colors2(ctx, ColorMode2.TETRADIC)
    assert list(cs) == [
        HSVColor(h, 255, 255).to_rgb() for h in (10, 60, 138, 188)
    ]


def test_randomize_colors2_split_complimentary():
    ctx = ScriptedRandom([100, 20, ValueStyle.CONSTANT])
    cs = Colorset()
    cs.randomize_colors2(ctx, ColorMode2.DOUBLE_SPLIT_COMPLIMENTARY)
    assert ctx.calls[1] == (1, 64)
    assert list(cs) == [
        HSVColor(h, 255, 255).to_rgb() for h in (248, 80, 100, 120, 208)
    ]


def test_monochromatic_randomize_min_count():
    ctx = ScriptedRandom([])
    cs = Colorset()
    cs.randomize_colors(ctx, 0, ColorMode.MONOCHROMATIC)
    assert ctx.calls[0] == (2, 9)
    assert len(cs) >= 2