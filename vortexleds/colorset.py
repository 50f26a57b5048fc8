"""An ordered palette of up to eight colours with a cycling cursor."""

from enum import IntEnum
from itertools import islice

from .colors import HSVColor, RGBColor, as_rgb

# the most colours a colorset can hold
MAX_COLOR_SLOTS = 8

# cursor value before any colour has been selected; the first call to
# get_next() moves it to the first colour
INDEX_NONE = 0xFF

_BYTE = 0xFF


class ValueStyle(IntEnum):
    """How brightness values are chosen when colours are randomized."""

    RANDOM = 0
    LOW_FIRST_COLOR = 1
    HIGH_FIRST_COLOR = 2
    ALTERNATING = 3
    ASCENDING = 4
    DESCENDING = 5
    CONSTANT = 6
    COUNT = 7


class ColorMode(IntEnum):
    """Hue spacing used by Colorset.randomize_colors."""

    THEORY = 0
    MONOCHROMATIC = 1
    EVENLY_SPACED = 2


class ColorMode2(IntEnum):
    """Hue layouts used by Colorset.randomize_colors2."""

    DOUBLE_SPLIT_COMPLIMENTARY = 0
    TETRADIC = 1


class Colorset:
    """A palette of RGB colours plus a cursor for stepping through them.

    ``ctx`` arguments are random contexts providing ``next8()`` for a full
    random byte and ``next8(low, high)`` for a value in a range.
    """

    def __init__(self, *args):
        self._palette = []
        self._cur_index = INDEX_NONE
        if args:
            self.init(*args)

    @classmethod
    def from_raw(cls, values):
        """Build from packed colour integers; empty colours are kept, extras dropped."""
        colorset = cls()
        colorset._palette = [
            RGBColor.from_raw(value) for value in islice(values, MAX_COLOR_SLOTS)
        ]
        return colorset

    def __copy__(self):
        colorset = Colorset()
        colorset._palette = [as_rgb(col) for col in self._palette]
        return colorset

    def __eq__(self, other):
        if other is None:
            return False
        if not isinstance(other, Colorset):
            return NotImplemented
        return self._palette == other._palette

    __hash__ = None

    def __len__(self):
        return len(self._palette)

    def __getitem__(self, index):
        return self.get(index)

    def __iter__(self):
        for col in self._palette:
            yield as_rgb(col)

    def __repr__(self):
        cols = ", ".join("#%06X" % col.raw() for col in self._palette)
        return "Colorset([%s])" % cols

    def init(self, *args):
        """Replace the palette with the given colours, skipping empty ones."""
        if len(args) > MAX_COLOR_SLOTS:
            raise TypeError(
                "a colorset takes at most %d colours, got %d"
                % (MAX_COLOR_SLOTS, len(args))
            )
        self.clear()
        for arg in args:
            col = as_rgb(arg)
            if not col.empty():
                self._palette.append(col)

    def clear(self):
        """Remove every colour and reset the cursor."""
        self._palette = []
        self.reset_index()

    def _try_add(self, col):
        if len(self._palette) >= MAX_COLOR_SLOTS:
            return False
        self._palette.append(as_rgb(col))
        return True

    def add_color(self, col):
        """Append a colour; raises ValueError when the colorset is full."""
        if not self._try_add(col):
            raise ValueError("colorset already holds %d colours" % MAX_COLOR_SLOTS)

    def add_color_hsv(self, hue, sat, val):
        """Append a colour given as hue, saturation and value."""
        self.add_color(HSVColor(hue, sat, val))

    def add_color_with_value_style(self, ctx, hue, sat, val_style, num_colors, color_pos):
        """Append a colour whose value is chosen by ``val_style``; dropped when full."""

        def add(val):
            self._try_add(HSVColor(hue, sat, val))

        if num_colors == 1:
            add(ctx.next8(16, 255))
            return
        count = len(self._palette)
        if val_style == ValueStyle.LOW_FIRST_COLOR:
            add(ctx.next8(0, 86) if count == 0 else 85 * ctx.next8(1, 4))
        elif val_style == ValueStyle.HIGH_FIRST_COLOR:
            add(255 if count == 0 else ctx.next8(0, 86))
        elif val_style == ValueStyle.ALTERNATING:
            add(255 if count % 2 == 0 else 85)
        elif val_style == ValueStyle.ASCENDING:
            add((color_pos + 1) * (255 // num_colors))
        elif val_style == ValueStyle.DESCENDING:
            add(255 - color_pos * (255 // num_colors))
        elif val_style == ValueStyle.CONSTANT:
            add(255)
        else:
            add(85 * ctx.next8(1, 4))

    def remove_color(self, index):
        """Remove the colour at ``index``; an index out of range is ignored."""
        if 0 <= index < len(self._palette):
            del self._palette[index]

    def randomize(self, ctx, num_colors=0):
        """Fill with random colours; a count of 0 picks between 2 and 9."""
        self.clear()
        if not num_colors:
            num_colors = ctx.next8(2, 9)
        val_style = ctx.next8(0, ValueStyle.COUNT)
        for pos in range(num_colors):
            sat = ctx.next8()
            hue = ctx.next8()
            self.add_color_with_value_style(ctx, hue, sat, val_style, num_colors, pos)

    def randomize_colors(self, ctx, num_colors, mode):
        """Fill with colours whose hues follow ``mode``; a count of 0 is random."""
        self.clear()
        if not num_colors:
            num_colors = ctx.next8(2 if mode == ColorMode.MONOCHROMATIC else 1, 9)
        randomized_hue = ctx.next8()
        color_gap = 0
        if mode == ColorMode.THEORY and num_colors > 1:
            color_gap = ctx.next8(16, 256 // (num_colors - 1))
        val_style = ctx.next8(0, ValueStyle.COUNT)
        # decides whether some colours go into the set twice
        double_style = 0
        if num_colors <= 7:
            double_style = ctx.next8(0, 1)
        if num_colors <= 4:
            double_style = ctx.next8(0, 2)
        for pos in range(num_colors):
            value = 255
            if mode == ColorMode.THEORY:
                hue = randomized_hue + pos * color_gap
            elif mode == ColorMode.MONOCHROMATIC:
                hue = randomized_hue
                value = 255 - pos * (256 // num_colors)
            else:
                hue = randomized_hue + (256 // num_colors) * pos
            hue &= _BYTE
            value &= _BYTE
            self.add_color_with_value_style(ctx, hue, value, val_style, num_colors, pos)
            if double_style == 2 or (double_style == 1 and pos == 0):
                self.add_color_with_value_style(
                    ctx, hue, value, val_style, num_colors, pos
                )

    def randomize_colors2(self, ctx, mode):
        """Fill with a split-complementary or tetradic set of random hues."""
        self.clear()
        primary = ctx.next8()
        if mode == ColorMode2.DOUBLE_SPLIT_COMPLIMENTARY:
            gap = ctx.next8(1, 64)
            val_style = ctx.next8(0, ValueStyle.COUNT)
            hues = (
                primary + gap + 128,
                primary - gap,
                primary,
                primary + gap,
                primary - gap + 128,
            )
        elif mode == ColorMode2.TETRADIC:
            secondary = ctx.next8()
            val_style = ctx.next8(0, ValueStyle.COUNT)
            hues = (primary, secondary, primary + 128, secondary + 128)
        else:
            return
        for pos, hue in enumerate(hues):
            self.add_color_with_value_style(
                ctx, hue & _BYTE, 255, val_style, len(hues), pos
            )

    def randomize_solid(self, ctx):
        """Randomize a single colour."""
        self.randomize_colors(ctx, 1, ColorMode.EVENLY_SPACED)

    def randomize_complimentary(self, ctx):
        """Randomize two evenly spaced colours."""
        self.randomize_colors(ctx, 2, ColorMode.EVENLY_SPACED)

    def randomize_triadic(self, ctx):
        """Randomize three evenly spaced colours."""
        self.randomize_colors(ctx, 3, ColorMode.EVENLY_SPACED)

    def randomize_square(self, ctx):
        """Randomize four evenly spaced colours."""
        self.randomize_colors(ctx, 4, ColorMode.EVENLY_SPACED)

    def randomize_pentadic(self, ctx):
        """Randomize five evenly spaced colours."""
        self.randomize_colors(ctx, 5, ColorMode.EVENLY_SPACED)

    def randomize_rainbow(self, ctx):
        """Randomize eight evenly spaced colours."""
        self.randomize_colors(ctx, 8, ColorMode.EVENLY_SPACED)

    def adjust_brightness(self, fade_by):
        """Dim every colour in the set by ``fade_by``/256."""
        for col in self._palette:
            col.adjust_brightness(fade_by)

    def get(self, index=0):
        """A copy of the colour at ``index``, or black when out of range."""
        index &= _BYTE
        if index >= len(self._palette):
            return RGBColor()
        return as_rgb(self._palette[index])

    def set(self, index, col):
        """Replace the colour at ``index``, or append it when ``index`` is past the end."""
        index &= _BYTE
        if index >= len(self._palette):
            self.add_color(col)
            return
        self._palette[index] = as_rgb(col)

    def skip(self, amount=1):
        """Move the cursor by ``amount`` colours, wrapping either way."""
        count = len(self._palette)
        if not count:
            return
        if self._cur_index == INDEX_NONE:
            self._cur_index = 0
        self._cur_index = (self._cur_index + amount) % count

    def cur(self):
        """The colour under the cursor, black if none is selected."""
        if self._cur_index >= len(self._palette):
            return RGBColor()
        return as_rgb(self._palette[self._cur_index])

    def set_cur_index(self, index):
        """Move the cursor to ``index``; an index out of range is ignored."""
        if 0 <= index < len(self._palette):
            self._cur_index = index

    def reset_index(self):
        """Deselect so the next get_next() returns the first colour."""
        self._cur_index = INDEX_NONE

    def cur_index(self):
        """The cursor position, INDEX_NONE before any colour was selected."""
        return self._cur_index

    def get_prev(self):
        """Step the cursor back, wrapping to the last colour, and return it."""
        count = len(self._palette)
        if not count:
            return RGBColor()
        if self._cur_index in (0, INDEX_NONE):
            self._cur_index = count - 1
        else:
            self._cur_index -= 1
        return as_rgb(self._palette[self._cur_index])

    def get_next(self):
        """Step the cursor forward, wrapping to the first colour, and return it."""
        count = len(self._palette)
        if not count:
            return RGBColor()
        self._cur_index = ((self._cur_index + 1) & _BYTE) % count
        return as_rgb(self._palette[self._cur_index])

    def peek(self, offset):
        """The colour ``offset`` steps from the cursor, without moving it."""
        count = len(self._palette)
        if not count:
            return RGBColor()
        if offset >= 0:
            index = (self._cur_index + offset) % count
        else:
            if offset < -count:
                return RGBColor()
            index = (self._cur_index + count + offset) % count
        return as_rgb(self._palette[index])

    def peek_next(self):
        """The colour one step past the cursor."""
        return self.peek(1)

    def num_colors(self):
        """How many colours the set holds."""
        return len(self._palette)

    def on_start(self):
        """Whether the cursor is on the first colour."""
        return self._cur_index == 0

    def on_end(self):
        """Whether the cursor is on the last colour."""
        count = len(self._palette)
        return bool(count) and self._cur_index == count - 1

    def serialize(self):
        """The count byte followed by all reds, then all greens, then all blues."""
        data = bytearray([len(self._palette)])
        data.extend(col.red for col in self._palette)
        data.extend(col.green for col in self._palette)
        data.extend(col.blue for col in self._palette)
        return bytes(data)

    @classmethod
    def unserialize(cls, data):
        """Read a colorset written by serialize(); trailing bytes are ignored."""
        data = bytes(data)
        if not data:
            raise ValueError("no data for a colorset")
        count = data[0]
        if count > MAX_COLOR_SLOTS:
            raise ValueError(
                "colorset holds at most %d colours, data claims %d"
                % (MAX_COLOR_SLOTS, count)
            )
        if len(data) < 1 + 3 * count:
            raise ValueError("colorset data is truncated")
        reds = data[1 : 1 + count]
        greens = data[1 + count : 1 + 2 * count]
        blues = data[1 + 2 * count : 1 + 3 * count]
        colorset = cls()
        colorset._palette = [RGBColor(r, g, b) for r, g, b in zip(reds, greens, blues)]
        return colorset