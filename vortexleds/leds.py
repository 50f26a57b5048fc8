"""The state of every LED and the operations that paint it.

The LED colours live in a :class:`Leds` object.  Colours may be given as
:class:`~vortexleds.colors.RGBColor`, :class:`~vortexleds.colors.HSVColor`
or packed integers, and each LED stores its own copy.
"""

from math import sin

from .colors import HSVColor, RGBColor, as_rgb
from .constants import RGB_OFF
from .ledtypes import (
    LED_COUNT,
    LED_FIRST,
    LED_LAST,
    PAIR_FIRST,
    PAIR_LAST,
    ledmap_check_led,
    pair_even,
    pair_odd,
)

_BYTE = 0xFF

# engine ticks per second; blink timings given in milliseconds are
# converted to ticks at this rate
TICKRATE = 1000

# degrees to radians, as used by the breathing effects
_DEG_TO_RAD = 0.0174533


def _ms_to_ticks(ms):
    return (int(ms) * TICKRATE) // 1000


def _blink_is_on(time, off_ms, on_ms):
    period = _ms_to_ticks(off_ms + on_ms)
    if period <= 0:
        raise ValueError("a blink needs a period longer than zero ticks")
    return (time % period) < _ms_to_ticks(on_ms)


def _breathe_offset(variance, magnitude):
    return (sin(variance * _DEG_TO_RAD) + 1) * magnitude


class LedStash:
    """A saved copy of the colour of every LED."""

    def __init__(self):
        self._colors = [RGBColor() for _ in range(LED_COUNT)]

    def set_index(self, pos, col):
        """Store a colour for one LED; positions past the last LED are ignored."""
        if pos > LED_LAST:
            return
        self._colors[pos] = as_rgb(col)

    def clear(self):
        """Blank the stored colours from the first LED up to, not including, the last."""
        for pos in range(LED_FIRST, LED_LAST):
            self._colors[pos].clear()

    def __getitem__(self, index):
        return self._colors[index]

    def __setitem__(self, index, col):
        self._colors[index] = as_rgb(col)

    def __len__(self):
        return len(self._colors)


class Leds:
    """The colours of all LEDs together with a global brightness."""

    def __init__(self, brightness):
        self.brightness = int(brightness) & _BYTE
        self._colors = [RGBColor() for _ in range(LED_COUNT)]

    def _led(self, pos):
        if pos > LED_LAST:
            pos = LED_LAST
        return self._colors[pos]

    def cleanup(self):
        """Turn every LED off."""
        for col in self._colors:
            col.clear()

    def set_index(self, target, col):
        """Set one LED; any target past the last LED sets them all."""
        if target >= LED_COUNT:
            self.set_all(col)
            return
        self._colors[target] = as_rgb(col)

    def set_range(self, first, last, col):
        """Set every LED from ``first`` to ``last`` inclusive."""
        for pos in range(int(first), int(last) + 1):
            self.set_index(pos, col)

    def set_all(self, col):
        """Set every LED."""
        self.set_range(LED_FIRST, LED_LAST, col)

    def clear_index(self, target):
        """Turn one LED off."""
        self.set_index(target, RGB_OFF)

    def clear_range(self, first, last):
        """Turn off every LED from ``first`` to ``last`` inclusive."""
        self.set_range(first, last, RGB_OFF)

    def clear_all(self):
        """Turn every LED off."""
        self.set_all(RGB_OFF)

    def set_pair(self, pair, col):
        """Set both LEDs of a pair."""
        self.set_range(pair_even(pair), pair_odd(pair), col)

    def set_pairs(self, first, last, col):
        """Set both LEDs of every pair from ``first`` to ``last`` inclusive."""
        self.set_range(pair_even(first), pair_odd(last), col)

    def clear_pair(self, pair):
        """Turn off both LEDs of a pair."""
        self.set_pair(pair, RGB_OFF)

    def clear_pairs(self, first, last):
        """Turn off both LEDs of every pair from ``first`` to ``last`` inclusive."""
        self.set_pairs(first, last, RGB_OFF)

    def set_range_evens(self, first, last, col):
        """Set the even LED of every pair from ``first`` to ``last`` inclusive."""
        for pair in range(int(first), int(last) + 1):
            self.set_index(pair_even(pair), col)

    def set_all_evens(self, col):
        """Set the even LED of every pair."""
        self.set_range_evens(PAIR_FIRST, PAIR_LAST, col)

    def set_range_odds(self, first, last, col):
        """Set the odd LED of every pair from ``first`` to ``last`` inclusive."""
        for pair in range(int(first), int(last) + 1):
            self.set_index(pair_odd(pair), col)

    def set_all_odds(self, col):
        """Set the odd LED of every pair."""
        self.set_range_odds(PAIR_FIRST, PAIR_LAST, col)

    def clear_range_evens(self, first, last):
        """Turn off the even LED of every pair from ``first`` to ``last`` inclusive."""
        self.set_range_evens(first, last, RGB_OFF)

    def clear_all_evens(self):
        """Turn off the even LED of every pair."""
        self.set_all_evens(RGB_OFF)

    def clear_range_odds(self, first, last):
        """Turn off the odd LED of every pair from ``first`` to ``last`` inclusive."""
        self.set_range_odds(first, last, RGB_OFF)

    def clear_all_odds(self):
        """Turn off the odd LED of every pair."""
        self.set_all_odds(RGB_OFF)

    def set_map(self, ledmap, col):
        """Set every LED held in a bitmap."""
        for pos in range(LED_FIRST, LED_LAST + 1):
            if ledmap_check_led(ledmap, pos):
                self.set_index(pos, col)

    def clear_map(self, ledmap):
        """Turn off every LED held in a bitmap."""
        self.set_map(ledmap, RGB_OFF)

    def stash_all(self, stash):
        """Copy the colour of every LED into a stash."""
        for pos in range(LED_FIRST, LED_LAST + 1):
            stash[pos] = self._led(pos)

    def restore_all(self, stash):
        """Copy every colour back from a stash."""
        for pos in range(LED_FIRST, LED_LAST + 1):
            self._colors[pos] = as_rgb(stash[pos])

    def adjust_brightness_index(self, target, fade_by):
        """Dim one LED by ``fade_by``/256; targets past the last LED dim the last."""
        self._led(target).adjust_brightness(fade_by)

    def adjust_brightness_range(self, first, last, fade_by):
        """Dim every LED from ``first`` to ``last`` inclusive."""
        for pos in range(int(first), int(last) + 1):
            self.adjust_brightness_index(pos, fade_by)

    def adjust_brightness_all(self, fade_by):
        """Dim every LED."""
        self.adjust_brightness_range(LED_FIRST, LED_LAST, fade_by)

    def blink_index_offset(self, target, time, off_ms=250, on_ms=500, col=RGB_OFF):
        """Set one LED when ``time`` falls in the on part of the blink cycle."""
        if _blink_is_on(time, off_ms, on_ms):
            self.set_index(target, col)

    def blink_range_offset(
        self, first, last, time, off_ms=250, on_ms=500, col=RGB_OFF
    ):
        """Set a range of LEDs when ``time`` falls in the on part of the blink cycle."""
        if _blink_is_on(time, off_ms, on_ms):
            self.set_range(first, last, col)

    def breathe_index(self, target, hue, variance, magnitude=15, sat=255, val=210):
        """Set one LED to a hue swinging by up to twice ``magnitude`` with ``variance``."""
        new_hue = int(hue + _breathe_offset(variance, magnitude)) & _BYTE
        self.set_index(target, HSVColor(new_hue, sat, val))

    def breathe_range(
        self, first, last, hue, variance, magnitude=15, sat=255, val=210
    ):
        """Set a range of LEDs to a hue swinging with ``variance``."""
        new_hue = int(hue + _breathe_offset(variance, magnitude)) & _BYTE
        self.set_range(first, last, HSVColor(new_hue, sat, val))

    def breathe_index_sat(
        self, target, hue, variance, magnitude=15, sat=255, val=210
    ):
        """Set one LED to a saturation swinging with ``variance``."""
        swing = int(sat + 128 + _breathe_offset(variance, magnitude)) & _BYTE
        self.set_index(target, HSVColor(hue, 255 - swing, val))

    def breathe_index_val(
        self, target, hue, variance, magnitude=15, sat=255, val=210
    ):
        """Set one LED to a value swinging with ``variance``."""
        swing = int(val + 128 + _breathe_offset(variance, magnitude)) & _BYTE
        self.set_index(target, HSVColor(hue, sat, 255 - swing))

    def get_led(self, pos):
        """A copy of one LED's colour; positions past the last LED read the last."""
        return as_rgb(self._led(pos))