"""RGB and HSV colour types and the conversions between them.

All channels are 8-bit.  Conversions reproduce the integer arithmetic of
the engine exactly, including its 8-bit wrap-around, so the same input
always gives the same colour.
"""

from dataclasses import dataclass
from enum import IntEnum

from .constants import HSV_BIT

_BYTE = 0xFF


class HsvToRgbAlgorithm(IntEnum):
    """Selects the algorithm used when an HSV colour is turned into RGB."""

    GENERIC = 0
    RAW = 1
    RAINBOW = 2


_hsv_rgb_algorithm = HsvToRgbAlgorithm.GENERIC


def get_hsv_rgb_algorithm():
    """The algorithm used by every HSV to RGB conversion."""
    return _hsv_rgb_algorithm


def set_hsv_rgb_algorithm(algorithm):
    """Choose the algorithm used by every HSV to RGB conversion."""
    global _hsv_rgb_algorithm
    _hsv_rgb_algorithm = HsvToRgbAlgorithm(algorithm)


@dataclass(eq=False)
class HSVColor:
    """A colour given by 8-bit hue, saturation and value."""

    hue: int = 0
    sat: int = 0
    val: int = 0

    def __post_init__(self):
        self.hue = int(self.hue) & _BYTE
        self.sat = int(self.sat) & _BYTE
        self.val = int(self.val) & _BYTE

    @classmethod
    def from_raw(cls, value):
        """Build from a packed integer; a value without the HSV bit is read as RGB."""
        if not value & HSV_BIT:
            return RGBColor.from_raw(value).to_hsv()
        return cls((value >> 16) & _BYTE, (value >> 8) & _BYTE, value & _BYTE)

    @classmethod
    def from_rgb(cls, rgb):
        """Convert an RGB colour."""
        return rgb_to_hsv_generic(rgb)

    def to_rgb(self):
        """Convert to RGB with the currently selected algorithm."""
        return _HSV_TO_RGB[_hsv_rgb_algorithm](self)

    def raw(self):
        """The colour packed into an integer carrying the HSV bit."""
        return HSV_BIT | (self.hue << 16) | (self.sat << 8) | self.val

    def empty(self):
        """Whether every channel is zero."""
        return not self.hue and not self.sat and not self.val

    def clear(self):
        """Set every channel to zero."""
        self.hue = self.sat = self.val = 0

    def __eq__(self, other):
        if not isinstance(other, HSVColor):
            return NotImplemented
        return self.raw() == other.raw()

    __hash__ = None


@dataclass(eq=False)
class RGBColor:
    """A colour given by 8-bit red, green and blue."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self):
        self.red = int(self.red) & _BYTE
        self.green = int(self.green) & _BYTE
        self.blue = int(self.blue) & _BYTE

    @classmethod
    def from_raw(cls, value):
        """Build from a packed integer; a value with the HSV bit is converted from HSV."""
        if value & HSV_BIT:
            return HSVColor.from_raw(value).to_rgb()
        return cls((value >> 16) & _BYTE, (value >> 8) & _BYTE, value & _BYTE)

    @classmethod
    def from_hsv(cls, hsv):
        """Convert an HSV colour with the currently selected algorithm."""
        return hsv.to_rgb()

    def to_hsv(self):
        """Convert to HSV."""
        return rgb_to_hsv_generic(self)

    def raw(self):
        """The colour packed into a 24-bit integer."""
        return (self.red << 16) | (self.green << 8) | self.blue

    def empty(self):
        """Whether every channel is zero."""
        return not self.red and not self.green and not self.blue

    def clear(self):
        """Set every channel to zero."""
        self.red = self.green = self.blue = 0

    def adjust_brightness(self, fade_by):
        """Dim every channel by ``fade_by``/256 in place and return the colour."""
        factor = 256 - (int(fade_by) & _BYTE)
        self.red = (self.red * factor) >> 8
        self.green = (self.green * factor) >> 8
        self.blue = (self.blue * factor) >> 8
        return self

    def to_bytes(self):
        """The three channel bytes: red, green, blue."""
        return bytes((self.red, self.green, self.blue))

    @classmethod
    def from_bytes(cls, data):
        """Read a colour from the first three bytes of ``data``."""
        if len(data) < 3:
            raise ValueError("an RGB colour needs 3 bytes, got %d" % len(data))
        return cls(data[0], data[1], data[2])

    def __eq__(self, other):
        if not isinstance(other, RGBColor):
            return NotImplemented
        return self.raw() == other.raw()

    __hash__ = None


def as_rgb(value):
    """Turn a packed integer, an HSVColor or an RGBColor into an RGBColor."""
    if isinstance(value, RGBColor):
        return RGBColor(value.red, value.green, value.blue)
    if isinstance(value, HSVColor):
        return value.to_rgb()
    if isinstance(value, int):
        return RGBColor.from_raw(value)
    raise TypeError("cannot make a colour from %r" % (value,))


def _scale8(i, scale):
    return (i * scale) >> 8


def _fixfrac8(n, d):
    return (n * 256) // d


def _qsub8(i, j):
    return max(i - j, 0)


def _cdiv(a, b):
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def hsv_to_rgb_rainbow(color):
    """Rainbow conversion giving every hue an equal share; yellow is widened."""
    hue, sat, val = color.hue, color.sat, color.val
    offset8 = ((hue & 0x1F) << 3) & _BYTE
    third = _scale8(offset8, 256 // 3)
    twothirds = _scale8(offset8, (256 * 2) // 3)

    section = (hue >> 5) & 0x7
    if section == 0:
        r, g, b = 255 - third, third, 0
    elif section == 1:
        r, g, b = 171, 85 + third, 0
    elif section == 2:
        r, g, b = 171 - twothirds, 170 + third, 0
    elif section == 3:
        r, g, b = 0, 255 - third, third
    elif section == 4:
        r, g, b = 0, 171 - twothirds, 85 + twothirds
    elif section == 5:
        r, g, b = third, 0, 255 - third
    elif section == 6:
        r, g, b = 85 + third, 0, 171 - third
    else:
        r, g, b = 170 + third, 0, 85 - third
    r, g, b = r & _BYTE, g & _BYTE, b & _BYTE

    g = _scale8(g, 185)

    if sat != 255:
        if sat == 0:
            r = g = b = 255
        else:
            r, g, b = ((_scale8(c, sat) + 1) & _BYTE if c else 0 for c in (r, g, b))
            desat = 255 - sat
            floor = _scale8(desat, desat)
            r, g, b = ((c + floor) & _BYTE for c in (r, g, b))

    if val != 255:
        val = _scale8(val, val)
        if val == 0:
            r = g = b = 0
        else:
            r, g, b = ((_scale8(c, val) + 1) & _BYTE if c else 0 for c in (r, g, b))

    return RGBColor(r, g, b)


def hsv_to_rgb_raw(color):
    """Raw conversion over three 64-step hue sections."""
    value = color.val
    brightness_floor = (value * (255 - color.sat)) // 256
    amplitude = value - brightness_floor
    section = color.hue // 0x40
    offset = color.hue % 0x40
    rampup = offset
    rampdown = 0x3F - offset
    up = (((rampup * amplitude) // 64) + brightness_floor) & _BYTE
    down = (((rampdown * amplitude) // 64) + brightness_floor) & _BYTE
    if section == 0:
        return RGBColor(down, up, brightness_floor)
    if section == 1:
        return RGBColor(brightness_floor, down, up)
    return RGBColor(up, brightness_floor, down)


def hsv_to_rgb_generic(color):
    """Plain six-region HSV to RGB conversion."""
    hue, sat, val = color.hue, color.sat, color.val
    if sat == 0:
        return RGBColor(val, val, val)
    region = hue // 43
    remainder = ((hue - region * 43) * 6) & _BYTE
    p = ((val * (255 - sat)) >> 8) & _BYTE
    q = ((val * (255 - ((sat * remainder) >> 8))) >> 8) & _BYTE
    t = ((val * (255 - ((sat * (255 - remainder)) >> 8))) >> 8) & _BYTE
    if region == 0:
        return RGBColor(val, t, p)
    if region == 1:
        return RGBColor(q, val, p)
    if region == 2:
        return RGBColor(p, val, t)
    if region == 3:
        return RGBColor(p, q, val)
    if region == 4:
        return RGBColor(t, p, val)
    return RGBColor(val, p, q)


def _sqrt16(x):
    if x <= 1:
        return x
    low = 1
    hi = 255 if x > 7904 else ((x >> 5) + 8) & _BYTE
    while True:
        mid = (low + hi) >> 1
        if mid * mid > x:
            hi = (mid - 1) & _BYTE
        else:
            if mid == 255:
                return 255
            low = mid + 1
        if hi < low:
            break
    return (low - 1) & _BYTE


_HUE_RED = 0
_HUE_ORANGE = 32
_HUE_YELLOW = 64
_HUE_GREEN = 96
_HUE_AQUA = 128
_HUE_BLUE = 160
_HUE_PURPLE = 192
_HUE_PINK = 224


def rgb_to_hsv_approx(color):
    """Slow approximate RGB to HSV conversion matching the rainbow conversion."""
    r, g, b = color.red, color.green, color.blue
    desat = min(r, g, b, 255)
    r, g, b = r - desat, g - desat, b - desat
    s = 255 - desat
    if s != 255:
        s = (255 - _sqrt16((255 - s) * 256)) & _BYTE
    if r + g + b == 0:
        return HSVColor(0, 0, 255 - s)

    if s < 255:
        if s == 0:
            s = 1
        scaleup = 65535 // s
        r, g, b = (((c * scaleup) // 256) & _BYTE for c in (r, g, b))

    total = r + g + b
    if total < 255:
        if total == 0:
            total = 1
        scaleup = 65535 // total
        r, g, b = (((c * scaleup) // 256) & _BYTE for c in (r, g, b))

    if total > 255:
        v = 255
    else:
        v = desat + total if desat + total <= 255 else 255
        if v != 255:
            v = _sqrt16(v * 256)

    highest = max(r, g, b)
    if highest == r:
        if g == 0:
            h = (_HUE_PURPLE + _HUE_PINK) // 2
            h += _scale8(_qsub8(r, 128), _fixfrac8(48, 128))
        elif (r - g) > g:
            h = _HUE_RED + _scale8(g, _fixfrac8(32, 85))
        else:
            h = _HUE_ORANGE
            h += _scale8(_qsub8(((g - 85) + (171 - r)) & _BYTE, 4), _fixfrac8(32, 85))
    elif highest == g:
        if b == 0:
            radj = _scale8(_qsub8(171, r), 47)
            gadj = _scale8(_qsub8(g, 171), 96)
            h = _HUE_YELLOW + ((radj + gadj) & _BYTE) // 2
        elif (g - b) > b:
            h = _HUE_GREEN + _scale8(b, _fixfrac8(32, 85))
        else:
            h = _HUE_AQUA + _scale8(_qsub8(b, 85), _fixfrac8(8, 42))
    else:
        if r == 0:
            h = _HUE_AQUA + (_HUE_BLUE - _HUE_AQUA) // 4
            h += _scale8(_qsub8(b, 128), _fixfrac8(24, 128))
        elif (b - r) > r:
            h = _HUE_BLUE + _scale8(r, _fixfrac8(32, 85))
        else:
            h = _HUE_PURPLE + _scale8(_qsub8(r, 85), _fixfrac8(32, 85))
    return HSVColor((h + 1) & _BYTE, s, v)


def rgb_to_hsv_generic(color):
    """Plain RGB to HSV conversion."""
    r, g, b = color.red, color.green, color.blue
    rgb_min = min(r, g, b)
    rgb_max = max(r, g, b)
    if rgb_max == 0:
        return HSVColor(0, 0, 0)
    spread = rgb_max - rgb_min
    sat = (255 * spread // rgb_max) & _BYTE
    if sat == 0:
        return HSVColor(0, 0, rgb_max)
    if rgb_max == r:
        hue = _cdiv(43 * (g - b), spread)
    elif rgb_max == g:
        hue = 85 + _cdiv(43 * (b - r), spread)
    else:
        hue = 171 + _cdiv(43 * (r - g), spread)
    return HSVColor(hue & _BYTE, sat, rgb_max)


_HSV_TO_RGB = {
    HsvToRgbAlgorithm.GENERIC: hsv_to_rgb_generic,
    HsvToRgbAlgorithm.RAW: hsv_to_rgb_raw,
    HsvToRgbAlgorithm.RAINBOW: hsv_to_rgb_rainbow,
}