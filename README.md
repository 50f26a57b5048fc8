# vortexleds

Integer colour arithmetic and LED state for small addressable-LED light-show
devices that have ten LEDs arranged as five pairs.

## What is in the package

- `vortexleds.constants` holds named RGB and HSV colour values, such as
  `RGB_RED`, `RGB_WHITE0` to `RGB_WHITE9` and `HSV_BLUE`. Colours are packed
  into integers, and a value with `HSV_BIT` set is read as HSV. Use
  `hsv(h, s, v)` to build a packed HSV value.
- `vortexleds.ledtypes` has the `LedPos` and `Pair` enums and helpers for LED
  bitmaps: `map_led`, `map_pair`, `map_inverse`, `map_is_one_led`,
  `ledmap_first_led`, `ledmap_next_led`, `iter_ledmap`, `ledmap_set_led`,
  `ledmap_set_pair`, `ledmap_check_led` and `ledmap_check_pair`. It also has
  the preset maps `MAP_LED_ALL`, `MAP_PAIR_EVENS` and `MAP_PAIR_ODDS`.
- `vortexleds.colors` provides `RGBColor` and `HSVColor`, both with 8-bit
  channels. The conversions between them use 8-bit integer arithmetic:
  - HSV to RGB: `hsv_to_rgb_rainbow`, `hsv_to_rgb_raw` and
    `hsv_to_rgb_generic`.
  - RGB to HSV: `rgb_to_hsv_approx` and `rgb_to_hsv_generic`.

  `HSVColor.to_rgb()` and `RGBColor.from_hsv()` use the method chosen by
  `set_hsv_rgb_algorithm` (see `HsvToRgbAlgorithm`). The default is `GENERIC`.
  `RGBColor.to_hsv()` and `HSVColor.from_rgb()` always use the generic method.
  `as_rgb` turns a packed integer, an `HSVColor` or an `RGBColor` into a new
  `RGBColor`.
- `vortexleds.colorset` provides `Colorset`, a palette of up to eight colours
  (`MAX_COLOR_SLOTS`) with a cycling cursor: `get_next`, `get_prev`, `cur`,
  `peek` and `skip`.
  - `add_color` raises `ValueError` when the set is full.
  - `serialize()` writes a count byte, then all reds, then all greens, then
    all blues. `Colorset.unserialize(data)` reads that form back and raises
    `ValueError` on bad or truncated data.
  - The `randomize*` methods fill the set using the modes in `ValueStyle`,
    `ColorMode` and `ColorMode2`.
- `vortexleds.leds` provides `Leds` and `LedStash`.
  - `Leds` holds the colour of every LED and a `brightness` attribute. It has
    setters and clearers for single LEDs, ranges, pairs, even and odd LEDs,
    and bitmaps.
  - `Leds` also has brightness fading (`adjust_brightness_*`), timed blinking
    against a time you pass in (`blink_index_offset` and
    `blink_range_offset`), and hue, saturation and value breathing effects
    (`breathe_*`).
  - `LedStash` saves LED state and gives it back, through `Leds.stash_all`
    and `Leds.restore_all`.

## Random contexts

The randomizing methods of `Colorset` take a `ctx` argument. This can be any
object with a `next8` method, where:

- `ctx.next8()` returns a random byte.
- `ctx.next8(low, high)` returns a value in that range.

The package does not include a random generator of its own.

## Install

```
pip install vortexleds
```

## Example

```python
from vortexleds.colors import RGBColor, HSVColor
from vortexleds.colorset import Colorset
from vortexleds.leds import Leds, LedStash
from vortexleds.ledtypes import LedPos, Pair

red = RGBColor.from_raw(0xFF0000)
hsv = HSVColor.from_rgb(red)

colors = Colorset(red, RGBColor(0, 255, 0))
first = colors.get_next()   # the first colour in the set
data = colors.serialize()
assert Colorset.unserialize(data) == colors

leds = Leds(255)
leds.set_pair(Pair.PAIR_0, red)
stash = LedStash()
leds.stash_all(stash)
leds.clear_all()
leds.restore_all(stash)
print(leds.get_led(LedPos.LED_0))
```

## What it does not do

This package only keeps colour state in memory. It has no:

- output to real LEDs or any display;
- clock, so blinking works only from a time value that you pass in;
- button handling, menus, modes or patterns;
- storage beyond the byte form of a `Colorset`.

## Tests

```
pip install -e .[test]
pytest
```