"""LED positions, LED pairs and bitmaps of LEDs."""

from enum import IntEnum


class LedPos(IntEnum):
    """Positions of the LEDs plus special targets."""

    LED_0 = 0
    LED_FIRST = 0
    LED_1 = 1
    LED_2 = 2
    LED_3 = 3
    LED_4 = 4
    LED_5 = 5
    LED_6 = 6
    LED_7 = 7
    LED_8 = 8
    LED_9 = 9
    LED_LAST = 9
    LED_COUNT = 10
    # target all leds (multi and single)
    LED_ALL = 10
    # target the multi led slot
    LED_MULTI = 11
    # target all single led slots
    LED_ALL_SINGLE = 12
    # target the effective slot
    LED_ANY = 13


class Pair(IntEnum):
    """Pairs of LEDs: each pair has an even and an odd LED."""

    PAIR_0 = 0
    PAIR_FIRST = 0
    PAIR_1 = 1
    PAIR_2 = 2
    PAIR_3 = 3
    PAIR_4 = 4
    PAIR_LAST = 4
    PAIR_COUNT = 5


LED_FIRST = LedPos.LED_FIRST
LED_LAST = LedPos.LED_LAST
LED_COUNT = LedPos.LED_COUNT
LED_ALL = LedPos.LED_ALL
LED_MULTI = LedPos.LED_MULTI
LED_ALL_SINGLE = LedPos.LED_ALL_SINGLE
LED_ANY = LedPos.LED_ANY

PAIR_FIRST = Pair.PAIR_FIRST
PAIR_LAST = Pair.PAIR_LAST
PAIR_COUNT = Pair.PAIR_COUNT

if LED_COUNT != PAIR_COUNT * 2:
    raise RuntimeError("Incorrect number of pairs for leds")

_UINT64_MASK = (1 << 64) - 1


def is_even(pos):
    """Whether an LED position is even."""
    return pos % 2 == 0


def is_odd(pos):
    """Whether an LED position is odd."""
    return pos % 2 != 0


def pair_even(pair):
    """The even LED position of a pair."""
    return int(pair) * 2


def pair_odd(pair):
    """The odd LED position of a pair."""
    return int(pair) * 2 + 1


def led_to_pair(pos):
    """The pair an LED position belongs to."""
    return int(pos) // 2


def map_led(led):
    """A bitmap holding a single LED."""
    return (1 << int(led)) & _UINT64_MASK


def map_pair_even(pair):
    """A bitmap holding the even LED of a pair."""
    return map_led(pair_even(pair))


def map_pair_odd(pair):
    """A bitmap holding the odd LED of a pair."""
    return map_led(pair_odd(pair))


def map_pair(pair):
    """A bitmap holding both LEDs of a pair."""
    return map_pair_even(pair) | map_pair_odd(pair)


# bitmap of every single LED
MAP_LED_ALL = (2 << (LED_COUNT - 1)) - 1
# empty bitmap
MAP_LED_NONE = 0

MAP_PAIR_EVENS = ((1 << LED_COUNT) - 1) & 0x55555555
MAP_PAIR_ODDS = ((1 << LED_COUNT) - 1) & 0xAAAAAAAA

MAP_PAIR_ODD_EVENS = (
    map_pair_even(Pair.PAIR_0) | map_pair_even(Pair.PAIR_2) | map_pair_even(Pair.PAIR_4)
)
MAP_PAIR_ODD_ODDS = (
    map_pair_odd(Pair.PAIR_0) | map_pair_odd(Pair.PAIR_2) | map_pair_odd(Pair.PAIR_4)
)
MAP_PAIR_EVEN_EVENS = map_pair_even(Pair.PAIR_3) | map_pair_even(Pair.PAIR_1)
MAP_PAIR_EVEN_ODDS = map_pair_odd(Pair.PAIR_3) | map_pair_odd(Pair.PAIR_1)


def map_is_one_led(ledmap):
    """Whether a bitmap holds exactly one LED."""
    return bool(ledmap) and not (ledmap & (ledmap - 1))


def map_inverse(ledmap):
    """Every single LED not in the bitmap."""
    return ~ledmap & MAP_LED_ALL


def _scan(ledmap, pos):
    while ledmap and pos < LED_COUNT:
        if ledmap & 1:
            return LedPos(pos)
        ledmap >>= 1
        pos += 1
    return LED_COUNT


def ledmap_first_led(ledmap):
    """The first LED in a bitmap, LED_MULTI for the multi map, else LED_COUNT."""
    if ledmap == map_led(LED_MULTI):
        return LED_MULTI
    return _scan(ledmap, int(LED_FIRST))


def ledmap_next_led(ledmap, pos):
    """The next LED in a bitmap after ``pos``, or LED_COUNT if there is none."""
    pos = int(pos) + 1
    return _scan(ledmap >> pos, pos)


def iter_ledmap(ledmap):
    """Yield every single LED position held in a bitmap, in order."""
    pos = ledmap_first_led(ledmap)
    while pos < LED_COUNT:
        yield pos
        pos = ledmap_next_led(ledmap, pos)


def ledmap_set_led(ledmap, pos):
    """Return the bitmap with a single LED added; positions past the LEDs are ignored."""
    if pos < LED_COUNT:
        ledmap |= 1 << int(pos)
    return ledmap


def ledmap_set_pair(ledmap, pair):
    """Return the bitmap with both LEDs of a pair added."""
    ledmap = ledmap_set_led(ledmap, pair_even(pair))
    return ledmap_set_led(ledmap, pair_odd(pair))


def ledmap_check_led(ledmap, pos):
    """Whether an LED is in the bitmap."""
    return (ledmap & map_led(pos)) != 0


def ledmap_check_pair(ledmap, pair):
    """Whether both LEDs of a pair are in the bitmap."""
    return ledmap_check_led(ledmap, pair_even(pair)) and ledmap_check_led(
        ledmap, pair_odd(pair)
    )