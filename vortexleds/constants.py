"""Colour constants used throughout the engine.

Colours are packed into 32-bit integers.  A value with the top bit
(``HSV_BIT``) set holds hue, saturation and value in its lower three
bytes; otherwise the lower three bytes are red, green and blue.
"""

# Hue positions on the 0-255 hue wheel
HSV_HUE_RED = 0
HSV_HUE_ORANGE = 32
HSV_HUE_YELLOW = 64
HSV_HUE_GREEN = 96
HSV_HUE_AQUA = 128
HSV_HUE_BLUE = 160
HSV_HUE_PURPLE = 192
HSV_HUE_PINK = 224

# marks a packed integer as an HSV colour
HSV_BIT = 1 << 31

_UINT32_MASK = 0xFFFFFFFF


def hsv(h, s, v):
    """Pack hue, saturation and value into an HSV colour integer."""
    return (HSV_BIT | (h << 16) | (s << 8) | v) & _UINT32_MASK


# Predefined HSV colours
HSV_WHITE = HSV_BIT | 0x00006E
HSV_BLUE = HSV_BIT | 0xA0FF6E
HSV_YELLOW = HSV_BIT | 0x3CFF6E
HSV_RED = HSV_BIT | 0x00FF6E
HSV_GREEN = HSV_BIT | 0x55FF6E
HSV_CYAN = HSV_BIT | 0x78FF6E
HSV_PURPLE = HSV_BIT | 0xD4FF6E
HSV_ORANGE = HSV_BIT | 0x14FF6E
HSV_OFF = HSV_BIT | 0x000000

# Pure RGB colours at full brightness
RGB_WHITE = 0xFFFFFF
RGB_BLUE = 0x0000FF
RGB_YELLOW = 0xFFFF00
RGB_RED = 0xFF0000
RGB_GREEN = 0x00FF00
RGB_CYAN = 0x00FFFF
RGB_PURPLE = 0x9933FF
RGB_ORANGE = 0xFF8300
RGB_PINK = 0xFF0099
RGB_MAGENTA = 0xFF00FF
RGB_OFF = 0x000000

# Brightness steps 0 (dimmest) to 9 (brightest before the pure colours)
RGB_WHITE0 = 0x101010
RGB_WHITE1 = 0x1C1C1C
RGB_WHITE2 = 0x383838
RGB_WHITE3 = 0x545454
RGB_WHITE4 = 0x707070
RGB_WHITE5 = 0x8C8C8C
RGB_WHITE6 = 0xA8A8A8
RGB_WHITE7 = 0xC4C4C4
RGB_WHITE8 = 0xE0E0E0
RGB_WHITE9 = 0xFCFCFC

RGB_BLUE0 = 0x000010
RGB_BLUE1 = 0x00001C
RGB_BLUE2 = 0x000038
RGB_BLUE3 = 0x000054
RGB_BLUE4 = 0x000070
RGB_BLUE5 = 0x00008C
RGB_BLUE6 = 0x0000A8
RGB_BLUE7 = 0x0000C4
RGB_BLUE8 = 0x0000E0
RGB_BLUE9 = 0x0000FC

RGB_YELLOW0 = 0x101000
RGB_YELLOW1 = 0x1C1C00
RGB_YELLOW2 = 0x383800
RGB_YELLOW3 = 0x545400
RGB_YELLOW4 = 0x707000
RGB_YELLOW5 = 0x8C8C00
RGB_YELLOW6 = 0xA8A800
RGB_YELLOW7 = 0xC4C400
RGB_YELLOW8 = 0xE0E000
RGB_YELLOW9 = 0xFCFC00

RGB_RED0 = 0x100000
RGB_RED1 = 0x1C0000
RGB_RED2 = 0x380000
RGB_RED3 = 0x540000
RGB_RED4 = 0x700000
RGB_RED5 = 0x8C0000
RGB_RED6 = 0xA80000
RGB_RED7 = 0xC40000
RGB_RED8 = 0xE00000
RGB_RED9 = 0xFC0000

RGB_GREEN0 = 0x001000
RGB_GREEN1 = 0x001C00
RGB_GREEN2 = 0x003800
RGB_GREEN3 = 0x005400
RGB_GREEN4 = 0x007000
RGB_GREEN5 = 0x008C00
RGB_GREEN6 = 0x00A800
RGB_GREEN7 = 0x00C400
RGB_GREEN8 = 0x00E000
RGB_GREEN9 = 0x00FC00

RGB_CYAN0 = 0x001010
RGB_CYAN1 = 0x001C1C
RGB_CYAN2 = 0x003838
RGB_CYAN3 = 0x005454
RGB_CYAN4 = 0x007070
RGB_CYAN5 = 0x008C8C
RGB_CYAN6 = 0x00A8A8
RGB_CYAN7 = 0x00C4C4
RGB_CYAN8 = 0x00E0E0
RGB_CYAN9 = 0x00FCFC

RGB_MAGENTA0 = 0x100010
RGB_MAGENTA1 = 0x1C001C
RGB_MAGENTA2 = 0x380038
RGB_MAGENTA3 = 0x540054
RGB_MAGENTA4 = 0x700070
RGB_MAGENTA5 = 0x8C008C
RGB_MAGENTA6 = 0xA800A8
RGB_MAGENTA7 = 0xC400C4
RGB_MAGENTA8 = 0xE000E0
RGB_MAGENTA9 = 0xFC00FC

RGB_ORANGE0 = 0x100800
RGB_ORANGE1 = 0x1C0E00
RGB_ORANGE2 = 0x381C00
RGB_ORANGE3 = 0x542B00
RGB_ORANGE4 = 0x703900
RGB_ORANGE5 = 0x8C4800
RGB_ORANGE6 = 0xA85600
RGB_ORANGE7 = 0xC46500
RGB_ORANGE8 = 0xE07300
RGB_ORANGE9 = 0xFC8200