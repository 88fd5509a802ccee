"""Bay symbols and vehicle tags."""

PEDESTRIAN_EXIT_SYMBOL = "="
DISABLED_FREE_SYMBOL = "@"
DISABLED_TAKEN_SYMBOL = "D"
FREE_SYMBOL = "U"

DISABLED_VEHICLE = DISABLED_TAKEN_SYMBOL

RESERVED_SYMBOLS = frozenset(
    {
        PEDESTRIAN_EXIT_SYMBOL,
        DISABLED_FREE_SYMBOL,
        DISABLED_TAKEN_SYMBOL,
        FREE_SYMBOL,
    }
)
# "D" is reserved for rendering but is also the tag a disabled vehicle parks with.
RESERVED_VEHICLE_TAGS = RESERVED_SYMBOLS - {DISABLED_VEHICLE}
