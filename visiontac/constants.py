"""Track-log format constants."""

# Header lines, matched verbatim against the first line of a log
STANDARD_HEADER = "INDEX,TAG,DATE,TIME,LATITUDE N/S,LONGITUDE E/W,HEIGHT,SPEED,HEADING,VOX"
ADVANCED_HEADER = (
    "INDEX,TAG,DATE,TIME,LATITUDE N/S,LONGITUDE E/W,HEIGHT,SPEED,HEADING,"
    "FIX MODE,VALID,PDOP,HDOP,VDOP,VOX"
)

FIELD_SEPARATOR = ","
PAD_CHAR = "\x00"

# Column counts per layout
MINIMAL_FIELD_COUNT = 9
STANDARD_FIELD_COUNT = 10
ADVANCED_FIELD_COUNT = 15

# Column names in file order
STANDARD_COLUMNS = STANDARD_HEADER.split(FIELD_SEPARATOR)
ADVANCED_COLUMNS = ADVANCED_HEADER.split(FIELD_SEPARATOR)

# Hemisphere letters: (positive, negative)
LATITUDE_DIRECTIONS = ("N", "S")
LONGITUDE_DIRECTIONS = ("E", "W")

# DATE + TIME columns, YYMMDD + HHMMSS
DATE_TOKEN_LENGTH = 6
TIME_TOKEN_LENGTH = 6
# Two-digit years below the pivot are 20xx, the rest 19xx
CENTURY_PIVOT = 69

DEFAULT_ENCODING = "ascii"
