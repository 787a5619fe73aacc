"""Constants shared by every b64codec component."""

BASE = 64

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

BITS_PER_CHAR = 6

PADDING_CHAR = "="
NEGATIVE_CHAR = "-"

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

SEXTET_MASK = 0x3F
BYTE_MASK = 0xFF
