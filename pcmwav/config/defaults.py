"""Wire constants and accepted ranges for canonical PCM WAV headers."""

# Four-character chunk identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

# The only "fmt " body accepted: 16 bytes, integer PCM tag
PCM_FMT_SIZE = 16
PCM_AUDIO_FORMAT = 1

# 12-byte RIFF descriptor + 8-byte fmt header + 16-byte fmt body
DATA_CHUNK_OFFSET = 36
HEADER_SIZE = DATA_CHUNK_OFFSET + 8

MIN_CHANNELS = 1
MAX_CHANNELS = 16
MIN_SAMPLE_RATE = 1
MAX_SAMPLE_RATE = 192000

MAX_DATA_LENGTH = 0xFFFFFFFF
