import struct


# Header flag sentinels
FLAGS_ENCRYPTED = 0x8FFFFFFF
FLAGS_NOCRYPT = 0xFFFFFFFF

MEG_MAGIC = 0x3F7D70A4

# File table flags
FILE_FLAG_ENCRYPTED = 1 << 0


# Header (24 bytes), all u32:
#  - flags
#  - magic
#  - data_offset (unused by the reader)
#  - numfiles
#  - numfiles (must repeat the first count)
#  - name_tab_size
HEADER_SIZE = 24
U32_STRUCT = struct.Struct("<I")

# Name table entry prefix: u16 byte length, followed by UTF-8 bytes
NAME_LEN_STRUCT = struct.Struct("<H")

# File table entry (20 bytes)
#  - flags u16
#  - crc u32 (not verified)
#  - index u32 (redundant with position)
#  - size u32
#  - start u32
#  - name_index u16
FILE_FLAGS_STRUCT = struct.Struct("<H")
FILE_ENTRY_STRUCT = struct.Struct("<IIIIH")


COPY_CHUNK_SIZE = 64 * 1024
