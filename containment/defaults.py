# numpy dtype kinds whose elements only compare meaningfully with numbers
NUMERIC_DTYPE_KINDS = "biufc"

# numpy dtype kinds holding fixed-width text (unicode and bytes)
TEXT_DTYPE_KINDS = "US"

# Valid elements of a bytes-like buffer
BYTE_VALUES = range(256)

# memoryview formats treated as raw byte buffers
BYTE_FORMATS = ("B",)
