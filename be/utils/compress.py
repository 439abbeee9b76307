import gzip

# GZIP magic header bytes
_GZIP_MAGIC = b"\x1f\x8b"


def is_gzip(data: bytes) -> bool:
    return isinstance(data, (bytes, bytearray)) and len(data) >= 2 and bytes(data[:2]) == _GZIP_MAGIC


def compress_for_storage(data: bytes, enabled: bool = True):
    """Return ``(stored_bytes, compressed)``.

    Already-gzipped input and input that would not shrink are kept as-is, so
    callers must persist the flag and pass it back to decompress_from_storage.
    """
    if not enabled or not data or is_gzip(data):
        return data, False
    packed = gzip.compress(data)
    if len(packed) >= len(data):
        return data, False
    return packed, True


def decompress_from_storage(blob: bytes, compressed: bool) -> bytes:
    if not compressed:
        return blob
    return gzip.decompress(blob)
