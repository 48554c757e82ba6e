from typing import Union

FNV_OFFSET_BASIS = 14695981039346656037
FNV_PRIME = 1099511628211
_MASK_64 = (1 << 64) - 1


def fnv1a_64(data: Union[str, bytes]) -> int:
    """64-bit FNV-1a over the key's bytes (str keys are UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = FNV_OFFSET_BASIS
    for octet in data:
        h ^= octet
        h = (h * FNV_PRIME) & _MASK_64
    return h


def hash_key(key: Union[str, bytes], bucket_count: int) -> int:
    if bucket_count < 1:
        raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
    return fnv1a_64(key) % bucket_count
