import secrets
import time


def new_identifier(prefix: str) -> str:
    """Return an opaque, time-derived identifier such as ``usr_1700000000000000000a1b2c3d4``.

    The nanosecond clock orders identifiers roughly by creation time; the random
    suffix keeps two records created within the same tick distinct.
    """
    return f"{prefix}_{time.time_ns()}{secrets.token_hex(4)}"
