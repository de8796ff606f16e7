"""Permission bit decoding.

Turns numeric mode bits into the symbolic rwx form, e.g. 0o755 becomes
``rwxr-xr-x``. Special bits (setuid, setgid, sticky) are not rendered.
"""


def decode_triad(bits: int) -> str:
    """Decode one 3-bit permission field into an rwx triad.

    Args:
        bits: Permission field; only the low three bits are used.

    Returns:
        Three characters in read, write, execute order.
    """
    return "".join(
        (
            "r" if bits & 4 else "-",
            "w" if bits & 2 else "-",
            "x" if bits & 1 else "-",
        )
    )


def decode_permissions(mode: int) -> str:
    """Decode owner, group and other permission bits of a raw mode.

    Args:
        mode: Raw ``st_mode`` value.

    Returns:
        Nine character permission string.
    """
    return (
        decode_triad((mode >> 6) & 0o7)
        + decode_triad((mode >> 3) & 0o7)
        + decode_triad(mode & 0o7)
    )
