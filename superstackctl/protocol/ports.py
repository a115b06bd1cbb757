"""Compact port-list notation used by the VLAN detail report.

The switch prints port membership as ``none``, ``3``, ``1-5`` or
``1,3-5,7``. Decoding expands that into an ordered list of port numbers;
overlapping ranges yield repeated ports.
"""

from __future__ import annotations

from loguru import logger

from superstackctl.exceptions import ParseError

NO_PORTS = "none"
UINT32_MAX = 0xFFFFFFFF


def parse_uint(token: str) -> int:
    """Parse an unsigned 32-bit decimal integer, rejecting signs and spaces.

    Raises:
        ValueError: If ``token`` is not a plain decimal number in range.
    """
    if not token or not token.isascii() or not token.isdigit():
        raise ValueError(f"not an unsigned integer: {token!r}")
    value = int(token)
    if value > UINT32_MAX:
        raise ValueError(f"unsigned integer out of range: {token!r}")
    return value


def _expand_token(token: str) -> list[int]:
    if "-" not in token:
        return [parse_uint(token)]
    start, end = token.split("-", 1)
    return list(range(parse_uint(start), parse_uint(end) + 1))


def decode_port_range(spec: str, strict: bool = False) -> list[int]:
    """Expand a port-range spec into a list of port numbers.

    Args:
        spec: Compact notation such as ``"1,3-5,7"`` or ``"none"``.
        strict: Raise on malformed tokens instead of dropping them.

    Returns:
        Ports in token order, duplicates preserved.

    Raises:
        ParseError: Only with ``strict=True``, for a malformed token.
    """
    if spec == NO_PORTS:
        return []

    ports: list[int] = []
    for token in spec.split(","):
        try:
            ports.extend(_expand_token(token))
        except ValueError as e:
            if strict:
                raise ParseError(f"Malformed port range token {token!r} in {spec!r}") from e
            logger.warning("Dropping malformed port range token {!r} in {!r}", token, spec)
    return ports


def encode_port_range(ports: list[int]) -> str:
    """Compress a list of ports into compact notation.

    Runs of consecutive ascending ports become ``a-b``. Input order is kept,
    so ``decode_port_range(encode_port_range(p)) == p`` for any list.
    """
    if not ports:
        return NO_PORTS

    parts: list[str] = []
    run_start = run_end = ports[0]
    for port in ports[1:]:
        if port == run_end + 1:
            run_end = port
            continue
        parts.append(str(run_start) if run_start == run_end else f"{run_start}-{run_end}")
        run_start = run_end = port
    parts.append(str(run_start) if run_start == run_end else f"{run_start}-{run_end}")
    return ",".join(parts)
