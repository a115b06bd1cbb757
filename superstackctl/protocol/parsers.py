"""Parsers for the ``bridge vlan`` console reports.

Both parsers are positional: they follow the column layout of the
SuperStack firmware exactly, so a changed layout is a compatibility break
and shows up as :class:`ParseError`.
"""

from __future__ import annotations

import re

from loguru import logger

from superstackctl.exceptions import ParseError
from superstackctl.models.vlan import Vlan, VlanDetails
from superstackctl.protocol.ports import decode_port_range, parse_uint

# Fields inside a report line are separated by runs of two or more spaces,
# single spaces belong to the value (e.g. a VLAN name "Default VLAN").
FIELD_SEPARATOR = re.compile(r" {2,}")

SUMMARY_HEADER_LINES = 2
DETAIL_INFO_LINE = 0
DETAIL_PORTS_LINE = 3


def _split_fields(line: str) -> list[str]:
    return [f.strip() for f in FIELD_SEPARATOR.split(line) if f.strip()]


def parse_vlan_summary(output: str) -> list[Vlan]:
    """Parse ``bridge vlan summary all`` output.

    Expected format (the first two lines are always discarded)::

        VLAN ID  Name
        -------  ------------------------
        1        Default VLAN
        10       Engineering

    Rows without a name column (a bare token) are skipped.

    Raises:
        ParseError: If a row does not start with a numeric VLAN id.
    """
    vlans: list[Vlan] = []
    for line in output.splitlines()[SUMMARY_HEADER_LINES:]:
        line = line.strip()
        if not line:
            continue

        parts = line.split(maxsplit=1)
        if len(parts) < 2:
            logger.debug("Skipping summary line without name column: {!r}", line)
            continue

        try:
            vlan_id = parse_uint(parts[0])
        except ValueError as e:
            raise ParseError(f"Invalid VLAN id in summary line {line!r}") from e

        vlans.append(Vlan(vlan_id=vlan_id, name=parts[1].strip()))

    return vlans


def parse_vlan_details(output: str) -> VlanDetails:
    """Parse ``bridge vlan detail <id>`` output.

    Blank lines are dropped first. Line 0 holds ``Label: value`` pairs, the
    first value is the VLAN id and the second the name. Line 3 holds the
    port columns: index 1 is the untagged spec, index 2 the tagged spec::

        VLAN ID: 10  Name: Engineering
        802.1Q VLAN ID: 10  Local ID: 4
        Unit  Untagged Ports  Tagged Ports
        1     1-4,9           24

    Raises:
        ParseError: If a line or field is missing or the id is not numeric.
    """
    lines = [line for line in output.splitlines() if line.strip()]
    if len(lines) <= DETAIL_PORTS_LINE:
        raise ParseError(f"VLAN detail report too short: expected at least {DETAIL_PORTS_LINE + 1} lines, got {len(lines)}")

    info = [field.split(": ", 1)[1] for field in _split_fields(lines[DETAIL_INFO_LINE]) if ": " in field]
    if len(info) < 2:
        raise ParseError(f"VLAN detail header has no id/name fields: {lines[DETAIL_INFO_LINE]!r}")

    ports = _split_fields(lines[DETAIL_PORTS_LINE])
    if len(ports) < 3:
        raise ParseError(f"VLAN detail port line has too few columns: {lines[DETAIL_PORTS_LINE]!r}")

    try:
        vlan_id = parse_uint(info[0].strip())
    except ValueError as e:
        raise ParseError(f"Invalid VLAN id in detail header: {info[0]!r}") from e

    return VlanDetails(
        vlan_id=vlan_id,
        name=info[1].strip(),
        untagged=decode_port_range(ports[1]),
        tagged=decode_port_range(ports[2]),
    )
