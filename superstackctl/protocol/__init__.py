"""Console dialect of the SuperStack ``bridge vlan`` menu: commands, markers, reports."""

from superstackctl.protocol.classifier import Accepted, ErrorRule, Operation, Rejected, classify
from superstackctl.protocol.parsers import parse_vlan_details, parse_vlan_summary
from superstackctl.protocol.ports import decode_port_range, encode_port_range

__all__ = [
    "Accepted",
    "ErrorRule",
    "Operation",
    "Rejected",
    "classify",
    "parse_vlan_details",
    "parse_vlan_summary",
    "decode_port_range",
    "encode_port_range",
]
