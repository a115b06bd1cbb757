"""CLI entry point for SuperStack VLAN management.

Connection settings come from the command line, falling back to the
ADDRESS, USERNAME and PASSWORD environment variables (a ``.env`` file in
the working directory is loaded first).

Examples:
  superstackctl --address 192.168.1.2 --username admin --password <PW> vlan list

  superstackctl vlan show 10
  superstackctl vlan create 10 Engineering
  superstackctl vlan add-port 10 20 --tagged
  superstackctl vlan remove-port 10 20
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

from tabulate import tabulate

from superstackctl import __version__, configure_logging, glogger
from superstackctl.client import SuperStackSwitch
from superstackctl.config import SwitchSettings
from superstackctl.exceptions import SwitchError
from superstackctl.protocol.ports import encode_port_range


async def cmd_vlan_list(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """List VLANs."""
    vlans = await switch.vlan.list_vlans()
    if not vlans:
        print("No VLANs found")
        return
    print(tabulate([[v.vlan_id, v.name] for v in vlans], headers=["VLAN", "Name"]))


async def cmd_vlan_show(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """Show one VLAN with its ports."""
    details = await switch.vlan.show_vlan(args.vlan_id)
    rows = [
        ["VLAN", details.vlan_id],
        ["Name", details.name],
        ["Untagged", encode_port_range(details.untagged)],
        ["Tagged", encode_port_range(details.tagged)],
    ]
    print(tabulate(rows, tablefmt="plain"))


async def cmd_vlan_create(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """Create a VLAN."""
    await switch.vlan.create_vlan(args.vlan_id, args.name)
    print(f"VLAN {args.vlan_id} created successfully")


async def cmd_vlan_delete(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """Delete a VLAN."""
    await switch.vlan.delete_vlan(args.vlan_id)
    print(f"VLAN {args.vlan_id} deleted successfully")


async def cmd_vlan_rename(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """Rename a VLAN."""
    await switch.vlan.rename_vlan(args.vlan_id, args.name)
    print(f"VLAN {args.vlan_id} renamed to {args.name}")


async def cmd_vlan_add_port(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """Add a port to a VLAN."""
    await switch.vlan.add_port(args.vlan_id, args.port, tagged=args.tagged)
    mode = "tagged" if args.tagged else "untagged"
    print(f"Port {args.port} added to VLAN {args.vlan_id} ({mode})")


async def cmd_vlan_remove_port(switch: SuperStackSwitch, args: argparse.Namespace) -> None:
    """Remove a port from a VLAN."""
    await switch.vlan.remove_port(args.vlan_id, args.port)
    print(f"Port {args.port} removed from VLAN {args.vlan_id}")


VLAN_COMMANDS = {
    "list": cmd_vlan_list,
    "show": cmd_vlan_show,
    "create": cmd_vlan_create,
    "delete": cmd_vlan_delete,
    "rename": cmd_vlan_rename,
    "add-port": cmd_vlan_add_port,
    "remove-port": cmd_vlan_remove_port,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for VLAN management."""
    parser = argparse.ArgumentParser(
        prog="superstackctl",
        description="VLAN management for SuperStack switches over telnet",
    )
    parser.add_argument("--address", help="Switch IP address or hostname (env: ADDRESS)")
    parser.add_argument("--username", help="Login name (env: USERNAME)")
    parser.add_argument("--password", help="Login password (env: PASSWORD)")
    parser.add_argument("--port", type=int, help="Telnet port (default: 23)")
    parser.add_argument("--connect-timeout", type=float, help="Connect timeout in seconds (default: 5)")
    parser.add_argument("--read-timeout", type=float, help="Response timeout in seconds (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # vlan
    vlan_parser = subparsers.add_parser("vlan", help="VLAN management")
    vlan_sub = vlan_parser.add_subparsers(dest="vlan_command", help="VLAN commands")

    vlan_sub.add_parser("list", help="List all VLANs")

    vlan_show = vlan_sub.add_parser("show", help="Show VLAN details and ports")
    vlan_show.add_argument("vlan_id", type=int, help="VLAN ID")

    vlan_create = vlan_sub.add_parser("create", help="Create a VLAN")
    vlan_create.add_argument("vlan_id", type=int, help="VLAN ID")
    vlan_create.add_argument("name", help="VLAN name")

    vlan_delete = vlan_sub.add_parser("delete", help="Delete a VLAN")
    vlan_delete.add_argument("vlan_id", type=int, help="VLAN ID to delete")

    vlan_rename = vlan_sub.add_parser("rename", help="Rename a VLAN")
    vlan_rename.add_argument("vlan_id", type=int, help="VLAN ID")
    vlan_rename.add_argument("name", help="New VLAN name")

    vlan_add_port = vlan_sub.add_parser("add-port", help="Add a port to a VLAN")
    vlan_add_port.add_argument("vlan_id", type=int, help="VLAN ID")
    vlan_add_port.add_argument("port", type=int, help="Port number on unit 1")
    vlan_add_port.add_argument("--tagged", action="store_true", help="Add as tagged member (default: untagged)")

    vlan_remove_port = vlan_sub.add_parser("remove-port", help="Remove a port from a VLAN")
    vlan_remove_port.add_argument("vlan_id", type=int, help="VLAN ID")
    vlan_remove_port.add_argument("port", type=int, help="Port number on unit 1")

    return parser


def _print_startup_banner() -> None:
    rows = [["version", __version__]]
    for var in ("ADDRESS", "USERNAME"):
        val = os.environ.get(var)
        if val:
            rows.append([var, val])
    glogger.opt(raw=True).info("\n{}\n", tabulate(rows, tablefmt="mixed_grid"))


async def _run(settings: SwitchSettings, parsed: argparse.Namespace) -> None:
    async with SuperStackSwitch.from_settings(settings) as switch:
        await VLAN_COMMANDS[parsed.vlan_command](switch, parsed)


def main(args: list[str] | None = None) -> None:
    """Main entry point for SuperStack VLAN CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(1)

    if parsed.vlan_command not in VLAN_COMMANDS:
        print("Usage: superstackctl ... vlan {" + "|".join(VLAN_COMMANDS) + "}")
        sys.exit(1)

    if parsed.verbose:
        os.environ["LOGURU_LEVEL"] = "DEBUG"
    else:
        os.environ.setdefault("LOGURU_LEVEL", "WARNING")
    configure_logging()

    try:
        settings = SwitchSettings.from_env(
            address=parsed.address,
            username=parsed.username,
            password=parsed.password,
            port=parsed.port,
            connect_timeout=parsed.connect_timeout,
            read_timeout=parsed.read_timeout,
        )
        if parsed.verbose:
            _print_startup_banner()
        asyncio.run(_run(settings, parsed))
    except SwitchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
