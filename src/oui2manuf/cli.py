from __future__ import annotations

import argparse
import json
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .address import is_locally_administered, normalize_mac
from .config import Settings
from .errors import ManufacturerNotFoundError, RegistryError
from .oui import OUILookup


def _build_table() -> Table:
    t = Table(title="oui2manuf", show_lines=False)
    t.add_column("MAC", style="bold")
    t.add_column("Manufacturer")
    t.add_column("Status")
    return t


def _settings(args: argparse.Namespace) -> Settings:
    return Settings.from_env(
        data_dir=args.data_dir,
        url=args.url,
        timeout=args.timeout,
        max_age_days=args.max_age,
    )


def cmd_lookup(args: argparse.Namespace) -> int:
    console = Console()
    oui = OUILookup(_settings(args))
    oui.load()

    table = _build_table()
    rows_out: list[dict[str, str | None]] = []
    missing = 0

    for raw in args.mac:
        mac = normalize_mac(raw)
        try:
            manufacturer: str | None = oui.manufacturer(mac)
            status = "Found"
        except ManufacturerNotFoundError:
            manufacturer = None
            missing += 1
            status = "⚠ Local / randomized" if is_locally_administered(mac) else "⚠ Not found"

        table.add_row(mac, manufacturer or "(unknown)", status)
        rows_out.append({"mac": mac, "manufacturer": manufacturer, "status": status})

    if args.json:
        console.print_json(json.dumps({"results": rows_out}))
    else:
        console.print(table)
        if missing:
            console.print(f"Manufacturer not found for [bold]{missing}[/bold] address(es)")

    return 1 if missing else 0


def cmd_update(args: argparse.Namespace) -> int:
    console = Console()
    oui = OUILookup(_settings(args))
    count = oui.load(refresh=True)
    console.print(
        f"OUI database updated successfully with [bold]{count}[/bold] entries "
        f"[dim]({oui.settings.db_path})[/dim]"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="oui2manuf")
    p.add_argument("--data-dir", help="Directory holding the cached manuf database")
    p.add_argument("--url", help="Source URL of the manuf database (gzip or plain)")
    p.add_argument("--timeout", type=float, help="Download timeout in seconds")
    p.add_argument(
        "--max-age",
        type=float,
        help="Re-download the cached database when older than this many days",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="cmd", required=True)

    lookup_cmd = sub.add_parser("lookup", help="Look up the manufacturer of MAC addresses")
    lookup_cmd.add_argument("mac", nargs="+", help="MAC address, e.g. FC:D2:B6:20:11:22")
    lookup_cmd.add_argument("--json", action="store_true", help="Print results as JSON")
    lookup_cmd.set_defaults(func=cmd_lookup)

    update_cmd = sub.add_parser("update", help="Download the latest manuf database")
    update_cmd.set_defaults(func=cmd_update)

    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    try:
        parser = build_parser()
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)
        code = args.func(args)
        raise SystemExit(code)
    except KeyboardInterrupt:
        raise SystemExit(2)
    except RegistryError as e:
        Console().print(f"[red]Could not load registry:[/red] {e}")
        raise SystemExit(2)
    except Exception as e:
        Console().print(f"[red]Error:[/red] {e}")
        raise SystemExit(2)
