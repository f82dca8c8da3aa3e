"""Lightweight REST client for the squadapi service."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_payload(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid player JSON in {path}: {exc}") from exc


def _print_or_exit(resp: httpx.Response, what: str) -> None:
    if resp.status_code == 404:
        raise SystemExit(f"{what} not found")
    if resp.status_code == 409:
        raise SystemExit(resp.json().get("detail", "squad number conflict"))
    if resp.status_code == 400:
        raise SystemExit(f"Rejected: {resp.json().get('detail')}")
    resp.raise_for_status()
    if resp.content:
        print(json.dumps(resp.json(), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the squadapi REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--list", action="store_true", help="List every player")
    parser.add_argument("--get", metavar="ID", type=int, help="Fetch a player by id")
    parser.add_argument("--squad-number", metavar="N", type=int, help="Fetch a player by squad number")
    parser.add_argument("--create", metavar="JSON", type=Path, help="Create a player from a JSON file")
    parser.add_argument("--update", metavar="ID", type=int, help="Replace a player with the --payload JSON")
    parser.add_argument("--payload", type=Path, help="JSON file used by --update")
    parser.add_argument("--delete", metavar="ID", type=int, help="Delete a player by id")
    args = parser.parse_args()

    if args.update is not None and args.payload is None:
        raise SystemExit("--update requires --payload")

    with httpx.Client(base_url=args.base_url) as client:
        if args.list:
            _print_or_exit(client.get("/players"), "players")
        if args.get is not None:
            _print_or_exit(client.get(f"/players/{args.get}"), f"player {args.get}")
        if args.squad_number is not None:
            _print_or_exit(
                client.get(f"/players/squadnumber/{args.squad_number}"),
                f"squad number {args.squad_number}",
            )
        if args.create:
            _print_or_exit(client.post("/players", json=load_payload(args.create)), "players")
        if args.update is not None:
            _print_or_exit(
                client.put(f"/players/{args.update}", json=load_payload(args.payload)),
                f"player {args.update}",
            )
        if args.delete is not None:
            _print_or_exit(client.delete(f"/players/{args.delete}"), f"player {args.delete}")
            print(f"Deleted player {args.delete}")


if __name__ == "__main__":
    main()
