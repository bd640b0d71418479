import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from SimplePreferences.config.settings import load_settings, resolve_log_path
from SimplePreferences.core.codec import CODECS, codec_for
from SimplePreferences.errors import PreferencesError
from SimplePreferences.logging_setup import ensure_logging
from SimplePreferences.preferences import Preferences


def open_preferences(args: argparse.Namespace, settings: Dict) -> Preferences:
    path = Path(args.file) if args.file else None
    return Preferences.open(path, settings=settings)


def parse_value(type_name: str, text: str) -> Any:
    return codec_for(type_name).decode(text)


def format_value(type_name: str, value: Any) -> str:
    return codec_for(type_name).encode(value)


def cmd_get(args: argparse.Namespace, settings: Dict) -> None:
    prefs = open_preferences(args, settings)
    default = parse_value(args.type, args.default)
    value = prefs.get(args.type, args.key, default, namespace=args.module)
    print(format_value(args.type, value))


def cmd_put(args: argparse.Namespace, settings: Dict) -> None:
    prefs = open_preferences(args, settings)
    value = parse_value(args.type, args.value)
    prefs.put(args.type, args.key, value, namespace=args.module)
    print(f"Saved {args.key} to {prefs.path}")


def cmd_list(args: argparse.Namespace, settings: Dict) -> None:
    prefs = open_preferences(args, settings)
    for key, value in prefs.items(namespace=args.module):
        print(f"{key}={value}")


def cmd_drop(args: argparse.Namespace, settings: Dict) -> None:
    prefs = open_preferences(args, settings)
    prefs.drop()
    print(f"Deleted {prefs.path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simpleprefs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--settings", default=None, help="YAML settings merged over the defaults.")
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", default=None, help="Preferences file (default from settings).")

    scoped = argparse.ArgumentParser(add_help=False)
    scoped.add_argument("--module", default=None, help="Module namespace; application scope if omitted.")

    typed = argparse.ArgumentParser(add_help=False)
    typed.add_argument("--type", choices=sorted(CODECS), default="string")

    get = sub.add_parser("get", parents=[common, scoped, typed])
    get.add_argument("key")
    get.add_argument("default")
    get.set_defaults(func=cmd_get)

    put = sub.add_parser("put", parents=[common, scoped, typed])
    put.add_argument("key")
    put.add_argument("value")
    put.set_defaults(func=cmd_put)

    listing = sub.add_parser("list", parents=[common, scoped])
    listing.set_defaults(func=cmd_list)

    drop = sub.add_parser("drop", parents=[common])
    drop.set_defaults(func=cmd_drop)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.settings)
        log_settings = settings["logging"]
        ensure_logging(
            "DEBUG" if args.verbose else log_settings.get("level", "WARNING"),
            resolve_log_path(),
            log_settings.get("format") or "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        args.func(args, settings)
    except PreferencesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
