import argparse
import logging
import os
import sys

import src.build_lib.constants as C
from src.build_lib import (
    PartRecord,
    describe_part,
    display_build,
    format_stat,
    generate_build_csv,
    get_stat,
)


class TextSink:
    """Render sink that prints the build to the terminal."""

    def reset(self) -> None:
        self.count = 0

    def set_loading(self, active: bool) -> None:
        if active:
            print("📂 Loading catalog...")

    def add_part(self, part: PartRecord) -> None:
        self.count += 1
        en_load = format_stat(get_stat(part, C.EN_LOAD_COLUMN))
        weight = format_stat(get_stat(part, C.WEIGHT_COLUMN))
        print(f"   {self.count:>2}. {describe_part(part)}")
        print(f"       EN Load: {en_load} | Weight: {weight}")

    def set_totals(self, en_load: float, weight: float) -> None:
        print("\n--- Totals ---")
        print(f"EN Load: {format_stat(en_load)} | Weight: {format_stat(weight)}")

    def show_error(self, message: str) -> None:
        print(f"\n❌ {message}")


def main(argv: list[str] | None = None) -> int:
    arg_parser = argparse.ArgumentParser(description="Show the parts of a build link.")
    arg_parser.add_argument("url", help="Page URL or query string with ?build=...")
    arg_parser.add_argument(
        "--source",
        default=C.DEFAULT_CATALOG_SOURCE,
        help="Catalog file path or http(s) URL.",
    )
    arg_parser.add_argument(
        "--timeout", type=float, default=C.FETCH_TIMEOUT, help="HTTP timeout (s)."
    )
    arg_parser.add_argument("--csv", help="Also write the build to this CSV file.")
    arg_parser.add_argument("-v", "--verbose", action="store_true")
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    result = display_build(
        args.url, TextSink(), source=args.source, timeout=args.timeout
    )

    if result["state"] == "idle":
        print("⚠️  No build parameter in that URL.")
        return 1
    if result["state"] == "error":
        return 1

    summary = result["summary"]
    if args.csv and summary:
        out_dir = os.path.dirname(args.csv)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        try:
            with open(args.csv, "wb") as f:
                f.write(generate_build_csv(summary))
            print(f"\n✅ CSV: {args.csv}")
        except PermissionError:
            print(f"\n❌ Error: Close {args.csv} first.")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
