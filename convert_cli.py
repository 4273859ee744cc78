"""Command line batch converter for nmon files."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List

from nmon2series import run

logger = logging.getLogger("nmon2series.cli")


def load_defaults(config_path: Path | None) -> dict:
    if config_path is None:
        return {}
    with open(config_path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def collect_inputs(input_path: Path) -> List[Path]:
    if input_path.is_dir():
        return sorted(path for path in input_path.glob("*.nmon"))
    return [input_path]


def convert_file(path: Path, options: Dict[str, str]) -> dict:
    with open(path, "r", encoding="utf-8", errors="ignore") as handle:
        body = handle.read()
    return run(body, options)


def write_result(result: dict, path: Path, output_dir: Path | None) -> None:
    payload = json.dumps(result, indent=2)
    if output_dir is None:
        print(payload)
        return
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / f"{path.stem}.json"
    with open(target, "w", encoding="utf-8") as handle:
        handle.write(payload)


def convert_inputs(input_path: Path, output_dir: Path | None, options: Dict[str, str]) -> str:
    files = collect_inputs(input_path)
    ok_files = failed_files = total_series = 0
    for path in files:
        result = convert_file(path, options)
        if result["error"]:
            failed_files += 1
            logger.error("%s: %s", path, result["error"])
        else:
            ok_files += 1
            total_series += len(result["series"])
        write_result(result, path, output_dir)
    return (
        f"TOTAL: files={len(files)} | OK={ok_files} | FAILED={failed_files} | "
        f"SERIES={total_series}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert nmon files into time series JSON")
    parser.add_argument("--in", dest="input_path", required=True, help="A .nmon file or a directory of them")
    parser.add_argument("--out", dest="output_dir", default=None, help="Output directory (stdout if omitted)")
    parser.add_argument("--prefix", dest="prefix", default=None, help="Prefix prepended to every series name")
    parser.add_argument(
        "--ignore-text",
        dest="ignore_text",
        action="store_true",
        default=None,
        help="Do not emit the AAA/BBBP text messages",
    )
    parser.add_argument("--defaults", dest="defaults", default=None, help="Path to defaults JSON configuration")
    parser.add_argument("--log-level", dest="log_level", default="WARNING", help="Logging level")
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    input_path = Path(args.input_path)
    if not input_path.exists():
        raise SystemExit(f"Input path {input_path} does not exist")
    defaults = load_defaults(Path(args.defaults) if args.defaults else None)
    prefix = args.prefix if args.prefix is not None else defaults.get("prefix", "")
    ignore_text = args.ignore_text if args.ignore_text is not None else defaults.get("ignore_text", False)
    options = {"prefix": prefix or "", "ignore_text": "1" if ignore_text else ""}
    output_dir = Path(args.output_dir) if args.output_dir else None
    print(convert_inputs(input_path, output_dir, options))


if __name__ == "__main__":
    main()
