"""
Convert a regulatory-network document to a netlist.

Usage:
    grn-netlist network.json --output-dir out --dot
    grn-netlist network.json -o netlist.json --classifier single_pass
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from ..config import ConverterConfig, load_config
from ..converter import NetlistConverter
from ..document import load_document
from ..exceptions import ConversionError
from ..netlist import Netlist
from ..visualize import write_dot

logger = logging.getLogger("grn_netlist.cli")

EXIT_INPUT_ERROR = 1
EXIT_CONVERSION_ERROR = 2

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grn-netlist",
        description="Convert a DSGRN regulatory-network document to a logic netlist",
    )
    parser.add_argument("input", type=str, help="Document to convert (JSON)")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Netlist JSON path (default: <output-dir>/<input stem>_outputNetlist.json)")
    parser.add_argument("--output-dir", type=str, default=None)
    parser.add_argument("--config", type=str, default=None, help="YAML or JSON converter config")
    parser.add_argument("--classifier", type=str, choices=["two_pass", "single_pass"], default=None)
    parser.add_argument("--dot", action="store_true", default=None,
                        help="Also write <output-dir>/<name>_dsgrn_import.dot")
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def _resolve_config(args: argparse.Namespace) -> ConverterConfig:
    cfg = load_config(args.config).from_environment()
    cfg = cfg.with_updates(classifier=args.classifier, log_level=args.log_level)
    output = cfg.output.model_copy(update={
        k: v for k, v in {
            "output_dir": args.output_dir,
            "netlist_file": args.output,
            "write_dot": args.dot,
        }.items() if v is not None
    })
    return cfg.model_copy(update={"output": output})


def netlist_path(cfg: ConverterConfig, input_path: Path) -> Path:
    if cfg.output.netlist_file:
        return Path(cfg.output.netlist_file)
    return Path(cfg.output.output_dir) / f"{input_path.stem}_outputNetlist.json"


def dot_path(netlist: Netlist, cfg: ConverterConfig, input_path: Path) -> Path:
    stem = _UNSAFE_FILENAME_CHARS.sub("_", netlist.name).strip("._") or input_path.stem
    return Path(cfg.output.output_dir) / f"{stem}_dsgrn_import.dot"


def write_outputs(netlist: Netlist, cfg: ConverterConfig, input_path: Path) -> List[Path]:
    out_dir = Path(cfg.output.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    json_path = netlist_path(cfg, input_path)
    json_path.parent.mkdir(parents=True, exist_ok=True)
    netlist.write_json(str(json_path), indent=cfg.output.json_indent)
    written.append(json_path)

    if cfg.output.write_dot:
        path = dot_path(netlist, cfg, input_path)
        write_dot(netlist, str(path))
        written.append(path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = _resolve_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    logging.basicConfig(level=getattr(logging, cfg.log_level), format="%(levelname)s %(name)s: %(message)s")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: input file '{input_path}' does not exist.", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        document = load_document(input_path)
    except (ValidationError, ValueError) as e:
        print(f"Error: invalid document '{input_path}': {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    logger.debug(f"Converting '{input_path}' with classifier {cfg.classifier}")
    try:
        netlist = NetlistConverter(cfg).convert(document)
    except ConversionError as e:
        print(f"Error: unable to convert '{input_path}': {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR
    netlist.input_filename = str(input_path)

    try:
        written = write_outputs(netlist, cfg, input_path)
    except OSError as e:
        print(f"Error: unable to write outputs: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    for path in written:
        print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
