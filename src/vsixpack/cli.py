from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from vsixpack.config.loader import load_packager_config
from vsixpack.core.collector import collect
from vsixpack.core.orchestrator import pack
from vsixpack.errors import PackagingError
from vsixpack.io.vsix_writer import write_vsix
from vsixpack.manifest.reader import read_manifest
from vsixpack.utils.console import ConsoleLog


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="vsixpack", description="Package an extension directory as a .vsix archive.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("package", help="Build the .vsix archive")
    p.add_argument("--cwd", type=Path, default=Path.cwd(), help="Extension directory (default: CWD)")
    p.add_argument("--out", "-o", type=Path, default=None, help="Output .vsix path")
    p.add_argument("--config", type=Path, default=None, help="Packager YAML config")
    p.add_argument("--base-content-url", default=None, help="Prefix for relative links in README/CHANGELOG")
    p.add_argument("--base-images-url", default=None, help="Prefix for relative images in README/CHANGELOG")
    p.add_argument("--strict", action="store_true", default=None, help="Fail when a declared license/icon is missing")

    ls = sub.add_parser("ls", help="List the files that would be packaged")
    ls.add_argument("--cwd", type=Path, default=Path.cwd(), help="Extension directory (default: CWD)")
    ls.add_argument("--config", type=Path, default=None, help="Packager YAML config")

    return ap.parse_args(argv)


def _cmd_package(args: argparse.Namespace, log: ConsoleLog) -> int:
    cwd = args.cwd.resolve()
    cfg = load_packager_config(cwd, args.config).with_overrides(
        base_content_url=args.base_content_url,
        base_images_url=args.base_images_url,
        strict=args.strict,
    )

    result = pack(cwd, cfg, log)
    out = args.out or (Path(cfg.out) if cfg.out else cwd / result.package_name)
    if not out.is_absolute():
        out = cwd / out

    count, size = write_vsix(out, result)
    log.info(f"Packaged {out} ({count} entries, {size} bytes)")
    return 0


def _cmd_ls(args: argparse.Namespace, log: ConsoleLog) -> int:
    cwd = args.cwd.resolve()
    cfg = load_packager_config(cwd, args.config)
    manifest = read_manifest(cwd)
    for f in collect(manifest, cwd, extra_ignore=cfg.ignore, config_file=cfg.source):
        print(f.path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    log = ConsoleLog("vsixpack")
    try:
        if args.command == "package":
            return _cmd_package(args, log)
        return _cmd_ls(args, log)
    except PackagingError as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
