#!/usr/bin/env python3
# CLI entry point: one-shot generation, optionally followed by watch mode
from __future__ import annotations
import argparse, sys
from .constants import DEFAULT_DEBOUNCE_MS, DEFAULT_SRC, RESERVED_GLOBALS
from .core import AutoImportEngine
from .paths import resolve_out, resolve_src

def _parse_names(raw: str|None) -> set:
  return {n.strip() for n in raw.split(",") if n.strip()} if raw else set()

def build_engine(args) -> AutoImportEngine:
  src = args.src or DEFAULT_SRC
  return AutoImportEngine(
    src=resolve_src(src),
    out=resolve_out(args.out, src),
    src_label=src,
    reserved=RESERVED_GLOBALS | _parse_names(args.reserved),
    clear=not args.no_clear,
  )

def cmd_generate(args):
  """Generate the aggregator once; keep regenerating when --watch is given."""
  engine = build_engine(args)
  engine.run()
  if args.watch:
    from .watch import run_watch
    run_watch(engine, debounce_ms=args.debounce_ms)

def main(argv=None) -> int:
  """Main CLI entry point."""
  try:
    from importlib.metadata import version
    __version__ = version("autoglobal")
  except Exception:
    __version__ = "0.1.0"

  ap = argparse.ArgumentParser(
    prog="autoglobal",
    description="Expose every default export under a source tree on globalThis via one generated module.",
    epilog="Examples:\n"
           "  autoglobal                          # src/ → src/global.js\n"
           "  autoglobal --src app --out app/g.js\n"
           "  autoglobal --watch                  # regenerate on every save\n",
    formatter_class=argparse.RawDescriptionHelpFormatter
  )
  ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  ap.add_argument("--src", default=DEFAULT_SRC,
                  help=f"Source directory to scan (default: {DEFAULT_SRC})")
  ap.add_argument("--out", default=None,
                  help="Output aggregator file (default: <src>/global.js)")
  ap.add_argument("--watch", action="store_true",
                  help="Keep running and regenerate when source files change")
  ap.add_argument("--debounce-ms", type=int, default=DEFAULT_DEBOUNCE_MS,
                  help=f"Quiet period before regenerating in watch mode (default: {DEFAULT_DEBOUNCE_MS})")
  ap.add_argument("--reserved", default=None,
                  help="Extra names to refuse, comma-separated (e.g. app,store)")
  ap.add_argument("--no-clear", action="store_true",
                  help="Do not clear the terminal before each run")
  ap.set_defaults(func=cmd_generate)

  args = ap.parse_args(argv)

  try:
    return args.func(args) or 0
  except KeyboardInterrupt:
    return 130
  except Exception as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1

if __name__ == "__main__":
  sys.exit(main())
