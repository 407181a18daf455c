# Terminal output: colours, screen clearing and run messages
from __future__ import annotations
import sys, time
from typing import Optional

YEL = "\x1b[1;33m"
BLD = "\x1b[1m"
RST = "\x1b[0m"

def clear_screen(stream=None) -> None:
  """Clear the terminal, but only when it is one (keeps piped output clean)."""
  stream = stream or sys.stdout
  if stream.isatty():
    stream.write("\x1b[1;1H\x1b[0J")
    stream.flush()

def clock(t: Optional[time.struct_time] = None) -> str:
  """12-hour wall clock: 3:04:05 PM"""
  t = t or time.localtime()
  hour = t.tm_hour % 12 or 12
  return f"{hour}:{t.tm_min:02d}:{t.tm_sec:02d} {'PM' if t.tm_hour >= 12 else 'AM'}"

def missing_src(src: str) -> None:
  print(f'{YEL}Source directory "{src}" not found. Use --src <dir> to change.{RST}\n')

def no_files(src: str) -> None:
  print(f'{YEL}0 files found in "{src}".{RST}\n')

def reserved_name(name: str, path: str) -> None:
  print(f'{YEL}Warning: Invalid name "{name}" (reserved) in {path}{RST}', file=sys.stderr)

def collision(name: str, path: str, first: str) -> None:
  print(f'{YEL}Warning: Collision "{name}"\n\t{path}\n\t{first}{RST}', file=sys.stderr)

def completed(t: Optional[time.struct_time] = None) -> None:
  print(f"{BLD}✅ AutoImport completed [{clock(t)}]{RST}\n")
