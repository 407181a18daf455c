#!/usr/bin/env python3
# Core pipeline: walk → extract default-export names → guard → render/write
from __future__ import annotations
import os, re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Dict
from . import console
from .constants import (
  DEPENDENCY_DIR, HIDDEN_PREFIX, IDENT, JS_KEYWORDS, RESERVED_GLOBALS, SCRIPT_EXT_RE, TMP_SUFFIX,
)
from .paths import module_specifier

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|//.*")
_DEFAULT_EXPORT_RE = re.compile(rf"export\s+default\s+(?:function\s+|class\s+)?({IDENT})")
_BARE_IDENT_RE = re.compile(rf"^{IDENT}$")

# --- tree walking ---
def _is_excluded(name: str) -> bool:
  return name == DEPENDENCY_DIR or name.startswith(HIDDEN_PREFIX)

def walk_tree(root: str) -> List[str]:
  """
  Absolute paths of every file below root, entries visited in byte order of their names.
  node_modules and dot-entries are pruned; unreadable directories count as empty.
  """
  try:
    with os.scandir(root) as it:
      entries = sorted(it, key=lambda e: os.fsencode(e.name))
  except OSError:
    return []
  found: List[str] = []
  for entry in entries:
    if _is_excluded(entry.name): continue
    try:
      is_dir = entry.is_dir(follow_symlinks=False)
    except OSError:
      is_dir = False
    if is_dir:
      found.extend(walk_tree(entry.path))
    else:
      found.append(os.path.abspath(entry.path))
  return found

def is_script(path: str) -> bool:
  return SCRIPT_EXT_RE.search(path) is not None

# --- name extraction ---
def strip_comments(code: str) -> str:
  """Lexical comment removal; does not know about strings."""
  return _COMMENT_RE.sub("", code)

def extract_default_name(code: str) -> Optional[str]:
  """
  Name bound by the first `export default [function|class] Name`, or None.
  Expression exports (`export default 42`, `export default () => ...`) give None.
  """
  m = _DEFAULT_EXPORT_RE.search(strip_comments(code))
  if not m: return None
  name = m.group(1)
  if not _BARE_IDENT_RE.match(name) or name in JS_KEYWORDS:
    return None
  return name

def read_source(path: str) -> Optional[str]:
  try:
    return Path(path).read_text(encoding="utf-8", errors="replace")
  except OSError:
    return None

# --- bindings & guard ---
@dataclass
class Binding:
  name: str; path: str

@dataclass
class Rejection:
  kind: str; name: str; path: str; other: Optional[str] = None

class NameRegistry:
  """Per-run table of accepted names; first file to claim a name wins."""

  def __init__(self, reserved: Iterable[str] = RESERVED_GLOBALS):
    self.reserved = frozenset(reserved)
    self.seen: Dict[str, str] = {}
    self.accepted: List[Binding] = []
    self.rejected: List[Rejection] = []

  def claim(self, name: str, path: str) -> Optional[Rejection]:
    """Accept (name, path) or return why it was dropped."""
    if name in self.reserved:
      rej = Rejection("reserved", name, path)
    elif name in self.seen:
      rej = Rejection("collision", name, path, self.seen[name])
    else:
      self.seen[name] = path
      self.accepted.append(Binding(name, path))
      return None
    self.rejected.append(rej)
    return rej

# --- rendering & writing ---
def render_bindings(bindings: Iterable[Binding], out_dir: str) -> str:
  out = []
  for b in bindings:
    spec = module_specifier(out_dir, b.path)
    out.append(f'import {b.name} from "{spec}";\nglobalThis.{b.name} = {b.name};\n\n')
  return "".join(out)

def write_if_changed(path: str, content: str) -> bool:
  """Write content unless the file already holds exactly these bytes. Returns True if written."""
  data = content.encode("utf-8")
  try:
    if Path(path).read_bytes() == data:
      return False
  except OSError:
    pass
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  tmp = path + TMP_SUFFIX
  try:
    with open(tmp, "wb") as f:
      f.write(data)
    os.replace(tmp, path)
  except OSError:
    if os.path.exists(tmp):
      os.remove(tmp)
    raise
  return True

@dataclass
class RunResult:
  status: str
  files: List[str] = field(default_factory=list)
  bindings: List[Binding] = field(default_factory=list)
  rejected: List[Rejection] = field(default_factory=list)
  written: bool = False

class AutoImportEngine:
  def __init__(self, src: str, out: str, src_label: Optional[str] = None,
               reserved: Iterable[str] = RESERVED_GLOBALS, clear: bool = True):
    self.src = os.path.abspath(src)
    self.out = os.path.abspath(out)
    self.out_dir = os.path.dirname(self.out)
    self.src_label = src_label or src
    self.reserved = frozenset(reserved)
    self.clear = clear

  def collect_files(self) -> List[str]:
    return [f for f in walk_tree(self.src) if f != self.out and is_script(f)]

  def run(self) -> RunResult:
    """One full pass. OSError from the final write propagates to the caller."""
    if self.clear:
      console.clear_screen()
    if not os.path.exists(self.src):
      console.missing_src(self.src_label)
      return RunResult("missing_src")

    files = self.collect_files()
    if not files:
      console.no_files(self.src_label)
      return RunResult("no_files")

    registry = NameRegistry(self.reserved)
    for f in files:
      code = read_source(f)
      if code is None: continue
      name = extract_default_name(code)
      if not name: continue
      rej = registry.claim(name, f)
      if rej is None: continue
      if rej.kind == "reserved":
        console.reserved_name(rej.name, rej.path)
      else:
        console.collision(rej.name, rej.path, rej.other)

    written = write_if_changed(self.out, render_bindings(registry.accepted, self.out_dir))
    console.completed()
    return RunResult("ok", files, registry.accepted, registry.rejected, written)
