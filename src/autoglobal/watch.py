#!/usr/bin/env python3
# Watch mode: watchdog observer + single-timer debounce around a full pipeline run
from __future__ import annotations
import os, sys, time, threading
from typing import Callable, Optional
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from .constants import DEPENDENCY_DIR, SCRIPT_EXT_RE, TMP_SUFFIX
from .core import AutoImportEngine, RunResult

# inotify reports reads too; they never change a module
IGNORED_EVENT_TYPES = {"opened", "closed_no_write"}

class Debouncer:
    """Runs fn once, delay seconds after the most recent trigger()."""

    def __init__(self, delay: float, fn: Callable[[], None]):
        self.delay = delay
        self.fn = fn
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            # a trigger() may already have replaced this timer
            if self._timer is threading.current_thread():
                self._timer = None
        self.fn()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

def _is_relevant_path(path: str, root: str, ignored_exact: set) -> bool:
    if not path or not SCRIPT_EXT_RE.search(path):
        return False
    # only components below the watched root count; root may itself live in node_modules
    rel = os.path.relpath(os.path.abspath(path), root)
    if DEPENDENCY_DIR in rel.replace("\\", "/").split("/"):
        return False
    return os.path.abspath(path) not in ignored_exact

class AutoImportHandler(FileSystemEventHandler):
    """Turns qualifying file events into debounced pipeline runs."""

    def __init__(self, src_root: str, out_path: str, debouncer: Debouncer):
        super().__init__()
        self.root = os.path.abspath(src_root)
        out = os.path.abspath(out_path)
        self.ignored_exact = {out, out + TMP_SUFFIX}
        self.debouncer = debouncer

    def is_relevant(self, event) -> bool:
        if not isinstance(event, FileSystemEvent) or event.is_directory:
            return False
        if event.event_type in IGNORED_EVENT_TYPES:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(_is_relevant_path(os.fsdecode(p), self.root, self.ignored_exact) for p in paths if p)

    def on_any_event(self, event) -> None:
        if self.is_relevant(event):
            self.debouncer.trigger()

def run_watch(engine: AutoImportEngine, debounce_ms: int,
              _test_stop_event: Optional[threading.Event] = None,
              _test_on_run: Optional[Callable[[RunResult], None]] = None) -> None:
    """Watch engine.src until Ctrl+C (or the test stop event), re-running on changes.
    Ctrl+C is re-raised after cleanup so the CLI can exit 130."""

    def _run() -> None:
        try:
            result = engine.run()
        except Exception as e:
            print(f"[autoglobal] update error: {e!r}", file=sys.stderr)
            return
        if _test_on_run:
            try:
                _test_on_run(result)
            except Exception:
                pass

    debouncer = Debouncer(debounce_ms / 1000.0, _run)
    handler = AutoImportHandler(engine.src, engine.out, debouncer)
    observer = Observer()
    observer.schedule(handler, engine.src, recursive=True)
    observer.start()

    print(f"[autoglobal] watching {engine.src_label} → {engine.out} (debounce={debounce_ms}ms)")
    print("[autoglobal] press Ctrl+C to stop")

    try:
        while observer.is_alive():
            if _test_stop_event is not None and _test_stop_event.is_set():
                break
            time.sleep(0.1)
    except KeyboardInterrupt:
        print(f"\n[autoglobal] stopped watching {engine.src_label}")
        raise
    finally:
        debouncer.cancel()
        observer.stop()
        observer.join()
