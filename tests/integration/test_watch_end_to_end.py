import importlib, threading, time
from pathlib import Path

watch = importlib.import_module("autoglobal.watch")
core = importlib.import_module("autoglobal.core")

def _start_watcher(src, out, debounce_ms=150):
    engine = core.AutoImportEngine(src=str(src), out=str(out), clear=False)
    engine.run()
    stop = threading.Event()
    runs = []
    thr = threading.Thread(
        target=watch.run_watch,
        kwargs=dict(
            engine=engine,
            debounce_ms=debounce_ms,
            _test_stop_event=stop,
            _test_on_run=runs.append,
        ),
        daemon=True,
    )
    thr.start()
    # let the observer register its watches
    time.sleep(0.5)
    return stop, runs, thr

def test_burst_of_saves_is_one_run(tmp_path):
    src = tmp_path / "src"; src.mkdir()
    out = src / "global.js"
    (src / "a.js").write_text("export default function Foo(){}\n")
    stop, runs, thr = _start_watcher(src, out, debounce_ms=300)
    for i in range(5):
        (src / "a.js").write_text(f"export default function Foo(){{ return {i} }}\n")
        time.sleep(0.03)
    time.sleep(1.0)
    stop.set(); thr.join(timeout=3)
    assert len(runs) == 1, f"runs: {runs}"

def test_new_file_regenerates_without_self_loop(tmp_path):
    src = tmp_path / "src"; src.mkdir()
    out = src / "global.js"
    (src / "a.js").write_text("export default function Foo(){}\n")
    stop, runs, thr = _start_watcher(src, out)
    (src / "b.js").write_text("export default class Bar {}\n")
    time.sleep(1.0)
    stop.set(); thr.join(timeout=3)
    # writing global.js must not schedule another run
    assert len(runs) == 1, f"runs: {runs}"
    assert runs[0].written is True
    text = out.read_text()
    assert 'import Foo from "./a";' in text
    assert 'import Bar from "./b";' in text

def test_ignored_changes_do_not_run(tmp_path):
    src = tmp_path / "src"; src.mkdir()
    (src / "node_modules").mkdir()
    out = src / "global.js"
    (src / "a.js").write_text("export default A;\n")
    stop, runs, thr = _start_watcher(src, out)
    (src / "README.md").write_text("hi\n")
    (src / "node_modules" / "dep.js").write_text("export default Dep;\n")
    out.write_text("// touched\n")
    time.sleep(0.8)
    stop.set(); thr.join(timeout=3)
    assert runs == []
