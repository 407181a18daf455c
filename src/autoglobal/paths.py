import os
from .constants import DEFAULT_OUT_NAME, DEFAULT_SRC, SCRIPT_EXT_RE

def resolve_src(user_src: str|None) -> str:
    """Absolute source root; defaults to ./src."""
    return os.path.abspath(user_src or DEFAULT_SRC)

def resolve_out(user_out: str|None, src: str|None = None) -> str:
    """
    Output aggregator path.
    Without --out it lands inside the source root: src → src/global.js
    """
    if user_out:
        return os.path.abspath(user_out)
    return os.path.abspath(os.path.join(src or DEFAULT_SRC, DEFAULT_OUT_NAME))

def module_specifier(out_dir: str, file_path: str) -> str:
    """
    Import path for file_path as seen from a module living in out_dir.
    e.g. out_dir=/p/src, file=/p/src/ui/Button.tsx → ./ui/Button
    """
    rel = os.path.relpath(file_path, out_dir).replace("\\", "/")
    rel = SCRIPT_EXT_RE.sub("", rel)
    return rel if rel.startswith(".") else f"./{rel}"
