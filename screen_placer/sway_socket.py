import glob
import os
from typing import Dict, Optional


def find_sway_socket(runtime_dir: Optional[str] = None) -> str:
    """Return the newest sway IPC socket under $XDG_RUNTIME_DIR."""
    runtime_dir = runtime_dir or os.environ.get("XDG_RUNTIME_DIR")
    if not runtime_dir:
        raise EnvironmentError("XDG_RUNTIME_DIR is not set")

    candidates = glob.glob(os.path.join(runtime_dir, "sway-ipc.*.sock"))
    if not candidates:
        raise FileNotFoundError(f"No sway IPC sockets found in {runtime_dir}")

    # Several sessions can leave sockets behind, the live one was touched last
    return max(candidates, key=os.path.getmtime)


def sway_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Copy of the environment with SWAYSOCK filled in when it is missing."""
    env = dict(os.environ if environ is None else environ)
    if not env.get("SWAYSOCK"):
        env["SWAYSOCK"] = find_sway_socket(env.get("XDG_RUNTIME_DIR"))
    return env
