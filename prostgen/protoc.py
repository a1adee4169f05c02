from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

from prostgen.extern_path import ExternPath

logger = logging.getLogger(__name__)

PROST_PLUGIN = "protoc-gen-prost"
TONIC_PLUGIN = "protoc-gen-tonic"

PLUGIN_ENV = {
    PROST_PLUGIN: "PROTOC_GEN_PROST",
    TONIC_PLUGIN: "PROTOC_GEN_TONIC",
}


def _is_executable(p: Path) -> bool:
    return p.exists() and p.is_file() and os.access(str(p), os.X_OK)


def find_plugin(plugin: str, cli_value=None) -> Path:
    """
    Plugin path resolution priority:
      1) Command-line option (--prost-plugin / --tonic-plugin)
      2) Environment variable (PROTOC_GEN_PROST / PROTOC_GEN_TONIC)
      3) PATH lookup
      4) ~/.cargo/bin and well-known fallback locations
    """
    candidates = []
    if cli_value:
        candidates.append(cli_value)

    env_val = os.environ.get(PLUGIN_ENV.get(plugin, ""))
    if env_val:
        candidates.append(env_val)

    which_val = shutil.which(plugin)
    if which_val:
        candidates.append(which_val)

    candidates += [
        str(Path.home() / ".cargo" / "bin" / plugin),
        f"/usr/local/bin/{plugin}",
        f"/usr/bin/{plugin}",
    ]

    seen = set()
    for c in candidates:
        if c in seen:
            continue
        seen.add(c)
        p = Path(c)
        if _is_executable(p):
            logger.debug("using %s at %s", plugin, p)
            return p

    raise SystemExit(
        f"{plugin} not found. Tried:\n  - "
        + "\n  - ".join(candidates)
        + f"\nInstall it (cargo install {plugin}) or set {PLUGIN_ENV.get(plugin, 'its path')}."
    )


def find_protoc(cli_value=None) -> str:
    for c in (cli_value, os.environ.get("PROTOC"), shutil.which("protoc")):
        if c:
            return c
    raise SystemExit("protoc not found. Pass --protoc or set PROTOC.")


def build_protoc_cmd(
    *,
    protoc,
    includes,
    proto_files,
    out_dir: Path,
    extern_paths: list[ExternPath],
    prost_plugin: Path,
    tonic_plugin: Path | None = None,
) -> list[str]:
    cmd = [str(protoc)]
    for inc in includes:
        cmd.append(f"-I{inc}")

    cmd += [
        f"--plugin={PROST_PLUGIN}={prost_plugin}",
        f"--prost_out={out_dir}",
    ]
    cmd += [f"--prost_opt={p.as_option()}" for p in extern_paths]

    if tonic_plugin is not None:
        cmd += [
            f"--plugin={TONIC_PLUGIN}={tonic_plugin}",
            f"--tonic_out={out_dir}",
        ]
        cmd += [f"--tonic_opt={p.as_option()}" for p in extern_paths]

    cmd += [str(p) for p in proto_files]
    return cmd


def run_protoc(cmd):
    print(" ".join(map(str, cmd)))
    try:
        r = subprocess.run(cmd, check=True, text=True, capture_output=True)
        if r.stderr:
            print(r.stderr, file=sys.stderr, end="")
    except subprocess.CalledProcessError as e:
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        raise SystemExit(e.returncode)
