from importlib.metadata import PackageNotFoundError, version

# Installed package version; in a source checkout fall back to the VERSION
# file at the repository root, else a safe default.
try:
    __version__ = version("grn-netlist")
except PackageNotFoundError:  # not installed yet
    from pathlib import Path

    _vf = Path(__file__).resolve().parents[2] / "VERSION"
    __version__ = _vf.read_text(encoding="utf-8").strip() if _vf.is_file() else "0.0.0"
