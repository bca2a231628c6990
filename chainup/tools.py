"""The set of proxied tools and the components that provide them."""

import sys

# Suffix the platform appends to executable names.
EXE_SUFFIX = ".exe" if sys.platform == "win32" else ""

# Every binary that is proxied through the toolchain manager.
TOOLS: tuple[str, ...] = (
    "rustc",
    "rustdoc",
    "cargo",
    "rust-lldb",
    "rust-gdb",
    "rls",
    "cargo-clippy",
    "clippy-driver",
    "cargo-miri",
)

# Tools that package managers commonly install too; these are handled with
# extra care so an existing installation is not overwritten.
DUP_TOOLS: tuple[str, ...] = ("rustfmt", "cargo-fmt")

_COMPONENTS = {
    "rustc": "rustc",
    "rustdoc": "rustc",
    "cargo": "cargo",
    "rust-lldb": "lldb-preview",
    "rust-gdb": "gdb-preview",
    "rls": "rls",
    "cargo-clippy": "clippy",
    "clippy-driver": "clippy",
    "cargo-miri": "miri",
    "rustfmt": "rustfmt",
    "cargo-fmt": "rustfmt",
}


def component_for_bin(binary: str) -> str | None:
    """Return the name of the component that ships ``binary``, if known."""
    prefix = binary
    if EXE_SUFFIX:
        index = binary.find(EXE_SUFFIX)
        if index != -1:
            prefix = binary[:index]
    return _COMPONENTS.get(prefix)