"""Exceptions raised by the toolchain manager."""

import os

from chainup.tools import component_for_bin


def _show(path) -> str:
    return os.fspath(path) if isinstance(path, os.PathLike) else str(path)


def _debug(path) -> str:
    return '"' + _show(path).replace("\\", "\\\\").replace('"', '\\"') + '"'


def install_msg(binary: str, toolchain: str, is_default: bool) -> str:
    """Hint explaining how to install the component that provides ``binary``."""
    component = component_for_bin(binary)
    if component is None:
        return ""
    suffix = "" if is_default else f" --toolchain {toolchain}"
    return f"\nTo install, run `rustup component add {component}{suffix}`"


class ToolchainError(Exception):
    """Base class of every error the toolchain manager raises."""

    description = "toolchain error"

    def __init__(self, message: str | None = None):
        super().__init__(self.description if message is None else message)


# Errors that carry nothing but their description.


class LocatingWorkingDirError(ToolchainError):
    description = "could not locate working directory"


class GettingCwdError(ToolchainError):
    description = "couldn't get current working directory"


class CargoHomeError(ToolchainError):
    description = "couldn't find value of CARGO_HOME"


class HomeDirError(ToolchainError):
    description = "couldn't find value of RUSTUP_HOME"


class ExtractingPackageError(ToolchainError):
    description = "failed to extract package (perhaps you ran out of disk space?)"


class ComponentDirPermissionsFailedError(ToolchainError):
    description = "I/O error walking directory during install"


class ComponentFilePermissionsFailedError(ToolchainError):
    description = "error setting file permissions during install"


class NeedMetadataUpgradeError(ToolchainError):
    description = "rustup's metadata is out of date. run `rustup self upgrade-data`"


class UpgradeIoError(ToolchainError):
    description = "I/O error during upgrade"


class NoExeNameError(ToolchainError):
    description = "couldn't determine self executable name"


# Errors about a named file or directory.


class _NamedPathError(ToolchainError):
    template = ""

    def __init__(self, name: str, path):
        self.name = name
        self.path = path
        super().__init__(self.template.format(name=name, path=_show(path)))


class ReadingFileError(_NamedPathError):
    description = "could not read file"
    template = "could not read {name} file: '{path}'"


class ReadingDirectoryError(_NamedPathError):
    description = "could not read directory"
    template = "could not read {name} directory: '{path}'"


class WritingFileError(_NamedPathError):
    description = "could not write file"
    template = "could not write {name} file: '{path}'"


class CreatingDirectoryError(_NamedPathError):
    description = "could not create directory"
    template = "could not create {name} directory: '{path}'"


class RemovingFileError(_NamedPathError):
    description = "could not remove file"
    template = "could not remove '{name}' file: '{path}'"


class RemovingDirectoryError(_NamedPathError):
    description = "could not remove directory"
    template = "could not remove '{name}' directory: '{path}'"


# Errors about moving something from one place to another.


class _NamedSrcDestError(ToolchainError):
    template = ""

    def __init__(self, name: str, src, dest):
        self.name = name
        self.src = src
        self.dest = dest
        super().__init__(
            self.template.format(name=name, src=_show(src), dest=_show(dest))
        )


class FilteringFileError(_NamedSrcDestError):
    description = "could not copy file"
    template = "could not copy {name} file from '{src}' to '{dest}'"


class RenamingFileError(_NamedSrcDestError):
    description = "could not rename file"
    template = "could not rename {name} file from '{src}' to '{dest}'"


class RenamingDirectoryError(_NamedSrcDestError):
    description = "could not rename directory"
    template = "could not rename {name} directory from '{src}' to '{dest}'"


class _SrcDestError(ToolchainError):
    template = ""

    def __init__(self, src, dest):
        self.src = src
        self.dest = dest
        super().__init__(self.template.format(src=_show(src), dest=_show(dest)))


class LinkingFileError(_SrcDestError):
    description = "could not link file"
    template = "could not create link from '{src}' to '{dest}'"


class LinkingDirectoryError(_SrcDestError):
    description = "could not symlink directory"
    template = "could not create link from '{src}' to '{dest}'"


class CopyingDirectoryError(_SrcDestError):
    description = "could not copy directory"
    template = "could not copy directory from '{src}' to '{dest}'"


class CopyingFileError(_SrcDestError):
    description = "could not copy file"
    template = "could not copy file from '{src}' to '{dest}'"


# Errors about a single path.


class _PathError(ToolchainError):
    template = ""

    def __init__(self, path):
        self.path = path
        super().__init__(self.template.format(path=_show(path)))


class NotAFileError(_PathError):
    description = "not a file"
    template = "not a file: '{path}'"


class NotADirError(_PathError):
    description = "not a directory"
    template = "not a directory: '{path}'"


class SettingPermissionsError(_PathError):
    description = "failed to set permissions"
    template = "failed to set permissions for '{path}'"


class BadPathError(_PathError):
    description = "bad path in tar"
    template = "tar path '{path}' is not supported"


# Download errors.


class _DownloadError(ToolchainError):
    description = "could not download file"

    def __init__(self, url, path):
        self.url = url
        self.path = path
        super().__init__(f"could not download file from '{url}' to '{_show(path)}'")


class DownloadingFileError(_DownloadError):
    pass


class DownloadNotExistsError(_DownloadError):
    pass


class InvalidUrlError(ToolchainError):
    description = "invalid url"

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"invalid url: {url}")


class ChecksumFailedError(ToolchainError):
    description = "checksum failed"

    def __init__(self, url: str, expected: str, calculated: str):
        self.url = url
        self.expected = expected
        self.calculated = calculated
        super().__init__(
            f"checksum failed, expected: '{expected}', calculated: '{calculated}'"
        )


class RunningCommandError(ToolchainError):
    description = "command failed"

    def __init__(self, name):
        self.name = name
        super().__init__(f"command failed: '{_show(name)}'")


class ExpectedTypeError(ToolchainError):
    description = "expected type"

    def __init__(self, type_name: str, name: str):
        self.type_name = type_name
        self.name = name
        super().__init__(f"expected type: '{type_name}' for '{name}'")


# Errors that carry a single value shown in the message.


class _ValueError(ToolchainError):
    template = ""

    def __init__(self, value):
        self.value = value
        super().__init__(self.template.format(value=_show(value)))


class InvalidToolchainNameError(_ValueError):
    description = "invalid toolchain name"
    template = "invalid toolchain name: '{value}'"


class InvalidCustomToolchainNameError(_ValueError):
    description = "invalid custom toolchain name"
    template = "invalid custom toolchain name: '{value}'"


class CorruptComponentError(_ValueError):
    description = "corrupt component manifest"
    template = "component manifest for '{value}' is corrupt"


class BadInstallerVersionError(_ValueError):
    description = "unsupported installer version"
    template = "unsupported installer version: {value}"


class BadInstalledMetadataVersionError(_ValueError):
    description = "unsupported metadata version in existing installation"
    template = "unsupported metadata version in existing installation: {value}"


class ComponentDownloadFailedError(_ValueError):
    description = "component download failed"
    template = "component download failed for {value}"


class UnsupportedVersionError(_ValueError):
    description = "unsupported manifest version"
    template = "manifest version '{value}' is not supported"


class MissingPackageForComponentError(_ValueError):
    description = "missing package for component"
    template = "server sent a broken manifest: missing package for component {value}"


class MissingPackageForRenameError(_ValueError):
    description = "missing package for the target of a rename"
    template = (
        "server sent a broken manifest: missing package for the target of a rename {value}"
    )


class UnknownMetadataVersionError(_ValueError):
    description = "unknown metadata version"
    template = "unknown metadata version: '{value}'"


class ToolchainNotInstalledError(_ValueError):
    description = "toolchain is not installed"
    template = "toolchain '{value}' is not installed"


class OverrideToolchainNotInstalledError(_ValueError):
    description = "override toolchain is not installed"
    template = "override toolchain '{value}' is not installed"


class BadInstallerTypeError(_ValueError):
    description = "invalid extension for installer"
    template = "invalid extension for installer: '{value}'"


class ComponentsUnsupportedError(_ValueError):
    description = "toolchain does not support components"
    template = "toolchain '{value}' does not support components"


class UnsupportedKindError(_ValueError):
    description = "unsupported tar entry"
    template = "tar entry kind '{value}' is not supported"


# Component errors.


class _ComponentPathError(ToolchainError):
    template = ""

    def __init__(self, name: str, path):
        self.name = name
        self.path = path
        super().__init__(self.template.format(name=name, path=_debug(path)))


class ComponentConflictError(_ComponentPathError):
    description = "conflicting component"
    template = "failed to install component: '{name}', detected conflict: '{path}'"


class ComponentMissingFileError(_ComponentPathError):
    description = "missing file in component"
    template = (
        "failure removing component '{name}', directory does not exist: '{path}'"
    )


class ComponentMissingDirError(_ComponentPathError):
    description = "missing directory in component"
    template = (
        "failure removing component '{name}', directory does not exist: '{path}'"
    )


class AddingRequiredComponentError(ToolchainError):
    description = "required component cannot be added"

    def __init__(self, toolchain: str, component: str):
        self.toolchain = toolchain
        self.component = component
        super().__init__(
            f"component {component} was automatically added because it is "
            f"required for toolchain '{toolchain}'"
        )


class RemovingRequiredComponentError(ToolchainError):
    description = "required component cannot be removed"

    def __init__(self, toolchain: str, component: str):
        self.toolchain = toolchain
        self.component = component
        super().__init__(
            f"component {component} is required for toolchain '{toolchain}' "
            "and cannot be removed"
        )


class UnknownComponentError(ToolchainError):
    description = "toolchain does not contain component"

    def __init__(self, toolchain: str, component: str, suggestion: str | None = None):
        self.toolchain = toolchain
        self.component = component
        self.suggestion = suggestion
        hint = f"; did you mean '{suggestion}'?" if suggestion is not None else ""
        super().__init__(
            f"toolchain '{toolchain}' does not contain component {component}{hint}"
        )


class BinaryNotFoundError(ToolchainError):
    description = "toolchain does not contain binary"

    def __init__(self, binary: str, toolchain: str, is_default: bool):
        self.binary = binary
        self.toolchain = toolchain
        self.is_default = is_default
        super().__init__(
            f"'{binary}' is not installed for the toolchain '{toolchain}'"
            + install_msg(binary, toolchain, is_default)
        )


class ParsingSettingsError(ToolchainError):
    description = "error parsing settings"

    def __init__(self, error: Exception | None = None):
        self.error = error
        super().__init__()