from pathlib import PurePosixPath

import pytest

from chainup.errors import (
    AddingRequiredComponentError,
    BinaryNotFoundError,
    CargoHomeError,
    ChecksumFailedError,
    ComponentConflictError,
    ComponentDirPermissionsFailedError,
    ComponentFilePermissionsFailedError,
    ExtractingPackageError,
    GettingCwdError,
    HomeDirError,
    LocatingWorkingDirError,
    NeedMetadataUpgradeError,
    NoExeNameError,
    NotADirError,
    ParsingSettingsError,
    ReadingFileError,
    RenamingFileError,
    ToolchainError,
    ToolchainNotInstalledError,
    UnknownComponentError,
    UnknownMetadataVersionError,
    UpgradeIoError,
    install_msg,
)


def test_description_only_error_uses_description():
    err = NeedMetadataUpgradeError()
    assert str(err) == NeedMetadataUpgradeError.description
    assert "upgrade-data" in str(err)


def test_home_dir_error_mentions_variable():
    assert "RUSTUP_HOME" in str(HomeDirError())


def test_reading_file_message_and_fields():
    path = PurePosixPath("/tmp/settings.toml")
    err = ReadingFileError("settings", path)
    assert str(err) == "could not read settings file: '/tmp/settings.toml'"
    assert err.name == "settings"
    assert err.path == path


def test_renaming_file_mentions_both_paths():
    err = RenamingFileError("component", "/a/src", "/a/dest")
    message = str(err)
    assert message.startswith("could not rename component file from")
    assert message.index("/a/src") < message.index("/a/dest")


def test_not_a_dir():
    err = NotADirError("/x/y")
    assert str(err) == "not a directory: '/x/y'"


def test_checksum_failed_keeps_url_out_of_message():
    err = ChecksumFailedError("http://example.com/f", "aaa", "bbb")
    assert "'aaa'" in str(err) and "'bbb'" in str(err)
    assert "example.com" not in str(err)
    assert err.url == "http://example.com/f"


def test_component_conflict_quotes_path():
    err = ComponentConflictError("rls", "/p/bin/rls")
    assert "'\"/p/bin/rls\"'" in str(err)
    assert "'rls'" in str(err)


def test_unknown_component_with_and_without_suggestion():
    plain = UnknownComponentError("stable", "rsl")
    hinted = UnknownComponentError("stable", "rsl", "rls")
    assert str(plain).startswith("toolchain 'stable' does not contain component rsl")
    assert str(hinted) == str(plain) + "; did you mean 'rls'?"


def test_install_msg_for_default_toolchain():
    msg = install_msg("cargo-clippy", "nightly", True)
    assert msg.endswith("rustup component add clippy`")
    assert "--toolchain" not in msg


def test_install_msg_for_other_toolchain():
    msg = install_msg("cargo-clippy", "nightly", False)
    assert msg.endswith("clippy --toolchain nightly`")
    assert msg.startswith("\nTo install, run")


def test_install_msg_unknown_binary_is_empty():
    assert install_msg("mystery", "stable", False) == ""


def test_binary_not_found_includes_install_hint():
    err = BinaryNotFoundError("rls", "stable", False)
    assert str(err).startswith("'rls' is not installed for the toolchain 'stable'")
    assert str(err).endswith(install_msg("rls", "stable", False))


def test_binary_not_found_unknown_binary_has_no_hint():
    err = BinaryNotFoundError("mystery", "stable", True)
    assert str(err) == "'mystery' is not installed for the toolchain 'stable'"


def test_parsing_settings_keeps_cause():
    cause = ValueError("bad toml")
    err = ParsingSettingsError(cause)
    assert err.error is cause
    assert str(err) == "error parsing settings"


def test_adding_required_component_message():
    err = AddingRequiredComponentError("stable", "rustc")
    assert "required for toolchain 'stable'" in str(err)


@pytest.mark.parametrize(
    "cls",
    [ToolchainNotInstalledError, UnknownMetadataVersionError],
)
def test_value_errors_show_value(cls):
    err = cls("nightly-x")
    assert "'nightly-x'" in str(err)
    assert err.value == "nightly-x"


def test_all_errors_derive_from_base_and_can_be_caught():
    err = ToolchainNotInstalledError("beta")
    assert isinstance(err, ToolchainError)
    assert str(err) == "toolchain 'beta' is not installed"


@pytest.mark.parametrize(
    "cls",
    [
        LocatingWorkingDirError,
        GettingCwdError,
        CargoHomeError,
        HomeDirError,
        ExtractingPackageError,
        ComponentDirPermissionsFailedError,
        ComponentFilePermissionsFailedError,
        NeedMetadataUpgradeError,
        UpgradeIoError,
        NoExeNameError,
    ],
)
def test_every_error_class_has_a_description(cls):
    err = cls()
    assert isinstance(err, ToolchainError)
    assert str(err) == cls.description
    assert len(str(err)) > 0