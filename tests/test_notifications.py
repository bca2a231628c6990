from pathlib import PurePosixPath

import pytest

from chainup.notifications import Notification, NotificationKind, NotificationLevel

K = NotificationKind
L = NotificationLevel


def _arity(kind):
    for count in range(4):
        try:
            Notification(kind, *(["x"] * count))
        except TypeError:
            continue
        return count
    raise AssertionError(kind)


@pytest.mark.parametrize(
    "kind, level",
    [
        (K.SET_DEFAULT_TOOLCHAIN, L.INFO),
        (K.LOOKING_FOR_TOOLCHAIN, L.VERBOSE),
        (K.UPDATE_HASH_MATCHES, L.VERBOSE),
        (K.METADATA_UPGRADE_NOT_NEEDED, L.INFO),
        (K.NON_FATAL_ERROR, L.ERROR),
        (K.UPGRADE_REMOVES_TOOLCHAINS, L.WARN),
        (K.MISSING_FILE_DURING_SELF_UNINSTALL, L.WARN),
    ],
)
def test_levels(kind, level):
    note = Notification(kind, *(["v"] * _arity(kind)))
    assert note.level() is level


def test_set_default_message():
    assert str(Notification(K.SET_DEFAULT_TOOLCHAIN, "stable")) == (
        "default toolchain set to 'stable'"
    )


def test_override_message_includes_path_and_name():
    note = Notification(K.SET_OVERRIDE_TOOLCHAIN, PurePosixPath("/proj"), "beta")
    assert str(note) == "override toolchain for '/proj' set to 'beta'"


def test_toolchain_directory_shows_only_path():
    note = Notification(K.TOOLCHAIN_DIRECTORY, "/tc/stable", "stable-name")
    assert "/tc/stable" in str(note)
    assert "stable-name" not in str(note)


def test_non_fatal_error_shows_error_text():
    err = RuntimeError("disk is full")
    assert str(Notification(K.NON_FATAL_ERROR, err)) == "disk is full"


def test_no_argument_message():
    assert str(Notification(K.UPDATE_HASH_MATCHES)) == "toolchain is already up to date"


def test_wrong_argument_count_rejected():
    with pytest.raises(TypeError):
        Notification(K.SET_DEFAULT_TOOLCHAIN)
    with pytest.raises(TypeError):
        Notification(K.UPDATE_HASH_MATCHES, "extra")


def test_every_kind_formats_and_has_level():
    notes = [Notification(kind, *(["arg"] * _arity(kind))) for kind in NotificationKind]
    levels = {note.level() for note in notes}
    messages = [str(note) for note in notes]
    assert levels == {L.VERBOSE, L.INFO, L.WARN, L.ERROR}
    assert "" not in messages
    assert len(messages) == len(NotificationKind)


def test_equality_and_hash():
    a = Notification(K.INSTALLED_TOOLCHAIN, "nightly")
    b = Notification(K.INSTALLED_TOOLCHAIN, "nightly")
    c = Notification(K.INSTALLING_TOOLCHAIN, "nightly")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2