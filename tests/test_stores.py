import sys
from types import SimpleNamespace

import pytest

from dotstore.config import Policy
from dotstore.kinds import StoreKind
from dotstore.platforms import check_total, linux, macos, undefined, windows
from dotstore.stores import UnresolvedLocation, custom_store, entry_points

POSIX_ONLY = pytest.mark.skipif(sys.platform == "win32", reason="XDG layout is driven by HOME on POSIX hosts")


def fake_backend(tmp_path, missing=()):
    """Backend where every kind lives under tmp_path/<kind>, except `missing` which do not resolve."""
    resolvers = {kind: (lambda kind=kind: tmp_path / kind.value) for kind in StoreKind}
    for kind in missing:
        resolvers[kind] = lambda: None
    resolvers[StoreKind.RUNTIME] = undefined
    return SimpleNamespace(NAME="fake", RESOLVERS=resolvers, AVAILABLE=check_total("fake", resolvers))


class TestStrictEntryPoints:
    def test_only_available_kinds_are_offered(self):
        assert set(entry_points(linux)) == {kind.entry_point for kind in StoreKind}
        assert set(entry_points(macos)) == {kind.entry_point for kind in macos.AVAILABLE}
        assert set(entry_points(windows)) == {kind.entry_point for kind in windows.AVAILABLE}

    def test_meaningless_kinds_have_no_entry_point(self):
        offered = entry_points(macos)
        for name in ("executable_store", "runtime_store", "state_store", "template_store"):
            assert name not in offered
        assert "font_store" not in entry_points(windows)

    def test_functions_are_named_after_their_kind(self):
        store = entry_points(linux)["local_config_store"]
        assert store.__name__ == "local_config_store"
        assert store.__module__ == "dotstore"
        assert "local_config directory" in store.__doc__

    def test_store_resolves_then_materializes(self, tmp_path):
        stores = entry_points(fake_backend(tmp_path))
        path = stores["cache_store"]("barracuda")
        assert path == tmp_path / "cache" / ".barracuda"
        assert path.is_dir()

    def test_store_is_idempotent(self, tmp_path):
        stores = entry_points(fake_backend(tmp_path))
        first = stores["data_store"]("settings/user/local")
        (first / "state.json").write_text("{}")
        second = stores["data_store"]("settings/user/local")
        assert first == second == tmp_path / "data" / ".settings" / "user" / "local"
        assert (second / "state.json").read_text() == "{}"

    def test_unresolved_available_kind_is_a_defect(self, tmp_path):
        stores = entry_points(fake_backend(tmp_path, missing=[StoreKind.DESKTOP]))
        with pytest.raises(UnresolvedLocation, match="fake: desktop directory") as excinfo:
            stores["desktop_store"]("barracuda")
        assert excinfo.value.kind is StoreKind.DESKTOP
        assert excinfo.value.platform == "fake"
        assert list(tmp_path.iterdir()) == []

    def test_unresolved_location_is_not_an_io_failure(self):
        assert issubclass(UnresolvedLocation, AssertionError)
        assert not issubclass(UnresolvedLocation, OSError)

    def test_io_failure_propagates(self, tmp_path):
        stores = entry_points(fake_backend(tmp_path))
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / ".editor").write_text("in the way")
        with pytest.raises(FileExistsError):
            stores["config_store"]("editor")


class TestLenientEntryPoints:
    def test_every_kind_is_offered(self):
        for backend in (linux, macos, windows):
            assert set(entry_points(backend, Policy.LENIENT)) == {kind.entry_point for kind in StoreKind}

    def test_missing_location_returns_none(self, tmp_path):
        stores = entry_points(fake_backend(tmp_path, missing=[StoreKind.DESKTOP]), Policy.LENIENT)
        assert stores["desktop_store"]("barracuda") is None
        assert stores["runtime_store"]("barracuda") is None
        assert list(tmp_path.iterdir()) == []

    def test_resolved_location_is_materialized(self, tmp_path):
        stores = entry_points(fake_backend(tmp_path), Policy.LENIENT)
        assert stores["home_store"]("barracuda") == tmp_path / "home" / ".barracuda"


@POSIX_ONLY
class TestLinuxStores:
    def test_home_store(self, home):
        path = entry_points(linux)["home_store"]("barracuda")
        assert path == home / ".barracuda"
        assert path.is_dir()

    def test_config_store(self, home):
        path = entry_points(linux)["config_store"]("editor")
        assert path == home / ".config" / ".editor"
        assert path.is_dir()

    def test_every_store_succeeds(self, home):
        for name, store in entry_points(linux).items():
            assert store("barracuda").is_dir(), name


class TestCustomStore:
    def test_custom_root(self, tmp_path):
        root = tmp_path / "home" / "user" / "workspace" / "middle-earth"
        path = custom_store(root, "eregion")
        assert path == root / ".eregion"
        assert path.is_dir()

    def test_custom_root_nested_fragment(self, tmp_path):
        root = tmp_path / "home" / "user" / "project"
        path = custom_store(str(root), "settings/user/local")
        assert path == root / ".settings" / "user" / "local"
        assert (root / ".settings" / "user").is_dir()

    def test_custom_root_twice(self, tmp_path):
        assert custom_store(tmp_path, "eregion") == custom_store(tmp_path, "eregion")

    def test_custom_root_blocked_by_file(self, tmp_path):
        (tmp_path / ".eregion").touch()
        with pytest.raises(FileExistsError):
            custom_store(tmp_path, "eregion")
