"""Tests for the resource locator search chain."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from config_locator.file_system import DefaultFileSystem
from config_locator.locate import locate
from config_locator.resource_loader import (
    DirectoryResourceLoader,
    context_loader,
    get_system_loader,
    set_system_loader,
)
from config_locator.resource_locator import SEARCH_STEPS, ResourceLocator


@pytest.fixture
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Fixture isolating the working directory, home directory and loaders."""
    work = tmp_path / "work"
    home = tmp_path / "home"
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))

    previous = get_system_loader()
    set_system_loader(DirectoryResourceLoader([]))
    yield tmp_path
    set_system_loader(previous)


def write(path: Path) -> Path:
    """Create an empty file along with its parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_search_steps_order() -> None:
    """Verify the fixed order of the search chain."""
    assert SEARCH_STEPS == ("url", "absolute", "base", "home", "classpath")


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_performs_no_probes(name: str | None) -> None:
    """Verify that a missing name returns None without any lookups."""
    file_system = MagicMock()
    with (
        patch("config_locator.resource_locator.locate_from_classpath") as classpath,
        patch("config_locator.resource_locator._exists") as exists,
    ):
        assert ResourceLocator(file_system).resolve("/etc/app", name) is None
        assert locate(None, name, file_system) is None

    assert file_system.method_calls == []
    classpath.assert_not_called()
    exists.assert_not_called()


@pytest.mark.parametrize("base", [None, "/etc/app", "http://other.org/conf/"])
def test_full_url_returned_regardless_of_base(sandbox: Path, base: str | None) -> None:
    """Verify that a full URL is trusted as-is, whatever the base path."""
    url = "https://example.com/conf/app.yml"
    result = ResourceLocator().resolve(base, url)
    assert result is not None
    assert result.url == url
    assert result.winning_step == "url"
    assert result.path is None


def test_url_base_is_not_checked_for_existence(sandbox: Path) -> None:
    """Verify that a URL built from a file URL base is returned unchecked."""
    base = (sandbox / "nowhere").as_uri() + "/"
    assert locate(base, "app.yml") == base + "app.yml"


def test_absolute_path(sandbox: Path) -> None:
    """Verify that an existing absolute path is found."""
    target = write(sandbox / "abs" / "app.yml")
    result = ResourceLocator().resolve("/unused", str(target))
    assert result is not None
    assert result.url == target.as_uri()
    assert result.winning_step == "absolute"
    assert result.path == target


def test_base_path_found_without_classpath(sandbox: Path) -> None:
    """Verify that a file below the base path wins before the classpath."""
    base = sandbox / "etc" / "app"
    target = write(base / "db.conf")
    with patch("config_locator.resource_locator.locate_from_classpath") as classpath:
        assert locate(str(base), "db.conf") == target.as_uri()
    classpath.assert_not_called()


def test_no_base_uses_working_directory(sandbox: Path) -> None:
    """Verify that without a base path the working directory is searched."""
    target = write(sandbox / "work" / "app.yml")
    result = ResourceLocator().resolve(None, "app.yml")
    assert result is not None
    assert result.winning_step == "base"
    assert result.url == target.as_uri()


def test_home_directory(sandbox: Path) -> None:
    """Verify that the home directory is searched after the base path."""
    target = write(sandbox / "home" / ".app" / "app.yml")
    result = ResourceLocator().resolve(str(sandbox / "etc"), ".app/app.yml")
    assert result is not None
    assert result.winning_step == "home"
    assert result.url == target.as_uri()


def test_explicit_home_dir(sandbox: Path) -> None:
    """Verify that an explicit home directory replaces the user's home."""
    write(sandbox / "home" / "app.yml")
    other = write(sandbox / "other_home" / "app.yml")
    result = ResourceLocator(home_dir=sandbox / "other_home").resolve(None, "app.yml")
    assert result is not None
    assert result.url == other.as_uri()


def test_base_wins_over_home(sandbox: Path) -> None:
    """Verify that the base path is searched before the home directory."""
    base_file = write(sandbox / "etc" / "app.yml")
    write(sandbox / "home" / "app.yml")
    assert locate(str(sandbox / "etc"), "app.yml") == base_file.as_uri()


def test_classpath_fallback(sandbox: Path) -> None:
    """Verify that a resource only on the classpath is found there."""
    resource = write(sandbox / "cp" / "settings.properties")
    with context_loader(DirectoryResourceLoader([sandbox / "cp"])):
        result = ResourceLocator().resolve(None, "settings.properties")
    assert result is not None
    assert result.winning_step == "classpath"
    assert result.url == resource.as_uri()
    assert result.path is None


def test_absolute_path_wins_over_classpath(sandbox: Path) -> None:
    """Verify that the absolute path step precedes the classpath step."""
    target = write(sandbox / "abs" / "app.yml")
    loader = MagicMock()
    loader.get_resource.return_value = "file:///classpath/app.yml"
    with context_loader(loader):
        assert locate(None, str(target)) == target.as_uri()
    loader.get_resource.assert_not_called()


def test_not_found(sandbox: Path) -> None:
    """Verify that a missing resource yields None rather than an error."""
    assert locate(str(sandbox / "etc"), "missing.yml") is None


def test_deterministic(sandbox: Path) -> None:
    """Verify that identical calls give identical results."""
    write(sandbox / "home" / "app.yml")
    first = ResourceLocator().resolve("/etc/none", "app.yml")
    second = ResourceLocator().resolve("/etc/none", "app.yml")
    assert first == second
    assert first is not None


def test_malformed_url_does_not_abort_chain(
    sandbox: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a malformed URL is logged and the chain continues."""
    loader = MagicMock()
    loader.get_resource.return_value = "file:///classpath/odd"
    with caplog.at_level("WARNING"), context_loader(loader):
        result = ResourceLocator().resolve(None, "http://[::1/app.yml")
    assert result is not None
    assert result.winning_step == "classpath"
    assert "Could not create URL" in caplog.text


def test_unconvertible_path_logs_warning(
    sandbox: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a path failing URL conversion is skipped with a warning."""
    target = write(sandbox / "abs" / "app.yml")
    with (
        caplog.at_level("WARNING"),
        patch(
            "config_locator.resource_locator.path_to_url",
            side_effect=ValueError("bad path"),
        ),
    ):
        assert locate(None, str(target)) is None
    assert "Could not obtain URL from file" in caplog.text


def test_steps_are_traced(sandbox: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Verify that each attempted step is logged at debug level."""
    with caplog.at_level("DEBUG", logger="config_locator.resource_locator"):
        locate(None, "missing.yml")
    for step in SEARCH_STEPS:
        assert f"Step {step} did not locate missing.yml" in caplog.text


def test_custom_file_system(sandbox: Path) -> None:
    """Verify that a supplied file system is used for the direct URL step."""
    file_system = MagicMock(spec=DefaultFileSystem)
    file_system.locate_from_url.return_value = "http://custom/app.yml"
    assert locate("base", "app.yml", file_system) == "http://custom/app.yml"
    file_system.locate_from_url.assert_called_once_with("base", "app.yml")


def test_single_argument_form(sandbox: Path) -> None:
    """Verify that locate(name) searches without a base path."""
    target = write(sandbox / "work" / "app.yml")
    assert locate("app.yml") == target.as_uri()
    assert locate("missing.yml") is None
    assert locate("/etc", None) is None
