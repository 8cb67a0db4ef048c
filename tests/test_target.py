"""Tests for build target dispatch."""

import functools
from unittest.mock import MagicMock, patch

import pytest

from futurebuddy_desktop import target
from futurebuddy_desktop.__main__ import main
from futurebuddy_desktop.target import (
    BuildTarget,
    current_target,
    get_mobile_entry,
    invoke_mobile_entry,
    mobile_entry_point,
)


@pytest.fixture(autouse=True)
def clean_registry():
    target._reset_for_testing()
    yield
    target._reset_for_testing()


class TestCurrentTarget:
    """Tests for current_target."""

    def test_default_is_desktop(self):
        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", "desktop"):
            assert current_target() is BuildTarget.DESKTOP

    def test_mobile(self):
        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", " Mobile "):
            assert current_target() is BuildTarget.MOBILE

    def test_unknown_raises(self):
        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", "watch"):
            with pytest.raises(ValueError, match="Unknown build target"):
                current_target()


class TestMobileEntryPoint:
    """Tests for the mobile_entry_point decorator."""

    def test_desktop_target_registers_nothing(self):
        def entry():
            pass

        decorated = mobile_entry_point(entry, target=BuildTarget.DESKTOP)
        assert decorated is entry
        assert get_mobile_entry() is None

    def test_mobile_target_registers_entry(self):
        def entry():
            pass

        decorated = mobile_entry_point(entry, target=BuildTarget.MOBILE)
        assert decorated is entry
        assert get_mobile_entry() is entry

    def test_decorator_with_arguments(self):
        @mobile_entry_point(target=BuildTarget.MOBILE)
        def entry():
            pass

        assert get_mobile_entry() is entry

    def test_uses_configured_target(self):
        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", "mobile"):

            @mobile_entry_point
            def entry():
                pass

        assert get_mobile_entry() is entry

    def test_second_mobile_entry_raises(self):
        mobile_entry_point(lambda: None, target=BuildTarget.MOBILE)
        with pytest.raises(RuntimeError, match="already registered"):
            mobile_entry_point(lambda: None, target=BuildTarget.MOBILE)

    def test_registers_callable_without_qualname(self):
        entry = functools.partial(print, end="")
        mobile_entry_point(entry, target=BuildTarget.MOBILE)

        assert get_mobile_entry() is entry

    def test_duplicate_callable_without_qualname_raises(self):
        mobile_entry_point(functools.partial(print), target=BuildTarget.MOBILE)
        with pytest.raises(RuntimeError, match="already registered: functools.partial"):
            mobile_entry_point(lambda: None, target=BuildTarget.MOBILE)


class TestInvokeMobileEntry:
    """Tests for invoke_mobile_entry."""

    def test_calls_registered_entry(self):
        entry = MagicMock()
        mobile_entry_point(entry, target=BuildTarget.MOBILE)

        invoke_mobile_entry()

        entry.assert_called_once_with()

    def test_desktop_build_has_no_mobile_entry(self):
        """Desktop builds expose no mobile entry path."""
        mobile_entry_point(MagicMock(), target=BuildTarget.DESKTOP)
        with pytest.raises(LookupError):
            invoke_mobile_entry()


class TestDesktopEntry:
    """Tests for the desktop console entry."""

    def test_desktop_build_runs(self):
        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", "desktop"), patch(
            "futurebuddy_desktop.__main__.setup_logging"
        ), patch("futurebuddy_desktop.__main__.run") as run:
            main()
        run.assert_called_once_with()

    def test_mobile_build_rejects_desktop_entry(self):
        """Mobile builds never reach the desktop entry path."""
        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", "mobile"), patch(
            "futurebuddy_desktop.__main__.run"
        ) as run:
            with pytest.raises(SystemExit, match="not available in a mobile build"):
                main()
        run.assert_not_called()

    def test_packaged_bootstrap_is_not_registered_on_desktop(self):
        """The desktop build of run() is not a mobile entry."""
        from futurebuddy_desktop.runtime.bootstrap import run

        with patch("futurebuddy_desktop.target.config.BUILD_TARGET", "desktop"):
            mobile_entry_point(run)
        assert get_mobile_entry() is None
