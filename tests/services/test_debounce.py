"""Tests for debounced execution."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import pytest

from utilkit.commands._context import AppContext
from utilkit.config.settings import UtilkitSettings
from utilkit.services.debounce import Debouncer, TimerRef, debounce_run


class TestScheduling:
    def test_runs_once_after_wait(self) -> None:
        calls: list[str] = []

        async def scenario() -> None:
            ref = TimerRef()
            assert debounce_run(ref, lambda: calls.append("run"), 5) is True
            assert ref.pending
            assert calls == []
            await asyncio.sleep(0.05)
            assert calls == ["run"]
            assert ref.current is None

        asyncio.run(scenario())

    def test_second_call_while_pending_is_dropped(self) -> None:
        calls: list[str] = []

        async def scenario() -> None:
            ref = TimerRef()
            assert debounce_run(ref, lambda: calls.append("first"), 5) is True
            first_handle = ref.current
            assert debounce_run(ref, lambda: calls.append("second"), 5) is False
            # The pending timer is neither cancelled nor replaced.
            assert ref.current is first_handle
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert calls == ["first"]

    def test_can_schedule_again_after_fire(self) -> None:
        calls: list[int] = []

        async def scenario() -> None:
            ref = TimerRef()
            debounce_run(ref, lambda: calls.append(1), 1)
            await asyncio.sleep(0.03)
            assert debounce_run(ref, lambda: calls.append(2), 1) is True
            await asyncio.sleep(0.03)

        asyncio.run(scenario())
        assert calls == [1, 2]

    def test_default_wait_is_ten_ms(self) -> None:
        async def scenario() -> float:
            ref = TimerRef()
            loop = asyncio.get_running_loop()
            debounce_run(ref, lambda: None)
            assert isinstance(ref.current, asyncio.TimerHandle)
            delay = ref.current.when() - loop.time()
            ref.cancel()
            return delay

        delay = asyncio.run(scenario())
        assert 0 < delay <= 0.011

    def test_independent_cells(self) -> None:
        calls: list[str] = []

        async def scenario() -> None:
            a, b = TimerRef(), TimerRef()
            assert debounce_run(a, lambda: calls.append("a"), 1)
            assert debounce_run(b, lambda: calls.append("b"), 1)
            await asyncio.sleep(0.03)

        asyncio.run(scenario())
        assert sorted(calls) == ["a", "b"]

    def test_requires_running_loop(self) -> None:
        with pytest.raises(RuntimeError):
            debounce_run(TimerRef(), lambda: None)

    def test_dropped_call_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        async def scenario() -> None:
            ref = TimerRef()
            debounce_run(ref, lambda: None, 1)
            debounce_run(ref, lambda: None, 1)
            ref.cancel()

        with caplog.at_level(logging.DEBUG, logger="utilkit.services.debounce"):
            asyncio.run(scenario())
        assert any("dropping" in r.getMessage() for r in caplog.records)


class TestAsyncCallbacks:
    def test_cell_stays_pending_until_awaited(self) -> None:
        events: list[str] = []

        async def scenario() -> None:
            gate = asyncio.Event()
            ref = TimerRef()

            async def job() -> None:
                events.append("start")
                await gate.wait()
                events.append("end")

            debounce_run(ref, job, 1)
            await asyncio.sleep(0.02)
            assert events == ["start"]
            assert isinstance(ref.current, asyncio.Task)
            assert debounce_run(ref, job, 1) is False
            gate.set()
            await asyncio.sleep(0.01)
            assert events == ["start", "end"]
            assert ref.current is None

        asyncio.run(scenario())


class TestFailures:
    def test_sync_failure_reaches_loop_and_clears_cell(self) -> None:
        seen: list[Any] = []

        def boom() -> None:
            raise ValueError("bad")

        async def scenario() -> TimerRef:
            loop = asyncio.get_running_loop()
            loop.set_exception_handler(lambda _loop, context: seen.append(context["exception"]))
            ref = TimerRef()
            debounce_run(ref, boom, 1)
            await asyncio.sleep(0.03)
            return ref

        ref = asyncio.run(scenario())
        assert len(seen) == 1
        assert isinstance(seen[0], ValueError)
        assert ref.current is None

    def test_async_failure_stays_on_task_and_clears_cell(self) -> None:
        async def scenario() -> BaseException | None:
            gate = asyncio.Event()

            async def boom() -> None:
                await gate.wait()
                raise ValueError("bad")

            ref = TimerRef()
            debounce_run(ref, boom, 1)
            await asyncio.sleep(0.02)
            task = ref.current
            assert isinstance(task, asyncio.Task)
            gate.set()
            await asyncio.sleep(0.01)
            assert ref.current is None
            return task.exception()

        assert isinstance(asyncio.run(scenario()), ValueError)


class TestCancel:
    def test_cancel_pending_timer(self) -> None:
        calls: list[int] = []

        async def scenario() -> None:
            ref = TimerRef()
            debounce_run(ref, lambda: calls.append(1), 5)
            ref.cancel()
            assert ref.current is None
            await asyncio.sleep(0.03)

        asyncio.run(scenario())
        assert calls == []

    def test_cancel_idle_is_noop(self) -> None:
        ref = TimerRef()
        ref.cancel()
        assert not ref.pending

    def test_late_task_completion_does_not_clear_new_run(self) -> None:
        async def scenario() -> None:
            ref = TimerRef()
            gate = asyncio.Event()

            async def slow() -> None:
                await gate.wait()

            debounce_run(ref, slow, 1)
            await asyncio.sleep(0.02)
            ref.cancel()
            assert debounce_run(ref, lambda: None, 1000) is True
            fresh = ref.current
            await asyncio.sleep(0.01)
            assert ref.current is fresh
            ref.cancel()

        asyncio.run(scenario())


def _scheduled_delay(run: Any) -> float:
    """Schedule a no-op through *run* and return the delay in seconds."""

    async def scenario() -> float:
        ref = TimerRef()
        loop = asyncio.get_running_loop()
        run(ref, lambda: None)
        assert isinstance(ref.current, asyncio.TimerHandle)
        delay = ref.current.when() - loop.time()
        ref.cancel()
        return delay

    return asyncio.run(scenario())


class TestDebouncer:
    def test_defaults_without_settings(self) -> None:
        assert Debouncer().default_wait == 10
        assert _scheduled_delay(Debouncer().run) <= 0.011

    def test_env_wait_changes_delay(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTILKIT_DEBOUNCE__WAIT_MS", "500")
        settings = UtilkitSettings.from_cli(start=tmp_path)
        delay = _scheduled_delay(Debouncer(settings).run)
        assert 0.4 < delay <= 0.5

    def test_toml_wait_changes_delay(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[debounce]\nwait_ms = 250\n")
        settings = UtilkitSettings.from_cli(start=tmp_path)
        delay = _scheduled_delay(Debouncer(settings).run)
        assert 0.2 < delay <= 0.25

    def test_explicit_wait_beats_settings(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[debounce]\nwait_ms = 250\n")
        debouncer = Debouncer(UtilkitSettings.from_cli(start=tmp_path))

        delay = _scheduled_delay(lambda ref, fn: debouncer.run(ref, fn, 1))
        assert delay <= 0.002

    def test_app_context_uses_settings(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[debounce]\nwait_ms = 300\n")
        app = AppContext(UtilkitSettings.from_cli(start=tmp_path))
        assert app.debouncer.default_wait == 300
        assert app.debouncer is app.debouncer
