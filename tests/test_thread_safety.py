"""Thread-safety integration tests for concurrent detect() and transcode() calls."""

from __future__ import annotations

import threading

from chardetect import DiagnosticLog, detect, transcode

_JAPANESE = "これはテストです。日本語のテキスト。".encode("shift_jis")
_GERMAN = (
    "Die Größe des Gebäudes überraschte die Besucher. Natürlich können wir das ändern."
).encode("latin-1")
_CHINESE = "你好世界，这是中文测试。".encode("gb18030")  # noqa: RUF001

_SAMPLES: list[bytes] = [_JAPANESE, _GERMAN, _CHINESE]


def _run_concurrently(fn, n_workers: int, iterations: int) -> list[str]:
    """Call ``fn(data)`` from *n_workers* threads per sample.

    Each result is compared with the single-threaded result for the same
    sample.  Returns a list of error strings (empty = success).
    """
    expected = {data: fn(data) for data in _SAMPLES}
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(data: bytes) -> None:
        barrier.wait()
        for _ in range(iterations):
            try:
                got = fn(data)
            except Exception as exc:  # noqa: BLE001
                errors.append(repr(exc))
                return
            if got != expected[data]:
                errors.append(f"{got!r} != {expected[data]!r}")

    threads = [
        threading.Thread(target=worker, args=(data,))
        for data in _SAMPLES
        for _ in range(n_workers)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return errors


def test_concurrent_detect():
    assert _run_concurrently(detect, n_workers=4, iterations=5) == []


def test_concurrent_transcode():
    def convert(data: bytes) -> dict:
        return transcode(data, True)

    assert _run_concurrently(convert, n_workers=4, iterations=5) == []


def test_diagnostics_are_per_call():
    logs = [DiagnosticLog() for _ in range(8)]

    def worker(log: DiagnosticLog) -> None:
        transcode(b"", False, diagnostics=log)
        detect(b"", diagnostics=log)

    threads = [threading.Thread(target=worker, args=(log,)) for log in logs]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(len(log) == 1 for log in logs)
