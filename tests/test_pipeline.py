from __future__ import annotations

from typing import List

import pytest

from conftest import make_manifest
from vsixpack.core.descriptor import collect_contributions
from vsixpack.core.files import FileRecord, read
from vsixpack.core.pipeline import process_files
from vsixpack.core.vocabulary import AssetType
from vsixpack.errors import ConfigurationError, ProcessingError
from vsixpack.processors.base import ContributionView, Contributions, Phase, Processor, ProcessorKind, ProcessorOptions
from vsixpack.processors.registry import DEFAULT_ORDER, create_default_processors


class _Recorder(ContributionView):
    """Records the order in which it is called."""

    kind = ProcessorKind.MANIFEST

    def __init__(self, name: str, log: List[str], fail_on: str = "", suffix: str = "") -> None:
        self.contributions = Contributions(self.kind)
        self.name = name
        self.log = log
        self.fail_on = fail_on
        self.suffix = suffix

    def on_file(self, file: FileRecord) -> FileRecord:
        self.log.append(f"{self.name}:{file.path}")
        if file.path == self.fail_on:
            raise RuntimeError("boom")
        if self.suffix:
            return file.with_contents(read(file) + self.suffix.encode())
        return file

    def on_end(self) -> None:
        self.log.append(f"{self.name}:end")
        self.contributions.finalize()


def test_files_thread_through_processors_in_order():
    log: List[str] = []
    procs = [_Recorder("a", log, suffix="A"), _Recorder("b", log, suffix="B")]
    files = [FileRecord(path="extension/1", contents=""), FileRecord(path="extension/2", contents="x")]

    out = process_files(procs, files)

    assert log == [
        "a:extension/1", "b:extension/1",
        "a:extension/2", "b:extension/2",
        "a:end", "b:end",
    ]
    assert [f.path for f in out] == ["extension/1", "extension/2"]
    assert [read(f) for f in out] == [b"AB", b"xAB"]


def test_first_failure_aborts_the_run():
    log: List[str] = []
    procs = [_Recorder("a", log, fail_on="extension/1"), _Recorder("b", log)]
    files = [FileRecord(path="extension/1"), FileRecord(path="extension/2")]

    with pytest.raises(ProcessingError, match="extension/1"):
        process_files(procs, files)
    assert log == ["a:extension/1"]


def test_renaming_a_file_is_rejected():
    class _Renamer(_Recorder):
        def on_file(self, file):
            return FileRecord(path=file.path + ".bak")

    with pytest.raises(ProcessingError, match="renamed"):
        process_files([_Renamer("r", [])], [FileRecord(path="extension/a")])


def test_failing_on_end_stops_later_processors():
    class _BadEnd(_Recorder):
        def on_end(self):
            self.log.append(f"{self.name}:end")
            raise RuntimeError("cannot finish")

    log: List[str] = []
    procs = [_Recorder("a", log), _BadEnd("b", log), _Recorder("c", log)]

    with pytest.raises(ProcessingError, match="manifest processor failed to finalize: cannot finish"):
        process_files(procs, [FileRecord(path="extension/1")])
    assert log == ["a:extension/1", "b:extension/1", "c:extension/1", "a:end", "b:end"]


def test_contributions_are_read_only_after_finalize():
    c = Contributions(ProcessorKind.ICON)
    c.add_asset("t", "p")
    with pytest.raises(ProcessingError):
        c.assets
    c.finalize()
    assert c.phase is Phase.FINALIZED
    assert len(c.assets) == 1
    with pytest.raises(ProcessingError):
        c.add_property("id", "v")


def test_default_processors_satisfy_the_contract():
    procs = create_default_processors(make_manifest())
    assert [p.kind for p in procs] == list(DEFAULT_ORDER)
    process_files(procs, [])
    assert all(isinstance(p, Processor) for p in procs)


def test_minimal_manifest_yields_only_the_manifest_asset():
    procs = create_default_processors(make_manifest())
    assert process_files(procs, []) == []
    assets, properties = collect_contributions(procs)
    assert [a.type for a in assets] == [AssetType.MANIFEST]
    assert properties == ()


def test_asset_order_follows_processor_order():
    m = make_manifest(icon="icon.png", license="SEE LICENSE IN LICENSE.md")
    files = [
        FileRecord(path="extension/LICENSE.md"),
        FileRecord(path="extension/icon.png"),
        FileRecord(path="extension/CHANGELOG.md"),
        FileRecord(path="extension/README.md"),
    ]
    procs = create_default_processors(m)
    process_files(procs, files)
    assets, _ = collect_contributions(procs)
    assert [a.type for a in assets] == [
        AssetType.MANIFEST,
        AssetType.DETAILS,
        AssetType.CHANGELOG,
        AssetType.LICENSE,
        AssetType.ICON,
    ]


def test_strict_mode_reports_missing_declared_files():
    m = make_manifest(icon="icon.png")
    procs = create_default_processors(m, ProcessorOptions(strict=True))
    with pytest.raises(ConfigurationError, match="icon.png"):
        process_files(procs, [])
