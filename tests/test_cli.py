"""cli.py tests"""

from __future__ import annotations

from pathlib import Path

import pytest

from lrucache.cache import LRUCache
from lrucache.cli import (
    Operation,
    apply_operation,
    cmd_demo,
    cmd_replay,
    create_parser,
    parse_operations,
    run_demo,
)
from lrucache.config import ReportConfig
from lrucache.exceptions import OperationParseError


class TestParseOperations:
    """parse_operations"""

    def test_parses_all_operations(self) -> None:
        text = "put a 1\nget a\ndelete a\n"
        assert parse_operations(text) == [
            Operation("put", "a", "1", 1),
            Operation("get", "a", None, 2),
            Operation("delete", "a", None, 3),
        ]

    def test_skips_blank_lines_and_comments(self) -> None:
        text = "# warm up\n\n   \nput a 1\n"
        ops = parse_operations(text)
        assert len(ops) == 1
        assert ops[0].line_number == 4

    def test_put_value_keeps_spaces(self) -> None:
        ops = parse_operations("PUT greeting hello big world")
        assert ops == [Operation("put", "greeting", "hello big world", 1)]

    @pytest.mark.parametrize(
        ("text", "line"),
        [
            ("put a", 1),
            ("get", 1),
            ("get a b", 1),
            ("put a 1\npop a", 2),
        ],
    )
    def test_malformed_lines(self, text: str, line: int) -> None:
        with pytest.raises(OperationParseError) as exc_info:
            parse_operations(text)
        assert exc_info.value.line_number == line


class TestApplyOperation:
    """apply_operation"""

    def test_get_hit_and_miss(self, full_cache: LRUCache[str, str]) -> None:
        assert apply_operation(full_cache, Operation("get", "A")) == "get A -> a"
        assert apply_operation(full_cache, Operation("get", "X")) == "get X -> (absent)"
        assert list(full_cache.keys()) == ["B", "C", "A"]

    def test_put_and_delete_print_nothing(self, empty_cache: LRUCache[str, str]) -> None:
        assert apply_operation(empty_cache, Operation("put", "A", "a")) is None
        assert apply_operation(empty_cache, Operation("delete", "A")) is None
        assert len(empty_cache) == 0

    def test_put_into_full_cache_evicts(self, full_cache: LRUCache[str, str]) -> None:
        apply_operation(full_cache, Operation("put", "D", "d"))
        assert list(full_cache.keys()) == ["B", "C", "D"]


class TestRunDemo:
    """run_demo"""

    def test_final_order(self, default_report: ReportConfig, capsys: pytest.CaptureFixture[str]) -> None:
        cache: LRUCache[str, str] = LRUCache(5)
        run_demo(cache, default_report)

        assert list(cache.keys()) == ["key6", "key3", "key5", "key7", "key8"]
        assert cache.peek("key5") == "updated value"

        out = capsys.readouterr().out
        assert "Cache is at full capacity" in out
        assert 'Inserting element "key6"' in out
        assert 'Deleting element "key2"' in out
        assert 'Adding element "key8"' in out

    def test_small_capacity(self, default_report: ReportConfig) -> None:
        cache: LRUCache[str, str] = LRUCache(1)
        run_demo(cache, default_report)
        assert list(cache.keys()) == ["key4"]


class TestCommands:
    """cmd_demo / cmd_replay"""

    def test_demo_succeeds(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LRU_CACHE_CAPACITY", raising=False)
        args = create_parser().parse_args(["demo"])
        assert cmd_demo(args) == 0
        assert "(5/5, full)" in capsys.readouterr().out

    def test_demo_rejects_zero_capacity(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = create_parser().parse_args(["demo", "--capacity", "0"])
        assert cmd_demo(args) == 1
        assert "capacity must be positive" in capsys.readouterr().err

    def test_demo_rejects_bad_env_capacity(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LRU_CACHE_CAPACITY", "lots")
        args = create_parser().parse_args(["demo"])
        assert cmd_demo(args) == 1
        assert "LRU_CACHE_CAPACITY" in capsys.readouterr().err

    def test_replay_prints_results(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        script = tmp_path / "ops.txt"
        script.write_text("put 1 one\nput 2 two\nput 3 three\nget 1\nget 2\n")
        args = create_parser().parse_args(["replay", str(script), "--capacity", "2"])

        assert cmd_replay(args) == 0
        out = capsys.readouterr().out
        assert "get 1 -> (absent)" in out
        assert "get 2 -> two" in out
        assert "| 1 | 3 | three |" in out
        assert "| 2 | 2 | two |" in out

    def test_replay_reports_parse_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        script = tmp_path / "ops.txt"
        script.write_text("put a 1\nfrobnicate a\n")
        args = create_parser().parse_args(["replay", str(script), "--capacity", "2"])

        assert cmd_replay(args) == 1
        assert "[line 2]" in capsys.readouterr().err

    def test_replay_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        args = create_parser().parse_args(["replay", str(tmp_path / "nope.txt"), "--capacity", "2"])
        assert cmd_replay(args) == 1
        assert "cannot read" in capsys.readouterr().err


class TestCreateParser:
    """create_parser"""

    def test_defaults(self) -> None:
        args = create_parser().parse_args(["demo"])
        assert args.command == "demo"
        assert args.capacity is None
        assert args.verbose is False

    def test_replay_arguments(self) -> None:
        args = create_parser().parse_args(["replay", "ops.txt", "--capacity", "9", "--verbose"])
        assert args.file == Path("ops.txt")
        assert args.capacity == 9
        assert args.verbose is True
