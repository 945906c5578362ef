"""Checker for scenario script files: commands, resources, names and messages."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass
from itertools import pairwise
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

ENCODING = "cp932"

CHARANAME_LKAKKO = "【"
CHARANAME_RKAKKO = "】"

DEFAULT_GRAPHICS_LIST = str(Path("..") / "Resource" / "シナリオ_画像.txt")
DEFAULT_SOUNDS_LIST = str(Path("..") / "Resource" / "シナリオ_音.txt")

MSG_UNKNOWN_CMD = "認識できない命令です。文字列に誤りはありませんか、空白を入れ忘れていませんか。(tkn={})"
MSG_NO_GRAPH = "画像が見つかりません。画像の名前を確認して下さい、画像リストが最新であるか確認して下さい。"
MSG_NO_SOUND = "サウンドが見つかりません。サウンドの名前を確認して下さい、サウンドリストが最新であるか確認して下さい。"
MSG_NO_SE = "効果音が見つかりません。効果音の名前を確認して下さい、効果音リストが最新であるか確認して下さい。"
MSG_BAD_POSITION = "立ち位置の番号が不正です。(1〜4)"
MSG_BAD_EFFECT = "認識できないエフェクトです。文字列に誤りはありませんか。"
MSG_TOKEN_COUNT = "命令の単語数が多すぎるか少なすぎます。不用な空白はありませんか。"
MSG_BAD_NAME = "キャラ名に不正な文字があります。半角とかだめよ。"
MSG_NAME_NOT_CLOSED = "キャラ名が閉じられていません。【】←これ"
MSG_BAD_MESSAGE = "メッセージに不正な文字があります。半角とかだめよ。"
MSG_EMPTY = "このシナリオファイルは空か、コメントしかありません。空のシナリオは処理できません。"
MSG_LEADING_BLANK = "最初のメッセージや命令の前に空行があります。きっと正しく処理できません。"
MSG_DOUBLE_BLANK = "連続する空行があります。シナリオの終端と見なされる場合があります。"
MSG_NO_ENTITY = "有効なメッセージや命令が一つもありません。シナリオは少なくとも一つはメッセージや命令がなければなりません。"

_POSITIONS = ("1", "2", "3", "4")
_EFFECTS = ("揺れる",)
_SIMPLE_COMMANDS = ("@--", "@++", "@RS")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class Warning:
    """One finding; row 0 refers to the scenario as a whole."""

    row: int
    message: str

    def __str__(self) -> str:
        return f"警告(行番号: {self.row}): {self.message}"


def is_zen_line(line: str) -> bool:
    """True when every character is a double-byte Shift-JIS character."""
    for ch in line:
        try:
            encoded = ch.encode(ENCODING)
        except UnicodeEncodeError:
            return False
        if len(encoded) != 2:
            return False
    return True


def _read_lines(path) -> List[str]:
    text = Path(path).read_bytes().decode(ENCODING, errors="replace")
    text = text.replace("\r\n", "\n")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_resource_list(path) -> List[str]:
    """Read a resource list file, one file name per line."""
    return _read_lines(path)


class ScenarioChecker:
    """Checks scenario lines against known graphics and sound files."""

    def __init__(self, graphics: Iterable[str], sounds: Iterable[str]):
        self._graphics = {_ascii_lower(name) for name in graphics}
        self._sounds = {_ascii_lower(name) for name in sounds}

    @staticmethod
    def _exists(name: str, pool: set, ext: str) -> bool:
        if not name:
            return False
        return _ascii_lower(f"{name}.{ext}") in pool

    def _graph_ok(self, name: str) -> bool:
        return self._exists(name, self._graphics, "png")

    def _sound_ok(self, name: str) -> bool:
        return self._exists(name, self._sounds, "mp3")

    def _check_command(self, row: int, line: str) -> List[Warning]:
        found: List[Warning] = []
        tokens = line.split(" ")

        def warn(message: str) -> None:
            found.append(Warning(row, message))

        if len(tokens) == 1:
            if tokens[0] not in _SIMPLE_COMMANDS:
                warn(MSG_UNKNOWN_CMD.format(1))
        elif len(tokens) == 2:
            cmd, option = tokens
            is_off = _ascii_lower(option) == "off"
            if cmd == "@BG":
                if not self._graph_ok(option) and not is_off:
                    warn(MSG_NO_GRAPH)
            elif cmd == "@BGM":
                if not self._sound_ok(option) and not is_off:
                    warn(MSG_NO_SOUND)
            elif cmd == "@SE":
                if not self._sound_ok(option):
                    warn(MSG_NO_SE)
            else:
                warn(MSG_UNKNOWN_CMD.format(2))
        elif len(tokens) == 3:
            cmd, position, target = tokens
            if position not in _POSITIONS:
                warn(MSG_BAD_POSITION)
            if cmd == "@DISP":
                if not self._graph_ok(target) and _ascii_lower(target) != "off":
                    warn(MSG_NO_GRAPH)
            elif cmd == "@EFFE":
                if target not in _EFFECTS:
                    warn(MSG_BAD_EFFECT)
            else:
                warn(MSG_UNKNOWN_CMD.format(3))
        else:
            warn(MSG_TOKEN_COUNT)
        return found

    def _check_line(self, row: int, line: str) -> List[Warning]:
        if line.startswith("@"):
            return self._check_command(row, line)
        if line.startswith(CHARANAME_LKAKKO):
            if not is_zen_line(line):
                return [Warning(row, MSG_BAD_NAME)]
            if not line.endswith(CHARANAME_RKAKKO):
                return [Warning(row, MSG_NAME_NOT_CLOSED)]
            return []
        if line and not is_zen_line(line):
            return [Warning(row, MSG_BAD_MESSAGE)]
        return []

    def check(self, lines: Sequence[str]) -> List[Warning]:
        """Check scenario lines; rows are numbered from 1 as in the file."""
        rows = [
            (number, text)
            for number, text in enumerate(lines, 1)
            if not text.startswith(";")
        ]
        warnings: List[Warning] = []
        for number, text in rows:
            warnings.extend(self._check_line(number, text))

        if not rows:
            warnings.append(Warning(0, MSG_EMPTY))
        elif rows[0][1] == "":
            warnings.append(Warning(0, MSG_LEADING_BLANK))

        for (_, first), (number, second) in pairwise(rows):
            if first == "" and second == "":
                warnings.append(Warning(number, MSG_DOUBLE_BLANK))

        if not any(text for _, text in rows):
            warnings.append(Warning(0, MSG_NO_ENTITY))
        return warnings

    def check_file(self, path) -> List[Warning]:
        """Read a Shift-JIS scenario file and check it."""
        return self.check(_read_lines(path))


def format_report(name: str, warnings: Iterable[Warning]) -> str:
    """Render the report for one scenario."""
    parts = [f"シナリオ \"{name}\" チェック結果\n"]
    parts.extend(f"{warning}\n" for warning in warnings)
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check scenario files, or every file of a directory, and write a report."""
    parser = argparse.ArgumentParser(
        prog="scnrfltr", description="Check scenario script files."
    )
    parser.add_argument("files", nargs="*", help="scenario files to check")
    parser.add_argument("-d", "--dir", help="check every file in this directory")
    parser.add_argument("--graphics", default=DEFAULT_GRAPHICS_LIST,
                        help="list of known graphics files")
    parser.add_argument("--sounds", default=DEFAULT_SOUNDS_LIST,
                        help="list of known sound files")
    parser.add_argument("-o", "--output", help="report file (default: stdout)")
    args = parser.parse_args(argv)

    if args.dir is None and not args.files:
        parser.error("no scenario file or directory given")

    try:
        checker = ScenarioChecker(
            load_resource_list(args.graphics), load_resource_list(args.sounds)
        )
        if args.dir is not None:
            print("DIR mode", file=sys.stderr)
            files = sorted(str(p) for p in Path(args.dir).iterdir() if p.is_file())
        else:
            files = list(args.files)

        reports = []
        for file in files:
            if args.dir is not None:
                print(file, file=sys.stderr)
            reports.append(format_report(file, checker.check_file(file)))
        report = "".join(reports)

        if args.output:
            Path(args.output).write_text(report, encoding="utf-8")
        else:
            sys.stdout.write(report)
    except OSError as exc:
        print(f"scnrfltr: {exc}", file=sys.stderr)
        return 1
    return 0