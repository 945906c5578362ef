# hetapuz

Settings, menus and helpers of a two-player falling-block puzzle game,
written as plain Python with no graphics or input layer attached. The
package also includes a checker for the game's scenario scripts.

## What is in the package

- `hetapuz.defines` holds the game's enumerations (`PuzzPlayer`, `PuzzPair`,
  `HetaChara`, `HetaBasho`, `Ending`) and constants such as
  `BORDER_OF_NUMERIC`, `CORRECT_PAIR_MAX` and `BLOCK_COLOR_NUM`. It also
  holds small numeric helpers:
  - `clamp`
  - `nearize`, `adjustize` and `nearize_adj`
  - `frame_loop`, which yields `(index, progress)` for frames `0..count`
  - `near_than` and `is_inside`
  - `count_down` and `inc_denom`
- `hetapuz.tools` holds:
  - `GameRandom`, a seeded random source. It offers `get`, `rnd`, `krnd`,
    `rndpm`, `rndbnd`, `rndp1m1` and an in-place `shuffle`. Seeding
    discards the first million draws, so constructing one takes a moment.
  - `TextScreen`, a 40-row text buffer with `cls`, `print` and `lines`.
  - Text helpers:
    - `read_line` reads one LF- or CRLF-terminated line and raises
      `ValueError` on a lone CR.
    - `j_stamp` formats a timestamp as `YYYY/MM/DD hh:mm:ss`.
    - `zen_int` writes an integer with full-width digits.
    - `line_to_domain` and `line_to_domain_len` replace characters other
      than ASCII letters, digits and `.` with `-`.
    - `log_write` appends `line: value` to a file and ignores write errors.
- `hetapuz.menu` holds:
  - `Menu`, which handles selection, hover rows, moving the cursor,
    cancelling to the last item and random selection, and renders to text
    rows.
  - `LineEditor`, single-line text entry with typing, paste, backspace,
    clear and a blinking cursor.
  - `parse_value`, which reads a leading integer and falls back to a
    default when the value is out of range.
  - `parse_ip`, a lenient dotted IPv4 parser.
- `hetapuz.taisen` holds the versus-mode settings:
  - `TaisenInfo`, which has a `validate` method.
  - `TokushuButtle`, the rules of a special battle.
  - The AI strength presets `AIParams` and `ai_params`.
  - `hissatsu_type` and `basho_bgm`.
  - `special_battle` and `set_color_stealth`, which build the special
    battle rules.
  - The menu builders `chara_menu`, `basho_menu`, `ai_menu`,
    `special_menu` and `erase_menu`.
- `hetapuz.scenario_filter` holds `ScenarioChecker`, which checks scenario
  lines and reports problems as `Warning` entries. It reports:
  - unknown commands
  - missing images or sounds
  - bad stand positions
  - unknown effects
  - half-width characters in messages or character names
  - unclosed name brackets
  - leading or repeated blank lines
  - empty scenarios

  Lines starting with `;` are comments. Scenario files and resource lists
  are read as Shift-JIS (cp932).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Checking scenario scripts

```
hetapuz-scenario-check SCENARIO.txt [MORE.txt ...]
hetapuz-scenario-check -d SCENARIO_DIR
```

The checker compares the image and sound names used by `@BG`, `@BGM`,
`@SE` and `@DISP` lines against two resource lists with one file name per
line. The lists are given with `--graphics` and `--sounds`. By default
they are `../Resource/シナリオ_画像.txt` and `../Resource/シナリオ_音.txt`.

The report starts each scenario with a heading. It then has one line per
warning, giving the line number the warning refers to, where `0` means
the whole scenario. The report goes to standard output, or to a UTF-8
file given with `-o`.

The command exits with status 1 when a file cannot be read.

From Python:

```python
from hetapuz.scenario_filter import ScenarioChecker, format_report

checker = ScenarioChecker(graphics={"背景.png"}, sounds={"曲.mp3"})
warnings = checker.check(["@BG 背景", "【キャラ】", "こんにちは"])
print(format_report("example", warnings))
```

## What the package does not do

The package provides no playable game:

- no puzzle field or falling-block engine
- no drawing, sound or keyboard/mouse input
- no network play
- no saved settings

`Menu` and `LineEditor` keep the state of a menu or an input line and
render it as text rows. Feeding them key presses and showing the rows is
left to the caller.