"""Battle settings: stage music, AI strength, extra battle rules and their menus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from hetapuz.defines import BLOCK_COLOR_NUM, CORRECT_PAIR_MAX, HetaBasho
from hetapuz.menu import Menu

STD_CURTAIN = 0.9

CHARA_NAMES: Tuple[str, ...] = (
    "イタリア", "イギリス", "スペイン", "中国", "ドイツ", "ロマーノ",
    "日本", "プロイセン", "フランス", "アメリカ", "ロシア",
    "イタリア・ロマーノ", "イタリア・日本", "イギリス・中国", "イギリス・日本",
    "スペイン・ロマーノ", "ドイツ・イタリア", "ドイツ・日本", "ドイツ・プロイセン",
    "プロイセン・イタリア", "プロイセン・日本", "フランス・イギリス",
    "フランス・スペイン", "アメリカ・イギリス", "ロシア・プロイセン",
    "ロシア・アメリカ",
)

HISSATSU_TYPES: Tuple[str, ...] = (
    "I", "E", "S", "C", "G", "R", "J", "P", "F", "A", "U",
    "IR", "IJ", "EC", "EJ", "SR", "GI", "GJ", "GP", "PI", "PJ",
    "FE", "FS", "AE", "UP", "UA",
)

BASHO_NAMES: Tuple[str, ...] = (
    "ひまわり畑", "花畑", "海", "湖", "砂漠", "森", "神社", "夜",
)

AI_LEVEL_NAMES: Tuple[str, ...] = (
    "レベル０", "レベル１", "レベル２", "レベル３", "レベル４",
    "レベル５", "レベル６", "レベル７", "レベル８", "レベル８±α",
)

SPECIAL_ITEMS: Tuple[str, ...] = (
    "２色", "３色", "お邪魔ステルス", "お邪魔以外ステルス", "２色ステルス",
    "３色ステルス", "２色＋お邪魔ステルス", "３色＋お邪魔ステルス", "全部ステルス",
    "ステルスなハンデ戦【１Ｐ上級者／２Ｐ初心者】",
    "ステルスなハンデ戦【１Ｐ初心者／２Ｐ上級者】",
    "エンディング", "エンディング(ボーダー)", "ビッグフラワー",
    "お邪魔×３", "お邪魔×５", "お邪魔×７７７",
    "スコア×３", "スコア×５", "スコア×７７７",
    "？個で消える", "常に隠し", "高速", "もっと高速", "もっともっと高速", "戻る",
)
SPECIAL_ERASE = 20
SPECIAL_BACK = len(SPECIAL_ITEMS) - 1

ERASE_ITEMS: Tuple[str, ...] = (
    "２個で消える", "３個で消える", "４個で消える", "５個で消える",
    "６個で消える", "７個で消える", "８個で消える", "９個で消える",
    "１ダースで消える", "１ダースで消える(２色)", "１ダースで消える(３色)",
)
ERASE_DEFAULT = 2

# (title, erase count, colour limit or 0)
_ERASE_CHOICES: Tuple[Tuple[str, int, int], ...] = (
    ("Erase-2", 2, 0), ("Erase-3", 3, 0), ("Erase-4", 4, 0), ("Erase-5", 5, 0),
    ("Erase-6", 6, 0), ("Erase-7", 7, 0), ("Erase-8", 8, 0), ("Erase-9", 9, 0),
    ("Erase-12", 12, 0), ("Erase-12-2C", 12, 2), ("Erase-12-3C", 12, 3),
)

_BASHO_BGM = {
    HetaBasho.SUNFLOWER: ("SHIKI", None),
    HetaBasho.FLOWER: ("CAFE", None),
    HetaBasho.SEA: ("3DAYS", None),
    HetaBasho.LAKE: ("POLP", None),
    HetaBasho.DESERT: ("TEIEN", None),
    HetaBasho.FOREST: ("DANCE", "D"),
    HetaBasho.JINJA: ("SUI", "D"),
    HetaBasho.NIGHT: ("STORY", "D"),
}


@dataclass(frozen=True)
class AIParams:
    """Standard parameters of the computer opponent for one strength level."""

    depth: int
    think: str
    primary: Tuple[float, int, float]
    secondary: Tuple[float, int, float]


_AI_TABLE: Tuple[AIParams, ...] = (
    AIParams(1, "Lv0", (0.000, 0, 0.000), (0.0001, 0, 0.000)),
    AIParams(1, "Lv1", (0.000, 0, 0.000), (0.0001, 0, 0.000)),
    AIParams(2, "Lv1", (0.000, 0, 0.000), (0.050, 9, 0.700)),
    AIParams(2, "Lv2", (0.000, 0, 0.000), (0.050, 9, 0.700)),
    AIParams(3, "Lv2", (0.000, 0, 0.000), (0.222, 9, 0.700)),
    AIParams(3, "Lv3", (0.050, 9, 0.700), (0.222, 9, 0.700)),
    AIParams(4, "Lv3", (0.050, 9, 0.700), (0.888, 9, 0.700)),
    AIParams(4, "Lv4", (0.050, 9, 0.700), (0.888, 9, 0.700)),
    AIParams(5, "Lv4", (0.777, 9, 0.700), (1.000, 10, 0.500)),
    AIParams(5, "ClockTower", (0.777, 9, 0.700), (1.000, 10, 0.500)),
)


@dataclass
class TokushuButtle:
    """Extra rules of a special battle; all off by default."""

    color_max: int = 0
    stealth: List[bool] = field(default_factory=lambda: [False] * BLOCK_COLOR_NUM)
    stealth_disable: List[bool] = field(default_factory=lambda: [False, False])
    game_over_and_show_stealth: bool = False
    flower_rain: bool = False
    flower_rainbow: bool = False
    big_flower: bool = False
    jama_expand: int = 0
    score_expand: int = 0
    puyo_erase_num: int = 0
    always_hidden: bool = False
    very_fast: int = 0
    title: str = ""


@dataclass
class TaisenInfo:
    """Choices made on the battle menus."""

    chara: List[int] = field(default_factory=lambda: [16, 20])
    basho: int = HetaBasho.FLOWER
    use_ai: bool = False
    ai_tsuyosa: int = 8
    tokushu_buttle: TokushuButtle = field(default_factory=TokushuButtle)

    def validate(self) -> None:
        """Raise ValueError when a choice lies outside its range."""
        if len(self.chara) != 2:
            raise ValueError("exactly two characters are needed")
        for side, chara in enumerate(self.chara):
            if not 0 <= chara < CORRECT_PAIR_MAX:
                raise ValueError(f"character of side {side + 1} out of range: {chara}")
        if not 0 <= self.basho < len(HetaBasho):
            raise ValueError(f"stage out of range: {self.basho}")
        if not 0 <= self.ai_tsuyosa < len(_AI_TABLE):
            raise ValueError(f"AI level out of range: {self.ai_tsuyosa}")


def hissatsu_type(chara_index: int) -> str:
    """Special-move type of a character or pair menu entry."""
    if not 0 <= chara_index < len(HISSATSU_TYPES):
        raise ValueError(f"character index out of range: {chara_index}")
    return HISSATSU_TYPES[chara_index]


def basho_bgm(basho: int) -> Tuple[str, Optional[str]]:
    """Normal and pinch music of a stage; pinch is None where the stage has none."""
    return _BASHO_BGM[HetaBasho(basho)]


def ai_params(level: int) -> AIParams:
    """Parameters of the computer opponent at strength level 0..9."""
    if not 0 <= level < len(_AI_TABLE):
        raise ValueError(f"AI level out of range: {level}")
    return _AI_TABLE[level]


def set_color_stealth(battle: TokushuButtle, num: int, rng,
                      color_num: int = BLOCK_COLOR_NUM) -> None:
    """Hide num randomly chosen colours; index 0 (the nuisance block) is untouched."""
    if not 1 <= num <= color_num - 1:
        raise ValueError(f"number of stealth colours out of range: {num}")
    if len(battle.stealth) < color_num:
        battle.stealth.extend([False] * (color_num - len(battle.stealth)))
    colors = battle.stealth[1:color_num]
    colors[:num] = [True] * num
    rng.shuffle(colors)
    battle.stealth[1:color_num] = colors


def special_battle(index: int, sub_index: Optional[int] = None, rng=None,
                   color_num: int = BLOCK_COLOR_NUM) -> Optional[TokushuButtle]:
    """Rules for an entry of the extra menu; None for the back entry.

    sub_index is the choice on the erase-count submenu and is needed for
    that entry only; rng is needed for the colour-stealth entries.
    """
    if not 0 <= index < len(SPECIAL_ITEMS):
        raise ValueError(f"extra menu index out of range: {index}")
    if index == SPECIAL_BACK:
        return None

    t = TokushuButtle(stealth=[False] * color_num)

    def stealth(num: int, jama: bool) -> None:
        if rng is None:
            raise ValueError("a random source is needed for stealth colours")
        set_color_stealth(t, num, rng, color_num)
        t.stealth[0] = jama
        t.game_over_and_show_stealth = True

    all_colors = color_num - 1
    match index:
        case 0:
            t.title, t.color_max = "2Colors", 2
        case 1:
            t.title, t.color_max = "3Colors", 3
        case 2:
            t.title = "Stealth-J"
            t.stealth[0] = True
            t.game_over_and_show_stealth = True
        case 3:
            t.title = "Stealth-C"
            stealth(all_colors, False)
        case 4:
            t.title = "Stealth-2C"
            stealth(2, False)
        case 5:
            t.title = "Stealth-3C"
            stealth(3, False)
        case 6:
            t.title = "Stealth-J2C"
            stealth(2, True)
        case 7:
            t.title = "Stealth-J3C"
            stealth(3, True)
        case 8:
            t.title = "Stealth"
            stealth(all_colors, True)
        case 9:
            t.title = "Stealth-1P"
            stealth(all_colors, True)
            t.stealth_disable[1] = True
        case 10:
            t.title = "Stealth-2P"
            stealth(all_colors, True)
            t.stealth_disable[0] = True
        case 11:
            t.title = "FlowerRain"
            t.flower_rain = True
        case 12:
            t.title = "BorderRain"
            t.flower_rain = True
            t.flower_rainbow = True
        case 13:
            t.title = "BigFlower"
            t.big_flower = True
        case 14:
            t.title, t.jama_expand = "Jx3", 3
        case 15:
            t.title, t.jama_expand = "Jx5", 5
        case 16:
            t.title, t.jama_expand = "Jx777", 777
        case 17:
            t.title, t.score_expand = "Sx3", 3
        case 18:
            t.title, t.score_expand = "Sx5", 5
        case 19:
            t.title, t.score_expand = "Sx777", 777
        case 20:
            if sub_index is None or not 0 <= sub_index < len(_ERASE_CHOICES):
                raise ValueError(f"erase menu index out of range: {sub_index}")
            t.title, t.puyo_erase_num, color_max = _ERASE_CHOICES[sub_index]
            if color_max:
                t.color_max = color_max
        case 21:
            t.title = "Hidden"
            t.always_hidden = True
        case 22:
            t.title, t.very_fast = "HiSpeed", 1
        case 23:
            t.title, t.very_fast = "ExHiSpeed", 2
        case 24:
            t.title, t.very_fast = "ExExHiSpeed", 5
    return t


def _menu(title: str, items: Tuple[str, ...], compact: bool, last: int) -> Menu:
    menu = Menu(title, items, compact)
    menu.current = last
    return menu


def chara_menu(last: int) -> Menu:
    """Menu of characters and pairs, starting on entry last."""
    return _menu("キャラクタまたはペアを選んで下さい", CHARA_NAMES, True, last)


def basho_menu(last: int) -> Menu:
    """Menu of stages, starting on entry last."""
    return _menu("場所を選んで下さい", BASHO_NAMES, False, last)


def ai_menu(last: int) -> Menu:
    """Menu of AI strength levels, starting on entry last."""
    return _menu("ＡＩの強さを選んで下さい (レベル０が最弱)", AI_LEVEL_NAMES, False, last)


def special_menu(last: int) -> Menu:
    """Menu of extra battle rules, starting on entry last."""
    return _menu("エキストラ", SPECIAL_ITEMS, True, last)


def erase_menu(last: int = ERASE_DEFAULT) -> Menu:
    """Menu of how many blocks must join to vanish, starting on entry last."""
    return _menu("？個で消える", ERASE_ITEMS, False, last)