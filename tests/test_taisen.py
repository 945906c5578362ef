import pytest

from hetapuz.defines import BLOCK_COLOR_NUM, CORRECT_PAIR_MAX, HetaBasho
from hetapuz.taisen import (
    AIParams,
    SPECIAL_ITEMS,
    TaisenInfo,
    TokushuButtle,
    ai_menu,
    ai_params,
    basho_bgm,
    basho_menu,
    chara_menu,
    erase_menu,
    hissatsu_type,
    set_color_stealth,
    special_battle,
    special_menu,
)
from hetapuz.tools import GameRandom


@pytest.fixture(scope="module")
def rng():
    return GameRandom(1234)


def test_taisen_info_defaults():
    info = TaisenInfo()
    assert info.chara == [16, 20]
    assert info.basho == HetaBasho.FLOWER
    assert info.ai_tsuyosa == 8


@pytest.mark.parametrize("chara", [[-1, 0], [0, CORRECT_PAIR_MAX]])
def test_validate_rejects_bad_chara(chara):
    with pytest.raises(ValueError):
        TaisenInfo(chara=chara).validate()


def test_validate_rejects_bad_basho_and_ai():
    with pytest.raises(ValueError):
        TaisenInfo(basho=len(HetaBasho)).validate()
    with pytest.raises(ValueError):
        TaisenInfo(ai_tsuyosa=10).validate()


def test_hissatsu_type_values():
    assert hissatsu_type(0) == "I"
    assert hissatsu_type(16) == "GI"
    assert hissatsu_type(25) == "UA"


@pytest.mark.parametrize("index", [-1, CORRECT_PAIR_MAX])
def test_hissatsu_type_out_of_range(index):
    with pytest.raises(ValueError):
        hissatsu_type(index)


def test_basho_bgm():
    assert basho_bgm(HetaBasho.SUNFLOWER) == ("SHIKI", None)
    assert basho_bgm(HetaBasho.FOREST) == ("DANCE", "D")
    assert basho_bgm(HetaBasho.NIGHT) == ("STORY", "D")
    with pytest.raises(ValueError):
        basho_bgm(8)


def test_ai_params_table():
    assert ai_params(0) == AIParams(1, "Lv0", (0.0, 0, 0.0), (0.0001, 0, 0.0))
    assert ai_params(8) == AIParams(5, "Lv4", (0.777, 9, 0.7), (1.0, 10, 0.5))
    assert ai_params(9).think == "ClockTower"
    depths = [ai_params(level).depth for level in range(10)]
    assert depths == sorted(depths)
    with pytest.raises(ValueError):
        ai_params(10)


@pytest.mark.parametrize("num", [1, 2, 3, BLOCK_COLOR_NUM - 1])
def test_set_color_stealth_count(rng, num):
    battle = TokushuButtle()
    set_color_stealth(battle, num, rng, BLOCK_COLOR_NUM)
    assert sum(battle.stealth[1:]) == num
    assert battle.stealth[0] is False
    assert len(battle.stealth) == BLOCK_COLOR_NUM


@pytest.mark.parametrize("num", [0, -1, BLOCK_COLOR_NUM])
def test_set_color_stealth_range(rng, num):
    with pytest.raises(ValueError):
        set_color_stealth(TokushuButtle(), num, rng, BLOCK_COLOR_NUM)


def test_special_battle_simple_entries(rng):
    two = special_battle(0, rng=rng)
    assert (two.title, two.color_max) == ("2Colors", 2)
    fast = special_battle(24, rng=rng)
    assert (fast.title, fast.very_fast) == ("ExExHiSpeed", 5)
    jama = special_battle(16, rng=rng)
    assert (jama.title, jama.jama_expand) == ("Jx777", 777)


def test_special_battle_stealth_entries(rng):
    everything = special_battle(8, rng=rng)
    assert everything.title == "Stealth"
    assert all(everything.stealth)
    assert everything.game_over_and_show_stealth
    one_p = special_battle(9, rng=rng)
    assert one_p.stealth_disable == [False, True]
    j2c = special_battle(6, rng=rng)
    assert j2c.stealth[0] is True
    assert sum(j2c.stealth[1:]) == 2


def test_special_battle_erase_submenu(rng):
    battle = special_battle(20, 9, rng)
    assert battle.title == "Erase-12-2C"
    assert battle.puyo_erase_num == 12
    assert battle.color_max == 2
    with pytest.raises(ValueError):
        special_battle(20, 11, rng)
    with pytest.raises(ValueError):
        special_battle(20, None, rng)


def test_special_battle_back_and_range(rng):
    assert special_battle(len(SPECIAL_ITEMS) - 1, rng=rng) is None
    with pytest.raises(ValueError):
        special_battle(len(SPECIAL_ITEMS), rng=rng)


def test_menus():
    menu = chara_menu(3)
    assert menu.current == 3
    assert len(menu.items) == CORRECT_PAIR_MAX
    assert menu.compact is True
    assert basho_menu(0).items[0] == "ひまわり畑"
    assert special_menu(0).items[-1] == "戻る"
    assert erase_menu().current == 2
    assert erase_menu().compact is False


def test_menu_last_out_of_range():
    with pytest.raises(IndexError):
        ai_menu(10)