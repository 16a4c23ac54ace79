"""Built-in passive tree used when the passive catalog cannot be loaded."""
from __future__ import annotations

from typing import Dict, Iterable, Tuple

from runeclicker.domain.defs import PassiveNodeDef


def _node(
    node_id: str,
    kind: str,
    cost: int,
    grants: Dict[str, float],
    pos: Tuple[float, float],
    *,
    requires: Iterable[str] = (),
    links: Iterable[str] = (),
    desc: str = "",
) -> PassiveNodeDef:
    return PassiveNodeDef(
        id=node_id,
        kind=kind,  # type: ignore[arg-type]
        cost=cost,
        grants=grants,
        pos=pos,
        requires=frozenset(requires),
        links=frozenset(links),
        desc=desc,
    )


def default_passive_nodes() -> Tuple[PassiveNodeDef, ...]:
    """Return the small fixed fallback tree: three class wings and a shared centre."""
    return (
        # Class start points.
        _node("start_str", "notable", 0, {"max_life_pct": 5, "armor_pct": 12}, (0, -200),
              links=("str_path_1", "str_life_1"), desc="Start (strength)"),
        _node("start_dex", "notable", 0, {"evasion_pct": 12, "attack_speed_pct": 6}, (173, 100),
              links=("dex_path_1", "dex_crit_1"), desc="Start (dexterity)"),
        _node("start_int", "notable", 0, {"spell_dmg_pct": 8, "mana_pct": 10}, (-173, 100),
              links=("int_path_1", "int_elem_1"), desc="Start (intelligence)"),
        # Strength wing.
        _node("str_path_1", "small", 1, {"max_life": 15}, (0, -150),
              requires=("start_str",), links=("str_path_2", "str_dmg_1")),
        _node("str_path_2", "small", 1, {"phys_dmg_pct": 8}, (0, -100),
              requires=("str_path_1",), links=("str_notable_1",)),
        _node("str_life_1", "small", 1, {"max_life": 20}, (-40, -180),
              requires=("start_str",), links=("str_life_2",)),
        _node("str_life_2", "small", 1, {"max_life_pct": 4}, (-60, -150),
              requires=("str_life_1",), links=("str_life_notable",)),
        _node("str_dmg_1", "small", 1, {"phys_dmg_pct": 10}, (40, -180),
              requires=("str_path_1",), links=("str_dmg_2",)),
        _node("str_dmg_2", "small", 1, {"melee_dmg_pct": 12}, (60, -150),
              requires=("str_dmg_1",), links=("str_dmg_notable",)),
        _node("str_notable_1", "notable", 1, {"phys_dmg_pct": 20, "max_life": 30}, (0, -50),
              requires=("str_path_2",), links=("str_cs_1",), desc="Sturdy"),
        _node("str_life_notable", "notable", 1, {"max_life_pct": 10, "life_regen": 2}, (-80, -120),
              requires=("str_life_2",), desc="Vitality"),
        _node("str_dmg_notable", "notable", 1, {"phys_dmg_pct": 15, "attack_speed_pct": 8}, (80, -120),
              requires=("str_dmg_2",), desc="Destruction"),
        _node("str_cs_1", "cornerstone", 2, {"more_phys_dmg": 30, "less_elemental_dmg": -50}, (0, 0),
              requires=("str_notable_1",), desc="Physical focus"),
        # Dexterity wing.
        _node("dex_path_1", "small", 1, {"attack_speed_pct": 4}, (150, 80),
              requires=("start_dex",), links=("dex_path_2",)),
        _node("dex_path_2", "small", 1, {"crit_chance": 10}, (120, 60),
              requires=("dex_path_1",), links=("dex_notable_1",)),
        _node("dex_crit_1", "small", 1, {"crit_chance": 15}, (180, 130),
              requires=("start_dex",), links=("dex_crit_2",)),
        _node("dex_crit_2", "small", 1, {"crit_multi": 20}, (160, 150),
              requires=("dex_crit_1",), links=("dex_crit_notable",)),
        _node("dex_notable_1", "notable", 1, {"attack_speed_pct": 12, "evasion_pct": 15}, (90, 40),
              requires=("dex_path_2",), links=("dex_cs_1",), desc="Agility"),
        _node("dex_crit_notable", "notable", 1, {"crit_chance": 25, "crit_multi": 30}, (140, 170),
              requires=("dex_crit_2",), desc="Precision"),
        _node("dex_cs_1", "cornerstone", 2, {"more_attack_speed": 50, "less_dmg": -20}, (60, 20),
              requires=("dex_notable_1",), desc="Flurry"),
        # Intelligence wing.
        _node("int_path_1", "small", 1, {"spell_dmg_pct": 8}, (-150, 80),
              requires=("start_int",), links=("int_path_2",)),
        _node("int_path_2", "small", 1, {"elemental_dmg_pct": 10}, (-120, 60),
              requires=("int_path_1",), links=("int_notable_1",)),
        _node("int_elem_1", "small", 1, {"fire_dmg_pct": 12}, (-180, 130),
              requires=("start_int",), links=("int_elem_2",)),
        _node("int_elem_2", "small", 1, {"cold_dmg_pct": 12}, (-160, 150),
              requires=("int_elem_1",), links=("int_elem_notable",)),
        _node("int_notable_1", "notable", 1, {"spell_dmg_pct": 20, "cast_speed_pct": 10}, (-90, 40),
              requires=("int_path_2",), links=("int_cs_1",), desc="Empowered spells"),
        _node("int_elem_notable", "notable", 1, {"elemental_dmg_pct": 25, "elemental_penetration": 10},
              (-140, 170), requires=("int_elem_2",), desc="Elemental might"),
        _node("int_cs_1", "cornerstone", 2, {"more_spell_dmg": 40, "less_attack_dmg": -60}, (-60, 20),
              requires=("int_notable_1",), desc="Spell focus"),
        # Shared centre, reachable from each wing's notable.
        _node("center_life", "notable", 1, {"max_life_pct": 8, "res_all_pct": 10}, (0, 30),
              requires=("str_notable_1", "dex_notable_1", "int_notable_1"), links=("center_path_1",),
              desc="Endurance"),
        _node("center_path_1", "small", 1, {"damage_pct": 5}, (0, 60),
              requires=("center_life",), links=("center_path_2",)),
        _node("center_path_2", "small", 1, {"damage_pct": 5}, (0, 90),
              requires=("center_path_1",), links=("center_notable",)),
        _node("center_notable", "notable", 2, {"more_dmg": 15}, (0, 120),
              requires=("center_path_2",), desc="Versatility"),
    )
