"""
Gen 3 (GBA) save support.

Supports: Ruby, Sapphire, Emerald, FireRed, LeafGreen

Usage:
    from pokedit.gen3 import Game

    game = Game.from_file("path/to/save.sav")
    print(f"Money: {game.team_items().money()}")
    with game.team_items_mut() as team_items:
        team_items.set_money(999999)
    game.save("path/to/save.sav")
"""

from .data_types import GameVersion, SaveSlotInfo, TimePlayed, TrainerId, ValidationMode
from .game import Game, emulator_intro_length
from .save_slot import SaveSlot, SaveSlotMut, Sections, select_save_slots
from .section import Section, SectionMut, calculate_checksum
from .team_items import TeamItemsSection, TeamItemsSectionMut
from .trainer import TrainerSection

__all__ = [
    "Game",
    "GameVersion",
    "SaveSlot",
    "SaveSlotInfo",
    "SaveSlotMut",
    "Section",
    "SectionMut",
    "Sections",
    "TeamItemsSection",
    "TeamItemsSectionMut",
    "TimePlayed",
    "TrainerId",
    "TrainerSection",
    "ValidationMode",
    "calculate_checksum",
    "emulator_intro_length",
    "select_save_slots",
]
