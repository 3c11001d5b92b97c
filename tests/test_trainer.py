"""Tests for the Trainer section view."""

import struct

import pytest

from pokedit import Gender
from pokedit.exceptions import InvalidDataError, NotAvailableInVersionError
from pokedit.gen3 import GameVersion, TimePlayed, TrainerId, TrainerSection

from gen3_save_builder import EMERALD_KEY, FRLG_KEY, make_trainer_payload


class TestTrainerFields:
    def test_name_is_raw_bytes(self):
        name = bytes([0xBB, 0xBC, 0xBD, 0xFF, 0x00, 0x00, 0x00])
        trainer = TrainerSection(make_trainer_payload(name=name))
        assert trainer.name_raw == name

    def test_trainer_id(self):
        trainer = TrainerSection(make_trainer_payload(public_id=1, private_id=65535))
        assert trainer.trainer_id == TrainerId(public=1, private=65535)

    def test_time_played(self):
        trainer = TrainerSection(make_trainer_payload(time_played=(999, 59, 59, 59)))
        assert trainer.time_played == TimePlayed(hours=999, minutes=59, seconds=59, frames=59)
        assert str(trainer.time_played) == "999:59:59"

    def test_game_code(self):
        trainer = TrainerSection(make_trainer_payload(game_code=0xCAFEBABE))
        assert trainer.game_code == 0xCAFEBABE


class TestGender:
    def test_male(self):
        assert TrainerSection(make_trainer_payload(gender=0)).gender() is Gender.MALE

    def test_female(self):
        assert TrainerSection(make_trainer_payload(gender=1)).gender() is Gender.FEMALE

    @pytest.mark.parametrize("value", [2, 0x7F, 0xFF])
    def test_invalid(self, value):
        with pytest.raises(InvalidDataError) as excinfo:
            TrainerSection(make_trainer_payload(gender=value)).gender()
        assert excinfo.value.field == "gender"

    def test_display(self):
        assert str(Gender.FEMALE) == "Female"


class TestVersionAndSecurityKey:
    @pytest.mark.parametrize("game_code, version", [
        (0, GameVersion.RUBY_SAPPHIRE),
        (1, GameVersion.FIRE_RED_LEAF_GREEN),
        (2, GameVersion.EMERALD),
        (EMERALD_KEY, GameVersion.EMERALD),
    ])
    def test_version_from_game_code(self, game_code, version):
        assert TrainerSection(make_trainer_payload(game_code=game_code)).version is version

    def test_ruby_sapphire_has_no_key(self):
        trainer = TrainerSection(make_trainer_payload(game_code=0, frlg_key=FRLG_KEY))
        with pytest.raises(NotAvailableInVersionError) as excinfo:
            trainer.security_key()
        assert excinfo.value.field == "security key"

    def test_fire_red_reads_dedicated_field(self):
        trainer = TrainerSection(make_trainer_payload(game_code=1, frlg_key=FRLG_KEY))
        assert trainer.security_key() == FRLG_KEY

    def test_emerald_key_is_game_code(self):
        payload = make_trainer_payload(game_code=EMERALD_KEY)
        struct.pack_into("<I", payload, 0xAF8, 0x11111111)
        assert TrainerSection(payload).security_key() == EMERALD_KEY

    def test_version_display(self):
        assert str(GameVersion.FIRE_RED_LEAF_GREEN) == "FireRed/LeafGreen"
