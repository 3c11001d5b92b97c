"""Tests for the Team/Items section view."""

import random
import struct

import pytest

from pokedit.exceptions import BorrowError
from pokedit.gen3 import GameVersion, TeamItemsSection, TeamItemsSectionMut

from gen3_save_builder import SECTION_SIZE, make_team_items_payload


class TestMoney:
    def test_emerald_offset_and_key(self):
        payload = make_team_items_payload(money=3000, key=0xA1B2C3D4, money_offset=0x0490)
        team_items = TeamItemsSection(payload, version=GameVersion.EMERALD, security_key=0xA1B2C3D4)
        assert team_items.money() == 3000

    def test_fire_red_offset(self):
        payload = make_team_items_payload(money=777, key=0x1234, money_offset=0x0290)
        team_items = TeamItemsSection(
            payload, version=GameVersion.FIRE_RED_LEAF_GREEN, security_key=0x1234
        )
        assert team_items.money() == 777

    def test_ruby_sapphire_is_plain(self):
        payload = make_team_items_payload(money=500)
        assert TeamItemsSection(payload).money() == 500

    def test_wrong_key_gives_wrong_money(self):
        payload = make_team_items_payload(money=3000, key=0xA1B2C3D4)
        team_items = TeamItemsSection(payload, version=GameVersion.EMERALD, security_key=0x1)
        assert team_items.money() != 3000

    def test_stored_value_is_obfuscated(self):
        data = bytearray(SECTION_SIZE)
        with TeamItemsSectionMut(data, version=GameVersion.EMERALD, security_key=0xFF00FF00) as team_items:
            team_items.set_money(0x00001234)
        assert struct.unpack_from("<I", data, 0x0490)[0] == 0xFF00FF00 ^ 0x00001234


class TestSetMoney:
    @pytest.mark.parametrize("version, key, value", [
        (GameVersion.RUBY_SAPPHIRE, 0, 999999),
        (GameVersion.FIRE_RED_LEAF_GREEN, 0x0BADF00D, 0),
        (GameVersion.EMERALD, 0xA1B2C3D4, 0x80000000),
        (GameVersion.EMERALD, 0xFFFFFFFF, 0xFFFFFFFF),
    ])
    def test_round_trip(self, version, key, value):
        data = bytearray(SECTION_SIZE)
        with TeamItemsSectionMut(data, version=version, security_key=key) as team_items:
            team_items.set_money(value)
            assert team_items.money() == value
        assert TeamItemsSection(data, version=version, security_key=key).money() == value

    @pytest.mark.parametrize("version", list(GameVersion))
    def test_random_values_and_keys(self, version):
        rng = random.Random(0x5EED + version)
        data = bytearray(SECTION_SIZE)
        for _ in range(500):
            key = rng.getrandbits(32)
            value = rng.getrandbits(32)
            with TeamItemsSectionMut(data, version=version, security_key=key) as team_items:
                team_items.set_money(value)
            assert TeamItemsSection(data, version=version, security_key=key).money() == value

    def test_set_money_outside_with_block(self):
        team_items = TeamItemsSectionMut(bytearray(SECTION_SIZE))
        with pytest.raises(BorrowError):
            team_items.set_money(1)
