"""
Gen 3 save file layout.

Offsets for Pokemon Ruby/Sapphire/Emerald/FireRed/LeafGreen save images
(128 KiB flash dumps). Offsets inside a section are relative to the start
of that section's 4096-byte window.

Primary source:
- https://bulbapedia.bulbagarden.net/wiki/Save_data_structure_(Generation_III)
"""

# =============================================================================
# Save image
# =============================================================================
# | Offset  | Size  | Contents                     |
# |---------|-------|------------------------------|
# | 0x00000 | 57344 | Save slot A                  |
# | 0x0E000 | 57344 | Save slot B                  |
# | 0x1C000 | 8192  | Hall of Fame                 |
# | 0x1E000 | 4096  | Mystery Gift / e-Reader      |
# | 0x1F000 | 4096  | Recorded Battle              |
SAVE_FILE_MIN_SIZE = 128 * 1024

SAVE_SLOT_A_OFFSET = 0x0000
SAVE_SLOT_B_OFFSET = 0xE000
HALL_OF_FAME_OFFSET = 0x1C000
HALL_OF_FAME_SIZE = 0x2000
MYSTERY_GIFT_OFFSET = 0x1E000
MYSTERY_GIFT_SIZE = 0x1000
RECORDED_BATTLE_OFFSET = 0x1F000
RECORDED_BATTLE_SIZE = 0x1000

# =============================================================================
# Save slot
# =============================================================================
SECTION_COUNT = 14
SECTION_SIZE = 0x1000
SAVE_SLOT_SIZE = SECTION_COUNT * SECTION_SIZE  # 57344

# =============================================================================
# Section trailer (last 12 bytes of every section)
# =============================================================================
SECTION_ID_OFFSET = 0x0FF4  # u16
SECTION_CHECKSUM_OFFSET = 0x0FF6  # u16
SECTION_SIGNATURE_OFFSET = 0x0FF8  # u32
SECTION_SAVE_INDEX_OFFSET = 0x0FFC  # u32

SECTION_SIGNATURE = 0x08012025

# Bytes of payload covered by the checksum, per section id
SECTION_PAYLOAD_SIZES = {
    0: 3884,  # Trainer info
    1: 3968,  # Team/Items
    2: 3968,  # Game state
    3: 3968,  # Misc data
    4: 3848,  # Rival info
    5: 3968,  # PC buffer A
    6: 3968,  # PC buffer B
    7: 3968,  # PC buffer C
    8: 3968,  # PC buffer D
    9: 3968,  # PC buffer E
    10: 3968,  # PC buffer F
    11: 3968,  # PC buffer G
    12: 3968,  # PC buffer H
    13: 2000,  # PC buffer I
}

TRAINER_SECTION_ID = 0
TEAM_ITEMS_SECTION_ID = 1

# =============================================================================
# Trainer section (id 0)
# =============================================================================
TRAINER_NAME_OFFSET = 0x0000
TRAINER_NAME_LENGTH = 7
TRAINER_GENDER_OFFSET = 0x0008
TRAINER_PUBLIC_ID_OFFSET = 0x000A  # u16
TRAINER_PRIVATE_ID_OFFSET = 0x000C  # u16
TIME_PLAYED_HOURS_OFFSET = 0x000E  # u16
TIME_PLAYED_MINUTES_OFFSET = 0x0010
TIME_PLAYED_SECONDS_OFFSET = 0x0011
TIME_PLAYED_FRAMES_OFFSET = 0x0012

# 0 on Ruby/Sapphire, 1 on FireRed/LeafGreen, the security key on Emerald
TRAINER_GAME_CODE_OFFSET = 0x00AC  # u32
FRLG_SECURITY_KEY_OFFSET = 0x0AF8  # u32

# =============================================================================
# Team/Items section (id 1)
# =============================================================================
# Money is XORed with the security key (key is 0 on Ruby/Sapphire)
MONEY_OFFSET_RSE = 0x0490  # u32
MONEY_OFFSET_FRLG = 0x0290  # u32
