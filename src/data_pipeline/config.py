# Positional columns in the character CSV (other columns are unused)
NAME_COLUMN = 0
WEAPON_TYPE_COLUMN = 1
RELOAD_TIME_COLUMN = 7
AMMO_COLUMN = 8
RATE_OF_FIRE_COLUMN = 9
BURST_VALUE_COLUMN = 11

# Headers starting with this prefix hold the per-frame burst curve
FRAME_COLUMN_PREFIX = "F"
