# Topspin
# Copyright (C) 2025  Topspin developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Set and match scoring ---
POINTS_TO_WIN_SET = 11
MIN_SET_MARGIN = 2
SET_POINT_CEILING = 50  # Forced end of a set once a score exceeds this
SETS_TO_WIN_MATCH = 3
WALKOVER_SET_SCORE = (11, 0)

# --- Rank exchange table ---
# Ascending rating gap thresholds; band 0 is below the first one.
EXCHANGE_BAND_THRESHOLDS = (25, 50, 100, 150, 200, 300, 400, 500)
EXPECTED_WIN_GAIN = (6, 5.5, 5, 4, 3, 2, 1, 0.5, 0)
EXPECTED_WIN_LOSS = (-5, -4.5, -4, -3, -2, -1, -0.5, 0, 0)
UPSET_WIN_GAIN = (6, 7, 8, 10, 13, 17, 22, 28, 40)
UPSET_WIN_LOSS = (-5, -6, -7, -8, -10, -12.5, -16, -20, -29)

# --- Point outcome generator ---
RATING_WEIGHT = 0.4
ATTACK_WEIGHT = 1.5
DEFENSE_WEIGHT = 0.5
PERFORMANCE_NOISE = 500
STYLE_MATCHUP_BONUS = 30
LUCKY_THRESHOLD = 0.95
ACE_THRESHOLD = 0.90
UNFORCED_ERROR_THRESHOLD = 0.10

# Point types
POINT_ACE = "ACE"
POINT_WINNER = "WINNER"
POINT_UNFORCED_ERROR = "UNFORCED_ERROR"
POINT_LUCKY = "LUCKY"

# Sides of a match
SIDE_A = "A"
SIDE_B = "B"

# --- Meetings ---
FULL_ROSTER_SIZE = 4
REDUCED_ROSTER_SIZE = 2
# Each entry is (home slot, away slot); doubles legs are keyed by name.
FULL_MEETING_ORDER = (
    (0, 0),
    (1, 1),
    (2, 2),
    (3, 3),
    (0, 1),
    (1, 0),
    (3, 2),
    (2, 3),
    ("D1", "D1"),
    ("D2", "D2"),
    (0, 2),
    (2, 0),
    (3, 1),
    (1, 3),
)
REDUCED_MEETING_ORDER = (
    (0, 0),
    (1, 1),
    ("D1", "D1"),
    (0, 1),
    (1, 0),
)
# Roster slots that form every doubles pair
DOUBLES_SLOTS = (0, 1)
GHOST_NAME = "Forfeit"
DOUBLES_NAME = "Double"

# --- League ---
LEAGUE_FIELD_SIZE = 8
LEAGUE_OPPONENT_COUNT = LEAGUE_FIELD_SIZE - 1
LEAGUE_DAYS_PER_PHASE = LEAGUE_OPPONENT_COUNT
LEAGUE_WIN_POINTS = 3
LEAGUE_DRAW_POINTS = 2
LEAGUE_LOSS_POINTS = 1

# --- Ranked bracket ---
BRACKET_SIZE = 16
FINALS_BRACKET_SIZE = 32
BRACKET_FILLER_SPREAD = 200
BRACKET_PLACEMENT_NOISE = 300
BRACKET_REGISTERED_BONUS = 50
BRACKET_BASE_DELTA = 40
BRACKET_DELTA_PER_PLACE = 3

# --- Paired pool ---
POOL_ROUNDS = 3
POOL_LEGS_TO_WIN = 3
POOL_ROUND_WIN_POINTS = 3
POOL_ROUND_LOSS_POINTS = 1
POOL_OPPONENT_SPREAD = 100
POOL_MOVEMENT_PROMOTED = "Promoted"
POOL_MOVEMENT_MAINTAINED = "Maintained"
POOL_MOVEMENT_RELEGATED = "Relegated"
POOL_MOVEMENT_PODIUM = "Podium"
POOL_MOVEMENT_NOT_CLASSIFIED = "Not classified"

# --- Fallback ---
DEFAULT_RATING_CAP = 3000
FALLBACK_NOISE_WEIGHT = 0.5
FALLBACK_WIN_RATE = 0.6
FALLBACK_MIN_MATCHES = 3
FALLBACK_EXTRA_MATCHES = 3
FALLBACK_WIN_DELTA = 8
FALLBACK_LOSS_DELTA = 6
# (minimum composite score, label, bonus), checked top down
FALLBACK_STAGES = (
    (1.3, "Winner", 30),
    (1.1, "Finalist", 20),
    (0.9, "Semifinal", 10),
    (0.7, "Quarterfinal", 5),
)
FALLBACK_POOL_LABEL = "Pool stage"

# --- Internal tournament ---
INTERNAL_ROUNDS = 5
INTERNAL_WIN_POINTS = 3
INTERNAL_LOSS_POINTS = 1
INTERNAL_BYE_POINTS = 1

# --- Random competitors ---
DEFAULT_TARGET_RATING = 800
MIN_GENERATED_RATING = 500
MIN_ATTRIBUTE = 10
MAX_ATTRIBUTE = 99
MAX_BASE_ATTRIBUTE = 95
MIN_GENERATED_AGE = 6
GENERATED_AGE_SPAN = 45

FIRST_NAMES_MEN = [
    "Lucas",
    "Thomas",
    "Hugo",
    "Enzo",
    "Leo",
    "Louis",
    "Arthur",
    "Mathis",
    "Nathan",
    "Gabriel",
]
FIRST_NAMES_WOMEN = [
    "Emma",
    "Lea",
    "Chloe",
    "Manon",
    "Ines",
    "Camille",
    "Sarah",
    "Clara",
    "Louise",
    "Zoe",
]
LAST_NAMES = [
    "Martin",
    "Bernard",
    "Petit",
    "Robert",
    "Richard",
    "Durand",
    "Dubois",
    "Moreau",
    "Laurent",
    "Simon",
]
