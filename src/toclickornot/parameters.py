"""Game balance parameters for To Click Or Not.

This module is the SINGLE SOURCE OF TRUTH for all tunable game constants.

Parameter Categories:
- Rounds: How long a run lasts
- Stats: Bounds and starting values of the four stats
- Rush: How fast a player may click
- Effects: Shape of randomly generated stat changes
- Situations: How the catalog picks between pools

Usage:
    from toclickornot.parameters import MAX_ROUNDS, CLICKS_PER_ROUND
"""

# =============================================================================
# ROUND PARAMETERS
# =============================================================================

MAX_ROUNDS = 10
"""Rounds a player must survive to win.

Current: 10

Victory is declared when the round counter moves past this value, so a
winning run always reports exactly MAX_ROUNDS rounds survived.
"""

CLICKS_PER_ROUND = 5
"""Clicks that make up one round.

Current: 5

Every click draws a situation. The fifth click also completes the round,
which triggers a round event before the next round starts.
"""

# Names used by the request layer and the leaderboard
MAX_TURNS = MAX_ROUNDS
CLICKS_PER_TURN = CLICKS_PER_ROUND

# =============================================================================
# STAT PARAMETERS
# =============================================================================

STAT_MIN = 0
"""Lower bound for every stat. Reaching it ends the game."""

STAT_MAX = 100
"""Upper bound for every stat."""

STAT_INITIAL = 50
"""Starting value for every stat on a fresh or restarted session."""

STAT_NAMES: tuple[str, ...] = ("health", "sanity", "hope", "financial")
"""The four stats, in game-over priority order.

When several stats hit zero at once, the first one in this tuple names the
cause of death.
"""

# =============================================================================
# RUSH PARAMETERS
# =============================================================================

RUSH_THRESHOLD_MS = 400
"""Minimum gap between two consecutive clicks, in milliseconds.

Current: 400

A click arriving sooner than this after the previous counted click ends the
run as RUSHED. Only the gap to the single previous click matters; there is
no sliding window.

Tuning:
    - Lower it to make the game more forgiving for fast clickers
    - Overridable per deployment via TOCLICKORNOT_RUSH_THRESHOLD_MS
"""

# =============================================================================
# EFFECT GENERATION PARAMETERS
# =============================================================================

EFFECT_MIN_STATS = 1
"""Fewest stats a generated effect touches."""

EFFECT_MAX_STATS = 3
"""Most stats a generated effect touches (chosen without replacement)."""

EFFECT_POSITIVE_PROBABILITY = 0.6
"""Chance that a touched stat moves up rather than down."""

EFFECT_POSITIVE_RANGE = (2, 7)
"""Inclusive range of positive deltas."""

EFFECT_NEGATIVE_RANGE = (-10, -4)
"""Inclusive range of negative deltas.

Analysis:
    Expected delta per touched stat = 0.6 * 4.5 + 0.4 * (-7) = -0.1.
    Each stat is touched on half the draws on average, so drift is close to
    zero and deaths come from variance rather than steady decline.
"""

# =============================================================================
# SITUATION PARAMETERS
# =============================================================================

CORE_SITUATION_PROBABILITY = 0.25
"""Chance that a draw comes from the small core pool instead of templates."""

# =============================================================================
# LEADERBOARD PARAMETERS
# =============================================================================

LEADERBOARD_SIZE = 10
"""Default number of entries returned by the leaderboard."""
