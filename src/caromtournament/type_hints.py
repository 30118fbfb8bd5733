"""Type hints used in Carom Tournament."""

from typing import Dict, Literal, Optional, Tuple

# Bracket slot parity literals
Position = Literal["top", "bottom"]

# Identifiers
TeamId = str
MatchId = str

# Raw score as typed by the user: "" or a run of digits
ScoreText = str
# Parsed score, None while unplayed
Score = Optional[int]

# (completed, total) group matches
Progress = Tuple[int, int]
# Location of a knockout match: (round_index, slot)
BracketSlot = Tuple[int, int]
# Serialized payloads
SnapshotDict = Dict[str, object]

#  LocalWords:  BracketSlot ScoreText
