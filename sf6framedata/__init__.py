from .characters import CHARACTERS, CharacterId, lookup_by_id, lookup_by_pattern
from .errors import FrameDataError, TransportError, UnknownCharacter, UnknownMove
from .framedata import MOVE_STAT_FIELDS, PLACEHOLDER, CharacterFrameData, FrameData, Move
from .scraper import load, load_all, parse_moves

__all__ = [
    "CHARACTERS",
    "CharacterId",
    "lookup_by_id",
    "lookup_by_pattern",
    "FrameDataError",
    "TransportError",
    "UnknownCharacter",
    "UnknownMove",
    "MOVE_STAT_FIELDS",
    "PLACEHOLDER",
    "CharacterFrameData",
    "FrameData",
    "Move",
    "load",
    "load_all",
    "parse_moves",
]
