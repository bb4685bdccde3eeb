# Frame data models and the in-memory catalog queried by callers.

from dataclasses import asdict, dataclass, field, fields
from typing import Dict, List, Tuple

from .characters import CharacterId, lookup_by_pattern
from .errors import UnknownCharacter, UnknownMove

PLACEHOLDER = "-"


@dataclass(frozen=True)
class Move:
    """
    One move scraped from a character's data page.

    `identifier` tells apart moves sharing an input, e.g. Ryu's Hashogeki and
    Denjin Hashogeki are both `214P` but identified as `214P` and `214P(charged)`.
    `input` is the raw notation and may repeat across moves.

    Every statistic is the wiki's display string; a missing one is PLACEHOLDER.
    """
    identifier: str
    input: str
    name: str
    image_link: str
    damage: str = PLACEHOLDER
    chip_damage: str = PLACEHOLDER
    damage_scaling: str = PLACEHOLDER
    guard: str = PLACEHOLDER
    cancel: str = PLACEHOLDER
    hitconfirm_window: str = PLACEHOLDER
    startup: str = PLACEHOLDER
    active: str = PLACEHOLDER
    recovery: str = PLACEHOLDER
    total: str = PLACEHOLDER
    hitstun: str = PLACEHOLDER
    blockstun: str = PLACEHOLDER
    drive_damage_block: str = PLACEHOLDER
    drive_damage_hit: str = PLACEHOLDER
    drive_gain: str = PLACEHOLDER
    super_gain_hit: str = PLACEHOLDER
    super_gain_block: str = PLACEHOLDER
    projectile_speed: str = PLACEHOLDER
    invuln: str = PLACEHOLDER
    armor: str = PLACEHOLDER
    airborne: str = PLACEHOLDER
    juggle_start: str = PLACEHOLDER
    juggle_increase: str = PLACEHOLDER
    juggle_limit: str = PLACEHOLDER
    perfect_parry_advantage: str = PLACEHOLDER
    after_dr_hit: str = PLACEHOLDER
    after_dr_block: str = PLACEHOLDER
    dr_cancel_hit: str = PLACEHOLDER
    dr_cancel_block: str = PLACEHOLDER
    punish_advantage: str = PLACEHOLDER
    hit_advantage: str = PLACEHOLDER
    block_advantage: str = PLACEHOLDER
    notes: str = PLACEHOLDER

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# Column order of the wiki's data table: the Nth <td> is bound to the Nth name here.
MOVE_STAT_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(Move))[4:]


@dataclass
class CharacterFrameData:
    character_id: CharacterId
    moves: List[Move] = field(default_factory=list)

    def find_move(self, move_query: str) -> Move:
        wanted = (move_query or "").casefold()
        for mv in self.moves:
            if mv.identifier.casefold() == wanted:
                return mv
        raise UnknownMove(self.character_id.id, move_query)


@dataclass
class FrameData:
    character_frame_data: List[CharacterFrameData] = field(default_factory=list)

    @property
    def characters(self) -> List[CharacterId]:
        return [c.character_id for c in self.character_frame_data]

    def find_character_frame_data(self, character_id: CharacterId) -> CharacterFrameData:
        for cfd in self.character_frame_data:
            if cfd.character_id == character_id:
                return cfd
        raise UnknownCharacter(character_id.id)

    def find_move(self, character_query: str, move_query: str) -> Move:
        """
        Resolve `character_query` by each character's pattern, then match the
        move by identifier (case-insensitive, exact).
        """
        character = lookup_by_pattern(character_query)
        if character is None:
            raise UnknownCharacter(character_query)
        return self.find_move_character(character, move_query)

    def find_move_character(self, character_id: CharacterId, move_query: str) -> Move:
        # a roster character can still be missing here if its page failed to load
        return self.find_character_frame_data(character_id).find_move(move_query)
