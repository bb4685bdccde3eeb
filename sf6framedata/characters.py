# Street Fighter 6 roster
# Every character this library scrapes, with the wiki page segment and the
# free-text pattern used to resolve user input ("chunli", "Chun-Li", "kim", ...).

import re
from dataclasses import dataclass, field
from typing import List, Optional

# ------------ Config -------------
WIKI_BASE = "https://wiki.supercombo.gg"
FRAME_DATA_ROOT = f"{WIKI_BASE}/w/Street_Fighter_6"
GIF_DATA_ROOT = "https://ultimateframedata.com/sf6"


@dataclass(frozen=True)
class CharacterId:
    """A supported character. Unique by `id`; the other fields don't take part in equality."""
    id: str
    display_name: str = field(compare=False)
    frame_data_id: str = field(compare=False)
    gif_data_id: str = field(compare=False)
    pattern: str = field(compare=False, repr=False)
    regex: "re.Pattern" = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", re.compile(self.pattern, re.IGNORECASE))

    @property
    def frame_data_url(self) -> str:
        return f"{FRAME_DATA_ROOT}/{self.frame_data_id}/Data"

    @property
    def gif_data_url(self) -> str:
        return f"{GIF_DATA_ROOT}/{self.gif_data_id}"

    def matches(self, text: str) -> bool:
        return self.regex.fullmatch(text or "") is not None


RYU = CharacterId("ryu", "Ryu", "Ryu", "ryu", r"ryu")
LUKE = CharacterId("luke", "Luke", "Luke", "luke", r"luke")
JAMIE = CharacterId("jamie", "Jamie", "Jamie", "jamie", r"jamie")
CHUNLI = CharacterId("chunli", "Chun-Li", "Chun-Li", "chunli", r"chun(-?li)?")
GUILE = CharacterId("guile", "Guile", "Guile", "guile", r"guile")
KIMBERLY = CharacterId("kimberly", "Kimberly", "Kimberly", "kimberly", r"kim(berly)?")
JURI = CharacterId("juri", "Juri", "Juri", "juri", r"juri")
KEN = CharacterId("ken", "Ken", "Ken", "ken", r"ken")
BLANKA = CharacterId("blanka", "Blanka", "Blanka", "blanka", r"blanka")
DHALSIM = CharacterId("dhalsim", "Dhalsim", "Dhalsim", "dhalsim", r"(dh?al)?sim")
EHONDA = CharacterId("ehonda", "E. Honda", "E.Honda", "ehonda", r"e?honda")
DEEJAY = CharacterId("deejay", "Dee Jay", "Dee_Jay", "deejay", r"d(ee)?j(ay)?")
MANON = CharacterId("manon", "Manon", "Manon", "manon", r"manon")
MARISA = CharacterId("marisa", "Marisa", "Marisa", "marisa", r"marisa")
JP = CharacterId("jp", "JP", "JP", "jp", r"jp")
ZANGIEF = CharacterId("zangief", "Zangief", "Zangief", "zangief", r"(zan)?gief")
LILY = CharacterId("lily", "Lily", "Lily", "lily", r"lily")
CAMMY = CharacterId("cammy", "Cammy", "Cammy", "cammy", r"cammy")
RASHID = CharacterId("rashid", "Rashid", "Rashid", "rashid", r"rashid")
AKI = CharacterId("aki", "A.K.I.", "A.K.I.", "aki", r"a\.?k\.?i\.?")
ED = CharacterId("ed", "Ed", "Ed", "ed", r"ed")
AKUMA = CharacterId("akuma", "Akuma", "Akuma", "akuma", r"akuma|gouki")
MBISON = CharacterId("mbison", "M. Bison", "M.Bison", "mbison", r"bison")

# Lookup order matters for lookup_by_pattern: first match wins.
CHARACTERS: List[CharacterId] = [
    RYU, LUKE, JAMIE, CHUNLI, GUILE, KIMBERLY, JURI, KEN, BLANKA, DHALSIM, EHONDA,
    DEEJAY, MANON, MARISA, JP, ZANGIEF, LILY, CAMMY, RASHID, AKI, ED, AKUMA, MBISON,
]


def lookup_by_id(key: str) -> Optional[CharacterId]:
    """Exact, case-sensitive match against the machine key."""
    return next((c for c in CHARACTERS if c.id == key), None)


def lookup_by_pattern(text: str) -> Optional[CharacterId]:
    """First roster entry whose pattern matches the whole of `text`, ignoring case."""
    return next((c for c in CHARACTERS if c.matches(text)), None)
