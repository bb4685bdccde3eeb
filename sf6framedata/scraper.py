# SuperCombo wiki scraper: requests + BeautifulSoup (lxml)
#
# Each character's "<Name>/Data" page lists every move as a collapsible section:
#
#   <section class="section-collapsible">
#     <h5><span>5LP</span></h5>                  <- move identifier
#     <table class="wikitable">
#       <tr><th><a>icon</a> <a>hitbox image</a>
#               <div><p><span>5LP</span></p>      <- input
#                    <div>Standing Light Punch</div></div></th></tr>   <- name
#       <tr><td>300</td><td>...</td> ...</tr>    <- statistics, in MOVE_STAT_FIELDS order
#     </table>
#   </section>
#
# Usage:
#   frame_data = asyncio.run(load_all())
#   frame_data.find_move("ryu", "5LP")

import asyncio
import logging
import re
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from .characters import CHARACTERS, WIKI_BASE, CharacterId
from .errors import TransportError
from .framedata import MOVE_STAT_FIELDS, CharacterFrameData, FrameData, Move

log = logging.getLogger(__name__)

# ------------ Config -------------
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)
REQUEST_HEADERS = {"User-Agent": USER_AGENT, "Referer": WIKI_BASE}
REQUEST_TIMEOUT = (10, 30)   # (connect, read) seconds

MOVE_IDENTIFIER_SEL = "div > div > section.section-collapsible > h5 > span"
MOVE_BLOCK_SEL = "div > div > section.section-collapsible > h5 + table.wikitable"
INPUT_SEL = "tr > th > div > p > span"
NAME_SEL = "tr > th > div > div"
HITBOX_IMAGE_ELEMENT_SEL = "tr > th > a"
DATA_CELL_SEL = "tr > td"

HITBOX_IMAGE_URL_RE = re.compile(r"(/images/thumb\S+) 2x")
DEFAULT_IMAGE = f"{WIKI_BASE}/images/thumb/4/42/SF6_Logo.png/300px-SF6_Logo.png"

MAX_NESTING = 32    # safety cap for get_lowest_child


# ------------ Fetch -------------
def new_session() -> requests.Session:
    sess = requests.Session()
    sess.headers.update(REQUEST_HEADERS)
    return sess


def fetch_frame_data_page(character: CharacterId, session: Optional[requests.Session] = None) -> str:
    """
    GET the character's data page and return its HTML. Any requests failure
    (connection, DNS, timeout, non-2xx) is raised as TransportError. No retries.
    """
    if session is None:
        with new_session() as sess:
            return fetch_frame_data_page(character, sess)

    url = character.frame_data_url
    log.debug("GET %s", url)
    try:
        resp = session.get(url, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        resp.encoding = "utf-8"
        return resp.text
    except requests.RequestException as e:
        raise TransportError(character.id, url, str(e)) from e


def parse_document(page_html: str) -> BeautifulSoup:
    return BeautifulSoup(page_html, "lxml")


# ------------ Selection -------------
def _is_empty(el: Tag) -> bool:
    # CSS :empty; whitespace-only text still counts as content
    for child in el.children:
        if isinstance(child, Tag):
            return False
        if isinstance(child, NavigableString) and not isinstance(child, Comment):
            return False
    return True


def select_move_identifiers(soup: BeautifulSoup) -> List[Tag]:
    return [el for el in soup.select(MOVE_IDENTIFIER_SEL) if not _is_empty(el)]


def select_move_blocks(soup: BeautifulSoup) -> List[Tag]:
    return [el for el in soup.select(MOVE_BLOCK_SEL) if not _is_empty(el)]


def select_move_pairs(soup: BeautifulSoup) -> List[Tuple[Tag, Tag]]:
    """Pair identifiers with tables by position, after empty entries are dropped."""
    identifiers = select_move_identifiers(soup)
    blocks = select_move_blocks(soup)
    if len(identifiers) != len(blocks):
        log.debug("Move identifiers (%d) and tables (%d) differ; pairing the first %d",
                  len(identifiers), len(blocks), min(len(identifiers), len(blocks)))
    return list(zip(identifiers, blocks))


# ------------ Move parsing -------------
def get_lowest_child(parent: Tag) -> Tag:
    """Follow first-element-child links down to the innermost element."""
    node = parent
    for _ in range(MAX_NESTING):
        child = node.find(True, recursive=False)
        if child is None:
            break
        node = child
    return node


def hitbox_image_matcher(markup: str) -> Optional[str]:
    m = HITBOX_IMAGE_URL_RE.search(markup)
    if not m:
        return None
    return urljoin(WIKI_BASE, m.group(1))


def _image_link(block: Tag) -> str:
    # first <a> is usually the generic move icon, the second the hitbox diagram
    candidates = [hitbox_image_matcher(str(a)) for a in block.select(HITBOX_IMAGE_ELEMENT_SEL, limit=2)]
    image = candidates[0] if len(candidates) > 0 else None
    hitbox = candidates[1] if len(candidates) > 1 else None
    return hitbox or image or DEFAULT_IMAGE


def parse_move(identifier: Tag, block: Tag) -> Optional[Move]:
    """
    Build a Move from a section's <span> identifier and its data table.
    Returns None when the table has no input or no name cell.
    """
    input_el = block.select_one(INPUT_SEL)
    if input_el is None:
        return None
    name_el = block.select_one(NAME_SEL)
    if name_el is None:
        return None

    cells = [get_lowest_child(td).decode_contents() for td in block.select(DATA_CELL_SEL)]
    stats = dict(zip(MOVE_STAT_FIELDS, cells))

    return Move(
        identifier=identifier.decode_contents(),
        input=input_el.decode_contents(),
        name=name_el.decode_contents(),
        image_link=_image_link(block),
        **stats,
    )


def parse_moves(page_html: str) -> List[Move]:
    soup = parse_document(page_html)
    moves: List[Move] = []
    for identifier, block in select_move_pairs(soup):
        mv = parse_move(identifier, block)
        if mv is not None:
            moves.append(mv)
    return moves


# ------------ Loading -------------
def _fetch_and_parse(character: CharacterId, session: Optional[requests.Session]) -> List[Move]:
    return parse_moves(fetch_frame_data_page(character, session))


async def load(character: CharacterId, session: Optional[requests.Session] = None) -> CharacterFrameData:
    """Request, scrape and parse one character's data page."""
    loop = asyncio.get_running_loop()
    moves = await loop.run_in_executor(None, _fetch_and_parse, character, session)
    log.info("Loaded %d moves for %s", len(moves), character.display_name)
    return CharacterFrameData(character_id=character, moves=moves)


async def _load_or_skip(character: CharacterId, session: Optional[requests.Session]) -> Optional[CharacterFrameData]:
    try:
        return await load(character, session)
    except TransportError as e:
        log.warning("Skipping %s: %s", character.id, e)
    except Exception:
        log.exception("Skipping %s: unexpected error while loading", character.id)
    return None


async def load_all(roster: Optional[Iterable[CharacterId]] = None,
                   session: Optional[requests.Session] = None) -> FrameData:
    """
    Load every character concurrently. A character that fails is logged and
    left out; the rest still make it into the catalog. Callers should cache
    the result, each call scrapes the whole roster again.
    """
    characters = list(dict.fromkeys(CHARACTERS if roster is None else roster))
    log.info("Loading frame data for %d characters", len(characters))

    frame_data = FrameData()
    tasks = [asyncio.ensure_future(_load_or_skip(c, session)) for c in characters]
    for fut in asyncio.as_completed(tasks):
        cfd = await fut
        if cfd is not None:
            frame_data.character_frame_data.append(cfd)

    log.info("Frame data ready: %d/%d characters", len(frame_data.character_frame_data), len(characters))
    return frame_data
