import time

import pytest
import requests

HITBOX_PATH = "/images/thumb/9/9e/SF6_Ryu_5LP.png/350px-SF6_Ryu_5LP.png"
ICON_PATH = "/images/thumb/1/10/SF6_Ryu_Icon.png/100px-SF6_Ryu_Icon.png"


def image_anchor(path_2x: str) -> str:
    small = path_2x.replace("350px", "175px").replace("100px", "50px")
    mid = path_2x.replace("350px", "263px").replace("100px", "75px")
    return (
        f'<a href="/File:x.png" class="image">'
        f'<img alt="" src="{small}" srcset="{mid} 1.5x, {path_2x} 2x" width="175" height="175"/></a>'
    )


def plain_anchor() -> str:
    return '<a href="/File:icon.png" class="image"><img alt="" src="/images/4/4a/icon.png"/></a>'


def move_section(identifier="5LP", input_="5LP", name="Standing Light Punch",
                 cells=(), anchors=(), head='<span id="anchor"></span>') -> str:
    input_html = f"<p><span>{input_}</span></p>" if input_ is not None else ""
    name_html = f"<div>{name}</div>" if name is not None else ""
    tds = "".join(f"<td>{c}</td>" for c in cells)
    data_row = f"<tr>{tds}</tr>" if cells else ""
    return (
        '<section class="section-collapsible">'
        f"<h5>{head}<span>{identifier}</span></h5>"
        '<table class="wikitable">'
        f"<tr><th>{''.join(anchors)}<div>{input_html}{name_html}</div></th></tr>"
        f"{data_row}"
        "</table>"
        "</section>"
    )


def page(*sections: str) -> str:
    return f"<html><body><div><div>{''.join(sections)}</div></div></body></html>"


class FakeResponse:
    def __init__(self, url: str, status_code: int = 200, text: str = ""):
        self.url = url
        self.status_code = status_code
        self.text = text
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error for url: {self.url}")


class FakeSession:
    """Serves canned pages by URL; anything else is a 404."""

    def __init__(self, pages=None, error=None, delays=None):
        self.pages = dict(pages or {})
        self.error = error
        self.delays = dict(delays or {})
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if url in self.delays:
            time.sleep(self.delays[url])
        if self.error is not None:
            raise self.error
        if url not in self.pages:
            return FakeResponse(url, 404)
        return FakeResponse(url, 200, self.pages[url])


@pytest.fixture
def ryu_page():
    return page(
        move_section("5LP", "5LP", "Standing Light Punch",
                     cells=["300", "-", "<span><b>20% Starter</b></span>", "LH", "Chn"],
                     anchors=[plain_anchor(), image_anchor(HITBOX_PATH)]),
        move_section("214P(charged)", "214P", "Denjin Hashogeki", cells=["1000"]),
        move_section("5MP", None, "Standing Medium Punch", cells=["600"]),
    )
