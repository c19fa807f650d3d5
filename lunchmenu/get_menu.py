import logging
import os
import re
import tempfile
import time
from contextlib import suppress
from typing import List, NamedTuple, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from . import config
from .errors import FetchError, MenuNotFoundError


logger = logging.getLogger(__name__)

URL_WEEK_RE = re.compile(r"(uge|week|w)[_\-\s]?(\d+)", re.IGNORECASE)
HEADING_WEEK_RE = re.compile(r"uge\s+(\d+)|week\s+(\d+)", re.IGNORECASE)


class LinkCandidate(NamedTuple):
    href: str
    week_number: Optional[int]


def _body_markup(soup, html):
    # Search the parser's own serialization so anchors are found however the
    # source quoted its attributes.
    body = soup.body
    if body is None:
        return soup.decode() or html
    return body.decode_contents() or html


def _is_pdf_link(href):
    return href.lower().endswith(".pdf")


def _week_from_url(href):
    match = URL_WEEK_RE.search(href)
    if match:
        return int(match.group(2))
    return None


def _week_before(markup, position):
    # Several headings can precede a link; the closest one is its week.
    matches = list(HEADING_WEEK_RE.finditer(markup, 0, position))
    if not matches:
        return None
    last = matches[-1]
    return int(last.group(1) or last.group(2))


def collect_candidates(html: str, day_name: str) -> List[LinkCandidate]:
    """Return every PDF link for ``day_name`` together with the week it belongs to.

    The week comes from the link's own URL when it carries one (``uge3``,
    ``week_12``, ``w-7``), otherwise from the last "Uge N" / "Week N" text that
    appears before the link in the page markup. Links whose markup cannot be
    located get an unknown week rather than an error.
    """
    soup = BeautifulSoup(html, "html.parser")
    markup = _body_markup(soup, html)
    day = day_name.lower()

    candidates = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        if not _is_pdf_link(href):
            continue

        text = anchor.get_text().lower()
        if day not in text and day not in href.lower():
            continue

        week_number = _week_from_url(href)
        if week_number is None:
            position = markup.find(str(anchor))
            if position != -1:
                week_number = _week_before(markup, position)

        logger.debug("Candidate %s -> week %s", href, week_number)
        candidates.append(LinkCandidate(href, week_number))

    return candidates


def select_candidate(candidates: List[LinkCandidate], week_number: int) -> Optional[str]:
    for candidate in candidates:
        if candidate.week_number == week_number:
            return candidate.href

    # A page with a single undated PDF is assumed to be the current menu.
    if len(candidates) == 1 and candidates[0].week_number is None:
        logger.debug("No week context found, falling back to the only candidate")
        return candidates[0].href

    return None


def find_menu_pdf_url(html: str, week_number: int, day_name: str) -> Optional[str]:
    return select_candidate(collect_candidates(html, day_name), week_number)


class MenuScraper:
    def __init__(self, url=None, timeout=None):
        self.url = url or config.MENU_URL
        self.timeout = timeout if timeout is not None else config.request_timeout()

    def get_html(self):
        response = requests.get(self.url, timeout=self.timeout)
        if response.status_code != 200:
            raise FetchError(
                f"Failed to fetch {self.url}: {response.status_code}",
                url=self.url,
                status_code=response.status_code,
            )
        return response.text

    def find_pdf_url(self, target, html=None):
        if html is None:
            html = self.get_html()

        day_name = target.weekday.danish
        href = find_menu_pdf_url(html, target.week_number, day_name)
        if not href:
            raise MenuNotFoundError(f"Could not find PDF for {day_name} in week {target.week_number}")
        return urljoin(self.url, href)

    @staticmethod
    def temp_pdf_path():
        return os.path.join(tempfile.gettempdir(), f"{config.TEMP_FILE_PREFIX}{time.time_ns()}.pdf")

    def download_pdf(self, pdf_url, path=None):
        path = path or self.temp_pdf_path()
        try:
            with open(path, "wb") as f:
                with requests.get(pdf_url, stream=True, timeout=self.timeout) as response:
                    if response.status_code != 200:
                        raise FetchError(
                            f"Failed to download {pdf_url}: {response.status_code}",
                            url=pdf_url,
                            status_code=response.status_code,
                        )
                    for chunk in response.iter_content(chunk_size=8192):
                        if chunk:
                            f.write(chunk)
        except BaseException:
            with suppress(OSError):
                os.remove(path)
            raise
        return path
