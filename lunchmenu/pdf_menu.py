import re

import pdfplumber
from pdfplumber.utils.exceptions import PdfminerException

from . import config
from .errors import PdfParseError


PAGE_NUMBER_RE = re.compile(r"--\s*\d+\s+of\s+\d+\s*--")
# Allergen codes look like (3,7,12,T), (1,12) or (K).
ALLERGY_RE = re.compile(r"\s*\([0-9,TKMN\s]+\)")


def extract_page_text(pdf_path, page_number=config.ENGLISH_MENU_PAGE):
    """Return the text of a single 1-based page of the PDF at ``pdf_path``."""
    try:
        with pdfplumber.open(pdf_path) as pdf:
            if not 1 <= page_number <= len(pdf.pages):
                raise PdfParseError(
                    f"PDF {pdf_path} has {len(pdf.pages)} page(s), page {page_number} does not exist"
                )
            return pdf.pages[page_number - 1].extract_text() or ""
    except PdfminerException as exc:
        raise PdfParseError(f"Could not parse PDF {pdf_path}: {exc}") from exc


def remove_page_numbers(text):
    return PAGE_NUMBER_RE.sub("", text).strip()


def remove_allergy_info(text):
    return ALLERGY_RE.sub("", text)


def clean_menu_text(text, no_allergies=False):
    text = remove_page_numbers(text)
    if no_allergies:
        text = remove_allergy_info(text)
    return text
