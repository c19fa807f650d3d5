import pytest

from lunchmenu.errors import PdfParseError
from lunchmenu.pdf_menu import clean_menu_text, extract_page_text, remove_allergy_info, remove_page_numbers


def test_remove_page_numbers():
    assert remove_page_numbers("Soup\n-- 2 of 2 --\nSalad") == "Soup\n\nSalad"


def test_remove_page_numbers_trims_surrounding_whitespace():
    assert remove_page_numbers("\n  -- 1 of 2 --\nFish of the day\n--2 of 2--  \n") == "Fish of the day"


def test_remove_allergy_info():
    assert remove_allergy_info("Chicken (3,7,12,T) with rice") == "Chicken with rice"


def test_remove_allergy_info_keeps_other_parentheses():
    text = "Soup (vegan) and bread (1, K)"
    assert remove_allergy_info(text) == "Soup (vegan) and bread"


def test_remove_allergy_info_also_strips_plain_numbers():
    assert remove_allergy_info("Serves (17) people") == "Serves people"


def test_clean_menu_text_keeps_allergies_by_default():
    text = "-- 1 of 1 --\nChicken (3,7,12,T) with rice"
    assert clean_menu_text(text) == "Chicken (3,7,12,T) with rice"
    assert clean_menu_text(text, no_allergies=True) == "Chicken with rice"


def test_extracts_english_page(make_pdf):
    path = make_pdf([
        ["Kylling med ris (3,7,12,T)"],
        ["Chicken with rice (3,7,12,T)", "Green salad"],
    ])
    text = extract_page_text(str(path))
    assert "Chicken with rice" in text
    assert "Green salad" in text
    assert "Kylling" not in text


def test_extracts_requested_page(make_pdf):
    path = make_pdf([["First page"], ["Second page"]])
    assert "First page" in extract_page_text(str(path), 1)


def test_missing_page_raises(make_pdf):
    path = make_pdf([["Only page"]])
    with pytest.raises(PdfParseError, match="page 2 does not exist"):
        extract_page_text(str(path))


def test_invalid_pdf_raises(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"<html>not a pdf</html>")
    with pytest.raises(PdfParseError):
        extract_page_text(str(path))


@pytest.mark.parametrize("cut", [20, 200, -30])
def test_truncated_pdf_raises(make_pdf, tmp_path, cut):
    data = make_pdf([["Page one"], ["Page two"]]).read_bytes()
    path = tmp_path / "truncated.pdf"
    path.write_bytes(data[:cut])
    with pytest.raises(PdfParseError, match="Could not parse PDF"):
        extract_page_text(str(path))
