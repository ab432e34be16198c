# ydict/query.py

import html
from ftfy import fix_text


def clean_query(text: str) -> str:
    """
    Normalize a user-typed lookup string before it reaches the dictionary.
    - unescape HTML entities (queries may come from the web front end)
    - repair mojibake, e.g. "Å¼aba" -> "żaba" (ftfy)
    - strip surrounding whitespace
    Returns "" for None / blank input.
    """
    if not text:
        return ""
    return fix_text(html.unescape(text)).strip()
