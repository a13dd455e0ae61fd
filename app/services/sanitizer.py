import re

from bs4 import BeautifulSoup

# <script ...> ... </script>, shortest match, any case, spanning lines
_SCRIPT_RE = re.compile(r"<script\b.*?</script\s*>", re.IGNORECASE | re.DOTALL)

# <!-- ... --> including multi-line comments
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def parse_content(html: str) -> str:
    """Strip ``<script>`` blocks and HTML comments from WordPress *html*.

    Removal is repeated until the markup stops changing, so fragments that
    only form a script tag once an inner block is cut out are removed too.
    Nothing else is touched: attributes such as ``onclick`` pass through, so
    the output is only as safe as the backend that produced it.
    """
    if not html:
        return ""

    while True:
        cleaned = _COMMENT_RE.sub("", _SCRIPT_RE.sub("", html))
        if cleaned == html:
            return cleaned
        html = cleaned


def plain_text(html: str) -> str:
    """Return the visible text of *html* with whitespace collapsed."""
    if not html:
        return ""
    text = BeautifulSoup(parse_content(html), "lxml").get_text(separator=" ", strip=True)
    return " ".join(text.split())
