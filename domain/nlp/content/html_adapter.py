from typing import Optional

from bs4 import BeautifulSoup
from bs4.dammit import EncodingDetector

from domain.nlp.content.content_adapter import ContentAdapter, RawContent


class HTMLAdapter(ContentAdapter):
    # Elements whose text never shows on the page
    _INVISIBLE_TAGS = ["script", "style"]

    def _pick_encoding(self, raw: bytes, encoding: Optional[str]) -> Optional[str]:
        """
        Header charset, then <meta charset>, then UTF-8 if the bytes decode.
        None leaves the guess to BeautifulSoup.
        """
        if encoding:
            return encoding
        declared = EncodingDetector.find_declared_encoding(raw, is_html=True)
        if declared:
            return declared
        try:
            raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
        return "utf-8"

    def _parse(self, raw: RawContent, encoding: Optional[str]) -> BeautifulSoup:
        if isinstance(raw, str):
            return BeautifulSoup(raw, "html.parser")
        return BeautifulSoup(
            raw, "html.parser", from_encoding=self._pick_encoding(raw, encoding)
        )

    def extract_text(self, raw: RawContent, encoding: Optional[str] = None) -> str:
        soup = self._parse(raw, encoding)
        for tag in soup(self._INVISIBLE_TAGS):
            tag.decompose()

        if soup.body is not None:
            return soup.body.get_text().strip()

        # <body> is optional in HTML5 and html.parser does not add one
        for head in soup("head"):
            head.decompose()
        return soup.get_text().strip()


if __name__ == "__main__":
    adapter = HTMLAdapter()
    html = "<html><body><p>今日は天気が良い。</p><script>var x = 1;</script></body></html>"
    print(adapter.extract_text(html))
