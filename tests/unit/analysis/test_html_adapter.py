from domain.nlp.adapter_factory import AdapterFactory
from domain.nlp.content.html_adapter import HTMLAdapter


def test_strips_script_and_style():
    html = """
    <html>
      <head><title>ニュース</title><style>p { color: red; }</style></head>
      <body>
        <script>var 変数 = "隠れた文字";</script>
        <p>今日の天気</p>
        <style>.x {}</style>
        <div>晴れ</div>
      </body>
    </html>
    """

    text = HTMLAdapter().extract_text(html)

    assert "今日の天気" in text
    assert "晴れ" in text
    assert "隠れた文字" not in text
    assert "color" not in text
    # head text is not body text
    assert "ニュース" not in text


def test_result_is_trimmed():
    text = HTMLAdapter().extract_text("<body>\n\n   日本語  \n</body>")

    assert text == "日本語"


def test_decodes_declared_charset():
    html = (
        '<html><head><meta charset="shift_jis"></head>'
        "<body><p>日本語の新聞</p></body></html>"
    ).encode("shift_jis")

    text = HTMLAdapter().extract_text(html)

    assert text == "日本語の新聞"


def test_header_charset_without_meta():
    raw = "<html><body><p>東京の天気</p></body></html>".encode("shift_jis")

    text = HTMLAdapter().extract_text(raw, "shift_jis")

    assert text == "東京の天気"


def test_undeclared_utf8_bytes():
    raw = "<p>大阪の新聞</p>".encode("utf-8")

    text = HTMLAdapter().extract_text(raw)

    assert text == "大阪の新聞"


def test_head_text_dropped_without_body():
    html = "<html><head><title>見出し語</title></head><p>本文です</p></html>"

    text = HTMLAdapter().extract_text(html)

    assert text == "本文です"


def test_document_without_body():
    text = HTMLAdapter().extract_text("天気予報")

    assert text == "天気予報"


def test_empty_body():
    assert HTMLAdapter().extract_text("<html><body><script>x()</script></body></html>") == ""


def test_factory_creates_html_adapter():
    assert isinstance(AdapterFactory.create_content_adapter("html"), HTMLAdapter)
