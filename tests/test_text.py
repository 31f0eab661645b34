from essay_feed.text import KNOWN_BROKEN_URLS, escape_xml, normalize_url


def test_escape_all_metacharacters():
    assert escape_xml("A & B <C> 'D' \"E\"") == "A &amp; B &lt;C&gt; &apos;D&apos; &quot;E&quot;"


def test_escape_leaves_plain_text_alone():
    assert escape_xml("How to Do Great Work") == "How to Do Great Work"


def test_ampersand_is_escaped_once():
    assert escape_xml("<&>") == "&lt;&amp;&gt;"


def test_known_broken_url_exact_match():
    canonical = KNOWN_BROKEN_URLS[0]

    assert normalize_url(canonical) == canonical


def test_known_broken_url_with_trailing_garbage():
    canonical = KNOWN_BROKEN_URLS[0]

    assert normalize_url(canonical + '"><font size=2>junk') == canonical


def test_other_urls_pass_through():
    assert normalize_url("http://paulgraham.com/greatwork.html") == "http://paulgraham.com/greatwork.html"


def test_custom_known_list():
    known = ("http://example.com/fixed.html",)

    assert normalize_url("http://example.com/fixed.html#x", known) == "http://example.com/fixed.html"
    assert normalize_url(KNOWN_BROKEN_URLS[0] + "x", known) == KNOWN_BROKEN_URLS[0] + "x"
