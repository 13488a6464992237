"""
render.py - HTML Tag Cloud Rendering

Emits the tag cloud document and its companion stylesheet. Word text and
the label are written verbatim unless escaping is requested, so markup in
the source text passes straight through to the output.
"""

import html

from tagcloud.fonts import MAX_FONT, MIN_FONT

STYLESHEET = "tagcloud.css"


def render_header(label, n, stylesheet=STYLESHEET):
    return (
        f"<html>\n<head>\n<title>Top {n} words in {label}</title>\n"
        f"<link href=\"{stylesheet}\" rel=\"stylesheet\" type=\"text/css\">\n"
        "</head>\n"
        f"<body>\n<h2>Top {n} words in {label}</h2>\n<hr>\n"
        "<div class=\"cdiv\">\n<p class=\"cbox\">\n"
    )


def render_word(word, count, font):
    return (
        f"<span style=\"cursor:default\" class=\"f{font}\" "
        f"title=\"count: {count}\">{word}</span>\n"
    )


def render_footer():
    return "</p>\n</div>\n</body>\n</html>\n"


def render_document(label, n, ordered, fonts, stylesheet=STYLESHEET, escape=False):
    """
    Build the full tag cloud document.

    Args:
        label: Source name shown in the title and heading
        n: Number of words in the cloud
        ordered: Alphabetically ordered (word, count) pairs
        fonts: Mapping word -> font level covering every word in ordered
        stylesheet: Stylesheet file referenced from the head
        escape: HTML-escape word text and label when True
    """
    if escape:
        label = html.escape(label)
    parts = [render_header(label, n, stylesheet)]
    for word, count in ordered:
        text = html.escape(word) if escape else word
        parts.append(render_word(text, count, fonts[word]))
    parts.append(render_footer())
    return "".join(parts)


def render_stylesheet(min_font=MIN_FONT, max_font=MAX_FONT):
    """Stylesheet with one .f<level> class per font level plus the cloud box."""
    lines = [
        "div.cdiv {",
        "  margin: 0 auto;",
        "  width: 600px;",
        "}",
        "p.cbox {",
        "  border: 1px solid #999;",
        "  padding: 10px;",
        "  text-align: center;",
        "  line-height: 1.4;",
        "}",
        "p.cbox span {",
        "  margin: 0 4px;",
        "}",
    ]
    for level in range(min_font, max_font + 1):
        lines.append(f".f{level} {{ font-size: {level}px; }}")
    return "\n".join(lines) + "\n"
