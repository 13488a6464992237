from tagcloud.errors import InvalidArgument
from tagcloud.fonts import DEFAULT_FONT, MAX_FONT, MIN_FONT
from tagcloud.tokenizer import SEPARATORS, WHITESPACE

INPUT_FORMATS = ("auto", "text", "html")


def _int_option(cparser, section, option, fallback):
    raw = cparser.get(section, option, fallback="").strip()
    if not raw:
        return fallback
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(option, f"expected an integer, got {raw!r}")


def _bool_option(cparser, section, option):
    try:
        return cparser.getboolean(section, option, fallback=False)
    except ValueError:
        raise InvalidArgument(option, "expected a boolean (true/false)")


class Config(object):
    """
    Typed view over the INI configuration.

    Every section is optional; missing options fall back to the defaults of
    the reference tag cloud (fonts 11..48, tagcloud.css, no escaping).
    Empty FILE/WORDS options stay None so the caller can prompt for them.
    """

    def __init__(self, cparser):
        self.input_file = cparser.get("INPUT", "FILE", fallback="").strip() or None
        self.input_format = cparser.get("INPUT", "FORMAT", fallback="auto").strip().lower()
        self.label = cparser.get("INPUT", "LABEL", fallback="").strip() or None

        self.words = _int_option(cparser, "CLOUD", "WORDS", None)
        self.min_font = _int_option(cparser, "CLOUD", "MIN_FONT", MIN_FONT)
        self.max_font = _int_option(cparser, "CLOUD", "MAX_FONT", MAX_FONT)
        self.default_font = _int_option(cparser, "CLOUD", "DEFAULT_FONT", DEFAULT_FONT)
        extra = cparser.get("CLOUD", "SEPARATORS", fallback="").strip()
        self.separators = frozenset(WHITESPACE + extra) if extra else SEPARATORS
        self.exclude_stop_words = _bool_option(cparser, "CLOUD", "EXCLUDE_STOP_WORDS")

        self.output_file = cparser.get("OUTPUT", "FILE", fallback="").strip() or None
        self.stylesheet = cparser.get("OUTPUT", "STYLESHEET", fallback="").strip() or "tagcloud.css"
        self.write_stylesheet = _bool_option(cparser, "OUTPUT", "WRITE_STYLESHEET")
        self.escape_html = _bool_option(cparser, "OUTPUT", "ESCAPE_HTML")

        self.validate()

    def validate(self):
        """Check cross-option constraints; called again after CLI overrides."""
        if self.input_format not in INPUT_FORMATS:
            raise InvalidArgument(
                "FORMAT", f"must be one of {', '.join(INPUT_FORMATS)}")
        if self.min_font > self.max_font:
            raise InvalidArgument(
                "MIN_FONT", f"{self.min_font} is larger than MAX_FONT {self.max_font}")
        if not self.min_font <= self.default_font <= self.max_font:
            raise InvalidArgument(
                "DEFAULT_FONT",
                f"{self.default_font} is outside [{self.min_font}, {self.max_font}]")
