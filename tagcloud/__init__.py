"""
tagcloud/__init__.py - Tag Cloud Pipeline Coordinator

Runs one document through the whole pipeline:
- Read the source text (reader.py)
- Count words case-insensitively
- Select the N most frequent words and order them alphabetically
- Scale counts to font levels and render the HTML document
- Write the document (and optionally its stylesheet) atomically

Key role: the single linear pass that ties the pipeline stages together
"""

import os

import reader as sources
import utils.output as output
from utils import get_logger
from tagcloud.errors import SourceEmpty
from tagcloud.fonts import scale_fonts
from tagcloud.frequency import compute_word_frequencies, remove_stop_words
from tagcloud.ranking import order_alphabetically, select_top
from tagcloud.render import render_document, render_stylesheet


class TagCloud(object):
    """
    Builds a tag cloud for the document named in the configuration.

    Each call to build() or run() is an independent pass; nothing computed
    for one document is kept on the instance.
    """

    def __init__(self, config, reader=None, writer=None):
        """
        Initialize the coordinator.

        Args:
            config: Configuration object (input, N, font range, output)
            reader: Callable (path, fmt) -> text; defaults to reader.read_source
            writer: Callable (path, content); defaults to
                utils.output.write_document
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD")
        self.reader = reader or sources.read_source
        self.writer = writer or output.write_document

    def count_words(self, text, label):
        """
        Build the frequency table for text.

        Raises:
            SourceEmpty: If text holds no words (after stop-word removal,
                when enabled)
        """
        frequencies = compute_word_frequencies(text, self.config.separators)
        if self.config.exclude_stop_words:
            frequencies = remove_stop_words(frequencies)
        if not frequencies:
            raise SourceEmpty(label)
        self.logger.info(
            f"Counted {len(frequencies)} distinct words in {len(text)} "
            f"characters of {label}.")
        return frequencies

    def build(self, text, label, n):
        """Run the pipeline on text and return the rendered document."""
        frequencies = self.count_words(text, label)
        selection = select_top(frequencies, n)
        fonts = scale_fonts(
            selection,
            min_font=self.config.min_font,
            max_font=self.config.max_font,
            default_font=self.config.default_font)
        ordered = order_alphabetically(selection)
        self.logger.debug(f"Selected {n} words: {[w for w, _ in ordered]}")
        return render_document(
            label, n, ordered, fonts,
            stylesheet=self.config.stylesheet,
            escape=self.config.escape_html)

    def run(self):
        """
        Read the configured source, build the cloud and write it out.

        Returns:
            The rendered document
        """
        config = self.config
        label = config.label or config.input_file
        text = self.reader(config.input_file, config.input_format)
        document = self.build(text, label, config.words)

        # Stylesheet before document; a failed stylesheet write leaves the
        # existing document untouched
        if config.write_stylesheet:
            directory = os.path.dirname(os.path.abspath(config.output_file))
            self.writer(
                os.path.join(directory, config.stylesheet),
                render_stylesheet(config.min_font, config.max_font))
        self.writer(config.output_file, document)

        self.logger.info(
            f"Tag cloud of {config.words} words from {label} written to "
            f"{config.output_file}.")
        return document
