"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator. Handles configuration
loading, command-line overrides, prompting for anything still missing,
and running the pipeline once.

Usage:
    python launch.py                              # Use config.ini, prompt for the rest
    python launch.py -i book.txt -n 50 -o cloud.html
    python launch.py --config_file path           # Use custom config file
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from tagcloud import TagCloud
from tagcloud.errors import InvalidArgument, TagCloudError


def _prompt(ask, name, prompt):
    try:
        return ask(prompt).strip()
    except EOFError:
        raise InvalidArgument(name, "no value given (end of input)")


def prompt_missing(config, ask=input):
    """
    Ask on stdin for the input path, N and output path when they are not
    configured, in that order.

    Raises:
        InvalidArgument: If stdin ends before a value is given, or N is not
            an integer
    """
    if not config.input_file:
        config.input_file = _prompt(
            ask, "input file", "Input the path or name for the input file: ")
    if config.words is None:
        raw = _prompt(
            ask, "N",
            "Input N>0 as the number of words to be generated in the tag cloud: ")
        try:
            config.words = int(raw)
        except ValueError:
            raise InvalidArgument("N", f"expected an integer, got {raw!r}")
    if not config.output_file:
        config.output_file = _prompt(
            ask, "output file", "Input the path or name for the output file: ")
    config.validate()


def main(config_file, overrides=None, ask=input):
    """
    Load configuration, apply overrides and generate one tag cloud.

    Args:
        config_file: Path to configuration file (default: config.ini)
        overrides: Dict of Config attribute -> value from the command line
        ask: Prompt function for values still missing

    Returns:
        The rendered document
    """
    # Load configuration; interpolation off so % can appear in SEPARATORS
    cparser = ConfigParser(interpolation=None)
    cparser.read(config_file)
    config = Config(cparser)

    for key, value in (overrides or {}).items():
        if value is not None:
            setattr(config, key, value)

    prompt_missing(config, ask)
    return TagCloud(config).run()


def cli(argv=None):
    parser = ArgumentParser(description="Generate an HTML tag cloud from a text file.")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("-i", "--input", dest="input_file", type=str,
                        help="Input text or HTML file")
    parser.add_argument("-n", "--words", type=int,
                        help="Number of words in the tag cloud (N > 0)")
    parser.add_argument("-o", "--output", dest="output_file", type=str,
                        help="Output HTML file")
    parser.add_argument("--label", type=str,
                        help="Label shown in the title (default: input path)")
    parser.add_argument("--format", dest="input_format", choices=["auto", "text", "html"],
                        help="Input format (default: by file suffix)")
    parser.add_argument("--stylesheet", action="store_true", default=None,
                        dest="write_stylesheet",
                        help="Also write the companion stylesheet")
    parser.add_argument("--no-stop-words", action="store_true", default=None,
                        dest="exclude_stop_words",
                        help="Leave common English stop words out of the cloud")
    parser.add_argument("--escape", action="store_true", default=None,
                        dest="escape_html",
                        help="HTML-escape words in the output")
    args = vars(parser.parse_args(argv))
    config_file = args.pop("config_file")

    logger = get_logger("LAUNCH")
    try:
        main(config_file, args)
    except TagCloudError as e:
        logger.error(str(e))
        return 1
    print("Process completed.")
    return 0


if __name__ == "__main__":
    sys.exit(cli())
