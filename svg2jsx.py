#!/usr/bin/env python3
"""
SVG to JSX icon converter.

This tool turns SVG markup copied from a design tool into a JSX snippet that
can be dropped straight into an icon component. It applies a fixed sequence
of regex rewrites; there is no XML parsing, so any text is accepted and the
result is always a best-effort string.

The conversion runs in two phases:

1. NORMALIZATION (every mode):
   - unwrap the root <svg>...</svg> element, keeping only its children
   - camelCase kebab-case attribute names (stroke-width -> strokeWidth)
   - wrap multiple root elements in a <>...</> fragment
   - trim every line and drop blank lines at the start and end

2. MODE REWRITE:
   - react:        fill="..." attributes are removed so the icon inherits color
   - react-native: tag names are capitalized (<path -> <Path, matching
                   react-native-svg components) and fill="..." becomes
                   fill={color} so the color is bound to a prop

Usage examples:
    python svg2jsx.py icon.svg
    python svg2jsx.py icon.svg -m react-native -o Icon.jsx
    pbpaste | python svg2jsx.py

License: MIT
"""

from __future__ import annotations

# =============================================================================
# IMPORTS
# =============================================================================

import argparse  # CLI argument parsing
import logging  # Structured logging to stderr
import re  # Regular expressions for every rewrite stage
import sys  # stdin/stdout and exit codes
from dataclasses import dataclass  # Immutable data structures
from enum import Enum  # Output mode enumeration
from pathlib import Path  # Input/output file handling
from typing import Callable, Final, TypeAlias

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

__all__ = [
    # Data types
    "OutputMode",  # Target flavour of JSX
    "RewriteStep",  # One named pipeline stage
    "ConversionResult",  # Output text plus derived flag
    # Exception classes
    "SVGToJSXError",  # Base exception for all errors
    "ValidationError",
    "InputError",
    # Pipeline stages
    "unwrap_svg",
    "camel_case_attributes",
    "count_elements",
    "wrap_fragment",
    "trim_lines",
    "trim_blank_lines",
    "strip_fill",
    "capitalize_tags",
    "bind_fill_color",
    # Pipeline entry points
    "pipeline_steps",
    "transform",
    "convert",
    "has_output",
    "looks_like_svg",
]

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

# Diagnostics go to stderr so converted JSX on stdout can be piped cleanly
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

# =============================================================================
# TYPE ALIASES
# =============================================================================

Markup: TypeAlias = str  # SVG or JSX source text
Rewrite: TypeAlias = Callable[[Markup], Markup]

# =============================================================================
# CONSTANTS
# =============================================================================

# Fragment markers used when the snippet has more than one root element
FRAGMENT_OPEN: Final[str] = "<>"
FRAGMENT_CLOSE: Final[str] = "</>"

# Replacement for fill attributes in react-native mode. The trailing space
# keeps the next attribute separated from the binding.
COLOR_PROP_BINDING: Final[str] = "fill={color} "

# Root <svg> element; non-greedy interior so each <svg>...</svg> span is
# unwrapped on its own
SVG_ROOT_PATTERN: Final[re.Pattern[str]] = re.compile(r"<svg[^>]*>([\s\S]*?)</svg>")

# Two lowercase runs joined by a hyphen (stroke-width, clip-rule, ...)
KEBAB_PAIR_PATTERN: Final[re.Pattern[str]] = re.compile(r"([a-z]+)-([a-z]+)")

# Start tag of a lowercase-named element, self-closing tags included
ELEMENT_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[a-z]+[^>]*>")

# Newline runs at the very start or very end of the text
OUTER_NEWLINES_PATTERN: Final[re.Pattern[str]] = re.compile(r"\A\n+|\n+\Z")

# fill="..." attribute with a double-quoted value
FILL_ATTRIBUTE_PATTERN: Final[re.Pattern[str]] = re.compile(r'fill="[^"]*"')

# First letter of a tag name right after "<" (closing tags start with "</")
TAG_NAME_START_PATTERN: Final[re.Pattern[str]] = re.compile(r"<([a-z])")

# Loose detection used only for a CLI warning
SVG_OPEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"<svg\b", re.IGNORECASE)
SVG_CLOSE_PATTERN: Final[re.Pattern[str]] = re.compile(r"</svg\s*>", re.IGNORECASE)


# =============================================================================
# EXCEPTION CLASSES
# =============================================================================


class SVGToJSXError(Exception):
    """
    Base exception for all errors raised by this module.

    The conversion pipeline itself never raises; these come from the
    caller-facing layer (mode parsing, file handling).
    """


class ValidationError(SVGToJSXError):
    """Raised when caller input is invalid, e.g. an unknown output mode name."""


class InputError(SVGToJSXError):
    """
    Raised when input cannot be read or output cannot be written.

    The underlying OSError or UnicodeDecodeError is chained as the cause.
    """


# =============================================================================
# DATA CLASSES
# =============================================================================


class OutputMode(Enum):
    """
    Target flavour of the generated JSX.

    REACT:        plain React/DOM SVG elements, fill attributes dropped
    REACT_NATIVE: react-native-svg components, fill bound to a color prop

    Usage:
        >>> OutputMode.from_name("react-native")
        <OutputMode.REACT_NATIVE: 'react-native'>
    """

    REACT = "react"
    REACT_NATIVE = "react-native"

    @classmethod
    def from_name(cls, name: str) -> OutputMode:
        """
        Look up a mode by its CLI spelling.

        Matching is case-insensitive and accepts "_" in place of "-", so
        "react_native", "React-Native" and "react-native" are all the same.

        Args:
            name: Mode name as typed by the user

        Returns:
            Matching OutputMode member

        Raises:
            ValidationError: If the name matches no mode
        """
        normalized = name.strip().lower().replace("_", "-")
        for mode in cls:
            if mode.value == normalized:
                return mode
        choices = ", ".join(mode.value for mode in cls)
        msg = f"Unknown output mode: {name!r}. Expected one of: {choices}"
        raise ValidationError(msg)


DEFAULT_MODE: Final[OutputMode] = OutputMode.REACT


@dataclass(frozen=True, slots=True)
class RewriteStep:
    """
    One named stage of the conversion pipeline.

    Attributes:
        name: Stage name, used in debug logging
        apply: Pure text -> text rewrite
    """

    name: str
    apply: Rewrite


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    Output of a conversion together with the mode that produced it.

    Attributes:
        text: Converted JSX snippet (possibly empty)
        mode: Output mode used for the conversion
    """

    text: Markup
    mode: OutputMode

    @property
    def has_output(self) -> bool:
        """True when the converted text has any non-whitespace content."""
        return has_output(self.text)


# =============================================================================
# NORMALIZATION STAGES
# =============================================================================


def unwrap_svg(text: Markup) -> Markup:
    """
    Replace each <svg ...>...</svg> span with its interior.

    The outer tag pair and all of its attributes (width, height, viewBox,
    xmlns, ...) are dropped because the icon component supplies its own
    root element.

    Args:
        text: Raw SVG markup

    Returns:
        Markup with the root element stripped; unchanged if no <svg> span
        is found

    Example:
        >>> unwrap_svg('<svg width="24"><path d="M0 0"/></svg>')
        '<path d="M0 0"/>'
    """
    return SVG_ROOT_PATTERN.sub(r"\1", text)


def _camel_case_pair(match: re.Match[str]) -> str:
    head, tail = match.group(1), match.group(2)
    return f"{head}{tail[0].upper()}{tail[1:]}"


def camel_case_attributes(text: Markup) -> Markup:
    """
    Convert kebab-case names to camelCase, as JSX expects for SVG attributes.

    This is a single left-to-right pass over non-overlapping matches of
    ``[a-z]+-[a-z]+``. Names with more than one hyphen are only partly
    converted: after "stroke-line" is consumed, "-cap" no longer has a
    lowercase run in front of it, so "stroke-line-cap" becomes
    "strokeLine-cap". The pass is not repeated.

    The pattern is applied to the whole text, attribute values included,
    so a value such as "current-color" is rewritten as well.

    Example:
        >>> camel_case_attributes('<path stroke-width="2" fill-rule="evenodd"/>')
        '<path strokeWidth="2" fillRule="evenodd"/>'
    """
    return KEBAB_PAIR_PATTERN.sub(_camel_case_pair, text)


def count_elements(text: Markup) -> int:
    """Count start tags of lowercase-named elements (naive, no nesting awareness)."""
    return len(ELEMENT_TAG_PATTERN.findall(text))


def wrap_fragment(text: Markup) -> Markup:
    """
    Wrap the snippet in a <>...</> fragment when it has several root elements.

    JSX expressions need a single root. The count is a plain tally of start
    tags, so nested children count too; a <g> holding two paths is wrapped
    even though it is already a single root. Comments and uppercase tags are
    not counted.

    Args:
        text: Markup with the <svg> root already removed

    Returns:
        The text wrapped in fragment markers if more than one start tag is
        found, otherwise the text unchanged
    """
    element_count = count_elements(text)
    logger.debug("Found %d element start tag(s)", element_count)
    if element_count > 1:
        return f"{FRAGMENT_OPEN}{text}{FRAGMENT_CLOSE}"
    return text


def trim_lines(text: Markup) -> Markup:
    """Strip leading and trailing whitespace from every line, keeping line breaks."""
    return "\n".join(line.strip() for line in text.split("\n"))


def trim_blank_lines(text: Markup) -> Markup:
    """
    Drop newline runs at the start and end of the text.

    Blank lines between elements are left alone.
    """
    return OUTER_NEWLINES_PATTERN.sub("", text)


# =============================================================================
# MODE-SPECIFIC STAGES
# =============================================================================


def strip_fill(text: Markup) -> Markup:
    """
    Remove every fill="..." attribute (react mode).

    Only the attribute itself is removed, so the space that separated it from
    its neighbours stays: '<path fill="#000" d="M0"/>' becomes
    '<path  d="M0"/>'.
    """
    return FILL_ATTRIBUTE_PATTERN.sub("", text)


def capitalize_tags(text: Markup) -> Markup:
    """
    Upper-case the first letter of each tag name that directly follows "<".

    react-native-svg exports its elements as capitalized components
    (Path, Circle, G, ...). Closing tags begin with "</" and are left as they
    are, as are fragment markers.

    Example:
        >>> capitalize_tags('<g><path/></g>')
        '<G><Path/></g>'
    """
    return TAG_NAME_START_PATTERN.sub(lambda m: "<" + m.group(1).upper(), text)


def bind_fill_color(text: Markup) -> Markup:
    """
    Replace every fill="..." attribute with fill={color} (react-native mode).

    The binding has no quotes, so running this again on its own output
    changes nothing.
    """
    return FILL_ATTRIBUTE_PATTERN.sub(COLOR_PROP_BINDING, text)


# =============================================================================
# PIPELINE
# =============================================================================

# Mode-independent normalization, in order. Unwrapping must come before the
# fragment decision or the <svg> tag would always be counted as a root.
NORMALIZATION_STEPS: Final[tuple[RewriteStep, ...]] = (
    RewriteStep("unwrap_svg", unwrap_svg),
    RewriteStep("camel_case_attributes", camel_case_attributes),
    RewriteStep("wrap_fragment", wrap_fragment),
    RewriteStep("trim_lines", trim_lines),
    RewriteStep("trim_blank_lines", trim_blank_lines),
)

MODE_STEPS: Final[dict[OutputMode, tuple[RewriteStep, ...]]] = {
    OutputMode.REACT: (RewriteStep("strip_fill", strip_fill),),
    OutputMode.REACT_NATIVE: (
        RewriteStep("capitalize_tags", capitalize_tags),
        RewriteStep("bind_fill_color", bind_fill_color),
    ),
}


def pipeline_steps(mode: OutputMode = DEFAULT_MODE) -> tuple[RewriteStep, ...]:
    """
    Return the ordered rewrite steps for an output mode.

    Normalization always runs first; the mode rewrite runs last so that
    trimming never touches the fill replacement text.
    """
    return NORMALIZATION_STEPS + MODE_STEPS[mode]


def transform(text: Markup, mode: OutputMode = DEFAULT_MODE) -> Markup:
    """
    Convert SVG markup to a JSX snippet.

    This never raises for string input: stages that find nothing to match
    leave the text unchanged, and empty or whitespace-only input comes out
    as an empty string. Calling it twice with the same arguments always
    gives the same result.

    Args:
        text: Raw SVG markup (any text is accepted)
        mode: Target output mode (default: react)

    Returns:
        The converted snippet, possibly empty

    Example:
        >>> transform('<svg><path fill="#fff" stroke-width="2"/></svg>')
        '<path  strokeWidth="2"/>'
        >>> transform('<svg><path fill="#fff"/></svg>', OutputMode.REACT_NATIVE)
        '<Path fill={color} />'
    """
    result = text
    for step in pipeline_steps(mode):
        result = step.apply(result)
        logger.debug("%s: %d chars", step.name, len(result))
    return result


def convert(text: Markup, mode: OutputMode = DEFAULT_MODE) -> ConversionResult:
    """Run transform() and return the output together with its mode."""
    return ConversionResult(text=transform(text, mode), mode=mode)


def has_output(text: Markup) -> bool:
    """True if the text is non-empty after stripping whitespace."""
    return len(text.strip()) > 0


def looks_like_svg(text: str) -> bool:
    """
    Heuristic check that the text contains an <svg>...</svg> element.

    Only used to warn on the command line; conversion goes ahead either way.
    """
    if not text:
        return False
    if SVG_OPEN_PATTERN.search(text) is None:
        return False
    return SVG_CLOSE_PATTERN.search(text) is not None


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================


def _read_input(source: str | None) -> str:
    """
    Read SVG text from a file path, or from stdin when source is None or "-".

    Files are decoded as UTF-8 with an optional byte order mark, which is
    dropped so it doesn't survive line trimming.

    Raises:
        InputError: If the file can't be read or isn't valid UTF-8
    """
    if source is None or source == "-":
        logger.debug("Reading SVG from stdin")
        try:
            return sys.stdin.read().removeprefix("\ufeff")
        except UnicodeDecodeError as e:
            msg = f"Cannot decode stdin: {e.reason} at byte {e.start}"
            raise InputError(msg) from e

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8-sig")
    except OSError as e:
        msg = f"Cannot read {path}: {e.strerror or e}"
        raise InputError(msg) from e
    except UnicodeDecodeError as e:
        msg = f"Cannot decode {path} as UTF-8: {e.reason} at byte {e.start}"
        raise InputError(msg) from e


def _write_output(text: str, destination: Path | None) -> None:
    """Write to stdout or a file; both end with a single trailing newline."""
    if destination is None:
        print(text)
        return

    try:
        destination.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        msg = f"Cannot write {destination}: {e.strerror or e}"
        raise InputError(msg) from e
    logger.info("JSX written to %s", destination)


def cli_main(argv: list[str] | None = None) -> int:
    """
    Command-line interface entry point.

    Reads SVG markup from a file or stdin, converts it, and writes the JSX
    snippet to stdout or a file.

    Exit Codes:
        0   - Success (including empty output, which only logs a warning)
        1   - Error (bad mode, unreadable input, unwritable output)
        130 - Interrupted (Ctrl+C)

    Args:
        argv: Argument list; defaults to sys.argv[1:]

    Returns:
        Integer exit code for sys.exit()
    """
    # =========================================================================
    # ARGUMENT PARSER SETUP
    # =========================================================================

    modes = ", ".join(mode.value for mode in OutputMode)
    parser = argparse.ArgumentParser(
        description="Convert SVG markup into JSX for an icon component.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s icon.svg
  %(prog)s icon.svg --mode react-native -o Icon.jsx
  pbpaste | %(prog)s -m react

Modes:
  react         - Unwrap <svg>, camelCase attributes, remove fill attributes
  react-native  - Same normalization, capitalize tags, bind fill={color}
""",
    )

    parser.add_argument(
        "input",
        nargs="?",
        metavar="INPUT",
        help="SVG file to convert (default: stdin, or '-')",
    )
    parser.add_argument(
        "-m",
        "--mode",
        default=DEFAULT_MODE.value,
        metavar="MODE",
        help=f"Output mode: {modes} (default: {DEFAULT_MODE.value})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    logger.setLevel(logging.DEBUG if args.verbose else logging.NOTSET)

    # =========================================================================
    # CONVERT
    # =========================================================================

    try:
        mode = OutputMode.from_name(args.mode)
        source = _read_input(args.input)

        if not looks_like_svg(source):
            logger.warning("Input does not contain an <svg> element; converting as-is")

        logger.debug("Converting %d chars in %s mode", len(source), mode.value)
        result = convert(source, mode)

        if not result.has_output:
            logger.warning("Conversion produced no output")

        _write_output(result.text, args.output)
        return 0

    except ValidationError as e:
        logger.error("Validation error: %s", e)
        return 1
    except InputError as e:
        logger.error("Input error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(cli_main())
