"""
tokiparse CLI Entrypoint.

This module provides the command-line interface for parsing toki pona text.
It supports batch parsing of files or strings and an interactive REPL.

Features:
    - Read sentences from `.tp`/`.txt` files (one per line) or inline strings.
    - Tokenize, parse and render each line in the selected target format.
    - Output to console or file.
    - Load spelling aliases from a JSON file or the `TOKIPARSE_ALIASES` variable.
    - Launch an interactive REPL.

Example usage:
    tokiparse sentences.tp
    tokiparse -s "jan pona li moku" -t tree
    tokiparse sentences.tp -t json -o trees.jsonl
    tokiparse --repl --aliases aliases.json

Functions:
    run_tokiparse(source: str, is_string: bool = False, target: str = "canonical",
                  out: Optional[str] = None, pretty: bool = False,
                  aliases: Optional[AliasMapper] = None) -> int:
        Executes the full pipeline (tokenize → parse → render → output) and
        returns the number of lines that failed to parse.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or batch).
"""

import argparse
import logging
import sys

from tokiparse.tokiparse_aliases import AliasMapper, MappingError
from tokiparse.tokiparse_errors import ParseError
from tokiparse.tokiparse_logging import setup_logging
from tokiparse.tokiparse_parser import parse_toki_pona
from tokiparse.tokiparse_render import TARGETS, Renderer

SOURCE_SUFFIXES = (".tp", ".txt")

logger = logging.getLogger(__name__)


def run_tokiparse(
    source: str,
    is_string: bool = False,
    target: str = "canonical",
    out: str | None = None,
    pretty: bool = False,
    aliases: AliasMapper | None = None,
) -> int:
    """
    Run the tokiparse pipeline over every non-blank line of the source.

    Args:
        source (str): Raw text or path to a `.tp`/`.txt` file.
        is_string (bool): If True, treats `source` as raw text instead of a file path.
        target (str): Render target ("canonical", "tree" or "json"). Defaults to "canonical".
        out (str | None): Optional path to write the renderings to. If None, prints to stdout.
        pretty (bool): If True, prints a banner above the output.
        aliases (AliasMapper | None): Spelling aliases used during tokenizing.

    Returns:
        int: The number of lines that failed to parse.

    Raises:
        ValueError: If `is_string` is False and the source has an unsupported suffix,
            or if the target is unknown.

    Side Effects:
        - Prints renderings to stdout and parse errors to stderr.
        - May write renderings to a file.
    """
    if not is_string and not source.endswith(SOURCE_SUFFIXES):
        raise ValueError("Only .tp and .txt files are supported.")
    renderer = Renderer(target)

    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Parse every line independently
    sentences = []
    failures = 0
    for number, line in enumerate(source.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            sentences.append(parse_toki_pona(line, aliases))
        except ParseError as e:
            failures += 1
            logger.debug("line %d failed: %r", number, line)
            print(f"[error] line {number}: {e}", file=sys.stderr)

    # 3. Render
    output = renderer.render(sentences)

    # 4. Output result
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(output + "\n" if output else "")
        if pretty:
            print(f"(wrote {len(sentences)} sentence(s) to {out})")
    elif pretty:
        banner = "=" * 20
        print(f"{banner}\nParsed ({renderer.target})\n{banner}\n{output}\n{banner}")
    elif output:
        print(output)

    return failures


def main() -> None:
    """
    Entry point for the tokiparse CLI.

    Parses command-line arguments and dispatches to the appropriate mode:
    - Launches the REPL if no source is given or `--repl` is specified, after
      logging and aliases are set up.
    - Otherwise, parses the given file or string and renders every line.

    Supported flags:
        - `-s`, `--string`: Interpret source as raw text instead of a file path.
        - `-t`, `--target`: Render target ('canonical', 'tree' or 'json').
        - `-o`, `--out`: Write renderings to a file.
        - `-p`, `--pretty`: Show a banner above the output.
        - `--repl`: Launch the interactive REPL.
        - `--aliases`: JSON file with spelling aliases.
        - `--debug`: Enable debug logging.
        - `--log-file`: Also append log records to this file.

    Exits with status 1 when any line fails to parse, 2 on a bad alias file.
    """
    parser = argparse.ArgumentParser(prog="tokiparse")
    parser.add_argument("source", nargs="?", help="Filename or raw text (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal text"
    )
    parser.add_argument(
        "-t",
        "--target",
        choices=tuple(TARGETS),
        default="canonical",
        help="Render target (default: canonical)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show output with banners"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of batch parsing",
    )
    parser.add_argument(
        "--aliases",
        metavar="JSON",
        help="Spelling alias file (default: $TOKIPARSE_ALIASES)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", metavar="PATH", help="Append logs to this file")

    args = parser.parse_args()
    setup_logging(log_file=args.log_file, debug=args.debug)

    try:
        aliases = AliasMapper.from_env()
        if args.aliases:
            aliases.load_from_json(args.aliases)
    except MappingError as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        for conflict in e.conflicts:
            print(" -", conflict, file=sys.stderr)
        sys.exit(2)

    if args.repl or args.source is None:
        from tokiparse.tokiparse_repl import start_repl

        start_repl(target=args.target, aliases=aliases)
        return

    failures = run_tokiparse(
        source=args.source,
        is_string=args.string,
        target=args.target,
        out=args.out,
        pretty=args.pretty,
        aliases=aliases,
    )
    if failures:
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
