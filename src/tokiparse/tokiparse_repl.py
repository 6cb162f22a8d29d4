"""
Interactive line-by-line driver for the tokiparse parser.

Every line is tokenized, parsed and rendered independently; an error on one
line is printed and the loop moves on to the next.

Commands:
    exit, quit         Leave the session (EOF and Ctrl-C do the same).
    # ...              Comment, ignored.
    verbose-mode       Toggle printing of the classified words before each result.
    :target NAME       Switch output to "canonical", "tree" or "json".
    :aliases           List the configured spelling aliases.
    :alias ALIAS=WORD  Add a spelling alias for this session.
"""

from tokiparse.tokiparse_aliases import AliasMapper, MappingError
from tokiparse.tokiparse_errors import ParseError
from tokiparse.tokiparse_lexer import tokenize
from tokiparse.tokiparse_parser import parse_sentence
from tokiparse.tokiparse_render import TARGETS, render_sentence


class ReplSession:
    """Mutable settings of one REPL session.

    Without explicit aliases the session uses the defaults plus the file named
    by `TOKIPARSE_ALIASES`, if set.
    """

    def __init__(
        self,
        target: str = "canonical",
        aliases: AliasMapper | None = None,
        verbose: bool = False,
    ) -> None:
        self.target = target
        self.aliases = aliases if aliases is not None else AliasMapper.from_env()
        self.verbose = verbose


def handle_command(src: str, session: ReplSession) -> bool:
    """Executes a `:` command. Returns False when `src` is not a command."""
    if not src.startswith(":"):
        return False
    name, _, arg = src[1:].partition(" ")
    name, arg = name.lower(), arg.strip()

    if name == "target":
        if arg.lower() not in TARGETS:
            choices = ", ".join(TARGETS)
            print(f"[error] >>> Unknown target: {arg!r} (choose from {choices})")
        else:
            session.target = arg.lower()
            print(f"[mode] >>> Target: {session.target}")
    elif name == "aliases":
        print(session.aliases.report() or "[aliases] >>> none")
    elif name == "alias":
        alias, sep, word = arg.partition("=")
        if not sep:
            print("[error] >>> Usage: :alias ALIAS=WORD")
            return True
        try:
            session.aliases.configure({alias.strip(): word.strip()})
            print(f"[ok] >>> {alias.strip()} → {word.strip()}")
        except MappingError as e:
            print(f"[error] >>> {e}")
            for conflict in e.conflicts:
                print(" -", conflict)
    else:
        print(f"[error] >>> Unknown command: :{name}")
    return True


def process_line(line: str, session: ReplSession) -> str:
    """Parses and renders one line, returning the text to print.

    Parse errors are returned as their description instead of being raised.
    """
    try:
        words = tokenize(line, session.aliases)
        sentence = parse_sentence(words)
    except ParseError as e:
        return f"[error] >>> {e}"
    rendered = render_sentence(sentence, session.target)
    if session.verbose:
        return f"[words] >>> {' '.join(str(w) for w in words)}\n{rendered}"
    return rendered


def start_repl(
    target: str = "canonical",
    aliases: AliasMapper | None = None,
    verbose: bool = False,
) -> None:
    session = ReplSession(target, aliases, verbose)
    print(f"tokiparse REPL [target={session.target}]. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            line = input(">>> ")
        except (KeyboardInterrupt, EOFError):
            print("\nExiting tokiparse REPL.")
            break

        src = line.strip()
        if src in ("exit", "quit"):
            print("Exiting tokiparse REPL.")
            return
        # Blank lines are skipped; `parse_toki_pona("")` itself raises EmptySubject.
        if not src or src.startswith("#"):
            continue
        if src.lower() == "verbose-mode":
            session.verbose = not session.verbose
            print(f"[mode] >>> Verbose mode {'ON' if session.verbose else 'OFF'}")
            continue
        if handle_command(src, session):
            continue

        print(process_line(src, session))


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
