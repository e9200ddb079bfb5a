"""Terminal front end for the k-queens search.

    kqueens                      interactive command loop
    kqueens one [n] [k]          print one solution
    kqueens all [n] [k] [limit]  print every solution up to the limit
"""

import sys
from typing import List, Optional

from pydantic import ValidationError

from kqueens.config import CONFIG
from kqueens.core.board import render_placement
from kqueens.log import setup_logging
from kqueens.main import NO_SOLUTION_TEXT, Session

USAGE = "Usage: kqueens [one|all] [n] [k] [limit]"

HELP = """Commands:
  n <int>      board size
  k <int>      number of queens
  limit <int>  cap for 'all'
  one          find one solution
  all          find all solutions (limited)
  next, prev   page through results
  show         draw the current solution
  status       show parameters and status
  place <r> <c>  put a queen on your own board
  undo         take back your last queen
  clear        empty your board
  edit         copy the current solution onto your board
  board        draw your board
  check        check your board against k
  quit         leave"""


def _print_status(session: Session):
    p = session.params
    print(f"n={p.n} k={p.k} limit={p.limit}")
    print(f"Status: {session.status}")


def _print_check(info: dict):
    print(f"{info['label']} ({info['size']} queens)")
    for (r1, c1), (r2, c2), reason in info["conflicts"]:
        print(f"  ({r1}, {c1}) and ({r2}, {c2}) share a {reason}")


def _print_current(session: Session):
    if len(session.solutions) > 1:
        print(session.page_label())
    print(session.render_current())


def run_once(args: List[str]) -> int:
    mode = args[0].lower()
    if mode not in ("one", "all") or len(args) > (3 if mode == "one" else 4):
        print(USAGE)
        raise SystemExit(2)
    fields = ["n", "k", "limit"][:len(args) - 1]
    try:
        session = Session(**dict(zip(fields, args[1:])))
    except ValidationError as e:
        print(f"Invalid parameters: {e}")
        print(USAGE)
        raise SystemExit(2)

    sols = session.find_one() if mode == "one" else session.find_all()
    _print_status(session)
    for i, sol in enumerate(sols, start=1):
        if len(sols) > 1:
            print(f"\n{i} / {len(sols)}")
        print(render_placement(sol, session.params.n))
    return 0


def run_interactive(session: Optional[Session] = None) -> int:
    session = session or Session()
    print(CONFIG.ui.app_name)
    print("Enter board size (n) and number of queens (k). Type 'help' for commands.")
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        cmd, *rest = line.split()
        cmd = cmd.lower()

        if cmd == "quit":
            break
        elif cmd in ("n", "k", "limit"):
            if len(rest) != 1:
                print(f"Usage: {cmd} <int>")
                continue
            try:
                session.set_params(**{cmd: rest[0]})
            except ValidationError as e:
                print(f"Invalid value for {cmd}: {rest[0]} ({e.error_count()} error)")
                continue
            _print_status(session)
        elif cmd == "one":
            session.find_one()
            _print_status(session)
            _print_current(session)
        elif cmd == "all":
            session.find_all()
            _print_status(session)
            _print_current(session)
        elif cmd == "next":
            session.next()
            _print_current(session)
        elif cmd == "prev":
            session.prev()
            _print_current(session)
        elif cmd == "show":
            _print_current(session)
        elif cmd == "status":
            _print_status(session)
        elif cmd == "place":
            try:
                row, col = (int(x) for x in rest)
            except ValueError:
                print("Usage: place <row> <col>")
                continue
            if session.place(row, col):
                session.board.print_board()
            else:
                print(f"Cannot place a queen on ({row}, {col})")
        elif cmd == "undo":
            session.undo()
            session.board.print_board()
        elif cmd == "clear":
            session.clear_board()
            session.board.print_board()
        elif cmd == "edit":
            if session.edit_current():
                session.board.print_board()
            else:
                print(NO_SOLUTION_TEXT)
        elif cmd == "board":
            session.board.print_board()
        elif cmd == "check":
            _print_check(session.check_board())
        elif cmd == "help":
            print(HELP)
        else:
            print(f"Unknown command: {cmd}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    setup_logging()
    if args:
        return run_once(args)
    return run_interactive()


if __name__ == "__main__":
    sys.exit(main())
