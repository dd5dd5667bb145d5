"""Hide the cursor, print a line, erase it and print another."""

import sys
import time

import ansi_escapes as ansi


def main() -> None:
    sys.stdout.write(ansi.CURSOR_HIDE)
    print("Hello, World!")
    time.sleep(1)

    # The print above left the cursor on a fresh line, so two lines go
    sys.stdout.write(ansi.erase_lines(2))
    print("Hello, Terminal!")
    sys.stdout.write(ansi.CURSOR_SHOW)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
