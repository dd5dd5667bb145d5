"""Shared control bytes for building escape sequences."""

# C0 escape and the two-character introducers built on it
ESC = "\x1b"
CSI = f"{ESC}["   # Control Sequence Introducer
OSC = f"{ESC}]"   # Operating System Command

# OSC terminators (interchangeable on most terminals)
BEL = "\x07"
ST = f"{ESC}\\"   # String Terminator

# CSI final letters for relative cursor movement
UP = "A"
DOWN = "B"
FORWARD = "C"
BACKWARD = "D"
