"""Symbols with a meaning for the turtle interpreter.

Every other symbol is carried through rewriting and ignored while building.
"""

F = "F"  # move forward, creating a branch
TURN_LEFT = "+"  # positive turn around Z
TURN_RIGHT = "-"
YAW_LEFT = "<"  # positive turn around Y
YAW_RIGHT = ">"
BRANCH_OPEN = "["
BRANCH_CLOSE = "]"
