"""drills — introductory console exercises.

Three small programs, each a single pass of prompt, compute and print:
a four-function calculator, a falling-ball height table, and a decimal to
binary printer that only uses comparison and subtraction.

Usage:
    python -m drills list          # Show exercises
    python -m drills calculator    # Two numbers and an operator
    python -m drills gravity       # Ball dropped from a tower
    python -m drills dec2bin       # 0..255 as "#### ####"
    python -m drills run gravity   # Run any exercise by name
"""
